"""Composition of the parsers into renderer-ready documents"""

from pathlib import Path

from manuscript.core.extract.blocks import parse_manuscript
from manuscript.core.extract.inline import tokenize_inline
from manuscript.core.extract.links import extract_internal_links
from manuscript.core.href import fallback_title, infer_kind
from manuscript.core.index.link_index import LinkIndexResolver
from manuscript.core.models import (
    AnnotatedBlock,
    AnnotatedText,
    LinkCard,
    ListBlock,
    Paragraph,
    ParsedManuscript,
)


MD_EXTENSIONS = {'.md', '.mdx', '.txt'}


def resolve_card(href: str, links: LinkIndexResolver) -> LinkCard:
    """Card for one extracted href; unknown or untitled hrefs get a kind-derived label."""
    meta = links.lookup(href)
    if meta is not None and meta.title:
        return LinkCard(href=href, title=meta.title, kind=meta.kind)
    kind = meta.kind if meta is not None else infer_kind(href)
    return LinkCard(href=href, title=fallback_title(href), kind=kind)


def annotate_text(text: str, links: LinkIndexResolver) -> AnnotatedText:
    """Extract internal links from text, tokenize the remainder, and resolve cards."""
    extracted = extract_internal_links(text)
    return AnnotatedText(
        text=extracted.text,
        tokens=tokenize_inline(extracted.text),
        cards=[resolve_card(h, links) for h in extracted.internal_hrefs],
    )


def annotate_blocks(parsed: ParsedManuscript, links: LinkIndexResolver) -> list[AnnotatedBlock]:
    """Annotate each paragraph and list item; headings carry no spans."""
    annotated = []
    for block in parsed.blocks:
        if isinstance(block, Paragraph):
            spans = [annotate_text(block.text, links)]
        elif isinstance(block, ListBlock):
            spans = [annotate_text(item, links) for item in block.items]
        else:
            spans = []
        annotated.append(AnnotatedBlock(block=block, spans=spans))
    return annotated


def parse_file(path: Path, skip_leading_h1: bool = False) -> ParsedManuscript:
    """Read a UTF-8 manuscript file and parse it into blocks."""
    return parse_manuscript(Path(path).read_text(encoding='utf-8'), skip_leading_h1)


def run_parse(path: str, skip_leading_h1: bool = False) -> list[tuple[Path, ParsedManuscript]]:
    """Parse a file, or every manuscript file under a directory, in sorted order."""
    root = Path(path)
    if root.is_file():
        files = [root]
    else:
        files = sorted(p for p in root.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)
    results = []
    for p in files:
        try:
            results.append((p, parse_file(p, skip_leading_h1)))
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
    return results
