"""Line-based block parsing: headings, paragraphs, and lists"""

from manuscript.core.models import Heading, ListBlock, Paragraph, ParsedManuscript
from manuscript.core.utils.text import coerce_text


HEADING_PREFIXES: tuple[tuple[str, int], ...] = (('### ', 3), ('## ', 2))
LIST_PREFIX = '- '
H1_PREFIXES = ('# ', '＃ ')
BOM = '\ufeff'


def _leading_h1_index(lines: list[str]) -> int | None:
    """Index of the first non-blank line if it is an H1, else None."""
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped:
            continue
        return i if stripped.startswith(H1_PREFIXES) else None
    return None


def parse_manuscript(manuscript: str, skip_leading_h1: bool = False) -> ParsedManuscript:
    """Split a manuscript into ordered blocks and a flat heading list.

    Heading ids are 'h{level}-{lineIndex}' using the raw source line index, so
    they are only stable within one parse call.
    """
    src = coerce_text(manuscript)
    if src.startswith(BOM):
        src = src[1:]
    lines = src.replace('\r\n', '\n').split('\n')
    skip = _leading_h1_index(lines) if skip_leading_h1 else None

    blocks = []
    headings: list[Heading] = []
    paragraph: list[str] = []
    items: list[str] = []

    def flush_paragraph():
        if paragraph:
            blocks.append(Paragraph(text=' '.join(paragraph)))
            paragraph.clear()

    def flush_list():
        if items:
            blocks.append(ListBlock(items=list(items)))
            items.clear()

    for index, raw in enumerate(lines):
        if index == skip:
            continue
        line = raw.strip()

        if not line:
            flush_paragraph()
            flush_list()
            continue

        level = next((lvl for prefix, lvl in HEADING_PREFIXES if line.startswith(prefix)), None)
        if level is not None:
            flush_paragraph()
            flush_list()
            heading = Heading(id=f"h{level}-{index}", text=line[level + 1:].strip(), level=level)
            blocks.append(heading)
            headings.append(heading)
            continue

        if line.startswith(LIST_PREFIX):
            flush_paragraph()
            items.append(line[len(LIST_PREFIX):].strip())
            continue

        flush_list()
        paragraph.append(line)

    flush_paragraph()
    flush_list()
    return ParsedManuscript(blocks=blocks, headings=headings)
