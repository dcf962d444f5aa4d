"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from manuscript.config import Settings, load_config
from manuscript.core.content import ContentService
from manuscript.core.extract.inline import tokenize_inline
from manuscript.core.extract.links import extract_internal_links
from manuscript.core.extract.sections import build_quick_sections, extract_step_headings, pick_quick_cards
from manuscript.core.href import normalize_internal_href
from manuscript.core.pipeline import annotate_blocks, resolve_card, run_parse


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: bool = False) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level="DEBUG" if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def _service(settings: Settings) -> ContentService:
    content_dir = Path(settings.content_dir)
    if not content_dir.is_dir():
        _fail(f"Content directory not found: {content_dir}")
    return ContentService(content_dir, settings.hub_titles)


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Manuscript file or directory")],
    skip_h1: Annotated[Optional[bool], typer.Option("--skip-h1/--keep-h1", help="Drop a leading '# ' title line")] = None,
    annotate: Annotated[bool, typer.Option("--annotate", help="Extract internal links and tokenize each block")] = False,
    content: Annotated[Optional[str], typer.Option("--content-dir", help="Content snapshot directory")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Parse manuscripts into blocks, headings, steps, quick sections and quick cards."""
    settings = _settings({"skip_leading_h1": skip_h1, "content_dir": content}, verbose)
    if not Path(path).exists():
        _fail(f"Path not found: {path}")
    try:
        parsed = run_parse(path, settings.skip_leading_h1)
    except RuntimeError as e:
        _fail(str(e))

    links = _service(settings).links if annotate else None
    try:
        docs = []
        for src, doc in parsed:
            quick = build_quick_sections(doc.blocks, settings.max_quick_bullets, settings.max_quick_paragraphs)
            entry = {
                "path": str(src),
                "headings": [h.model_dump(mode="json") for h in doc.headings],
                "steps": [s.model_dump(mode="json") for s in extract_step_headings(doc.headings)],
                "quick_sections": [q.model_dump(mode="json") for q in quick],
                "quick_cards": [
                    c.model_dump(mode="json")
                    for c in pick_quick_cards(quick, settings.max_quick_cards, settings.max_card_bullets)
                ],
            }
            if links is not None:
                entry["blocks"] = [b.model_dump(mode="json") for b in annotate_blocks(doc, links)]
            else:
                entry["blocks"] = [b.model_dump(mode="json") for b in doc.blocks]
            docs.append(entry)
    except ValueError as e:
        _fail("Failed to load content", e)
    _echo_json(docs)


def extract_cmd(
    text: Annotated[Optional[str], typer.Argument(help="Text to scan")] = None,
    file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Read text from a file instead")] = None,
    ):
    """Strip internal links from text and list the extracted hrefs."""
    _settings()
    if file is not None:
        try:
            text = file.read_text(encoding='utf-8')
        except OSError as e:
            _fail(f"Cannot read {file}", e)
    _echo_json(extract_internal_links(text).model_dump(mode="json"))


def tokenize_cmd(
    text: Annotated[str, typer.Argument(help="Inline text span")],
    ):
    """Tokenize one span into text/bold/link/tooltip tokens."""
    _settings()
    _echo_json([t.model_dump(mode="json") for t in tokenize_inline(text)])


def index_cmd(
    content: Annotated[Optional[str], typer.Option("--content-dir", help="Content snapshot directory")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Dump the internal link index built from the content snapshot."""
    settings = _settings({"content_dir": content}, verbose)
    try:
        idx = _service(settings).links.resolve()
    except ValueError as e:
        _fail("Failed to load content", e)
    _echo_json({href: meta.model_dump(mode="json") for href, meta in sorted(idx.items())})


def lookup_cmd(
    href: Annotated[str, typer.Argument(help="Internal path, e.g. /guide/insurance or column/slug")],
    content: Annotated[Optional[str], typer.Option("--content-dir", help="Content snapshot directory")] = None,
    ):
    """Resolve one href to the card it would render as."""
    settings = _settings({"content_dir": content})
    normalized = normalize_internal_href(href)
    if normalized is None:
        _fail(f"Not an internal path: {href}")
    try:
        card = resolve_card(normalized, _service(settings).links)
    except ValueError as e:
        _fail("Failed to load content", e)
    _echo_json(card.model_dump(mode="json"))
