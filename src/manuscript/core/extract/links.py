"""Internal link extraction: strip first-party references from visible text"""

import re

from manuscript.core.extract.numbered import break_numbered_lines
from manuscript.core.href import normalize_internal_href
from manuscript.core.models import ExtractedText
from manuscript.core.utils.text import coerce_text


MD_LINK_RE = re.compile(r'\[([^\]]*)\]\(([^)]+)\)')
BARE_PATH_RE = re.compile(
    r'(^|[^A-Za-z0-9_])'
    r'(/?(?:guide|column|cars|heritage|news)/[a-z0-9][a-z0-9\-_/]*)'
    r'(?=\Z|[^A-Za-z0-9\-_/])',
    re.IGNORECASE,
)
ASCII_SPACES_RE = re.compile(r'[ \t]{2,}')
WIDE_SPACES_RE = re.compile(r'　{2,}')
BLANK_LINES_RE = re.compile(r'\n{3,}')


def _uniq(hrefs: list[str]) -> list[str]:
    """Deduplicate, keeping first-seen order and dropping blanks."""
    return list(dict.fromkeys(h.strip() for h in hrefs if h.strip()))


def _tidy(text: str) -> str:
    """Collapse the whitespace left behind by removed references."""
    text = ASCII_SPACES_RE.sub(' ', text)
    text = WIDE_SPACES_RE.sub('　', text)
    text = BLANK_LINES_RE.sub('\n\n', text)
    return text.strip()


def extract_internal_links(raw: str) -> ExtractedText:
    """Remove internal references from raw and return them alongside the cleaned text.

    Markdown links to internal paths keep their label; bare internal paths are
    deleted outright. External links and anything that fails normalization are
    left untouched for the inline tokenizer.
    """
    text = coerce_text(raw)
    hrefs: list[str] = []

    def _consume(m: re.Match) -> str:
        # group 2 is the href; group 1 is what stays visible (label or boundary char)
        normalized = normalize_internal_href(m.group(2))
        if normalized is None:
            return m.group(0)
        hrefs.append(normalized)
        return m.group(1)

    # a replaced label can itself close a new link, e.g. "[[L](/news/a)](/guide)"
    while True:
        replaced = MD_LINK_RE.sub(_consume, text)
        if replaced == text:
            break
        text = replaced
    text = BARE_PATH_RE.sub(_consume, text)
    text = break_numbered_lines(_tidy(text))
    return ExtractedText(text=text, internal_hrefs=_uniq(hrefs))
