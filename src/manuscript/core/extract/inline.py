"""Cursor-based inline tokenizer for bold, links, and glossary tooltips"""

import re

from manuscript.core.models import BoldToken, InlineToken, LinkToken, TextToken, TooltipToken
from manuscript.core.utils.text import coerce_text, strip_asterisks


LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
BOLD_RE = re.compile(r'\*\*([^*]+)\*\*')

# Tie-break order when several markers start at the same index.
MARKERS: tuple[tuple[str, str], ...] = (
    ('link', '['),
    ('bold', '**'),
    ('tooltip', '{{'),
)


class _TokenBuffer:
    """Collects tokens, merging adjacent literal text and dropping stripped-empty text."""

    def __init__(self):
        self.tokens: list[InlineToken] = []
        self._text: list[str] = []

    def text(self, value: str) -> None:
        cleaned = strip_asterisks(value)
        if cleaned:
            self._text.append(cleaned)

    def token(self, tok: InlineToken) -> None:
        self._flush()
        self.tokens.append(tok)

    def _flush(self) -> None:
        if self._text:
            self.tokens.append(TextToken(value=''.join(self._text)))
            self._text = []

    def result(self) -> list[InlineToken]:
        self._flush()
        return self.tokens


def _next_marker(text: str, i: int) -> tuple[str, int] | None:
    """Return (kind, index) of the earliest marker at or after i; ties go to MARKERS order."""
    best = None
    for kind, marker in MARKERS:
        idx = text.find(marker, i)
        if idx >= 0 and (best is None or idx < best[1]):
            best = (kind, idx)
    return best


def _match_tooltip(text: str, start: int) -> tuple[TooltipToken, int] | None:
    """Match '{{term|tip}}' at start; return (token, end index) or None."""
    end = text.find('}}', start + 2)
    if end < 0:
        return None
    inside = text[start + 2:end]
    pipe = inside.find('|')
    if pipe < 0:
        pipe = inside.find('｜')
    if not 0 < pipe < len(inside) - 1:
        return None
    term, tip = inside[:pipe].strip(), inside[pipe + 1:].strip()
    if not term or not tip:
        return None
    return TooltipToken(term=term, tip=tip), end + 2


def tokenize_inline(span: str) -> list[InlineToken]:
    """Tokenize one block's text into Text/Bold/Link/Tooltip tokens.

    Malformed markers degrade to literal text; literal asterisks are always
    stripped from text tokens. Bold content is tokenized recursively into
    BoldToken.children.
    """
    text = coerce_text(span)
    out = _TokenBuffer()
    i = 0

    while i < len(text):
        nxt = _next_marker(text, i)
        if nxt is None:
            out.text(text[i:])
            break

        kind, idx = nxt
        if idx > i:
            out.text(text[i:idx])

        if kind == 'link':
            m = LINK_RE.match(text, idx)
            if m:
                out.token(LinkToken(label=m.group(1).strip(), href=m.group(2).strip()))
                i = m.end()
            else:
                out.text('[')
                i = idx + 1
        elif kind == 'bold':
            m = BOLD_RE.match(text, idx)
            if m:
                content = m.group(1)
                out.token(BoldToken(value=content, children=tokenize_inline(content)))
                i = m.end()
            else:
                out.text('**')
                i = idx + 2
        else:
            hit = _match_tooltip(text, idx)
            if hit:
                tooltip, i = hit
                out.token(tooltip)
            else:
                out.text('{{')
                i = idx + 2

    return out.result()


def plain_text(tokens: list[InlineToken]) -> str:
    """Concatenate the visible text of tokens (bold recursively, link label, tooltip term)."""
    parts = []
    for tok in tokens:
        if isinstance(tok, TextToken):
            parts.append(tok.value)
        elif isinstance(tok, BoldToken):
            parts.append(plain_text(tok.children))
        elif isinstance(tok, LinkToken):
            parts.append(tok.label)
        else:
            parts.append(tok.term)
    return ''.join(parts)
