"""Input coercion and asterisk stripping shared by the parsers"""

import re


ASTERISK_RE = re.compile(r'[*＊]')


def coerce_text(value) -> str:
    """Return value as str; None becomes ''. Any other non-str raises TypeError."""
    if value is None:
        return ''
    if not isinstance(value, str):
        raise TypeError(f"expected str or None, got {type(value).__name__}")
    return value


def strip_asterisks(text: str) -> str:
    """Remove visible '*' and '＊' characters."""
    return ASTERISK_RE.sub('', text)
