"""Internal href normalization and kind inference"""

import re
from typing import Optional

from manuscript.core.models import LinkKind


LEADING_PUNCT_RE = re.compile(r'^[\s　"\'“”「『【（(\[]+')
TRAILING_PUNCT_RE = re.compile(r'[\s　"\'“”」』】）)\].,!?！？。、]+$')
INTERNAL_PATH_RE = re.compile(r'^/(guide|column|cars|heritage|news)(/|$)')

FALLBACK_TITLES: dict[LinkKind, str] = {
    LinkKind.GUIDE:    "関連GUIDE",
    LinkKind.COLUMN:   "関連COLUMN",
    LinkKind.CARS:     "関連CARS",
    LinkKind.HERITAGE: "関連HERITAGE",
}
DEFAULT_FALLBACK_TITLE = "関連ページ"


def normalize_internal_href(raw: Optional[str]) -> Optional[str]:
    """Return the canonical internal path for raw, or None if it is not internal.

    Accepts both '/column/slug' and 'column/slug', tolerates wrapping quotes,
    brackets and trailing sentence punctuation. Never raises.
    """
    if not isinstance(raw, str):
        return None
    href = raw.strip()
    if not href:
        return None

    href = LEADING_PUNCT_RE.sub('', href)
    href = TRAILING_PUNCT_RE.sub('', href)

    if not href.startswith('/'):
        href = f"/{href}"
    href = re.sub(r'/{2,}', '/', href)
    if len(href) > 1:
        href = href.rstrip('/') or '/'

    if not INTERNAL_PATH_RE.match(href):
        return None
    return href


def infer_kind(href: str) -> LinkKind:
    """Derive a LinkKind from the first path segment of href."""
    h = href or ''
    if h.startswith('/guide'):
        return LinkKind.GUIDE
    if h.startswith('/column'):
        return LinkKind.COLUMN
    if h.startswith('/cars'):
        return LinkKind.CARS
    if h.startswith('/heritage'):
        return LinkKind.HERITAGE
    return LinkKind.PAGE


def fallback_title(href: str) -> str:
    """Generic card label for an href missing from the link index."""
    return FALLBACK_TITLES.get(infer_kind(href), DEFAULT_FALLBACK_TITLE)
