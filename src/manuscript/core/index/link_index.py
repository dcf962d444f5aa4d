"""Internal link index: maps every known internal path to a card title and kind"""

import logging
import threading
from typing import Callable, Optional, Union

from manuscript.core.href import infer_kind
from manuscript.core.index.static import STATIC_INTERNAL_LINKS
from manuscript.core.index.taxonomy import build_body_type_infos, build_maker_infos, build_segment_infos
from manuscript.core.models import InternalLinkMeta, LinkKind


logger = logging.getLogger(__name__)

# (snapshot attribute, path prefix, kind)
COLLECTION_ROUTES: tuple[tuple[str, str, LinkKind], ...] = (
    ('columns',  '/column',   LinkKind.COLUMN),
    ('guides',   '/guide',    LinkKind.GUIDE),
    ('cars',     '/cars',     LinkKind.CARS),
    ('heritage', '/heritage', LinkKind.HERITAGE),
)


def _first_non_empty(*candidates) -> str:
    for c in candidates:
        v = (c or '').strip() if isinstance(c, str) else ''
        if v:
            return v
    return ''


def record_title(record) -> str:
    """First non-empty of localized title, title, name, slug."""
    return _first_non_empty(record.title_ja, record.title, record.name, record.slug)


def build_link_index(snapshot, hub_titles: Optional[dict[str, str]] = None) -> dict[str, InternalLinkMeta]:
    """Build the path -> meta map from static hubs, collection items, and car taxonomies.

    hub_titles adds or retitles hub pages (href -> title); kinds come from the href.
    Collection and taxonomy entries still win over any hub with the same path.
    """
    idx: dict[str, InternalLinkMeta] = dict(STATIC_INTERNAL_LINKS)
    for href, title in (hub_titles or {}).items():
        idx[href] = InternalLinkMeta(title=title, kind=infer_kind(href))

    for attr, prefix, kind in COLLECTION_ROUTES:
        for record in getattr(snapshot, attr):
            idx[f"{prefix}/{record.slug}"] = InternalLinkMeta(title=record_title(record), kind=kind)

    cars = snapshot.cars
    for info in build_maker_infos(cars):
        idx[f"/cars/makers/{info.key}"] = InternalLinkMeta(title=f"{info.label}の車種一覧", kind=LinkKind.CARS)
    for info in build_body_type_infos(cars):
        idx[f"/cars/body-types/{info.key}"] = InternalLinkMeta(title=f"{info.label}の車種一覧", kind=LinkKind.CARS)
    for info in build_segment_infos(cars):
        idx[f"/cars/segments/{info.key}"] = InternalLinkMeta(title=f"{info.label}の車種一覧", kind=LinkKind.CARS)

    return idx


class LinkIndexResolver:
    """Lazily built, cached link index over a content source.

    source is a snapshot or a zero-argument callable returning one; hub_titles
    is passed to build_link_index. The first resolve() builds the map under a
    lock; later calls return the cached map.
    """

    def __init__(self, source: Union[Callable, object], hub_titles: Optional[dict[str, str]] = None):
        self._source = source
        self._hub_titles = dict(hub_titles or {})
        self._cache: dict[str, InternalLinkMeta] | None = None
        self._lock = threading.Lock()

    def _snapshot(self):
        return self._source() if callable(self._source) else self._source

    def resolve(self) -> dict[str, InternalLinkMeta]:
        cache = self._cache
        if cache is not None:
            return cache
        with self._lock:
            cache = self._cache
            if cache is None:
                cache = build_link_index(self._snapshot(), self._hub_titles)
                self._cache = cache
                logger.debug("Built internal link index with %d entries", len(cache))
        return cache

    def lookup(self, href: str) -> InternalLinkMeta | None:
        return self.resolve().get(href)

    def invalidate(self) -> None:
        with self._lock:
            self._cache = None
