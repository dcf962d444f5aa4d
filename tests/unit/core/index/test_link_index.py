"""Unit tests for core/index/link_index.py"""

import threading

from manuscript.core.content import ContentRecord, ContentSnapshot
from manuscript.core.index.link_index import LinkIndexResolver, build_link_index, record_title
from manuscript.core.index.static import STATIC_INTERNAL_LINKS
from manuscript.core.models import InternalLinkMeta, LinkKind


def test_static_hubs_always_present():
    idx = build_link_index(ContentSnapshot())
    assert idx == STATIC_INTERNAL_LINKS
    assert idx["/guide/hub-shaken"] == InternalLinkMeta(title="車検HUB", kind=LinkKind.GUIDE)


def test_collection_items_indexed(snapshot):
    idx = build_link_index(snapshot)
    assert idx["/column/import-car-costs"] == InternalLinkMeta(title="輸入車の維持費", kind=LinkKind.COLUMN)
    assert idx["/guide/paperwork-basics"].title == "名義変更の基本"
    assert idx["/cars/bmw-m3"] == InternalLinkMeta(title="BMW M3", kind=LinkKind.CARS)
    assert idx["/cars/copen"].title == "copen"
    assert idx["/heritage/ae86"] == InternalLinkMeta(title="ae86", kind=LinkKind.HERITAGE)


def test_taxonomy_hubs_indexed(snapshot):
    idx = build_link_index(snapshot)
    assert idx["/cars/makers/bmw"].title == "BMWの車種一覧"
    assert idx["/cars/makers/daihatsu"].title == "ダイハツの車種一覧"
    assert idx["/cars/body-types/sedan"].title == "セダンの車種一覧"
    assert idx["/cars/segments/sports-sedan"].title == "スポーツセダンの車種一覧"
    assert all(idx[k].kind == LinkKind.CARS for k in idx if k.startswith("/cars/"))


def test_hub_titles_added_and_overridden(snapshot):
    """Configured hubs join the static ones; collection items keep their own titles."""
    idx = build_link_index(snapshot, {"/column/hub-tax": "税金HUB", "/guide/hub-shaken": "車検ガイド", "/cars/bmw-m3": "x"})
    assert idx["/column/hub-tax"] == InternalLinkMeta(title="税金HUB", kind=LinkKind.COLUMN)
    assert idx["/guide/hub-shaken"] == InternalLinkMeta(title="車検ガイド", kind=LinkKind.GUIDE)
    assert idx["/cars/bmw-m3"].title == "BMW M3"


def test_resolver_passes_hub_titles():
    resolver = LinkIndexResolver(ContentSnapshot(), hub_titles={"/news/hub": "ニュース"})
    assert resolver.lookup("/news/hub") == InternalLinkMeta(title="ニュース", kind=LinkKind.PAGE)


def test_record_title_priority():
    assert record_title(ContentRecord(slug="s", title="t", titleJa="ja", name="n")) == "ja"
    assert record_title(ContentRecord(slug="s", title=" ", name="n")) == "n"
    assert record_title(ContentRecord(slug="s")) == "s"


def test_resolve_builds_once():
    """The source is read on the first resolve only."""
    calls = []

    def source():
        calls.append(1)
        return ContentSnapshot()

    resolver = LinkIndexResolver(source)
    first = resolver.resolve()
    assert resolver.resolve() is first
    assert len(calls) == 1


def test_concurrent_first_resolve_builds_once():
    calls = []
    gate = threading.Event()

    def source():
        gate.wait(1)
        calls.append(1)
        return ContentSnapshot()

    resolver = LinkIndexResolver(source)
    threads = [threading.Thread(target=resolver.resolve) for _ in range(4)]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()
    assert len(calls) == 1


def test_invalidate_rebuilds():
    snapshots = [ContentSnapshot(), ContentSnapshot(guides=[ContentRecord(slug="new", title="新着")])]
    resolver = LinkIndexResolver(lambda: snapshots.pop(0))
    assert resolver.lookup("/guide/new") is None
    resolver.invalidate()
    assert resolver.lookup("/guide/new").title == "新着"



class _InvalidatingLock:
    """Lock stand-in that clears the cache on release, like an invalidate() racing in."""

    def __init__(self, resolver):
        self.resolver = resolver

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.resolver._cache = None
        return False


def test_resolve_survives_invalidate_after_build():
    """resolve() returns the map it built even if the cache is dropped right after."""
    resolver = LinkIndexResolver(ContentSnapshot())
    resolver._lock = _InvalidatingLock(resolver)
    idx = resolver.resolve()
    assert idx is not None
    assert "/guide" in idx
    assert resolver.lookup("/guide").title == "GUIDE"
