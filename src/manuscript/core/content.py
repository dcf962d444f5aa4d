"""Content snapshot loading and the service that owns the internal link index"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from manuscript.core.index.link_index import LinkIndexResolver


logger = logging.getLogger(__name__)

COLLECTIONS = ('columns', 'guides', 'cars', 'heritage')
SNAPSHOT_EXTENSIONS = ('.json', '.yaml', '.yml')


class ContentRecord(BaseModel):
    """One content item; only slug is required. Unknown fields are kept."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    slug:      str
    title:     Optional[str] = None
    title_ja:  Optional[str] = Field(default=None, alias="titleJa")
    name:      Optional[str] = None
    maker:     Optional[str] = None
    maker_key: Optional[str] = Field(default=None, alias="makerKey")
    body_type: Optional[str] = Field(default=None, alias="bodyType")
    segment:   Optional[str] = None


class ContentSnapshot(BaseModel):
    """All content collections at one point in time."""
    columns:  list[ContentRecord] = []
    guides:   list[ContentRecord] = []
    cars:     list[ContentRecord] = []
    heritage: list[ContentRecord] = []


def _find_collection_file(content_dir: Path, name: str) -> Path | None:
    for ext in SNAPSHOT_EXTENSIONS:
        p = content_dir / f"{name}{ext}"
        if p.is_file():
            return p
    return None


def _load_records(path: Path) -> list[ContentRecord]:
    """Parse a JSON/YAML file holding a list of content records."""
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid content file {path}: {e}") from e
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid content file {path}: expected a list, got {type(data).__name__}")
    try:
        return [ContentRecord.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid content file {path}: {e}") from e


def load_snapshot(content_dir: Path) -> ContentSnapshot:
    """Load columns/guides/cars/heritage from content_dir; missing files are empty."""
    content_dir = Path(content_dir)
    collections: dict[str, list[ContentRecord]] = {}
    for name in COLLECTIONS:
        path = _find_collection_file(content_dir, name)
        if path is None:
            logger.debug("No %s collection in %s", name, content_dir)
            continue
        collections[name] = _load_records(path)
        logger.info("Loaded %d %s from %s", len(collections[name]), name, path)
    return ContentSnapshot(**collections)


class ContentService:
    """Owns the content snapshot and the link index built from it."""

    def __init__(self, content_dir: Path, hub_titles: Optional[dict[str, str]] = None):
        self.content_dir = Path(content_dir)
        self.links = LinkIndexResolver(self.snapshot, hub_titles)

    def snapshot(self) -> ContentSnapshot:
        return load_snapshot(self.content_dir)

    def reload(self) -> None:
        """Drop the cached link index; the next lookup rebuilds it from disk."""
        self.links.invalidate()
