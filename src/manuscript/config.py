"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from manuscript.core.href import normalize_internal_href


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MANUSCRIPT_"


class Settings(BaseModel):
    app_name:             str  = "manuscript"
    content_dir:          str  = Field(default="content", description="Directory with columns/guides/cars/heritage snapshots")
    log_level:            str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    skip_leading_h1:      bool = Field(default=False, description="Drop a leading '# ' title line before parsing")
    max_quick_bullets:    int  = Field(default=6, ge=0, description="Max bullets per quick section")
    max_quick_paragraphs: int  = Field(default=2, ge=0, description="Max paragraphs per quick section")
    max_quick_cards:      int  = Field(default=3, ge=0, description="Max quick cards picked per manuscript")
    max_card_bullets:     int  = Field(default=4, ge=1, description="Max bullets shown on one quick card")
    hub_titles: dict[str, str] = Field(default_factory=dict, description="Extra hub pages: internal href -> card title")

    @field_validator("hub_titles")
    @classmethod
    def normalize_hub_hrefs(cls, value: dict[str, str]) -> dict[str, str]:
        hubs = {}
        for href, title in value.items():
            normalized = normalize_internal_href(href)
            if normalized is None:
                raise ValueError(f"hub_titles: not an internal path: {href!r}")
            if not title.strip():
                raise ValueError(f"hub_titles: empty title for {normalized}")
            hubs[normalized] = title.strip()
        return hubs


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MANUSCRIPT_<FIELD> env vars, then non-None CLI overrides.

    Mapping fields such as hub_titles come from config.yaml only.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding='utf-8')) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name, field in Settings.model_fields.items():
        if field.annotation is dict[str, str]:
            continue
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
