"""Root test configuration: keep MANUSCRIPT_* settings out of the test session"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset MANUSCRIPT_* env vars so tests only see what they set themselves."""
    for name in list(os.environ):
        if name.startswith("MANUSCRIPT_"):
            monkeypatch.delenv(name)
