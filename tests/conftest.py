from __future__ import annotations

"""
conftest.py: shared fixtures for the entire test suite.

Isolation strategy
──────────────────
Settings are read from CASUAL_* environment variables and an optional .env
file. Every test starts with those variables removed and the get_settings()
cache cleared, so a developer's shell configuration never changes what the
prompt loop writes.

Tests that need explicit settings build them with `make_settings`, which
passes `_env_file=None` so pydantic-settings never reads a .env from disk.
"""

import os
from typing import Any, Iterator

import pytest

from casual_prompt.config import Settings, get_settings
from casual_prompt.sources import ScriptedLineSource


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("CASUAL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# make_settings: the single correct way to build Settings in tests.
# ---------------------------------------------------------------------------

def make_settings(**kwargs: Any) -> Settings:
    """Factory for Settings instances that ignores any .env on disk."""
    return Settings(_env_file=None, **kwargs)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


# ---------------------------------------------------------------------------
# Scripted input
# ---------------------------------------------------------------------------

def scripted(*lines: str) -> ScriptedLineSource:
    return ScriptedLineSource(lines)


@pytest.fixture
def empty_source() -> ScriptedLineSource:
    """A source that is already at end-of-input."""
    return ScriptedLineSource([])
