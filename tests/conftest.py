"""Shared pytest fixtures for rulekit tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from rulekit.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test with code-default settings.

    Strips ``RULEKIT_*`` env vars and moves CWD into a temp directory so
    no stray rulekit.toml is discovered. Cached settings are dropped
    before and after the test.
    """
    for name in list(os.environ):
        if name.startswith("RULEKIT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
