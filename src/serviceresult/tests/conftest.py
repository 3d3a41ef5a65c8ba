"""Shared fixtures for the serviceresult test suite."""

import os
from collections.abc import Iterator

import pytest

from serviceresult.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop SERVICERESULT_* variables and the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("SERVICERESULT_"):
            monkeypatch.delenv(name)
    clear_settings_cache()
    yield
    clear_settings_cache()
