"""Shared pytest fixtures for lingoswitch tests.

Provides a mock translation backend, isolated settings and logging cleanup.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from lingoswitch.backends import TranslationBackend, TranslationResult
from lingoswitch.directions import DirectionTable
from lingoswitch.utils import config as config_module

# ============================================================================
# Mock Backend Fixtures
# ============================================================================


class MockBackend(TranslationBackend):
    """Backend recording calls and returning canned translations."""

    def __init__(
        self,
        translations: dict[str, str] | None = None,
        suggestions: dict[str, str] | None = None,
    ):
        """Initialize mock backend.

        Args:
            translations: Input text -> translation (default: upper-cased input)
            suggestions: Input text -> suggestion placed at raw[7]
        """
        super().__init__()
        self.translations = translations or {}
        self.suggestions = suggestions or {}
        self.calls: list[tuple[str, str, str]] = []
        self.closed = False

    async def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        self.calls.append((source_lang, target_lang, text))
        suggestion = self.suggestions.get(text)
        raw: list[Any] = [None] * 7 + [[f"<b>{suggestion}</b>", suggestion] if suggestion else None]
        return TranslationResult(
            text=text,
            translation=self.translations.get(text, text.upper()),
            source_lang=source_lang,
            target_lang=target_lang,
            raw=raw,
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def mock_backend() -> MockBackend:
    """Provide a mock backend with no suggestions."""
    return MockBackend()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the user config file at a temp path and drop LINGOSWITCH_* env vars."""
    for key in list(os.environ):
        if key.upper().startswith("LINGOSWITCH_"):
            monkeypatch.delenv(key, raising=False)

    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setenv(config_module.CONFIG_FILE_ENV, str(config_file))
    monkeypatch.chdir(tmp_path)
    config_module.reset_settings()
    yield config_file
    config_module.reset_settings()


@pytest.fixture
def direction_table() -> DirectionTable:
    """Provide the en/ru/uk direction table."""
    return DirectionTable.from_pairs([("en", "ru"), ("ru", "en"), ("uk", "en"), ("en", "uk")])


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo logging.basicConfig(force=True) calls made by CLI commands."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================================
# Pytest Configuration Hooks
# ============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
