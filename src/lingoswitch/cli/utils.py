# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shared CLI utilities for lingoswitch commands."""

from __future__ import annotations

import logging
from pathlib import Path

from lingoswitch.backends import DemoBackend, TranslationBackend
from lingoswitch.directions import Direction, DirectionTable
from lingoswitch.utils.config import Settings
from lingoswitch.utils.languages import get_language_registry


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    """Configure logging for a CLI command.

    Args:
        settings: Application settings (provides the default level)
        verbose: Force DEBUG level
    """
    log_level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=log_level, format="%(message)s", force=True)


def load_text(text: str) -> str:
    """Load input text, reading a file when text starts with @.

    Args:
        text: Literal text or ``@path``

    Returns:
        Text to translate

    Raises:
        FileNotFoundError: If the referenced file does not exist
    """
    if not text.startswith("@"):
        return text

    text_path = Path(text[1:])
    if not text_path.exists():
        raise FileNotFoundError(f"Text file not found: {text[1:]}")
    return text_path.read_text(encoding="utf-8").strip()


def resolve_direction(
    settings: Settings,
    source_lang: str | None,
    target_lang: str | None,
) -> Direction | None:
    """Build the starting direction from command-line options.

    Args:
        settings: Application settings
        source_lang: --source-lang value
        target_lang: --target-lang value

    Returns:
        Explicit direction, or None to use the default one

    Raises:
        ValueError: If a language is unsupported or both are the same
    """
    if source_lang is None and target_lang is None:
        return None

    registry = get_language_registry()
    table = DirectionTable.from_settings(settings)

    source = (source_lang or "").lower()
    target = (target_lang or "").lower()

    if source and not target:
        known = table.for_source(source)
        target = known.target_lang if known else settings.default_target_lang
    elif target and not source:
        known = table.for_target(target)
        source = known.source_lang if known else settings.default_source_lang

    for lang in (source, target):
        if not registry.is_language_supported(lang):
            raise ValueError(f"Unsupported language code: {lang}")
    if source == target:
        raise ValueError("Source and target languages must differ")

    return Direction(source, target)


def create_backend(demo: bool) -> TranslationBackend | None:
    """Pick the backend for a command.

    Returns:
        DemoBackend in demo mode, otherwise None so the configured backend is loaded
    """
    if demo:
        return DemoBackend()
    return None
