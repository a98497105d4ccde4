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

"""One-time setup of default translation languages."""

from __future__ import annotations

import typer

from lingoswitch.cli.ui import console, print_error, print_success
from lingoswitch.utils.config import get_config_path, load_user_config, save_user_config
from lingoswitch.utils.languages import get_language_registry

SOURCE_KEY = "default_source_lang"
TARGET_KEY = "default_target_lang"


def _ask_language(label: str, default: str) -> str:
    registry = get_language_registry()
    while True:
        answer = typer.prompt(f"Default {label} language", default=default).strip().lower()
        if registry.is_language_supported(answer):
            return answer
        print_error(f"Unsupported language code: {answer}")
        console.print(f"[dim]Supported: {', '.join(registry.get_codes())}[/dim]")


def _default_target(stored_target: str | None, source: str) -> str:
    if stored_target and stored_target != source:
        return stored_target
    return "ru" if source != "ru" else "en"


def init(
    source_lang: str | None = typer.Option(
        None, "--source-lang", help="Default source language code"
    ),
    target_lang: str | None = typer.Option(
        None, "--target-lang", help="Default target language code"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Ask again even if already set"),
) -> None:
    """
    Set default source and target languages.

    Prompts for any language not given as an option and stores the answers
    in the user config file. Does nothing if defaults were already saved,
    unless --force is given.

    Example:
        lingoswitch init --source-lang en --target-lang uk
    """
    try:
        path = get_config_path()
        stored = load_user_config(path)

        configured = SOURCE_KEY in stored and TARGET_KEY in stored
        if configured and not force and source_lang is None and target_lang is None:
            console.print(
                f"[dim]Defaults already set: {stored[SOURCE_KEY]} → {stored[TARGET_KEY]} "
                f"({path}). Use --force to change them.[/dim]"
            )
            return

        registry = get_language_registry()
        for lang in (source_lang, target_lang):
            if lang is not None and not registry.is_language_supported(lang.lower()):
                raise ValueError(f"Unsupported language code: {lang}")

        source = (source_lang or "").lower() or _ask_language(
            "source", stored.get(SOURCE_KEY, "en")
        )
        target = (target_lang or "").lower() or _ask_language(
            "target", _default_target(stored.get(TARGET_KEY), source)
        )
        if source == target:
            raise ValueError("Source and target languages must differ")

        saved = save_user_config({SOURCE_KEY: source, TARGET_KEY: target}, path)
        print_success(f"Default direction set to {source} → {target} ({saved})")

    except Exception as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
