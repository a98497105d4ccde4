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

"""Translate commands with automatic direction switching."""

from __future__ import annotations

import asyncio

import typer

from lingoswitch.backends import BackendError
from lingoswitch.cli.ui import console, print_error, print_startup_info, print_switch
from lingoswitch.cli.utils import create_backend, load_text, resolve_direction, setup_logging
from lingoswitch.translator import Translator, build_translator
from lingoswitch.utils.config import get_settings

EXIT_COMMANDS = {":q", ":quit", ":exit"}


async def _translate_once(translator: Translator, text: str) -> None:
    try:
        result = await translator.translate(text)
        if translator.last_switch:
            print_switch(*translator.last_switch)
        translator.render(result)
    finally:
        await translator.close()


async def _interactive_loop(translator: Translator) -> None:
    """Read lines until EOF or an exit command, translating each one.

    A failed line is reported and the session continues.
    """
    try:
        while True:
            try:
                line = await asyncio.to_thread(
                    console.input, f"[bold cyan]{translator.direction}[/bold cyan] > "
                )
            except EOFError:
                break

            text = line.strip()
            if not text:
                continue
            if text in EXIT_COMMANDS:
                break

            try:
                result = await translator.translate(text)
            except BackendError as e:
                print_error(str(e))
                continue

            if translator.last_switch:
                print_switch(*translator.last_switch)
            translator.render(result)
    finally:
        await translator.close()


def translate(
    text: str = typer.Argument(..., help="Text to translate (or file path with @)"),
    source_lang: str | None = typer.Option(None, "--source-lang", "-s", help="Source language"),
    target_lang: str | None = typer.Option(None, "--target-lang", "-t", help="Target language"),
    no_auto_switch: bool = typer.Option(
        False, "--no-auto-switch", help="Keep the given direction whatever the input"
    ),
    demo: bool = typer.Option(
        False, "--demo", help="Demo mode (offline phrasebook backend, no client needed)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    """
    Translate text, picking the direction from the input.

    Starts from the default direction (or the one given with --source-lang /
    --target-lang) and switches it when the auto-switch rules match the text.

    Example:
        lingoswitch translate "привет мир" --demo
    """
    try:
        settings = get_settings()
        setup_logging(settings, verbose)

        source_text = load_text(text)
        initial = resolve_direction(settings, source_lang, target_lang)
        translator = build_translator(
            settings,
            backend=create_backend(demo),
            initial=initial,
            auto_switch=False if no_auto_switch else None,
        )

        if verbose:
            print_startup_info(
                {
                    "Direction": str(translator.direction),
                    "Auto-switch": "on" if translator.switcher.enabled else "off",
                    "Rules": str(len(translator.switcher.rules)),
                    "Inline up to": f"{settings.popup_max_length} chars",
                }
            )

        asyncio.run(_translate_once(translator, source_text))

    except KeyboardInterrupt:
        console.print("\n[yellow]⚠ Interrupted by user[/yellow]")
        raise typer.Exit(code=130) from None
    except Exception as e:
        print_error(str(e))
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1) from e


def interactive(
    source_lang: str | None = typer.Option(None, "--source-lang", "-s", help="Source language"),
    target_lang: str | None = typer.Option(None, "--target-lang", "-t", help="Target language"),
    demo: bool = typer.Option(
        False, "--demo", help="Demo mode (offline phrasebook backend, no client needed)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    """
    Translate lines as you type them.

    Each line may switch the direction for itself and the lines after it.
    Finish with Ctrl-D or :q.

    Example:
        lingoswitch interactive --demo
    """
    try:
        settings = get_settings()
        setup_logging(settings, verbose)

        translator = build_translator(
            settings,
            backend=create_backend(demo),
            initial=resolve_direction(settings, source_lang, target_lang),
        )
        console.print("[dim]Type text to translate, :q to quit.[/dim]")
        asyncio.run(_interactive_loop(translator))

    except KeyboardInterrupt:
        console.print("\n[yellow]⚠ Interrupted by user[/yellow]")
        raise typer.Exit(code=130) from None
    except Exception as e:
        print_error(str(e))
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1) from e
