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

"""Main CLI application entry point for lingoswitch.

Commands live in separate modules under `lingoswitch.cli.commands/`;
the small inspection commands are defined here.
"""

from __future__ import annotations

import typer

from lingoswitch import __version__
from lingoswitch.backends import TokenSeed, generate_token
from lingoswitch.cli.commands.init import init
from lingoswitch.cli.commands.rules import rules_app
from lingoswitch.cli.commands.translate import interactive, translate
from lingoswitch.cli.ui import console, print_directions_table, print_error
from lingoswitch.cli.utils import load_text
from lingoswitch.directions import DirectionTable
from lingoswitch.utils.config import get_settings

# Create main app
app = typer.Typer(
    name="lingoswitch",
    help="lingoswitch - translation direction switching and display layer\n\n"
    "Picks the translation direction from what you type.",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Register commands
app.command()(init)
app.command()(translate)
app.command()(interactive)

# Add sub-apps for grouped commands
app.add_typer(rules_app, name="rules")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lingoswitch version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - Used by Typer callback
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    lingoswitch - translation direction switching and display layer.
    """
    pass


@app.command()
def directions() -> None:
    """
    List known translation directions.

    The first one is the default; auto-switch rules can only move to
    directions listed here.

    Example:
        lingoswitch directions
    """
    try:
        settings = get_settings()
        print_directions_table(DirectionTable.from_settings(settings))
    except Exception as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def token(
    text: str = typer.Argument(..., help="Query text (or file path with @)"),
) -> None:
    """
    Print the request token for a text using the configured seed.

    Example:
        lingoswitch token "hello"
    """
    try:
        settings = get_settings()
        seed = TokenSeed(b=settings.token_seed_b, d1=settings.token_seed_d1)
        console.print(generate_token(load_text(text), seed), highlight=False)
    except Exception as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def run() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    run()
