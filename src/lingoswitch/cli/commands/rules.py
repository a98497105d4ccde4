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

"""Auto-switch rule inspection commands."""

from __future__ import annotations

import typer

from lingoswitch.cli.ui import console, print_error, print_rules_table, print_warning
from lingoswitch.cli.utils import load_text
from lingoswitch.directions import DirectionTable
from lingoswitch.rules import detect_candidate_rules, select_switch_target
from lingoswitch.utils.config import get_settings

rules_app = typer.Typer(
    name="rules",
    help="Inspect auto-switch rules",
    no_args_is_help=True,
)


@rules_app.command("list")
def list_rules() -> None:
    """List configured auto-switch rules in evaluation order.

    Example:
        lingoswitch rules list
    """
    try:
        settings = get_settings()
        rules = settings.rule_table
        if not rules:
            console.print("[yellow]No auto-switch rules configured[/yellow]")
            return

        print_rules_table(rules)
        skipped = len(settings.rules) - len(rules)
        if skipped:
            print_warning(f"{skipped} malformed rule(s) skipped")
        console.print(f"\n[dim]Total: {len(rules)} rules[/dim]")

    except Exception as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@rules_app.command("check")
def check_rules(
    text: str = typer.Argument(..., help="Input text to test (or file path with @)"),
    source_lang: str | None = typer.Option(
        None, "--source-lang", "-s", help="Current source language (default: configured)"
    ),
) -> None:
    """Show which rules match a text and where the direction would switch.

    Example:
        lingoswitch rules check "привет мир" --source-lang en
    """
    try:
        settings = get_settings()
        source_text = load_text(text)
        current = (source_lang or settings.default_source_lang).lower()

        rules = settings.rule_table
        directions = DirectionTable.from_settings(settings)
        candidates = detect_candidate_rules(rules, source_text)

        print_rules_table(rules, matched=candidates, title="Rule Matches")

        target = select_switch_target(candidates, current, directions)
        if target is None:
            console.print(f"\n[dim]No switch from source '{current}'[/dim]")
            return

        new_direction = directions.for_source(target)
        console.print(f"\n[green]Switch:[/green] source '{current}' → direction {new_direction}")

    except Exception as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
