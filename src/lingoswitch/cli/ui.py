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

"""Rich UI components for CLI output."""

from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lingoswitch.directions import Direction, DirectionTable
from lingoswitch.rules import Condition, Rule
from lingoswitch.rules.config import dump_condition
from lingoswitch.utils.console import (
    console,
    print_error,
    print_success,
    print_switch,
    print_warning,
)
from lingoswitch.utils.languages import get_language_registry

__all__ = [
    "console",
    "print_directions_table",
    "print_error",
    "print_rules_table",
    "print_startup_info",
    "print_success",
    "print_switch",
    "print_warning",
]


def print_startup_info(info: dict[str, str]) -> None:
    """Print startup information in a formatted panel.

    Args:
        info: Dictionary of key-value pairs to display
    """
    lines = [f"[cyan]{key:20}[/cyan] {value}" for key, value in info.items()]
    panel = Panel(
        "\n".join(lines),
        title="lingoswitch",
        border_style="cyan",
        padding=(0, 2),
    )
    console.print(panel)


def _format_condition(condition: Condition) -> str:
    dumped = dump_condition(condition)
    if isinstance(dumped, list):
        return f"[red]not[/red] {escape(dumped[1])}"
    return escape(dumped)


def print_rules_table(
    rules: Iterable[Rule],
    matched: Iterable[Rule] = (),
    title: str = "Auto-switch Rules",
) -> None:
    """Print rules, highlighting those in ``matched``.

    Args:
        rules: Rules in table order
        matched: Rules satisfied by the current input
        title: Table title
    """
    matched_set = set(matched)

    table = Table(title=title, show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Switch to", style="green", no_wrap=True)
    table.add_column("Conditions")
    table.add_column("Match", justify="center")

    for index, rule in enumerate(rules, start=1):
        conditions = ", ".join(_format_condition(c) for c in rule.conditions) or "[dim]none[/dim]"
        mark = "[green]✓[/green]" if rule in matched_set else "[dim]-[/dim]"
        table.add_row(str(index), rule.source_lang, rule.target_lang, conditions, mark)

    console.print(table)


def print_directions_table(directions: DirectionTable, current: Direction | None = None) -> None:
    """Print known directions, marking the current one."""
    registry = get_language_registry()

    table = Table(title="Known Directions")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="green")
    table.add_column("", justify="center")

    for index, direction in enumerate(directions, start=1):
        marker = "[bold]●[/bold]" if direction == (current or directions.default) else ""
        table.add_row(
            str(index),
            f"{direction.source_lang} ({registry.get_language_name(direction.source_lang)})",
            f"{direction.target_lang} ({registry.get_language_name(direction.target_lang)})",
            marker,
        )

    console.print(table)
