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

"""Shared rich console and status message helpers."""

from __future__ import annotations

from rich.console import Console

# Global console instance shared across the application
console = Console()


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    console.print(f"[red]✗ Error: {message}[/red]")


def print_warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_switch(old: object, new: object) -> None:
    """Announce an automatic direction switch.

    Args:
        old: Direction before the switch
        new: Direction after the switch
    """
    console.print(f"[cyan]⇄[/cyan] [dim]Direction switched:[/dim] {old} [cyan]⇒[/cyan] {new}")


__all__ = ["console", "print_error", "print_success", "print_switch", "print_warning"]
