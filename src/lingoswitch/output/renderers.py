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

"""Output surfaces for translation results.

Short translations are shown inline on a single line; long ones get a
panel. :class:`ThresholdRenderer` picks between the two by length.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from lingoswitch.backends import TranslationResult
from lingoswitch.utils.console import console as default_console

DEFAULT_POPUP_MAX_LENGTH = 600


def _direction_label(result: TranslationResult) -> str:
    return f"{result.source_lang} → {result.target_lang}"


class OutputRenderer(ABC):
    """Abstract base class for result renderers."""

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    @abstractmethod
    def render(self, result: TranslationResult) -> None:
        """Display a translation result.

        Args:
            result: Result to display
        """
        ...


class InlineRenderer(OutputRenderer):
    """Render a result as a single line, with an optional suggestion note."""

    def render(self, result: TranslationResult) -> None:
        line = Text()
        line.append(_direction_label(result), style="dim")
        line.append(": ")
        line.append(result.translation, style="bold cyan")
        self.console.print(line)

        if result.followed_suggestion:
            suggestion = escape(result.suggestion or "")
            self.console.print(
                f"[dim]Showing translation for [italic]{suggestion}[/italic] "
                f"instead of [italic]{escape(result.followed_suggestion)}[/italic][/dim]"
            )
        elif result.suggestion:
            suggestion = escape(result.suggestion)
            self.console.print(f"[dim]Did you mean: [italic]{suggestion}[/italic]?[/dim]")


class PanelRenderer(OutputRenderer):
    """Render a result in a bordered panel with source and translation."""

    def render(self, result: TranslationResult) -> None:
        parts: list[Text] = [
            Text(result.text, style="dim"),
            Text(""),
            Text(result.translation),
        ]
        if result.followed_suggestion:
            parts.append(Text(""))
            parts.append(
                Text(
                    f"Translated suggestion '{result.suggestion}' "
                    f"instead of '{result.followed_suggestion}'",
                    style="yellow",
                )
            )
        elif result.suggestion:
            parts.append(Text(""))
            parts.append(Text(f"Did you mean: {result.suggestion}?", style="yellow"))

        panel = Panel(
            Group(*parts),
            title=_direction_label(result),
            border_style="cyan",
            padding=(1, 2),
        )
        self.console.print(panel)


class ThresholdRenderer(OutputRenderer):
    """Choose a renderer by translation length.

    A translation of exactly ``max_length`` characters is still short.
    """

    def __init__(
        self,
        short: OutputRenderer | None = None,
        long: OutputRenderer | None = None,
        max_length: int = DEFAULT_POPUP_MAX_LENGTH,
        console: Console | None = None,
    ):
        """Initialize renderer.

        Args:
            short: Renderer for translations up to max_length characters
            long: Renderer for longer translations
            max_length: Longest translation rendered by ``short``
            console: Console shared by the default renderers
        """
        super().__init__(console)
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self.short = short or InlineRenderer(self.console)
        self.long = long or PanelRenderer(self.console)
        self.max_length = max_length

    def select(self, result: TranslationResult) -> OutputRenderer:
        if len(result.translation) <= self.max_length:
            return self.short
        return self.long

    def render(self, result: TranslationResult) -> None:
        self.select(result).render(result)
