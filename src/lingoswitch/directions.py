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

"""Translation directions and input-driven direction switching."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from lingoswitch.rules import DEFAULT_RULES, Rule, find_switch_target
from lingoswitch.utils.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Direction:
    """Ordered (source, target) language pair."""

    source_lang: str
    target_lang: str

    def reversed(self) -> Direction:
        return Direction(self.target_lang, self.source_lang)

    def __str__(self) -> str:
        return f"{self.source_lang} → {self.target_lang}"


class DirectionTable:
    """Ordered, read-only table of known directions.

    A language is "in" the table when some direction starts from it.

    Example:
        >>> table = DirectionTable.from_pairs([("en", "ru"), ("ru", "en")])
        >>> "ru" in table
        True
        >>> table.for_source("ru")
        Direction(source_lang='ru', target_lang='en')
    """

    def __init__(self, directions: Iterable[Direction]):
        self._directions: tuple[Direction, ...] = tuple(dict.fromkeys(directions))
        if not self._directions:
            raise ValueError("Direction table must not be empty")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> DirectionTable:
        return cls(Direction(source, target) for source, target in pairs)

    @classmethod
    def from_settings(cls, settings: Settings) -> DirectionTable:
        return cls.from_pairs(settings.known_direction_pairs())

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._directions)

    def __len__(self) -> int:
        return len(self._directions)

    def __getitem__(self, index: int) -> Direction:
        return self._directions[index]

    def __contains__(self, lang: object) -> bool:
        return any(d.source_lang == lang for d in self._directions)

    @property
    def default(self) -> Direction:
        return self._directions[0]

    def for_source(self, lang: str) -> Direction | None:
        """Get the first direction starting from a language."""
        for direction in self._directions:
            if direction.source_lang == lang:
                return direction
        return None

    def for_target(self, lang: str) -> Direction | None:
        """Get the first direction ending in a language."""
        for direction in self._directions:
            if direction.target_lang == lang:
                return direction
        return None


class DirectionSwitcher:
    """Tracks the active direction of one input session.

    Each call to :meth:`on_input` is one input-change event. Rules are
    evaluated at most once per distinct text.

    Example:
        >>> switcher = DirectionSwitcher(DirectionTable.from_pairs([("en", "ru"), ("ru", "en")]))
        >>> str(switcher.on_input("привет"))
        'ru → en'
    """

    def __init__(
        self,
        directions: DirectionTable,
        rules: Sequence[Rule] | None = None,
        enabled: bool = True,
        initial: Direction | None = None,
    ):
        """Initialize switcher.

        Args:
            directions: Known directions
            rules: Auto-switch rules (defaults to DEFAULT_RULES)
            enabled: Whether input can switch the direction
            initial: Starting direction (defaults to the table's first)
        """
        self.directions = directions
        self.rules: tuple[Rule, ...] = DEFAULT_RULES if rules is None else tuple(rules)
        self.enabled = enabled
        self.current: Direction = initial or directions.default
        self.switch_count = 0
        self._last_text: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings, initial: Direction | None = None) -> DirectionSwitcher:
        return cls(
            DirectionTable.from_settings(settings),
            rules=settings.rule_table,
            enabled=settings.auto_switch,
            initial=initial,
        )

    def on_input(self, text: str) -> Direction:
        """Handle an input change and return the (possibly new) direction.

        Args:
            text: Full current input text

        Returns:
            Active direction after evaluation
        """
        if not self.enabled or text == self._last_text:
            return self.current
        self._last_text = text

        target = find_switch_target(self.rules, text, self.current.source_lang, self.directions)
        if target is None:
            return self.current

        new_direction = self.directions.for_source(target)
        if new_direction is None or new_direction == self.current:
            return self.current

        logger.info("Auto-switched direction %s to %s", self.current, new_direction)
        self.current = new_direction
        self.switch_count += 1
        return self.current

    def set_direction(self, direction: Direction) -> None:
        """Set the active direction explicitly and forget the last input."""
        self.current = direction
        self._last_text = None
