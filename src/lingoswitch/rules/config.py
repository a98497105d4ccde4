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

"""Loading and dumping rule tables in their configuration form.

A rule table is stored as a list of ``[source, target, [condition, ...]]``
entries. A condition is either a pattern string (must match) or a
two-element ``["not", pattern]`` list (must not match).

Example:
    >>> rules = parse_rule_table([["en", "ru", ["[а-я]"]]])
    >>> rules[0].conditions[0].pattern
    '[а-я]'
    >>> dump_rule_table(rules)
    [['en', 'ru', ['[а-я]']]]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from lingoswitch.utils.languages import get_language_registry

from .models import Condition, ConditionKind, Rule

logger = logging.getLogger(__name__)

NEGATION_MARKER = "not"

CYRILLIC = "[а-яА-ЯёЁ]"
CYRILLIC_WITH_UKRAINIAN = "[а-яА-ЯёЁєЄіІїЇґҐ]"
UKRAINIAN_ONLY = "[єЄіІїЇґҐ]"
LATIN = "[a-zA-Z]"

# Default table in configuration form
DEFAULT_RULE_TABLE: list[list[Any]] = [
    ["en", "ru", [CYRILLIC]],
    ["ru", "en", [[NEGATION_MARKER, CYRILLIC], LATIN]],
    ["uk", "en", [[NEGATION_MARKER, CYRILLIC_WITH_UKRAINIAN], LATIN]],
    ["en", "uk", [UKRAINIAN_ONLY]],
]


class RuleConfigError(ValueError):
    """Raised for a rule table entry that cannot be parsed."""


def parse_condition(raw: Any) -> Condition:
    """Parse one condition from its configuration form.

    Args:
        raw: Pattern string or ``["not", pattern]``

    Returns:
        Parsed condition

    Raises:
        RuleConfigError: If no pattern can be extracted
    """
    if isinstance(raw, str):
        return Condition.match(raw)

    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        marker, pattern = raw
        if marker == NEGATION_MARKER and isinstance(pattern, str):
            return Condition.not_match(pattern)

    raise RuleConfigError(f"Condition has no extractable pattern: {raw!r}")


def parse_language(raw: Any) -> str:
    """Normalize a rule language code and check it is a supported language.

    Raises:
        RuleConfigError: If the code is not a string or not in the registry
    """
    if not isinstance(raw, str):
        raise RuleConfigError(f"Language code must be a string: {raw!r}")

    code = raw.strip().lower()
    if not get_language_registry().is_language_supported(code):
        raise RuleConfigError(f"Unsupported language code: {raw!r}")
    return code


def parse_rule(raw: Any) -> Rule:
    """Parse one rule from its configuration form.

    Args:
        raw: ``[source, target, [condition, ...]]``

    Returns:
        Parsed rule

    Raises:
        RuleConfigError: If the entry is malformed
    """
    if isinstance(raw, Rule):
        return raw

    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise RuleConfigError(f"Rule must be [source, target, conditions]: {raw!r}")

    source_lang, target_lang, raw_conditions = raw
    source_lang = parse_language(source_lang)
    target_lang = parse_language(target_lang)
    if not isinstance(raw_conditions, (list, tuple)):
        raise RuleConfigError(f"Rule conditions must be a list: {raw_conditions!r}")

    conditions = tuple(parse_condition(c) for c in raw_conditions)

    try:
        return Rule(source_lang=source_lang, target_lang=target_lang, conditions=conditions)
    except ValidationError as e:
        raise RuleConfigError(f"Invalid rule {raw!r}: {e}") from e


def parse_rule_table(entries: Iterable[Any]) -> tuple[Rule, ...]:
    """Parse a rule table, skipping malformed entries.

    Args:
        entries: Rule entries in configuration form

    Returns:
        Parsed rules in table order
    """
    rules: list[Rule] = []
    for index, entry in enumerate(entries):
        try:
            rules.append(parse_rule(entry))
        except RuleConfigError as e:
            logger.warning("Skipping rule #%d: %s", index, e)
    return tuple(rules)


def dump_condition(condition: Condition) -> str | list[str]:
    """Convert a condition back to its configuration form."""
    if condition.kind == ConditionKind.NOT_MATCH:
        return [NEGATION_MARKER, condition.pattern]
    return condition.pattern


def dump_rule_table(rules: Iterable[Rule]) -> list[list[Any]]:
    """Convert rules back to their configuration form."""
    return [
        [rule.source_lang, rule.target_lang, [dump_condition(c) for c in rule.conditions]]
        for rule in rules
    ]


DEFAULT_RULES: tuple[Rule, ...] = parse_rule_table(DEFAULT_RULE_TABLE)
