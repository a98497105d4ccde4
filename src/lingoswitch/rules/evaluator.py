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

"""Direction rule evaluation.

Pure functions deciding whether the translation direction should switch
for a given input text. Patterns are searched anywhere in the text
(``re.search``), never anchored to the whole string.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Container, Iterable, Sequence
from functools import lru_cache

from .models import Condition, Rule

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str] | None:
    """Compile a pattern, returning None if it is not a valid regex."""
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning("Invalid rule pattern %r: %s", pattern, e)
        return None


def condition_satisfied(condition: Condition, text: str) -> bool:
    """Check a single condition against text.

    An invalid pattern never satisfies its condition, whatever the polarity.

    Args:
        condition: Condition to check
        text: Input text

    Returns:
        True if the condition holds for text
    """
    compiled = _compile(condition.pattern)
    if compiled is None:
        return False

    found = compiled.search(text) is not None
    return not found if condition.negated else found


def should_auto_switch(conditions: Sequence[Condition], text: str) -> bool:
    """Check whether a rule's conditions are broken by text.

    Despite the name this returns True when the rule does NOT hold: an empty
    sequence, or any unsatisfied condition (evaluation stops at the first
    one). It returns False only when every condition is satisfied.

    Args:
        conditions: Ordered conditions of one rule
        text: Input text

    Returns:
        False if all conditions hold, True otherwise

    Example:
        >>> should_auto_switch([Condition.match("[а-я]")], "привет")
        False
        >>> should_auto_switch([Condition.match("[а-я]")], "hello")
        True
    """
    if not conditions:
        return True

    for condition in conditions:
        if not condition_satisfied(condition, text):
            return True

    return False


def rule_fully_satisfied(conditions: Sequence[Condition], text: str) -> bool:
    """Inverse of :func:`should_auto_switch`: True when every condition holds."""
    return not should_auto_switch(conditions, text)


def detect_candidate_rules(rule_table: Iterable[Rule], text: str) -> list[Rule]:
    """Select rules whose conditions are fully satisfied by text.

    Args:
        rule_table: Ordered rules
        text: Input text

    Returns:
        Matching rules in table order
    """
    return [rule for rule in rule_table if not should_auto_switch(rule.conditions, text)]


def select_switch_target(
    candidate_rules: Iterable[Rule],
    current_source_lang: str,
    known_directions: Container[str],
) -> str | None:
    """Pick the language to switch the direction to.

    Args:
        candidate_rules: Rules already satisfied by the input text
        current_source_lang: Source language of the active direction
        known_directions: Languages that start a known direction

    Returns:
        Target language of the first applicable rule, or None
    """
    for rule in candidate_rules:
        if rule.source_lang == current_source_lang and rule.target_lang in known_directions:
            return rule.target_lang
    return None


def find_switch_target(
    rule_table: Iterable[Rule],
    text: str,
    current_source_lang: str,
    known_directions: Container[str],
) -> str | None:
    """Detect candidates and select a target in one call."""
    candidates = detect_candidate_rules(rule_table, text)
    target = select_switch_target(candidates, current_source_lang, known_directions)
    logger.debug(
        "Evaluated %d candidate rules for source %s: target=%s",
        len(candidates),
        current_source_lang,
        target,
    )
    return target
