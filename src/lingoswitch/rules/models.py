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

"""Data models for direction switching rules."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConditionKind(str, Enum):
    """How a condition's pattern is applied to the input text."""

    MATCH = "match"  # Text must contain a match
    NOT_MATCH = "not_match"  # Text must not contain a match


class Condition(BaseModel):
    """A positive or negated regular expression check.

    Example:
        >>> Condition.match("[а-я]").kind
        <ConditionKind.MATCH: 'match'>
    """

    model_config = ConfigDict(frozen=True)

    kind: ConditionKind = Field(default=ConditionKind.MATCH, description="Match polarity")
    pattern: str = Field(..., description="Regular expression searched in the text")

    @classmethod
    def match(cls, pattern: str) -> Condition:
        """Create a condition satisfied when the text matches ``pattern``."""
        return cls(kind=ConditionKind.MATCH, pattern=pattern)

    @classmethod
    def not_match(cls, pattern: str) -> Condition:
        """Create a condition satisfied when the text does not match ``pattern``."""
        return cls(kind=ConditionKind.NOT_MATCH, pattern=pattern)

    @property
    def negated(self) -> bool:
        return self.kind == ConditionKind.NOT_MATCH


class Rule(BaseModel):
    """Auto-switch rule.

    When the active direction starts from ``source_lang`` and the input text
    satisfies every condition, the direction switches to the one starting
    from ``target_lang``.

    Attributes:
        source_lang: Source language the rule applies to
        target_lang: Language to switch the direction to
        conditions: Conditions that must all hold
    """

    model_config = ConfigDict(frozen=True)

    source_lang: str = Field(..., min_length=1, description="Current source language")
    target_lang: str = Field(..., min_length=1, description="Language to switch to")
    conditions: tuple[Condition, ...] = Field(default=(), description="Conditions to satisfy")

    def __str__(self) -> str:
        return f"{self.source_lang} → {self.target_lang}"
