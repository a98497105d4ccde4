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

"""Rule-based translation direction switching.

Decides, from regular expression cues in the input text, whether the active
translation direction should change (e.g. typing Cyrillic while translating
English to Russian switches to Russian to English).
"""

from .config import (
    DEFAULT_RULE_TABLE,
    DEFAULT_RULES,
    RuleConfigError,
    dump_rule_table,
    parse_rule,
    parse_rule_table,
)
from .evaluator import (
    condition_satisfied,
    detect_candidate_rules,
    find_switch_target,
    rule_fully_satisfied,
    select_switch_target,
    should_auto_switch,
)
from .models import Condition, ConditionKind, Rule

__all__ = [
    # Models
    "Condition",
    "ConditionKind",
    "Rule",
    # Evaluation
    "condition_satisfied",
    "detect_candidate_rules",
    "find_switch_target",
    "rule_fully_satisfied",
    "select_switch_target",
    "should_auto_switch",
    # Configuration
    "DEFAULT_RULE_TABLE",
    "DEFAULT_RULES",
    "RuleConfigError",
    "dump_rule_table",
    "parse_rule",
    "parse_rule_table",
]
