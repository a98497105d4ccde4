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

"""
lingoswitch - direction switching and display layer for translation clients

Picks the translation direction from what you type, follows spelling
suggestions and chooses how results are displayed, on top of any
translation backend.
"""

__version__ = "0.1.0"

from lingoswitch.directions import Direction, DirectionSwitcher, DirectionTable
from lingoswitch.rules import (
    Condition,
    Rule,
    detect_candidate_rules,
    select_switch_target,
    should_auto_switch,
)

__all__ = [
    "Condition",
    "Direction",
    "DirectionSwitcher",
    "DirectionTable",
    "Rule",
    "detect_candidate_rules",
    "select_switch_target",
    "should_auto_switch",
    "__version__",
]
