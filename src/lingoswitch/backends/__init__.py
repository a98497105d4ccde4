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

"""Translation backend interface and customizations.

Provides the abstract backend a translation client is adapted to, plus
decorators that change its behavior (suggestion following, fixed token seed).
"""

from .base import (
    BackendDecorator,
    BackendError,
    BackendLoadError,
    TranslationBackend,
    TranslationResult,
)
from .decorators import SuggestionFollowingBackend, TokenSeedBackend
from .demo import DemoBackend
from .loader import load_backend
from .token import TokenSeed, generate_token

__all__ = [
    "BackendDecorator",
    "BackendError",
    "BackendLoadError",
    "DemoBackend",
    "SuggestionFollowingBackend",
    "TokenSeed",
    "TokenSeedBackend",
    "TranslationBackend",
    "TranslationResult",
    "generate_token",
    "load_backend",
]
