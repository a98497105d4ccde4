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

"""Backend decorators customizing a wrapped translation client."""

from __future__ import annotations

import logging

from .base import BackendDecorator, TranslationBackend, TranslationResult
from .token import TokenSeed, generate_token

logger = logging.getLogger(__name__)


class SuggestionFollowingBackend(BackendDecorator):
    """Translate the backend's spelling suggestion instead of a misspelled input.

    Wrapping the demo backend, translating "helo" returns the translation of
    "hello" with ``followed_suggestion`` set to "helo".
    """

    async def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        result = await self.inner.translate(source_lang, target_lang, text)

        suggestion = result.suggestion or self.inner.extract_suggestion(result.raw)
        if not suggestion or suggestion == text:
            return result

        logger.info("Following suggestion %r for %r", suggestion, text)
        followed = await self.inner.translate(source_lang, target_lang, suggestion)
        followed.followed_suggestion = text
        followed.suggestion = suggestion
        return followed


class TokenSeedBackend(BackendDecorator):
    """Provide a fixed request token seed to the wrapped backend.

    The seed is set as ``token_seed`` on the innermost backend, which can
    then call :func:`generate_token` instead of fetching a seed itself.

    Attributes:
        seed: Seed pair in use
    """

    def __init__(self, inner: TranslationBackend, seed: TokenSeed | None = None):
        super().__init__(inner)
        self.seed = seed or TokenSeed()
        target = self.unwrap()
        target.token_seed = self.seed  # type: ignore[attr-defined]
        logger.debug("Using fixed token seed (%d, %d)", self.seed.b, self.seed.d1)

    def request_token(self, text: str) -> str:
        """Compute the request token for text with the fixed seed."""
        return generate_token(text, self.seed)
