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

"""Base abstract class for translation backends.

Defines the capability interface lingoswitch needs from a translation
client. Customizations are applied by wrapping a backend in decorators
rather than by patching the client.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

_MARKUP_RE = re.compile(r"<[^>]+>")


@dataclass
class TranslationResult:
    """Result of a translation request.

    Attributes:
        text: Text that was translated
        translation: Translated text
        source_lang: Source language
        target_lang: Target language
        suggestion: Spelling suggestion for the input, if the backend offered one
        followed_suggestion: Original input when the suggestion was translated instead
        raw: Backend-specific raw response
    """

    text: str
    translation: str
    source_lang: str
    target_lang: str
    suggestion: str | None = None
    followed_suggestion: str | None = None
    raw: Any = None


class TranslationBackend(ABC):
    """Abstract base class for translation backends.

    Attributes:
        total_characters: Total characters translated (for usage tracking)
    """

    def __init__(self) -> None:
        """Initialize backend with usage tracking."""
        self.total_characters = 0

    @abstractmethod
    async def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        """Translate text.

        Args:
            source_lang: Source language code
            target_lang: Target language code
            text: Text to translate

        Returns:
            TranslationResult with translated text and metadata

        Raises:
            BackendError: If translation fails
        """
        ...

    def extract_suggestion(self, raw: Any) -> str | None:
        """Extract a "did you mean" suggestion from a raw response.

        The default understands Google-style response arrays, where the
        suggestion sits at ``raw[7]`` as ``[marked_up, plain, ...]``.

        Args:
            raw: Raw response returned by the client

        Returns:
            Suggested input text, or None
        """
        try:
            entry = raw[7]
        except (IndexError, KeyError, TypeError):
            return None

        if not isinstance(entry, (list, tuple)) or not entry:
            return None

        suggestion = entry[1] if len(entry) > 1 else entry[0]
        if not isinstance(suggestion, str):
            return None
        return _MARKUP_RE.sub("", suggestion).strip() or None

    async def close(self) -> None:
        """Release backend resources."""


class BackendDecorator(TranslationBackend):
    """Backend that wraps another backend and delegates to it."""

    def __init__(self, inner: TranslationBackend):
        super().__init__()
        self.inner = inner

    async def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        return await self.inner.translate(source_lang, target_lang, text)

    def extract_suggestion(self, raw: Any) -> str | None:
        return self.inner.extract_suggestion(raw)

    async def close(self) -> None:
        await self.inner.close()

    def unwrap(self) -> TranslationBackend:
        """Get the innermost wrapped backend."""
        backend: TranslationBackend = self.inner
        while isinstance(backend, BackendDecorator):
            backend = backend.inner
        return backend


class BackendError(Exception):
    """Base exception for translation backend errors."""


class BackendLoadError(BackendError):
    """Raised when a configured backend cannot be imported or created."""
