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

"""Demo backend for trying the CLI without a translation client."""

from __future__ import annotations

import asyncio
import re
from typing import Any

from .base import TranslationBackend, TranslationResult

_WORD_RE = re.compile(r"\w+|\W+")

# Word-level phrasebook keyed by (source, target)
_PHRASEBOOK: dict[tuple[str, str], dict[str, str]] = {
    ("en", "ru"): {
        "hello": "привет",
        "world": "мир",
        "good": "хороший",
        "morning": "утро",
        "thank": "спасибо",
        "you": "ты",
        "cat": "кот",
        "dog": "собака",
        "translation": "перевод",
    },
    ("en", "uk"): {
        "hello": "привіт",
        "world": "світ",
        "good": "добрий",
        "morning": "ранок",
        "thank": "дякую",
        "you": "ти",
        "cat": "кіт",
        "dog": "собака",
        "translation": "переклад",
    },
}

# Misspellings the demo offers corrections for
_SUGGESTIONS: dict[str, str] = {
    "helo": "hello",
    "wrold": "world",
    "transaltion": "translation",
    "превет": "привет",
}


def _reverse(table: dict[str, str]) -> dict[str, str]:
    return {target: source for source, target in table.items()}


class DemoBackend(TranslationBackend):
    """Offline backend translating word by word from a small phrasebook.

    Unknown words are passed through unchanged. Responses are shaped like
    Google-style arrays so suggestion extraction works as with a real client.
    """

    def __init__(self, delay: float = 0.0):
        """Initialize demo backend.

        Args:
            delay: Simulated response time in seconds
        """
        super().__init__()
        self.delay = delay
        self.call_count = 0
        self._tables: dict[tuple[str, str], dict[str, str]] = {}
        for (source, target), table in _PHRASEBOOK.items():
            self._tables[(source, target)] = table
            self._tables[(target, source)] = _reverse(table)

    def _translate_word(self, word: str, table: dict[str, str]) -> str:
        translated = table.get(word.lower())
        if translated is None:
            return word
        return translated.capitalize() if word[:1].isupper() else translated

    def _suggest(self, text: str) -> str | None:
        tokens = _WORD_RE.findall(text)
        corrected = [_SUGGESTIONS.get(token.lower(), token) for token in tokens]
        if corrected == tokens:
            return None
        return "".join(corrected)

    async def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        if self.delay:
            await asyncio.sleep(self.delay)
        self.call_count += 1
        self.total_characters += len(text)

        table = self._tables.get((source_lang, target_lang), {})
        translation = "".join(
            self._translate_word(token, table) if token[:1].isalnum() else token
            for token in _WORD_RE.findall(text)
        )

        suggestion = self._suggest(text)
        raw: list[Any] = [
            [[translation, text, None, None]],
            None,
            source_lang,
            None,
            None,
            None,
            None,
            [f"<b><i>{suggestion}</i></b>", suggestion] if suggestion else None,
        ]

        return TranslationResult(
            text=text,
            translation=translation,
            source_lang=source_lang,
            target_lang=target_lang,
            suggestion=self.extract_suggestion(raw),
            raw=raw,
        )
