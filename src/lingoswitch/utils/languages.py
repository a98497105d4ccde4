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

"""Supported language registry.

Language codes accepted in rules, directions and default settings.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LanguageRegistry:
    """Registry of language codes known to the translation layer.

    Example:
        >>> registry = LanguageRegistry()
        >>> registry.is_language_supported("uk")
        True
        >>> registry.get_language_name("ru")
        'Russian'
    """

    SUPPORTED_LANGUAGES: dict[str, dict[str, str]] = {
        "en": {"name": "English", "native_name": "English", "script": "latin"},
        "ru": {"name": "Russian", "native_name": "Русский", "script": "cyrillic"},
        "uk": {"name": "Ukrainian", "native_name": "Українська", "script": "cyrillic"},
        "be": {"name": "Belarusian", "native_name": "Беларуская", "script": "cyrillic"},
        "bg": {"name": "Bulgarian", "native_name": "Български", "script": "cyrillic"},
        "de": {"name": "German", "native_name": "Deutsch", "script": "latin"},
        "fr": {"name": "French", "native_name": "Français", "script": "latin"},
        "es": {"name": "Spanish", "native_name": "Español", "script": "latin"},
        "it": {"name": "Italian", "native_name": "Italiano", "script": "latin"},
        "pt": {"name": "Portuguese", "native_name": "Português", "script": "latin"},
        "pl": {"name": "Polish", "native_name": "Polski", "script": "latin"},
        "cs": {"name": "Czech", "native_name": "Čeština", "script": "latin"},
        "nl": {"name": "Dutch", "native_name": "Nederlands", "script": "latin"},
        "tr": {"name": "Turkish", "native_name": "Türkçe", "script": "latin"},
        "zh": {"name": "Chinese", "native_name": "中文", "script": "han"},
        "ja": {"name": "Japanese", "native_name": "日本語", "script": "kana"},
        "ko": {"name": "Korean", "native_name": "한국어", "script": "hangul"},
        "ar": {"name": "Arabic", "native_name": "العربية", "script": "arabic"},
        "fa": {"name": "Persian", "native_name": "فارسی", "script": "arabic"},
        "hi": {"name": "Hindi", "native_name": "हिन्दी", "script": "devanagari"},
        "ka": {"name": "Georgian", "native_name": "ქართული", "script": "georgian"},
        "hy": {"name": "Armenian", "native_name": "Հայերեն", "script": "armenian"},
    }

    def is_language_supported(self, lang_code: str) -> bool:
        """Check if language is in the registry.

        Args:
            lang_code: ISO 639-1 language code

        Returns:
            True if language is in registry
        """
        return lang_code in self.SUPPORTED_LANGUAGES

    def get_language_name(self, lang_code: str) -> str:
        """Get English name of a language, or the code itself if unknown."""
        lang = self.SUPPORTED_LANGUAGES.get(lang_code)
        if lang is None:
            logger.debug("Language '%s' not in registry", lang_code)
            return lang_code
        return lang["name"]

    def get_codes(self) -> list[str]:
        """Get all supported language codes in registry order."""
        return list(self.SUPPORTED_LANGUAGES.keys())


# Global registry instance
_registry: LanguageRegistry | None = None


def get_language_registry() -> LanguageRegistry:
    """Get global LanguageRegistry instance.

    Returns:
        Singleton LanguageRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = LanguageRegistry()
    return _registry
