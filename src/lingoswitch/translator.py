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

"""Translator composed from settings, backend, switcher and renderer.

All customizations are wired together here, once, at startup:

    backend -> TokenSeedBackend -> SuggestionFollowingBackend (optional)
    DirectionSwitcher (rules + known directions)
    ThresholdRenderer (inline vs panel)
"""

from __future__ import annotations

import logging

from rich.console import Console

from lingoswitch.backends import (
    BackendError,
    SuggestionFollowingBackend,
    TokenSeed,
    TokenSeedBackend,
    TranslationBackend,
    TranslationResult,
    load_backend,
)
from lingoswitch.directions import Direction, DirectionSwitcher
from lingoswitch.output import OutputRenderer, ThresholdRenderer
from lingoswitch.utils.config import Settings

logger = logging.getLogger(__name__)


class Translator:
    """Translate input in the active direction and display the result.

    Build one with :func:`build_translator`, then await ``translate(text)``
    for each input and pass the result to ``render``. With the demo
    backend, "привет мир" switches en → ru to ru → en and yields "hello world".
    """

    def __init__(
        self,
        backend: TranslationBackend,
        switcher: DirectionSwitcher,
        renderer: OutputRenderer,
    ):
        self.backend = backend
        self.switcher = switcher
        self.renderer = renderer
        self.last_switch: tuple[Direction, Direction] | None = None

    @property
    def direction(self) -> Direction:
        return self.switcher.current

    async def translate(self, text: str) -> TranslationResult:
        """Translate text, switching direction first if the rules say so.

        Args:
            text: Input text

        Returns:
            Translation result

        Raises:
            BackendError: If the backend fails
        """
        before = self.switcher.current
        direction = self.switcher.on_input(text)
        self.last_switch = (before, direction) if direction != before else None

        try:
            return await self.backend.translate(direction.source_lang, direction.target_lang, text)
        except BackendError:
            raise
        except Exception as e:
            raise BackendError(f"Translation {direction} failed: {e}") from e

    def render(self, result: TranslationResult) -> None:
        self.renderer.render(result)

    async def close(self) -> None:
        await self.backend.close()


def build_translator(
    settings: Settings,
    backend: TranslationBackend | None = None,
    initial: Direction | None = None,
    auto_switch: bool | None = None,
    console: Console | None = None,
) -> Translator:
    """Compose a Translator from settings.

    Args:
        settings: Application settings
        backend: Backend to use (defaults to the one named by settings.backend)
        initial: Starting direction (defaults to the default direction)
        auto_switch: Override settings.auto_switch
        console: Console for the renderers

    Returns:
        Ready-to-use Translator

    Raises:
        BackendError: If no backend is given or configured
    """
    if backend is None:
        if not settings.backend:
            raise BackendError(
                "No translation backend configured. "
                "Set LINGOSWITCH_BACKEND=package.module:ClassName or use --demo"
            )
        backend = load_backend(settings.backend)

    seed = TokenSeed(b=settings.token_seed_b, d1=settings.token_seed_d1)
    backend = TokenSeedBackend(backend, seed)
    if settings.follow_suggestions:
        backend = SuggestionFollowingBackend(backend)

    switcher = DirectionSwitcher.from_settings(settings, initial=initial)
    if auto_switch is not None:
        switcher.enabled = auto_switch

    renderer = ThresholdRenderer(max_length=settings.popup_max_length, console=console)

    logger.debug(
        "Translator ready: direction %s, %d rules, auto-switch %s",
        switcher.current,
        len(switcher.rules),
        switcher.enabled,
    )
    return Translator(backend, switcher, renderer)
