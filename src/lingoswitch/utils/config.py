"""Configuration management for lingoswitch.

Handles default languages, known directions, switching rules and display
settings using Pydantic Settings. Values come from (highest priority first)
constructor arguments, environment variables, a .env file and the user
config file written by ``lingoswitch init``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import typer
from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from lingoswitch.rules import DEFAULT_RULE_TABLE, Rule, parse_rule_table
from lingoswitch.utils.languages import get_language_registry

logger = logging.getLogger(__name__)

APP_NAME = "lingoswitch"
CONFIG_FILE_ENV = "LINGOSWITCH_CONFIG_FILE"


class ConfigError(ValueError):
    """Raised when configuration cannot be read or written."""


def get_config_path() -> Path:
    """Get path of the user config file.

    Uses ``LINGOSWITCH_CONFIG_FILE`` if set, otherwise ``config.json`` in the
    platform application directory.
    """
    override = os.environ.get(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return Path(typer.get_app_dir(APP_NAME)) / "config.json"


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with
    LINGOSWITCH_ prefix. List values are given as JSON.

    Example .env file:
        LINGOSWITCH_DEFAULT_SOURCE_LANG=en
        LINGOSWITCH_DEFAULT_TARGET_LANG=uk
        LINGOSWITCH_POPUP_MAX_LENGTH=800
        LINGOSWITCH_DIRECTIONS=[["de", "en"]]

    Example usage:
        >>> settings = Settings()
        >>> settings.known_direction_pairs()[:2]
        [('en', 'ru'), ('ru', 'en')]
    """

    # Default direction
    default_source_lang: str = Field(
        default="en",
        description="Default source language",
        json_schema_extra={"env": "LINGOSWITCH_DEFAULT_SOURCE_LANG"},
    )

    default_target_lang: str = Field(
        default="ru",
        description="Default target language",
        json_schema_extra={"env": "LINGOSWITCH_DEFAULT_TARGET_LANG"},
    )

    directions: list[tuple[str, str]] = Field(
        default_factory=list,
        description="Extra known directions as [source, target] pairs",
        json_schema_extra={"env": "LINGOSWITCH_DIRECTIONS"},
    )

    # Auto-switch rules
    rules: list[Any] = Field(
        default_factory=lambda: [list(entry) for entry in DEFAULT_RULE_TABLE],
        description="Auto-switch rules as [source, target, [condition, ...]] entries",
        json_schema_extra={"env": "LINGOSWITCH_RULES"},
    )

    auto_switch: bool = Field(
        default=True,
        description="Switch direction automatically from input text",
        json_schema_extra={"env": "LINGOSWITCH_AUTO_SWITCH"},
    )

    # Output
    popup_max_length: int = Field(
        default=600,
        description="Longest translation shown inline; longer ones go to a panel",
        gt=0,
        json_schema_extra={"env": "LINGOSWITCH_POPUP_MAX_LENGTH"},
    )

    follow_suggestions: bool = Field(
        default=True,
        description="Translate the backend's spelling suggestion instead of the input",
        json_schema_extra={"env": "LINGOSWITCH_FOLLOW_SUGGESTIONS"},
    )

    # Request token seed
    token_seed_b: int = Field(
        default=427110,
        description="First request token constant",
        json_schema_extra={"env": "LINGOSWITCH_TOKEN_SEED_B"},
    )

    token_seed_d1: int = Field(
        default=1469889687,
        description="Second request token constant",
        json_schema_extra={"env": "LINGOSWITCH_TOKEN_SEED_D1"},
    )

    # Backend
    backend: str | None = Field(
        default=None,
        description="Translation backend import path (package.module:ClassName)",
        json_schema_extra={"env": "LINGOSWITCH_BACKEND"},
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        json_schema_extra={"env": "LINGOSWITCH_LOG_LEVEL"},
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LINGOSWITCH_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls, json_file=get_config_path()),
            file_secret_settings,
        )

    @field_validator("default_source_lang", "default_target_lang")
    @classmethod
    def _check_language(cls, value: str) -> str:
        value = value.strip().lower()
        if not get_language_registry().is_language_supported(value):
            raise ValueError(f"Unsupported language code: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @model_validator(mode="after")
    def _check_default_direction(self) -> Settings:
        if self.default_source_lang == self.default_target_lang:
            raise ValueError("Default source and target languages must differ")
        return self

    @property
    def rule_table(self) -> tuple[Rule, ...]:
        """Parsed auto-switch rules (malformed entries skipped)."""
        return parse_rule_table(self.rules)

    def known_direction_pairs(self) -> list[tuple[str, str]]:
        """Get known directions: the default pair, its reverse, then extras.

        Returns:
            Deduplicated (source, target) pairs in priority order
        """
        pairs = [
            (self.default_source_lang, self.default_target_lang),
            (self.default_target_lang, self.default_source_lang),
        ]
        for source, target in self.directions:
            pair = (source.lower(), target.lower())
            if pair not in pairs:
                pairs.append(pair)
        return pairs


def load_user_config(path: Path | None = None) -> dict[str, Any]:
    """Read the user config file.

    Args:
        path: Config file path (defaults to get_config_path())

    Returns:
        Stored values, empty if the file does not exist

    Raises:
        ConfigError: If the file exists but is not a JSON object
    """
    path = path or get_config_path()
    if not path.exists():
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def save_user_config(values: dict[str, Any], path: Path | None = None) -> Path:
    """Merge values into the user config file.

    Args:
        values: Settings to store
        path: Config file path (defaults to get_config_path())

    Returns:
        Path of the written file
    """
    path = path or get_config_path()
    data = load_user_config(path)
    data.update(values)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write config file {path}: {e}") from e

    logger.info("Saved %s to %s", ", ".join(sorted(values)), path)
    reset_settings()
    return path


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
