"""Unit tests for CLI interface.

Tests CLI commands, argument parsing, and output formatting.
Focus: Fast, isolated tests using the offline demo backend.
"""

import json
import re
from pathlib import Path
from unittest.mock import patch

import pytest
from conftest import MockBackend
from typer.testing import CliRunner

from lingoswitch import __version__
from lingoswitch.backends import BackendError, TranslationResult, generate_token
from lingoswitch.cli.main import app
from lingoswitch.cli.utils import load_text, resolve_direction
from lingoswitch.directions import Direction
from lingoswitch.utils.config import Settings, load_user_config

# Create CLI runner
runner = CliRunner()


class FlakyBackend(MockBackend):
    """Backend failing on one specific input."""

    async def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        if text == "boom":
            raise BackendError("temporary failure")
        return await super().translate(source_lang, target_lang, text)


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


@pytest.mark.unit
class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self) -> None:
        """Test --help flag lists commands."""
        # Act
        result = runner.invoke(app, ["--help"])

        # Assert
        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "translate" in output
        assert "interactive" in output
        assert "rules" in output

    def test_cli_version(self) -> None:
        """Test --version flag shows version."""
        # Act
        result = runner.invoke(app, ["--version"])

        # Assert
        assert result.exit_code == 0
        assert "lingoswitch version:" in result.stdout
        assert __version__ in result.stdout

    def test_invalid_command_fails(self) -> None:
        """Test invalid command shows error."""
        result = runner.invoke(app, ["invalid-command"])
        assert result.exit_code != 0


@pytest.mark.unit
class TestTranslateCommand:
    """Test translate command."""

    def test_auto_switch_to_russian_source(self) -> None:
        """Test Russian input is translated ru → en by default."""
        # Act
        result = runner.invoke(app, ["translate", "привет мир", "--demo"])

        # Assert
        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Direction switched" in output
        assert "ru → en: hello world" in output

    def test_no_switch_for_english(self) -> None:
        result = runner.invoke(app, ["translate", "hello world", "--demo"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Direction switched" not in output
        assert "en → ru: привет мир" in output

    def test_no_auto_switch(self) -> None:
        """Test --no-auto-switch keeps the default direction."""
        result = runner.invoke(app, ["translate", "привет", "--demo", "--no-auto-switch"])

        assert result.exit_code == 0
        assert "en → ru: привет" in strip_ansi(result.stdout)

    def test_target_only_direction(self) -> None:
        result = runner.invoke(app, ["translate", "мир", "--demo", "-t", "en"])

        assert result.exit_code == 0
        assert "ru → en: world" in strip_ansi(result.stdout)

    def test_explicit_direction(self) -> None:
        result = runner.invoke(app, ["translate", "мир", "--demo", "-s", "ru", "-t", "en"])

        assert result.exit_code == 0
        assert "ru → en: world" in strip_ansi(result.stdout)

    def test_followed_suggestion(self) -> None:
        """Test a misspelled input is translated via the suggestion."""
        result = runner.invoke(app, ["translate", "helo", "--demo"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "en → ru: привет" in output
        assert "instead of helo" in output

    def test_text_from_file(self, tmp_path: Path) -> None:
        (tmp_path / "input.txt").write_text("good morning\n", encoding="utf-8")

        result = runner.invoke(app, ["translate", "@input.txt", "--demo"])

        assert result.exit_code == 0
        assert "хороший утро" in strip_ansi(result.stdout)

    def test_missing_file(self) -> None:
        result = runner.invoke(app, ["translate", "@missing.txt", "--demo"])

        assert result.exit_code == 1
        assert "Text file not found" in strip_ansi(result.stdout)

    def test_requires_backend(self) -> None:
        """Test a helpful error without --demo or a configured backend."""
        result = runner.invoke(app, ["translate", "hello"])

        assert result.exit_code == 1
        assert "No translation backend configured" in strip_ansi(result.stdout)

    def test_configured_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGOSWITCH_BACKEND", "demo")

        result = runner.invoke(app, ["translate", "hello"])

        assert result.exit_code == 0
        assert "en → ru: привет" in strip_ansi(result.stdout)

    def test_unsupported_language(self) -> None:
        result = runner.invoke(app, ["translate", "hello", "--demo", "-s", "xx"])

        assert result.exit_code == 1
        assert "Unsupported language code: xx" in strip_ansi(result.stdout)

    def test_verbose_startup_info(self) -> None:
        result = runner.invoke(app, ["translate", "hello", "--demo", "--verbose"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Auto-switch" in output
        assert "600 chars" in output

    def test_keyboard_interrupt(self) -> None:
        with patch(
            "lingoswitch.cli.commands.translate.build_translator",
            side_effect=KeyboardInterrupt,
        ):
            result = runner.invoke(app, ["translate", "hello", "--demo"])

        assert result.exit_code == 130
        assert "Interrupted" in strip_ansi(result.stdout)


@pytest.mark.unit
class TestInteractiveCommand:
    """Test interactive command."""

    def test_lines_switch_direction(self) -> None:
        """Test each line can switch the direction for the following ones."""
        # Act
        result = runner.invoke(
            app, ["interactive", "--demo"], input="hello\nпривет\n\nмир\n:q\nignored\n"
        )

        # Assert
        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "en → ru: привет" in output
        assert "ru → en: hello" in output
        assert "ru → en: world" in output
        assert output.count("Direction switched") == 1
        assert "ignored" not in output

    def test_failed_line_keeps_session(self) -> None:
        """Test a backend error on one line is reported and later lines still translate."""
        with patch(
            "lingoswitch.cli.commands.translate.create_backend",
            return_value=FlakyBackend(),
        ):
            result = runner.invoke(app, ["interactive"], input="boom\nhello\n")

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Error: temporary failure" in output
        assert "en → ru: HELLO" in output

    def test_stops_at_end_of_input(self) -> None:
        result = runner.invoke(app, ["interactive", "--demo"], input="cat\n")

        assert result.exit_code == 0
        assert "en → ru: кот" in strip_ansi(result.stdout)


@pytest.mark.unit
class TestInitCommand:
    """Test init command."""

    def test_init_with_options(self, isolated_settings: Path) -> None:
        # Act
        result = runner.invoke(app, ["init", "--source-lang", "en", "--target-lang", "uk"])

        # Assert
        assert result.exit_code == 0
        assert "Default direction set to en → uk" in strip_ansi(result.stdout)
        assert load_user_config(isolated_settings) == {
            "default_source_lang": "en",
            "default_target_lang": "uk",
        }

    def test_init_prompts(self) -> None:
        """Test missing languages are asked for, retrying unsupported codes."""
        result = runner.invoke(app, ["init"], input="xx\nuk\nen\n")

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Unsupported language code: xx" in output
        assert Settings().default_source_lang == "uk"
        assert Settings().default_target_lang == "en"

    def test_init_only_once(self) -> None:
        """Test stored defaults are kept unless --force is given."""
        runner.invoke(app, ["init", "--source-lang", "en", "--target-lang", "uk"])

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert "Defaults already set" in strip_ansi(result.stdout)
        assert Settings().default_target_lang == "uk"

    def test_init_force(self) -> None:
        runner.invoke(app, ["init", "--source-lang", "en", "--target-lang", "uk"])

        result = runner.invoke(app, ["init", "--force"], input="ru\nen\n")

        assert result.exit_code == 0
        assert Settings().default_source_lang == "ru"

    def test_init_default_target_differs_from_source(self) -> None:
        """Test the suggested target is never the chosen source."""
        runner.invoke(app, ["init", "--source-lang", "en", "--target-lang", "ru"])

        result = runner.invoke(app, ["init", "--source-lang", "ru"], input="\n")

        assert result.exit_code == 0
        assert Settings().default_source_lang == "ru"
        assert Settings().default_target_lang == "en"

    def test_init_same_languages(self, isolated_settings: Path) -> None:
        result = runner.invoke(app, ["init", "--source-lang", "en", "--target-lang", "en"])

        assert result.exit_code == 1
        assert "must differ" in strip_ansi(result.stdout)
        assert not isolated_settings.exists()

    def test_translate_uses_saved_defaults(self) -> None:
        runner.invoke(app, ["init", "--source-lang", "en", "--target-lang", "uk"])

        result = runner.invoke(app, ["translate", "hello", "--demo"])

        assert result.exit_code == 0
        assert "en → uk: привіт" in strip_ansi(result.stdout)


@pytest.mark.unit
class TestRulesCommands:
    """Test rules sub-commands."""

    def test_rules_list(self) -> None:
        result = runner.invoke(app, ["rules", "list"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Auto-switch Rules" in output
        assert "Total: 4 rules" in output

    def test_rules_list_reports_malformed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGOSWITCH_RULES", json.dumps([["en", "ru", ["[а-я]"]], "bad"]))

        result = runner.invoke(app, ["rules", "list"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "1 malformed rule(s) skipped" in output
        assert "Total: 1 rules" in output

    def test_rules_list_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGOSWITCH_RULES", "[]")

        result = runner.invoke(app, ["rules", "list"])

        assert result.exit_code == 0
        assert "No auto-switch rules configured" in strip_ansi(result.stdout)

    def test_rules_check_switch(self) -> None:
        result = runner.invoke(app, ["rules", "check", "привет"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Rule Matches" in output
        assert "source 'en' → direction ru → en" in output

    def test_rules_check_no_switch(self) -> None:
        result = runner.invoke(app, ["rules", "check", "hello", "-s", "en"])

        assert result.exit_code == 0
        assert "No switch from source 'en'" in strip_ansi(result.stdout)


@pytest.mark.unit
class TestInspectionCommands:
    """Test directions and token commands."""

    def test_directions(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGOSWITCH_DIRECTIONS", '[["uk", "en"]]')

        result = runner.invoke(app, ["directions"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "Known Directions" in output
        assert "Ukrainian" in output

    def test_token(self) -> None:
        result = runner.invoke(app, ["token", "hello"])

        assert result.exit_code == 0
        assert result.stdout.strip() == generate_token("hello")

    def test_token_uses_configured_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGOSWITCH_TOKEN_SEED_B", "1000")

        result = runner.invoke(app, ["token", "hello"])

        first, second = (int(part) for part in result.stdout.strip().split("."))
        assert first ^ 1000 == second


@pytest.mark.unit
class TestCLIUtils:
    """Test shared CLI helpers."""

    def test_load_text_literal(self) -> None:
        assert load_text("hello") == "hello"

    def test_resolve_direction_default(self) -> None:
        assert resolve_direction(Settings(), None, None) is None

    def test_resolve_direction_source_only(self) -> None:
        """Test missing target comes from a known direction for the source."""
        assert resolve_direction(Settings(), "ru", None) == Direction("ru", "en")

    def test_resolve_direction_unknown_source(self) -> None:
        assert resolve_direction(Settings(), "de", None) == Direction("de", "ru")

    def test_resolve_direction_target_only(self) -> None:
        assert resolve_direction(Settings(), None, "uk") == Direction("en", "uk")

    def test_resolve_direction_target_of_known_direction(self) -> None:
        """Test target-only picks the known direction ending in that language."""
        assert resolve_direction(Settings(), None, "en") == Direction("ru", "en")

    def test_resolve_direction_same_language(self) -> None:
        with pytest.raises(ValueError, match="must differ"):
            resolve_direction(Settings(), "en", "en")
