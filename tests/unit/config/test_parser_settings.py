# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for environment-driven parser settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from iniweaver.config.parser import ParserConfiguration
from iniweaver.config.settings import ParserSettings, get_parser_settings, reset_parser_settings
from iniweaver.exceptions import InvalidDelimiterError
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy


pytestmark = [pytest.mark.unit]


class TestParserSettings:
    """Test reading settings from the environment and `.env`."""

    def test_defaults(self) -> None:
        settings = ParserSettings()
        assert settings.delimiter_set().as_mapping() == {role: role.default for role in DelimiterRole}
        assert settings.behavior_flags().model_dump() == {
            "allow_keys_without_section": True,
            "allow_duplicate_keys": False,
            "allow_duplicate_sections": False,
            "throw_on_error": True,
        }
        assert settings.escape_policy is EscapePolicy.SECTION_ONLY
        assert settings.log_level == "WARNING"
        assert settings.use_rich is True

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INIWEAVER_COMMENT_CHAR", ";")
        monkeypatch.setenv("INIWEAVER_KEY_VALUE_ASSIGNMENT_CHAR", ":")
        monkeypatch.setenv("INIWEAVER_ALLOW_DUPLICATE_KEYS", "true")
        monkeypatch.setenv("INIWEAVER_THROW_ON_ERROR", "false")
        monkeypatch.setenv("INIWEAVER_ESCAPE_POLICY", "all")
        settings = ParserSettings()
        assert settings.delimiter_set().comment == ";"
        assert settings.delimiter_set().key_value_assignment == ":"
        assert settings.allow_duplicate_keys is True
        assert settings.throw_on_error is False
        assert settings.escape_policy is EscapePolicy.ALL

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text('INIWEAVER_SECTION_START_CHAR="<"\nINIWEAVER_SECTION_END_CHAR=">"\n')
        delimiters = ParserSettings().delimiter_set()
        assert delimiters.section_start == "<"
        assert delimiters.section_end == ">"

    def test_invalid_delimiter_is_reported_when_validated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INIWEAVER_COMMENT_CHAR", "=")
        settings = ParserSettings()
        with pytest.raises(InvalidDelimiterError) as exc_info:
            settings.delimiter_set()
        assert exc_info.value.reason == "collision"

    def test_cached_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_parser_settings()
        assert get_parser_settings() is first
        monkeypatch.setenv("INIWEAVER_COMMENT_CHAR", ";")
        assert get_parser_settings().comment_char == "#"
        reset_parser_settings()
        assert get_parser_settings().comment_char == ";"


class TestConfigurationFromSettings:
    """Test building a `ParserConfiguration` from settings."""

    def test_from_explicit_settings(self) -> None:
        settings = ParserSettings(comment_char=";", allow_duplicate_sections=True, escape_policy="all")
        config = ParserConfiguration.from_settings(settings)
        assert config.comment_char == ";"
        assert config.allow_duplicate_sections is True
        assert config.escape_policy is EscapePolicy.ALL
        assert config.comment_matcher.search("; note")

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INIWEAVER_KEY_VALUE_ASSIGNMENT_CHAR", ":")
        monkeypatch.setenv("INIWEAVER_ALLOW_KEYS_WITHOUT_SECTION", "false")
        config = ParserConfiguration.from_settings()
        assert config.grammar.split_key_value("key:value") == ("key", "value")
        assert config.allow_keys_without_section is False

    def test_invalid_environment_fails_construction(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INIWEAVER_SECTION_END_CHAR", "[")
        with pytest.raises(InvalidDelimiterError) as exc_info:
            ParserConfiguration.from_settings()
        assert exc_info.value.role is DelimiterRole.SECTION_END
        assert exc_info.value.conflicts_with is DelimiterRole.SECTION_START
