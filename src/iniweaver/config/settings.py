# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""
Parser configuration settings.

Configuration sources (priority order):
1. Explicit keyword arguments
2. Environment variables
3. `.env` file in the working directory
4. Built-in defaults

Environment Variables:
    INIWEAVER_SECTION_START_CHAR: Section header opening delimiter (default: [)
    INIWEAVER_SECTION_END_CHAR: Section header closing delimiter (default: ])
    INIWEAVER_COMMENT_CHAR: Comment delimiter (default: #)
    INIWEAVER_KEY_VALUE_ASSIGNMENT_CHAR: Key/value separator (default: =)
    INIWEAVER_ALLOW_KEYS_WITHOUT_SECTION: (default: true)
    INIWEAVER_ALLOW_DUPLICATE_KEYS: (default: false)
    INIWEAVER_ALLOW_DUPLICATE_SECTIONS: (default: false)
    INIWEAVER_THROW_ON_ERROR: (default: true)
    INIWEAVER_ESCAPE_POLICY: section_only or all (default: section_only)
    INIWEAVER_LOG_LEVEL: Log level for the iniweaver logger (default: WARNING)
    INIWEAVER_USE_RICH: Use rich formatting for log output (default: true)
"""

from __future__ import annotations

from functools import cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from iniweaver.grammar.models import BehaviorFlags, DelimiterSet
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy


class ParserSettings(BaseSettings):
    """Settings used to build a `ParserConfiguration`.

    Delimiters are kept as plain strings here; they are validated when the settings are
    turned into a `DelimiterSet`, so a bad value raises `InvalidDelimiterError` like any
    other delimiter assignment.
    """

    model_config = SettingsConfigDict(
        env_prefix="INIWEAVER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    section_start_char: Annotated[
        str, Field(default=DelimiterRole.SECTION_START.default, description="Section header opening delimiter.")
    ]

    section_end_char: Annotated[
        str, Field(default=DelimiterRole.SECTION_END.default, description="Section header closing delimiter.")
    ]

    comment_char: Annotated[
        str, Field(default=DelimiterRole.COMMENT.default, description="Comment delimiter.")
    ]

    key_value_assignment_char: Annotated[
        str,
        Field(default=DelimiterRole.KEY_VALUE_ASSIGNMENT.default, description="Key/value separator."),
    ]

    allow_keys_without_section: Annotated[
        bool, Field(default=True, description="Accept keys before any section header.")
    ]

    allow_duplicate_keys: Annotated[
        bool, Field(default=False, description="Accept repeated keys; the last value wins.")
    ]

    allow_duplicate_sections: Annotated[
        bool, Field(default=False, description="Accept repeated section headers.")
    ]

    throw_on_error: Annotated[
        bool, Field(default=True, description="Raise parse failures instead of returning an empty result.")
    ]

    escape_policy: Annotated[
        EscapePolicy,
        Field(
            default=EscapePolicy.SECTION_ONLY,
            description="Which delimiters are escaped before being embedded in a pattern.",
        ),
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(default="WARNING", description="Log level for the iniweaver logger."),
    ]

    use_rich: Annotated[
        bool, Field(default=True, description="Use rich formatting for log output.")
    ]

    def delimiter_set(self) -> DelimiterSet:
        """Validate the configured delimiters.

        Raises:
            InvalidDelimiterError: If any configured delimiter is invalid.
        """
        return DelimiterSet(
            section_start=self.section_start_char,
            section_end=self.section_end_char,
            comment=self.comment_char,
            key_value_assignment=self.key_value_assignment_char,
        )

    def behavior_flags(self) -> BehaviorFlags:
        """The configured behavior flags."""
        return BehaviorFlags(
            allow_keys_without_section=self.allow_keys_without_section,
            allow_duplicate_keys=self.allow_duplicate_keys,
            allow_duplicate_sections=self.allow_duplicate_sections,
            throw_on_error=self.throw_on_error,
        )


@cache
def get_parser_settings() -> ParserSettings:
    """Get cached parser settings instance."""
    return ParserSettings()


def reset_parser_settings() -> None:
    """Drop the cached settings so the next `get_parser_settings` call re-reads the environment."""
    get_parser_settings.cache_clear()


__all__ = ("ParserSettings", "get_parser_settings", "reset_parser_settings")
