# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Enums naming delimiter roles, matcher kinds and escaping policies."""

from __future__ import annotations

from iniweaver.core.enum import BaseEnum


class MatcherKind(str, BaseEnum):
    """The line categories a grammar can recognize."""

    COMMENT = "comment"
    SECTION = "section"
    KEY_VALUE = "key_value"

    __slots__ = ()

    @property
    def roles(self) -> tuple[DelimiterRole, ...]:
        """The delimiter roles this matcher is built from."""
        return {
            MatcherKind.COMMENT: (DelimiterRole.COMMENT,),
            MatcherKind.SECTION: (DelimiterRole.SECTION_START, DelimiterRole.SECTION_END),
            MatcherKind.KEY_VALUE: (DelimiterRole.KEY_VALUE_ASSIGNMENT,),
        }[self]

    @property
    def field_name(self) -> str:
        """The `Grammar` field holding this kind of matcher."""
        return f"{self.value}_matcher"


class DelimiterRole(str, BaseEnum):
    """The four delimiter characters of an INI-style grammar."""

    SECTION_START = "section_start"
    SECTION_END = "section_end"
    COMMENT = "comment"
    KEY_VALUE_ASSIGNMENT = "key_value_assignment"

    __slots__ = ()

    @property
    def matcher(self) -> MatcherKind:
        """The matcher that must be regenerated when this delimiter changes."""
        if self in {DelimiterRole.SECTION_START, DelimiterRole.SECTION_END}:
            return MatcherKind.SECTION
        if self == DelimiterRole.COMMENT:
            return MatcherKind.COMMENT
        return MatcherKind.KEY_VALUE

    @property
    def default(self) -> str:
        """The default character for this role."""
        return {
            DelimiterRole.SECTION_START: "[",
            DelimiterRole.SECTION_END: "]",
            DelimiterRole.COMMENT: "#",
            DelimiterRole.KEY_VALUE_ASSIGNMENT: "=",
        }[self]

    @property
    def is_section(self) -> bool:
        """Whether the role delimits a section header."""
        return self.matcher == MatcherKind.SECTION


class EscapePolicy(str, BaseEnum):
    """Which delimiters are backslash-escaped before being embedded in a pattern.

    `SECTION_ONLY` reproduces the long-standing grammar: section delimiters that are pattern
    metacharacters are escaped, while comment and assignment characters are embedded as-is.
    A metacharacter chosen as a comment or assignment delimiter therefore keeps its pattern
    meaning (a `.` comment character matches any character). `ALL` escapes every delimiter.
    """

    SECTION_ONLY = "section_only"
    ALL = "all"

    __slots__ = ()

    def escapes(self, role: DelimiterRole) -> bool:
        """Whether this policy escapes metacharacters for the given role."""
        return self == EscapePolicy.ALL or role.is_section


__all__ = ("DelimiterRole", "EscapePolicy", "MatcherKind")
