# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for BaseEnum string conversion and the grammar enums built on it."""

from __future__ import annotations

import pytest

from iniweaver.core.utils import describe_char
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy, MatcherKind


pytestmark = [pytest.mark.unit]


class TestFromString:
    """Test the forgiving string conversion."""

    @pytest.mark.parametrize(
        "value",
        ["section_start", "SECTION_START", "SectionStart", "sectionStart", "section-start", "Section Start"],
    )
    def test_spellings_resolve(self, value: str) -> None:
        assert DelimiterRole.from_string(value) is DelimiterRole.SECTION_START
        assert DelimiterRole(value) is DelimiterRole.SECTION_START

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError, match="not a valid DelimiterRole"):
            DelimiterRole.from_string("semicolon")

    def test_escape_policy_from_settings_value(self) -> None:
        assert EscapePolicy("ALL") is EscapePolicy.ALL
        assert EscapePolicy("section-only") is EscapePolicy.SECTION_ONLY


class TestRoles:
    """Test the relationships between roles and matchers."""

    def test_each_role_feeds_one_matcher(self) -> None:
        assert DelimiterRole.SECTION_START.matcher is MatcherKind.SECTION
        assert DelimiterRole.SECTION_END.matcher is MatcherKind.SECTION
        assert DelimiterRole.COMMENT.matcher is MatcherKind.COMMENT
        assert DelimiterRole.KEY_VALUE_ASSIGNMENT.matcher is MatcherKind.KEY_VALUE

    def test_matcher_roles_round_trip(self) -> None:
        for kind in MatcherKind:
            assert all(role.matcher is kind for role in kind.roles)

    def test_defaults(self) -> None:
        assert [role.default for role in DelimiterRole] == ["[", "]", "#", "="]

    def test_escape_policy(self) -> None:
        assert EscapePolicy.SECTION_ONLY.escapes(DelimiterRole.SECTION_START)
        assert not EscapePolicy.SECTION_ONLY.escapes(DelimiterRole.COMMENT)
        assert EscapePolicy.ALL.escapes(DelimiterRole.KEY_VALUE_ASSIGNMENT)

    def test_display_forms(self) -> None:
        assert str(DelimiterRole.KEY_VALUE_ASSIGNMENT) == "key value assignment"
        assert DelimiterRole.KEY_VALUE_ASSIGNMENT.variable == "key_value_assignment"
        assert MatcherKind.KEY_VALUE.field_name == "key_value_matcher"


class TestDescribeChar:
    """Test the character descriptions used in errors and logs."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("[", "'['"),
            ("\t", "U+0009"),
            (" ", "U+0020 (SPACE)"),
            ("\u00a0", "U+00A0 (NO-BREAK SPACE)"),
            ("ab", "'ab'"),
        ],
    )
    def test_describe(self, char: str, expected: str) -> None:
        assert describe_char(char) == expected
