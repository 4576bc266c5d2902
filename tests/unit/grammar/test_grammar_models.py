# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for DelimiterSet, BehaviorFlags and Grammar models."""

from __future__ import annotations

import json

import pytest

from pydantic import ValidationError as PydanticValidationError

from iniweaver.exceptions import InvalidDelimiterError
from iniweaver.grammar.models import BehaviorFlags, DelimiterSet, Grammar
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy, MatcherKind
from iniweaver.grammar.synthesizer import compile_grammar


pytestmark = [pytest.mark.unit]


class TestDelimiterSet:
    """Test construction and copying of delimiter sets."""

    def test_defaults(self) -> None:
        delimiters = DelimiterSet()
        assert delimiters.section_start == "["
        assert delimiters.section_end == "]"
        assert delimiters.comment == "#"
        assert delimiters.key_value_assignment == "="

    def test_replace_names_the_changed_role(self) -> None:
        with pytest.raises(InvalidDelimiterError) as exc_info:
            DelimiterSet().replace(key_value_assignment="#")
        assert exc_info.value.role is DelimiterRole.KEY_VALUE_ASSIGNMENT
        assert exc_info.value.conflicts_with is DelimiterRole.COMMENT

    def test_construction_names_the_non_default_role(self) -> None:
        with pytest.raises(InvalidDelimiterError) as exc_info:
            DelimiterSet(section_end="[")
        assert exc_info.value.role is DelimiterRole.SECTION_END
        assert exc_info.value.conflicts_with is DelimiterRole.SECTION_START

    def test_is_frozen(self) -> None:
        delimiters = DelimiterSet()
        with pytest.raises(PydanticValidationError):
            delimiters.comment = ";"  # type: ignore[misc]

    def test_construction_validates(self) -> None:
        with pytest.raises(InvalidDelimiterError) as exc_info:
            DelimiterSet(comment="=")
        assert exc_info.value.role is DelimiterRole.COMMENT

    def test_equal_section_delimiters_rejected(self) -> None:
        with pytest.raises(InvalidDelimiterError) as exc_info:
            DelimiterSet(section_start="|", section_end="|")
        assert exc_info.value.conflicts_with is DelimiterRole.SECTION_END

    def test_whitespace_is_not_stripped(self) -> None:
        with pytest.raises(InvalidDelimiterError) as exc_info:
            DelimiterSet(comment=" ")
        assert exc_info.value.reason == "whitespace"

    def test_replace_revalidates(self) -> None:
        delimiters = DelimiterSet()
        assert delimiters.replace(comment=";").comment == ";"
        with pytest.raises(InvalidDelimiterError):
            delimiters.replace(comment="[")
        assert delimiters.comment == "#"

    def test_replace_allows_swaps(self) -> None:
        swapped = DelimiterSet().replace(comment="=", key_value_assignment="#")
        assert (swapped.comment, swapped.key_value_assignment) == ("=", "#")

    def test_from_mapping_accepts_loose_role_names(self) -> None:
        delimiters = DelimiterSet.from_mapping({"SectionStart": "<", "section-end": ">"})
        assert delimiters.section_start == "<"
        assert delimiters.section_end == ">"
        assert delimiters.comment == "#"

    def test_get_and_changed_roles(self) -> None:
        before = DelimiterSet()
        after = before.replace(section_end=")", comment=";")
        assert after.get("section_end") == ")"
        assert after.changed_roles(before) == (DelimiterRole.SECTION_END, DelimiterRole.COMMENT)
        assert before.changed_roles(before) == ()


class TestBehaviorFlags:
    """Test the behavior flag defaults and assignment."""

    def test_defaults(self) -> None:
        flags = BehaviorFlags()
        assert flags.allow_keys_without_section is True
        assert flags.allow_duplicate_keys is False
        assert flags.allow_duplicate_sections is False
        assert flags.throw_on_error is True

    def test_assignment_is_plain(self) -> None:
        flags = BehaviorFlags()
        flags.allow_duplicate_keys = True
        flags.throw_on_error = False
        assert flags.allow_duplicate_keys is True
        assert flags.throw_on_error is False
        assert flags.allow_keys_without_section is True


class TestGrammar:
    """Test the grammar snapshot model."""

    def test_is_frozen(self, default_grammar: Grammar) -> None:
        with pytest.raises(PydanticValidationError):
            default_grammar.escape_policy = EscapePolicy.ALL  # type: ignore[misc]

    def test_matcher_lookup(self, default_grammar: Grammar) -> None:
        assert default_grammar.matcher(MatcherKind.COMMENT) is default_grammar.comment_matcher
        assert default_grammar.matcher("section") is default_grammar.section_matcher
        assert default_grammar.matcher("key_value") is default_grammar.key_value_matcher

    def test_patterns(self, default_grammar: Grammar) -> None:
        assert default_grammar.patterns[MatcherKind.COMMENT] == "#.*"

    def test_json_serialization_uses_pattern_source(self, default_grammar: Grammar) -> None:
        data = json.loads(default_grammar.model_dump_json())
        assert data["comment_matcher"] == "#.*"
        assert data["delimiters"]["section_start"] == "["
        assert data["escape_policy"] == "section_only"

    def test_serialize_for_cli(self) -> None:
        grammar = compile_grammar(DelimiterSet(comment=";"), policy=EscapePolicy.ALL)
        data = grammar.serialize_for_cli()
        assert data["comment_matcher"] == ";.*"
        assert data["escape_policy"] == "all"
        assert data["delimiters"]["comment"] == ";"

    def test_equal_delimiters_give_equal_patterns(self) -> None:
        assert dict(compile_grammar().patterns) == dict(compile_grammar(DelimiterSet()).patterns)
