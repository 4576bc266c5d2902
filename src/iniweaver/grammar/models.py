# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Data models for delimiters, grammars and behavior flags."""

from __future__ import annotations

import re

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Self

from pydantic import ConfigDict, Field, FieldSerializationInfo, field_serializer, model_validator

from iniweaver.core.models import FROZEN_BASEDMODEL_CONFIG, BasedModel
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy, MatcherKind
from iniweaver.grammar.validator import validate_delimiter_set


class DelimiterSet(BasedModel):
    """The four delimiter characters of a grammar.

    A `DelimiterSet` is immutable and always valid: construction checks every role at once
    and raises `InvalidDelimiterError` for the first bad character, so a set that exists can
    always be compiled into a grammar.

    Example:
        >>> DelimiterSet(comment=";").comment
        ';'
        >>> DelimiterSet(comment="=")
        Traceback (most recent call last):
        ...
        iniweaver.exceptions.InvalidDelimiterError: Invalid character for comment delimiter (role: comment, character: '=', conflicts with: key_value_assignment)
    """

    model_config = FROZEN_BASEDMODEL_CONFIG

    section_start: Annotated[
        str, Field(description="""Character that opens a section header.""")
    ] = DelimiterRole.SECTION_START.default

    section_end: Annotated[
        str, Field(description="""Character that closes a section header.""")
    ] = DelimiterRole.SECTION_END.default

    comment: Annotated[
        str,
        Field(description="""Character that starts a comment; the comment runs to the end of the line."""),
    ] = DelimiterRole.COMMENT.default

    key_value_assignment: Annotated[
        str, Field(description="""Character separating a key from its value.""")
    ] = DelimiterRole.KEY_VALUE_ASSIGNMENT.default

    @model_validator(mode="after")
    def validate_delimiters(self) -> Self:
        """Validate the set as a whole, checking characters that differ from the defaults first."""
        delimiters = self.as_mapping()
        validate_delimiter_set(
            delimiters, first=(role for role in DelimiterRole if delimiters[role] != role.default)
        )
        return self

    def get(self, role: DelimiterRole | str) -> str:
        """Return the character for `role`."""
        return getattr(self, DelimiterRole(role).value)

    def as_mapping(self) -> MappingProxyType[DelimiterRole, str]:
        """Return the set as a read-only role-to-character mapping."""
        return MappingProxyType({role: getattr(self, role.value) for role in DelimiterRole})

    def replace(self, **changes: str) -> DelimiterSet:
        """Return a new, validated set with `changes` applied.

        Unlike `model_copy(update=...)`, this re-runs validation. The changed roles are checked
        first, so a collision is reported against the role being changed.
        """
        candidate = self.model_dump() | changes
        validate_delimiter_set(
            {role: candidate[role.value] for role in DelimiterRole}, first=changes
        )
        return type(self).model_validate(candidate)

    @classmethod
    def from_mapping(cls, delimiters: Mapping[DelimiterRole | str, str]) -> DelimiterSet:
        """Build a set from a mapping keyed by roles or loosely spelled role names."""
        return cls.model_validate({DelimiterRole(role).value: char for role, char in delimiters.items()})

    def changed_roles(self, other: DelimiterSet) -> tuple[DelimiterRole, ...]:
        """The roles whose character differs between this set and `other`."""
        return tuple(role for role in DelimiterRole if self.get(role) != other.get(role))


class BehaviorFlags(BasedModel):
    """Policy switches read by the parser that consumes a grammar.

    The flags have no effect here; they are stored so the parser can look them up when it
    meets keys outside a section, repeated keys or sections, or any other parse failure.
    """

    allow_keys_without_section: Annotated[
        bool,
        Field(
            description="""Accept keys that appear before any section header. When off, such keys stop the parse with an error."""
        ),
    ] = True

    allow_duplicate_keys: Annotated[
        bool,
        Field(
            description="""Accept a key repeated within one section; the last value assigned wins. When off, the duplicate stops the parse with an error."""
        ),
    ] = False

    allow_duplicate_sections: Annotated[
        bool,
        Field(
            description="""Accept a section header that appears more than once; the parser keeps a single section for it. When off, the duplicate stops the parse with an error."""
        ),
    ] = False

    throw_on_error: Annotated[
        bool,
        Field(
            description="""Raise parse failures as exceptions. When off, the parser stops and returns an empty result. Delimiter validation always raises regardless of this flag."""
        ),
    ] = True


class Grammar(BasedModel):
    """An immutable snapshot of the matchers compiled from one `DelimiterSet`.

    Build grammars with `iniweaver.grammar.synthesizer.compile_grammar`; every matcher is
    consistent with `delimiters`. The `match_*` helpers use search semantics, so a matcher
    may match anywhere in a line unless its pattern anchors itself.
    """

    model_config = FROZEN_BASEDMODEL_CONFIG | ConfigDict(arbitrary_types_allowed=True)

    delimiters: Annotated[
        DelimiterSet, Field(description="""The delimiters the matchers were built from.""")
    ]

    escape_policy: Annotated[
        EscapePolicy, Field(description="""Which delimiters were escaped when synthesizing.""")
    ] = EscapePolicy.SECTION_ONLY

    comment_matcher: Annotated[
        re.Pattern[str], Field(description="""Matches a comment line.""")
    ]

    section_matcher: Annotated[
        re.Pattern[str], Field(description="""Matches a section header line.""")
    ]

    key_value_matcher: Annotated[
        re.Pattern[str],
        Field(
            description="""Matches a key/value line; group 1 is the raw key token, group 2 the raw value."""
        ),
    ]

    @field_serializer(
        "comment_matcher", "section_matcher", "key_value_matcher", when_used="json-unless-none"
    )
    def serialize_patterns(self, value: re.Pattern[str], info: FieldSerializationInfo) -> str:
        """Serialize a compiled matcher for JSON output."""
        return value.pattern

    def matcher(self, kind: MatcherKind | str) -> re.Pattern[str]:
        """Return the matcher for `kind`."""
        return getattr(self, MatcherKind(kind).field_name)

    @property
    def patterns(self) -> MappingProxyType[MatcherKind, str]:
        """The source of every matcher, keyed by kind."""
        return MappingProxyType({kind: self.matcher(kind).pattern for kind in MatcherKind})

    def match_comment(self, line: str) -> re.Match[str] | None:
        """Search `line` with the comment matcher."""
        return self.comment_matcher.search(line)

    def match_section(self, line: str) -> re.Match[str] | None:
        """Search `line` with the section matcher."""
        return self.section_matcher.search(line)

    def match_key_value(self, line: str) -> re.Match[str] | None:
        """Search `line` with the key/value matcher."""
        return self.key_value_matcher.search(line)

    def section_name(self, line: str) -> str | None:
        """Return the raw text between the section delimiters, or None if `line` is not a section.

        Surrounding whitespace inside the delimiters is kept; trimming is the parser's job.
        """
        if not self.match_section(line):
            return None
        stripped = line.strip()
        return stripped[1:-1]

    def split_key_value(self, line: str) -> tuple[str, str] | None:
        """Return the raw `(key, value)` tokens of a key/value line, or None if it doesn't match.

        >>> from iniweaver.grammar.synthesizer import compile_grammar
        >>> compile_grammar().split_key_value("key = value")
        ('key ', ' value')
        """
        if match := self.match_key_value(line):
            return match.group(1), match.group(2)
        return None

    def serialize_for_cli(self) -> dict[str, Any]:
        """Serialize the grammar for CLI output, with matchers shown as their pattern source."""
        return {
            "delimiters": self.delimiters.serialize_for_cli(),
            "escape_policy": self.escape_policy.value,
            **{kind.field_name: pattern for kind, pattern in self.patterns.items()},
        }


__all__ = ("BehaviorFlags", "DelimiterSet", "Grammar")
