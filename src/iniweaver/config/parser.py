# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The mutable parser configuration handed to an INI parser.

`ParserConfiguration` owns the current `DelimiterSet`, the `Grammar` compiled from it and
the `BehaviorFlags`. Delimiter setters validate before touching anything and regenerate the
affected matcher before returning, so the grammar a parser reads is never stale and never
half-updated.

The object itself is not synchronized. Share one configuration per parsing session, or
hand other threads the immutable `grammar` snapshot instead.
"""

from __future__ import annotations

import logging

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from iniweaver.grammar.models import BehaviorFlags, DelimiterSet, Grammar
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy
from iniweaver.grammar.synthesizer import compile_grammar, refresh_grammar
from iniweaver.grammar.validator import validate_delimiter, validate_delimiter_set


if TYPE_CHECKING:
    import re

    from iniweaver.config.settings import ParserSettings


logger = logging.getLogger(__name__)


class ParserConfiguration:
    r"""Delimiters, compiled matchers and behavior flags for one INI parser.

    Example:
        >>> config = ParserConfiguration()
        >>> bool(config.section_matcher.search("[Section1]"))
        True
        >>> config.comment_char = ";"
        >>> bool(config.comment_matcher.search("; a comment"))
        True
        >>> config.key_value_assignment_char = ";"
        Traceback (most recent call last):
        ...
        iniweaver.exceptions.InvalidDelimiterError: Invalid character for key value assignment delimiter (role: key_value_assignment, character: ';', conflicts with: comment)
    """

    __slots__ = ("_delimiters", "_flags", "_grammar")

    _delimiters: DelimiterSet
    _flags: BehaviorFlags
    _grammar: Grammar

    def __init__(
        self,
        *,
        section_start_char: str = DelimiterRole.SECTION_START.default,
        section_end_char: str = DelimiterRole.SECTION_END.default,
        comment_char: str = DelimiterRole.COMMENT.default,
        key_value_assignment_char: str = DelimiterRole.KEY_VALUE_ASSIGNMENT.default,
        allow_keys_without_section: bool = True,
        allow_duplicate_keys: bool = False,
        allow_duplicate_sections: bool = False,
        throw_on_error: bool = True,
        escape_policy: EscapePolicy | str = EscapePolicy.SECTION_ONLY,
    ) -> None:
        """Initialize a configuration, validating and compiling the delimiters.

        Raises:
            InvalidDelimiterError: If the delimiters are invalid.
        """
        self._delimiters = DelimiterSet(
            section_start=section_start_char,
            section_end=section_end_char,
            comment=comment_char,
            key_value_assignment=key_value_assignment_char,
        )
        self._grammar = compile_grammar(self._delimiters, policy=EscapePolicy(escape_policy))
        self._flags = BehaviorFlags(
            allow_keys_without_section=allow_keys_without_section,
            allow_duplicate_keys=allow_duplicate_keys,
            allow_duplicate_sections=allow_duplicate_sections,
            throw_on_error=throw_on_error,
        )

    @classmethod
    def from_settings(cls, settings: ParserSettings | None = None) -> ParserConfiguration:
        """Build a configuration from `ParserSettings` (environment and `.env` by default).

        Raises:
            InvalidDelimiterError: If a configured delimiter is invalid.
        """
        if settings is None:
            from iniweaver.config.settings import get_parser_settings

            settings = get_parser_settings()
        delimiters = settings.delimiter_set()
        return cls(
            section_start_char=delimiters.section_start,
            section_end_char=delimiters.section_end,
            comment_char=delimiters.comment,
            key_value_assignment_char=delimiters.key_value_assignment,
            escape_policy=settings.escape_policy,
            **settings.behavior_flags().model_dump(),
        )

    # ---------------------------------------------------------------------
    # Grammar read points
    # ---------------------------------------------------------------------

    @property
    def grammar(self) -> Grammar:
        """The current immutable grammar snapshot."""
        return self._grammar

    @property
    def delimiters(self) -> DelimiterSet:
        """The current delimiter set."""
        return self._delimiters

    @property
    def escape_policy(self) -> EscapePolicy:
        """Which delimiters are escaped when matchers are synthesized."""
        return self._grammar.escape_policy

    @property
    def comment_matcher(self) -> re.Pattern[str]:
        """Matches a comment line."""
        return self._grammar.comment_matcher

    @property
    def section_matcher(self) -> re.Pattern[str]:
        """Matches a section header line."""
        return self._grammar.section_matcher

    @property
    def key_value_matcher(self) -> re.Pattern[str]:
        """Matches a key/value line; group 1 is the raw key, group 2 the raw value."""
        return self._grammar.key_value_matcher

    # ---------------------------------------------------------------------
    # Delimiters
    # ---------------------------------------------------------------------

    @property
    def section_start_char(self) -> str:
        """The character that opens a section name. Defaults to `[`."""
        return self._delimiters.section_start

    @section_start_char.setter
    def section_start_char(self, value: str) -> None:
        self.set_delimiter(DelimiterRole.SECTION_START, value)

    @property
    def section_end_char(self) -> str:
        """The character that closes a section name. Defaults to `]`."""
        return self._delimiters.section_end

    @section_end_char.setter
    def section_end_char(self, value: str) -> None:
        self.set_delimiter(DelimiterRole.SECTION_END, value)

    @property
    def comment_char(self) -> str:
        """The character that starts a comment running to the end of the line. Defaults to `#`."""
        return self._delimiters.comment

    @comment_char.setter
    def comment_char(self, value: str) -> None:
        self.set_delimiter(DelimiterRole.COMMENT, value)

    @property
    def key_value_assignment_char(self) -> str:
        """The character that assigns a value to a key. Defaults to `=`."""
        return self._delimiters.key_value_assignment

    @key_value_assignment_char.setter
    def key_value_assignment_char(self, value: str) -> None:
        self.set_delimiter(DelimiterRole.KEY_VALUE_ASSIGNMENT, value)

    def set_delimiter(self, role: DelimiterRole | str, value: str) -> Grammar:
        """Assign one delimiter and regenerate the matcher that depends on it.

        Returns:
            The new grammar snapshot.

        Raises:
            InvalidDelimiterError: If `value` cannot be used for `role`. Nothing changes.
        """
        role = DelimiterRole(role)
        validate_delimiter(value, role, self._delimiters.as_mapping())
        delimiters = self._delimiters.replace(**{role.value: value})
        self._grammar = refresh_grammar(self._grammar, delimiters, (role,))
        self._delimiters = delimiters
        logger.debug("Set %s delimiter to %r", role.variable, value)
        return self._grammar

    def apply_delimiters(
        self, delimiters: DelimiterSet | Mapping[DelimiterRole | str, str]
    ) -> Grammar:
        """Swap in a whole delimiter set at once.

        A mapping may name only some roles; the rest keep their current characters. The
        candidate set is validated as a whole, so delimiters can trade places (for example
        swapping the comment and assignment characters), which one-at-a-time assignment
        would reject as a collision.

        Returns:
            The new grammar snapshot.

        Raises:
            InvalidDelimiterError: If the resulting set is invalid. Nothing changes.
        """
        if not isinstance(delimiters, DelimiterSet):
            current = {role: self._delimiters.get(role) for role in DelimiterRole}
            changes = {DelimiterRole(role): char for role, char in delimiters.items()}
            validate_delimiter_set(current | changes, first=changes)
            delimiters = DelimiterSet.from_mapping(current | changes)
        changed = delimiters.changed_roles(self._delimiters)
        self._grammar = refresh_grammar(self._grammar, delimiters, changed)
        self._delimiters = delimiters
        logger.debug("Applied delimiters %s", delimiters.serialize_for_cli())
        return self._grammar

    # ---------------------------------------------------------------------
    # Behavior flags
    # ---------------------------------------------------------------------

    @property
    def flags(self) -> BehaviorFlags:
        """The behavior flags read by the parser."""
        return self._flags

    @property
    def allow_keys_without_section(self) -> bool:
        """Allow keys that don't belong to any section. Defaults to True."""
        return self._flags.allow_keys_without_section

    @allow_keys_without_section.setter
    def allow_keys_without_section(self, value: bool) -> None:
        self._flags.allow_keys_without_section = value

    @property
    def allow_duplicate_keys(self) -> bool:
        """Allow duplicate keys in a section; the last assigned value wins. Defaults to False."""
        return self._flags.allow_duplicate_keys

    @allow_duplicate_keys.setter
    def allow_duplicate_keys(self, value: bool) -> None:
        self._flags.allow_duplicate_keys = value

    @property
    def allow_duplicate_sections(self) -> bool:
        """Allow a section to appear more than once. Defaults to False."""
        return self._flags.allow_duplicate_sections

    @allow_duplicate_sections.setter
    def allow_duplicate_sections(self, value: bool) -> None:
        self._flags.allow_duplicate_sections = value

    @property
    def throw_on_error(self) -> bool:
        """Raise parse errors instead of returning an empty result. Defaults to True."""
        return self._flags.throw_on_error

    @throw_on_error.setter
    def throw_on_error(self, value: bool) -> None:
        self._flags.throw_on_error = value

    # ---------------------------------------------------------------------
    # Copying and serialization
    # ---------------------------------------------------------------------

    def clone(self) -> ParserConfiguration:
        """Return an independent copy; changes to either side don't affect the other."""
        twin = object.__new__(type(self))
        twin._delimiters = self._delimiters
        twin._grammar = self._grammar
        twin._flags = self._flags.model_copy()
        return twin

    __copy__ = clone

    def __deepcopy__(self, memo: dict[int, Any]) -> ParserConfiguration:
        """Deep copies are clones; the grammar and delimiters are immutable already."""
        return self.clone()

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration, with matchers shown as their pattern source."""
        return {**self._grammar.serialize_for_cli(), "flags": self._flags.model_dump()}

    def __eq__(self, other: object) -> bool:
        """Configurations are equal when their delimiters, escape policy and flags are."""
        if not isinstance(other, ParserConfiguration):
            return NotImplemented
        return (
            self._delimiters == other._delimiters
            and self.escape_policy == other.escape_policy
            and self._flags == other._flags
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a compact representation listing the delimiters and flags."""
        delimiters = ", ".join(
            f"{role.variable}={self._delimiters.get(role)!r}" for role in DelimiterRole
        )
        flags = ", ".join(f"{name}={value}" for name, value in self._flags.model_dump().items())
        return f"{type(self).__name__}({delimiters}, {flags})"


__all__ = ("ParserConfiguration",)
