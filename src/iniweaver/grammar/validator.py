# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Delimiter validation.

A delimiter is rejected when it is not a single character, when it is a control or
whitespace character, or when another role already uses it. Validation never mutates
anything: callers validate first and only then swap in the new grammar.
"""

from __future__ import annotations

import logging
import unicodedata

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, NoReturn

from iniweaver.core.utils import describe_char
from iniweaver.exceptions import InvalidDelimiterError
from iniweaver.grammar.roles import DelimiterRole


if TYPE_CHECKING:
    from iniweaver.exceptions import RejectionReason


logger = logging.getLogger(__name__)


def is_control(char: str) -> bool:
    """Whether `char` is a control character (Unicode category Cc)."""
    return unicodedata.category(char) == "Cc"


def is_whitespace(char: str) -> bool:
    """Whether `char` is a whitespace character, including Unicode separators like NBSP."""
    return char.isspace()


def validate_delimiter(
    candidate: str, role: DelimiterRole, active: Mapping[DelimiterRole, str]
) -> str:
    """Validate `candidate` for `role` against the currently `active` delimiters.

    `active` maps each role to its current character; the entry for `role` itself is
    ignored, so re-assigning a delimiter its current value always succeeds.

    Returns:
        The validated candidate.

    Raises:
        InvalidDelimiterError: If the candidate cannot be used for `role`.
    """
    role = DelimiterRole(role)
    if not isinstance(candidate, str) or len(candidate) != 1:
        _reject(str(candidate), role, "length")
    if is_control(candidate):
        _reject(candidate, role, "control")
    if is_whitespace(candidate):
        _reject(candidate, role, "whitespace")
    for other, char in active.items():
        if other != role and char == candidate:
            _reject(candidate, role, "collision", conflicts_with=DelimiterRole(other))
    return candidate


def validate_delimiter_set(
    delimiters: Mapping[DelimiterRole, str], *, first: Iterable[DelimiterRole | str] = ()
) -> None:
    """Validate a complete candidate delimiter set at once.

    Roles named in `first` are checked first, so when a changed delimiter collides with an
    unchanged one the error is raised for the changed role. The remaining roles follow in
    declaration order (section start, section end, comment, assignment). The first
    rejection is raised.

    Raises:
        InvalidDelimiterError: If any delimiter in the set is invalid.
    """
    ordered = dict.fromkeys(DelimiterRole(role) for role in first) | dict.fromkeys(DelimiterRole)
    for role in ordered:
        validate_delimiter(delimiters[role], role, delimiters)


def _reject(
    candidate: str,
    role: DelimiterRole,
    reason: RejectionReason,
    *,
    conflicts_with: DelimiterRole | None = None,
) -> NoReturn:
    logger.debug(
        "Rejected %s as %s delimiter: %s", describe_char(candidate), role.variable, reason
    )
    raise InvalidDelimiterError(candidate, role, reason, conflicts_with=conflicts_with)


__all__ = ("is_control", "is_whitespace", "validate_delimiter", "validate_delimiter_set")
