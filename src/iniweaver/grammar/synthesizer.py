# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Grammar synthesis: turning a `DelimiterSet` into compiled matchers.

Everything here is a pure function of its arguments. The pattern fragments live in
`iniweaver.grammar.constants` so each rule (escaping, allowed name characters, value
capture) can be exercised on its own.

Escaping follows an `EscapePolicy`. Under the default `SECTION_ONLY` policy, section
delimiters are escaped when they are pattern metacharacters but comment and assignment
characters are embedded literally, so a metacharacter there keeps its regex meaning. When
a literal embedding cannot compile at all (for example a `(` comment character) the
escaped form is used instead and a warning is logged.
"""

from __future__ import annotations

import logging
import re

from collections.abc import Collection, Iterable

from iniweaver.core.utils import describe_char
from iniweaver.grammar.constants import (
    COMMENT_TAIL,
    KEY_PATTERN,
    PATTERN_METACHARACTERS,
    SECTION_BODY,
    SECTION_PREFIX,
    SECTION_SUFFIX,
    VALUE_PATTERN,
)
from iniweaver.grammar.models import DelimiterSet, Grammar
from iniweaver.grammar.roles import DelimiterRole, EscapePolicy, MatcherKind


logger = logging.getLogger(__name__)


def escape_delimiter(char: str, metacharacters: Collection[str] = PATTERN_METACHARACTERS) -> str:
    """Prefix `char` with a single backslash if it is one of `metacharacters`.

    >>> escape_delimiter("(")
    '\\\\('
    >>> escape_delimiter("#")
    '#'
    """
    return f"\\{char}" if char in metacharacters else char


def _embed(char: str, role: DelimiterRole, policy: EscapePolicy) -> str:
    if policy.escapes(role):
        return escape_delimiter(char)
    if char in PATTERN_METACHARACTERS:
        logger.warning(
            "%s delimiter %s is a pattern metacharacter and is embedded without escaping",
            role.as_title,
            describe_char(char),
        )
    return char


def section_pattern(start: str, end: str) -> str:
    """Build the section header pattern for the given start and end delimiters."""
    return f"{SECTION_PREFIX}{escape_delimiter(start)}{SECTION_BODY}{escape_delimiter(end)}{SECTION_SUFFIX}"


def comment_pattern(comment: str, policy: EscapePolicy = EscapePolicy.SECTION_ONLY) -> str:
    """Build the comment pattern: the comment character followed by the rest of the line."""
    return f"{_embed(comment, DelimiterRole.COMMENT, policy)}{COMMENT_TAIL}"


def key_value_pattern(assignment: str, policy: EscapePolicy = EscapePolicy.SECTION_ONLY) -> str:
    """Build the key/value pattern around the assignment character."""
    return f"{KEY_PATTERN}{_embed(assignment, DelimiterRole.KEY_VALUE_ASSIGNMENT, policy)}{VALUE_PATTERN}"


def _pattern_for(kind: MatcherKind, delimiters: DelimiterSet, policy: EscapePolicy) -> str:
    match kind:
        case MatcherKind.SECTION:
            return section_pattern(delimiters.section_start, delimiters.section_end)
        case MatcherKind.COMMENT:
            return comment_pattern(delimiters.comment, policy)
        case MatcherKind.KEY_VALUE:
            return key_value_pattern(delimiters.key_value_assignment, policy)


def synthesize(
    kind: MatcherKind | str,
    delimiters: DelimiterSet,
    policy: EscapePolicy = EscapePolicy.SECTION_ONLY,
) -> re.Pattern[str]:
    """Compile a fresh matcher of `kind` for `delimiters`.

    If the pattern built under `policy` does not compile, the matcher is rebuilt with every
    delimiter escaped. This can only happen for comment and assignment characters embedded
    literally; section patterns always escape their metacharacters.
    """
    kind = MatcherKind(kind)
    pattern = _pattern_for(kind, delimiters, policy)
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        roles = ", ".join(
            f"{role.variable}={describe_char(delimiters.get(role))}" for role in kind.roles
        )
        logger.warning(
            "%s pattern %r does not compile (%s); escaping %s instead", kind.as_title, pattern, e, roles
        )
        compiled = re.compile(_pattern_for(kind, delimiters, EscapePolicy.ALL))
    logger.debug("Synthesized %s matcher: %s", kind.variable, compiled.pattern)
    return compiled


def compile_grammar(
    delimiters: DelimiterSet | None = None, *, policy: EscapePolicy = EscapePolicy.SECTION_ONLY
) -> Grammar:
    """Compile every matcher for `delimiters` (the defaults when omitted) into a new `Grammar`."""
    if delimiters is None:
        delimiters = DelimiterSet()
    policy = EscapePolicy(policy)
    return Grammar(
        delimiters=delimiters,
        escape_policy=policy,
        **{kind.field_name: synthesize(kind, delimiters, policy) for kind in MatcherKind},
    )


def refresh_grammar(
    grammar: Grammar, delimiters: DelimiterSet, changed: Iterable[DelimiterRole | str]
) -> Grammar:
    """Return a new grammar for `delimiters`, regenerating only the matchers `changed` roles feed.

    Matchers that don't depend on a changed role are carried over from `grammar`.
    Re-assigning a role its current value still counts as a change and regenerates its matcher.
    """
    kinds = {DelimiterRole(role).matcher for role in changed}
    updates = {
        kind.field_name: synthesize(kind, delimiters, grammar.escape_policy) for kind in kinds
    }
    return grammar.model_copy(update={"delimiters": delimiters, **updates})


def build_grammar(
    *,
    section_start: str = DelimiterRole.SECTION_START.default,
    section_end: str = DelimiterRole.SECTION_END.default,
    comment: str = DelimiterRole.COMMENT.default,
    key_value_assignment: str = DelimiterRole.KEY_VALUE_ASSIGNMENT.default,
    policy: EscapePolicy = EscapePolicy.SECTION_ONLY,
) -> Grammar:
    """Validate a delimiter set and compile it into a read-only `Grammar` in one step.

    Raises:
        InvalidDelimiterError: If any delimiter is invalid.
    """
    return compile_grammar(
        DelimiterSet(
            section_start=section_start,
            section_end=section_end,
            comment=comment,
            key_value_assignment=key_value_assignment,
        ),
        policy=policy,
    )


__all__ = (
    "build_grammar",
    "comment_pattern",
    "compile_grammar",
    "escape_delimiter",
    "key_value_pattern",
    "refresh_grammar",
    "section_pattern",
    "synthesize",
)
