# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
r"""Pattern templates used to synthesize an INI grammar.

Each template is a fragment of a regular expression; the synthesizer splices delimiter
characters between them. With the default delimiters the assembled patterns are:

    section:    ^(\s*?)\[{1}\s*[...allowed name characters...]+\s*](\s*?)$
    comment:    #.*
    key/value:  ^(\s*[_\.\d\w]*\s*)=([\s\d\w\W\.]*)$
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from iniweaver.grammar.roles import DelimiterRole


SECTION_PREFIX: Final[str] = r"^(\s*?)"
"""Start of line plus optional (lazily captured) leading whitespace."""

SECTION_NAME_CHARACTERS: Final[str] = r"[_\{\}\#\+\;\%\(\)\=\?\&\$\,\:\/\.\-\w\d\s]"
"""Character class of everything allowed between the section delimiters."""

SECTION_BODY: Final[str] = rf"{{1}}\s*{SECTION_NAME_CHARACTERS}+\s*"
"""Follows the start delimiter: exactly one start delimiter, then the section name."""

SECTION_SUFFIX: Final[str] = r"(\s*?)$"
"""Optional trailing whitespace up to the end of the line."""

COMMENT_TAIL: Final[str] = r".*"
"""Follows the comment delimiter: the remainder of the line."""

KEY_PATTERN: Final[str] = r"^(\s*[_\.\d\w]*\s*)"
"""Captures leading whitespace, the key token and any whitespace before the assignment."""

VALUE_PATTERN: Final[str] = r"([\s\d\w\W\.]*)$"
"""Captures everything after the assignment delimiter to the end of the line."""

PATTERN_METACHARACTERS: Final[frozenset[str]] = frozenset("[\\^$.|?*+()")
"""Characters that get a single backslash before being embedded in a pattern."""

DEFAULT_DELIMITERS: Final[MappingProxyType[DelimiterRole, str]] = MappingProxyType({
    role: role.default for role in DelimiterRole
})


__all__ = (
    "COMMENT_TAIL",
    "DEFAULT_DELIMITERS",
    "KEY_PATTERN",
    "PATTERN_METACHARACTERS",
    "SECTION_BODY",
    "SECTION_NAME_CHARACTERS",
    "SECTION_PREFIX",
    "SECTION_SUFFIX",
    "VALUE_PATTERN",
)
