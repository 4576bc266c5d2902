# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Grammar synthesis for INI-style text.

The grammar layer is organized into three tiers:

1. **Validation** (`validator.py`): rejects delimiter characters that would corrupt a pattern or collide with another delimiter.
2. **Synthesis** (`synthesizer.py`): builds the comment, section and key/value matchers from the pattern fragments in `constants.py`.
3. **Models** (`models.py`): the immutable `DelimiterSet` and `Grammar` snapshots, plus the `BehaviorFlags` a parser reads.

Key exports:
    - DelimiterSet: A validated set of the four delimiter characters
    - Grammar: Compiled matchers for one delimiter set
    - compile_grammar: Compile a `DelimiterSet` into a `Grammar`
    - build_grammar: Validate and compile loose delimiter characters in one call
"""

from __future__ import annotations

from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from iniweaver.grammar.models import BehaviorFlags, DelimiterSet, Grammar
    from iniweaver.grammar.roles import DelimiterRole, EscapePolicy, MatcherKind
    from iniweaver.grammar.synthesizer import (
        build_grammar,
        compile_grammar,
        escape_delimiter,
        refresh_grammar,
        synthesize,
    )
    from iniweaver.grammar.validator import validate_delimiter, validate_delimiter_set


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "BehaviorFlags": (__spec__.parent, "models"),
    "DelimiterSet": (__spec__.parent, "models"),
    "Grammar": (__spec__.parent, "models"),
    "DelimiterRole": (__spec__.parent, "roles"),
    "EscapePolicy": (__spec__.parent, "roles"),
    "MatcherKind": (__spec__.parent, "roles"),
    "build_grammar": (__spec__.parent, "synthesizer"),
    "compile_grammar": (__spec__.parent, "synthesizer"),
    "escape_delimiter": (__spec__.parent, "synthesizer"),
    "refresh_grammar": (__spec__.parent, "synthesizer"),
    "synthesize": (__spec__.parent, "synthesizer"),
    "validate_delimiter": (__spec__.parent, "validator"),
    "validate_delimiter_set": (__spec__.parent, "validator"),
})


def __getattr__(name: str) -> object:
    """Dynamically import submodules and classes for the grammar package."""
    if name in _dynamic_imports:
        module_name, submodule_name = _dynamic_imports[name]
        module = import_module(f"{module_name}.{submodule_name}")
        result = getattr(module, name)
        globals()[name] = result  # Cache in globals for future access
        return result
    raise AttributeError(f"module {__name__} has no attribute {name}")


__all__ = (
    "BehaviorFlags",
    "DelimiterRole",
    "DelimiterSet",
    "EscapePolicy",
    "Grammar",
    "MatcherKind",
    "build_grammar",
    "compile_grammar",
    "escape_delimiter",
    "refresh_grammar",
    "synthesize",
    "validate_delimiter",
    "validate_delimiter_set",
)


def __dir__() -> list[str]:
    """Customize dir() to include dynamically imported names."""
    return list(__all__)
