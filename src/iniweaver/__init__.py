# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""iniweaver: grammar configuration for INI-style text parsers.

iniweaver builds the comment, section and key/value matchers an INI parser uses, from a
set of configurable delimiter characters, and stores the behavior flags that tell the
parser how to treat malformed or duplicate input. It does not parse documents itself.
"""

from __future__ import annotations

from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING

from iniweaver._version import __version__
from iniweaver.exceptions import ConfigurationError, IniWeaverError, InvalidDelimiterError


if TYPE_CHECKING:
    from iniweaver.config.parser import ParserConfiguration
    from iniweaver.config.settings import ParserSettings
    from iniweaver.grammar.models import BehaviorFlags, DelimiterSet, Grammar
    from iniweaver.grammar.roles import DelimiterRole, EscapePolicy, MatcherKind
    from iniweaver.grammar.synthesizer import build_grammar, compile_grammar


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "ParserConfiguration": (__spec__.parent, "config.parser"),
    "ParserSettings": (__spec__.parent, "config.settings"),
    "BehaviorFlags": (__spec__.parent, "grammar.models"),
    "DelimiterSet": (__spec__.parent, "grammar.models"),
    "Grammar": (__spec__.parent, "grammar.models"),
    "DelimiterRole": (__spec__.parent, "grammar.roles"),
    "EscapePolicy": (__spec__.parent, "grammar.roles"),
    "MatcherKind": (__spec__.parent, "grammar.roles"),
    "build_grammar": (__spec__.parent, "grammar.synthesizer"),
    "compile_grammar": (__spec__.parent, "grammar.synthesizer"),
})


def __getattr__(name: str) -> object:
    """Dynamically import submodules and classes for the package."""
    if name in _dynamic_imports:
        module_name, submodule_name = _dynamic_imports[name]
        module = import_module(f"{module_name}.{submodule_name}")
        result = getattr(module, name)
        globals()[name] = result  # Cache in globals for future access
        return result
    raise AttributeError(f"module {__name__} has no attribute {name}")


__all__ = (
    "BehaviorFlags",
    "ConfigurationError",
    "DelimiterRole",
    "DelimiterSet",
    "EscapePolicy",
    "Grammar",
    "IniWeaverError",
    "InvalidDelimiterError",
    "MatcherKind",
    "ParserConfiguration",
    "ParserSettings",
    "__version__",
    "build_grammar",
    "compile_grammar",
)


def __dir__() -> list[str]:
    """Customize dir() to include dynamically imported names."""
    return list(__all__)
