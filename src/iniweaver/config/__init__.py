# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Parser configuration and settings."""

from __future__ import annotations

from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from iniweaver.config.logging import LoggingConfigDict
    from iniweaver.config.parser import ParserConfiguration
    from iniweaver.config.settings import ParserSettings, get_parser_settings, reset_parser_settings


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "LoggingConfigDict": (__spec__.parent, "logging"),
    "ParserConfiguration": (__spec__.parent, "parser"),
    "ParserSettings": (__spec__.parent, "settings"),
    "get_parser_settings": (__spec__.parent, "settings"),
    "reset_parser_settings": (__spec__.parent, "settings"),
})


def __getattr__(name: str) -> object:
    """Dynamically import submodules and classes for the config package."""
    if name in _dynamic_imports:
        module_name, submodule_name = _dynamic_imports[name]
        module = import_module(f"{module_name}.{submodule_name}")
        result = getattr(module, name)
        globals()[name] = result  # Cache in globals for future access
        return result
    raise AttributeError(f"module {__name__} has no attribute {name}")


__all__ = (
    "LoggingConfigDict",
    "ParserConfiguration",
    "ParserSettings",
    "get_parser_settings",
    "reset_parser_settings",
)


def __dir__() -> list[str]:
    """Customize dir() to include dynamically imported names."""
    return list(__all__)
