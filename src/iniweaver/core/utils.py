# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Common utilities for type handling."""

import unicodedata

from typing import Any, cast

import textcase

from pydantic.fields import ComputedFieldInfo, FieldInfo


def generate_title(model: type[Any]) -> str:
    """Generate a title for a model."""
    model_name = (
        model.__name__
        if hasattr(model, "__name__")
        else (
            model.__class__.__name__
            if hasattr(model, "__class__") and hasattr(model.__class__, "__name__")
            else str(model)
        )
    )
    return textcase.title(model_name.replace("Model", ""))


def generate_field_title(name: str, info: FieldInfo | ComputedFieldInfo) -> str:
    """Generate a title for a model field."""
    if hasattr(info, "title") and (titled := info.title):
        return titled
    if aliased := info.alias or (
        hasattr(info, "serialization_alias") and cast(FieldInfo, info).serialization_alias
    ):
        return textcase.sentence(aliased)
    return textcase.sentence(name)


def describe_char(char: str) -> str:
    """Return a printable description of a character for error messages and logs.

    Printable characters are returned quoted; everything else is rendered as its
    code point plus its Unicode name when one exists.

    Example:
        >>> describe_char("[")
        "'['"
        >>> describe_char("\\t")
        'U+0009'
        >>> describe_char("\\u00a0")
        'U+00A0 (NO-BREAK SPACE)'
    """
    if len(char) != 1:
        return repr(char)
    if char.isprintable() and not char.isspace():
        return repr(char)
    if name := unicodedata.name(char, None):
        return f"U+{ord(char):04X} ({name})"
    return f"U+{ord(char):04X}"


__all__ = ("describe_char", "generate_field_title", "generate_title")
