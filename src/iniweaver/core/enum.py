# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Base enum class for the iniweaver project."""

from __future__ import annotations

import contextlib

from enum import Enum, unique
from types import MappingProxyType
from typing import Self, cast, override

import textcase


@unique
class BaseEnum(Enum):
    """An enum class that provides common functionality for string-valued enums in iniweaver.

    BaseEnum provides convenience methods for converting between loosely spelled strings and
    enum members, so that values read from settings files and environment variables (`SectionStart`,
    `section-start`, `SECTION_START`) all resolve to the same member.
    """

    @staticmethod
    def _deconstruct_string(value: str) -> list[str]:
        """Deconstruct a string into its component parts."""
        value = textcase.snake(value.strip())
        return [v for v in value.split("_") if v]

    @staticmethod
    def _multiply_variations(s: str) -> set[str]:
        """Generate multiple variations of a string."""
        return {
            s,
            textcase.upper(s),
            textcase.lower(s),
            textcase.title(s),
            textcase.pascal(s),
            textcase.snake(s),
            textcase.kebab(s),
            textcase.camel(s),
        }

    @classmethod
    def aliases(cls) -> MappingProxyType[str, Self]:
        """Return a mapping of every accepted spelling to its member."""
        return MappingProxyType({
            alias: member
            for member in cls
            for name in (member.value, member.name)
            for alias in cls._multiply_variations(name)
        })

    @classmethod
    @override
    def _missing_(cls, value: object) -> Self | None:
        """Handle missing values when converting from a string to an enum member."""
        if not isinstance(value, str):
            return None
        with contextlib.suppress(ValueError):
            return cls.from_string(value)
        return None

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Convert a string to the corresponding enum member.

        Matching is tried on the literal value or name first, then on the known case variations,
        and finally on the underscore-separated parts of the name.
        """
        lowered = str(value).lower()
        if literal := next(
            (
                member
                for member in cls
                if str(member.value).lower() == lowered or member.name.lower() == lowered
            ),
            None,
        ):
            return literal
        if found := next(
            (member for alias, member in cls.aliases().items() if alias.lower() == lowered), None
        ):
            return found
        value_parts = cls._deconstruct_string(value)
        if found := next(
            (member for member in cls if cls._deconstruct_string(member.name) == value_parts), None
        ):
            return found
        raise ValueError(f"{value} is not a valid {cls.__qualname__} member")

    @property
    def variable(self) -> str:
        """Return the string representation of the enum member as a variable name."""
        return textcase.snake(cast(str, self.value))

    @property
    def as_title(self) -> str:
        """Return the title-cased representation of the enum member."""
        return textcase.title(cast(str, self.value))

    def __str__(self) -> str:
        """Return the string representation of the enum member."""
        return self.name.replace("_", " ").lower()


__all__ = ("BaseEnum",)
