# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unified exception hierarchy for iniweaver.

All iniweaver exceptions inherit from IniWeaverError. The grammar layer raises exactly
one kind of error for bad input, `InvalidDelimiterError`; it is raised synchronously and
never caught or translated inside the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Literal

from iniweaver.core.utils import describe_char


if TYPE_CHECKING:
    from iniweaver.grammar.roles import DelimiterRole


type RejectionReason = Literal["length", "control", "whitespace", "collision"]


class IniWeaverError(Exception):
    """Base exception for all iniweaver errors.

    Provides structured error information including details and suggestions
    for resolution.
    """

    _issue_information: ClassVar[tuple[str, ...]] = (
        "If you think you have found a bug in iniweaver, please open an issue with the report below.",
        "",
    )

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Initialize iniweaver error.

        Args:
            message: Human-readable error message
            details: Additional context about the error
            suggestions: Actionable suggestions for resolving the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return descriptive error message with context details."""
        parts = [self.message]
        if self.details:
            detail_parts = [
                f"{key.replace('_', ' ')}: {self.details[key]}"
                for key in ("role", "character", "conflicts_with")
                if key in self.details
            ]
            if detail_parts:
                parts.append(f"({', '.join(detail_parts)})")
        return " ".join(parts)

    @property
    def _reporting_info(self) -> str:
        """Generate issue reporting information."""
        return "\n".join((
            "Include the following information when reporting issues:",
            f"- Error Message: {self.message}",
            "- Details: " + ", ".join(f"{k}: {v}" for k, v in self.details.items())
            if self.details
            else "- No additional details provided.",
            "- Suggestions: " + ", ".join(self.suggestions)
            if self.suggestions
            else "- No suggestions provided.",
        ))

    @property
    def report(self) -> str:
        """Generate a full error report including reporting information."""
        about = type(self)._issue_information
        return f"{'\n'.join(about)}\n{self._reporting_info}"


class ConfigurationError(IniWeaverError):
    """Configuration and settings errors.

    Raised when a parser configuration or its settings cannot be applied.
    """


class InvalidDelimiterError(ConfigurationError):
    """A candidate delimiter character was rejected.

    Raised from delimiter setters, `DelimiterSet` construction and
    `ParserConfiguration.apply_delimiters` before any state changes, so the grammar that
    was in effect before the call stays in effect.
    """

    def __init__(
        self,
        character: str,
        role: DelimiterRole,
        reason: RejectionReason,
        *,
        conflicts_with: DelimiterRole | None = None,
        message: str | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Initialize InvalidDelimiterError.

        Args:
            character: The rejected candidate
            role: The role the candidate was meant to fill
            reason: Why the candidate was rejected
            conflicts_with: For collisions, the role already using the character
            message: Optional override for the generated message
            suggestions: Optional override for the generated suggestions
        """
        details: dict[str, Any] = {
            "character": describe_char(character),
            "role": role.variable,
            "reason": reason,
        }
        if conflicts_with is not None:
            details["conflicts_with"] = conflicts_with.variable
        super().__init__(
            message or f"Invalid character for {role} delimiter",
            details=details,
            suggestions=suggestions or _default_suggestions(reason),
        )
        self.character = character
        self.role = role
        self.reason = reason
        self.conflicts_with = conflicts_with


def _default_suggestions(reason: RejectionReason) -> list[str]:
    match reason:
        case "length":
            return ["Delimiters must be exactly one character long."]
        case "control" | "whitespace":
            return ["Choose a visible, non-whitespace character."]
        case "collision":
            return [
                "Each delimiter must be unique. Change the conflicting delimiter first, or use `apply_delimiters` to swap several at once."
            ]


__all__ = ("ConfigurationError", "IniWeaverError", "InvalidDelimiterError", "RejectionReason")
