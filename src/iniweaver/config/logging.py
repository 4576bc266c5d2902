# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Typed shapes for `logging.config.dictConfig` dictionaries used by iniweaver."""

from __future__ import annotations

from typing import Annotated, Any, Literal, NewType, NotRequired, Required, TypedDict

from pydantic import Field


# ===========================================================================
# *  TypedDict classes for Python Stdlib Logging Configuration (`dictConfig``)
# ===========================================================================

FormatterID = NewType("FormatterID", str)

# just so folks are clear on what these `str` keys are

FilterID = NewType("FilterID", str)

HandlerID = NewType("HandlerID", str)

type LogLevel = Literal[0, 10, 20, 30, 40, 50]  # NOTSET, DEBUG, INFO, WARNING, ERROR, CRITICAL


class FormattersDict(TypedDict, total=False):
    """A formatter entry for logging configuration.

    [See the Python documentation for more details](https://docs.python.org/3/library/logging.html#logging.Formatter).
    """

    format: NotRequired[str]
    datefmt: NotRequired[str]
    style: NotRequired[Literal["%", "{", "$"]]
    validate: NotRequired[bool]


class HandlersDict(TypedDict, total=False):
    """A handler entry for logging configuration.

    [See the Python documentation for more details](https://docs.python.org/3/library/logging.html#logging.Handler).
    """

    class_name: Required[
        Annotated[
            str,
            Field(
                description="""The class name of the handler in the form of an import path, like `logging.StreamHandler` or `rich.logging.RichHandler`.""",
                serialization_alias="class",
            ),
        ]
    ]
    level: NotRequired[LogLevel]
    formatter: NotRequired[FormatterID]
    filters: NotRequired[list[FilterID]]


class LoggersDict(TypedDict, total=False):
    """A logger entry for logging configuration.

    [See the Python documentation for more details](https://docs.python.org/3/library/logging.html#logging.Logger).
    """

    level: NotRequired[LogLevel]
    propagate: NotRequired[bool]  # Whether to propagate messages to the parent logger
    handlers: NotRequired[list[HandlerID]]
    filters: NotRequired[list[FilterID]]


class LoggingConfigDict(TypedDict, total=False):
    """A dictionary shaped for `logging.config.dictConfig`.

    [See the Python documentation for more details](https://docs.python.org/3/library/logging.config.html).
    """

    version: Required[Literal[1]]
    formatters: NotRequired[dict[FormatterID, FormattersDict]]
    filters: NotRequired[dict[FilterID, dict[str, Any]]]
    handlers: NotRequired[dict[HandlerID, HandlersDict]]
    loggers: NotRequired[dict[str, LoggersDict]]
    root: NotRequired[LoggersDict]
    incremental: NotRequired[bool]
    disable_existing_loggers: NotRequired[bool]


def to_dict_config(config: LoggingConfigDict) -> dict[str, Any]:
    """Convert a `LoggingConfigDict` to the form `dictConfig` accepts.

    Handler entries use `class_name` because `class` is a keyword; `dictConfig` expects `class`.
    """
    converted: dict[str, Any] = dict(config)
    if handlers := config.get("handlers"):
        converted["handlers"] = {
            handler_id: {
                ("class" if key == "class_name" else key): value for key, value in handler.items()
            }
            for handler_id, handler in handlers.items()
        }
    return converted


__all__ = (
    "FilterID",
    "FormatterID",
    "FormattersDict",
    "HandlerID",
    "HandlersDict",
    "LogLevel",
    "LoggersDict",
    "LoggingConfigDict",
    "to_dict_config",
)
