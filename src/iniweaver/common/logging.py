# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Set up a logger with optional rich formatting."""

from __future__ import annotations

import logging

from logging.config import dictConfig
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler

from iniweaver.config.logging import LoggingConfigDict, to_dict_config


if TYPE_CHECKING:
    from iniweaver.config.settings import ParserSettings


def get_rich_handler(**kwargs: Any) -> RichHandler:
    """Create a `RichHandler` writing to a markup-enabled console."""
    return RichHandler(console=Console(markup=True, soft_wrap=True), markup=True, **kwargs)


def _setup_logger_with_rich_handler(
    rich_options: dict[str, Any] | None, name: str | None, level: int
) -> logging.Logger:
    """Set up a logger with rich handler."""
    handler = get_rich_handler(**(rich_options or {}))
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Clear existing handlers to prevent duplication
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def setup_logger(
    name: str | None = "iniweaver",
    *,
    level: int = logging.WARNING,
    rich: bool = True,
    rich_options: dict[str, Any] | None = None,
    logging_kwargs: LoggingConfigDict | None = None,
) -> logging.Logger:
    """Set up a logger with optional rich formatting.

    When `logging_kwargs` is given it is applied with `dictConfig` first; a rich handler is
    then attached on top unless `rich` is False.
    """
    if logging_kwargs:
        dictConfig(to_dict_config(logging_kwargs))
        if rich:
            return _setup_logger_with_rich_handler(rich_options, name, level)
        return logging.getLogger(name)
    if not rich:
        logging.basicConfig(level=level)
        logger = logging.getLogger(name)
        logger.setLevel(level)
        return logger
    return _setup_logger_with_rich_handler(rich_options, name, level)


def setup_logger_from_settings(settings: ParserSettings | None = None) -> logging.Logger:
    """Configure the `iniweaver` logger from `ParserSettings`."""
    if settings is None:
        from iniweaver.config.settings import get_parser_settings

        settings = get_parser_settings()
    return setup_logger(level=logging.getLevelNamesMapping()[settings.log_level], rich=settings.use_rich)


__all__ = ("get_rich_handler", "setup_logger", "setup_logger_from_settings")
