# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Unit test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from iniweaver.config.parser import ParserConfiguration
from iniweaver.grammar.models import Grammar
from iniweaver.grammar.synthesizer import compile_grammar


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Ensure all tests run in isolated environment.

    This autouse fixture prevents tests from picking up a developer's settings by:
    - Running from an empty temporary directory, so no `.env` file is read
    - Removing any `INIWEAVER_*` environment variables
    - Resetting cached parser settings between tests

    Applied automatically to all unit tests.
    """
    import os

    from iniweaver.config.settings import reset_parser_settings

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("INIWEAVER_"):
            monkeypatch.delenv(key)

    reset_parser_settings()
    yield
    reset_parser_settings()


@pytest.fixture
def config() -> ParserConfiguration:
    """A configuration with default delimiters and flags."""
    return ParserConfiguration()


@pytest.fixture
def default_grammar() -> Grammar:
    """The grammar compiled from the default delimiters."""
    return compile_grammar()
