# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Base types shared across iniweaver."""

from iniweaver.core.enum import BaseEnum
from iniweaver.core.models import BASEDMODEL_CONFIG, FROZEN_BASEDMODEL_CONFIG, BasedModel
from iniweaver.core.utils import describe_char, generate_field_title, generate_title


__all__ = (
    "BASEDMODEL_CONFIG",
    "FROZEN_BASEDMODEL_CONFIG",
    "BaseEnum",
    "BasedModel",
    "describe_char",
    "generate_field_title",
    "generate_title",
)
