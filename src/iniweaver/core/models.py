# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Base model implementations for iniweaver."""

from __future__ import annotations

import re

from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from iniweaver.core.utils import generate_field_title, generate_title


# ================================================
# *      Pydantic Base Implementations
# ================================================

# Delimiters are single characters and must never be whitespace-stripped before validation,
# so unlike most pydantic configs we leave `str_strip_whitespace` off.
BASEDMODEL_CONFIG = ConfigDict(
    arbitrary_types_allowed=True,
    field_title_generator=generate_field_title,
    model_title_generator=generate_title,
    serialize_by_alias=True,
    use_attribute_docstrings=True,
    validate_by_alias=True,
    validate_by_name=True,
    cache_strings="all",
)
FROZEN_BASEDMODEL_CONFIG = BASEDMODEL_CONFIG | ConfigDict(frozen=True)


class BasedModel(BaseModel):
    """A baser `BaseModel` for all models in the iniweaver project."""

    model_config = BASEDMODEL_CONFIG

    def serialize_for_cli(self) -> dict[str, Any]:
        """Serialize the model for CLI output."""
        fields = set(type(self).model_fields.keys()) | set(type(self).model_computed_fields.keys())
        self_map: dict[str, Any] = {}
        for field in fields:
            attr = getattr(self, field, None)
            if attr is not None and hasattr(attr, "serialize_for_cli"):
                self_map[field] = attr.serialize_for_cli()
            elif isinstance(attr, re.Pattern):
                self_map[field] = attr.pattern
            elif isinstance(attr, Sequence | Iterator) and not isinstance(attr, str):
                self_map[field] = [
                    item.serialize_for_cli() if hasattr(item, "serialize_for_cli") else item
                    for item in attr
                ]
        base_dict = self.model_dump(mode="python", exclude_none=True)
        return base_dict | self_map


__all__ = ("BASEDMODEL_CONFIG", "FROZEN_BASEDMODEL_CONFIG", "BasedModel")
