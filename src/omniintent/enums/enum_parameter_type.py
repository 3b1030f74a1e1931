# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Advisory parameter types for intent parameter specs."""

from __future__ import annotations

from enum import StrEnum


class EnumParameterType(StrEnum):
    """Declared type of an intent parameter.

    The type is metadata for downstream consumers. The parameter extractor
    never coerces values to it.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


__all__ = ["EnumParameterType"]
