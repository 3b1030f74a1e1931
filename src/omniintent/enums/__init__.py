# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared enums for intent routing."""

from omniintent.enums.enum_fallback_policy import EnumFallbackPolicy
from omniintent.enums.enum_parameter_type import EnumParameterType
from omniintent.enums.enum_record_state import EnumRecordState

__all__ = [
    "EnumFallbackPolicy",
    "EnumParameterType",
    "EnumRecordState",
]
