# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Fallback policy enum for records that match no configured intent."""

from __future__ import annotations

from enum import StrEnum


class EnumFallbackPolicy(StrEnum):
    """How the router treats a record that no intent recognized.

    Exactly one policy is active per batch. The policy also shapes the output
    topology: only ROUTE_TO_FALLBACK adds a trailing fallback channel.

    Attributes:
        ROUTE_TO_FALLBACK: Append the record to the fallback (last) channel.
        DISCARD: Drop the record; it reaches no channel and no error report.
        ERROR: Fail the record with NoIntentMatchedError.
    """

    ROUTE_TO_FALLBACK = "route_to_fallback"
    DISCARD = "discard"
    ERROR = "error"


__all__ = ["EnumFallbackPolicy"]
