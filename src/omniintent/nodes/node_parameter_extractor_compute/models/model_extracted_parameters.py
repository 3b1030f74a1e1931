# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Result model for parameter extraction."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelExtractedParameters(BaseModel):
    """Parameter values pulled from one record for its matched intent.

    A parameter with neither a record field nor a default is absent from
    ``values``; it is never present as None or an empty string.

    Attributes:
        values: Parameter name to value, in the intent's declared order.
        missing_required: Required parameters that could not be satisfied.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    values: dict[str, Any] = Field(
        default_factory=dict,
        description="Extracted parameter values",
    )
    missing_required: tuple[str, ...] = Field(
        default=(),
        description="Required parameters with neither field nor default",
    )


__all__ = ["ModelExtractedParameters"]
