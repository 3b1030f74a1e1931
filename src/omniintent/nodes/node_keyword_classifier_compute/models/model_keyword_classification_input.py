# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the keyword classifier compute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniintent.models import ModelIntentSpec


class ModelKeywordClassificationInput(BaseModel):
    """Text plus the classification settings to evaluate it with.

    Attributes:
        text: Text to classify. May be empty; empty text never matches.
        intents: Intents in declaration order.
        case_sensitive: Skip case folding when True.
        threshold: Minimum confidence an intent needs to be selected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    text: str = Field(..., description="Text to classify")
    intents: tuple[ModelIntentSpec, ...] = Field(
        default=(),
        description="Ordered intent specifications",
    )
    case_sensitive: bool = Field(
        default=False,
        description="Whether keyword matching is case sensitive",
    )
    threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum confidence for a match",
    )


__all__ = ["ModelKeywordClassificationInput"]
