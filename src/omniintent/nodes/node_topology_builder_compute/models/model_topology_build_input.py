# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the topology builder compute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniintent.enums import EnumFallbackPolicy
from omniintent.models import ModelIntentSpec


class ModelTopologyBuildInput(BaseModel):
    """Intents and fallback policy to derive a topology from."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    intents: tuple[ModelIntentSpec, ...] = Field(
        default=(),
        description="Ordered intent specifications",
    )
    fallback_policy: EnumFallbackPolicy = Field(
        default=EnumFallbackPolicy.ROUTE_TO_FALLBACK,
        description="Fallback policy for unmatched records",
    )


__all__ = ["ModelTopologyBuildInput"]
