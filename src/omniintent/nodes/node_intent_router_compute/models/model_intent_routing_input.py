# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the intent router compute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniintent.models import ModelIntentRouterConfig, ModelRecord


class ModelIntentRoutingInput(BaseModel):
    """A configuration snapshot and the batch of records to route with it."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    config: ModelIntentRouterConfig = Field(
        ...,
        description="Router configuration snapshot for this batch",
    )
    records: tuple[ModelRecord, ...] = Field(
        default=(),
        description="Records in input order",
    )


__all__ = ["ModelIntentRoutingInput"]
