# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the parameter extractor compute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniintent.models import ModelIntentSpec, ModelRecord


class ModelParameterExtractionInput(BaseModel):
    """The matched intent and the record to read its parameters from."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    intent: ModelIntentSpec = Field(..., description="Matched intent")
    record: ModelRecord = Field(..., description="Source record")


__all__ = ["ModelParameterExtractionInput"]
