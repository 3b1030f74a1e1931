# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Routed record and per-record outcome models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omniintent.enums import EnumRecordState


class ModelRoutedRecord(BaseModel):
    """An enriched record placed on an output channel.

    Attributes:
        item_index: Position of the source record in the input batch.
        channel_index: Output channel the record was appended to.
        data: Original fields plus the routing enrichment (or error) fields.
        binary: The source record's attachment, unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    item_index: int = Field(..., ge=0, description="Source batch position")
    channel_index: int = Field(..., ge=0, description="Destination channel")
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Enriched record fields",
    )
    binary: Any = Field(default=None, description="Opaque binary attachment")


class ModelRecordOutcome(BaseModel):
    """Terminal state of one record after routing.

    Attributes:
        item_index: Position of the source record in the input batch.
        state: ROUTED, DISCARDED or FAILED.
        routed_record: The emitted record; None when discarded.
        error: Failure message for FAILED outcomes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    item_index: int = Field(..., ge=0, description="Source batch position")
    state: EnumRecordState = Field(..., description="Terminal record state")
    routed_record: ModelRoutedRecord | None = Field(
        default=None,
        description="Emitted record, None when discarded",
    )
    error: str | None = Field(default=None, description="Failure message")

    @property
    def channel_index(self) -> int | None:
        """Destination channel, or None when nothing was emitted."""
        if self.routed_record is None:
            return None
        return self.routed_record.channel_index


__all__ = ["ModelRecordOutcome", "ModelRoutedRecord"]
