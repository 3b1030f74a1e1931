# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output model for the intent router compute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniintent.nodes.node_intent_router_compute.models.model_routed_record import (
    ModelRoutedRecord,
)
from omniintent.nodes.node_topology_builder_compute.models import (
    ModelOutputTopology,
)


class ModelIntentRoutingOutput(BaseModel):
    """Records of one batch, grouped by output channel.

    ``channels`` always has ``topology.channel_count`` entries; a channel with
    no records is an empty tuple. Within a channel, records keep input order.

    Attributes:
        topology: The topology the batch was routed against.
        channels: Routed records per channel, in channel index order.
        routed_count: Records emitted to an intent or fallback channel.
        discarded_count: Unmatched records dropped by the discard policy.
        failed_count: Records converted into error records.
        cancelled: True when the batch stopped early on cancellation.
        processing_time_ms: Wall-clock time spent routing the batch.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    topology: ModelOutputTopology = Field(..., description="Batch topology")
    channels: tuple[tuple[ModelRoutedRecord, ...], ...] = Field(
        ...,
        description="Routed records per channel",
    )
    routed_count: int = Field(default=0, ge=0, description="Routed records")
    discarded_count: int = Field(default=0, ge=0, description="Discarded records")
    failed_count: int = Field(default=0, ge=0, description="Error records")
    cancelled: bool = Field(default=False, description="Stopped by cancellation")
    processing_time_ms: float = Field(
        default=0.0,
        ge=0.0,
        description="Batch processing time in milliseconds",
    )

    def channel(self, index: int) -> tuple[ModelRoutedRecord, ...]:
        """Return the records routed to channel ``index``."""
        return self.channels[index]

    @property
    def total_emitted(self) -> int:
        """Number of records across all channels."""
        return sum(len(records) for records in self.channels)


__all__ = ["ModelIntentRoutingOutput"]
