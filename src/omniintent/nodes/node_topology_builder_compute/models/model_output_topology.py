# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output topology models.

The topology is the explicit descriptor of the router's output channels. Its
size is a function of runtime configuration, so routing is always by integer
index against this descriptor, never by a fixed output count.

Invariants (enforced on construction):
    - channel indices are 0-based and contiguous
    - exactly one fallback channel iff the policy is route_to_fallback
    - the fallback channel, when present, is last
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniintent.enums import EnumFallbackPolicy


class ModelOutputChannel(BaseModel):
    """One output channel of a topology.

    Attributes:
        index: 0-based channel index.
        source_intent_key: Key of the intent feeding this channel; None for
            the fallback channel.
        is_fallback: Whether this is the fallback channel.
        display_name: Label shown for the channel (custom label, key, or
            "Fallback").
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    index: int = Field(..., ge=0, description="0-based channel index")
    source_intent_key: str | None = Field(
        default=None,
        description="Intent key routed to this channel",
    )
    is_fallback: bool = Field(default=False, description="Fallback channel flag")
    display_name: str = Field(..., description="Channel label")


class ModelOutputTopology(BaseModel):
    """Ordered output channels derived from one configuration snapshot.

    Attributes:
        channels: Channels in index order.
        fallback_policy: The policy this topology was built for.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    channels: tuple[ModelOutputChannel, ...] = Field(
        ...,
        min_length=1,
        description="Output channels in index order",
    )
    fallback_policy: EnumFallbackPolicy = Field(
        ...,
        description="Fallback policy the topology was built for",
    )

    @model_validator(mode="after")
    def _check_invariants(self) -> Self:
        for position, channel in enumerate(self.channels):
            if channel.index != position:
                raise ValueError(
                    f"Channel indices must be contiguous from 0; "
                    f"found {channel.index} at position {position}"
                )
        fallback_positions = [c.index for c in self.channels if c.is_fallback]
        wants_fallback = self.fallback_policy is EnumFallbackPolicy.ROUTE_TO_FALLBACK
        if wants_fallback and fallback_positions != [len(self.channels) - 1]:
            raise ValueError(
                "route_to_fallback requires exactly one fallback channel, placed last"
            )
        if not wants_fallback and fallback_positions:
            raise ValueError(
                f"Fallback policy {self.fallback_policy.value!r} "
                "allows no fallback channel"
            )
        return self

    @property
    def channel_count(self) -> int:
        """Number of output channels."""
        return len(self.channels)

    @property
    def fallback_index(self) -> int | None:
        """Index of the fallback channel, or None without one."""
        last = self.channels[-1]
        return last.index if last.is_fallback else None

    @property
    def error_channel_index(self) -> int:
        """Channel receiving error records: the fallback channel, else 0."""
        fallback = self.fallback_index
        return fallback if fallback is not None else 0

    @property
    def intent_index_map(self) -> dict[str, int]:
        """Mapping of intent key to channel index."""
        return {
            channel.source_intent_key: channel.index
            for channel in self.channels
            if channel.source_intent_key is not None
        }

    def index_for_intent(self, key: str) -> int | None:
        """Return the channel index for an intent key, or None if unknown."""
        return self.intent_index_map.get(key)

    @property
    def display_names(self) -> list[str]:
        """Channel labels in index order."""
        return [channel.display_name for channel in self.channels]


__all__ = ["ModelOutputChannel", "ModelOutputTopology"]
