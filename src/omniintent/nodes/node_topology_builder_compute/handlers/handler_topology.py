# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler deriving the output topology from router configuration.

One channel per intent in declaration order, plus a trailing fallback channel
when the policy is route_to_fallback. The result is deterministic for a given
intent order, so rebuilding after a configuration reload reproduces the same
indices for unchanged intents.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from omniintent.enums import EnumFallbackPolicy
from omniintent.exceptions import ConfigurationError
from omniintent.models import ModelIntentSpec
from omniintent.nodes.node_topology_builder_compute.models import (
    ModelOutputChannel,
    ModelOutputTopology,
    ModelTopologyBuildInput,
)

logger = logging.getLogger(__name__)

FALLBACK_DISPLAY_NAME = "Fallback"


def build_topology(
    intents: Sequence[ModelIntentSpec],
    fallback_policy: EnumFallbackPolicy,
) -> ModelOutputTopology:
    """Build the ordered output channels for a configuration snapshot.

    Args:
        intents: Intent specs in declaration order.
        fallback_policy: Active fallback policy for the batch.

    Returns:
        Frozen ModelOutputTopology.

    Raises:
        ConfigurationError: If two intents share a key, or if there are no
            intents and the policy provides no fallback channel.

    Examples:
        >>> topology = build_topology([], EnumFallbackPolicy.ROUTE_TO_FALLBACK)
        >>> topology.channel_count, topology.fallback_index
        (1, 0)
    """
    duplicates = sorted(
        key for key, count in Counter(i.key for i in intents).items() if count > 1
    )
    if duplicates:
        raise ConfigurationError(f"Duplicate intent keys: {duplicates}")

    has_fallback = fallback_policy is EnumFallbackPolicy.ROUTE_TO_FALLBACK
    if not intents and not has_fallback:
        raise ConfigurationError(
            f"No intents configured and fallback behavior "
            f"{fallback_policy.value!r} provides no output channel"
        )

    channels = [
        ModelOutputChannel(
            index=index,
            source_intent_key=intent.key,
            display_name=intent.display_name,
        )
        for index, intent in enumerate(intents)
    ]
    if has_fallback:
        channels.append(
            ModelOutputChannel(
                index=len(channels),
                is_fallback=True,
                display_name=FALLBACK_DISPLAY_NAME,
            )
        )

    topology = ModelOutputTopology(
        channels=tuple(channels),
        fallback_policy=fallback_policy,
    )
    logger.debug(
        "Built topology with %d channels: %s",
        topology.channel_count,
        topology.display_names,
    )
    return topology


def handle_topology_build(input_data: ModelTopologyBuildInput) -> ModelOutputTopology:
    """Build a topology from a typed node input."""
    return build_topology(input_data.intents, input_data.fallback_policy)


__all__ = [
    "FALLBACK_DISPLAY_NAME",
    "build_topology",
    "handle_topology_build",
]
