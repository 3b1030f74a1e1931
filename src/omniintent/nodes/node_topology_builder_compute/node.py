# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Topology Builder Compute - derives output channels from configuration.

Key characteristics:
    - Pure computation: no I/O, no side effects
    - Deterministic: same intent order always yields the same indices
    - Thin shell pattern: delegates ALL logic to handler
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omniintent.nodes.node_topology_builder_compute.handlers import (
    handle_topology_build,
)
from omniintent.nodes.node_topology_builder_compute.models import (
    ModelOutputTopology,
    ModelTopologyBuildInput,
)


class NodeTopologyBuilderCompute(
    NodeCompute[ModelTopologyBuildInput, ModelOutputTopology]
):
    """Pure compute node building the output topology for a routing batch.

    Raises ConfigurationError from the handler; configuration errors are
    fatal and are never converted into result models.
    """

    async def compute(self, input_data: ModelTopologyBuildInput) -> ModelOutputTopology:
        """Build the topology for the given intents and fallback policy."""
        return handle_topology_build(input_data)


__all__ = ["NodeTopologyBuilderCompute"]
