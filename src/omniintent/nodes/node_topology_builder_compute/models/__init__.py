# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the Topology Builder Compute Node."""

from omniintent.nodes.node_topology_builder_compute.models.model_output_topology import (
    ModelOutputChannel,
    ModelOutputTopology,
)
from omniintent.nodes.node_topology_builder_compute.models.model_topology_build_input import (
    ModelTopologyBuildInput,
)

__all__ = [
    "ModelOutputChannel",
    "ModelOutputTopology",
    "ModelTopologyBuildInput",
]
