# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Topology Builder Compute Node."""

from omniintent.nodes.node_topology_builder_compute.node import (
    NodeTopologyBuilderCompute,
)

__all__ = ["NodeTopologyBuilderCompute"]
