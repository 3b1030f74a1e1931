# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the topology builder compute node."""

from omniintent.nodes.node_topology_builder_compute.handlers.handler_topology import (
    FALLBACK_DISPLAY_NAME,
    build_topology,
    handle_topology_build,
)

__all__ = [
    "FALLBACK_DISPLAY_NAME",
    "build_topology",
    "handle_topology_build",
]
