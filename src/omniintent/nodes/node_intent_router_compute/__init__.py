# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Intent Router Compute Node."""

from omniintent.nodes.node_intent_router_compute.node import (
    NodeIntentRouterCompute,
)

__all__ = ["NodeIntentRouterCompute"]
