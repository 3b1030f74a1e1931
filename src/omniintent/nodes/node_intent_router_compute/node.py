# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Intent Router Compute - routes a record batch to per-intent channels.

Key characteristics:
    - Output channel count follows the configuration (one per intent, plus
      a fallback channel under route_to_fallback)
    - First-match-wins keyword classification
    - Thin shell pattern: delegates ALL logic to handle_intent_routing
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omniintent.nodes.node_intent_router_compute.handlers import (
    handle_intent_routing,
)
from omniintent.nodes.node_intent_router_compute.models import (
    ModelIntentRoutingInput,
    ModelIntentRoutingOutput,
)


class NodeIntentRouterCompute(
    NodeCompute[ModelIntentRoutingInput, ModelIntentRoutingOutput]
):
    """Pure compute node classifying and routing a batch of records.

    Configuration errors, and per-record errors outside continue-on-fail
    mode, propagate as IntentRoutingError subclasses.
    """

    async def compute(
        self, input_data: ModelIntentRoutingInput
    ) -> ModelIntentRoutingOutput:
        """Route the input batch."""
        return handle_intent_routing(input_data)


__all__ = ["NodeIntentRouterCompute"]
