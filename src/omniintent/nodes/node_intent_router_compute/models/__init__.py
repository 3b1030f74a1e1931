# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the Intent Router Compute Node."""

from omniintent.nodes.node_intent_router_compute.models.model_intent_routing_input import (
    ModelIntentRoutingInput,
)
from omniintent.nodes.node_intent_router_compute.models.model_intent_routing_output import (
    ModelIntentRoutingOutput,
)
from omniintent.nodes.node_intent_router_compute.models.model_routed_record import (
    ModelRecordOutcome,
    ModelRoutedRecord,
)

__all__ = [
    "ModelIntentRoutingInput",
    "ModelIntentRoutingOutput",
    "ModelRecordOutcome",
    "ModelRoutedRecord",
]
