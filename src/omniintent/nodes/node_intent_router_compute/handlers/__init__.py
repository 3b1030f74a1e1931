# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the Intent Router Compute Node."""

from omniintent.nodes.node_intent_router_compute.handlers.handler_intent_routing import (
    INPUT_TEXT_PREVIEW_LENGTH,
    build_enriched_record,
    build_error_record,
    handle_intent_routing,
    resolve_input_text,
    route_batch,
    route_record,
)

__all__ = [
    "INPUT_TEXT_PREVIEW_LENGTH",
    "build_enriched_record",
    "build_error_record",
    "handle_intent_routing",
    "resolve_input_text",
    "route_batch",
    "route_record",
]
