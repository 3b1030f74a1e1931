# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the Parameter Extractor Compute Node."""

from omniintent.nodes.node_parameter_extractor_compute.handlers.handler_parameter_extraction import (
    extract_parameters,
    handle_parameter_extraction,
)

__all__ = [
    "extract_parameters",
    "handle_parameter_extraction",
]
