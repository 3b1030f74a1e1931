# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the Keyword Classifier Compute Node."""

from omniintent.nodes.node_keyword_classifier_compute.handlers.handler_keyword_classification import (
    classify_keywords,
    handle_keyword_classification,
)

__all__ = [
    "classify_keywords",
    "handle_keyword_classification",
]
