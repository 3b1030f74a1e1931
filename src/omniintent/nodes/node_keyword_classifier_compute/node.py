# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Keyword Classifier Compute - first-match-wins keyword overlap scoring.

This node follows the ONEX declarative pattern:
    - Thin shell delegating to handle_keyword_classification
    - Pure computation with no I/O
"""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omniintent.nodes.node_keyword_classifier_compute.handlers import (
    handle_keyword_classification,
)
from omniintent.nodes.node_keyword_classifier_compute.models import (
    ModelClassificationResult,
    ModelKeywordClassificationInput,
)


class NodeKeywordClassifierCompute(
    NodeCompute[ModelKeywordClassificationInput, ModelClassificationResult]
):
    """Pure compute node classifying text against configured intents."""

    async def compute(
        self, input_data: ModelKeywordClassificationInput
    ) -> ModelClassificationResult:
        """Classify the input text."""
        return handle_keyword_classification(input_data)


__all__ = ["NodeKeywordClassifierCompute"]
