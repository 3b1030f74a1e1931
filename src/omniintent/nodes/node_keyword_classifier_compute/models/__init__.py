# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the Keyword Classifier Compute Node."""

from omniintent.nodes.node_keyword_classifier_compute.models.model_classification_result import (
    ModelClassificationResult,
)
from omniintent.nodes.node_keyword_classifier_compute.models.model_keyword_classification_input import (
    ModelKeywordClassificationInput,
)

__all__ = [
    "ModelClassificationResult",
    "ModelKeywordClassificationInput",
]
