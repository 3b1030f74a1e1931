# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Keyword Classifier Compute Node."""

from omniintent.nodes.node_keyword_classifier_compute.node import (
    NodeKeywordClassifierCompute,
)

__all__ = ["NodeKeywordClassifierCompute"]
