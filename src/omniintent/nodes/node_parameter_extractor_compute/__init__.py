# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Parameter Extractor Compute Node."""

from omniintent.nodes.node_parameter_extractor_compute.node import (
    NodeParameterExtractorCompute,
)

__all__ = ["NodeParameterExtractorCompute"]
