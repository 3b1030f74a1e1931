# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the Parameter Extractor Compute Node."""

from omniintent.nodes.node_parameter_extractor_compute.models.model_extracted_parameters import (
    ModelExtractedParameters,
)
from omniintent.nodes.node_parameter_extractor_compute.models.model_parameter_extraction_input import (
    ModelParameterExtractionInput,
)

__all__ = [
    "ModelExtractedParameters",
    "ModelParameterExtractionInput",
]
