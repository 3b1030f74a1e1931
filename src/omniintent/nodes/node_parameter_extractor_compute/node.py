# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Parameter Extractor Compute - reads intent parameters from record fields."""

from __future__ import annotations

from omnibase_core.nodes.node_compute import NodeCompute

from omniintent.nodes.node_parameter_extractor_compute.handlers import (
    handle_parameter_extraction,
)
from omniintent.nodes.node_parameter_extractor_compute.models import (
    ModelExtractedParameters,
    ModelParameterExtractionInput,
)


class NodeParameterExtractorCompute(
    NodeCompute[ModelParameterExtractionInput, ModelExtractedParameters]
):
    """Pure compute node extracting parameters for a matched intent.

    Never raises for missing parameters; see
    ModelExtractedParameters.missing_required.
    """

    async def compute(
        self, input_data: ModelParameterExtractionInput
    ) -> ModelExtractedParameters:
        return handle_parameter_extraction(input_data)


__all__ = ["NodeParameterExtractorCompute"]
