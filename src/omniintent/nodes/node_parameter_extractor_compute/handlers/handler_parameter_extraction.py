# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler extracting intent parameters from record fields.

Resolution order per parameter:
    1. a record field with exactly the parameter's name, used verbatim
    2. the parameter's non-empty default value
    3. nothing: the parameter is omitted

Values are never coerced to the declared parameter type. Missing required
parameters are reported, not raised.
"""

from __future__ import annotations

from omniintent.models import ModelIntentSpec, ModelRecord
from omniintent.nodes.node_parameter_extractor_compute.models import (
    ModelExtractedParameters,
    ModelParameterExtractionInput,
)


def extract_parameters(
    intent: ModelIntentSpec,
    record: ModelRecord,
) -> ModelExtractedParameters:
    """Extract the intent's parameters from the record.

    A field that is present wins even when its value is None or empty.

    Args:
        intent: The matched intent.
        record: The record being routed.

    Returns:
        ModelExtractedParameters with values in declared parameter order.

    Examples:
        >>> intent = ModelIntentSpec(
        ...     key="book",
        ...     parameters=[{"name": "date", "required": True}],
        ... )
        >>> extract_parameters(intent, ModelRecord(item_index=0)).missing_required
        ('date',)
    """
    values: dict[str, object] = {}
    missing: list[str] = []

    for param in intent.parameters:
        if param.name in record.data:
            values[param.name] = record.data[param.name]
        elif param.default_value:
            values[param.name] = param.default_value
        elif param.required:
            missing.append(param.name)

    return ModelExtractedParameters(values=values, missing_required=tuple(missing))


def handle_parameter_extraction(
    input_data: ModelParameterExtractionInput,
) -> ModelExtractedParameters:
    """Extract parameters for a typed node input."""
    return extract_parameters(input_data.intent, input_data.record)


__all__ = [
    "extract_parameters",
    "handle_parameter_extraction",
]
