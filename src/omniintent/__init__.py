# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniIntent - keyword intent classification and routing as ONEX nodes.

Records are classified against operator-defined intents by keyword overlap
and routed to one output channel per intent, plus an optional fallback
channel.

Quick Start:
    >>> from omniintent import ModelIntentRouterConfig, records_from_items, route_batch
    >>> config = ModelIntentRouterConfig.model_validate(
    ...     {"intents": [{"key": "greeting", "keywords": "hello,hi"}]}
    ... )
    >>> result = route_batch(records_from_items([{"message": "Hello there"}]), config)
    >>> result.channel(0)[0].data["recognizedIntent"]
    'greeting'
"""

from omniintent.enums import EnumFallbackPolicy, EnumParameterType, EnumRecordState
from omniintent.exceptions import (
    ConfigurationError,
    IntentRoutingError,
    NoIntentMatchedError,
    RecordProcessingError,
)
from omniintent.models import (
    IntentRouterSettings,
    ModelIntentRouterConfig,
    ModelIntentSpec,
    ModelParameterSpec,
    ModelRecord,
    records_from_items,
)
from omniintent.nodes.node_intent_router_compute.handlers import (
    route_batch,
    route_record,
)
from omniintent.nodes.node_keyword_classifier_compute.handlers import (
    classify_keywords,
)
from omniintent.nodes.node_parameter_extractor_compute.handlers import (
    extract_parameters,
)
from omniintent.nodes.node_topology_builder_compute.handlers import build_topology

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EnumFallbackPolicy",
    "EnumParameterType",
    "EnumRecordState",
    "IntentRouterSettings",
    "IntentRoutingError",
    "ModelIntentRouterConfig",
    "ModelIntentSpec",
    "ModelParameterSpec",
    "ModelRecord",
    "NoIntentMatchedError",
    "RecordProcessingError",
    "__version__",
    "build_topology",
    "classify_keywords",
    "extract_parameters",
    "records_from_items",
    "route_batch",
    "route_record",
]
