# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ONEX intent routing nodes.

Node classes are imported lazily so that handlers and models can be used
without loading the node base classes.

Example:
    # Recommended - direct import from specific node:
    from omniintent.nodes.node_intent_router_compute.handlers import route_batch

    # For convenience imports (loads omnibase_core):
    from omniintent.nodes import NodeIntentRouterCompute
"""

from typing import TYPE_CHECKING

# Lazy imports for runtime - only loaded when accessed
_lazy_imports = {
    "NodeIntentRouterCompute": "omniintent.nodes.node_intent_router_compute",
    "NodeKeywordClassifierCompute": "omniintent.nodes.node_keyword_classifier_compute",
    "NodeParameterExtractorCompute": "omniintent.nodes.node_parameter_extractor_compute",
    "NodeTopologyBuilderCompute": "omniintent.nodes.node_topology_builder_compute",
}

__all__ = [
    "NodeIntentRouterCompute",
    "NodeKeywordClassifierCompute",
    "NodeParameterExtractorCompute",
    "NodeTopologyBuilderCompute",
]


def __getattr__(name: str):
    """Lazy import for module attributes."""
    if name in _lazy_imports:
        import importlib

        module = importlib.import_module(_lazy_imports[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Type checking imports for IDE support
if TYPE_CHECKING:
    from omniintent.nodes.node_intent_router_compute import NodeIntentRouterCompute
    from omniintent.nodes.node_keyword_classifier_compute import (
        NodeKeywordClassifierCompute,
    )
    from omniintent.nodes.node_parameter_extractor_compute import (
        NodeParameterExtractorCompute,
    )
    from omniintent.nodes.node_topology_builder_compute import (
        NodeTopologyBuilderCompute,
    )
