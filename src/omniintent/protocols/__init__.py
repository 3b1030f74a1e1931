# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared protocol definitions for intent routing handlers.

The router only needs "text in, classification out". Any callable matching
ProtocolIntentClassifier can replace the keyword classifier, for example an
embedding-based classifier or a test double.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omniintent.models.model_intent_spec import ModelIntentSpec
    from omniintent.nodes.node_keyword_classifier_compute.models.model_classification_result import (
        ModelClassificationResult,
    )


@runtime_checkable
class ProtocolIntentClassifier(Protocol):
    """Protocol for intent classifiers used by the router.

    Implementations must be pure: the same text, intents and options always
    yield the same result, and neither argument is mutated. Returning a
    result whose ``matched_intent_key`` is not one of ``intents`` is treated
    by the router as a per-record failure.
    """

    def __call__(
        self,
        text: str,
        intents: Sequence[ModelIntentSpec],
        *,
        case_sensitive: bool,
        threshold: float,
    ) -> ModelClassificationResult:
        """Classify ``text`` against ``intents``."""
        ...


__all__ = ["ProtocolIntentClassifier"]
