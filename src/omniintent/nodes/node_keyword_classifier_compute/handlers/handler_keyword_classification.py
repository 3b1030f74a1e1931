# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler for keyword-overlap intent classification.

The algorithm:
1. Normalize the text (``str.casefold``) unless matching is case sensitive
2. Walk intents in declaration order
3. Score each intent as matched keywords / total keywords, where a keyword
   matches when it occurs anywhere in the text as a substring
4. Stop at the first intent with at least one hit and a score at or above
   the threshold

First match wins: a later intent with a higher score is never considered once
an earlier one qualifies, so operators control precedence through ordering.

ONEX Compliance:
- Pure functional design (no side effects)
- Deterministic results for same inputs
- No external service calls or I/O operations
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from omniintent.exceptions import ConfigurationError
from omniintent.models import ModelIntentSpec
from omniintent.nodes.node_keyword_classifier_compute.models import (
    ModelClassificationResult,
    ModelKeywordClassificationInput,
)

logger = logging.getLogger(__name__)


def _score_intent(
    text: str,
    intent: ModelIntentSpec,
    case_sensitive: bool,
) -> tuple[float, tuple[str, ...]]:
    """Return (confidence, matched keywords) for one intent.

    ``text`` must already be normalized for the requested case mode.
    """
    if not intent.keywords:
        return 0.0, ()
    matched = tuple(
        keyword
        for keyword in intent.keywords
        if (keyword if case_sensitive else keyword.casefold()) in text
    )
    return len(matched) / len(intent.keywords), matched


def classify_keywords(
    text: str,
    intents: Sequence[ModelIntentSpec],
    *,
    case_sensitive: bool = False,
    threshold: float = 0.5,
) -> ModelClassificationResult:
    """Classify text against intents by keyword overlap.

    Args:
        text: Text to classify.
        intents: Intents in declaration order.
        case_sensitive: Compare text and keywords without case folding.
        threshold: Minimum confidence (0.0-1.0) an intent needs to win.

    Returns:
        ModelClassificationResult. When no intent qualifies the result has
        no key and a confidence of 0.0; ``intent_scores`` still lists every
        evaluated intent.

    Raises:
        ConfigurationError: If threshold is outside [0.0, 1.0].

    Examples:
        >>> greeting = ModelIntentSpec(key="greeting", keywords="hello,hi")
        >>> result = classify_keywords("Hello there", [greeting])
        >>> result.matched_intent_key, result.confidence
        ('greeting', 0.5)
    """
    if not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(
            f"Confidence threshold must be between 0.0 and 1.0, got {threshold}"
        )

    haystack = text if case_sensitive else text.casefold()
    scores: dict[str, float] = {}

    for intent in intents:
        confidence, matched = _score_intent(haystack, intent, case_sensitive)
        scores[intent.key] = confidence
        if matched and confidence >= threshold:
            logger.debug(
                "Intent %r matched with confidence %.3f (keywords=%s)",
                intent.key,
                confidence,
                matched,
            )
            return ModelClassificationResult(
                matched_intent_key=intent.key,
                confidence=confidence,
                matched_keywords=matched,
                intent_scores=scores,
            )

    return ModelClassificationResult(intent_scores=scores)


def handle_keyword_classification(
    input_data: ModelKeywordClassificationInput,
) -> ModelClassificationResult:
    """Classify a typed node input."""
    return classify_keywords(
        input_data.text,
        input_data.intents,
        case_sensitive=input_data.case_sensitive,
        threshold=input_data.threshold,
    )


__all__ = [
    "classify_keywords",
    "handle_keyword_classification",
]
