# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Result model for keyword classification."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelClassificationResult(BaseModel):
    """Outcome of classifying one text against the configured intents.

    Attributes:
        matched_intent_key: Key of the winning intent, or None when nothing
            matched.
        confidence: Keyword-overlap confidence of the winner. Always 0.0 when
            nothing matched.
        matched_keywords: The winner's keyword tokens found in the text, in
            configured order and configured spelling.
        intent_scores: Confidence of every intent evaluated before
            classification stopped, keyed by intent key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    matched_intent_key: str | None = Field(
        default=None,
        description="Winning intent key, None when unmatched",
    )
    confidence: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Matched keyword count divided by total keyword count",
    )
    matched_keywords: tuple[str, ...] = Field(
        default=(),
        description="Keywords of the winning intent found in the text",
    )
    intent_scores: dict[str, float] = Field(
        default_factory=dict,
        description="Per-intent confidences that were evaluated",
    )

    @property
    def is_match(self) -> bool:
        """True when an intent was selected."""
        return self.matched_intent_key is not None


__all__ = ["ModelClassificationResult"]
