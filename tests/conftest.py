# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Pytest configuration and fixtures for omniintent tests.

Shared intents, router configurations and record batches used across the
topology, classifier, extractor and router tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from omniintent.enums import EnumFallbackPolicy
from omniintent.models import (
    ModelIntentRouterConfig,
    ModelIntentSpec,
    ModelRecord,
    records_from_items,
)

# =========================================================================
# Intent Fixtures
# =========================================================================


@pytest.fixture
def greeting_intent() -> ModelIntentSpec:
    """Greeting intent with two keywords and no parameters."""
    return ModelIntentSpec(key="greeting", keywords="hello,hi")


@pytest.fixture
def booking_intent() -> ModelIntentSpec:
    """Booking intent with a required date and an optional party size."""
    return ModelIntentSpec.model_validate(
        {
            "key": "book",
            "keywords": "book,reserve",
            "parameters": {
                "parameterOptions": [
                    {"key": "date", "type": "date", "required": True},
                    {"key": "party_size", "type": "number", "defaultValue": "2"},
                ]
            },
            "outputKey": "Bookings",
        }
    )


@pytest.fixture
def intents(
    greeting_intent: ModelIntentSpec,
    booking_intent: ModelIntentSpec,
) -> tuple[ModelIntentSpec, ...]:
    """Greeting then booking, in that declaration order."""
    return (greeting_intent, booking_intent)


# =========================================================================
# Config and Record Factories
# =========================================================================


@pytest.fixture
def make_config(
    intents: tuple[ModelIntentSpec, ...],
) -> Callable[..., ModelIntentRouterConfig]:
    """Factory for router configs over the shared intents.

    Keyword arguments override config fields; pass ``intents=`` to replace
    the intent list.
    """

    def _make(**overrides: Any) -> ModelIntentRouterConfig:
        values: dict[str, Any] = {
            "intents": intents,
            "fallback_behavior": EnumFallbackPolicy.ROUTE_TO_FALLBACK,
        }
        values.update(overrides)
        return ModelIntentRouterConfig.model_validate(values)

    return _make


@pytest.fixture
def make_records() -> Callable[..., list[ModelRecord]]:
    """Factory turning message strings into numbered records."""

    def _make(*messages: str) -> list[ModelRecord]:
        return records_from_items({"message": message} for message in messages)

    return _make
