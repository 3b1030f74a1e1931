# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared models for intent routing.

Exports:
    ModelIntentSpec: Frozen operator-defined intent.
    ModelParameterSpec: Frozen parameter declared on an intent.
    ModelRecord: One input item of a routing batch.
    ModelIntentRouterConfig: Frozen router configuration snapshot.
    IntentRouterSettings: Pydantic Settings for environment-driven defaults.
    records_from_items: Number plain field mappings into records.
    split_keywords: Split a comma-separated keyword string.
"""

from omniintent.models.model_intent_spec import (
    ModelIntentSpec,
    ModelParameterSpec,
    split_keywords,
)
from omniintent.models.model_record import ModelRecord, records_from_items
from omniintent.models.model_router_config import (
    IntentRouterSettings,
    ModelIntentRouterConfig,
)

__all__ = [
    "IntentRouterSettings",
    "ModelIntentRouterConfig",
    "ModelIntentSpec",
    "ModelParameterSpec",
    "ModelRecord",
    "records_from_items",
    "split_keywords",
]
