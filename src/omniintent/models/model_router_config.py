# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Router configuration model and environment-driven defaults.

A ModelIntentRouterConfig is the immutable snapshot every routing batch runs
against. It can be validated from an in-memory mapping or loaded from YAML.
Scalar options the YAML omits are taken from IntentRouterSettings, which reads
``INTENT_ROUTER_*`` environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from omniintent.enums import EnumFallbackPolicy
from omniintent.exceptions import ConfigurationError
from omniintent.models.model_intent_spec import ModelIntentSpec

# Scalar options that settings may supply when a config file omits them.
_OPTION_FIELDS: tuple[str, ...] = (
    "fallback_behavior",
    "case_sensitive",
    "confidence_threshold",
    "input_field",
    "continue_on_fail",
)


class IntentRouterSettings(BaseSettings):
    """Pydantic Settings for router defaults, loaded from environment.

    Environment variables:
        INTENT_ROUTER_FALLBACK_BEHAVIOR: route_to_fallback | discard | error
        INTENT_ROUTER_CASE_SENSITIVE: bool (default false)
        INTENT_ROUTER_CONFIDENCE_THRESHOLD: float (default 0.5)
        INTENT_ROUTER_INPUT_FIELD: str (default "message")
        INTENT_ROUTER_CONTINUE_ON_FAIL: bool (default false)
    """

    model_config = SettingsConfigDict(
        env_prefix="INTENT_ROUTER_",
        extra="ignore",
    )

    fallback_behavior: EnumFallbackPolicy = Field(
        default=EnumFallbackPolicy.ROUTE_TO_FALLBACK,
        description="Policy for records that match no intent",
    )
    case_sensitive: bool = Field(
        default=False,
        description="Whether keyword matching is case sensitive",
    )
    confidence_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum keyword-overlap confidence for a match",
    )
    input_field: str = Field(
        default="message",
        min_length=1,
        description="Record field holding the text to classify",
    )
    continue_on_fail: bool = Field(
        default=False,
        description="Route failing records to the error channel instead of aborting",
    )

    def to_options(self) -> dict[str, Any]:
        """Return the settings as router config option values."""
        return {name: getattr(self, name) for name in _OPTION_FIELDS}


class ModelIntentRouterConfig(BaseModel):
    """Frozen router configuration snapshot.

    Accepts snake_case field names and the camelCase names of the workflow
    node parameters (``intentsList``, ``fallbackBehavior``, ``caseSensitive``,
    ``confidenceThreshold``, ``inputField``, ``continueOnFail``). Options may
    also be nested under an ``options`` mapping.

    Attributes:
        intents: Ordered intent specs; order fixes channel indices.
        fallback_behavior: Policy for unmatched records.
        case_sensitive: Whether keyword matching is case sensitive.
        confidence_threshold: Minimum confidence for a match (0.0-1.0).
        input_field: Record field holding the text to classify.
        continue_on_fail: Convert per-record failures into error records.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    intents: tuple[ModelIntentSpec, ...] = Field(
        default=(),
        validation_alias=AliasChoices("intents", "intentsList"),
        description="Ordered intent specifications",
    )
    fallback_behavior: EnumFallbackPolicy = Field(
        default=EnumFallbackPolicy.ROUTE_TO_FALLBACK,
        validation_alias=AliasChoices("fallback_behavior", "fallbackBehavior"),
        description="Policy for records that match no intent",
    )
    case_sensitive: bool = Field(
        default=False,
        validation_alias=AliasChoices("case_sensitive", "caseSensitive"),
        description="Whether keyword matching is case sensitive",
    )
    confidence_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("confidence_threshold", "confidenceThreshold"),
        description="Minimum keyword-overlap confidence for a match",
    )
    input_field: str = Field(
        default="message",
        min_length=1,
        validation_alias=AliasChoices("input_field", "inputField"),
        description="Record field holding the text to classify",
    )
    continue_on_fail: bool = Field(
        default=False,
        validation_alias=AliasChoices("continue_on_fail", "continueOnFail"),
        description="Route failing records to the error channel instead of aborting",
    )

    @model_validator(mode="before")
    @classmethod
    def _flatten_options(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        options = data.pop("options", None)
        if isinstance(options, dict):
            for key, value in options.items():
                data.setdefault(key, value)
        for key in ("intents", "intentsList"):
            intents = data.get(key)
            if isinstance(intents, dict):
                data[key] = intents.get("intentOptions") or ()
        return data

    @classmethod
    def from_settings(
        cls,
        intents: tuple[ModelIntentSpec, ...] | list[ModelIntentSpec],
        settings: IntentRouterSettings | None = None,
    ) -> ModelIntentRouterConfig:
        """Build a config from intents plus environment-driven options."""
        settings = settings or IntentRouterSettings()
        return cls.model_validate({"intents": tuple(intents), **settings.to_options()})

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        *,
        settings: IntentRouterSettings | None = None,
    ) -> ModelIntentRouterConfig:
        """Load configuration from a YAML file.

        Supports a plain config mapping, or a contract-style document whose
        configuration lives under a ``defaults`` key. Options the file does not
        set are filled from ``settings`` (or a fresh IntentRouterSettings).

        Args:
            path: Path to the YAML configuration file.
            settings: Optional settings supplying defaults for unset options.

        Returns:
            ModelIntentRouterConfig instance.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            yaml.YAMLError: If YAML parsing fails.
            ConfigurationError: If the document is not a mapping.
            pydantic.ValidationError: If configuration validation fails.
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}

        if isinstance(data, dict) and "defaults" in data:
            data = data["defaults"] or {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Router configuration must be a mapping, got {type(data).__name__}"
            )

        config = cls.model_validate(data)
        defaults = (settings or IntentRouterSettings()).to_options()
        unset = {
            name: value
            for name, value in defaults.items()
            if name not in config.model_fields_set
        }
        if not unset:
            return config
        return config.model_copy(update=unset)


__all__ = ["IntentRouterSettings", "ModelIntentRouterConfig"]
