# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input record model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelRecord(BaseModel):
    """One input item of a routing batch.

    Attributes:
        item_index: Stable position of the record in its input batch.
        data: Ordered mapping of field name to value. Opaque to the router
            apart from the configured input field and parameter fields.
        binary: Optional opaque attachment, carried to the output unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    item_index: int = Field(..., ge=0, description="Position in the input batch")
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Record fields",
    )
    binary: Any = Field(
        default=None,
        description="Opaque binary attachment passed through unchanged",
    )


def records_from_items(items: Iterable[Mapping[str, Any]]) -> list[ModelRecord]:
    """Build records from plain field mappings, numbering them in order."""
    return [
        ModelRecord(item_index=index, data=dict(item))
        for index, item in enumerate(items)
    ]


__all__ = ["ModelRecord", "records_from_items"]
