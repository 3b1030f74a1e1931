# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Per-record routing states."""

from __future__ import annotations

from enum import StrEnum


class EnumRecordState(StrEnum):
    """States a record passes through inside one routing batch.

    Transitions:
        PENDING -> CLASSIFIED -> ROUTED | DISCARDED | FAILED

    ROUTED, DISCARDED and FAILED are terminal.
    """

    PENDING = "pending"
    CLASSIFIED = "classified"
    ROUTED = "routed"
    DISCARDED = "discarded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Return True when no further transition is possible."""
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {EnumRecordState.ROUTED, EnumRecordState.DISCARDED, EnumRecordState.FAILED}
)


__all__ = ["EnumRecordState"]
