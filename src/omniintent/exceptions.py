# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for intent routing.

All exceptions carry a contract error code for structured handling and, when
raised while processing a specific record, that record's batch position.

Error Codes:
    - ROUTER_001: Configuration error (fatal, raised before any record)
    - ROUTER_002: No intent matched under the ``error`` fallback policy
      (recoverable per record under continue-on-fail)
    - ROUTER_003: Unexpected failure while processing one record
      (recoverable per record under continue-on-fail)
"""

from __future__ import annotations


class IntentRoutingError(Exception):
    """Base exception for intent routing errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., ROUTER_001).
        item_index: Batch position of the offending record, when known.

    Example:
        >>> try:
        ...     raise IntentRoutingError("Something failed", code="ROUTER_999")
        ... except IntentRoutingError as e:
        ...     print(f"Error {e.code}: {e.message}")
        Error ROUTER_999: Something failed
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        *,
        item_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.item_index = item_index


class ConfigurationError(IntentRoutingError):
    """Raised when the router configuration cannot produce a valid topology.

    Covers duplicate intent keys, an empty intent list without a fallback
    channel, and an out-of-range confidence threshold. Never suppressed by
    continue-on-fail: no valid topology exists to route into.

    Error Code: ROUTER_001
    Recoverable: False
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ROUTER_001")


class NoIntentMatchedError(IntentRoutingError):
    """Raised under the ``error`` fallback policy when no intent matched.

    Error Code: ROUTER_002
    Recoverable: True (per record, when continue-on-fail is active)

    Attributes:
        input_text: The classified text, truncated for reporting.
    """

    def __init__(self, input_text: str, *, item_index: int | None = None) -> None:
        preview = input_text[:100]
        super().__init__(
            f"No intent recognized for input: {preview}...",
            code="ROUTER_002",
            item_index=item_index,
        )
        self.input_text = input_text


class RecordProcessingError(IntentRoutingError):
    """Wraps an unexpected exception raised while processing one record.

    Only raised in strict mode. The original exception is chained as
    ``__cause__``.

    Error Code: ROUTER_003
    Recoverable: True (per record, when continue-on-fail is active)
    """

    def __init__(self, message: str, *, item_index: int | None = None) -> None:
        super().__init__(message, code="ROUTER_003", item_index=item_index)


__all__ = [
    "ConfigurationError",
    "IntentRoutingError",
    "NoIntentMatchedError",
    "RecordProcessingError",
]
