# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for intent routing exception classes and record states.

This module tests the exception hierarchy including:
    - IntentRoutingError (base exception)
    - ConfigurationError (ROUTER_001)
    - NoIntentMatchedError (ROUTER_002)
    - RecordProcessingError (ROUTER_003)
"""

from __future__ import annotations

import pytest

from omniintent.enums import EnumRecordState
from omniintent.exceptions import (
    ConfigurationError,
    IntentRoutingError,
    NoIntentMatchedError,
    RecordProcessingError,
)


class TestIntentRoutingError:
    """Tests for the base IntentRoutingError exception."""

    def test_creates_with_message_only(self) -> None:
        """Test that exception can be created with message only."""
        error = IntentRoutingError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code is None
        assert error.item_index is None

    def test_creates_with_code_and_index(self) -> None:
        """Test that code and item index are stored."""
        error = IntentRoutingError("Custom error", code="ROUTER_999", item_index=4)
        assert error.code == "ROUTER_999"
        assert error.item_index == 4


class TestSubclasses:
    """Tests for the specific routing errors."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigurationError("bad config"), "ROUTER_001"),
            (NoIntentMatchedError("text"), "ROUTER_002"),
            (RecordProcessingError("boom"), "ROUTER_003"),
        ],
    )
    def test_error_codes(self, error: IntentRoutingError, code: str) -> None:
        """Test that each subclass carries its error code."""
        assert isinstance(error, IntentRoutingError)
        assert error.code == code

    def test_no_intent_matched_truncates_preview(self) -> None:
        """Test that the message shows at most 100 characters of input."""
        text = "x" * 150
        error = NoIntentMatchedError(text, item_index=2)

        assert error.message == f"No intent recognized for input: {'x' * 100}..."
        assert error.input_text == text
        assert error.item_index == 2

    def test_configuration_error_has_no_item_index(self) -> None:
        """Test that configuration errors are not tied to a record."""
        assert ConfigurationError("bad").item_index is None

    def test_record_processing_error_keeps_cause(self) -> None:
        """Test that the wrapped exception is chained."""
        with pytest.raises(RecordProcessingError) as exc_info:
            try:
                raise KeyError("field")
            except KeyError as e:
                raise RecordProcessingError("wrapped", item_index=1) from e

        assert isinstance(exc_info.value.__cause__, KeyError)


class TestEnumRecordState:
    """Tests for record state transitions metadata."""

    @pytest.mark.parametrize(
        ("state", "terminal"),
        [
            (EnumRecordState.PENDING, False),
            (EnumRecordState.CLASSIFIED, False),
            (EnumRecordState.ROUTED, True),
            (EnumRecordState.DISCARDED, True),
            (EnumRecordState.FAILED, True),
        ],
    )
    def test_is_terminal(self, state: EnumRecordState, terminal: bool) -> None:
        """Test that only routed, discarded and failed are terminal."""
        assert state.is_terminal is terminal
