# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for keyword-overlap intent classification.

This module tests the keyword classifier including:
    - Confidence as matched keywords over total keywords
    - Threshold filtering and the one-hit minimum
    - First-match-wins ordering
    - Case folding and case-sensitive mode
    - Diagnostics (intent_scores, matched_keywords)
"""

from __future__ import annotations

import pytest

from omniintent.exceptions import ConfigurationError
from omniintent.models import ModelIntentSpec
from omniintent.nodes.node_keyword_classifier_compute.handlers import (
    classify_keywords,
    handle_keyword_classification,
)
from omniintent.nodes.node_keyword_classifier_compute.models import (
    ModelKeywordClassificationInput,
)
from omniintent.protocols import ProtocolIntentClassifier


@pytest.mark.unit
class TestConfidence:
    """Tests for the confidence calculation and threshold."""

    def test_half_keywords_matched_gives_half_confidence(
        self, greeting_intent: ModelIntentSpec
    ) -> None:
        """'Hello there' hits one of two greeting keywords."""
        result = classify_keywords("Hello there", [greeting_intent], threshold=0.5)

        assert result.matched_intent_key == "greeting"
        assert result.confidence == 0.5
        assert result.matched_keywords == ("hello",)
        assert result.is_match

    def test_below_threshold_is_no_match(
        self, greeting_intent: ModelIntentSpec
    ) -> None:
        """Confidence 0.5 does not clear a 0.6 threshold."""
        result = classify_keywords("Hello there", [greeting_intent], threshold=0.6)

        assert result.matched_intent_key is None
        assert result.confidence == 0.0
        assert result.matched_keywords == ()
        assert result.intent_scores == {"greeting": 0.5}

    def test_all_keywords_matched_gives_full_confidence(
        self, greeting_intent: ModelIntentSpec
    ) -> None:
        """Both keywords present yields confidence 1.0."""
        result = classify_keywords("hi, hello!", [greeting_intent], threshold=1.0)

        assert result.matched_intent_key == "greeting"
        assert result.confidence == 1.0
        assert result.matched_keywords == ("hello", "hi")

    def test_zero_threshold_still_requires_a_hit(
        self, greeting_intent: ModelIntentSpec
    ) -> None:
        """An intent with no matching keyword never wins, even at threshold 0."""
        result = classify_keywords("good morning", [greeting_intent], threshold=0.0)

        assert result.matched_intent_key is None
        assert result.intent_scores == {"greeting": 0.0}

    def test_intent_without_keywords_never_matches(self) -> None:
        """An empty keyword list scores 0 and is skipped."""
        empty = ModelIntentSpec(key="empty", keywords="")
        catch = ModelIntentSpec(key="catch", keywords="table")

        result = classify_keywords("a table", [empty, catch], threshold=0.0)

        assert result.matched_intent_key == "catch"
        assert result.intent_scores == {"empty": 0.0, "catch": 1.0}

    def test_empty_text_never_matches(
        self, greeting_intent: ModelIntentSpec
    ) -> None:
        """Empty text contains no keyword."""
        result = classify_keywords("", [greeting_intent], threshold=0.0)

        assert result.matched_intent_key is None

    def test_no_intents_is_no_match(self) -> None:
        """Classifying against no intents returns an empty result."""
        result = classify_keywords("hello", [])

        assert result.matched_intent_key is None
        assert result.intent_scores == {}

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range_rejected(
        self, greeting_intent: ModelIntentSpec, threshold: float
    ) -> None:
        """Thresholds outside [0, 1] are configuration errors."""
        with pytest.raises(ConfigurationError) as exc_info:
            classify_keywords("hello", [greeting_intent], threshold=threshold)

        assert exc_info.value.code == "ROUTER_001"


@pytest.mark.unit
class TestFirstMatchWins:
    """Tests for declaration-order precedence."""

    def test_earlier_qualifying_intent_beats_higher_later_score(self) -> None:
        """The first qualifying intent wins over a better later one."""
        broad = ModelIntentSpec(key="broad", keywords="hello,a,b,c")
        exact = ModelIntentSpec(key="exact", keywords="hello")

        result = classify_keywords("hello", [broad, exact], threshold=0.25)

        assert result.matched_intent_key == "broad"
        assert result.confidence == 0.25

    def test_evaluation_stops_at_winner(self) -> None:
        """Intents after the winner are not scored."""
        first = ModelIntentSpec(key="first", keywords="hello")
        second = ModelIntentSpec(key="second", keywords="hello")

        result = classify_keywords("hello", [first, second])

        assert result.intent_scores == {"first": 1.0}

    def test_non_qualifying_earlier_intent_is_skipped(self) -> None:
        """An earlier intent below threshold does not block a later one."""
        weak = ModelIntentSpec(key="weak", keywords="hello,a1,a2,a3")
        strong = ModelIntentSpec(key="strong", keywords="hello")

        result = classify_keywords("hello", [weak, strong], threshold=0.5)

        assert result.matched_intent_key == "strong"
        assert result.intent_scores == {"weak": 0.25, "strong": 1.0}


@pytest.mark.unit
class TestCaseHandling:
    """Tests for case folding."""

    def test_case_insensitive_by_default(self) -> None:
        """Upper-case text matches lower-case keywords."""
        intent = ModelIntentSpec(key="greeting", keywords="hello")

        result = classify_keywords("HELLO", [intent])

        assert result.matched_intent_key == "greeting"

    def test_matched_keywords_keep_configured_spelling(self) -> None:
        """matched_keywords reports keywords as configured, not folded."""
        intent = ModelIntentSpec(key="greeting", keywords="Hello")

        result = classify_keywords("hello world", [intent])

        assert result.matched_keywords == ("Hello",)

    def test_case_folding_is_locale_independent(self) -> None:
        """casefold() maps the German sharp s to 'ss'."""
        intent = ModelIntentSpec(key="street", keywords="straße")

        result = classify_keywords("STRASSE 5", [intent])

        assert result.matched_intent_key == "street"

    def test_case_sensitive_mode(self) -> None:
        """With case_sensitive=True, case must match exactly."""
        intent = ModelIntentSpec(key="greeting", keywords="hello")

        miss = classify_keywords("Hello", [intent], case_sensitive=True)
        hit = classify_keywords("hello", [intent], case_sensitive=True)

        assert miss.matched_intent_key is None
        assert hit.matched_intent_key == "greeting"


@pytest.mark.unit
class TestSubstringMatching:
    """Tests for plain substring semantics."""

    def test_keyword_matches_inside_longer_word(self) -> None:
        """Keywords match as substrings, not whole words."""
        intent = ModelIntentSpec(key="greeting", keywords="hi")

        result = classify_keywords("this is it", [intent])

        assert result.matched_intent_key == "greeting"

    def test_multi_word_keyword(self) -> None:
        """A keyword may contain spaces."""
        intent = ModelIntentSpec(key="cancel", keywords="cancel my order")

        result = classify_keywords("Please cancel my order now", [intent])

        assert result.matched_intent_key == "cancel"


@pytest.mark.unit
class TestBookingScenario:
    """End-to-end classification scenarios for a booking intent."""

    def test_reserve_matches_book(self, booking_intent: ModelIntentSpec) -> None:
        """'reserve' is one of two booking keywords."""
        result = classify_keywords(
            "I want to reserve a table", [booking_intent], threshold=0.5
        )

        assert result.matched_intent_key == "book"
        assert result.confidence == 0.5

    def test_greeting_text_does_not_match_book(
        self, booking_intent: ModelIntentSpec
    ) -> None:
        """'hello' contains no booking keyword."""
        result = classify_keywords("hello", [booking_intent], threshold=0.5)

        assert result.matched_intent_key is None
        assert result.confidence == 0.0


@pytest.mark.unit
class TestHandleKeywordClassification:
    """Tests for the typed node-input handler and protocol conformance."""

    def test_handler_passes_options(self, greeting_intent: ModelIntentSpec) -> None:
        """The handler forwards case mode and threshold."""
        input_data = ModelKeywordClassificationInput(
            text="Hello",
            intents=(greeting_intent,),
            case_sensitive=True,
            threshold=0.5,
        )

        result = handle_keyword_classification(input_data)

        assert result.matched_intent_key is None

    def test_classify_keywords_satisfies_protocol(self) -> None:
        """The keyword classifier is a ProtocolIntentClassifier."""
        assert isinstance(classify_keywords, ProtocolIntentClassifier)
