# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler routing records to intent channels.

Each record moves through pending -> classified -> routed | discarded |
failed. A matched record is enriched and appended to its intent's channel.
What happens to an unmatched record depends on the fallback policy:

    route_to_fallback  enriched with recognizedIntent=None, sent to the
                       fallback (last) channel
    discard            dropped and counted
    error              NoIntentMatchedError

When continue-on-fail is active, any per-record exception becomes an error
record on the error channel (the fallback channel when present, else 0).
Otherwise the batch aborts on the first failing record. Configuration errors
are always fatal and are raised before any record is processed.

ONEX Compliance:
- No I/O: records in, channels out
- Configuration and topology are immutable for the whole batch
"""

from __future__ import annotations

import json
import logging
import threading
import time
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from omniintent.enums import EnumFallbackPolicy, EnumRecordState
from omniintent.exceptions import (
    ConfigurationError,
    IntentRoutingError,
    NoIntentMatchedError,
    RecordProcessingError,
)
from omniintent.models import ModelIntentRouterConfig, ModelIntentSpec, ModelRecord
from omniintent.nodes.node_intent_router_compute.models import (
    ModelIntentRoutingInput,
    ModelIntentRoutingOutput,
    ModelRecordOutcome,
    ModelRoutedRecord,
)
from omniintent.nodes.node_keyword_classifier_compute.handlers import (
    classify_keywords,
)
from omniintent.nodes.node_keyword_classifier_compute.models import (
    ModelClassificationResult,
)
from omniintent.nodes.node_parameter_extractor_compute.handlers import (
    extract_parameters,
)
from omniintent.nodes.node_parameter_extractor_compute.models import (
    ModelExtractedParameters,
)
from omniintent.nodes.node_topology_builder_compute.handlers import build_topology
from omniintent.nodes.node_topology_builder_compute.models import (
    ModelOutputTopology,
)
from omniintent.protocols import ProtocolIntentClassifier

logger = logging.getLogger(__name__)

# Characters of classified text echoed in intentMetadata.inputText
INPUT_TEXT_PREVIEW_LENGTH = 200


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def resolve_input_text(record: ModelRecord, input_field: str) -> str:
    """Return the text to classify for a record.

    The configured field is used when present and non-empty. Otherwise the
    whole record is serialized as compact JSON so classification still has
    something to work on.
    """
    value = record.data.get(input_field)
    if value is None or value == "":
        logger.debug(
            "Record %d has no %r field, classifying serialized record",
            record.item_index,
            input_field,
        )
        return json.dumps(
            record.data,
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        )
    return value if isinstance(value, str) else str(value)


def build_enriched_record(
    record: ModelRecord,
    *,
    input_text: str,
    classification: ModelClassificationResult,
    parameters: ModelExtractedParameters | None = None,
) -> dict[str, Any]:
    """Return the record's fields plus the routing enrichment.

    Original fields are kept as-is; the enrichment keys overwrite fields of
    the same name.
    """
    params = parameters or ModelExtractedParameters()
    return {
        **record.data,
        "recognizedIntent": classification.matched_intent_key,
        "extractedParameters": dict(params.values),
        "intentMetadata": {
            "confidence": classification.confidence,
            "processingTime": _now_iso(),
            "inputText": input_text[:INPUT_TEXT_PREVIEW_LENGTH],
            "matchedKeywords": list(classification.matched_keywords),
            "missingParameters": list(params.missing_required),
        },
    }


def build_error_record(record: ModelRecord, message: str) -> dict[str, Any]:
    """Return the record's fields plus error details."""
    return {
        **record.data,
        "error": message,
        "recognizedIntent": None,
        "extractedParameters": {},
        "intentMetadata": {
            "confidence": 0,
            "processingTime": _now_iso(),
            "error": True,
        },
    }


def _find_intent(intents: Sequence[ModelIntentSpec], key: str) -> ModelIntentSpec:
    for intent in intents:
        if intent.key == key:
            return intent
    raise RecordProcessingError(f"Classifier returned unknown intent {key!r}")


def route_record(
    record: ModelRecord,
    config: ModelIntentRouterConfig,
    topology: ModelOutputTopology,
    *,
    classifier: ProtocolIntentClassifier = classify_keywords,
) -> ModelRecordOutcome:
    """Classify one record and decide where it goes.

    Args:
        record: The record to route.
        config: Configuration snapshot of the batch.
        topology: Topology built from ``config``.
        classifier: Classifier to use; the keyword classifier by default.

    Returns:
        ModelRecordOutcome in state ROUTED or DISCARDED.

    Raises:
        NoIntentMatchedError: If nothing matched under the error policy.
        RecordProcessingError: If the classifier returned an unknown key.
        ConfigurationError: If the classifier rejects the threshold.
    """
    input_text = resolve_input_text(record, config.input_field)
    classification = classifier(
        input_text,
        config.intents,
        case_sensitive=config.case_sensitive,
        threshold=config.confidence_threshold,
    )

    if classification.matched_intent_key is not None:
        key = classification.matched_intent_key
        channel_index = topology.index_for_intent(key)
        if channel_index is None:
            raise RecordProcessingError(
                f"Classifier returned unknown intent {key!r}",
                item_index=record.item_index,
            )
        parameters = extract_parameters(_find_intent(config.intents, key), record)
        data = build_enriched_record(
            record,
            input_text=input_text,
            classification=classification,
            parameters=parameters,
        )
    elif topology.fallback_policy is EnumFallbackPolicy.ROUTE_TO_FALLBACK:
        channel_index = topology.error_channel_index
        data = build_enriched_record(
            record,
            input_text=input_text,
            classification=classification,
        )
    elif topology.fallback_policy is EnumFallbackPolicy.DISCARD:
        logger.debug("Record %d matched no intent, discarded", record.item_index)
        return ModelRecordOutcome(
            item_index=record.item_index, state=EnumRecordState.DISCARDED
        )
    else:
        raise NoIntentMatchedError(input_text, item_index=record.item_index)

    logger.debug(
        "Record %d -> channel %d (intent=%r, confidence=%.3f)",
        record.item_index,
        channel_index,
        classification.matched_intent_key,
        classification.confidence,
    )
    return ModelRecordOutcome(
        item_index=record.item_index,
        state=EnumRecordState.ROUTED,
        routed_record=ModelRoutedRecord(
            item_index=record.item_index,
            channel_index=channel_index,
            data=data,
            binary=record.binary,
        ),
    )


def _failed_outcome(
    record: ModelRecord,
    topology: ModelOutputTopology,
    message: str,
) -> ModelRecordOutcome:
    channel_index = topology.error_channel_index
    logger.warning(
        "Record %d failed, routing error record to channel %d: %s",
        record.item_index,
        channel_index,
        message,
    )
    return ModelRecordOutcome(
        item_index=record.item_index,
        state=EnumRecordState.FAILED,
        error=message,
        routed_record=ModelRoutedRecord(
            item_index=record.item_index,
            channel_index=channel_index,
            data=build_error_record(record, message),
            binary=record.binary,
        ),
    )


def route_batch(
    records: Sequence[ModelRecord],
    config: ModelIntentRouterConfig,
    *,
    classifier: ProtocolIntentClassifier | None = None,
    cancel_event: threading.Event | None = None,
) -> ModelIntentRoutingOutput:
    """Route a batch of records in input order.

    Args:
        records: Records to route.
        config: Configuration snapshot; the topology is built from it once.
        classifier: Optional classifier replacing the keyword classifier.
        cancel_event: When set, routing stops before the next record and the
            partial result is returned with ``cancelled=True``.

    Returns:
        ModelIntentRoutingOutput with one tuple of records per channel.

    Raises:
        ConfigurationError: If the configuration yields no valid topology, or
            the classifier rejects the configured threshold.
        IntentRoutingError: In strict mode, for the first failing record.
            ``item_index`` is set; unexpected exceptions are wrapped in
            RecordProcessingError with the original as ``__cause__``.
    """
    start_time = time.perf_counter()
    classify = classifier or classify_keywords
    topology = build_topology(config.intents, config.fallback_behavior)

    channels: list[list[ModelRoutedRecord]] = [
        [] for _ in range(topology.channel_count)
    ]
    counts = {state: 0 for state in EnumRecordState}
    cancelled = False

    for record in records:
        if cancel_event is not None and cancel_event.is_set():
            cancelled = True
            logger.info(
                "Routing cancelled before record %d of %d",
                record.item_index,
                len(records),
            )
            break

        try:
            outcome = route_record(record, config, topology, classifier=classify)
        except ConfigurationError:
            raise
        except Exception as e:
            if config.continue_on_fail:
                outcome = _failed_outcome(record, topology, str(e))
            elif isinstance(e, IntentRoutingError):
                if e.item_index is None:
                    e.item_index = record.item_index
                raise
            else:
                raise RecordProcessingError(
                    f"Failed to route record {record.item_index}: {e}",
                    item_index=record.item_index,
                ) from e

        counts[outcome.state] += 1
        if outcome.routed_record is not None:
            channels[outcome.routed_record.channel_index].append(
                outcome.routed_record
            )

    processing_time_ms = (time.perf_counter() - start_time) * 1000
    result = ModelIntentRoutingOutput(
        topology=topology,
        channels=tuple(tuple(channel) for channel in channels),
        routed_count=counts[EnumRecordState.ROUTED],
        discarded_count=counts[EnumRecordState.DISCARDED],
        failed_count=counts[EnumRecordState.FAILED],
        cancelled=cancelled,
        processing_time_ms=processing_time_ms,
    )
    logger.info(
        "Routed batch of %d records in %.2fms: routed=%d discarded=%d failed=%d "
        "channels=%s",
        len(records),
        processing_time_ms,
        result.routed_count,
        result.discarded_count,
        result.failed_count,
        [len(channel) for channel in result.channels],
    )
    return result


def handle_intent_routing(
    input_data: ModelIntentRoutingInput,
) -> ModelIntentRoutingOutput:
    """Orchestrating handler for intent routing.

    Builds the topology from the input's configuration and routes its
    records. Errors are raised, not returned: routing output has no error
    slot, and continue-on-fail already covers per-record failures.
    """
    return route_batch(input_data.records, input_data.config)


__all__ = [
    "INPUT_TEXT_PREVIEW_LENGTH",
    "build_enriched_record",
    "build_error_record",
    "handle_intent_routing",
    "resolve_input_text",
    "route_batch",
    "route_record",
]
