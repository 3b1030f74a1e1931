# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""CLI entry point for intent_router_compute node.

Routes a batch of JSON records with a YAML router configuration and writes
the per-channel result to stdout or a file.

Usage:
    python -m omniintent.nodes.node_intent_router_compute --help
    python -m omniintent.nodes.node_intent_router_compute router.yaml records.json
    python -m omniintent.nodes.node_intent_router_compute router.yaml records.jsonl \\
        --fallback-behavior discard --output-format summary
    cat records.json | python -m omniintent.nodes.node_intent_router_compute \\
        router.yaml - --continue-on-fail --output routed.json

Input Format:
    A JSON array of record objects, or JSON lines with one object per line:
        [{"message": "hello there"}, {"message": "book a table", "date": "..."}]

Exit Codes:
    0 - Success: batch routed (including records sent to the fallback channel)
    1 - Input error: unreadable files, invalid JSON/YAML, invalid configuration
    2 - Routing error: a record failed and continue-on-fail was not set
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from omniintent.enums import EnumFallbackPolicy
from omniintent.exceptions import ConfigurationError, IntentRoutingError
from omniintent.models import ModelIntentRouterConfig, records_from_items
from omniintent.nodes.node_intent_router_compute.handlers import route_batch
from omniintent.nodes.node_intent_router_compute.models import (
    ModelIntentRoutingOutput,
)

logger = logging.getLogger(__name__)


def _get_log_level() -> int:
    """Get log level from environment with safe fallback.

    Returns logging.INFO if LOG_LEVEL is invalid or not set.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="python -m omniintent.nodes.node_intent_router_compute",
        description=(
            "Classify records by keyword intent and route them to per-intent "
            "output channels. Reads records from a JSON file (or stdin if '-' "
            "is given) and writes the routed channels to stdout or a file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Route with the configuration as written
  python -m omniintent.nodes.node_intent_router_compute router.yaml records.json

  # Drop unmatched records and keep going past failing ones
  python -m omniintent.nodes.node_intent_router_compute router.yaml records.json \\
      --fallback-behavior discard --continue-on-fail

  # Human-readable summary
  python -m omniintent.nodes.node_intent_router_compute router.yaml records.json \\
      --output-format summary
""",
    )

    parser.add_argument(
        "config",
        metavar="CONFIG",
        help="Path to the YAML router configuration.",
    )
    parser.add_argument(
        "input",
        metavar="INPUT",
        help="Path to a JSON array or JSON-lines file of records, or '-' for stdin.",
    )

    routing = parser.add_argument_group("routing overrides")
    routing.add_argument(
        "--fallback-behavior",
        choices=[policy.value for policy in EnumFallbackPolicy],
        default=None,
        help="Policy for unmatched records. Overrides the configuration file.",
    )
    routing.add_argument(
        "--threshold",
        type=float,
        default=None,
        metavar="FLOAT",
        help="Confidence threshold (0.0-1.0). Overrides the configuration file.",
    )
    routing.add_argument(
        "--case-sensitive",
        action="store_true",
        default=False,
        help="Match keywords case sensitively.",
    )
    routing.add_argument(
        "--continue-on-fail",
        action="store_true",
        default=False,
        help="Route failing records to the error channel instead of aborting.",
    )

    output = parser.add_argument_group("output options")
    output.add_argument(
        "--output-format",
        choices=["json", "summary"],
        default="json",
        help=(
            "Output format. 'json' emits the full ModelIntentRoutingOutput "
            "as JSON. 'summary' emits per-channel counts. Default: json"
        ),
    )
    output.add_argument(
        "--output",
        metavar="FILE",
        default=None,
        help="Write output to FILE instead of stdout.",
    )
    output.add_argument(
        "--indent",
        type=int,
        default=2,
        metavar="INT",
        help="JSON indentation level. Default: 2",
    )

    return parser


def _load_config(path: str, args: argparse.Namespace) -> ModelIntentRouterConfig:
    """Load the YAML configuration and apply CLI overrides.

    Raises:
        SystemExit(1): On missing file, invalid YAML or invalid configuration.
    """
    try:
        config = ModelIntentRouterConfig.from_yaml(path)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as exc:
        print(f"Error: invalid YAML in configuration: {exc}", file=sys.stderr)
        sys.exit(1)
    except (ValidationError, ConfigurationError) as exc:
        print(f"Error: invalid router configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    overrides: dict[str, Any] = {}
    if args.fallback_behavior is not None:
        overrides["fallback_behavior"] = EnumFallbackPolicy(args.fallback_behavior)
    if args.threshold is not None:
        if not (0.0 <= args.threshold <= 1.0):
            print(
                f"Error: --threshold must be between 0.0 and 1.0, "
                f"got {args.threshold}",
                file=sys.stderr,
            )
            sys.exit(1)
        overrides["confidence_threshold"] = args.threshold
    if args.case_sensitive:
        overrides["case_sensitive"] = True
    if args.continue_on_fail:
        overrides["continue_on_fail"] = True

    return config.model_copy(update=overrides) if overrides else config


def _parse_items(raw: str) -> list[Any]:
    """Parse a JSON array, a single JSON object, or JSON lines."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return [json.loads(line) for line in raw.splitlines() if line.strip()]
    return data if isinstance(data, list) else [data]


def _load_input(source: str) -> list[dict[str, Any]]:
    """Load record objects from a file path or stdin.

    Raises:
        SystemExit(1): On file not found, invalid JSON, or non-object records.
    """
    try:
        if source == "-":
            raw = sys.stdin.read()
        else:
            path = Path(source)
            if not path.exists():
                print(f"Error: input file not found: {source}", file=sys.stderr)
                sys.exit(1)
            raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: failed to read input: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        items = _parse_items(raw)
    except json.JSONDecodeError as exc:
        print(f"Error: invalid JSON in input: {exc}", file=sys.stderr)
        sys.exit(1)

    for position, item in enumerate(items):
        if not isinstance(item, dict):
            print(
                f"Error: record {position} must be a JSON object, "
                f"got {type(item).__name__}",
                file=sys.stderr,
            )
            sys.exit(1)

    return items


def _format_summary(result: ModelIntentRoutingOutput) -> str:
    """Format a routing result as a human-readable summary."""
    lines = [
        "Intent Routing Result",
        "=" * 40,
        f"Fallback behavior: {result.topology.fallback_policy.value}",
        f"Routed:    {result.routed_count}",
        f"Discarded: {result.discarded_count}",
        f"Failed:    {result.failed_count}",
        f"Processing time: {result.processing_time_ms:.1f}ms",
    ]
    if result.cancelled:
        lines.append("Cancelled: batch stopped early")

    lines.extend(["", "Channels", "-" * 20])
    for channel, records in zip(result.topology.channels, result.channels, strict=True):
        marker = " (fallback)" if channel.is_fallback else ""
        lines.append(f"  [{channel.index}] {channel.display_name}{marker}: {len(records)}")

    return "\n".join(lines)


def _write_output(content: str, output_path: str | None) -> None:
    """Write content to stdout or a file.

    Raises:
        SystemExit(1): On write failure.
    """
    if output_path is None:
        print(content)
        return

    try:
        Path(output_path).write_text(content, encoding="utf-8")
    except OSError as exc:
        print(f"Error: failed to write output to {output_path}: {exc}", file=sys.stderr)
        sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point for intent_router_compute.

    Exits with code 0 on success, 1 on input or configuration error, and 2
    when a record fails outside continue-on-fail mode.
    """
    logging.basicConfig(
        level=_get_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = _load_config(args.config, args)
    records = records_from_items(_load_input(args.input))

    try:
        result = route_batch(records, config)
    except ConfigurationError as exc:
        print(f"Error: invalid router configuration: {exc.message}", file=sys.stderr)
        sys.exit(1)
    except IntentRoutingError as exc:
        print(
            f"Error: routing failed at record {exc.item_index}: {exc.message}",
            file=sys.stderr,
        )
        sys.exit(2)

    if args.output_format == "summary":
        content = _format_summary(result)
    else:
        content = json.dumps(
            result.model_dump(mode="json"),
            indent=args.indent,
            default=str,
        )

    _write_output(content, args.output)


if __name__ == "__main__":
    main()
