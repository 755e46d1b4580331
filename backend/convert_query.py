#!/usr/bin/env python3
"""
CLI interface for converting error descriptions into monitoring queries.

Usage:
    python convert_query.py --input "Show me all 500 errors from the API service" \
                            --platform sentry

    python convert_query.py -i "database timeouts" -p splunk --offline --format json
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import config
from core.query_builder.engines import build_query_engine
from core.query_builder.models import ConversionOutcome, ErrorCode, Platform
from core.query_builder.service import QueryConversionService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_FAILED = 1
EXIT_EMPTY_INPUT = 2


def format_output(outcome: ConversionOutcome) -> str:
    """Format a conversion outcome for display."""
    output = []

    if outcome.result is None:
        output.append(f"Error [{outcome.error.code.value}]: {outcome.error.message}")
        return "\n".join(output)

    result = outcome.result
    output.append(f"Platform: {result.platform.value}")
    output.append("")
    output.append(result.query)

    if outcome.error:
        output.append("")
        output.append(f"Warning [{outcome.error.code.value}]: {outcome.error.message}")

    return "\n".join(output)


def format_json(outcome: ConversionOutcome) -> str:
    payload = {}
    if outcome.result is not None:
        payload.update(outcome.result.to_dict())
        if outcome.error:
            payload["validationError"] = outcome.error.to_dict()
    else:
        payload["error"] = outcome.error.message
        payload["code"] = outcome.error.code.value
    return json.dumps(payload, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert natural-language error descriptions into monitoring queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use the configured LLM
  python convert_query.py --input "500 errors from the API" --platform sentry

  # Pattern-based generation, no network
  python convert_query.py -i "login failures" -p elasticsearch --offline

  # Output as JSON
  python convert_query.py -i "database timeouts" -p splunk --format json
        """
    )

    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Natural language description of the error"
    )

    parser.add_argument(
        "--platform", "-p",
        required=True,
        choices=[platform.value for platform in Platform],
        help="Target platform"
    )

    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use pattern-based generation instead of an LLM"
    )

    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = config.load_settings()
        if args.offline:
            settings = replace(settings, llm_provider="pattern")
        if args.verbose:
            settings = replace(settings, log_level="DEBUG")
        config.setup_logging(settings)

        engine = build_query_engine(settings)
    except ValueError as e:
        print(f"Error [{ErrorCode.CONVERSION_ERROR.value}]: {e}")
        return EXIT_CONVERSION_FAILED

    service = QueryConversionService(engine)
    outcome = service.convert(args.input, Platform.parse(args.platform))

    if args.format == "json":
        print(format_json(outcome))
    else:
        print(format_output(outcome))

    if outcome.result is not None:
        return EXIT_OK
    if outcome.error.code == ErrorCode.EMPTY_INPUT:
        return EXIT_EMPTY_INPUT
    return EXIT_CONVERSION_FAILED


if __name__ == "__main__":
    sys.exit(main())
