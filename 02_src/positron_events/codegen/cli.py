"""Command-line entry point for regenerating the events module."""

import argparse
import os
import sys

from dotenv import load_dotenv

from ..config import (
    DEFAULT_EVENTS_MODULE_PATH,
    DEFAULT_SCHEMA_PATH,
    PROJECT_ROOT,
    resolve_path,
)
from ..errors import EventError
from ..logging_config import get_logger, setup_logging
from ..schema import load_schema
from .generator import check_events_module, write_events_module

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="positron-events-codegen",
        description="Generate the Positron event records from the event schema.",
    )
    parser.add_argument(
        "--schema",
        default=None,
        help="Path to the schema JSON (default: EVENTS_SCHEMA_PATH or the bundled schema)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Module to write (default: EVENTS_MODULE_PATH or positron_events/models/events.py)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit with status 1 if the module is out of date",
    )
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the generator. Returns the process exit status."""
    load_dotenv(PROJECT_ROOT / ".env")
    args = build_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)

    schema_path = resolve_path(args.schema or os.getenv("EVENTS_SCHEMA_PATH"), DEFAULT_SCHEMA_PATH)
    output_path = resolve_path(
        args.output or os.getenv("EVENTS_MODULE_PATH"), DEFAULT_EVENTS_MODULE_PATH
    )

    try:
        schema = load_schema(schema_path)
        if args.check:
            if not check_events_module(schema, output_path):
                return 1
            logger.info("Events module %s is up to date", output_path)
            return 0
        write_events_module(schema, output_path)
    except (EventError, OSError) as exc:
        logger.error("Code generation failed: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
