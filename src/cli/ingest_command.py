"""Ingest command wiring for qualifiers CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import QualifiersConfig
from core.types import IngestOptions
from ingest.pipeline import run_ingest


def add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser("ingest", help="Load a qualifier list into the database")
    parser.add_argument("source", help="Qualifier list file or s3://bucket/key")
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Log and skip malformed lines instead of aborting",
    )


def run_ingest_command(config: QualifiersConfig, args: argparse.Namespace) -> int:
    """Execute ingest and print run counters."""
    options = IngestOptions(source_uri=args.source, skip_invalid=args.skip_invalid)
    summary = run_ingest(options, config)
    print(f"lines_read={summary.lines_read}")
    print(f"inserted={summary.inserted}")
    print(f"duplicates={summary.duplicates}")
    print(f"skipped={summary.skipped}")
    return 0
