"""Check command wiring for qualifiers CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import QualifiersConfig
from ingest.pipeline import check_source


def add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    parser = subparsers.add_parser(
        "check",
        help="Validate a qualifier list without storing it",
    )
    parser.add_argument("source", help="Qualifier list file or s3://bucket/key")


def run_check_command(config: QualifiersConfig, args: argparse.Namespace) -> int:
    """Decode every line and report the malformed ones."""
    valid_count, errors = check_source(args.source, config)
    for error in errors:
        print(f"line={error.line}\terror={error.kind.description}")
    print(f"valid={valid_count}")
    print(f"invalid={len(errors)}")
    return 0 if not errors else 1
