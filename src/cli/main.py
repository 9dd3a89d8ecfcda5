"""Qualifiers CLI entry points.
This module exposes commands for loading, checking, and looking up
qualifier lists. It maps argparse commands onto ingest and store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.check_command import add_check_command, run_check_command
from cli.ingest_command import add_ingest_command, run_ingest_command
from cli.lookup_command import add_lookup_command, run_lookup_command
from core.config import QualifiersConfig
from core.errors import QualifiersError


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="qualifiers", description="NCE qualifiers CLI")
    parser.add_argument("--database", help="Override QUALIFIERS_DATABASE_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_ingest_command(subparsers)
    add_check_command(subparsers)
    add_lookup_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the qualifiers CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.database)
        if args.command == "ingest":
            return run_ingest_command(config, args)
        if args.command == "check":
            return run_check_command(config, args)
        if args.command == "lookup":
            return run_lookup_command(config, args)
    except QualifiersError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(database: str | None) -> QualifiersConfig:
    """Build runtime config with optional database override.

    Args:
        database: Optional override path.

    Returns:
        Configured runtime config.
    """
    config = QualifiersConfig.from_env()
    if database:
        config = replace(config, database_path=Path(database).expanduser())
    return config
