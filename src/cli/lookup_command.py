"""Lookup command wiring for qualifiers CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import QualifiersConfig
from store.qualifier_store import QualifierStore


def add_lookup_command(subparsers: Any) -> None:
    """Register lookup subcommand."""
    parser = subparsers.add_parser("lookup", help="Show a stored examinee by application id")
    parser.add_argument("application_id", type=int, help="Seven-digit application id")


def run_lookup_command(config: QualifiersConfig, args: argparse.Namespace) -> int:
    """Print one examinee with its test center."""
    with QualifierStore(config.database_path) as store:
        examinee = store.get_examinee(args.application_id)
        if examinee is None:
            print(f"not_found={args.application_id}")
            return 1
        test_center = store.get_test_center(examinee.test_center_code)
    print(
        f"{examinee.id:07d}\t"
        f"{examinee.surname}\t"
        f"{examinee.first_name}\t"
        f"{examinee.middle_name or '-'}\t"
        f"{examinee.seat_number:03d}\t"
        f"{examinee.time}\t"
        f"{examinee.room_assignment}"
    )
    if test_center is not None:
        print(f"{test_center.id:04d}\t{test_center.name}\t{test_center.address}")
    return 0
