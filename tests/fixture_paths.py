"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path

TAB = "\t"
UPD_NAME = "University of the Philippines Diliman"
UPD_ADDR = "Kalaw Corner, Quirino Street, UP Diliman, Quezon City, Metro Manila"


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def qualifier_line(*fields: str) -> str:
    """Join fields into one tab-separated qualifier line."""
    return TAB.join(fields)


def smith_line(middle_name: str | None = None) -> str:
    """Build the reference Smith line, optionally with a middle name column."""
    names = ["Smith", "John"] if middle_name is None else ["Smith", "John", middle_name]
    return qualifier_line(*names, "0000001", "001", "7:30 AM", "1", "0001", UPD_NAME, UPD_ADDR)
