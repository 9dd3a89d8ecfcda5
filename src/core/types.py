"""Shared typed models.

This module defines immutable data models used by ingest, store,
and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QualifierRecord:
    """One decoded examinee entry for a test date.

    Attributes:
        id: Seven-digit application identifier.
        surname: Title-cased surname.
        first_name: Title-cased first name.
        middle_name: Title-cased middle name when the line carried one.
        seat_number: Three-digit seat number.
        time: Reporting time, verbatim.
        room_assignment: One or two digit room number.
        test_center_code: Four-digit test center identifier.
        test_center_name: Test center name, verbatim.
        test_center_addr: Test center address, verbatim.
    """

    id: int
    surname: str
    first_name: str
    middle_name: str | None
    seat_number: int
    time: str
    room_assignment: int
    test_center_code: int
    test_center_name: str
    test_center_addr: str


@dataclass(frozen=True)
class ExamineeRow:
    """Persisted examinee row."""

    id: int
    surname: str
    first_name: str
    middle_name: str | None
    seat_number: int
    time: str
    room_assignment: int
    test_center_code: int


@dataclass(frozen=True)
class CenterRow:
    """Persisted test center row."""

    id: int
    name: str
    address: str


@dataclass(frozen=True)
class IngestOptions:
    """Ingest command options.

    Attributes:
        source_uri: Input file path or ``s3://bucket/key`` URI.
        skip_invalid: Log and skip bad lines instead of aborting the run.
    """

    source_uri: str
    skip_invalid: bool = False


@dataclass(frozen=True)
class IngestSummary:
    """Ingest run counters.

    Attributes:
        lines_read: Number of outcomes pulled from the reader.
        inserted: Number of new examinee rows written.
        duplicates: Number of records whose examinee id already existed.
        skipped: Number of invalid lines skipped.
    """

    lines_read: int
    inserted: int
    duplicates: int
    skipped: int
