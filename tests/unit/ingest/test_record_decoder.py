"""Unit tests for the qualifier line decoder."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.constants import MAX_LINE_NUMBER
from core.types import QualifierRecord
from ingest.parse_errors import ParseErrorKind, QualifierParseError
from ingest.record_decoder import RecordDecoder
from tests.fixture_paths import UPD_ADDR, UPD_NAME, qualifier_line, smith_line

_BASE_FIELDS = ["Smith", "John", "0000001", "001", "7:30 AM", "1", "0001", UPD_NAME, UPD_ADDR]


def _decode_error(line: str) -> QualifierParseError:
    with pytest.raises(QualifierParseError) as caught:
        RecordDecoder().decode(line)
    return caught.value


def _with_field(index: int, value: str) -> str:
    fields = list(_BASE_FIELDS)
    fields[index] = value
    return qualifier_line(*fields)


def test_decode_line_without_middle_name() -> None:
    """Minimum field count should produce a record without middle name."""
    record = RecordDecoder().decode(smith_line())

    assert record == QualifierRecord(
        id=1,
        surname="Smith",
        first_name="John",
        middle_name=None,
        seat_number=1,
        time="7:30 AM",
        room_assignment=1,
        test_center_code=1,
        test_center_name=UPD_NAME,
        test_center_addr=UPD_ADDR,
    )


def test_decode_line_with_middle_name() -> None:
    """An extra column before a valid id should become the middle name."""
    plain = RecordDecoder().decode(smith_line())

    record = RecordDecoder().decode(smith_line(middle_name="CRUZ"))

    assert record.middle_name == "Cruz" and record.id == 1
    assert record == replace(plain, middle_name="Cruz")


def test_decode_empty_middle_name_column_is_none() -> None:
    """An empty middle name column is skipped without a middle name."""
    record = RecordDecoder().decode(smith_line(middle_name=""))

    assert record.middle_name is None and record.id == 1


def test_decode_title_cases_names() -> None:
    """Surname, first and middle names should be title-cased."""
    line = qualifier_line(
        "DELA CRUZ", "maria clara", "SANTOS", "0000002", "002", "7:30 AM", "1", "0001", "X", "Y"
    )

    record = RecordDecoder().decode(line)

    assert (record.surname, record.first_name, record.middle_name) == (
        "Dela Cruz",
        "Maria Clara",
        "Santos",
    )


def test_decode_keeps_free_text_fields_verbatim() -> None:
    """Time and test center text should not be recased or trimmed inside."""
    line = _with_field(4, " 7:30  am ")
    line = line + "\textra"

    record = RecordDecoder().decode(line)

    assert record.time == " 7:30  am " and record.test_center_addr == UPD_ADDR


def test_decode_trims_outer_whitespace_and_stray_tabs() -> None:
    """Leading and trailing whitespace, tabs included, is trimmed."""
    record = RecordDecoder().decode("  " + smith_line() + "\t\r")

    assert record.test_center_addr == UPD_ADDR


def test_decode_keeps_accented_letters_in_names() -> None:
    """Names keep accented letters and split on apostrophes and case changes."""
    line = qualifier_line("PEÑA", "O'BRIEN", "McDonald", *_BASE_FIELDS[2:])

    record = RecordDecoder().decode(line)

    assert (record.surname, record.first_name, record.middle_name) == (
        "Peña",
        "O Brien",
        "Mc Donald",
    )


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("", ParseErrorKind.MISSING_FIRST_NAME),
        ("Smith", ParseErrorKind.MISSING_FIRST_NAME),
        ("Smith\tJohn", ParseErrorKind.MISSING_APPLICATION_ID),
        ("Smith\tJohn\tCruz", ParseErrorKind.MISSING_APPLICATION_ID),
        ("Smith\tJohn\t0000001", ParseErrorKind.MISSING_SEAT_NUMBER),
        ("Smith\tJohn\t0000001\t001", ParseErrorKind.MISSING_TIME),
        ("Smith\tJohn\t0000001\t001\t7:30 AM", ParseErrorKind.MISSING_ROOM_ASSIGNMENT),
        ("Smith\tJohn\t0000001\t001\t7:30 AM\t1", ParseErrorKind.MISSING_TEST_CENTER_CODE),
        (
            "Smith\tJohn\t0000001\t001\t7:30 AM\t1\t0001",
            ParseErrorKind.MISSING_TEST_CENTER_NAME,
        ),
        (
            "Smith\tJohn\t0000001\t001\t7:30 AM\t1\t0001\tUPD",
            ParseErrorKind.MISSING_TEST_CENTER_ADDR,
        ),
    ],
)
def test_decode_missing_fields(line: str, kind: ParseErrorKind) -> None:
    """Each truncated line should report its first missing field."""
    error = _decode_error(line)

    assert error.kind is kind and error.line == 1


@pytest.mark.parametrize(
    ("index", "value", "kind"),
    [
        (2, "000001", ParseErrorKind.INVALID_APPLICATION_ID),
        (3, "12", ParseErrorKind.INVALID_SEAT_NUMBER),
        (3, "0012", ParseErrorKind.INVALID_SEAT_NUMBER),
        (3, "0a1", ParseErrorKind.INVALID_SEAT_NUMBER),
        (5, "", ParseErrorKind.INVALID_ROOM_ASSIGNMENT),
        (5, "123", ParseErrorKind.INVALID_ROOM_ASSIGNMENT),
        (6, "001", ParseErrorKind.INVALID_TEST_CENTER_CODE),
        (6, "A001", ParseErrorKind.INVALID_TEST_CENTER_CODE),
    ],
)
def test_decode_invalid_numeric_fields(index: int, value: str, kind: ParseErrorKind) -> None:
    """Wrong digit counts or non-digits should map to the field's Invalid kind."""
    error = _decode_error(_with_field(index, value))

    assert error.kind is kind


def test_decode_bad_id_after_middle_name_is_invalid() -> None:
    """A non-id field after a middle name candidate is an invalid id."""
    line = qualifier_line("Smith", "John", "Cruz", "Santos", "0000001", "001")

    error = _decode_error(line)

    assert error.kind is ParseErrorKind.INVALID_APPLICATION_ID


def test_decode_counts_lines_across_failures() -> None:
    """Line numbers advance on both successes and failures."""
    decoder = RecordDecoder()
    decoder.decode(smith_line())
    with pytest.raises(QualifierParseError):
        decoder.decode("Smith\tJohn")

    with pytest.raises(QualifierParseError) as caught:
        decoder.decode(_with_field(3, "12"))

    assert caught.value.line == 3 and decoder.line_number == 4


def test_decode_saturated_counter_reports_too_big() -> None:
    """The last representable line number is never handed out."""
    decoder = RecordDecoder(first_line=MAX_LINE_NUMBER - 1)
    record = decoder.decode(smith_line())

    with pytest.raises(QualifierParseError) as caught:
        decoder.decode(smith_line())

    assert record.id == 1
    assert caught.value.kind is ParseErrorKind.TOO_BIG and caught.value.line == MAX_LINE_NUMBER
    assert decoder.line_number == MAX_LINE_NUMBER


def test_decoder_rejects_out_of_range_first_line() -> None:
    """Line counters outside the 32-bit range cannot be constructed."""
    with pytest.raises(ValueError):
        RecordDecoder(first_line=0)


def test_parse_error_message_includes_line() -> None:
    """Rendered errors should name the kind and line."""
    error = _decode_error("Smith")

    assert str(error) == "missing first name data at line 1"
