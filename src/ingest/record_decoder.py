"""Line-to-record decoder for qualifier lists.

Expected layout, tab separated::

    surname, first_name, [middle_name,] application_id, seat_number,
    time, room_assignment, test_center_code, test_center_name,
    test_center_addr

The middle name column is optional and is told apart from the
application id by testing the first candidate against the seven-digit
id pattern. Numeric fields are checked against their digit-count
validators before conversion, so each malformed field maps to its own
``Missing*`` or ``Invalid*`` error kind.
"""

from __future__ import annotations

from typing import Callable

from core.constants import FIELD_SEPARATOR, FIRST_LINE_NUMBER, MAX_LINE_NUMBER
from core.types import QualifierRecord
from ingest.field_validators import (
    is_application_id,
    is_room_assignment,
    is_seat_number,
    is_test_center_code,
)
from ingest.name_case import to_title_case
from ingest.parse_errors import ParseErrorKind, QualifierParseError


class RecordDecoder:
    """Stateful decoder that numbers every line it sees.

    The counter starts at ``first_line`` and advances once per decoded
    line, whether decoding succeeds or fails. It saturates at
    ``MAX_LINE_NUMBER``: from then on every line fails with ``TOO_BIG``.
    """

    def __init__(self, first_line: int = FIRST_LINE_NUMBER) -> None:
        if not FIRST_LINE_NUMBER <= first_line <= MAX_LINE_NUMBER:
            raise ValueError(
                f"first_line must be within [{FIRST_LINE_NUMBER}, {MAX_LINE_NUMBER}], "
                f"got {first_line}"
            )
        self._line_number = first_line

    @property
    def line_number(self) -> int:
        """Number that will be assigned to the next decoded line."""
        return self._line_number

    def decode(self, line: str) -> QualifierRecord:
        """Decode one line into a record.

        Args:
            line: Line text without its terminator.

        Returns:
            Validated qualifier record.

        Raises:
            QualifierParseError: If the line is malformed or the line
                counter is exhausted.
        """
        if self._line_number == MAX_LINE_NUMBER:
            raise QualifierParseError(ParseErrorKind.TOO_BIG, self._line_number)
        line_number = self._line_number
        self._line_number += 1
        return _decode_fields(line.strip(), line_number)


def _decode_fields(line: str, line_number: int) -> QualifierRecord:
    fields = iter(line.split(FIELD_SEPARATOR))

    def take(missing: ParseErrorKind) -> str:
        value = next(fields, None)
        if value is None:
            raise QualifierParseError(missing, line_number)
        return value

    surname = take(ParseErrorKind.MISSING_SURNAME)
    first_name = take(ParseErrorKind.MISSING_FIRST_NAME)
    middle_name, application_id = _split_middle_name(take, line_number)
    seat_number = _take_number(
        take,
        is_seat_number,
        ParseErrorKind.MISSING_SEAT_NUMBER,
        ParseErrorKind.INVALID_SEAT_NUMBER,
        line_number,
    )
    time = take(ParseErrorKind.MISSING_TIME)
    room_assignment = _take_number(
        take,
        is_room_assignment,
        ParseErrorKind.MISSING_ROOM_ASSIGNMENT,
        ParseErrorKind.INVALID_ROOM_ASSIGNMENT,
        line_number,
    )
    test_center_code = _take_number(
        take,
        is_test_center_code,
        ParseErrorKind.MISSING_TEST_CENTER_CODE,
        ParseErrorKind.INVALID_TEST_CENTER_CODE,
        line_number,
    )
    test_center_name = take(ParseErrorKind.MISSING_TEST_CENTER_NAME)
    test_center_addr = take(ParseErrorKind.MISSING_TEST_CENTER_ADDR)
    return QualifierRecord(
        id=_checked_int(application_id, line_number),
        surname=to_title_case(surname),
        first_name=to_title_case(first_name),
        middle_name=to_title_case(middle_name) if middle_name is not None else None,
        seat_number=seat_number,
        time=time,
        room_assignment=room_assignment,
        test_center_code=test_center_code,
        test_center_name=test_center_name,
        test_center_addr=test_center_addr,
    )


def _split_middle_name(
    take: Callable[[ParseErrorKind], str],
    line_number: int,
) -> tuple[str | None, str]:
    """Resolve the optional middle name column.

    Returns:
        Raw middle name (None when absent or empty) and application id text.
    """
    first = take(ParseErrorKind.MISSING_APPLICATION_ID)
    if is_application_id(first):
        return None, first
    middle_name = first or None
    second = take(ParseErrorKind.MISSING_APPLICATION_ID)
    if not is_application_id(second):
        raise QualifierParseError(ParseErrorKind.INVALID_APPLICATION_ID, line_number)
    return middle_name, second


def _take_number(
    take: Callable[[ParseErrorKind], str],
    is_valid: Callable[[str], bool],
    missing: ParseErrorKind,
    invalid: ParseErrorKind,
    line_number: int,
) -> int:
    text = take(missing)
    if not is_valid(text):
        raise QualifierParseError(invalid, line_number)
    return _checked_int(text, line_number)


def _checked_int(text: str, line_number: int) -> int:
    # Only called on validator-approved digits; failure is a programming error.
    try:
        return int(text)
    except ValueError as error:
        raise RuntimeError(
            f"validated field {text!r} at line {line_number} did not convert to int"
        ) from error
