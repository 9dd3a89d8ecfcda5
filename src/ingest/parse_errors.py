"""Per-line parse error taxonomy.

Each malformed line maps to exactly one ``ParseErrorKind``. Errors carry
the 1-based line number when one was assigned; stream read failures
happen before assignment and carry none.
"""

from __future__ import annotations

from enum import Enum

from core.errors import QualifiersIngestError


class ParseErrorKind(Enum):
    """Classified reason a line could not become a record."""

    IO = "I/O error occurred"
    TOO_BIG = "data is too big to handle"
    MISSING_SURNAME = "missing surname data"
    MISSING_FIRST_NAME = "missing first name data"
    MISSING_APPLICATION_ID = "missing application id"
    INVALID_APPLICATION_ID = "invalid application id"
    MISSING_SEAT_NUMBER = "missing seat number"
    INVALID_SEAT_NUMBER = "invalid seat number"
    MISSING_ROOM_ASSIGNMENT = "missing room assignment"
    INVALID_ROOM_ASSIGNMENT = "invalid room assignment"
    MISSING_TIME = "missing time"
    MISSING_TEST_CENTER_CODE = "missing test center code"
    INVALID_TEST_CENTER_CODE = "invalid test center code"
    MISSING_TEST_CENTER_NAME = "missing test center name"
    MISSING_TEST_CENTER_ADDR = "missing test center addr"

    @property
    def description(self) -> str:
        """Human-readable description of the error kind."""
        return self.value


class QualifierParseError(QualifiersIngestError):
    """Raised when one input line cannot be decoded into a record.

    Attributes:
        kind: Classified failure reason.
        line: 1-based line number, or None when no line was assigned.
    """

    def __init__(self, kind: ParseErrorKind, line: int | None = None) -> None:
        self.kind = kind
        self.line = line
        super().__init__(_render_message(kind, line))

    def __reduce__(self) -> tuple[type, tuple[ParseErrorKind, int | None]]:
        return (type(self), (self.kind, self.line))

    def __repr__(self) -> str:
        return f"QualifierParseError(kind={self.kind.name}, line={self.line})"


def _render_message(kind: ParseErrorKind, line: int | None) -> str:
    if line is None:
        return kind.description
    return f"{kind.description} at line {line}"
