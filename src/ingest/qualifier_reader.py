"""Lazy iterator of decoded qualifier lines.

Each pull reads one line from a ``LineSource`` and yields either a
``QualifierRecord`` or the ``QualifierParseError`` for that line. Parse
errors are yielded rather than raised so the consumer chooses whether to
stop or keep pulling; the reader itself only stops at end of input or
once the line counter is exhausted.
"""

from __future__ import annotations

from typing import BinaryIO, Iterator

from core.constants import DEFAULT_INPUT_ENCODING, FIRST_LINE_NUMBER
from core.types import QualifierRecord
from ingest.line_source import LineSource, StreamLineSource, TextLineSource
from ingest.parse_errors import ParseErrorKind, QualifierParseError
from ingest.record_decoder import RecordDecoder

ParseOutcome = QualifierRecord | QualifierParseError


class QualifierReader:
    """Iterator over per-line decode outcomes."""

    def __init__(
        self,
        source: LineSource,
        first_line: int = FIRST_LINE_NUMBER,
    ) -> None:
        self._source = source
        self._decoder = RecordDecoder(first_line=first_line)
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str) -> "QualifierReader":
        """Build a reader over an in-memory string."""
        return cls(TextLineSource(text))

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO,
        encoding: str = DEFAULT_INPUT_ENCODING,
    ) -> "QualifierReader":
        """Build a reader that pulls lines from a binary stream."""
        return cls(StreamLineSource(stream, encoding))

    @property
    def line_number(self) -> int:
        """Number that the next decoded line will receive."""
        return self._decoder.line_number

    def __iter__(self) -> "QualifierReader":
        return self

    def __next__(self) -> ParseOutcome:
        if self._exhausted:
            raise StopIteration
        try:
            line = self._source.next_line()
        except QualifierParseError as error:
            return error
        if line is None:
            self._exhausted = True
            raise StopIteration
        try:
            return self._decoder.decode(line)
        except QualifierParseError as error:
            if error.kind is ParseErrorKind.TOO_BIG:
                self._exhausted = True
            return error

    def records(self) -> Iterator[QualifierRecord]:
        """Yield records, raising the first parse error encountered.

        Raises:
            QualifierParseError: On the first malformed line or read failure.
        """
        for outcome in self:
            if isinstance(outcome, QualifierParseError):
                raise outcome
            yield outcome
