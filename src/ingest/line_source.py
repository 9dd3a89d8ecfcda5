"""Line sources feeding the qualifier decoder.

A line source yields logical lines one at a time with their trailing
``\\n`` or ``\\r\\n`` removed. ``TextLineSource`` walks a string that is
already in memory; ``StreamLineSource`` reads a binary stream one line
per call so unbounded input never has to be loaded at once. Sources are
single-pass: build a new one to read the same input again.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

from core.constants import DEFAULT_INPUT_ENCODING
from ingest.parse_errors import ParseErrorKind, QualifierParseError


class LineSource(Protocol):
    """Anything that can hand out the next logical line."""

    def next_line(self) -> str | None:
        """Return the next line without its terminator, or None at end of input.

        Raises:
            QualifierParseError: With kind ``IO`` when the input cannot be read.
        """
        ...


class TextLineSource:
    """Lazy line splitter over an in-memory string. Never fails."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    def next_line(self) -> str | None:
        """Return the next line, or None once the text is consumed."""
        if self._position >= len(self._text):
            return None
        end = self._text.find("\n", self._position)
        if end == -1:
            line = self._text[self._position :]
            self._position = len(self._text)
            return line
        line = self._text[self._position : end]
        self._position = end + 1
        return line[:-1] if line.endswith("\r") else line


class StreamLineSource:
    """Reads one line per call from a binary stream."""

    def __init__(self, stream: BinaryIO, encoding: str = DEFAULT_INPUT_ENCODING) -> None:
        self._stream = stream
        self._encoding = encoding

    def next_line(self) -> str | None:
        """Read, strip and decode the next line.

        Returns:
            Decoded line text, or None at end of stream.

        Raises:
            QualifierParseError: With kind ``IO`` and no line number when the
                read fails or the bytes do not decode.
        """
        try:
            raw = self._stream.readline()
        except OSError as error:
            raise QualifierParseError(ParseErrorKind.IO) from error
        if not raw:
            return None
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            return raw.decode(self._encoding)
        except UnicodeDecodeError as error:
            raise QualifierParseError(ParseErrorKind.IO) from error
