"""Precompiled digit-count validators for numeric qualifier fields.

Patterns are compiled once at import and shared read-only by every
decoder in the process.
"""

from __future__ import annotations

import re

from core.constants import (
    APPLICATION_ID_PATTERN,
    ROOM_ASSIGNMENT_PATTERN,
    SEAT_NUMBER_PATTERN,
    TEST_CENTER_CODE_PATTERN,
)

APPLICATION_ID_RE = re.compile(APPLICATION_ID_PATTERN)
SEAT_NUMBER_RE = re.compile(SEAT_NUMBER_PATTERN)
ROOM_ASSIGNMENT_RE = re.compile(ROOM_ASSIGNMENT_PATTERN)
TEST_CENTER_CODE_RE = re.compile(TEST_CENTER_CODE_PATTERN)


def is_application_id(text: str) -> bool:
    """Return whether text is exactly seven ASCII digits."""
    return APPLICATION_ID_RE.fullmatch(text) is not None


def is_seat_number(text: str) -> bool:
    """Return whether text is exactly three ASCII digits."""
    return SEAT_NUMBER_RE.fullmatch(text) is not None


def is_room_assignment(text: str) -> bool:
    """Return whether text is one or two ASCII digits."""
    return ROOM_ASSIGNMENT_RE.fullmatch(text) is not None


def is_test_center_code(text: str) -> bool:
    """Return whether text is exactly four ASCII digits."""
    return TEST_CENTER_CODE_RE.fullmatch(text) is not None
