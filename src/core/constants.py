"""Core constants used across qualifiers modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATABASE_PATH = Path("qualifiers.db")
DEFAULT_INPUT_ENCODING = "utf-8"
FIELD_SEPARATOR = "\t"
FIRST_LINE_NUMBER = 1
MAX_LINE_NUMBER = 2**32 - 1
APPLICATION_ID_PATTERN = r"[0-9]{7}"
SEAT_NUMBER_PATTERN = r"[0-9]{3}"
ROOM_ASSIGNMENT_PATTERN = r"[0-9]{1,2}"
TEST_CENTER_CODE_PATTERN = r"[0-9]{4}"
