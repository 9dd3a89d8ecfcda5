"""SQLite persistence for decoded qualifiers.

This module owns the two-table schema (test centers and examinees)
and the idempotent insert used by repeated ingest runs: rows whose
id already exists are left untouched.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType

from core.errors import QualifiersStoreError
from core.logging_config import get_logger
from core.types import CenterRow, ExamineeRow, QualifierRecord

_LOGGER = get_logger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS test_centers (
    id          integer PRIMARY KEY,
    name        text NOT NULL,
    address     text NOT NULL
);

CREATE TABLE IF NOT EXISTS examinees (
    id                  integer PRIMARY KEY,
    surname             text NOT NULL,
    first_name          text NOT NULL,
    middle_name         text,
    seat_number         integer,
    time                text NOT NULL,
    room_assignment     integer,
    test_center_code    integer,

    FOREIGN KEY (test_center_code)
        REFERENCES test_centers (id)
);
"""

_INSERT_TEST_CENTER = """
INSERT OR IGNORE INTO test_centers (id, name, address) VALUES (?, ?, ?)
"""

_INSERT_EXAMINEE = """
INSERT OR IGNORE INTO examinees (
    id, surname, first_name, middle_name, seat_number, time, room_assignment, test_center_code
) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
"""


class QualifierStore:
    """SQLite-backed store for examinees and their test centers."""

    def __init__(self, database_path: Path | str) -> None:
        """Open the database connection.

        Args:
            database_path: SQLite file path, or ``:memory:``.

        Raises:
            QualifiersStoreError: If the database cannot be opened.
        """
        self._database_path = str(database_path)
        try:
            self._connection = sqlite3.connect(self._database_path, isolation_level=None)
            self._connection.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as error:
            raise QualifiersStoreError(
                f"Failed to open qualifier database at {self._database_path}: {error}."
            ) from error

    def __enter__(self) -> "QualifierStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._connection.close()

    def prepare(self) -> None:
        """Create tables when missing.

        Raises:
            QualifiersStoreError: If schema creation fails.
        """
        try:
            self._connection.executescript(_SCHEMA)
        except sqlite3.Error as error:
            raise QualifiersStoreError(
                f"Failed to prepare qualifier schema in {self._database_path}: {error}."
            ) from error
        _LOGGER.info("store_prepared", database_path=self._database_path)

    @contextmanager
    def transaction(self) -> Iterator["QualifierStore"]:
        """Run a block atomically, rolling back when it raises.

        Raises:
            QualifiersStoreError: If the transaction cannot begin, commit,
                or roll back.
        """
        self._run_control("BEGIN")
        try:
            yield self
        except BaseException:
            self._run_control("ROLLBACK")
            raise
        self._run_control("COMMIT")

    def _run_control(self, statement: str) -> None:
        try:
            self._connection.execute(statement)
        except sqlite3.Error as error:
            raise QualifiersStoreError(
                f"Failed to run {statement} on {self._database_path}: {error}."
            ) from error

    def insert_qualifier(self, record: QualifierRecord) -> bool:
        """Insert a qualifier and its test center.

        Existing test centers and examinees are kept as they are.

        Args:
            record: Decoded qualifier record.

        Returns:
            True when a new examinee row was written.

        Raises:
            QualifiersStoreError: If the insert fails.
        """
        try:
            self._connection.execute(
                _INSERT_TEST_CENTER,
                (record.test_center_code, record.test_center_name, record.test_center_addr),
            )
            cursor = self._connection.execute(
                _INSERT_EXAMINEE,
                (
                    record.id,
                    record.surname,
                    record.first_name,
                    record.middle_name,
                    record.seat_number,
                    record.time,
                    record.room_assignment,
                    record.test_center_code,
                ),
            )
        except sqlite3.Error as error:
            raise QualifiersStoreError(
                f"Failed to insert qualifier {record.id}: {error}."
            ) from error
        return cursor.rowcount == 1

    def get_examinee(self, examinee_id: int) -> ExamineeRow | None:
        """Load one examinee by application id."""
        row = self._fetch_one(
            "SELECT id, surname, first_name, middle_name, seat_number, time, "
            "room_assignment, test_center_code FROM examinees WHERE id = ?",
            (examinee_id,),
        )
        return ExamineeRow(*row) if row is not None else None

    def get_test_center(self, code: int) -> CenterRow | None:
        """Load one test center by code."""
        row = self._fetch_one(
            "SELECT id, name, address FROM test_centers WHERE id = ?",
            (code,),
        )
        return CenterRow(*row) if row is not None else None

    def count_examinees(self) -> int:
        """Return the number of stored examinees."""
        row = self._fetch_one("SELECT COUNT(*) FROM examinees", ())
        return int(row[0]) if row is not None else 0

    def count_test_centers(self) -> int:
        """Return the number of stored test centers."""
        row = self._fetch_one("SELECT COUNT(*) FROM test_centers", ())
        return int(row[0]) if row is not None else 0

    def _fetch_one(self, query: str, params: tuple[object, ...]) -> tuple[object, ...] | None:
        try:
            return self._connection.execute(query, params).fetchone()
        except sqlite3.Error as error:
            raise QualifiersStoreError(
                f"Failed to query qualifier database at {self._database_path}: {error}. "
                "Run ingest first to create the schema."
            ) from error
