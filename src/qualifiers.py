"""Public SDK surface for qualifiers.

This module provides a stable import path for library users.
It re-exports the reader, the store, and typed option models.
"""

from __future__ import annotations

from core.config import QualifiersConfig
from core.types import IngestOptions, IngestSummary, QualifierRecord
from ingest.name_case import to_title_case
from ingest.parse_errors import ParseErrorKind, QualifierParseError
from ingest.pipeline import check_source, run_ingest
from ingest.qualifier_reader import QualifierReader
from store.qualifier_store import QualifierStore

__all__ = [
    "IngestOptions",
    "IngestSummary",
    "ParseErrorKind",
    "QualifierParseError",
    "QualifierReader",
    "QualifierRecord",
    "QualifierStore",
    "QualifiersConfig",
    "check_source",
    "run_ingest",
    "to_title_case",
]
