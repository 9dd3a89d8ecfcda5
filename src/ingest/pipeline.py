"""Ingest orchestration for qualifier lists.

This module drives the qualifier reader over a source and writes
records into the qualifier store. It owns the failure policy: abort the
whole run on the first bad line, or log and skip bad lines.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import QualifiersConfig
from core.logging_config import get_logger
from core.types import IngestOptions, IngestSummary
from ingest.input_reader import open_source_stream
from ingest.parse_errors import ParseErrorKind, QualifierParseError
from ingest.qualifier_reader import QualifierReader
from store.qualifier_store import QualifierStore

_LOGGER = get_logger(__name__)


@dataclass
class _IngestCounters:
    lines_read: int = 0
    inserted: int = 0
    duplicates: int = 0
    skipped: int = 0

    def freeze(self) -> IngestSummary:
        return IngestSummary(
            lines_read=self.lines_read,
            inserted=self.inserted,
            duplicates=self.duplicates,
            skipped=self.skipped,
        )


def run_ingest(options: IngestOptions, config: QualifiersConfig) -> IngestSummary:
    """Load a qualifier list into the configured database.

    Args:
        options: Source and failure policy.
        config: Runtime configuration.

    Returns:
        Counters for the completed run.

    Raises:
        QualifierParseError: On the first bad line when not skipping, or on
            any read failure.
        QualifiersIngestError: If the source cannot be opened.
        QualifiersStoreError: If database writes fail.
    """
    with open_source_stream(options.source_uri, config) as stream:
        reader = QualifierReader.from_stream(stream, encoding=config.input_encoding)
        with QualifierStore(config.database_path) as store:
            store.prepare()
            try:
                with store.transaction():
                    summary = _load_records(reader, store, options.skip_invalid)
            except QualifierParseError as error:
                _LOGGER.error(
                    "ingest_aborted",
                    source_uri=options.source_uri,
                    line=error.line,
                    kind=error.kind.name,
                    reason=str(error),
                )
                raise
    _log_ingest_completion(options, summary)
    return summary


def check_source(source_uri: str, config: QualifiersConfig) -> tuple[int, list[QualifierParseError]]:
    """Decode a source without storing it.

    Args:
        source_uri: Local path or S3 URI.
        config: Runtime configuration.

    Returns:
        Number of valid lines and the parse errors in line order.

    Raises:
        QualifierParseError: On a read failure.
    """
    valid_count = 0
    errors: list[QualifierParseError] = []
    with open_source_stream(source_uri, config) as stream:
        reader = QualifierReader.from_stream(stream, encoding=config.input_encoding)
        for outcome in reader:
            if isinstance(outcome, QualifierParseError):
                if outcome.kind is ParseErrorKind.IO:
                    raise outcome
                errors.append(outcome)
            else:
                valid_count += 1
    return valid_count, errors


def _load_records(
    reader: QualifierReader,
    store: QualifierStore,
    skip_invalid: bool,
) -> IngestSummary:
    counters = _IngestCounters()
    for outcome in reader:
        counters.lines_read += 1
        if isinstance(outcome, QualifierParseError):
            # Read failures always abort, even when skipping bad lines.
            if not skip_invalid or outcome.kind is ParseErrorKind.IO:
                raise outcome
            counters.skipped += 1
            _LOGGER.warning(
                "qualifier_line_skipped",
                line=outcome.line,
                kind=outcome.kind.name,
                reason=str(outcome),
            )
            continue
        if store.insert_qualifier(outcome):
            counters.inserted += 1
        else:
            counters.duplicates += 1
    return counters.freeze()


def _log_ingest_completion(options: IngestOptions, summary: IngestSummary) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "ingest_completed",
        source_uri=options.source_uri,
        skip_invalid=options.skip_invalid,
        lines_read=summary.lines_read,
        inserted=summary.inserted,
        duplicates=summary.duplicates,
        skipped=summary.skipped,
    )
