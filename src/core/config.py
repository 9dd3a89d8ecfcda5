"""Runtime configuration model for qualifiers.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATABASE_PATH, DEFAULT_INPUT_ENCODING
from core.errors import QualifiersConfigError


@dataclass(frozen=True)
class QualifiersConfig:
    """Validated runtime configuration.

    Attributes:
        database_path: SQLite database file for stored qualifiers.
        input_encoding: Text encoding used to decode streamed input.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    database_path: Path
    input_encoding: str
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "QualifiersConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            QualifiersConfigError: If environment values are invalid.
        """
        database_path_value = os.getenv("QUALIFIERS_DATABASE_PATH", str(DEFAULT_DATABASE_PATH))
        encoding_value = os.getenv("QUALIFIERS_INPUT_ENCODING", DEFAULT_INPUT_ENCODING)
        return cls(
            database_path=Path(database_path_value).expanduser(),
            input_encoding=_parse_encoding(encoding_value),
            s3_region=os.getenv("QUALIFIERS_S3_REGION"),
            s3_profile=os.getenv("QUALIFIERS_S3_PROFILE"),
        )


def _parse_encoding(raw_value: str) -> str:
    """Validate the input encoding environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Canonical codec name.

    Raises:
        QualifiersConfigError: If no codec is registered under that name.
    """
    try:
        return codecs.lookup(raw_value).name
    except LookupError as error:
        raise QualifiersConfigError(
            "Invalid QUALIFIERS_INPUT_ENCODING value: "
            f"unknown encoding '{raw_value}'. "
            "Set QUALIFIERS_INPUT_ENCODING to a Python codec name such as utf-8."
        ) from error
