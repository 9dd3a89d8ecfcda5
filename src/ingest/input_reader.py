"""Source stream opening for ingestion.

This module opens qualifier lists from local paths or S3 objects.
Both are exposed as binary streams so lines can be read lazily.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, BinaryIO, Iterator, cast

from core.config import QualifiersConfig
from core.errors import QualifiersDependencyError, QualifiersIngestError
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri


@contextmanager
def open_source_stream(source_uri: str, config: QualifiersConfig) -> Iterator[BinaryIO]:
    """Open a qualifier list as a binary stream.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.

    Yields:
        Readable binary stream positioned at the first line.

    Raises:
        QualifiersIngestError: If the source cannot be opened.
        QualifiersDependencyError: If an S3 source is given without boto3.
    """
    if is_s3_uri(source_uri):
        body = _open_s3_body(parse_s3_uri(source_uri), config)
        try:
            yield cast(BinaryIO, body)
        finally:
            body.close()
        return
    source_path = Path(source_uri).expanduser()
    if not source_path.is_file():
        raise QualifiersIngestError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing qualifier list file."
        )
    with source_path.open("rb") as stream:
        yield stream


def _open_s3_body(location: S3Location, config: QualifiersConfig) -> Any:
    """Fetch an S3 object and return its streaming body.

    Args:
        location: Target bucket/key.
        config: Runtime config containing optional profile/region.

    Returns:
        Botocore streaming body.

    Raises:
        QualifiersIngestError: If the object cannot be fetched.
    """
    s3_client = _create_s3_client(config)
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
    except Exception as error:
        raise QualifiersIngestError(
            f"Failed to fetch s3://{location.bucket}/{location.key}: {error}. "
            "Check the object key and AWS credentials."
        ) from error
    return response["Body"]


def _create_s3_client(config: QualifiersConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        QualifiersDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise QualifiersDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install the s3 extra to read s3:// sources."
        ) from error
    session = boto3.session.Session(**_build_boto3_session_kwargs(config))
    return session.client("s3")


def _build_boto3_session_kwargs(config: QualifiersConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
