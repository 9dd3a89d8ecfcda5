"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from core.config import QualifiersConfig  # noqa: E402


@pytest.fixture
def config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> QualifiersConfig:
    """Runtime config isolated from the caller's environment."""
    for name in (
        "QUALIFIERS_DATABASE_PATH",
        "QUALIFIERS_INPUT_ENCODING",
        "QUALIFIERS_S3_REGION",
        "QUALIFIERS_S3_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return replace(QualifiersConfig.from_env(), database_path=tmp_path / "qualifiers.db")
