"""Qualifiers exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class QualifiersError(Exception):
    """Base exception for all qualifiers failures."""


class QualifiersConfigError(QualifiersError):
    """Raised for invalid runtime configuration."""


class QualifiersIngestError(QualifiersError):
    """Raised for source reading and line decoding failures."""


class QualifiersStoreError(QualifiersError):
    """Raised for qualifier database failures."""


class QualifiersDependencyError(QualifiersError):
    """Raised when an optional runtime dependency is missing."""
