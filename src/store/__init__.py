"""Storage layer.

This module persists decoded qualifiers into a relational database.
It keeps repeated ingest runs idempotent per examinee and test center.
"""
