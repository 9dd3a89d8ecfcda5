"""Qualifier list ingestion.

This module reads tab-delimited qualifier lists and decodes each line
into a validated record or a per-line parse error.
"""
