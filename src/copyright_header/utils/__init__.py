"""Shared utilities for copyright_header."""

from copyright_header.utils.determinism import (
    FIXED_TIMESTAMP,
    deterministic_run_id,
    deterministic_timestamp,
)

__all__ = [
    "FIXED_TIMESTAMP",
    "deterministic_run_id",
    "deterministic_timestamp",
]
