"""Enums shared across the scanner, updater and report layers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Diagnostic severity emitted by the line scanner."""

    INFO = "info"
    WARNING = "warning"


class ScanState(str, Enum):
    """Position of the scanner within a file's leading region.

    States only move forward; ``DONE`` is absorbing.
    """

    SEEK_COMMENT_START = "seek_comment_start"
    SEEK_COMMENT_END = "seek_comment_end"
    DONE = "done"


class FileStatus(str, Enum):
    """Per-file result of an update run."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"
