"""Determinism helpers for CI-reproducible reports.

When --ci / --deterministic is enabled the report timestamp is fixed and the
run ID is derived from the inputs, so two runs over the same paths print
byte-identical JSON.
"""

from __future__ import annotations

import hashlib
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

# Fixed timestamp for CI mode (ISO 8601 with timezone)
FIXED_TIMESTAMP = "2000-01-01T00:00:00+00:00"


def deterministic_timestamp(ci_mode: bool = False) -> str:
    """Return FIXED_TIMESTAMP in CI mode, else the current UTC time."""
    if ci_mode:
        return FIXED_TIMESTAMP
    return datetime.now(timezone.utc).isoformat()


def deterministic_run_id(
    paths: Iterable[str | Path],
    copyright_lines: Iterable[str] = (),
    ci_mode: bool = False,
) -> str:
    """Generate a run ID.

    In CI mode the ID hashes the requested paths and the copyright text;
    otherwise it is random.
    """
    if not ci_mode:
        return str(uuid.uuid4())
    h = hashlib.sha256()
    for p in paths:
        h.update(Path(p).as_posix().encode("utf-8"))
        h.update(b"\0")
    for line in copyright_lines:
        h.update(line.encode("utf-8"))
        h.update(b"\n")
    return "ci-" + h.hexdigest()[:12]
