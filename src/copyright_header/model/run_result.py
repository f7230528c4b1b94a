"""UpdateRun — the assembled, schema-aligned result of a batch update."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from copyright_header import __version__
from copyright_header.model import FileStatus, Severity
from copyright_header.model.diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """What happened to one path during a run."""

    path: str
    status: FileStatus
    diagnostics: tuple[Diagnostic, ...] = ()
    error: str = ""

    def to_dict(self) -> dict:
        d: dict = {
            "path": self.path,
            "status": self.status.value,
            "diagnostics": [diag.to_dict() for diag in self.diagnostics],
        }
        if self.error:
            d["error"] = self.error
        return d


@dataclass(slots=True)
class UpdateRun:
    """Ordered outcomes of a run, matching ``update_result.schema.json``.

    Constructed by ``core.runner`` once every target has been processed.
    """

    # ── run metadata ────────────────────────────────────────────────
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    tool_version: str = __version__
    check_only: bool = False
    config: dict = field(default_factory=dict)

    outcomes: list[FileOutcome] = field(default_factory=list)

    # ── derived ─────────────────────────────────────────────────────

    def by_status(self, status: FileStatus) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def updated(self) -> list[FileOutcome]:
        return self.by_status(FileStatus.UPDATED)

    @property
    def failed(self) -> list[FileOutcome]:
        return self.by_status(FileStatus.FAILED)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        status_counts = {s.value: 0 for s in FileStatus}
        severity_counts = {s.value: 0 for s in Severity}
        for o in self.outcomes:
            status_counts[o.status.value] += 1
            for diag in o.diagnostics:
                severity_counts[diag.severity.value] += 1

        return {
            "schema_version": "update_result_v1",
            "run": {
                "run_id": self.run_id,
                "created_at": self.created_at,
                "tool_version": self.tool_version,
                "check_only": self.check_only,
                "config": self.config,
            },
            "summary": {
                "files_total": len(self.outcomes),
                "by_status": status_counts,
                "by_severity": severity_counts,
            },
            "files": [o.to_dict() for o in self.outcomes],
        }
