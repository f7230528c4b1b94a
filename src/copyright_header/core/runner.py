"""Runner — walks the targets, applies the updater, builds the UpdateRun."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from copyright_header.core.config import UpdateConfig
from copyright_header.core.copyright import CopyrightText
from copyright_header.core.discover import iter_targets
from copyright_header.core.updater import FileUpdater
from copyright_header.model import FileStatus, Severity
from copyright_header.model.diagnostic import Diagnostic
from copyright_header.model.run_result import FileOutcome, UpdateRun

_logger = logging.getLogger(__name__)

_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
}


def _log_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    for diag in diagnostics:
        _logger.log(_LEVELS[diag.severity], "%s", diag)


def run_update(
    paths: Iterable[str | Path],
    copyright: CopyrightText,
    config: UpdateConfig | None = None,
    *,
    # Testing hooks for deterministic output
    _run_id: str | None = None,
    _created_at: str | None = None,
) -> UpdateRun:
    """Process *paths* one at a time and assemble an ``UpdateRun``.

    Per-file problems (unreadable path, I/O failure, unexpected header) are
    logged and recorded; they never stop the batch.
    """
    cfg = config or UpdateConfig()
    updater = FileUpdater(copyright, cfg)
    outcomes: list[FileOutcome] = []

    for target in iter_targets(paths, cfg):
        name = str(target.path)
        if not target.readable:
            _logger.warning("%s: cannot read file, skipped", name)
            outcomes.append(
                FileOutcome(path=name, status=FileStatus.SKIPPED, error="unreadable")
            )
            continue

        try:
            if cfg.check_only:
                outcome = updater.check(target.path)
            else:
                outcome = updater.update(target.path)
        except OSError as e:
            _logger.error("%s: update failed: %s", name, e)
            outcomes.append(
                FileOutcome(path=name, status=FileStatus.FAILED, error=str(e))
            )
            continue

        _log_diagnostics(outcome.diagnostics)
        if outcome.status is FileStatus.UPDATED:
            _logger.info(
                "%s: header %s",
                name,
                "would be updated" if cfg.check_only else "updated",
            )
        outcomes.append(outcome)

    run = UpdateRun(
        check_only=cfg.check_only,
        config=cfg.to_dict(),
        outcomes=outcomes,
    )
    # Inject deterministic values for golden testing
    if _run_id is not None:
        run.run_id = _run_id
    if _created_at is not None:
        run.created_at = _created_at
    return run
