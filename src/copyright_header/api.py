"""
copyright_header.api
====================

Programmatic entrypoints for using copyright_header without the CLI.

Goals:
  - No argparse / CLI dependencies
  - Deterministic mode support (ci_mode=True)
  - Schema-validated, JSON-friendly outputs

Usage::

    from copyright_header.api import check_paths, update_paths

    run, run_dict = check_paths(["src"], copyright_file="COPYRIGHT")
    run, run_dict = update_paths(["src"], copyright_file="COPYRIGHT")
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Iterable, Optional

from copyright_header.contracts.load import validate_instance
from copyright_header.core.config import UpdateConfig, default_copyright_file
from copyright_header.core.copyright import CopyrightText, load_copyright
from copyright_header.core.runner import run_update
from copyright_header.model.run_result import UpdateRun
from copyright_header.utils.determinism import (
    deterministic_run_id,
    deterministic_timestamp,
)

REPORT_SCHEMA = "update_result.schema.json"


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def update_paths(
    paths: Iterable[str | Path],
    *,
    copyright_file: str | Path | None = None,
    copyright: Optional[CopyrightText] = None,
    config: Optional[UpdateConfig] = None,
    ci_mode: bool = False,
) -> tuple[UpdateRun, dict[str, Any]]:
    """Rewrite the header of every file under *paths*.

    Parameters
    ----------
    paths:
        Files and/or directories, processed in the order given.
    copyright_file:
        Copyright source.  Defaults to ``config.copyright_file`` or, with no
        config, to ``$COPYRIGHT_HEADER_FILE`` / ``COPYRIGHT``.
    copyright:
        Already-loaded copyright text; skips reading ``copyright_file``.
    config:
        Update configuration.
    ci_mode:
        If True, the report's run_id and timestamp are deterministic.

    Returns
    -------
    ``(UpdateRun, update_result_dict)``
        The dataclass and the schema-validated JSON dict.

    Raises
    ------
    CopyrightError
        If the copyright source cannot be used.  No file is touched.
    """
    cfg = config or UpdateConfig(copyright_file=default_copyright_file())
    if copyright_file is not None:
        cfg = dataclasses.replace(cfg, copyright_file=_to_path(copyright_file))
    if copyright is None:
        copyright = load_copyright(cfg.copyright_file, encoding=cfg.encoding)

    path_list = [_to_path(p) for p in paths]
    run = run_update(
        path_list,
        copyright,
        cfg,
        _run_id=deterministic_run_id(path_list, copyright.lines, ci_mode=ci_mode),
        _created_at=deterministic_timestamp(ci_mode),
    )
    run_dict = run.to_dict()
    validate_instance(run_dict, REPORT_SCHEMA)
    return run, run_dict


def check_paths(
    paths: Iterable[str | Path],
    **kwargs: Any,
) -> tuple[UpdateRun, dict[str, Any]]:
    """Like ``update_paths`` but never writes; reports what would change."""
    config = kwargs.pop("config", None) or UpdateConfig(
        copyright_file=default_copyright_file()
    )
    return update_paths(
        paths,
        config=dataclasses.replace(config, check_only=True),
        **kwargs,
    )
