"""Target discovery — turn command-line paths into readable file targets."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from copyright_header.core.config import UpdateConfig

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileTarget:
    """A path to process plus whether it can be read."""

    path: Path
    readable: bool


def has_vcs_segment(path: Path, vcs_dirs: Iterable[str]) -> bool:
    """True if any component of *path* is a version-control directory."""
    skip = set(vcs_dirs)
    return any(part in skip for part in path.parts)


def _is_readable(path: Path) -> bool:
    try:
        return path.is_file() and os.access(path, os.R_OK)
    except OSError:
        return False


def _walk(root: Path, cfg: UpdateConfig) -> Iterator[Path]:
    """Yield matching files under *root* in sorted order."""
    exts = {e.lower() for e in cfg.include_exts}
    for p in sorted(root.rglob("*")):
        try:
            if p.is_symlink() or not p.is_file():
                continue
            if p.suffix.lower() not in exts:
                continue
            if has_vcs_segment(p.relative_to(root), cfg.vcs_dirs):
                continue
        except OSError:
            continue
        yield p


def iter_targets(
    paths: Iterable[str | Path],
    cfg: UpdateConfig | None = None,
) -> Iterator[FileTarget]:
    """Yield a ``FileTarget`` for each path, in the order given.

    Directories are expanded recursively; paths inside version-control
    directories are dropped; each file is yielded at most once.
    """
    cfg = cfg or UpdateConfig()
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if has_vcs_segment(path, cfg.vcs_dirs):
            _logger.debug("%s: version-control path, skipped", path)
            continue

        candidates: Iterable[Path] = _walk(path, cfg) if path.is_dir() else (path,)
        for p in candidates:
            key = p.absolute()
            if key in seen:
                continue
            seen.add(key)
            yield FileTarget(path=p, readable=_is_readable(p))
