"""Update configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Overrides the default copyright file when --copyright-file is not given.
COPYRIGHT_FILE_ENV = "COPYRIGHT_HEADER_FILE"

DEFAULT_COPYRIGHT_FILE = Path("COPYRIGHT")

# Version-control internal directories; any path containing one is skipped.
_DEFAULT_VCS_DIRS = frozenset({".git", ".svn", ".hg", ".bzr", "CVS"})

# Extensions picked up when a directory is passed instead of a file.
_DEFAULT_INCLUDE_EXTS = (".java", ".c", ".h", ".cc", ".cpp", ".hpp")


def default_copyright_file() -> Path:
    """Return the copyright file path, honouring ``COPYRIGHT_HEADER_FILE``."""
    env = os.environ.get(COPYRIGHT_FILE_ENV, "")
    return Path(env) if env else DEFAULT_COPYRIGHT_FILE


@dataclass(frozen=True)
class UpdateConfig:
    """Immutable update configuration."""

    copyright_file: Path = DEFAULT_COPYRIGHT_FILE
    backup_suffix: str = ".bak"
    encoding: str = "utf-8"
    vcs_dirs: frozenset[str] = _DEFAULT_VCS_DIRS
    include_exts: tuple[str, ...] = _DEFAULT_INCLUDE_EXTS
    check_only: bool = False

    def to_dict(self) -> dict:
        return {
            "copyright_file": self.copyright_file.as_posix(),
            "backup_suffix": self.backup_suffix,
            "encoding": self.encoding,
            "vcs_dirs": sorted(self.vcs_dirs),
            "include_exts": list(self.include_exts),
        }
