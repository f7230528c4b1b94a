"""File updater — applies the line scanner to one file on disk.

The whole rewrite is computed before the file is touched.  The file is then
moved to a sibling backup for the duration of the write:

* changed: the new content is written and the backup removed;
* unchanged: the backup is moved back, restoring the original bytes;
* any failure: the backup is moved back before the error propagates.
"""

from __future__ import annotations

import logging
import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from copyright_header.core.config import UpdateConfig
from copyright_header.core.copyright import CopyrightText
from copyright_header.core.scanner import LineScanner
from copyright_header.model import FileStatus
from copyright_header.model.run_result import FileOutcome
from copyright_header.model.scan_result import ScanResult

_logger = logging.getLogger(__name__)


def backup_path(path: Path, suffix: str = ".bak") -> Path:
    return path.with_name(path.name + suffix)


@contextmanager
def backed_up(path: Path, suffix: str = ".bak") -> Iterator[Path]:
    """Move *path* aside to a backup for the duration of the block.

    On normal exit any remaining backup is deleted; if the block raises, the
    backup is moved back over *path*.  An existing backup is never clobbered.
    """
    backup = backup_path(path, suffix)
    if backup.exists() or backup.is_symlink():
        raise FileExistsError(f"backup already exists: {backup}")

    os.replace(path, backup)
    try:
        yield backup
    except BaseException:
        _logger.debug("Restoring %s from %s", path, backup)
        os.replace(backup, path)
        raise
    if backup.exists():
        backup.unlink()


class FileUpdater:
    """Rewrites the header of individual files with a fixed copyright text."""

    def __init__(
        self,
        copyright: CopyrightText,
        config: UpdateConfig | None = None,
    ) -> None:
        self.config = config or UpdateConfig()
        self.scanner = LineScanner(copyright)

    def scan(self, path: Path) -> tuple[bytes, ScanResult]:
        """Read *path* and return ``(original_bytes, scan_result)``.

        Lines are split on any of ``\\r\\n``, ``\\r`` or ``\\n``; the raw
        bytes are kept so the outcome reflects what is actually on disk.
        """
        original = path.read_bytes()
        text = original.decode(self.config.encoding, errors="surrogateescape")
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        return original, self.scanner.scan_text(text, source=str(path))

    def check(self, path: Path) -> FileOutcome:
        """Report what ``update`` would do, without writing."""
        original, result = self.scan(path)
        return self._outcome(path, original, result)

    def update(self, path: Path) -> FileOutcome:
        original, result = self.scan(path)
        # Rewrite the link target, not the link.
        target = path.resolve() if path.is_symlink() else path
        with backed_up(target, self.config.backup_suffix) as backup:
            if result.changed:
                target.write_text(
                    result.render(),
                    encoding=self.config.encoding,
                    errors="surrogateescape",
                    newline="\n",
                )
                shutil.copymode(backup, target)
            else:
                os.replace(backup, target)
        return self._outcome(path, original, result)

    def _outcome(
        self, path: Path, original: bytes, result: ScanResult
    ) -> FileOutcome:
        rendered = result.render().encode(
            self.config.encoding, errors="surrogateescape"
        )
        modified = result.changed and rendered != original
        return FileOutcome(
            path=str(path),
            status=FileStatus.UPDATED if modified else FileStatus.UNCHANGED,
            diagnostics=result.diagnostics,
        )
