"""Copyright text — the canonical header loaded once per run."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

_logger = logging.getLogger(__name__)

_BLOCK_OPEN_RE = re.compile(r"^\s*/\*\s*$")
_BLOCK_CLOSE_RE = re.compile(r"\*/\s*$")


class CopyrightError(Exception):
    """The copyright source is missing, unreadable or empty.

    Fatal for the whole run: no file is touched once this is raised.
    """


@dataclass(frozen=True, slots=True)
class CopyrightText:
    """Immutable block of header lines, shared read-only by every scan."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> CopyrightText:
        """Build from raw file content, dropping surrounding blank lines."""
        lines = text.splitlines()
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise CopyrightError("copyright text is empty")
        return cls(tuple(lines))

    def is_block_comment(self) -> bool:
        """True when the text is itself a ``/*`` ... ``*/`` block.

        Only such a header is recognised (and replaced identically) when the
        tool is run again over files it already updated.
        """
        return (
            len(self.lines) >= 2
            and _BLOCK_OPEN_RE.match(self.lines[0]) is not None
            and _BLOCK_CLOSE_RE.search(self.lines[-1]) is not None
        )


def load_copyright(path: Path, *, encoding: str = "utf-8") -> CopyrightText:
    """Read *path* into a ``CopyrightText``.

    Raises
    ------
    CopyrightError
        If the file is absent, unreadable, undecodable or blank.
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise CopyrightError(f"cannot read copyright file {path}: {e}") from e

    try:
        copyright = CopyrightText.from_text(text)
    except CopyrightError as e:
        raise CopyrightError(f"{path}: {e}") from e

    if not copyright.is_block_comment():
        _logger.warning(
            "%s: copyright text is not a /* ... */ block; "
            "updated files will not be recognised on a later run",
            path,
        )
    _logger.debug("Loaded %d copyright line(s) from %s", len(copyright.lines), path)
    return copyright
