"""ScanResult — the line scanner's output for a single file."""

from __future__ import annotations

from dataclasses import dataclass

from . import ScanState, Severity
from .diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Complete rewrite of one file's lines.

    ``changed`` is true when the original content must be discarded in favour
    of ``lines``; when false, the file is left exactly as it was.
    """

    source: str
    lines: tuple[str, ...]
    changed: bool
    diagnostics: tuple[Diagnostic, ...] = ()
    final_state: ScanState = ScanState.DONE

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity is Severity.WARNING)

    def render(self) -> str:
        """Join the output lines, each terminated by a newline."""
        return "".join(line + "\n" for line in self.lines)
