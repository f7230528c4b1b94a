"""Diagnostic — an info or warning record raised while scanning one file."""

from __future__ import annotations

from dataclasses import dataclass

from . import Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable scanner diagnostic.

    ``source`` identifies the file the diagnostic belongs to, so callers never
    need ambient "current file" state to attribute it.
    """

    severity: Severity
    message: str
    source: str
    line_number: int  # 1-based; 0 when the input was empty

    def __str__(self) -> str:
        return f"{self.source}:{self.line_number}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "source": self.source,
            "line_number": self.line_number,
        }
