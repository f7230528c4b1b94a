"""Exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — every readable file processed
  1   Violation — ``--check`` found at least one header that would change
  2   Error — usage error, unusable copyright file, or a file failed to update
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
