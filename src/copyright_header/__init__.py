"""copyright_header — rewrite the leading copyright comment of source files."""

__all__ = [
    "__version__",
    "update_paths",
    "check_paths",
    "CopyrightError",
    "CopyrightText",
    "LineScanner",
    "FileUpdater",
    "scan_lines",
]
__version__ = "0.1.0"

# Programmatic entrypoints (backend use).
from copyright_header.api import check_paths, update_paths  # noqa: E402, F401
from copyright_header.core.copyright import (  # noqa: E402, F401
    CopyrightError,
    CopyrightText,
)
from copyright_header.core.scanner import LineScanner, scan_lines  # noqa: E402, F401
from copyright_header.core.updater import FileUpdater  # noqa: E402, F401
