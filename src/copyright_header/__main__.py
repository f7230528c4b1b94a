"""CLI entry-point for copyright_header.

Usage:
    python -m copyright_header <path>...
    python -m copyright_header <path>... --copyright-file LICENSE_HEADER
    python -m copyright_header <path>... --check
    python -m copyright_header <path>... --json [--ci]
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from copyright_header import __version__
from copyright_header.api import update_paths as _api_update_paths
from copyright_header.core.config import (
    COPYRIGHT_FILE_ENV,
    UpdateConfig,
    default_copyright_file,
)
from copyright_header.core.copyright import CopyrightError
from copyright_header.model.run_result import UpdateRun
from copyright_header.utils.exit_codes import ExitCode
from copyright_header.utils.json_norm import stable_json_dumps


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else "." + ext


def _print_human(run: UpdateRun) -> None:
    """Print changed paths to stdout and a one-line summary to stderr."""
    for outcome in run.updated:
        print(outcome.path)

    summary = run.to_dict()["summary"]["by_status"]
    verb = "would update" if run.check_only else "updated"
    print(
        f"\n   {verb}: {summary['updated']}"
        f"  unchanged: {summary['unchanged']}"
        f"  skipped: {summary['skipped']}"
        f"  failed: {summary['failed']}",
        file=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="copyright-header",
        description=(
            "Replace or insert the leading copyright comment of source files."
        ),
    )
    p.add_argument(
        "paths",
        nargs="+",
        type=Path,
        metavar="PATH",
        help="Files to update; directories are searched recursively.",
    )
    p.add_argument(
        "--copyright-file",
        dest="copyright_file",
        type=Path,
        default=None,
        help=(
            "File holding the canonical header "
            f"(default: ${COPYRIGHT_FILE_ENV} or ./COPYRIGHT)."
        ),
    )
    p.add_argument(
        "--backup-suffix",
        dest="backup_suffix",
        default=UpdateConfig.backup_suffix,
        help="Suffix of the temporary backup kept while a file is rewritten.",
    )
    p.add_argument(
        "--ext",
        dest="exts",
        action="append",
        default=None,
        metavar="EXT",
        help="File extension to pick up inside directories (repeatable).",
    )
    p.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Report files whose header would change; write nothing.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the update report JSON to stdout.",
    )
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=False,
        help="Enable deterministic report output (stable run ID and timestamp).",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", default=False)
    verbosity.add_argument("-q", "--quiet", action="store_true", default=False)
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``utils.exit_codes``)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    config = UpdateConfig(
        copyright_file=args.copyright_file or default_copyright_file(),
        backup_suffix=args.backup_suffix,
        check_only=args.check,
    )
    if args.exts:
        config = dataclasses.replace(
            config, include_exts=tuple(_normalize_ext(e) for e in args.exts)
        )

    try:
        run, run_dict = _api_update_paths(
            args.paths, config=config, ci_mode=args.ci_mode
        )
    except CopyrightError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        sys.stdout.write(stable_json_dumps(run_dict))
    else:
        _print_human(run)

    if run.failed:
        return ExitCode.ERROR
    if run.check_only and run.updated:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
