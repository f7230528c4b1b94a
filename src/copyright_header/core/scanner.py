"""Line scanner — decides how a file's leading comment block is rewritten.

The scanner is a three-state machine over the file's lines:

``SEEK_COMMENT_START``
    Skip leading blank lines and classify the first real line.  A plain
    ``/*`` opener starts a header to replace; a ``package`` line means there
    is no header, so the copyright is inserted above it.  A one-line comment,
    a ``/**`` doc comment or anything else is left alone with a warning.

``SEEK_COMMENT_END``
    Drop the old header body until the line closing it, which is replaced by
    the copyright text.

``DONE``
    Copy every remaining line verbatim.

Each state owns an ordered rule table; the first rule whose pattern matches
the line wins.  No I/O happens here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from copyright_header.core.copyright import CopyrightText
from copyright_header.model import ScanState, Severity
from copyright_header.model.diagnostic import Diagnostic
from copyright_header.model.scan_result import ScanResult

ONE_LINE_COMMENT_RE = re.compile(r"^\s*/\*.*\*/\s*$")
COMMENT_OPEN_RE = re.compile(r"^\s*/\*\s*$")
JAVADOC_OPEN_RE = re.compile(r"^\s*/\*\*\s*$")
PACKAGE_RE = re.compile(r"^package")
BLANK_RE = re.compile(r"^\s*$")
COMMENT_CLOSE_RE = re.compile(r"\*/\s*$")
STATEMENT_RE = re.compile(r"^(?:package|import)\s+\S+;")
ANY_RE = re.compile(r"")


class Action(str, Enum):
    """What a matched rule does with the current line."""

    PASS = "pass"        # copy the line unchanged
    DROP = "drop"        # consume the line
    REPLACE = "replace"  # emit the copyright text instead of the line
    INSERT = "insert"    # emit the copyright text, a blank line, then the line


@dataclass(frozen=True, slots=True)
class Rule:
    """One row of a state's rule table."""

    name: str
    pattern: re.Pattern[str]
    action: Action
    next_state: ScanState
    marks_changed: bool = False
    severity: Severity | None = None
    message: str = ""  # may reference {line}

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


_S = ScanState

RULES: dict[ScanState, tuple[Rule, ...]] = {
    _S.SEEK_COMMENT_START: (
        Rule(
            "one_line_comment", ONE_LINE_COMMENT_RE, Action.PASS, _S.DONE,
            severity=Severity.WARNING, message="one-line comment found",
        ),
        Rule(
            "comment_open", COMMENT_OPEN_RE, Action.DROP, _S.SEEK_COMMENT_END,
            marks_changed=True,
        ),
        Rule(
            "javadoc_open", JAVADOC_OPEN_RE, Action.PASS, _S.DONE,
            severity=Severity.WARNING, message="javadoc comment found",
        ),
        Rule(
            "package", PACKAGE_RE, Action.INSERT, _S.DONE,
            marks_changed=True,
            severity=Severity.INFO, message="no previous header comment",
        ),
        Rule(
            "blank", BLANK_RE, Action.DROP, _S.SEEK_COMMENT_START,
            marks_changed=True,
        ),
        Rule(
            "unexpected", ANY_RE, Action.PASS, _S.DONE,
            severity=Severity.WARNING, message="unexpected line: {line}",
        ),
    ),
    _S.SEEK_COMMENT_END: (
        Rule(
            "comment_close", COMMENT_CLOSE_RE, Action.REPLACE, _S.DONE,
            marks_changed=True,
        ),
        # A statement inside the header means the comment is malformed; warn
        # and keep the line, but do not try to repair the header.
        Rule(
            "stray_statement", STATEMENT_RE, Action.PASS, _S.SEEK_COMMENT_END,
            severity=Severity.WARNING, message="unexpected line: {line}",
        ),
        Rule(
            "comment_body", ANY_RE, Action.DROP, _S.SEEK_COMMENT_END,
            marks_changed=True,
        ),
    ),
    _S.DONE: (
        Rule("passthrough", ANY_RE, Action.PASS, _S.DONE),
    ),
}

UNTERMINATED_MESSAGE = "unterminated header comment"


def split_lines(text: str) -> list[str]:
    """Split newline-normalised *text* into lines without terminators.

    Unlike ``str.splitlines`` only ``\\n`` separates lines, so form feeds and
    other exotic separators inside a line survive the rewrite.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineScanner:
    """Applies the rule tables to a sequence of lines.

    Holds no per-file state: one instance can scan any number of files.
    """

    def __init__(
        self,
        copyright: CopyrightText,
        *,
        rules: dict[ScanState, tuple[Rule, ...]] | None = None,
    ) -> None:
        self.copyright = copyright
        self.rules = rules if rules is not None else RULES

    def match(self, state: ScanState, line: str) -> Rule:
        for rule in self.rules[state]:
            if rule.matches(line):
                return rule
        raise LookupError(f"no rule for state {state.value!r} matches {line!r}")

    def _emit(self, action: Action, line: str, out: list[str]) -> None:
        if action is Action.PASS:
            out.append(line)
        elif action is Action.REPLACE:
            out.extend(self.copyright.lines)
        elif action is Action.INSERT:
            out.extend(self.copyright.lines)
            out.append("")
            out.append(line)

    def scan(self, lines: Iterable[str], *, source: str = "<string>") -> ScanResult:
        """Scan *lines* and return the complete rewrite.

        If the input ends inside an unterminated header comment, the scan is
        abandoned: the result echoes the input with ``changed=False`` and a
        warning, so the file is never truncated.
        """
        original: Sequence[str] = list(lines)
        state = ScanState.SEEK_COMMENT_START
        changed = False
        out: list[str] = []
        diagnostics: list[Diagnostic] = []

        for lineno, line in enumerate(original, start=1):
            rule = self.match(state, line)
            if rule.marks_changed:
                changed = True
            if rule.severity is not None:
                diagnostics.append(
                    Diagnostic(
                        severity=rule.severity,
                        message=rule.message.format(line=line),
                        source=source,
                        line_number=lineno,
                    )
                )
            self._emit(rule.action, line, out)
            state = rule.next_state

        if state is ScanState.SEEK_COMMENT_END:
            diagnostics.append(
                Diagnostic(
                    severity=Severity.WARNING,
                    message=UNTERMINATED_MESSAGE,
                    source=source,
                    line_number=len(original),
                )
            )
            return ScanResult(
                source=source,
                lines=tuple(original),
                changed=False,
                diagnostics=tuple(diagnostics),
                final_state=state,
            )

        return ScanResult(
            source=source,
            lines=tuple(out),
            changed=changed,
            diagnostics=tuple(diagnostics),
            final_state=state,
        )

    def scan_text(self, text: str, *, source: str = "<string>") -> ScanResult:
        return self.scan(split_lines(text), source=source)


def scan_lines(
    lines: Iterable[str],
    copyright: CopyrightText,
    *,
    source: str = "<string>",
) -> ScanResult:
    """Functional entry point: scan *lines* with a throwaway ``LineScanner``."""
    return LineScanner(copyright).scan(lines, source=source)
