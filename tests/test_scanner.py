"""Tests for the line scanner state machine."""

from __future__ import annotations

import textwrap

import pytest

from copyright_header.core.copyright import CopyrightText
from copyright_header.core.scanner import (
    RULES,
    Action,
    LineScanner,
    scan_lines,
    split_lines,
)
from copyright_header.model import ScanState, Severity

HEADER = CopyrightText((
    "/*",
    " * Copyright 2008 Example Systems, Inc.",
    " */",
))


def _scan(text: str, copyright: CopyrightText = HEADER):
    return LineScanner(copyright).scan_text(textwrap.dedent(text), source="Foo.java")


# ════════════════════════════════════════════════════════════════════
# No previous header
# ════════════════════════════════════════════════════════════════════


class TestInsertBeforePackage:
    def test_single_package_line(self):
        result = scan_lines(["package foo;"], CopyrightText(("LICENSE-TEXT-LINE",)))
        assert result.lines == ("LICENSE-TEXT-LINE", "", "package foo;")
        assert result.changed is True

    def test_emits_info_diagnostic(self):
        result = scan_lines(["package foo;"], HEADER, source="Foo.java")
        assert len(result.diagnostics) == 1
        d = result.diagnostics[0]
        assert d.severity is Severity.INFO
        assert d.message == "no previous header comment"
        assert d.source == "Foo.java"
        assert d.line_number == 1
        assert result.warnings == ()

    def test_leading_blank_lines_are_dropped(self):
        result = scan_lines(["", "   ", "package a;", "", "class A {}"], HEADER)
        assert result.lines == (*HEADER.lines, "", "package a;", "", "class A {}")
        assert result.changed is True

    def test_rest_of_file_passes_through(self):
        result = _scan("""\
            package a;
            /*
            package b;
            */
        """)
        assert result.lines[len(HEADER.lines) + 1:] == ("package a;", "/*", "package b;", "*/")
        assert len(result.diagnostics) == 1


# ════════════════════════════════════════════════════════════════════
# Existing multi-line header
# ════════════════════════════════════════════════════════════════════


class TestReplaceHeader:
    def test_replaces_comment_block(self):
        result = scan_lines(
            ["/*", "old header", "*/", "package foo;"],
            CopyrightText(("NEW-HEADER",)),
        )
        assert result.lines == ("NEW-HEADER", "package foo;")
        assert result.changed is True
        assert result.diagnostics == ()

    def test_lines_after_block_are_untouched(self):
        result = _scan("""\
            /*
             * Copyright 1999 Old Owner.
             * All rights reserved.
             */

            package com.example;

            /* inner comment */
            import java.util.List;
        """)
        assert result.lines == (
            *HEADER.lines,
            "",
            "package com.example;",
            "",
            "/* inner comment */",
            "import java.util.List;",
        )
        assert result.final_state is ScanState.DONE

    def test_opener_and_closer_may_carry_whitespace(self):
        result = scan_lines(["   /*  ", "text", "   text */   ", "x"], HEADER)
        assert result.lines == (*HEADER.lines, "x")
        assert result.changed is True

    def test_replacement_is_idempotent(self):
        once = scan_lines(["package a;", "", "class A {}"], HEADER)
        twice = scan_lines(once.lines, HEADER)
        assert twice.lines == once.lines
        assert twice.render() == once.render()

    def test_stray_statement_inside_comment_warns_and_is_kept(self):
        result = _scan("""\
            /*
             * header
            package a;
             */
            class X {}
        """)
        assert result.lines == ("package a;", *HEADER.lines, "class X {}")
        assert result.changed is True
        assert len(result.warnings) == 1
        w = result.warnings[0]
        assert w.message == "unexpected line: package a;"
        assert w.line_number == 3

    def test_stray_import_keeps_scanning_for_comment_end(self):
        result = scan_lines(["/*", "import java.io.File;", "body", "*/", "tail"], HEADER)
        assert result.lines == ("import java.io.File;", *HEADER.lines, "tail")
        assert result.final_state is ScanState.DONE

    def test_unterminated_comment_leaves_input_untouched(self):
        lines = ["/*", " * never closed", "class A {}"]
        result = scan_lines(lines, HEADER)
        assert result.lines == tuple(lines)
        assert result.changed is False
        assert result.final_state is ScanState.SEEK_COMMENT_END
        assert [w.message for w in result.warnings] == ["unterminated header comment"]
        assert result.warnings[0].line_number == 3


# ════════════════════════════════════════════════════════════════════
# Non-standard leading regions: warn and leave alone
# ════════════════════════════════════════════════════════════════════


class TestLeaveAlone:
    @pytest.mark.parametrize(
        "text, message",
        [
            ("/* Copyright 2007 Someone */\npackage a;\n", "one-line comment found"),
            ("/**\n * Docs.\n */\npackage a;\n", "javadoc comment found"),
            ("import java.util.Map;\npackage a;\n", "unexpected line: import java.util.Map;"),
            ("// line comment\npackage a;\n", "unexpected line: // line comment"),
        ],
    )
    def test_output_equals_input_with_one_warning(self, text, message):
        result = LineScanner(HEADER).scan_text(text)
        assert result.render() == text
        assert result.changed is False
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].severity is Severity.WARNING
        assert result.diagnostics[0].message == message

    def test_blank_lines_before_one_line_comment_still_mark_changed(self):
        result = scan_lines(["", "/* x */", "package a;"], HEADER)
        assert result.lines == ("/* x */", "package a;")
        assert result.changed is True
        assert len(result.warnings) == 1

    def test_unexpected_line_text_is_kept_verbatim(self):
        result = scan_lines(["int x = {1};"], HEADER)
        assert result.warnings[0].message == "unexpected line: int x = {1};"


# ════════════════════════════════════════════════════════════════════
# Rule table and helpers
# ════════════════════════════════════════════════════════════════════


class TestRuleTable:
    def test_every_state_has_a_catch_all(self):
        for state in ScanState:
            assert RULES[state][-1].matches("anything at all")

    @pytest.mark.parametrize(
        "state, line, expected",
        [
            (ScanState.SEEK_COMMENT_START, "/**/", "one_line_comment"),
            (ScanState.SEEK_COMMENT_START, "/*", "comment_open"),
            (ScanState.SEEK_COMMENT_START, "/**", "javadoc_open"),
            (ScanState.SEEK_COMMENT_START, "package x;", "package"),
            (ScanState.SEEK_COMMENT_START, "\t", "blank"),
            (ScanState.SEEK_COMMENT_START, " * stray", "unexpected"),
            (ScanState.SEEK_COMMENT_END, "package x; */", "comment_close"),
            (ScanState.SEEK_COMMENT_END, "import a.b.*;", "stray_statement"),
            (ScanState.SEEK_COMMENT_END, "import static a.B.c;", "comment_body"),
            (ScanState.DONE, "/*", "passthrough"),
        ],
    )
    def test_first_match_wins(self, state, line, expected):
        assert LineScanner(HEADER).match(state, line).name == expected

    def test_done_is_absorbing(self):
        for rule in RULES[ScanState.DONE]:
            assert rule.next_state is ScanState.DONE
            assert rule.action is Action.PASS

    def test_empty_input(self):
        result = scan_lines([], HEADER)
        assert result.lines == ()
        assert result.changed is False
        assert result.diagnostics == ()

    def test_split_lines_only_splits_on_newline(self):
        assert split_lines("a\n\x0cb\n") == ["a", "\x0cb"]
        assert split_lines("a\nb") == ["a", "b"]
        assert split_lines("") == []

    def test_scanner_is_reusable_across_files(self):
        scanner = LineScanner(HEADER)
        first = scanner.scan(["/* x */"], source="A.java")
        second = scanner.scan(["package b;"], source="B.java")
        assert first.changed is False
        assert second.changed is True
        assert second.diagnostics[0].source == "B.java"
