"""Tests for the console output helpers."""

import io

from projkit.console_helpers import rprint
from projkit.ui import basic


def test_messages_escape_markup(capsys):
    basic.ui_error("bad [path]")
    basic.ui_success("done [x]")
    basic.ui_warning("careful")
    basic.ui_info("note")
    out = capsys.readouterr().out
    assert "✗ bad [path]" in out
    assert "✓ done [x]" in out
    assert "⚠ careful" in out
    assert "note" in out


def test_text_and_log_lines_are_literal(capsys):
    basic.ui_text("Usage: projkit <command> [args...]")
    basic.ui_log_line("[2024-01-02 03:04:05] Created commit")
    out = capsys.readouterr().out
    assert "Usage: projkit <command> [args...]" in out
    assert "[2024-01-02 03:04:05] Created commit" in out


def test_rprint_to_file():
    buf = io.StringIO()
    rprint("[green]ok[/green]", file=buf)
    assert buf.getvalue() == "ok\n"
