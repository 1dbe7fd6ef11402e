"""Tests for the timestamped run log."""

from datetime import datetime
from pathlib import Path

from projkit.runlog import RunLog


def _clock():
    return datetime(2024, 1, 2, 3, 4, 5)


def test_quiet_mode_buffers_in_order():
    echoed = []
    log = RunLog(clock=_clock, echo=echoed.append)
    log.record("first")
    log.record("second")
    assert log.lines == ("[2024-01-02 03:04:05] first", "[2024-01-02 03:04:05] second")
    assert echoed == []


def test_verbose_mode_streams_and_keeps_nothing():
    echoed = []
    log = RunLog(verbose=True, clock=_clock, echo=echoed.append)
    line = log.record("hello")
    assert echoed == [line] == ["[2024-01-02 03:04:05] hello"]
    assert log.lines == ()


def test_flush_to_writes_one_line_per_message(tmp_path: Path):
    log = RunLog(clock=_clock)
    log.record("a")
    log.record("b")
    target = tmp_path / "error.txt"
    assert log.flush_to(target) == target
    assert target.read_text(encoding="utf-8") == (
        "[2024-01-02 03:04:05] a\n[2024-01-02 03:04:05] b\n"
    )
    assert log.lines == ()


def test_default_echo_prints_brackets_literally(capsys):
    log = RunLog(verbose=True, clock=_clock)
    log.record("[bold]not markup[/bold]")
    assert "[2024-01-02 03:04:05] [bold]not markup[/bold]" in capsys.readouterr().out
