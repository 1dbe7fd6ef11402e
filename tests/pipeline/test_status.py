"""Tests for projkit.pipeline.status helpers."""

from rich.console import Console
from rich.table import Table

from projkit.pipeline import status
from projkit.pipeline.steps import StepResult


def test_status_label_en_and_sv():
    assert "Done" in status._status_label("en", "ok")
    assert "Misslyckades" in status._status_label("sv", "fail")
    assert status._status_label("en", "unknown") == "unknown"


def test_step_statuses_marks_skipped_steps():
    results = [StepResult("a", True), StepResult("b", False)]
    assert status.step_statuses(["a", "b", "c"], results) == [
        ("a", "ok"),
        ("b", "fail"),
        ("c", "skipped"),
    ]


def test_render_status_table_rows():
    results = [StepResult("validate_arguments", True), StepResult("create_directory", False)]
    table = status.render_status_table(
        lambda key: key, "en", ["validate_arguments", "create_directory", "push"], results
    )
    assert isinstance(table, Table)
    assert table.title == "pipeline_title"
    assert table.row_count == 3

    console = Console(record=True, width=120)
    console.print(table)
    text = console.export_text()
    assert "step_push" in text
    assert "Skipped" in text
    assert "Failed" in text
