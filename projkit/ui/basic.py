"""Minimal UI output primitives for the projkit terminal interface.

Rendering only: informational, success, warning and error messages,
and raw run-log lines. No pipeline state or configuration is consulted
here; callers pass fully formatted text.
"""

from __future__ import annotations

from rich.markup import escape

from projkit.console_helpers import rprint


def ui_info(message: str) -> None:
    """Display an informational message in cyan."""
    rprint(f"[cyan]{escape(message)}[/cyan]")


def ui_success(message: str) -> None:
    r"""Display a success message with a green checkmark.

    Parameters
    ----------
    message : str
        Text confirming the completed operation.
    """
    rprint(f"[green]✓ {escape(message)}[/green]")


def ui_warning(message: str) -> None:
    """Display a warning message in yellow."""
    rprint(f"[yellow]⚠ {escape(message)}[/yellow]")


def ui_error(message: str) -> None:
    r"""Display an error message in bold red with a cross.

    Parameters
    ----------
    message : str
        Error text. Square brackets are escaped, so paths and run-log
        timestamps render literally.

    Examples
    --------
    >>> ui_error("File not found")  # doctest: +SKIP
    """
    rprint(f"[bold red]✗ {escape(message)}[/bold red]")


def ui_log_line(line: str) -> None:
    """Print one timestamped run-log line verbatim."""
    rprint(line, markup=False)


def ui_text(text: str) -> None:
    """Print plain text without markup interpretation."""
    rprint(text, markup=False)


__all__ = [
    "ui_error",
    "ui_info",
    "ui_log_line",
    "ui_success",
    "ui_text",
    "ui_warning",
]
