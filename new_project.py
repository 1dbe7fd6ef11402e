"""Minimal runner for projkit.

This file's single responsibility is to provide a tiny entrypoint that
delegates execution to :mod:`projkit.cli`, so the tool can be run from a
checkout without installing it.

Usage:
    python new_project.py newproject <project-name> [--verbose] [--help]

"""

from __future__ import annotations


def entry_point() -> None:
    """Run projkit.

    The import is performed inside the function to avoid importing the
    whole application at module import time.
    """
    from projkit.cli import entry_point as cli_entry_point

    cli_entry_point()


if __name__ == "__main__":
    entry_point()
