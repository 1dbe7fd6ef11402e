"""Console UI primitives used by the CLI.

Re-exports the output helpers from :mod:`projkit.ui.basic`.
"""

from __future__ import annotations

from projkit.ui.basic import (
    ui_error,
    ui_info,
    ui_log_line,
    ui_success,
    ui_text,
    ui_warning,
)

__all__ = [
    "ui_error",
    "ui_info",
    "ui_log_line",
    "ui_success",
    "ui_text",
    "ui_warning",
]
