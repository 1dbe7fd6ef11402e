"""Rendering helpers for setup-step status.

Provides localized status labels and a Rich table summarising which steps
succeeded, which one failed and which were skipped. Printed at the end of
verbose runs.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from projkit.console_helpers import Table

from .steps import StepResult


def _status_label(lang: str, base: str) -> str:
    """Return a localized status label for a given step status key.

    Parameters
    ----------
    lang : str
        Language code (e.g., ``'en'`` or ``'sv'``).
    base : str
        Status key: ``'ok'``, ``'fail'`` or ``'skipped'``.

    Returns
    -------
    str
        Localized status label; unknown keys are returned unchanged.

    Examples
    --------
    >>> _status_label("sv", "ok")
    '✅ Klart'
    """
    if lang == "sv":
        labels = {
            "ok": "✅ Klart",
            "fail": "❌ Misslyckades",
            "skipped": "⏭  Hoppades över",
        }
    else:
        labels = {
            "ok": "✅ Done",
            "fail": "❌ Failed",
            "skipped": "⏭  Skipped",
        }
    return labels.get(base, base)


def step_statuses(
    step_names: Sequence[str], results: Sequence[StepResult]
) -> list[tuple[str, str]]:
    """Pair every step name with ``'ok'``, ``'fail'`` or ``'skipped'``."""
    by_name = {result.name: result for result in results}
    statuses = []
    for name in step_names:
        result = by_name.get(name)
        if result is None:
            statuses.append((name, "skipped"))
        else:
            statuses.append((name, "ok" if result.ok else "fail"))
    return statuses


def render_status_table(
    translate: Callable[[str], str],
    lang: str,
    step_names: Sequence[str],
    results: Sequence[StepResult],
) -> Table:
    r"""Construct a Rich table summarising the setup steps.

    Parameters
    ----------
    translate : Callable[[str], str]
        Translation function for i18n keys.
    lang : str
        Language used for the status labels.
    step_names : Sequence[str]
        All step names of the pipeline, in order.
    results : Sequence[StepResult]
        Results of the steps that were executed.

    Returns
    -------
    Table
        A table with one row per step.
    """
    table = Table(
        title=translate("pipeline_title"),
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("#", style="bold")
    table.add_column("Step")
    table.add_column("Status")
    for index, (name, status) in enumerate(step_statuses(step_names, results), 1):
        table.add_row(str(index), translate(f"step_{name}"), _status_label(lang, status))
    return table


__all__ = ["_status_label", "render_status_table", "step_statuses"]
