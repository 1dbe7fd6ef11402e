"""Orchestrator for setup-step sequencing.

Runs an ordered sequence of :class:`~projkit.pipeline.steps.PipelineStep`
objects against one :class:`~projkit.pipeline.steps.SetupContext`, records
every produced message in the :class:`~projkit.runlog.RunLog` and stops at
the first failed step. Nothing is retried and completed steps are never
rolled back.

Typical usage::

    from projkit.pipeline.orchestrator import run_pipeline
    outcome = run_pipeline(ctx, runlog)
    if not outcome.ok:
        ...

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from projkit.runlog import RunLog

from .steps import NEW_PROJECT_STEPS, PipelineStep, SetupContext, StepResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    r"""Ordered results of the steps that were executed.

    Only the last result can be a failure, so once a run has failed it stays
    failed.

    Attributes
    ----------
    results : tuple[StepResult, ...]
        One result per executed step, in execution order.
    """

    results: tuple[StepResult, ...]

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failed_step(self) -> StepResult | None:
        """Return the failed result, or None for a successful run."""
        for result in self.results:
            if not result.ok:
                return result
        return None

    def completed(self, step_name: str) -> bool:
        """Return True if the step called ``step_name`` ran and succeeded."""
        return any(r.name == step_name and r.ok for r in self.results)


def run_pipeline(
    ctx: SetupContext,
    runlog: RunLog,
    steps: Sequence[PipelineStep] = NEW_PROJECT_STEPS,
) -> RunOutcome:
    r"""Execute ``steps`` in order, stopping at the first failure.

    Parameters
    ----------
    ctx : SetupContext
        Context passed to every step.
    runlog : RunLog
        Receives each message produced by a step, in order.
    steps : Sequence[PipelineStep], optional
        The steps to run; defaults to the ``newproject`` pipeline.

    Returns
    -------
    RunOutcome
        Results of the executed steps. Steps after a failure are absent.

    Examples
    --------
    >>> outcome = run_pipeline(ctx, RunLog())  # doctest: +SKIP
    >>> outcome.ok
    True
    """
    results: list[StepResult] = []
    for step in steps:
        logger.debug("Running step %s", step.name)
        result = step(ctx)
        for message in result.messages:
            runlog.record(message)
        results.append(result)
        if not result.ok:
            logger.info("Step %s failed; skipping remaining steps", step.name)
            break
    return RunOutcome(tuple(results))


__all__ = ["RunOutcome", "run_pipeline"]
