"""Setup pipeline: steps, orchestration and status rendering.

Typical usage::

    from projkit.pipeline import run_pipeline, SetupContext

"""

from __future__ import annotations

from .orchestrator import RunOutcome, run_pipeline
from .steps import NEW_PROJECT_STEPS, PipelineStep, SetupContext, StepResult

__all__ = [
    "NEW_PROJECT_STEPS",
    "PipelineStep",
    "RunOutcome",
    "SetupContext",
    "StepResult",
    "run_pipeline",
]
