"""Setup steps for the ``newproject`` command.

Each step is a :class:`PipelineStep`: a name plus an action taking the
:class:`SetupContext` and returning the log lines it produced. Calling a step
never raises an :class:`~projkit.exceptions.AppError`; failures come back as
a :class:`StepResult` with ``ok=False``, the error message and, when the
error carries one, a hint for the user.

Steps assume their predecessors succeeded (for example every step after
``validate_arguments`` relies on there being exactly one argument), which
the orchestrator guarantees by stopping at the first failure.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from projkit.config import ATTRIBUTES_FILENAME, IGNORE_FILENAME, PROGRAM_NAME
from projkit.exceptions import (
    AppError,
    ExternalToolError,
    FileSystemError,
    MissingDependencyError,
    TargetExistsError,
    UsageError,
)
from projkit.i18n import _
from projkit.settings import SetupSettings
from projkit.vcs import VersionControl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupContext:
    r"""Everything a step needs to know about the current run.

    Attributes
    ----------
    args : tuple[str, ...]
        Positional arguments given after the command.
    workdir : Path
        Directory the project is created in.
    settings : SetupSettings
        Resolved runtime settings.
    vcs : VersionControl
        Version-control capability used by the repository steps.
    """

    args: tuple[str, ...]
    workdir: Path
    settings: SetupSettings
    vcs: VersionControl

    @property
    def project_name(self) -> str:
        return self.args[0]

    @property
    def project_dir(self) -> Path:
        return self.workdir / self.project_name

    @property
    def document_name(self) -> str:
        """File name of the template copy, e.g. ``Alpha.blend``."""
        return f"{self.project_name}{self.settings.template_suffix}"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one step: success flag, produced log lines and the error."""

    name: str
    ok: bool
    messages: tuple[str, ...] = ()
    error: AppError | None = None


@dataclass(frozen=True)
class PipelineStep:
    """A named step that turns application errors into a failed result."""

    name: str
    action: Callable[[SetupContext], list[str]]

    def __call__(self, ctx: SetupContext) -> StepResult:
        try:
            messages = self.action(ctx)
        except AppError as error:
            logger.debug("Step %s failed: %s", self.name, error.to_dict())
            lines = [error.message]
            if error.hint:
                lines.append(error.hint)
            return StepResult(self.name, False, tuple(lines), error)
        return StepResult(self.name, True, tuple(messages))


def pipeline_step(name: str) -> Callable[[Callable[[SetupContext], list[str]]], PipelineStep]:
    """Decorate a step action, registering it under ``name``."""

    def decorator(action: Callable[[SetupContext], list[str]]) -> PipelineStep:
        return PipelineStep(name, action)

    return decorator


def is_valid_project_name(name: str) -> bool:
    """Return True if ``name`` can be used as a single directory name.

    Examples
    --------
    >>> is_valid_project_name("Alpha")
    True
    >>> is_valid_project_name("../Alpha")
    False
    """
    if not name or name.strip() != name or name in (".", ".."):
        return False
    separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
    return not any(sep in name for sep in separators)


@pipeline_step("validate_arguments")
def validate_arguments(ctx: SetupContext) -> list[str]:
    usage = _("usage").format(program=PROGRAM_NAME)
    if len(ctx.args) != 1:
        raise UsageError(
            _("arg_count").format(count=len(ctx.args)),
            context={"args": list(ctx.args), "hint": usage},
        )
    name = ctx.args[0]
    if not is_valid_project_name(name):
        raise UsageError(
            _("invalid_name").format(name=name), context={"hint": usage}
        )
    return [_("args_ok").format(name=name)]


@pipeline_step("create_directory")
def create_directory(ctx: SetupContext) -> list[str]:
    path = ctx.project_dir
    if path.exists() or path.is_symlink():
        raise TargetExistsError(_("dir_exists").format(path=path))
    try:
        path.mkdir()
    except FileExistsError as error:
        raise TargetExistsError(_("dir_exists").format(path=path)) from error
    except OSError as error:
        raise FileSystemError(
            _("dir_failed").format(path=path, detail=error.strerror or error)
        ) from error
    return [_("dir_created").format(path=path)]


@pipeline_step("copy_template")
def copy_template(ctx: SetupContext) -> list[str]:
    template = ctx.settings.template_path
    if not template.is_file():
        raise MissingDependencyError(
            _("template_missing").format(path=template),
            context={"template_path": str(template)},
        )
    destination = ctx.project_dir / ctx.document_name
    try:
        shutil.copyfile(template, destination)
    except OSError as error:
        raise FileSystemError(
            _("template_failed").format(
                path=destination, detail=error.strerror or error
            )
        ) from error
    return [_("template_copied").format(template=template, path=destination)]


@pipeline_step("init_repository")
def init_repository(ctx: SetupContext) -> list[str]:
    ctx.vcs.init(ctx.project_dir, ctx.settings.branch)
    return [
        _("repo_initialized").format(path=ctx.project_dir, branch=ctx.settings.branch)
    ]


@pipeline_step("write_ignore_file")
def write_ignore_file(ctx: SetupContext) -> list[str]:
    path = ctx.project_dir / IGNORE_FILENAME
    pattern = ctx.settings.ignore_pattern
    try:
        path.write_text(f"{pattern}\n", encoding="utf-8")
    except OSError as error:
        raise FileSystemError(
            _("ignore_failed").format(path=path, detail=error.strerror or error)
        ) from error
    return [_("ignore_written").format(pattern=pattern, path=path)]


@pipeline_step("track_large_files")
def track_large_files(ctx: SetupContext) -> list[str]:
    pattern = ctx.settings.large_file_pattern
    ctx.vcs.track_large_files(ctx.project_dir, pattern)
    return [_("lfs_tracked").format(pattern=pattern)]


@pipeline_step("stage_files")
def stage_files(ctx: SetupContext) -> list[str]:
    files = [ctx.document_name, ATTRIBUTES_FILENAME, IGNORE_FILENAME]
    ctx.vcs.add(ctx.project_dir, files)
    return [_("files_staged").format(files=", ".join(files))]


@pipeline_step("commit")
def commit(ctx: SetupContext) -> list[str]:
    ctx.vcs.commit(ctx.project_dir, ctx.settings.commit_message)
    return [_("committed").format(message=ctx.settings.commit_message)]


@pipeline_step("configure_remote")
def configure_remote(ctx: SetupContext) -> list[str]:
    url = ctx.settings.remote_url_for(ctx.project_name)
    if url is None:
        return []
    ctx.vcs.add_remote(ctx.project_dir, ctx.settings.remote, url)
    return [_("remote_added").format(remote=ctx.settings.remote, url=url)]


@pipeline_step("push")
def push(ctx: SetupContext) -> list[str]:
    remote, branch = ctx.settings.remote, ctx.settings.branch
    try:
        ctx.vcs.push(ctx.project_dir, remote, branch)
    except ExternalToolError as error:
        error.context.setdefault(
            "hint",
            _("push_hint").format(remote=remote, branch=branch, path=ctx.project_dir),
        )
        raise
    return [_("pushed").format(branch=branch, remote=remote)]


NEW_PROJECT_STEPS: tuple[PipelineStep, ...] = (
    validate_arguments,
    create_directory,
    copy_template,
    init_repository,
    write_ignore_file,
    track_large_files,
    stage_files,
    commit,
    configure_remote,
    push,
)


__all__ = [
    "NEW_PROJECT_STEPS",
    "PipelineStep",
    "SetupContext",
    "StepResult",
    "commit",
    "configure_remote",
    "copy_template",
    "create_directory",
    "init_repository",
    "is_valid_project_name",
    "pipeline_step",
    "push",
    "stage_files",
    "track_large_files",
    "validate_arguments",
    "write_ignore_file",
]
