"""Command-line interface: argument parsing, dispatch and exit codes.

This module turns argv into an :class:`Invocation`, selects the command
handler, configures logging and, for ``newproject``, builds the
:class:`~projkit.pipeline.steps.SetupContext`, runs the setup pipeline and
finalizes diagnostics. Every failure path exits with ``EXIT_FAILURE``.

Examples
--------
>>> from projkit.cli import parse_invocation
>>> inv = parse_invocation(["newproject", "Alpha", "--verbose"])
>>> inv.command, inv.args, inv.verbose
('newproject', ('Alpha',), True)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from projkit import i18n
from projkit.config import (
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    LOG_FORMAT,
    PROGRAM_NAME,
    SUPPORTED_LANGUAGES,
)
from projkit.console_helpers import rprint
from projkit.exceptions import ConfigurationError, UsageError
from projkit.fs_utils import create_safe_path, safe_rmtree
from projkit.i18n import _
from projkit.pipeline.orchestrator import RunOutcome, run_pipeline
from projkit.pipeline.status import render_status_table
from projkit.pipeline.steps import NEW_PROJECT_STEPS, SetupContext
from projkit.runlog import RunLog
from projkit.settings import SetupSettings
from projkit.ui.basic import ui_error, ui_info, ui_log_line, ui_success, ui_text, ui_warning
from projkit.vcs import GitCli, VersionControl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    r"""Parsed command line, immutable for the rest of the run.

    Attributes
    ----------
    command : str | None
        The command name as typed, or None when absent.
    args : tuple[str, ...]
        Positional arguments following the command.
    verbose : bool
        Stream run-log lines instead of buffering them.
    help : bool
        Print usage and exit.
    lang : str | None
        Requested message language.
    log_level : str
        Developer logging level.
    clean_on_failure : bool
        Remove the directory created by a failed run.
    """

    command: str | None
    args: tuple[str, ...] = ()
    verbose: bool = False
    help: bool = False
    lang: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    clean_on_failure: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``projkit`` command line."""
    parser = _ArgumentParser(prog=PROGRAM_NAME, add_help=False)
    parser.add_argument("command", nargs="?")
    parser.add_argument("args", nargs="*")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default=None)
    parser.add_argument(
        "--log-level", default=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    )
    parser.add_argument("--clean-on-failure", action="store_true")
    return parser


def parse_invocation(argv: Sequence[str]) -> Invocation:
    r"""Parse ``argv`` (without the program name) into an :class:`Invocation`.

    Flags may appear before, between or after positional arguments.

    Parameters
    ----------
    argv : Sequence[str]
        Command-line arguments.

    Returns
    -------
    Invocation
        The parsed invocation.

    Raises
    ------
    UsageError
        On unknown flags or invalid flag values.
    """
    ns = build_parser().parse_intermixed_args(list(argv))
    return Invocation(
        command=ns.command,
        args=tuple(ns.args),
        verbose=ns.verbose,
        help=ns.help,
        lang=ns.lang,
        log_level=ns.log_level,
        clean_on_failure=ns.clean_on_failure,
    )


def wants_help(argv: Sequence[str]) -> bool:
    """Return True if a help flag appears anywhere in ``argv``."""
    return any(arg in ("-h", "--help") for arg in argv)


def usage_text() -> str:
    """Return the full, localized usage text."""
    return "\n".join(
        [
            _("usage").format(program=PROGRAM_NAME),
            "",
            _("help_description"),
            "",
            _("help_commands"),
            "  " + _("help_newproject"),
            "",
            _("help_options"),
            "  " + _("help_verbose"),
            "  " + _("help_help"),
            "  " + _("help_lang"),
            "  " + _("help_log_level"),
            "  " + _("help_clean"),
        ]
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL, verbose: bool = False) -> None:
    r"""Configure developer logging on the root logger.

    All existing root handlers are replaced. Verbose runs log to stderr with
    ``LOG_FORMAT``; quiet runs install a ``NullHandler`` so nothing reaches
    the console.

    Parameters
    ----------
    level : str, optional
        Logging level name such as ``"DEBUG"`` or ``"WARNING"``. Unknown
        names fall back to ``WARNING``.
    verbose : bool, optional
        Whether log records may be written to the console.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handler: logging.Handler = (
        logging.StreamHandler() if verbose else logging.NullHandler()
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[handler],
    )


def attach_log_file(path: Path) -> None:
    """Also write developer log records to ``path`` (appending)."""
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(file_handler)


def run_new_project(
    invocation: Invocation,
    workdir: Path | None = None,
    vcs: VersionControl | None = None,
    settings: SetupSettings | None = None,
) -> int:
    r"""Run the ``newproject`` setup pipeline and finalize diagnostics.

    Parameters
    ----------
    invocation : Invocation
        The parsed command line; ``args`` holds the project name.
    workdir : Path | None, optional
        Directory to create the project in. Defaults to the current
        working directory.
    vcs : VersionControl | None, optional
        Version-control implementation. Defaults to :class:`GitCli`.
    settings : SetupSettings | None, optional
        Settings to use instead of loading them from the environment.

    Returns
    -------
    int
        ``EXIT_SUCCESS`` or ``EXIT_FAILURE``.
    """
    workdir = Path.cwd() if workdir is None else workdir
    if settings is None:
        try:
            settings = SetupSettings.from_env(workdir)
        except ConfigurationError as error:
            logger.debug("Invalid settings: %s", error.to_dict())
            ui_error(_("config_error").format(detail=error.message))
            return EXIT_FAILURE
    if settings.log_file is not None:
        try:
            attach_log_file(settings.log_file)
        except OSError as error:
            ui_warning(str(error))

    ctx = SetupContext(
        args=tuple(invocation.args),
        workdir=workdir,
        settings=settings,
        vcs=vcs if vcs is not None else GitCli(settings.git_executable),
    )
    runlog = RunLog(verbose=invocation.verbose)
    outcome = run_pipeline(ctx, runlog)
    return finalize_run(invocation, ctx, runlog, outcome)


def finalize_run(
    invocation: Invocation,
    ctx: SetupContext,
    runlog: RunLog,
    outcome: RunOutcome,
) -> int:
    r"""Report the outcome of a run and return its exit code.

    Quiet failures write the buffered run log to the diagnostic file and
    point the user at it. Verbose runs never write the file; they print a
    per-step status table instead.

    Parameters
    ----------
    invocation : Invocation
        The parsed command line.
    ctx : SetupContext
        Context the pipeline ran with.
    runlog : RunLog
        The run log holding any buffered lines.
    outcome : RunOutcome
        Results of the executed steps.

    Returns
    -------
    int
        ``EXIT_SUCCESS`` if every step succeeded, else ``EXIT_FAILURE``.
    """
    if invocation.verbose:
        rprint(
            render_status_table(
                _, i18n.LANG, [step.name for step in NEW_PROJECT_STEPS], outcome.results
            )
        )
    if outcome.ok:
        ui_success(_("run_ok").format(name=ctx.project_name))
        return EXIT_SUCCESS

    if invocation.verbose:
        ui_error(_("run_failed"))
    else:
        error_path = ctx.workdir / ctx.settings.error_file_name
        buffered = runlog.lines
        try:
            runlog.flush_to(error_path)
        except OSError:
            logger.exception("Could not write %s", error_path)
            ui_error(_("run_failed"))
            for line in buffered:
                ui_log_line(line)
        else:
            ui_error(_("run_failed_see_file").format(path=error_path))

    if invocation.clean_on_failure and outcome.completed("create_directory"):
        remove_partial_project(ctx)
    return EXIT_FAILURE


def remove_partial_project(ctx: SetupContext) -> None:
    """Remove the project directory created by a failed run."""
    try:
        safe_rmtree(create_safe_path(ctx.project_dir, ctx.workdir))
    except OSError as error:
        ui_warning(_("cleanup_failed").format(path=ctx.project_dir, detail=error))
        return
    ui_info(_("cleanup_done").format(path=ctx.project_dir))


COMMANDS: dict[str, Callable[[Invocation], int]] = {
    "newproject": run_new_project,
}


def main(argv: Sequence[str] | None = None) -> int:
    r"""Run the CLI and return the process exit code.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        ``EXIT_SUCCESS`` (0) or ``EXIT_FAILURE`` (1).
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    i18n.set_language(os.environ.get("LANG_UI"))
    if wants_help(argv):
        ui_text(usage_text())
        return EXIT_SUCCESS

    try:
        invocation = parse_invocation(argv)
    except UsageError as error:
        ui_error(error.message)
        ui_text(_("usage").format(program=PROGRAM_NAME))
        return EXIT_FAILURE

    if invocation.lang:
        i18n.set_language(invocation.lang)
    configure_logging(invocation.log_level, invocation.verbose)

    supported = ", ".join(sorted(COMMANDS))
    if invocation.command is None:
        ui_error(_("missing_command").format(commands=supported))
        ui_text(_("usage").format(program=PROGRAM_NAME))
        return EXIT_FAILURE

    handler = COMMANDS.get(invocation.command.lower())
    if handler is None:
        ui_error(
            _("unknown_command").format(command=invocation.command, commands=supported)
        )
        ui_text(_("usage").format(program=PROGRAM_NAME))
        return EXIT_FAILURE
    return handler(invocation)


def entry_point() -> None:
    """Console-script entry point: run :func:`main` and exit with its code."""
    try:
        code = main()
    except KeyboardInterrupt:
        ui_warning(_("interrupted"))
        code = EXIT_FAILURE
    raise SystemExit(code)


__all__ = [
    "COMMANDS",
    "Invocation",
    "build_parser",
    "configure_logging",
    "entry_point",
    "finalize_run",
    "main",
    "parse_invocation",
    "run_new_project",
    "usage_text",
    "wants_help",
]
