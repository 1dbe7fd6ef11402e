"""Version-control capability interface and its ``git`` CLI implementation.

The setup pipeline only talks to :class:`VersionControl`. :class:`GitCli`
implements it by shelling out to ``git`` and ``git lfs``; tests substitute
an in-memory fake. Commands run synchronously, without timeouts, from the
project directory.

Error Branches
--------------
- A missing or unrunnable ``git`` executable raises :class:`MissingDependencyError`.
- A missing ``git lfs`` extension raises :class:`MissingDependencyError`.
- Pushing to an undefined remote raises :class:`RemoteNotConfiguredError`.
- Any other non-zero exit code raises :class:`ExternalToolError` carrying the
  command, return code and captured output in its context.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from projkit.config import DEFAULT_GIT_EXECUTABLE
from projkit.exceptions import (
    ExternalToolError,
    MissingDependencyError,
    RemoteNotConfiguredError,
)
from projkit.i18n import _

logger = logging.getLogger(__name__)


class VersionControl(Protocol):
    """Operations the setup pipeline needs from a version-control system."""

    def init(self, path: Path, branch: str) -> None:
        """Create a repository in ``path`` whose initial branch is ``branch``."""
        ...

    def track_large_files(self, path: Path, pattern: str) -> None:
        """Register ``pattern`` for large-file tracking."""
        ...

    def add(self, path: Path, files: Sequence[str]) -> None:
        """Stage ``files`` (relative to ``path``)."""
        ...

    def commit(self, path: Path, message: str) -> None:
        """Commit the staged files."""
        ...

    def has_remote(self, path: Path, name: str) -> bool:
        """Return True if a remote called ``name`` is configured."""
        ...

    def add_remote(self, path: Path, name: str, url: str) -> None:
        """Configure remote ``name`` pointing at ``url``."""
        ...

    def push(self, path: Path, remote: str, branch: str) -> None:
        """Push ``branch`` to ``remote`` and set it as upstream."""
        ...


class GitCli:
    r"""``git`` command-line implementation of :class:`VersionControl`.

    Parameters
    ----------
    executable : str, optional
        Name or path of the git executable.

    Examples
    --------
    >>> from pathlib import Path
    >>> git = GitCli()
    >>> git.init(Path("Alpha"), "main")  # doctest: +SKIP
    """

    def __init__(self, executable: str = DEFAULT_GIT_EXECUTABLE) -> None:
        self.executable = executable

    def _run(self, args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
        command = [self.executable, *args]
        logger.debug("Running %s in %s", " ".join(command), cwd)
        try:
            result = subprocess.run(
                command,
                cwd=str(cwd),
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except FileNotFoundError as error:
            raise MissingDependencyError(
                _("git_missing").format(executable=self.executable),
                context={"command": command},
            ) from error
        except OSError as error:
            raise MissingDependencyError(
                _("git_unusable").format(
                    executable=self.executable, detail=error.strerror or error
                ),
                context={"command": command, "errno": error.errno},
            ) from error
        logger.debug("%s exited with %d", " ".join(command), result.returncode)
        return result

    def _check(
        self, args: Sequence[str], cwd: Path
    ) -> subprocess.CompletedProcess[str]:
        """Run a git command and raise :class:`ExternalToolError` on failure."""
        result = self._run(args, cwd)
        if result.returncode != 0:
            raise ExternalToolError(
                _("command_failed").format(
                    command=" ".join(["git", *args]),
                    code=result.returncode,
                    detail=_output_detail(result),
                ),
                context={
                    "command": [self.executable, *args],
                    "returncode": result.returncode,
                    "stdout": result.stdout,
                    "stderr": result.stderr,
                },
            )
        return result

    def init(self, path: Path, branch: str) -> None:
        self._check(["init", "-b", branch], path)

    def track_large_files(self, path: Path, pattern: str) -> None:
        probe = self._run(["lfs", "version"], path)
        if probe.returncode != 0:
            raise MissingDependencyError(
                _("lfs_missing").format(detail=_output_detail(probe)),
                context={"returncode": probe.returncode},
            )
        self._check(["lfs", "track", pattern], path)

    def add(self, path: Path, files: Sequence[str]) -> None:
        self._check(["add", "--", *files], path)

    def commit(self, path: Path, message: str) -> None:
        self._check(["commit", "-m", message], path)

    def has_remote(self, path: Path, name: str) -> bool:
        result = self._check(["remote"], path)
        return name in result.stdout.split()

    def add_remote(self, path: Path, name: str, url: str) -> None:
        self._check(["remote", "add", name, url], path)

    def push(self, path: Path, remote: str, branch: str) -> None:
        if not self.has_remote(path, remote):
            raise RemoteNotConfiguredError(
                _("remote_missing").format(remote=remote),
                context={"remote": remote},
            )
        self._check(["push", "-u", remote, branch], path)


def _output_detail(result: subprocess.CompletedProcess[str]) -> str:
    """Return a failed command's output (stderr preferred) on a single line."""
    text = (result.stderr or "").strip() or (result.stdout or "").strip()
    return " ".join(text.split()) or "no output"


__all__ = ["GitCli", "VersionControl"]
