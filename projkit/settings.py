"""Runtime settings for the setup pipeline.

This module provides :class:`SetupSettings`, the boundary between the
process environment (plus an optional ``.projkit.env`` file in the working
directory) and the strongly-typed values the pipeline steps consume. It
contains no pipeline logic: only loading, defaults and validation.

Examples
--------
>>> from pathlib import Path
>>> from projkit.settings import SetupSettings
>>> s = SetupSettings.from_env(Path("."), environ={})
>>> s.branch, s.remote
('main', 'origin')
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from projkit import config as _config
from projkit.exceptions import ConfigurationError


@dataclass(frozen=True)
class SetupSettings:
    r"""Validated settings consumed by the setup pipeline.

    Attributes
    ----------
    template_path : Path
        Template document copied into the new project.
    ignore_pattern : str
        The single glob written to the ignore-rule file.
    branch : str
        Branch created by ``git init`` and pushed to the remote.
    remote : str
        Name of the remote the initial commit is pushed to.
    remote_url : str | None
        Optional URL template for adding the remote; ``{project}`` is
        replaced by the project name.
    commit_message : str
        Message of the initial commit.
    error_file_name : str
        Name of the diagnostic file written on quiet failures.
    git_executable : str
        Git executable to invoke.
    log_file : Path | None
        Optional developer log file.
    """

    template_path: Path = _config.DEFAULT_TEMPLATE_PATH
    ignore_pattern: str = ""
    branch: str = _config.DEFAULT_BRANCH
    remote: str = _config.DEFAULT_REMOTE
    remote_url: str | None = None
    commit_message: str = _config.DEFAULT_COMMIT_MESSAGE
    error_file_name: str = _config.ERROR_FILENAME
    git_executable: str = _config.DEFAULT_GIT_EXECUTABLE
    log_file: Path | None = None

    def __post_init__(self) -> None:
        if not self.template_path.suffix:
            raise ConfigurationError(
                f"Template '{self.template_path}' has no file extension",
                context={"template_path": str(self.template_path)},
            )
        for field_name in ("branch", "remote", "commit_message", "error_file_name"):
            if not str(getattr(self, field_name)).strip():
                raise ConfigurationError(
                    f"Setting '{field_name}' must not be empty",
                    context={"field": field_name},
                )
        if not self.ignore_pattern:
            object.__setattr__(
                self, "ignore_pattern", default_ignore_pattern(self.template_path)
            )

    @property
    def template_suffix(self) -> str:
        """Return the template's file extension, including the leading dot."""
        return self.template_path.suffix

    @property
    def large_file_pattern(self) -> str:
        """Return the glob registered for large-file tracking."""
        return f"*{self.template_suffix}"

    def remote_url_for(self, project_name: str) -> str | None:
        """Return the remote URL for ``project_name``, or None if not configured."""
        if not self.remote_url:
            return None
        return self.remote_url.replace(_config.REMOTE_URL_PLACEHOLDER, project_name)

    @classmethod
    def from_env(
        cls,
        workdir: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> SetupSettings:
        r"""Load settings from the environment and an optional settings file.

        When ``<workdir>/.projkit.env`` exists it is parsed with python-dotenv
        and its values take precedence over the process environment, so a
        project-local file gives a deterministic configuration.

        Parameters
        ----------
        workdir : Path | None
            Directory searched for the settings file. Defaults to the
            current working directory.
        environ : Mapping[str, str] | None
            Environment to read. Defaults to ``os.environ``.

        Returns
        -------
        SetupSettings
            The validated settings.

        Raises
        ------
        ConfigurationError
            If a value is invalid.
        """
        values: dict[str, str] = dict(os.environ if environ is None else environ)
        env_path = (workdir or Path.cwd()) / _config.ENV_FILENAME
        if env_path.is_file():
            values.update(
                {k: v for k, v in dotenv_values(env_path).items() if v is not None}
            )

        template = values.get("PROJKIT_TEMPLATE")
        log_file = values.get("PROJKIT_LOG_FILE")
        return cls(
            template_path=(
                Path(template).expanduser() if template else _config.DEFAULT_TEMPLATE_PATH
            ),
            ignore_pattern=values.get("PROJKIT_IGNORE_PATTERN", ""),
            branch=values.get("PROJKIT_BRANCH", _config.DEFAULT_BRANCH),
            remote=values.get("PROJKIT_REMOTE", _config.DEFAULT_REMOTE),
            remote_url=values.get("PROJKIT_REMOTE_URL") or None,
            commit_message=values.get(
                "PROJKIT_COMMIT_MESSAGE", _config.DEFAULT_COMMIT_MESSAGE
            ),
            error_file_name=values.get("PROJKIT_ERROR_FILE", _config.ERROR_FILENAME),
            git_executable=values.get(
                "PROJKIT_GIT", _config.DEFAULT_GIT_EXECUTABLE
            ),
            log_file=Path(log_file).expanduser() if log_file else None,
        )


def default_ignore_pattern(template_path: Path) -> str:
    """Return the backup-file glob for a template, e.g. ``*.blend1``.

    Examples
    --------
    >>> from pathlib import Path
    >>> default_ignore_pattern(Path("scene.blend"))
    '*.blend1'
    """
    return f"*{template_path.suffix}{_config.BACKUP_SUFFIX_MARKER}"


__all__ = ["SetupSettings", "default_ignore_pattern"]
