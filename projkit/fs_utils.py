"""Filesystem utilities to validate and safely remove a partial project.

Used by ``--clean-on-failure``: after a failed run the directory created by
that run may be removed, and nothing else. Removal goes through an explicit
validation step that stamps the path as safe.

Functions
---------
- ``create_safe_path``: Validate and stamp a project directory as safe for removal.
- ``safe_rmtree``: Remove a validated directory tree.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import NewType

logger = logging.getLogger(__name__)

# NewType used as a static "seal" to indicate the path is validated for removal.
_ValidatedPath = NewType("_ValidatedPath", Path)


def create_safe_path(path_to_validate: Path, workdir: Path) -> _ValidatedPath:
    r"""Validate and stamp a project directory as safe for removal.

    Safety checks:
    - Never allows deletion of ``workdir`` itself.
    - The target must be a direct child of ``workdir``.
    - The target must be a real directory, not a symlink.

    Parameters
    ----------
    path_to_validate : Path
        The project directory to be validated.
    workdir : Path
        The working directory the project was created in.

    Returns
    -------
    _ValidatedPath
        The resolved path, stamped for use by :func:`safe_rmtree`.

    Raises
    ------
    PermissionError
        If any check fails.

    Examples
    --------
    >>> from pathlib import Path
    >>> create_safe_path(Path("/tmp"), Path("/tmp"))  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    PermissionError: SECURITY STOP: Attempt to delete the working directory was blocked.
    """
    root = Path(workdir).resolve()
    candidate = Path(path_to_validate)
    if candidate.is_symlink():
        raise PermissionError(
            f"SECURITY STOP: '{candidate}' is a symbolic link and will not be removed."
        )
    target_path = candidate.resolve()

    if target_path == root:
        raise PermissionError(
            "SECURITY STOP: Attempt to delete the working directory was blocked."
        )
    if target_path.parent != root:
        raise PermissionError(
            f"SECURITY STOP: '{target_path}' is not a project directory inside '{root}'."
        )
    return _ValidatedPath(target_path)


def safe_rmtree(safe_path: _ValidatedPath) -> None:
    r"""Remove a directory tree previously validated by :func:`create_safe_path`.

    Logs at WARNING before and INFO after removal. A path that no longer
    exists is a no-op.

    Parameters
    ----------
    safe_path : _ValidatedPath
        The stamped target directory.
    """
    if safe_path.exists():
        logger.warning(f"Performing safe rmtree on: {safe_path}")
        shutil.rmtree(safe_path)
        logger.info(f"Removed directory: {safe_path}")
    else:
        logger.info(f"Path '{safe_path}' does not exist; nothing to remove.")


__all__ = ["create_safe_path", "safe_rmtree"]
