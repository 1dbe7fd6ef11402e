"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses used by the setup pipeline to represent its failure
modes (usage, pre-existing target, missing dependency, external tool
failure and configuration). Every error is user-visible; none is retried.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'USAGE_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging. A ``"hint"`` entry is shown
        to the user below the message.
    transient : bool, optional
        Whether the error is temporary and may succeed on a later run.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    @property
    def hint(self) -> str | None:
        """Return the user guidance attached to the error, if any."""
        hint = self.context.get("hint")
        return str(hint) if hint else None

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class UsageError(AppError):
    """Raised when the command line is malformed."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("USAGE_ERROR", message, context=context, transient=False)


class TargetExistsError(AppError):
    """Raised when the project directory already exists."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "TARGET_EXISTS_ERROR", message, context=context, transient=False
        )


class FileSystemError(AppError):
    """Raised when a file-system operation in the project directory fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("FILESYSTEM_ERROR", message, context=context, transient=False)


class MissingDependencyError(AppError):
    """Raised when the template or a required external tool is unavailable."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "MISSING_DEPENDENCY_ERROR", message, context=context, transient=False
        )


class ExternalToolError(AppError):
    """Raised when an external version-control command fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "EXTERNAL_TOOL_ERROR", message, context=context, transient=False
        )


class RemoteNotConfiguredError(ExternalToolError):
    """Raised when pushing to a remote that the repository does not define."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message, context=context)
        self.code = "REMOTE_NOT_CONFIGURED_ERROR"
