"""Global configuration constants for projkit.

Defines paths, file names and defaults used by the setup pipeline and CLI.
Values that users may override at runtime are resolved by
:mod:`projkit.settings`.
"""

from __future__ import annotations

from pathlib import Path

# Program
PROGRAM_NAME: str = "projkit"
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
TEMPLATE_DIR: Path = PACKAGE_ROOT / "templates"

# Template document copied into every new project
DEFAULT_TEMPLATE_PATH: Path = TEMPLATE_DIR / "template.blend"
# Backup files are named after the document suffix with a trailing digit
BACKUP_SUFFIX_MARKER: str = "1"

# Version control defaults
DEFAULT_GIT_EXECUTABLE: str = "git"
DEFAULT_BRANCH: str = "main"
DEFAULT_REMOTE: str = "origin"
DEFAULT_COMMIT_MESSAGE: str = "Initial commit"
IGNORE_FILENAME: str = ".gitignore"
ATTRIBUTES_FILENAME: str = ".gitattributes"
REMOTE_URL_PLACEHOLDER: str = "{project}"

# Runtime settings file, looked up in the working directory
ENV_FILENAME: str = ".projkit.env"

# Diagnostics
ERROR_FILENAME: str = "error.txt"
LOG_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "WARNING"

# Exit codes
EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1

# UI defaults
LANG: str = "en"
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "sv")
