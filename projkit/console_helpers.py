"""Rich integration for terminal output.

This module owns the single Rich ``Console`` used by the CLI and re-exports
the Rich types the rest of the package renders with. No other module should
create its own console.

Canonical Usage
---------------
>>> from projkit.console_helpers import rprint
>>> rprint("Hello Rich!")
Hello Rich!

References
----------
- Rich Docs: https://rich.readthedocs.io/en/latest/

"""

from __future__ import annotations

from typing import IO, Any

from rich.console import Console
from rich.table import Table

_RICH_CONSOLE: Console = Console(soft_wrap=True)


def rprint(
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
    file: IO[str] | None = None,
    markup: bool = True,
) -> None:
    r"""Print objects to the terminal through Rich.

    Parameters mirror Python's builtin print. When ``file`` is given a
    temporary console bound to that stream is used, so redirected output
    keeps Rich rendering.

    Parameters
    ----------
    *objects : Any
        Objects to be printed, separated by sep.
    sep : str, optional
        Separator between objects, default ' '.
    end : str, optional
        Line ending, default newline.
    file : IO[str], optional
        File-like object to print to, default the shared console's stream.
    markup : bool, optional
        Whether Rich console markup in strings is interpreted.

    Examples
    --------
    >>> import io
    >>> buf = io.StringIO()
    >>> rprint("FileOut", file=buf)
    >>> "FileOut" in buf.getvalue()
    True
    """
    console = _RICH_CONSOLE if file is None else Console(file=file, soft_wrap=True)
    console.print(*objects, sep=sep, end=end, markup=markup, highlight=False)


__all__ = [
    "_RICH_CONSOLE",
    "Console",
    "Table",
    "rprint",
]
