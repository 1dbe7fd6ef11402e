"""Timestamped run log with verbose streaming and quiet buffering.

The mode is fixed when the log is created. In verbose mode each message is
printed as soon as it is recorded. In quiet mode messages are kept in
memory and only reach the disk through :meth:`RunLog.flush_to`, which the
CLI calls when a run fails.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from projkit.config import LOG_TIMESTAMP_FORMAT
from projkit.ui.basic import ui_log_line

logger = logging.getLogger(__name__)


class RunLog:
    r"""Ordered, timestamped log of the messages emitted during one run.

    Parameters
    ----------
    verbose : bool, optional
        Stream lines to the console instead of buffering them.
    clock : Callable[[], datetime], optional
        Source of timestamps; tests inject a fixed clock.
    echo : Callable[[str], None], optional
        Output function used in verbose mode.

    Examples
    --------
    >>> from datetime import datetime
    >>> log = RunLog(clock=lambda: datetime(2024, 1, 2, 3, 4, 5))
    >>> log.record("Created directory Alpha")
    '[2024-01-02 03:04:05] Created directory Alpha'
    >>> log.lines
    ('[2024-01-02 03:04:05] Created directory Alpha',)
    """

    def __init__(
        self,
        verbose: bool = False,
        clock: Callable[[], datetime] = datetime.now,
        echo: Callable[[str], None] = ui_log_line,
    ) -> None:
        self.verbose = verbose
        self._clock = clock
        self._echo = echo
        self._lines: list[str] = []

    @property
    def lines(self) -> tuple[str, ...]:
        """Return the buffered lines (always empty in verbose mode)."""
        return tuple(self._lines)

    def record(self, message: str) -> str:
        """Timestamp ``message`` and stream or buffer it; return the line."""
        line = f"[{self._clock().strftime(LOG_TIMESTAMP_FORMAT)}] {message}"
        if self.verbose:
            self._echo(line)
        else:
            self._lines.append(line)
        return line

    def flush_to(self, path: Path) -> Path:
        """Write the buffered lines to ``path``, one per line, and clear the buffer.

        Parameters
        ----------
        path : Path
            Destination of the diagnostic file; an existing file is replaced.

        Returns
        -------
        Path
            The path that was written.
        """
        text = "".join(f"{line}\n" for line in self._lines)
        path.write_text(text, encoding="utf-8")
        logger.debug("Wrote %d run-log lines to %s", len(self._lines), path)
        self._lines.clear()
        return path


__all__ = ["RunLog"]
