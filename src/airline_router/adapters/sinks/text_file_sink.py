"""
Text result sinks - one line per route result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, List, Optional, Union

from src.airline_router.ports.result_sink import ResultSink
from src.airline_router.schemas.route import RouteResult

logger = logging.getLogger(__name__)

DEFAULT_FLUSH_INTERVAL = 1000


class TextFileResultSink(ResultSink):
    """
    Writes each result's line to a text file, in request order.

    The file is opened lazily on the first write (or explicitly with
    open()), flushed every `flush_interval` lines and on close.

    Attributes:
        _path: Output file path.
        _flush_interval: Number of lines between explicit flushes.
        _lines_written: Lines written since the file was opened.
    """

    def __init__(
        self,
        path: Union[str, Path],
        flush_interval: int = DEFAULT_FLUSH_INTERVAL,
    ) -> None:
        if flush_interval < 1:
            raise ValueError(f"flush_interval must be >= 1, got {flush_interval}")
        self._path = Path(path)
        self._flush_interval = flush_interval
        self._file: Optional[IO[str]] = None
        self._lines_written = 0

    def open(self) -> "TextFileResultSink":
        """Create (or truncate) the output file."""
        if self._file is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self._path, "w", encoding="utf-8")
            self._lines_written = 0
        return self

    def write(self, result: RouteResult) -> None:
        self.write_line(result.to_line())

    def write_line(self, line: str) -> None:
        """Write one raw line and flush periodically."""
        if self._file is None:
            self.open()
        self._file.write(line + "\n")
        self._lines_written += 1

        if self._lines_written % self._flush_interval == 0:
            self._file.flush()

    def close(self) -> None:
        """Flush and close the file; safe to call more than once."""
        if self._file is not None:
            self._file.flush()
            self._file.close()
            self._file = None
            logger.info("Wrote %d results to %s", self._lines_written, self._path)

    def __enter__(self) -> "TextFileResultSink":
        return self.open()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def lines_written(self) -> int:
        return self._lines_written


class MemoryResultSink(ResultSink):
    """Collects results and their lines in memory."""

    def __init__(self) -> None:
        self.results: List[RouteResult] = []

    def write(self, result: RouteResult) -> None:
        self.results.append(result)

    @property
    def lines(self) -> List[str]:
        return [result.to_line() for result in self.results]
