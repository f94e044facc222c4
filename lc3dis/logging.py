"""Console logging utilities for lc3dis.

Messages go to stderr by default so they never interleave with a listing
written to stdout. Progress bars for long inputs use tqdm.
"""

import sys
from typing import Iterable, Iterator, Optional, TextIO, TypeVar

from tqdm import tqdm

T = TypeVar("T")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}
RESET = "\033[0m"


class ConsoleLogger:
    """Levelled console logger, colored when writing to a terminal."""

    def __init__(
        self,
        name: str = "lc3dis",
        log_level: str = "WARNING",
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.stream = stream if stream is not None else sys.stderr
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )

    def _should_log(self, level: str) -> bool:
        return LEVELS.index(level) >= LEVELS.index(self.log_level)

    def _format_message(self, level: str, message: str) -> str:
        level_str = f"[{level:>7s}]"
        if self.use_colors:
            level_str = f"{COLORS[level]}{level_str}{RESET}"
        return f"{level_str}[{self.name}] {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        level = level.upper()
        if self._should_log(level):
            print(self._format_message(level, message), file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)


def progress(
    iterable: Iterable[T],
    enabled: bool = True,
    desc: str = None,
    **kwargs,
) -> Iterator[T]:
    """Wrap an iterable in a tqdm bar on stderr, or return it unchanged."""
    if not enabled:
        return iter(iterable)

    kwargs.setdefault("file", sys.stderr)
    kwargs.setdefault("unit", "line")
    return iter(tqdm(iterable, desc=desc or "Reading", **kwargs))
