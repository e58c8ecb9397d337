"""Console logging utilities for the c8d disassembler.

Messages go to standard error so they never interleave with a listing
written to standard output. Also provides a tqdm progress wrapper for long
decode passes.
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
    """Levelled console logger with optional colors."""

    def __init__(
        self,
        name: str = "c8d",
        log_level: str = "WARNING",
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self.threshold = LEVELS.index(log_level.upper())
        self.stream = stream
        target = self.stream or sys.stderr
        self.use_colors = (
            use_colors and hasattr(target, "isatty") and target.isatty()
        )

    def _format_message(self, level: str, message: str) -> str:
        """Prefix with level and logger name, colored on a terminal."""
        level_str = f"[{level:>8s}]"
        if self.use_colors:
            level_str = f"{COLORS[level]}{level_str}{RESET}"
        return f"{level_str}[{self.name}] {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if LEVELS.index(level) >= self.threshold:
            print(self._format_message(level, message), file=self.stream or sys.stderr, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)


def with_progress(
    iterable: Iterable[T],
    total: Optional[int] = None,
    desc: Optional[str] = None,
    enabled: bool = True,
) -> Iterator[T]:
    """Wrap ``iterable`` in a tqdm bar on standard error."""
    if desc is None:
        desc = f"Decoding ({total:,} words)" if total is not None else "Decoding"
    return iter(tqdm(iterable, total=total, desc=desc, unit="word",
                     disable=not enabled, file=sys.stderr))
