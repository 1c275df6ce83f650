import logging
import sys
from typing import Optional


DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def parse_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` to its numeric value."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging for the command line tools:

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    so that rendered reports on stdout can be piped while failures stay
    visible on the terminal.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)
