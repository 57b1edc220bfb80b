"""Logging setup for the po-ai-translate command line."""

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path

DEBUG_LOG_FILE = "po-ai-translate-debug.log"


class _UtcMicrosecondFormatter(logging.Formatter):
    """Formats timestamps in UTC with 6-digit microseconds and a 'Z' suffix."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


class ConsoleFormatter(_UtcMicrosecondFormatter):
    """A formatter for console output that keeps user-facing lines short."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The po-ai-translate version, shown on every line.

        """
        super().__init__(
            fmt=f"%(asctime)s | po-ai-translate - {version} | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


class FileFormatter(_UtcMicrosecondFormatter):
    """A detailed formatter for debug log files."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__(
            fmt="%(asctime)s | %(name)-30s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


def setup_logging(version: str, *, debug: bool = False, log_dir: Path | None = None) -> None:
    """
    Configure the root logger.

    Console output goes to stdout at INFO (DEBUG with `debug`). With `debug`, a
    detailed log is also written to `po-ai-translate-debug.log` in `log_dir`
    (the working directory by default).

    Args:
        version: The application version, included in console logs.
        debug: If True, enables the debug log file and DEBUG console output.
        log_dir: Where to write the debug log file.

    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    # SDK transports are chatty at DEBUG
    for noisy in ("httpx", "httpcore", "openai", "anthropic", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if debug:
        log_file_path = (log_dir or Path.cwd()) / DEBUG_LOG_FILE
        try:
            file_handler = FileHandler(log_file_path, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            root_logger.addHandler(file_handler)
            logging.getLogger().info(
                "Debug mode enabled. Console level set to DEBUG. Detailed logs will be written to %s",
                log_file_path,
            )
        except OSError:
            logging.getLogger().exception("Failed to create debug log file. Continuing with console logging only.")
