"""Renders progress events and run summaries through logging."""

import logging
import os
from pathlib import Path

from .events import DoneEvent, ProgressEvent, StartEvent, TranslationEvent
from .translate import FileResult

logger = logging.getLogger(__name__)


def format_progress(file_path: Path, processed: int, total: int, cwd: Path | None = None) -> str:
    """Return '<relative path> – processed/total'."""
    rel = os.path.relpath(file_path, cwd or Path.cwd())
    return f"{rel} – {processed}/{total}"


class LoggingProgressSink:
    """A progress callback that logs start and completion at INFO and each entry at DEBUG."""

    def __init__(self, cwd: Path | None = None) -> None:
        """
        Initialize the sink.

        Args:
            cwd: The directory paths are shown relative to. Defaults to the working directory.

        """
        self.cwd = cwd

    def __call__(self, event: TranslationEvent) -> None:
        """Log one progress event."""
        if isinstance(event, StartEvent):
            logger.info("Translating %s", format_progress(event.file_path, 0, event.total, self.cwd))
        elif isinstance(event, ProgressEvent):
            logger.debug("Translated %s", format_progress(event.file_path, event.processed, event.total, self.cwd))
        elif isinstance(event, DoneEvent):
            status = "Dry run finished" if event.dry_run else "Wrote"
            logger.info("%s %s", status, format_progress(event.file_path, event.processed, event.total, self.cwd))


def log_summary(results: list[FileResult], total_run_time: float, *, dry_run: bool = False) -> None:
    """
    Log a summary of a run.

    Args:
        results: The per-file results.
        total_run_time: The elapsed wall-clock time in seconds.
        dry_run: Whether the run skipped writing files.

    """
    skipped = [r for r in results if r.skipped]
    translated = sum(r.processed for r in results)
    logger.info("%s", "=" * 40)
    logger.info(" po-ai-translate - Translation Summary%s", " (dry run)" if dry_run else "")
    logger.info("%s", "=" * 40)
    logger.info("- Total Run Time: %.2f seconds", total_run_time)
    logger.info("- Files Processed: %d", len(results) - len(skipped))
    logger.info("- Files Skipped: %d", len(skipped))
    logger.info("- Entries %s: %d", "That Would Be Translated" if dry_run else "Translated", translated)
