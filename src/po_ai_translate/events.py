"""Progress events emitted while a catalog is translated."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True)
class StartEvent:
    """Emitted once per file, before the first entry is translated."""

    file_path: Path
    total: int
    type: Literal["start"] = "start"


@dataclass(frozen=True)
class ProgressEvent:
    """Emitted after each entry is translated."""

    file_path: Path
    processed: int
    total: int
    type: Literal["progress"] = "progress"


@dataclass(frozen=True)
class DoneEvent:
    """Emitted once per file, after the catalog is written (or the write is skipped)."""

    file_path: Path
    processed: int
    total: int
    dry_run: bool
    type: Literal["done"] = "done"


TranslationEvent = StartEvent | ProgressEvent | DoneEvent
ProgressSink = Callable[[TranslationEvent], None]
