"""Progress callback infrastructure for long-running operations.

This module provides:
- ProgressPhase enum for tracking operation stages
- ProgressUpdate dataclass for structured progress information
- ProgressCallback type alias for progress handler functions

Usage:
    from utils.progress_callback import ProgressCallback, ProgressUpdate

    def my_progress_handler(update: ProgressUpdate) -> None:
        print(f"{update.operation}: {update.current}/{update.total} - {update.message}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class ProgressPhase(Enum):
    """Phases of an operation for progress tracking."""

    STARTING = "starting"
    FETCHING = "fetching"
    PROCESSING = "processing"
    SAVING = "saving"
    COMPLETE = "complete"
    ERROR = "error"


@dataclass
class ProgressUpdate:
    """Structured progress information.

    Attributes:
        operation: Name of the operation being performed.
        phase: Current phase of the operation.
        current: Current progress value (e.g., bytes downloaded).
        total: Total expected value (0 if indeterminate).
        message: Human-readable status message.
        detail: Optional additional detail string.
    """

    operation: str
    phase: ProgressPhase
    current: int
    total: int
    message: str
    detail: str | None = None

    @property
    def fraction(self) -> float | None:
        """Completed fraction in [0, 1], or None when the total is unknown."""
        if self.total <= 0:
            return None
        return min(self.current / self.total, 1.0)


# Type alias for progress callback functions
ProgressCallback = Callable[[ProgressUpdate], None]
