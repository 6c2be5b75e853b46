"""Shared type aliases, tracker states and errors."""

from __future__ import annotations

import datetime
import enum

Moment = datetime.datetime
Duration = datetime.timedelta

ZERO = datetime.timedelta(0)


class TrackerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class TrackerError(Exception):
    """Base class for stopwatch and timer failures."""


class EmptyHistoryError(TrackerError, LookupError):
    """Raised when an operation needs a recorded moment that does not exist yet."""

    def __init__(self, sequence: str, message: str) -> None:
        self.sequence = sequence
        super().__init__(message)


class InvalidStateError(TrackerError):
    """Raised on an illegal transition, e.g. resuming a running tracker."""

    def __init__(self, state: TrackerState, operation: str) -> None:
        self.state = state
        self.operation = operation
        super().__init__(f"cannot {operation} while {state.value}")
