"""lapwatch - Stopwatch and countdown timer primitives with session history."""

from lapwatch.clock import Clock, ManualClock, SystemClock
from lapwatch.config import TrackerConfig
from lapwatch.stopwatch import Stopwatch, StopwatchRecord
from lapwatch.timer import Timer, TimerRecord
from lapwatch.tracker import IntervalTracker, SessionRecord
from lapwatch.types import (
    Duration,
    EmptyHistoryError,
    InvalidStateError,
    Moment,
    TrackerError,
    TrackerState,
)

__all__ = [
    "Stopwatch",
    "StopwatchRecord",
    "Timer",
    "TimerRecord",
    "IntervalTracker",
    "SessionRecord",
    "Clock",
    "SystemClock",
    "ManualClock",
    "TrackerConfig",
    "TrackerState",
    "Moment",
    "Duration",
    "TrackerError",
    "EmptyHistoryError",
    "InvalidStateError",
]
