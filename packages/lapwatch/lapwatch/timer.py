"""Timer - countdown clock from a fixed total duration."""

from __future__ import annotations

from dataclasses import dataclass

from lapwatch.clock import Clock
from lapwatch.config import TrackerConfig
from lapwatch.tracker import IntervalTracker, SessionRecord
from lapwatch.types import ZERO, Duration, Moment


@dataclass(frozen=True, slots=True)
class TimerRecord(SessionRecord):
    """Returned by :meth:`Timer.stop`.

    ``remaining`` is what was left when the timer stopped; it is negative
    when the timer ran past zero.
    """

    total_configured: Duration
    remaining: Duration

    @property
    def duration_expected(self) -> Duration:
        return self.total_configured

    @property
    def duration_actual(self) -> Duration:
        """Wall time from first start to stop, pauses included."""
        return self.end - self.start

    @property
    def overdue(self) -> bool:
        return self.remaining < ZERO


class Timer(IntervalTracker[TimerRecord]):
    """Countdown from ``total``. Created paused; reaching zero does not stop it.

    ``read()`` keeps counting below zero, callers treat a negative reading
    as overdue.
    """

    def __init__(
        self,
        total: Duration,
        clock: Clock | None = None,
        config: TrackerConfig | None = None,
    ) -> None:
        if total < ZERO:
            raise ValueError("total must not be negative")
        super().__init__(clock, config)
        self._total = total
        self._remaining = total

    @property
    def total(self) -> Duration:
        return self._total

    @property
    def expired(self) -> bool:
        return self.read() <= ZERO

    def read_at(self, moment: Moment) -> Duration:
        return self._remaining - self._open_interval(moment)

    def _on_pause(self, moment: Moment, interval: Duration) -> None:
        self._remaining -= interval

    def _build_record(self, end: Moment) -> TimerRecord:
        return TimerRecord(
            start_moments=tuple(self._start_moments),
            pause_moments=tuple(self._pause_moments),
            total_configured=self._total,
            remaining=self._remaining,
        )

    def _reset_accumulators(self) -> None:
        self._remaining = self._total
