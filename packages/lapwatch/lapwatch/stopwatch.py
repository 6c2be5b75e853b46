"""Stopwatch - count-up clock with lap splits.

Schematic of one session::

                     lap    lap          lap
    start       start |      |     start  |
      o--------x   o-----------x      o-----------x
             pause           pause            pause(end)

A lap is the running time between two consecutive splits. Time spent
paused never counts, so a lap that spans a pause is the sum of its
running pieces.
"""

from __future__ import annotations

from dataclasses import dataclass

from lapwatch.clock import Clock
from lapwatch.config import TrackerConfig
from lapwatch.tracker import IntervalTracker, SessionRecord
from lapwatch.types import ZERO, Duration, Moment, TrackerState


@dataclass(frozen=True, slots=True)
class StopwatchRecord(SessionRecord):
    """Returned by :meth:`Stopwatch.stop`. ``laps`` is parallel to ``lap_moments``."""

    total_elapsed: Duration
    lap_moments: tuple[Moment, ...]
    laps: tuple[Duration, ...]


class Stopwatch(IntervalTracker[StopwatchRecord]):
    """Created paused at zero; call ``resume()`` or ``pause_or_resume()`` to run."""

    def __init__(self, clock: Clock | None = None, config: TrackerConfig | None = None) -> None:
        super().__init__(clock, config)
        self._elapsed = ZERO
        self._lap_banked = ZERO
        self._lap_anchor: Moment | None = None
        self._lap_moments: list[Moment] = []
        self._laps: list[Duration] = []

    @property
    def laps(self) -> tuple[Duration, ...]:
        return tuple(self._laps)

    @property
    def lap_moments(self) -> tuple[Moment, ...]:
        return tuple(self._lap_moments)

    def read_at(self, moment: Moment) -> Duration:
        return self._elapsed + self._open_interval(moment)

    def read_lap(self) -> Duration:
        return self.read_lap_at(self._clock.now())

    def read_lap_at(self, moment: Moment) -> Duration:
        """Running time of the lap that is still open at ``moment``."""
        if self._state is TrackerState.RUNNING:
            return self._lap_banked + (moment - self._lap_anchor)
        return self._lap_banked

    def lap(self) -> Duration | None:
        return self.lap_at(self._clock.now())

    def lap_at(self, moment: Moment) -> Duration | None:
        """Split a lap. Returns its duration, or None while paused."""
        if self._state is TrackerState.IDLE:
            return None
        return self._split(moment)

    def _split(self, moment: Moment) -> Duration:
        lap = self.read_lap_at(moment)
        self._lap_moments.append(moment)
        self._laps.append(lap)
        self._lap_banked = ZERO
        self._lap_anchor = moment
        return lap

    def _on_resume(self, moment: Moment) -> None:
        self._lap_anchor = moment

    def _on_pause(self, moment: Moment, interval: Duration) -> None:
        self._elapsed += interval
        self._lap_banked += moment - self._lap_anchor
        self._lap_anchor = None

    def _build_record(self, end: Moment) -> StopwatchRecord:
        # Already paused here, so the final lap is whatever is banked.
        self._split(end)
        return StopwatchRecord(
            start_moments=tuple(self._start_moments),
            pause_moments=tuple(self._pause_moments),
            total_elapsed=self._elapsed,
            lap_moments=tuple(self._lap_moments),
            laps=tuple(self._laps),
        )

    def _reset_accumulators(self) -> None:
        self._elapsed = ZERO
        self._lap_banked = ZERO
        self._lap_anchor = None
        self._lap_moments = []
        self._laps = []
