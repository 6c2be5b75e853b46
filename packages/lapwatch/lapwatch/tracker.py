"""IntervalTracker - shared run-state machine behind Stopwatch and Timer."""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from lapwatch.clock import Clock, SystemClock
from lapwatch.config import DEFAULT_CONFIG, TrackerConfig
from lapwatch.types import (
    ZERO,
    Duration,
    EmptyHistoryError,
    InvalidStateError,
    Moment,
    TrackerState,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound="SessionRecord")


@dataclass(frozen=True, slots=True)
class SessionRecord:
    """History of one session, detached from its tracker on stop.

    ``start_moments`` holds one entry per resume (the first is the session
    start); ``pause_moments`` one entry per pause, the last being the
    session end.
    """

    start_moments: tuple[Moment, ...]
    pause_moments: tuple[Moment, ...]

    @property
    def start(self) -> Moment:
        if not self.start_moments:
            raise EmptyHistoryError("start_moments", "session was never started")
        return self.start_moments[0]

    @property
    def end(self) -> Moment:
        if not self.pause_moments:
            raise EmptyHistoryError("pause_moments", "session was never paused or stopped")
        return self.pause_moments[-1]


class IntervalTracker(abc.ABC, Generic[RecordT]):
    """Idle/running state machine that records start and pause moments.

    Subclasses own the accumulators and override the ``_on_*`` callbacks
    and ``_build_record``. Every clock-sampling operation has an ``*_at``
    twin taking an explicit moment.
    """

    def __init__(self, clock: Clock | None = None, config: TrackerConfig | None = None) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._config = config if config is not None else DEFAULT_CONFIG
        self._state = TrackerState.IDLE
        self._start_moments: list[Moment] = []
        self._pause_moments: list[Moment] = []
        self._stop_hooks: list[Callable[[RecordT], None]] = []

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> TrackerConfig:
        return self._config

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is TrackerState.RUNNING

    @property
    def start_moments(self) -> tuple[Moment, ...]:
        return tuple(self._start_moments)

    @property
    def pause_moments(self) -> tuple[Moment, ...]:
        return tuple(self._pause_moments)

    def on_stop(self, hook: Callable[[RecordT], None]) -> None:
        """Register a callable that receives every record returned by stop()."""
        self._stop_hooks.append(hook)

    # --- reading ---

    def read(self) -> Duration:
        return self.read_at(self._clock.now())

    @abc.abstractmethod
    def read_at(self, moment: Moment) -> Duration: ...

    def _last_start(self) -> Moment:
        if not self._start_moments:
            raise EmptyHistoryError(
                "start_moments", f"{type(self).__name__} has never been started"
            )
        return self._start_moments[-1]

    def _open_interval(self, moment: Moment) -> Duration:
        if self._state is TrackerState.RUNNING:
            return moment - self._last_start()
        return ZERO

    # --- transitions ---

    def _reject(self, operation: str) -> None:
        if self._config.strict:
            raise InvalidStateError(self._state, operation)
        logger.warning(
            "Ignoring %s on %s %s", operation, self._state.value, type(self).__name__
        )

    def resume(self) -> None:
        self.resume_at(self._clock.now())

    def resume_at(self, moment: Moment) -> None:
        if self._state is TrackerState.RUNNING:
            self._reject("resume")
            return
        self._start_moments.append(moment)
        self._state = TrackerState.RUNNING
        self._on_resume(moment)
        logger.debug("%s resumed at %s", type(self).__name__, moment)

    def pause(self) -> None:
        self.pause_at(self._clock.now())

    def pause_at(self, moment: Moment) -> None:
        last_start = self._last_start()
        if self._state is TrackerState.IDLE:
            self._reject("pause")
            return
        self._pause_moments.append(moment)
        self._state = TrackerState.IDLE
        self._on_pause(moment, moment - last_start)
        logger.debug("%s paused at %s", type(self).__name__, moment)

    def pause_or_resume(self) -> None:
        self.pause_or_resume_at(self._clock.now())

    def pause_or_resume_at(self, moment: Moment) -> None:
        if self._state is TrackerState.IDLE:
            self.resume_at(moment)
        else:
            self.pause_at(moment)

    def stop(self) -> RecordT:
        return self.stop_at(self._clock.now())

    def stop_at(self, moment: Moment) -> RecordT:
        """Close the session, hand its record over and reset the tracker.

        A running tracker is paused at ``moment`` first. A tracker that was
        already paused keeps its last pause as the session end. Hooks that
        raise are logged and skipped; the record is returned regardless.
        """
        self._last_start()
        if self._state is TrackerState.RUNNING:
            self.pause_at(moment)
        record = self._build_record(self._pause_moments[-1])
        self._start_moments = []
        self._pause_moments = []
        self._state = TrackerState.IDLE
        self._reset_accumulators()
        logger.debug("%s stopped at %s", type(self).__name__, moment)
        for hook in self._stop_hooks:
            try:
                hook(record)
            except Exception:
                logger.exception("on_stop hook %r failed", hook)
        return record

    # --- subclass callbacks ---

    def _on_resume(self, moment: Moment) -> None:
        pass

    def _on_pause(self, moment: Moment, interval: Duration) -> None:
        pass

    @abc.abstractmethod
    def _build_record(self, end: Moment) -> RecordT:
        """Freeze the paused session; ``end`` is its last pause moment."""

    def _reset_accumulators(self) -> None:
        pass
