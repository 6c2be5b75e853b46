"""Clock sources that stopwatches and timers sample moments from."""

from __future__ import annotations

import datetime
from typing import Protocol, runtime_checkable

from lapwatch.types import Duration, Moment


@runtime_checkable
class Clock(Protocol):
    def now(self) -> Moment: ...


class SystemClock:
    """Wall clock in local time (timezone-aware)."""

    def now(self) -> Moment:
        return datetime.datetime.now().astimezone()


class ManualClock:
    """Clock that only moves when told to.

    Starts at ``start`` (default: the Unix epoch in UTC) and stays there
    until ``advance()`` or ``set()`` is called.
    """

    def __init__(self, start: Moment | None = None) -> None:
        if start is None:
            start = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
        self._start = start
        self._now = start

    @property
    def start(self) -> Moment:
        return self._start

    def now(self) -> Moment:
        return self._now

    def set(self, moment: Moment) -> None:
        self._now = moment

    def advance(self, delta: float | Duration) -> Moment:
        if not isinstance(delta, datetime.timedelta):
            delta = datetime.timedelta(seconds=delta)
        self._now = self._now + delta
        return self._now

    def at(self, seconds: float) -> Moment:
        """Moment ``seconds`` after the clock's start, without moving the clock."""
        return self._start + datetime.timedelta(seconds=seconds)

    def reset(self) -> None:
        self._now = self._start
