"""Tracker configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackerConfig:
    """Immutable configuration shared by stopwatches and timers.

    Attributes:
        strict: Raise ``InvalidStateError`` on illegal transitions (resume
            while running, pause while idle). When False those calls are
            no-ops that log a warning.
    """

    strict: bool = True


DEFAULT_CONFIG = TrackerConfig()
