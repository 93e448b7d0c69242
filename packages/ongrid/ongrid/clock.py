"""FrameClock - turns host frame timestamps into tick deltas."""
from __future__ import annotations

from ongrid.types import TickContext


class FrameClock:
    """Tracks frame timestamps (milliseconds) and tick numbering.

    The first timestamp only seeds the clock and yields a delta of 0.
    """

    def __init__(self) -> None:
        self._last_timestamp: float | None = None
        self._tick_number = 0
        self._elapsed = 0.0
        self._dt = 0.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def dt(self) -> float:
        return self._dt

    def delta(self, timestamp: float) -> float:
        if self._last_timestamp is None:
            self._last_timestamp = timestamp
            return 0.0
        # Host clocks are not guaranteed monotonic; never run time backwards.
        dt = max(0.0, timestamp - self._last_timestamp)
        self._last_timestamp = timestamp
        return dt

    def advance(self, dt: float) -> int:
        self._tick_number += 1
        self._dt = dt
        self._elapsed += dt
        return self._tick_number

    def context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._elapsed,
        )
