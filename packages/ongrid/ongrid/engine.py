"""Engine - owns the simulation state and drives ticks from frame callbacks."""
from __future__ import annotations

import logging
from typing import Callable

from ongrid.clock import FrameClock
from ongrid.config import SimulationConfig
from ongrid.state import SimulationState
from ongrid.types import System
from ongrid.view import GridView, snapshot_view

logger = logging.getLogger(__name__)

TickHook = Callable[[GridView], None]


class Engine:
    def __init__(
        self,
        config: SimulationConfig | None = None,
        state: SimulationState | None = None,
    ) -> None:
        if state is None:
            state = SimulationState.from_config(config or SimulationConfig())
        elif config is not None and config != state.config:
            raise ValueError("config does not match the supplied state")
        self._state = state
        self._clock = FrameClock()
        self._systems: list[System] = []
        self._tick_hooks: list[TickHook] = []

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def config(self) -> SimulationConfig:
        return self._state.config

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_tick(self, hook: TickHook) -> None:
        """Register a read-only consumer called with a view after every tick."""
        self._tick_hooks.append(hook)

    def _tick(self, dt: float) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context()
        for system in self._systems:
            system(self._state, ctx)
        logger.debug(
            "tick %d dt=%.3f ledger=%.4f",
            ctx.tick_number, dt, self._state.ledger.total,
        )
        if self._tick_hooks:
            view = self.view()
            for hook in self._tick_hooks:
                hook(view)

    def step(self, dt: float) -> None:
        """Run one tick covering *dt* milliseconds."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._tick(dt)

    def frame(self, timestamp: float) -> float:
        """Frame callback entry point. Returns the delta the tick ran with."""
        dt = self._clock.delta(timestamp)
        self.step(dt)
        return dt

    def run(self, n: int, dt: float) -> None:
        """Run *n* ticks of *dt* milliseconds each."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        for _ in range(n):
            self._tick(dt)

    def view(self) -> GridView:
        return snapshot_view(self._state)
