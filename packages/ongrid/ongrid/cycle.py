"""Cycle progress accumulation."""
from __future__ import annotations

import math

from ongrid.types import Entity


def wrap(progress: float) -> float:
    """Drop whole cycles, leaving progress in [0, 1)."""
    if progress >= 1:
        progress -= math.floor(progress)
    return progress


def advance(entity: Entity, elapsed: float, reference_cycle_duration: float) -> float:
    """Advance ``entity.cycle_progress`` by *elapsed* scaled by its current rate.

    Progress is wrapped before the increment, which also normalises values
    set from outside the tick, and once more afterwards so the stored value
    stays below 1. Returns the new progress.
    """
    progress = wrap(entity.cycle_progress)
    progress += elapsed / reference_cycle_duration * entity.current_rate
    entity.cycle_progress = wrap(progress)
    return entity.cycle_progress
