"""Shared types for the production grid."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Callable


class EntityKind(IntEnum):
    NONE = 0
    GENERATOR = 1
    MOTOR = 2
    PRODUCER = 3


@dataclass(slots=True)
class Entity:
    """One grid cell.

    Attributes:
        kind: What occupies the cell (``EntityKind.NONE`` for an empty cell).
        current_rate: Working fraction in [0, 1], recomputed every tick.
        cycle_progress: Position within the repeating work cycle, in [0, 1).
    """

    kind: EntityKind = EntityKind.NONE
    current_rate: float = 0.0
    cycle_progress: float = 0.0

    @property
    def occupied(self) -> bool:
        return self.kind != EntityKind.NONE


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float


class ConfigError(ValueError):
    """Raised when a simulation is configured with unusable dimensions or timing."""


if TYPE_CHECKING:
    from ongrid.state import SimulationState

System = Callable[["SimulationState", TickContext], None]
