"""SimulationState - the explicitly owned state every system receives."""
from __future__ import annotations

from dataclasses import dataclass, field

from ongrid.config import SimulationConfig
from ongrid.cursor import CursorState
from ongrid.grid import GridModel
from ongrid.ledger import ResourceLedger


@dataclass
class SimulationState:
    """Grid, ledger and cursor for one simulation.

    Systems mutate ``grid`` and ``ledger``. Input handlers touch only
    ``cursor``.
    """

    config: SimulationConfig
    grid: GridModel
    ledger: ResourceLedger = field(default_factory=ResourceLedger)
    cursor: CursorState = field(default_factory=CursorState)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> SimulationState:
        return cls(config=config, grid=GridModel(config.width, config.height))
