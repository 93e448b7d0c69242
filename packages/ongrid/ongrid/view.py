"""Read-only view of the simulation for renderers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ongrid.sequencer import occupied
from ongrid.types import EntityKind

if TYPE_CHECKING:
    from ongrid.state import SimulationState


@dataclass(frozen=True, slots=True)
class CellView:
    x: int
    y: int
    kind: EntityKind
    current_rate: float
    cycle_progress: float


@dataclass(frozen=True, slots=True)
class GridView:
    """Snapshot of post-tick state: dimensions, occupied cells and ledger total."""

    width: int
    height: int
    cells: tuple[CellView, ...]
    ledger_total: float


def snapshot_view(state: SimulationState) -> GridView:
    cells = tuple(
        CellView(
            x=x,
            y=y,
            kind=entity.kind,
            current_rate=entity.current_rate,
            cycle_progress=entity.cycle_progress,
        )
        for x, y, entity in occupied(state.grid)
    )
    return GridView(
        width=state.grid.width,
        height=state.grid.height,
        cells=cells,
        ledger_total=state.ledger.total,
    )
