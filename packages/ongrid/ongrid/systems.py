"""System factory for the production update pass."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ongrid.cycle import advance
from ongrid.rules import apply_rate_rule
from ongrid.sequencer import Sequencer, occupied
from ongrid.types import EntityKind, System

if TYPE_CHECKING:
    from ongrid.state import SimulationState
    from ongrid.types import TickContext


def make_production_system(sequencer: Sequencer = occupied) -> System:
    """Return a system that updates every occupied cell once per tick.

    For each cell, in *sequencer* order: the rate rule runs, producers
    credit the ledger, then cycle progress advances. Rate rules read the
    left neighbour, so the default row-major *sequencer* is what lets a
    whole chain settle in one tick.
    """

    def production_system(state: SimulationState, ctx: TickContext) -> None:
        grid = state.grid
        reference = state.config.reference_cycle_duration
        for x, y, entity in sequencer(grid):
            known = apply_rate_rule(grid, x, y, entity, state.cursor)
            if known and entity.kind == EntityKind.PRODUCER:
                state.ledger.credit(entity.current_rate, ctx.dt, reference)
            advance(entity, ctx.dt, reference)

    return production_system
