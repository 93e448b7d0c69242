"""Per-kind rate propagation rules.

Motors and producers read the rate of their left neighbour. Because cells
are visited in row-major order, that neighbour has already been updated in
the current tick, so a generator -> motor -> producer row settles within a
single tick.
"""
from __future__ import annotations

import logging
from typing import Callable

from ongrid.cursor import CursorState
from ongrid.grid import GridModel
from ongrid.types import Entity, EntityKind

logger = logging.getLogger(__name__)

MOTOR_EFFICIENCY = 0.5
PRODUCER_EFFICIENCY = 0.8

RateRule = Callable[[GridModel, int, int, Entity, CursorState], None]


def generator_rule(
    grid: GridModel, x: int, y: int, entity: Entity, cursor: CursorState
) -> None:
    """Run at full rate while the cursor holds the primary button over this cell."""
    entity.current_rate = 1.0 if cursor.is_over(x, y) and cursor.primary_down else 0.0


def make_driven_rule(source: EntityKind, efficiency: float) -> RateRule:
    """Return a rule that takes its rate from a left neighbour of kind *source*.

    The rate is reset to 0 first, so a missing or mismatched neighbour
    leaves the entity idle.
    """

    def driven_rule(
        grid: GridModel, x: int, y: int, entity: Entity, cursor: CursorState
    ) -> None:
        entity.current_rate = 0.0
        left = grid.resolve(x - 1, y)
        if left is not None and left.kind == source:
            entity.current_rate = left.current_rate * efficiency

    return driven_rule


RATE_RULES: dict[EntityKind, RateRule] = {
    EntityKind.GENERATOR: generator_rule,
    EntityKind.MOTOR: make_driven_rule(EntityKind.GENERATOR, MOTOR_EFFICIENCY),
    EntityKind.PRODUCER: make_driven_rule(EntityKind.MOTOR, PRODUCER_EFFICIENCY),
}


def apply_rate_rule(
    grid: GridModel, x: int, y: int, entity: Entity, cursor: CursorState
) -> bool:
    """Recompute ``entity.current_rate``. Returns False for an unknown kind."""
    rule = RATE_RULES.get(entity.kind)
    if rule is None:
        logger.error("unknown entity kind %r at (%d, %d)", entity.kind, x, y)
        return False
    rule(grid, x, y, entity, cursor)
    return True
