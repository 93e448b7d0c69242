"""Initial entity layouts and the default simulation setup."""
from __future__ import annotations

from ongrid.config import SimulationConfig
from ongrid.engine import Engine
from ongrid.grid import GridModel
from ongrid.systems import make_production_system
from ongrid.types import EntityKind

PRODUCTION_LINE = (EntityKind.GENERATOR, EntityKind.MOTOR, EntityKind.PRODUCER)


def place_production_line(grid: GridModel, x: int, y: int) -> None:
    """Place generator, motor and producer left to right starting at ``(x, y)``.

    Raises ValueError if the line does not fit on the grid.
    """
    last_x = x + len(PRODUCTION_LINE) - 1
    if not (grid.in_bounds(x, y) and grid.in_bounds(last_x, y)):
        raise ValueError(
            f"production line at ({x}, {y}) does not fit a "
            f"{grid.width}x{grid.height} grid"
        )
    for offset, kind in enumerate(PRODUCTION_LINE):
        grid.place(kind, x + offset, y)


def create_default_engine(config: SimulationConfig | None = None) -> Engine:
    """Build an engine with one production line on row 5 and the production system."""
    engine = Engine(config or SimulationConfig())
    row = min(5, engine.config.height - 1)
    place_production_line(engine.state.grid, 0, row)
    engine.add_system(make_production_system())
    return engine
