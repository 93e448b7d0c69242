"""ongrid - A production chain simulated on a fixed 2D grid."""

from ongrid.clock import FrameClock
from ongrid.config import SimulationConfig
from ongrid.cursor import CursorState
from ongrid.engine import Engine
from ongrid.grid import GridModel
from ongrid.layout import create_default_engine, place_production_line
from ongrid.ledger import ResourceLedger
from ongrid.logging_config import setup_logging
from ongrid.sequencer import Sequencer, occupied, positions
from ongrid.state import SimulationState
from ongrid.systems import make_production_system
from ongrid.types import ConfigError, Entity, EntityKind, TickContext
from ongrid.view import CellView, GridView

__all__ = [
    "Engine",
    "SimulationConfig",
    "SimulationState",
    "GridModel",
    "Entity",
    "EntityKind",
    "CursorState",
    "ResourceLedger",
    "FrameClock",
    "TickContext",
    "ConfigError",
    "Sequencer",
    "positions",
    "occupied",
    "make_production_system",
    "place_production_line",
    "create_default_engine",
    "GridView",
    "CellView",
    "setup_logging",
]
