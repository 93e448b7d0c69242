"""Simulation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from ongrid.types import ConfigError


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable construction-time settings.

    Attributes:
        width: Number of grid columns.
        height: Number of grid rows.
        reference_cycle_duration: Milliseconds for one full cycle at rate 1.
    """

    width: int = 10
    height: int = 10
    reference_cycle_duration: float = 1000.0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ConfigError(f"width must be > 0, got {self.width}")
        if self.height <= 0:
            raise ConfigError(f"height must be > 0, got {self.height}")
        if not self.reference_cycle_duration > 0:
            raise ConfigError(
                "reference_cycle_duration must be > 0, "
                f"got {self.reference_cycle_duration}"
            )
