"""ResourceLedger - global total credited by producers."""
from __future__ import annotations


class ResourceLedger:
    """Accumulated scalar resource output of the grid."""

    def __init__(self, total: float = 0.0) -> None:
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        self._total = total

    @property
    def total(self) -> float:
        return self._total

    def deposit(self, amount: float) -> float:
        """Add *amount* to the total. Returns the amount added."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self._total += amount
        return amount

    def credit(self, rate: float, elapsed: float, reference_cycle_duration: float) -> float:
        """Credit one producer's output for *elapsed* milliseconds at *rate*."""
        return self.deposit(rate * elapsed / reference_cycle_duration)
