from dataclasses import dataclass, field

from simulator.allocation import AllocationVector
from simulator.config import (
    DEFAULT_INFLATION_RATE,
    DEFAULT_INITIAL_CAPITAL,
    DEFAULT_MONTHLY_CONTRIBUTION,
)
from simulator.enums import AssetClass, Slot
from simulator.inflation import InflationEstimator


@dataclass
class ComparisonSession:
    """
    Holds everything a single comparison needs between edits.
    Owns the two allocations exclusively; the engine only reads them.
    """
    current: AllocationVector = field(default_factory=AllocationVector)
    target: AllocationVector = field(default_factory=AllocationVector)

    # User inputs
    initial_capital: float = DEFAULT_INITIAL_CAPITAL
    monthly_contribution: float = DEFAULT_MONTHLY_CONTRIBUTION
    inflation_rate: float = DEFAULT_INFLATION_RATE

    def vector(self, slot: Slot) -> AllocationVector:
        return self.current if slot is Slot.CURRENT else self.target

    def edit(self, slot: Slot, asset: AssetClass, value: int) -> AllocationVector:
        """Apply one slider edit and return the re-normalised vector."""
        return self.vector(slot).edit(asset, value)

    def set_capital(self, amount: float):
        if amount < 0:
            raise ValueError(f"Initial capital cannot be negative (got {amount}).")
        self.initial_capital = float(amount)

    def set_contribution(self, amount: float):
        if amount < 0:
            raise ValueError(f"Monthly contribution cannot be negative (got {amount}).")
        self.monthly_contribution = float(amount)

    def update_inflation(self, price_old: float, price_now: float) -> float:
        """Re-estimate inflation from two prices and store it."""
        self.inflation_rate = InflationEstimator.estimate(price_old, price_now)
        return self.inflation_rate

    def reset(self):
        """Reset the session to its initial state."""
        self.__init__()
