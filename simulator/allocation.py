from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Iterable

from simulator.config import ALLOCATION_TOTAL
from simulator.enums import AssetClass
from simulator.normalizer import Normalizer


@dataclass
class AllocationVector:
    """
    Four integer percentages that always sum to 100.

    Owned by exactly one comparison slot.  Every construction path is
    validated; after that the only mutation path is :meth:`edit`, which
    re-normalises the other three entries through :class:`Normalizer`.

    Raises
    ------
    ValueError
        If the entries are not four whole numbers in [0, 100] summing to 100.
    """
    cash: int = 100
    index_fund: int = 0
    real_estate: int = 0
    active: int = 0

    def __post_init__(self):
        for f in fields(self):
            setattr(self, f.name, self._whole_percent(getattr(self, f.name)))
        if self.total() != ALLOCATION_TOTAL:
            raise ValueError(f"Allocation must sum to 100 (got {self.total()}).")

    @staticmethod
    def _whole_percent(value) -> int:
        try:
            is_whole = not isinstance(value, bool) and int(value) == value
        except (TypeError, ValueError, OverflowError):
            is_whole = False
        if not is_whole:
            raise ValueError(f"Allocation values must be whole numbers (got {value!r}).")
        if value < 0 or value > ALLOCATION_TOTAL:
            raise ValueError(f"Allocation values must be in [0, 100] (got {value}).")
        return int(value)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "AllocationVector":
        """
        Build a vector from four values in canonical order
        (cash, index fund, real estate, active).

        Raises
        ------
        ValueError
            If there are not exactly four non-negative integers summing to 100.
        """
        items = list(values)
        if len(items) != len(AssetClass):
            raise ValueError(
                f"An allocation needs {len(AssetClass)} values, got {len(items)}."
            )
        return cls(*items)

    def get(self, asset: AssetClass) -> int:
        return getattr(self, asset.value)

    def edit(self, asset: AssetClass, value: int) -> "AllocationVector":
        """Set *asset* to *value* (clamped) and rebalance the rest in place."""
        values = self.as_dict()
        values[asset] = int(value)
        for a, v in Normalizer.rebalance(values, asset).items():
            setattr(self, a.value, v)
        return self

    def as_dict(self) -> Dict[AssetClass, int]:
        return {asset: self.get(asset) for asset in AssetClass}

    def shares(self) -> list:
        """Values in canonical order."""
        return [self.get(asset) for asset in AssetClass]

    def total(self) -> int:
        return sum(self.shares())

    def copy(self) -> "AllocationVector":
        return AllocationVector(*self.shares())

    def __str__(self) -> str:
        return "/".join(str(v) for v in self.shares())
