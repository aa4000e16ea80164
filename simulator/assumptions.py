"""
simulator/assumptions.py
------------------------
Read-only market assumption tables: annual return rates, worst-case
drawdowns, and confidence scores per asset class.

The tables are configuration, not runtime state.  They are built once
(from the defaults in ``simulator/config.py`` or from a JSON file) and
shared by every allocation.

JSON layout::

    {
        "rates":       {"cash": 1.5, "index_fund": 8.0, "real_estate": 5.5,
                        "active_average": 15.0, "active_best": 120.0,
                        "active_penalty": -50.0},
        "risk":        {"cash": 0, "index_fund": -45, "real_estate": -25,
                        "active": -100},
        "probability": {"cash": 99, "index_fund": 95, "real_estate": 90,
                        "active": 10},
        "inflation_rate": 2.5
    }

Any table omitted from the file falls back to the shipped default.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict

from simulator.config import (
    DEFAULT_INFLATION_RATE,
    DEFAULT_PROBABILITY,
    DEFAULT_RATES,
    DEFAULT_RISK,
)
from simulator.enums import AssetClass

logger = logging.getLogger(__name__)


def _build(cls, values: Dict[str, float]):
    """Construct a table dataclass from a plain dict, rejecting unknown keys."""
    names = {f.name for f in fields(cls)}
    unknown = set(values) - names
    if unknown:
        raise ValueError(
            f"Unknown keys for {cls.__name__}: {sorted(unknown)}. "
            f"Expected: {sorted(names)}"
        )
    missing = names - set(values)
    if missing:
        raise ValueError(f"Missing keys for {cls.__name__}: {sorted(missing)}")
    return cls(**{k: float(v) for k, v in values.items()})


@dataclass(frozen=True)
class RateTable:
    """Average annual return per asset, plus the active sleeve's overlays."""
    cash: float
    index_fund: float
    real_estate: float
    active_average: float
    active_best: float
    active_penalty: float

    def average(self, asset: AssetClass) -> float:
        """Average annual rate for *asset* (active uses ``active_average``)."""
        if asset is AssetClass.ACTIVE:
            return self.active_average
        return getattr(self, asset.value)


@dataclass(frozen=True)
class RiskTable:
    """Worst-case drawdown percentages.  Every value must be <= 0."""
    cash: float
    index_fund: float
    real_estate: float
    active: float

    def __post_init__(self):
        for asset in AssetClass:
            value = getattr(self, asset.value)
            if value > 0:
                raise ValueError(
                    f"Drawdown for {asset.value!r} must be <= 0 (got {value})."
                )

    def get(self, asset: AssetClass) -> float:
        return getattr(self, asset.value)


@dataclass(frozen=True)
class ProbabilityTable:
    """Confidence scores in [0, 100]."""
    cash: float
    index_fund: float
    real_estate: float
    active: float

    def __post_init__(self):
        for asset in AssetClass:
            value = getattr(self, asset.value)
            if not 0.0 <= value <= 100.0:
                raise ValueError(
                    f"Confidence for {asset.value!r} must be in [0, 100] (got {value})."
                )

    def get(self, asset: AssetClass) -> float:
        return getattr(self, asset.value)


@dataclass(frozen=True)
class MarketAssumptions:
    """Bundle of the three tables plus the default inflation rate."""
    rates: RateTable = field(default_factory=lambda: _build(RateTable, DEFAULT_RATES))
    risk: RiskTable = field(default_factory=lambda: _build(RiskTable, DEFAULT_RISK))
    probability: ProbabilityTable = field(
        default_factory=lambda: _build(ProbabilityTable, DEFAULT_PROBABILITY)
    )
    inflation_rate: float = DEFAULT_INFLATION_RATE

    @classmethod
    def from_dict(cls, payload: Dict) -> "MarketAssumptions":
        """
        Build assumptions from a plain dict (see module docstring).

        Raises
        ------
        ValueError
            On unknown / missing table keys or out-of-range values.
        """
        return cls(
            rates=_build(RateTable, payload.get("rates", DEFAULT_RATES)),
            risk=_build(RiskTable, payload.get("risk", DEFAULT_RISK)),
            probability=_build(
                ProbabilityTable, payload.get("probability", DEFAULT_PROBABILITY)
            ),
            inflation_rate=float(payload.get("inflation_rate", DEFAULT_INFLATION_RATE)),
        )

    @classmethod
    def load(cls, path: str | Path) -> "MarketAssumptions":
        """
        Load assumptions from a JSON file.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        ValueError
            If the file is not valid JSON or fails table validation.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Assumptions file not found: {p}")

        try:
            with open(p, encoding="utf-8") as fh:
                payload = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Assumptions file {p} is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise ValueError(f"Assumptions file {p} must contain a JSON object.")

        assumptions = cls.from_dict(payload)
        logger.info("Loaded market assumptions from %s", p)
        return assumptions

    def to_dict(self) -> Dict[str, object]:
        return {
            "rates":          {f.name: getattr(self.rates, f.name) for f in fields(self.rates)},
            "risk":           {f.name: getattr(self.risk, f.name) for f in fields(self.risk)},
            "probability":    {
                f.name: getattr(self.probability, f.name) for f in fields(self.probability)
            },
            "inflation_rate": self.inflation_rate,
        }
