"""
simulator/return_risk_model.py
------------------------------
Pure transformation: allocation + market assumptions → Metrics.

Design contract:
  - No projection / compounding
  - No classification
  - Never mutates the allocation or the tables
  - Fully deterministic and stateless (all methods are @staticmethod)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from simulator.allocation import AllocationVector
from simulator.assumptions import MarketAssumptions
from simulator.config import (
    ACTIVE_MIN_EFFICIENT,
    ACTIVE_OVERTRADE_LIMIT,
    BEST_CASE_RATE_CAP,
    CONTRIBUTION_EPSILON,
)
from simulator.enums import AssetClass


@dataclass(frozen=True)
class Metrics:
    """Derived figures for one allocation (all annual percentages)."""
    expected_return: float
    worst_case_drawdown: float
    best_case_return: float
    confidence_score: float


class ReturnRiskModel:
    """
    Convert an :class:`AllocationVector` into :class:`Metrics`.

    ``expected_return``
        Share-weighted average rate, with a threshold overlay on the active
        sleeve: below 5% it earns nothing, above 20% it earns the penalty
        rate.
    ``worst_case_drawdown``
        Share-weighted drawdown; no overlay.
    ``best_case_return``
        As expected return, but the active sleeve earns its best-case rate.
    ``confidence_score``
        Each asset's confidence weighted by its share of the total return
        *contribution* rather than its share of the allocation, so a small
        sleeve that drives most of the return also drives the score.
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def compute(
        vector: AllocationVector,
        assumptions: Optional[MarketAssumptions] = None,
    ) -> Metrics:
        """Build the full :class:`Metrics` for *vector*."""
        assumptions = assumptions or MarketAssumptions()
        return Metrics(
            expected_return=ReturnRiskModel.expected_return(vector, assumptions),
            worst_case_drawdown=ReturnRiskModel.worst_case_drawdown(vector, assumptions),
            best_case_return=ReturnRiskModel.best_case_return(vector, assumptions),
            confidence_score=ReturnRiskModel.confidence_score(vector, assumptions),
        )

    # ------------------------------------------------------------------ #
    #  Individual metrics
    # ------------------------------------------------------------------ #

    @staticmethod
    def effective_active_rate(active: int, assumptions: MarketAssumptions) -> float:
        """
        Active-sleeve rate after the threshold overlay.

        ``active < 5``   → 0.0 (below minimum efficient size)
        ``active > 20``  → penalty rate (overtrading)
        otherwise        → average rate
        """
        if active < ACTIVE_MIN_EFFICIENT:
            return 0.0
        if active > ACTIVE_OVERTRADE_LIMIT:
            return assumptions.rates.active_penalty
        return assumptions.rates.active_average

    @staticmethod
    def expected_return(vector: AllocationVector, assumptions: MarketAssumptions) -> float:
        rates = ReturnRiskModel._base_rates(assumptions)
        rates[-1] = ReturnRiskModel.effective_active_rate(vector.active, assumptions)
        return ReturnRiskModel._weighted(vector, rates)

    @staticmethod
    def worst_case_drawdown(vector: AllocationVector, assumptions: MarketAssumptions) -> float:
        risk = [assumptions.risk.get(asset) for asset in AssetClass]
        return ReturnRiskModel._weighted(vector, risk)

    @staticmethod
    def best_case_return(vector: AllocationVector, assumptions: MarketAssumptions) -> float:
        rates = ReturnRiskModel._base_rates(assumptions)
        rates[-1] = assumptions.rates.active_best
        return ReturnRiskModel._weighted(vector, rates)

    @staticmethod
    def confidence_score(vector: AllocationVector, assumptions: MarketAssumptions) -> float:
        """
        Contribution-weighted confidence.

        ``contribution_i = share_i × average_rate_i``; the weight of asset
        *i* is ``contribution_i / Σ contribution``.  When the total is at or
        below ``CONTRIBUTION_EPSILON`` the weights fall back to plain
        allocation shares.
        """
        shares = np.asarray(vector.shares(), dtype=np.float64)
        contributions = shares * np.asarray(
            ReturnRiskModel._base_rates(assumptions), dtype=np.float64
        )
        total = float(contributions.sum())

        if total > CONTRIBUTION_EPSILON:
            weights = contributions / total
        else:
            weights = shares / 100.0

        probability = np.asarray(
            [assumptions.probability.get(asset) for asset in AssetClass],
            dtype=np.float64,
        )
        return float(np.dot(weights, probability))

    @staticmethod
    def long_term_best_rate(metrics: Metrics) -> float:
        """Best-case rate safe to compound over many years (capped at 30%)."""
        return min(metrics.best_case_return, BEST_CASE_RATE_CAP)

    # ------------------------------------------------------------------ #
    #  Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _base_rates(assumptions: MarketAssumptions) -> List[float]:
        """Average rates in canonical order (active = its average rate)."""
        return [assumptions.rates.average(asset) for asset in AssetClass]

    @staticmethod
    def _weighted(vector: AllocationVector, per_asset: List[float]) -> float:
        """Σ share_i × value_i / 100."""
        shares = np.asarray(vector.shares(), dtype=np.float64)
        return float(np.dot(shares, np.asarray(per_asset, dtype=np.float64)) / 100.0)
