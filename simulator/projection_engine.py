"""
simulator/projection_engine.py
------------------------------
Monthly-compounded wealth projection.

Design contract:
  - No metric computation (rates arrive already derived)
  - No allocation awareness
  - Fully deterministic and stateless (all methods are @staticmethod)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from simulator.config import GAP_HORIZON_YEARS, MONTHS_PER_YEAR, TIME_HORIZONS
from simulator.return_risk_model import Metrics, ReturnRiskModel

ProjectionSeries = List[Tuple[int, float]]


@dataclass(frozen=True)
class WealthGap:
    """
    Range of terminal outcomes of the target allocation versus the current
    one at ``horizon_years``.  ``minimum`` uses the worst-case drawdown rate,
    ``maximum`` the capped best-case rate.
    """
    minimum: float
    maximum: float
    horizon_years: int
    worst_case_rate: float
    best_case_rate: float


class ProjectionEngine:
    """
    Project principal plus monthly contributions forward in time.

    Future value with monthly compounding::

        r  = annual_rate / 100 / 12
        n  = years × 12
        FV = P·(1+r)^n + C·((1+r)^n − 1) / r

    A zero annual rate falls back to ``P + C·n``.
    """

    # ------------------------------------------------------------------ #
    #  Single projection
    # ------------------------------------------------------------------ #

    @staticmethod
    def future_value(
        principal: float,
        contribution: float,
        annual_rate_pct: float,
        years: int,
    ) -> float:
        """
        Terminal value after *years* of monthly compounding.

        Parameters
        ----------
        principal:
            Starting amount (>= 0).
        contribution:
            Amount added at the end of every month (>= 0).
        annual_rate_pct:
            Annual rate in percent, e.g. ``7.6``.  May be negative.
        years:
            Horizon in whole years.
        """
        months = years * MONTHS_PER_YEAR
        if annual_rate_pct == 0:
            return principal + contribution * months

        r_monthly = annual_rate_pct / 100.0 / MONTHS_PER_YEAR
        growth = (1 + r_monthly) ** months

        fv_principal = principal * growth
        fv_contributions = contribution * ((growth - 1) / r_monthly)
        return fv_principal + fv_contributions

    # ------------------------------------------------------------------ #
    #  Series
    # ------------------------------------------------------------------ #

    @staticmethod
    def project_series(
        principal: float,
        contribution: float,
        annual_rate_pct: float,
        horizons: Sequence[int] = TIME_HORIZONS,
    ) -> ProjectionSeries:
        """``[(years, value), ...]`` for every horizon, ascending."""
        return [
            (years, ProjectionEngine.future_value(principal, contribution, annual_rate_pct, years))
            for years in sorted(horizons)
        ]

    @staticmethod
    def project_frame(
        principal: float,
        contribution: float,
        current_rate: float,
        target_rate: float,
        inflation_rate: float,
        horizons: Sequence[int] = TIME_HORIZONS,
    ) -> pd.DataFrame:
        """
        Tabular form of the three series for charting and reporting.

        Returns
        -------
        pd.DataFrame
            Indexed by ``years`` with columns ``inflation``, ``current``,
            ``target`` and ``gap`` (``target - current``).
        """
        return ProjectionEngine.series_frame(
            inflation=ProjectionEngine.project_series(
                principal, contribution, inflation_rate, horizons),
            current=ProjectionEngine.project_series(
                principal, contribution, current_rate, horizons),
            target=ProjectionEngine.project_series(
                principal, contribution, target_rate, horizons),
        )

    @staticmethod
    def series_frame(
        inflation: ProjectionSeries,
        current: ProjectionSeries,
        target: ProjectionSeries,
    ) -> pd.DataFrame:
        """Join three already-projected series on their horizon."""
        frame = pd.DataFrame(
            {
                "inflation": dict(inflation),
                "current":   dict(current),
                "target":    dict(target),
            }
        )
        frame.index.name = "years"
        frame = frame.sort_index()
        frame["gap"] = frame["target"] - frame["current"]
        return frame

    # ------------------------------------------------------------------ #
    #  Wealth gap
    # ------------------------------------------------------------------ #

    @staticmethod
    def wealth_gap(
        principal: float,
        contribution: float,
        current_rate: float,
        target_metrics: Metrics,
        horizon_years: Optional[int] = None,
    ) -> WealthGap:
        """
        Best / worst terminal wealth of the target allocation minus the
        current allocation's terminal wealth at the same horizon.
        """
        horizon = horizon_years if horizon_years is not None else GAP_HORIZON_YEARS

        baseline = ProjectionEngine.future_value(principal, contribution, current_rate, horizon)
        worst_rate = target_metrics.worst_case_drawdown
        best_rate = ReturnRiskModel.long_term_best_rate(target_metrics)

        worst = ProjectionEngine.future_value(principal, contribution, worst_rate, horizon)
        best = ProjectionEngine.future_value(principal, contribution, best_rate, horizon)

        return WealthGap(
            minimum=worst - baseline,
            maximum=best - baseline,
            horizon_years=horizon,
            worst_case_rate=worst_rate,
            best_case_rate=best_rate,
        )
