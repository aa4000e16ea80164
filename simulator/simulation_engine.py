"""
simulator/simulation_engine.py
------------------------------
One full recomputation pass over a ComparisonSession.

Flow::

    ComparisonSession (already normalised by its edits)
      → ReturnRiskModel   metrics for current and target
      → ProjectionEngine  current / target / inflation series + wealth gap
      → ScenarioClassifier category of the target allocation
      → SimulationResult

The pass reads the session and never writes to it, so re-running on an
unchanged session yields an equal result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from simulator.allocation import AllocationVector
from simulator.assumptions import MarketAssumptions
from simulator.config import ACTIVE_OVERTRADE_LIMIT, GAP_HORIZON_YEARS, TIME_HORIZONS
from simulator.enums import ScenarioCategory
from simulator.projection_engine import ProjectionEngine, ProjectionSeries, WealthGap
from simulator.return_risk_model import Metrics, ReturnRiskModel
from simulator.scenario_classifier import ScenarioClassifier
from simulator.session_context import ComparisonSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Everything the presentation layer needs after one edit."""
    current: AllocationVector
    target: AllocationVector
    current_metrics: Metrics
    target_metrics: Metrics
    current_series: ProjectionSeries
    target_series: ProjectionSeries
    inflation_series: ProjectionSeries
    wealth_gap: WealthGap
    scenario: ScenarioCategory
    active_warning: bool

    def to_frame(self) -> pd.DataFrame:
        """The three series side by side, indexed by ``years``."""
        return ProjectionEngine.series_frame(
            self.inflation_series, self.current_series, self.target_series
        )


class SimulationEngine:
    """
    Runs the metrics → projection → classification pipeline.

    Holds only the read-only market assumptions; all per-comparison state
    lives in the :class:`ComparisonSession` passed to :meth:`run`.
    """

    def __init__(
        self,
        assumptions: Optional[MarketAssumptions] = None,
        horizons: Sequence[int] = TIME_HORIZONS,
        gap_horizon: int = GAP_HORIZON_YEARS,
    ):
        self.assumptions = assumptions or MarketAssumptions()
        self.horizons = sorted(horizons)
        self.gap_horizon = gap_horizon

    def run(self, session: ComparisonSession) -> SimulationResult:
        """Recompute every derived figure for *session*."""
        principal = session.initial_capital
        contribution = session.monthly_contribution

        current_metrics = ReturnRiskModel.compute(session.current, self.assumptions)
        target_metrics = ReturnRiskModel.compute(session.target, self.assumptions)

        current_series = ProjectionEngine.project_series(
            principal, contribution, current_metrics.expected_return, self.horizons
        )
        target_series = ProjectionEngine.project_series(
            principal, contribution, target_metrics.expected_return, self.horizons
        )
        inflation_series = ProjectionEngine.project_series(
            principal, contribution, session.inflation_rate, self.horizons
        )

        gap = ProjectionEngine.wealth_gap(
            principal,
            contribution,
            current_metrics.expected_return,
            target_metrics,
            self.gap_horizon,
        )
        scenario = ScenarioClassifier.classify(session.target)

        logger.debug(
            "Simulation pass: current=%s (%.2f%%) target=%s (%.2f%%) scenario=%s",
            session.current, current_metrics.expected_return,
            session.target, target_metrics.expected_return,
            scenario.value,
        )

        return SimulationResult(
            current=session.current.copy(),
            target=session.target.copy(),
            current_metrics=current_metrics,
            target_metrics=target_metrics,
            current_series=current_series,
            target_series=target_series,
            inflation_series=inflation_series,
            wealth_gap=gap,
            scenario=scenario,
            active_warning=session.target.active > ACTIVE_OVERTRADE_LIMIT,
        )
