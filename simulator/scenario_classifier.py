"""
simulator/scenario_classifier.py
--------------------------------
Priority-ordered decision list: allocation → ScenarioCategory.

The rules overlap, so their order *is* the priority.  The first rule
whose predicate holds wins; DEFAULT is returned when none do.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from simulator.allocation import AllocationVector
from simulator.config import ACTIVE_MIN_EFFICIENT, ACTIVE_OVERTRADE_LIMIT
from simulator.constants import SCENARIO_TEXT
from simulator.enums import ScenarioCategory


# ---------------------------------------------------------------------------
# Boundary constants: strict / non-strict comparisons live in _RULES
# ---------------------------------------------------------------------------

class _Thresholds:
    MIN_CASH         = 15   # cash < this → liquidity crisis; >= this for balanced
    MIN_REAL_ESTATE  = 5    # real estate < this → no real assets
    MIN_CORE         = 40   # index fund + real estate >= this for balanced
    CASH_DOMINANT    = 50   # cash > this
    RE_DOMINANT      = 40   # real estate > this
    ETF_DOMINANT     = 50   # index fund > this


def _is_balanced(v: AllocationVector) -> bool:
    return (
        ACTIVE_MIN_EFFICIENT <= v.active <= ACTIVE_OVERTRADE_LIMIT
        and (v.index_fund + v.real_estate) >= _Thresholds.MIN_CORE
        and v.cash >= _Thresholds.MIN_CASH
    )


_RULES: Tuple[Tuple[Callable[[AllocationVector], bool], ScenarioCategory], ...] = (
    (lambda v: v.active > ACTIVE_OVERTRADE_LIMIT,            ScenarioCategory.DANGER_ACTIVE),
    (lambda v: v.cash < _Thresholds.MIN_CASH,                ScenarioCategory.LIQUIDITY_CRISIS),
    (lambda v: v.real_estate < _Thresholds.MIN_REAL_ESTATE,  ScenarioCategory.NO_REAL_ESTATE),
    (_is_balanced,                                           ScenarioCategory.BALANCED),
    (lambda v: v.cash > _Thresholds.CASH_DOMINANT,           ScenarioCategory.CASH_DOMINANT),
    (lambda v: v.real_estate > _Thresholds.RE_DOMINANT,      ScenarioCategory.RE_DOMINANT),
    (lambda v: v.index_fund > _Thresholds.ETF_DOMINANT,      ScenarioCategory.ETF_DOMINANT),
)


class ScenarioClassifier:
    """Classify an allocation into exactly one :class:`ScenarioCategory`."""

    @staticmethod
    def classify(vector: AllocationVector) -> ScenarioCategory:
        for predicate, category in _RULES:
            if predicate(vector):
                return category
        return ScenarioCategory.DEFAULT

    @staticmethod
    def describe(category: ScenarioCategory) -> Dict:
        """Static title / bullet text for *category*."""
        return SCENARIO_TEXT[category]
