"""
simulator/config.py
-------------------
Shared financial configuration constants.

Keeping these separate from simulator/constants.py (which holds display
text) gives a clean boundary: this file owns the tunable financial
parameters.  The rate / risk / probability tables below are only the
shipped defaults; ``MarketAssumptions.load()`` accepts a JSON file with the
same shape so a new set of assumptions can be versioned without a code
change.
"""

from __future__ import annotations

from typing import Dict, List


# ---------------------------------------------------------------------------
# Default market assumptions (annual percentages)
# ---------------------------------------------------------------------------

DEFAULT_RATES: Dict[str, float] = {
    "cash":           1.5,
    "index_fund":     8.0,
    "real_estate":    5.5,
    "active_average": 15.0,
    "active_best":    120.0,   # one good year, not a long-run rate
    "active_penalty": -50.0,   # overtrading
}

# Worst-case drawdowns.  Must all be <= 0.
DEFAULT_RISK: Dict[str, float] = {
    "cash":        0.0,
    "index_fund":  -45.0,
    "real_estate": -25.0,
    "active":      -100.0,
}

# Confidence scores in [0, 100].
DEFAULT_PROBABILITY: Dict[str, float] = {
    "cash":        99.0,
    "index_fund":  95.0,
    "real_estate": 90.0,
    "active":      10.0,
}

DEFAULT_INFLATION_RATE: float = 2.5


# ---------------------------------------------------------------------------
# Active-trading threshold overlay
# ---------------------------------------------------------------------------
# Below the minimum the active sleeve earns nothing; above the overtrade
# limit its average rate is replaced by the penalty rate.

ACTIVE_MIN_EFFICIENT: int = 5
ACTIVE_OVERTRADE_LIMIT: int = 20

# Contribution totals at or below this fall back to allocation weighting
# in the confidence score.
CONTRIBUTION_EPSILON: float = 0.001

# The blended best-case rate is capped before it is compounded over the
# gap horizon; 120% is a single-year spike.
BEST_CASE_RATE_CAP: float = 30.0


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

TIME_HORIZONS: List[int] = list(range(1, 21))
GAP_HORIZON_YEARS: int = 20
MONTHS_PER_YEAR: int = 12

DEFAULT_INITIAL_CAPITAL: float = 1_000_000.0
DEFAULT_MONTHLY_CONTRIBUTION: float = 20_000.0

# Price-history span used by the inflation estimator.
INFLATION_SPAN_YEARS: int = 10


# ---------------------------------------------------------------------------
# Normaliser
# ---------------------------------------------------------------------------

ALLOCATION_TOTAL: int = 100
NORMALIZER_MAX_PASSES: int = 100
