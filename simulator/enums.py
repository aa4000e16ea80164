from enum import Enum


class AssetClass(Enum):
    """
    The four asset buckets of an allocation.

    Declaration order is the canonical iteration order: every tie-break
    in the normaliser walks the assets in this order.
    """
    CASH = "cash"
    INDEX_FUND = "index_fund"    # broad-market ETFs
    REAL_ESTATE = "real_estate"
    ACTIVE = "active"            # day trading, crypto, single stocks


class Slot(Enum):
    """The two allocations being compared."""
    CURRENT = "current"
    TARGET = "target"


class ScenarioCategory(Enum):
    """Feedback categories produced by the scenario classifier."""
    DANGER_ACTIVE = "DANGER_ACTIVE"
    LIQUIDITY_CRISIS = "LIQUIDITY_CRISIS"
    NO_REAL_ESTATE = "NO_REAL_ESTATE"
    CASH_DOMINANT = "CASH_DOMINANT"
    RE_DOMINANT = "RE_DOMINANT"
    ETF_DOMINANT = "ETF_DOMINANT"
    BALANCED = "BALANCED"
    DEFAULT = "DEFAULT"
