import re
from typing import Optional, Tuple

from simulator.allocation import AllocationVector
from simulator.config import ALLOCATION_TOTAL
from simulator.enums import AssetClass, Slot


# ---------------------------------------------------------------------------
# ASSET_ALIASES: single source of truth for free-text → AssetClass mapping.
# ---------------------------------------------------------------------------
ASSET_ALIASES: dict[str, AssetClass] = {
    "cash":        AssetClass.CASH,
    "deposit":     AssetClass.CASH,
    "etf":         AssetClass.INDEX_FUND,
    "index":       AssetClass.INDEX_FUND,
    "index_fund":  AssetClass.INDEX_FUND,
    "re":          AssetClass.REAL_ESTATE,
    "property":    AssetClass.REAL_ESTATE,
    "real_estate": AssetClass.REAL_ESTATE,
    "active":      AssetClass.ACTIVE,
    "trading":     AssetClass.ACTIVE,
}

SLOT_ALIASES: dict[str, Slot] = {
    "a":       Slot.CURRENT,
    "current": Slot.CURRENT,
    "b":       Slot.TARGET,
    "target":  Slot.TARGET,
}

_AMOUNT_RE = re.compile(
    r"^[\$₹]?\s*((?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?)\s*(k|m|wan|萬)?$",
    re.IGNORECASE,
)
_SUFFIX_MULTIPLIER = {
    "":       1,
    "k":      1_000,
    "m":      1_000_000,
    "wan":    10_000,
    "萬":      10_000,
}
_EDIT_RE = re.compile(r"^\s*(\w+)\s*[:.]\s*(\w+)\s*=\s*(-?\d+)\s*$")


class InputParser:
    """
    Validates raw user input before it reaches the engine.

    The engine itself assumes clean input; every rejection happens here
    as a ``ValueError`` with a message suitable for showing to the user.
    """

    # ------------------------------------------------------------------ #
    #  Amounts
    # ------------------------------------------------------------------ #

    def parse_amount(self, text: str) -> float:
        """
        Parse a non-negative money amount (supports k / m / wan suffixes).

        ``"1,000,000"`` → 1000000.0, ``"50k"`` → 50000.0,
        ``"100wan"`` → 1000000.0
        """
        cleaned = str(text).strip()
        match = _AMOUNT_RE.match(cleaned)
        if not match:
            raise ValueError(f"Please enter a valid non-negative amount (got {text!r}).")
        raw = float(match.group(1).replace(",", ""))
        suffix = (match.group(2) or "").lower()
        return raw * _SUFFIX_MULTIPLIER[suffix]

    def parse_price(self, text: str) -> float:
        """A strictly positive price, as the inflation estimator requires."""
        price = self.parse_amount(text)
        if price <= 0:
            raise ValueError("Please enter a valid price greater than zero.")
        return price

    # ------------------------------------------------------------------ #
    #  Allocations
    # ------------------------------------------------------------------ #

    def parse_slider(self, text: str) -> int:
        """An integer slider position, clamped to [0, 100]."""
        try:
            value = int(str(text).strip())
        except ValueError:
            raise ValueError(f"Slider value must be a whole number (got {text!r}).") from None
        return max(0, min(ALLOCATION_TOTAL, value))

    def parse_allocation(self, text: str) -> AllocationVector:
        """
        Parse ``"cash/etf/re/active"`` (``/``, ``,`` or whitespace separated).

        Raises
        ------
        ValueError
            On the wrong number of parts, non-integers, or a total other than 100.
        """
        parts = [p for p in re.split(r"[/,\s]+", str(text).strip()) if p]
        try:
            values = [int(p) for p in parts]
        except ValueError:
            raise ValueError(
                f"Allocation must be four whole numbers like '20/40/20/20' (got {text!r})."
            ) from None
        return AllocationVector.from_values(values)

    def extract_asset(self, text: str) -> Optional[AssetClass]:
        return ASSET_ALIASES.get(str(text).strip().lower().replace(" ", "_"))

    def extract_slot(self, text: str) -> Optional[Slot]:
        return SLOT_ALIASES.get(str(text).strip().lower())

    def parse_edit(self, text: str) -> Tuple[Slot, AssetClass, int]:
        """
        Parse a single slider edit such as ``"target:cash=30"`` or ``"a.etf=50"``.
        """
        match = _EDIT_RE.match(str(text))
        if not match:
            raise ValueError(
                f"Edit must look like 'target:cash=30' (got {text!r})."
            )
        slot = self.extract_slot(match.group(1))
        if slot is None:
            raise ValueError(f"Unknown allocation {match.group(1)!r}; use current or target.")
        asset = self.extract_asset(match.group(2))
        if asset is None:
            raise ValueError(
                f"Unknown asset {match.group(2)!r}; use one of {sorted(ASSET_ALIASES)}."
            )
        return slot, asset, self.parse_slider(match.group(3))
