from __future__ import annotations

from simulator.config import INFLATION_SPAN_YEARS


class InflationEstimator:
    """
    Personal inflation rate from two prices of the same item.

    Given what something cost ``years`` ago and what it costs now, the
    compound annual growth rate is::

        rate = ((price_now / price_old) ** (1 / years) - 1) × 100
    """

    @staticmethod
    def estimate(
        price_old: float,
        price_now: float,
        years: int = INFLATION_SPAN_YEARS,
    ) -> float:
        """
        Annual inflation in percent.

        Raises
        ------
        ValueError
            If either price or *years* is not strictly positive.
        """
        if price_old <= 0 or price_now <= 0:
            raise ValueError(
                f"Prices must be positive numbers (got {price_old!r} and {price_now!r})."
            )
        if years <= 0:
            raise ValueError(f"Span in years must be positive (got {years!r}).")

        return ((price_now / price_old) ** (1 / years) - 1) * 100
