"""
simulator/normalizer.py
-----------------------
Keeps a four-way integer split summing to exactly 100 after one entry is
edited.

Design contract:
  - Pure: the caller's mapping is never mutated, a new dict is returned
  - Integer arithmetic only in the output
  - No memory between calls beyond the values passed in
  - Fully deterministic and stateless (all methods are @staticmethod)
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Mapping

from simulator.config import ALLOCATION_TOTAL, NORMALIZER_MAX_PASSES
from simulator.enums import AssetClass

logger = logging.getLogger(__name__)


class Normalizer:
    """
    Redistribute the three non-edited entries of an allocation so the total
    returns to 100 while disturbing their relative proportions as little as
    possible.

    Steps (see :meth:`rebalance`):
        1. clamp the edited ("source") entry to [0, 100]
        2. even split when the others are all zero, else proportional rescale
        3. hand out / take back the rounding remainder one unit at a time
        4. bounded correction loop, then a final clamp
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def rebalance(
        values: Mapping[AssetClass, int],
        source: AssetClass,
        max_passes: int = NORMALIZER_MAX_PASSES,
    ) -> Dict[AssetClass, int]:
        """
        Return a new allocation in which *source* keeps its (clamped) value
        and the remaining entries sum to ``100 - source``.

        Parameters
        ----------
        values:
            Mapping with all four :class:`AssetClass` keys.  The *source*
            entry already holds the user's new value; it may be out of range.
        source:
            The entry the user just edited.
        max_passes:
            Upper bound on remainder-correction passes.

        Returns
        -------
        Dict[AssetClass, int]
            All four entries, in canonical order, non-negative integers.
        """
        state = {asset: int(values[asset]) for asset in AssetClass}
        state[source] = Normalizer._clamp(state[source])

        diff = ALLOCATION_TOTAL - state[source]
        others = [asset for asset in AssetClass if asset is not source]
        sum_others = sum(state[a] for a in others)

        if sum_others == 0:
            Normalizer._even_split(state, others, diff)
        else:
            ratio = diff / sum_others
            for a in others:
                state[a] = max(0, Normalizer._round_half_up(state[a] * ratio))

        remainder = diff - sum(state[a] for a in others)
        remainder = Normalizer._correct_remainder(state, others, remainder, max_passes)

        if remainder != 0:
            logger.warning(
                "Normalizer stopped with residual %d after %d passes (source=%s)",
                remainder, max_passes, source.value,
            )

        # Final safety clamp
        for a in others:
            state[a] = Normalizer._clamp(state[a])

        return state

    @staticmethod
    def is_normalized(values: Mapping[AssetClass, int]) -> bool:
        """True when every entry is an int in [0, 100] and the total is 100."""
        entries = [values[a] for a in AssetClass]
        return (
            all(isinstance(v, int) and 0 <= v <= ALLOCATION_TOTAL for v in entries)
            and sum(entries) == ALLOCATION_TOTAL
        )

    # ------------------------------------------------------------------ #
    #  Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _clamp(value: int) -> int:
        return max(0, min(ALLOCATION_TOTAL, value))

    @staticmethod
    def _round_half_up(x: float) -> int:
        """Nearest integer with .5 rounded up (``round()`` would round to even)."""
        return int(math.floor(x + 0.5))

    @staticmethod
    def _even_split(
        state: Dict[AssetClass, int],
        others: List[AssetClass],
        diff: int,
    ) -> None:
        """Spread *diff* evenly; the leftover goes to the earliest entries."""
        base, rem = divmod(diff, len(others))
        for a in others:
            state[a] = base
            if rem > 0:
                state[a] += 1
                rem -= 1

    @staticmethod
    def _correct_remainder(
        state: Dict[AssetClass, int],
        others: List[AssetClass],
        remainder: int,
        max_passes: int,
    ) -> int:
        """
        Absorb the rounding residual into *state* in place.

        A positive residual is added one unit per entry in canonical order;
        a negative one is taken one unit at a time from the largest positive
        entries first.  Returns whatever residual is left (0 in practice).
        """
        passes = 0
        while remainder != 0 and passes < max_passes:
            if remainder > 0:
                for a in others:
                    if remainder > 0:
                        state[a] += 1
                        remainder -= 1
            else:
                # sorted() is stable, so ties keep canonical order
                by_size = sorted(others, key=lambda a: state[a], reverse=True)
                subtracted = False
                for a in by_size:
                    if remainder < 0 and state[a] > 0:
                        state[a] -= 1
                        remainder += 1
                        subtracted = True
                if not subtracted:
                    break
            passes += 1
        return remainder
