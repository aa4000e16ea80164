"""
tests/test_scenario_classifier.py
---------------------------------
Unit tests for ScenarioClassifier.

Coverage:
    One representative allocation per category
    Priority order between overlapping rules
    Strict / non-strict boundaries of every threshold
    describe() text registry
"""

import unittest

from simulator.allocation import AllocationVector
from simulator.enums import ScenarioCategory as S
from simulator.scenario_classifier import ScenarioClassifier


def _classify(*values) -> S:
    return ScenarioClassifier.classify(AllocationVector.from_values(values))


# ===========================================================================
# 1. One per category
# ===========================================================================

class TestCategories(unittest.TestCase):

    def test_danger_active(self):
        self.assertEqual(_classify(10, 30, 30, 30), S.DANGER_ACTIVE)

    def test_liquidity_crisis(self):
        self.assertEqual(_classify(10, 50, 30, 10), S.LIQUIDITY_CRISIS)

    def test_no_real_estate(self):
        self.assertEqual(_classify(20, 76, 4, 0), S.NO_REAL_ESTATE)

    def test_balanced(self):
        self.assertEqual(_classify(20, 40, 25, 15), S.BALANCED)

    def test_cash_dominant(self):
        self.assertEqual(_classify(60, 20, 20, 0), S.CASH_DOMINANT)

    def test_re_dominant(self):
        self.assertEqual(_classify(20, 20, 60, 0), S.RE_DOMINANT)

    def test_etf_dominant(self):
        self.assertEqual(_classify(20, 60, 20, 0), S.ETF_DOMINANT)

    def test_default(self):
        self.assertEqual(_classify(40, 30, 30, 0), S.DEFAULT)

    def test_default_vector_is_no_real_estate(self):
        self.assertEqual(ScenarioClassifier.classify(AllocationVector()), S.NO_REAL_ESTATE)


# ===========================================================================
# 2. Priority order
# ===========================================================================

class TestPriority(unittest.TestCase):

    def test_danger_beats_liquidity(self):
        # cash < 15 and active > 20 → the active rule is first
        self.assertEqual(_classify(5, 40, 30, 25), S.DANGER_ACTIVE)

    def test_liquidity_beats_otherwise_balanced(self):
        self.assertEqual(_classify(14, 46, 20, 20), S.LIQUIDITY_CRISIS)

    def test_liquidity_beats_no_real_estate(self):
        self.assertEqual(_classify(10, 90, 0, 0), S.LIQUIDITY_CRISIS)

    def test_no_real_estate_beats_balanced_shape(self):
        self.assertEqual(_classify(30, 56, 4, 10), S.NO_REAL_ESTATE)

    def test_balanced_beats_cash_dominant(self):
        self.assertEqual(_classify(55, 20, 20, 5), S.BALANCED)

    def test_balanced_beats_re_dominant(self):
        self.assertEqual(_classify(15, 5, 70, 10), S.BALANCED)

    def test_cash_dominant_checked_before_re_dominant(self):
        self.assertEqual(_classify(51, 0, 49, 0), S.CASH_DOMINANT)


# ===========================================================================
# 3. Boundaries
# ===========================================================================

class TestBoundaries(unittest.TestCase):

    def test_cash_15_is_not_liquidity_crisis_and_is_balanced(self):
        self.assertEqual(_classify(15, 45, 20, 20), S.BALANCED)

    def test_active_20_is_not_danger(self):
        self.assertEqual(_classify(15, 40, 25, 20), S.BALANCED)

    def test_active_21_is_danger(self):
        self.assertEqual(_classify(15, 40, 24, 21), S.DANGER_ACTIVE)

    def test_active_5_can_be_balanced(self):
        self.assertEqual(_classify(45, 25, 25, 5), S.BALANCED)

    def test_active_4_is_not_balanced(self):
        self.assertEqual(_classify(40, 30, 26, 4), S.DEFAULT)

    def test_real_estate_5_is_not_no_real_estate(self):
        self.assertEqual(_classify(40, 55, 5, 0), S.ETF_DOMINANT)

    def test_core_40_is_balanced(self):
        self.assertEqual(_classify(50, 20, 20, 10), S.BALANCED)

    def test_core_39_is_not_balanced(self):
        self.assertEqual(_classify(50, 20, 19, 11), S.DEFAULT)

    def test_cash_50_is_not_dominant(self):
        self.assertEqual(_classify(50, 25, 25, 0), S.DEFAULT)

    def test_cash_51_is_dominant(self):
        self.assertEqual(_classify(51, 20, 29, 0), S.CASH_DOMINANT)

    def test_real_estate_40_is_not_dominant(self):
        self.assertEqual(_classify(30, 30, 40, 0), S.DEFAULT)

    def test_real_estate_41_is_dominant(self):
        self.assertEqual(_classify(30, 29, 41, 0), S.RE_DOMINANT)

    def test_etf_50_is_not_dominant(self):
        self.assertEqual(_classify(30, 50, 20, 0), S.DEFAULT)

    def test_etf_51_is_dominant(self):
        self.assertEqual(_classify(30, 51, 19, 0), S.ETF_DOMINANT)


# ===========================================================================
# 4. describe()
# ===========================================================================

class TestDescribe(unittest.TestCase):

    def test_every_category_has_text(self):
        for category in S:
            text = ScenarioClassifier.describe(category)
            self.assertTrue(text["title"])
            self.assertGreater(len(text["points"]), 0)

    def test_warning_categories(self):
        self.assertTrue(ScenarioClassifier.describe(S.DANGER_ACTIVE)["warning"])
        self.assertFalse(ScenarioClassifier.describe(S.BALANCED)["warning"])


if __name__ == "__main__":
    unittest.main()
