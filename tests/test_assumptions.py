"""
tests/test_assumptions.py
-------------------------
Unit tests for the market assumption tables.

Coverage:
  - Shipped defaults
  - Table validation (drawdowns <= 0, confidence in [0, 100])
  - from_dict(): partial payloads, unknown / missing keys
  - load(): JSON file, corrupt JSON, missing file
"""

import json
import os
import tempfile
import unittest
from pathlib import Path

from simulator.assumptions import (
    MarketAssumptions,
    ProbabilityTable,
    RateTable,
    RiskTable,
)
from simulator.enums import AssetClass


# ---------------------------------------------------------------------------
# TestDefaults
# ---------------------------------------------------------------------------

class TestDefaults(unittest.TestCase):

    def setUp(self):
        self.a = MarketAssumptions()

    def test_default_rates(self):
        self.assertEqual(self.a.rates.cash, 1.5)
        self.assertEqual(self.a.rates.index_fund, 8.0)
        self.assertEqual(self.a.rates.real_estate, 5.5)
        self.assertEqual(self.a.rates.active_average, 15.0)
        self.assertEqual(self.a.rates.active_best, 120.0)
        self.assertEqual(self.a.rates.active_penalty, -50.0)

    def test_average_uses_active_average(self):
        self.assertEqual(self.a.rates.average(AssetClass.ACTIVE), 15.0)
        self.assertEqual(self.a.rates.average(AssetClass.INDEX_FUND), 8.0)

    def test_default_risk_all_non_positive(self):
        for asset in AssetClass:
            self.assertLessEqual(self.a.risk.get(asset), 0)

    def test_default_probability_in_range(self):
        for asset in AssetClass:
            self.assertGreaterEqual(self.a.probability.get(asset), 0)
            self.assertLessEqual(self.a.probability.get(asset), 100)

    def test_default_inflation(self):
        self.assertEqual(self.a.inflation_rate, 2.5)

    def test_tables_are_frozen(self):
        with self.assertRaises(Exception):
            self.a.rates.cash = 3.0


# ---------------------------------------------------------------------------
# TestValidation
# ---------------------------------------------------------------------------

class TestValidation(unittest.TestCase):

    def test_positive_drawdown_raises(self):
        with self.assertRaises(ValueError):
            RiskTable(cash=1.0, index_fund=-45, real_estate=-25, active=-100)

    def test_probability_above_100_raises(self):
        with self.assertRaises(ValueError):
            ProbabilityTable(cash=101, index_fund=95, real_estate=90, active=10)

    def test_probability_below_0_raises(self):
        with self.assertRaises(ValueError):
            ProbabilityTable(cash=99, index_fund=95, real_estate=90, active=-1)

    def test_rate_table_accepts_negative_rates(self):
        t = RateTable(cash=-1, index_fund=8, real_estate=5.5,
                      active_average=15, active_best=120, active_penalty=-50)
        self.assertEqual(t.cash, -1)


# ---------------------------------------------------------------------------
# TestFromDict
# ---------------------------------------------------------------------------

class TestFromDict(unittest.TestCase):

    def test_partial_payload_keeps_other_defaults(self):
        a = MarketAssumptions.from_dict({"probability": {
            "cash": 90, "index_fund": 80, "real_estate": 70, "active": 5,
        }})
        self.assertEqual(a.probability.cash, 90)
        self.assertEqual(a.rates.index_fund, 8.0)
        self.assertEqual(a.risk.index_fund, -45.0)

    def test_unknown_key_raises(self):
        with self.assertRaises(ValueError):
            MarketAssumptions.from_dict({"risk": {
                "cash": 0, "index_fund": -45, "real_estate": -25, "active": -100,
                "gold": -20,
            }})

    def test_missing_key_raises(self):
        with self.assertRaises(ValueError):
            MarketAssumptions.from_dict({"risk": {"cash": 0}})

    def test_to_dict_round_trip(self):
        a = MarketAssumptions()
        self.assertEqual(MarketAssumptions.from_dict(a.to_dict()), a)


# ---------------------------------------------------------------------------
# TestLoad
# ---------------------------------------------------------------------------

class TestLoad(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> Path:
        p = self.base / name
        p.write_text(text, encoding="utf-8")
        return p

    def test_load_json(self):
        p = self._write("a.json", json.dumps({
            "rates": {"cash": 2.0, "index_fund": 7.0, "real_estate": 4.0,
                      "active_average": 12.0, "active_best": 80.0,
                      "active_penalty": -40.0},
            "inflation_rate": 3.0,
        }))
        a = MarketAssumptions.load(p)
        self.assertEqual(a.rates.cash, 2.0)
        self.assertEqual(a.rates.active_penalty, -40.0)
        self.assertEqual(a.inflation_rate, 3.0)

    def test_load_accepts_str_path(self):
        p = self._write("b.json", "{}")
        self.assertEqual(MarketAssumptions.load(os.fspath(p)), MarketAssumptions())

    def test_corrupt_json_raises_value_error(self):
        p = self._write("bad.json", "{ not json")
        with self.assertRaises(ValueError):
            MarketAssumptions.load(p)

    def test_non_object_raises_value_error(self):
        p = self._write("list.json", "[1, 2, 3]")
        with self.assertRaises(ValueError):
            MarketAssumptions.load(p)

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            MarketAssumptions.load(self.base / "nope.json")

    def test_invalid_table_in_file_raises(self):
        p = self._write("risk.json", json.dumps({
            "risk": {"cash": 5, "index_fund": -45, "real_estate": -25, "active": -100},
        }))
        with self.assertRaises(ValueError):
            MarketAssumptions.load(p)


if __name__ == "__main__":
    unittest.main()
