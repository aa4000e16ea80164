import unittest

from simulator.enums import AssetClass, Slot
from simulator.input_parser import InputParser


class TestInputParser(unittest.TestCase):
    def setUp(self):
        self.parser = InputParser()

    def test_amount_extraction(self):
        self.assertAlmostEqual(self.parser.parse_amount("1,000,000"), 1_000_000)
        self.assertAlmostEqual(self.parser.parse_amount("50k"), 50_000)
        self.assertAlmostEqual(self.parser.parse_amount("1.5m"), 1_500_000)
        self.assertAlmostEqual(self.parser.parse_amount("100wan"), 1_000_000)
        self.assertAlmostEqual(self.parser.parse_amount("2萬"), 20_000)
        self.assertAlmostEqual(self.parser.parse_amount("$20000"), 20_000)
        self.assertAlmostEqual(self.parser.parse_amount("0"), 0)

    def test_amount_rejects_bad_input(self):
        for text in ("-5", "abc", "", "12 apples"):
            with self.assertRaises(ValueError, msg=text):
                self.parser.parse_amount(text)

    def test_amount_rejects_malformed_thousands(self):
        for text in ("1,,0", ",100", "100,", "1,00", "12,3456", "1.", "1,000."):
            with self.assertRaises(ValueError, msg=text):
                self.parser.parse_amount(text)
        self.assertAlmostEqual(self.parser.parse_amount("12,345.5"), 12_345.5)
        self.assertAlmostEqual(self.parser.parse_amount("1000"), 1_000)

    def test_price_must_be_positive(self):
        self.assertEqual(self.parser.parse_price("45"), 45.0)
        with self.assertRaises(ValueError):
            self.parser.parse_price("0")

    def test_slider_is_clamped(self):
        self.assertEqual(self.parser.parse_slider("35"), 35)
        self.assertEqual(self.parser.parse_slider("140"), 100)
        self.assertEqual(self.parser.parse_slider("-3"), 0)
        with self.assertRaises(ValueError):
            self.parser.parse_slider("ten")

    def test_allocation_extraction(self):
        v = self.parser.parse_allocation("20/40/20/20")
        self.assertEqual(v.shares(), [20, 40, 20, 20])
        self.assertEqual(self.parser.parse_allocation("20, 40, 25, 15").shares(), [20, 40, 25, 15])
        self.assertEqual(self.parser.parse_allocation("100 0 0 0").shares(), [100, 0, 0, 0])

    def test_allocation_rejects_bad_input(self):
        for text in ("20/40/20", "20/40/20/30", "a/b/c/d", "20/40/20/20.5"):
            with self.assertRaises(ValueError, msg=text):
                self.parser.parse_allocation(text)

    def test_asset_and_slot_aliases(self):
        self.assertEqual(self.parser.extract_asset("ETF"), AssetClass.INDEX_FUND)
        self.assertEqual(self.parser.extract_asset("real estate"), AssetClass.REAL_ESTATE)
        self.assertIsNone(self.parser.extract_asset("gold"))
        self.assertEqual(self.parser.extract_slot("B"), Slot.TARGET)
        self.assertEqual(self.parser.extract_slot("current"), Slot.CURRENT)

    def test_edit_extraction(self):
        self.assertEqual(
            self.parser.parse_edit("target:cash=30"), (Slot.TARGET, AssetClass.CASH, 30)
        )
        self.assertEqual(
            self.parser.parse_edit("a.etf=150"), (Slot.CURRENT, AssetClass.INDEX_FUND, 100)
        )
        for text in ("target cash 30", "c:cash=30", "target:gold=10"):
            with self.assertRaises(ValueError, msg=text):
                self.parser.parse_edit(text)


if __name__ == "__main__":
    unittest.main()
