import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import InvalidInput
from strength_algorithms import RelativeIntensityCalculator


class RelativeIntensityTestCase(unittest.TestCase):
    def test_calculate(self) -> None:
        self.assertEqual(RelativeIntensityCalculator.calculate(200, 250), 80.0)
        self.assertEqual(RelativeIntensityCalculator.calculate(185, 230), 80.4)

    def test_missing_estimate(self) -> None:
        self.assertIsNone(RelativeIntensityCalculator.calculate(200, None))
        self.assertIsNone(RelativeIntensityCalculator.calculate(200, 0))

    def test_negative_weight(self) -> None:
        with self.assertRaises(InvalidInput):
            RelativeIntensityCalculator.calculate(-5, 200)

    def test_zones(self) -> None:
        expected = {
            95: "Maximal",
            90: "Maximal",
            85: "Heavy",
            75: "Moderate",
            65: "Light",
            40: "Very Light",
        }
        for pct, zone in expected.items():
            with self.subTest(pct=pct):
                self.assertEqual(RelativeIntensityCalculator.intensity_zone(pct).zone, zone)
        self.assertEqual(RelativeIntensityCalculator.intensity_zone(72).purpose, "Hypertrophy")


if __name__ == "__main__":
    unittest.main()
