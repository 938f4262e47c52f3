import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import InvalidInput
from strength_algorithms import MathTools


class MathToolsTestCase(unittest.TestCase):
    def test_constants(self) -> None:
        self.assertEqual(MathTools.BRZYCKI_NUMERATOR, 36.0)
        self.assertEqual(MathTools.BRZYCKI_LIMIT, 37)
        self.assertEqual(MathTools.EPLEY_DIVISOR, 30.0)

    def test_clamp(self) -> None:
        self.assertEqual(MathTools.clamp(5, 0, 10), 5)
        self.assertEqual(MathTools.clamp(-1, 0, 10), 0)
        self.assertEqual(MathTools.clamp(11, 0, 10), 10)
        with self.assertRaises(ValueError):
            MathTools.clamp(1, 2, 1)

    def test_round_half_up(self) -> None:
        self.assertEqual(MathTools.round_half_up(2.25, 1), 2.3)
        self.assertEqual(MathTools.round_half_up(253.125, 1), 253.1)
        self.assertEqual(MathTools.round_half_up(2.5), 3.0)

    def test_brzycki_and_epley(self) -> None:
        self.assertAlmostEqual(MathTools.brzycki_1rm(225, 5), 253.125)
        self.assertAlmostEqual(MathTools.epley_1rm(135, 12), 189.0)
        with self.assertRaises(InvalidInput):
            MathTools.brzycki_1rm(100, 37)

    def test_inverse_brzycki(self) -> None:
        self.assertAlmostEqual(MathTools.inverse_brzycki(253.125, 5), 225.0)

    def test_round_to_increment(self) -> None:
        self.assertEqual(MathTools.round_to_increment(101, 2.5), 100.0)
        self.assertEqual(MathTools.round_to_increment(102, 2.5), 102.5)
        with self.assertRaises(InvalidInput):
            MathTools.round_to_increment(100, 0)

    def test_volume(self) -> None:
        self.assertEqual(MathTools.volume([(10, 100.0), (5, 150.0)]), 1750.0)
        self.assertEqual(MathTools.volume([]), 0.0)

    def test_mean(self) -> None:
        self.assertIsNone(MathTools.mean([]))
        self.assertAlmostEqual(MathTools.mean([1, 2, 3]), 2.0)

    def test_percent_of_range(self) -> None:
        self.assertAlmostEqual(MathTools.percent_of_range(10, 8, 22), 200 / 14)
        self.assertEqual(MathTools.percent_of_range(5, 5, 5), 0.0)
        self.assertEqual(MathTools.percent_of_range(6, 5, 5), 100.0)

    def test_rpe_rir_conversion(self) -> None:
        self.assertEqual(MathTools.rir_to_rpe(2), 8.0)
        self.assertEqual(MathTools.rir_to_rpe(12), 1.0)
        self.assertEqual(MathTools.rpe_to_rir(10), 0.0)
        self.assertEqual(MathTools.rpe_to_rir(7.5), 2.5)


if __name__ == "__main__":
    unittest.main()
