import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import InvalidInput
from models import E1RMPoint
from strength_algorithms import PlateauDetector


def _series(values):
    return [
        E1RMPoint(period=f"2024-W{idx + 1:02d}", best_estimated_1rm=value)
        for idx, value in enumerate(values)
    ]


class PlateauDetectorTestCase(unittest.TestCase):
    def test_stalled_after_pr(self) -> None:
        result = PlateauDetector.detect(_series([300, 305, 305, 305]), 3)
        self.assertTrue(result.plateau)
        self.assertEqual(result.weeks_stagnant, 3)

    def test_increasing_series_never_plateaus(self) -> None:
        for length in range(1, 10):
            with self.subTest(length=length):
                values = [200 + 2.5 * i for i in range(length)]
                result = PlateauDetector.detect(_series(values))
                self.assertFalse(result.plateau)
                self.assertEqual(result.weeks_stagnant, 0)

    def test_identical_values(self) -> None:
        for n in range(3, 8):
            with self.subTest(n=n):
                result = PlateauDetector.detect(_series([250] * n), 3)
                self.assertTrue(result.plateau)
                self.assertEqual(result.weeks_stagnant, n)

    def test_regression_counts_as_stagnant(self) -> None:
        result = PlateauDetector.detect(_series([300, 310, 305, 300]), 3)
        self.assertTrue(result.plateau)
        self.assertEqual(result.weeks_stagnant, 3)

    def test_below_threshold(self) -> None:
        result = PlateauDetector.detect(_series([300, 310, 310]), 3)
        self.assertFalse(result.plateau)
        self.assertEqual(result.weeks_stagnant, 2)

    def test_short_series(self) -> None:
        self.assertEqual(PlateauDetector.detect([]).weeks_stagnant, 0)
        self.assertEqual(PlateauDetector.detect(_series([300])).weeks_stagnant, 0)

    def test_accepts_mappings(self) -> None:
        series = [
            {"period": "2024-01-01", "best_estimated_1rm": 300},
            {"period": "2024-01-08", "best_estimated_1rm": 300},
            {"period": "2024-01-15", "best_estimated_1rm": 300},
        ]
        self.assertTrue(PlateauDetector.detect(series).plateau)
        with self.assertRaises(InvalidInput):
            PlateauDetector.detect([{"period": "2024-01-01"}])

    def test_invalid_threshold(self) -> None:
        with self.assertRaises(InvalidInput):
            PlateauDetector.detect(_series([300, 300]), 0)

    def test_plateau_info(self) -> None:
        info = PlateauDetector.plateau_info(_series([300, 305, 305, 305, 305]))
        self.assertTrue(info.detected)
        self.assertEqual(info.weeks_stagnant, 4)
        self.assertEqual(info.last_pr_date, "2024-W02")
        self.assertEqual(info.last_pr_e1rm, 305.0)
        self.assertIn("deload", info.suggestion)

        short = PlateauDetector.plateau_info(_series([300, 305, 305, 305]))
        self.assertNotIn("deload", short.suggestion)

        progressing = PlateauDetector.plateau_info(_series([300, 305]))
        self.assertFalse(progressing.detected)
        self.assertEqual(progressing.last_pr_date, "2024-W02")

    def test_plateau_info_empty(self) -> None:
        info = PlateauDetector.plateau_info([])
        self.assertFalse(info.detected)
        self.assertIsNone(info.last_pr_date)


if __name__ == "__main__":
    unittest.main()
