import datetime
import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import InvalidInput
from models import ExperienceLevel
from strength_algorithms import TrainingAgeEstimator


class TrainingAgeTestCase(unittest.TestCase):
    def test_unknown_start(self) -> None:
        info = TrainingAgeEstimator.estimate(None)
        self.assertEqual(info.experience_level, ExperienceLevel.NOVICE)
        self.assertEqual(info.volume_tolerance_multiplier, 1.0)
        self.assertEqual((info.years, info.months), (0, 0))

    def test_novice(self) -> None:
        info = TrainingAgeEstimator.estimate("2024-01-15", today="2024-07-14")
        self.assertEqual((info.years, info.months), (0, 5))
        self.assertEqual(info.experience_level, ExperienceLevel.NOVICE)
        self.assertEqual(info.volume_tolerance_multiplier, 0.85)

    def test_intermediate(self) -> None:
        info = TrainingAgeEstimator.estimate(
            datetime.date(2022, 3, 1), today=datetime.date(2024, 3, 1)
        )
        self.assertEqual(info.years, 2)
        self.assertEqual(info.experience_level, ExperienceLevel.INTERMEDIATE)
        self.assertEqual(info.volume_tolerance_multiplier, 1.0)

    def test_advanced_boundaries(self) -> None:
        three = TrainingAgeEstimator.estimate("2020-01-15", today="2023-01-15")
        self.assertEqual(three.experience_level, ExperienceLevel.ADVANCED)
        self.assertEqual(three.volume_tolerance_multiplier, 1.15)
        six = TrainingAgeEstimator.estimate("2018-03-01", today="2024-03-01")
        self.assertEqual(six.years, 6)
        self.assertEqual(six.experience_level, ExperienceLevel.ADVANCED)

    def test_elite(self) -> None:
        info = TrainingAgeEstimator.estimate("2018-02-01", today="2024-03-01")
        self.assertEqual((info.years, info.months), (6, 1))
        self.assertEqual(info.experience_level, ExperienceLevel.ELITE)
        self.assertEqual(info.volume_tolerance_multiplier, 1.25)

    def test_datetime_accepted(self) -> None:
        info = TrainingAgeEstimator.estimate(
            datetime.datetime(2023, 1, 1, 12, 30), today="2024-01-01"
        )
        self.assertEqual(info.start_date, datetime.date(2023, 1, 1))
        self.assertEqual(info.years, 1)

    def test_timestamp_string_accepted(self) -> None:
        self.assertEqual(
            TrainingAgeEstimator.parse_date("2023-06-01T08:30:00"), datetime.date(2023, 6, 1)
        )

    def test_future_start_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            TrainingAgeEstimator.estimate("2030-01-01", today="2024-01-01")

    def test_malformed_date_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            TrainingAgeEstimator.estimate("last spring")
        for text in ("2020-01-01garbage", "2020-01-01 nope", "2020-13-01"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidInput):
                    TrainingAgeEstimator.estimate(text, today=datetime.date(2024, 1, 1))
        with self.assertRaises(InvalidInput):
            TrainingAgeEstimator.parse_date(12345)

    def test_elapsed_months(self) -> None:
        self.assertEqual(
            TrainingAgeEstimator.elapsed_months(datetime.date(2024, 1, 31), datetime.date(2024, 2, 29)),
            0,
        )
        self.assertEqual(
            TrainingAgeEstimator.elapsed_months(datetime.date(2024, 1, 31), datetime.date(2024, 3, 31)),
            2,
        )


if __name__ == "__main__":
    unittest.main()
