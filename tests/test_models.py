import os
import sys
import unittest

from pydantic import ValidationError

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import InvalidInput, from_validation_error
from models import LoggedSet, RpeTargets, VolumeLandmarks


class ModelsTestCase(unittest.TestCase):
    def test_landmarks_must_be_ordered(self) -> None:
        VolumeLandmarks(mev=8, mav_low=8, mav_high=8, mrv=8)
        with self.assertRaises(ValidationError):
            VolumeLandmarks(mev=12, mav_low=8, mav_high=20, mrv=22)

    def test_records_are_frozen(self) -> None:
        logged = LoggedSet(weight=100, reps=5)
        with self.assertRaises(ValidationError):
            logged.weight = 200

    def test_logged_set_ranges(self) -> None:
        with self.assertRaises(ValidationError):
            LoggedSet(weight=100, reps=5, rpe=11)
        with self.assertRaises(ValidationError):
            LoggedSet(weight=-1, reps=5)

    def test_rpe_targets(self) -> None:
        self.assertEqual((RpeTargets().low, RpeTargets().high), (7, 9))
        with self.assertRaises(ValidationError):
            RpeTargets(low=9, high=7)

    def test_invalid_input_is_value_error(self) -> None:
        try:
            LoggedSet(weight=100, reps=-1)
        except ValidationError as exc:
            wrapped = from_validation_error(exc)
        self.assertIsInstance(wrapped, InvalidInput)
        self.assertIsInstance(wrapped, ValueError)
        self.assertIn("reps", str(wrapped))


if __name__ == "__main__":
    unittest.main()
