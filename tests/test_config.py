import datetime
import os
import sys
import tempfile
import unittest
from unittest import mock

import yaml

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from config import YamlConfig
from models import LandmarkOverride, ProgressionModel
from settings_schema import StrengthPreferences, validate_settings


class SettingsSchemaTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        prefs = validate_settings({}).strength
        self.assertIs(prefs.progression_model, ProgressionModel.DOUBLE)
        self.assertEqual(prefs.linear_increment, 5.0)
        self.assertEqual((prefs.double_rep_target_low, prefs.double_rep_target_high), (8, 12))
        self.assertEqual((prefs.rpe_target_low, prefs.rpe_target_high), (7.0, 9.0))
        self.assertEqual(prefs.plateau_weeks_threshold, 3)
        self.assertEqual(prefs.rounding_increment, 2.5)
        self.assertEqual(prefs.weight_unit, "lbs")

    def test_increment_for(self) -> None:
        prefs = StrengthPreferences(linear_increment=10, double_weight_increase=2.5)
        self.assertEqual(prefs.increment_for(ProgressionModel.LINEAR), 10)
        self.assertEqual(prefs.increment_for(ProgressionModel.DOUBLE), 2.5)
        self.assertEqual(prefs.increment_for(ProgressionModel.RPE_BASED), 2.5)
        self.assertEqual(prefs.rpe_targets().low, 7.0)

    def test_invalid_settings(self) -> None:
        for data in (
            {"strength": {"progression_model": "wave"}},
            {"strength": {"double_rep_target_low": 12, "double_rep_target_high": 8}},
            {"strength": {"rpe_target_low": 9.5, "rpe_target_high": 8}},
            {"training_start_date": "yesterday-ish"},
            {"volume_landmarks": {"chest": {"mev": -1}}},
        ):
            with self.subTest(data=data):
                with self.assertRaises(ValueError):
                    validate_settings(data)


class YamlConfigTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "settings.yaml")

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_missing_file(self) -> None:
        cfg = YamlConfig(self.path)
        self.assertEqual(cfg.load(), {})
        self.assertEqual(cfg.preferences(), StrengthPreferences())
        self.assertEqual(cfg.landmark_overrides(), {})
        self.assertIsNone(cfg.training_start_date())

    def test_save_and_load(self) -> None:
        cfg = YamlConfig(self.path)
        cfg.save(
            {
                "training_start_date": datetime.date(2021, 5, 1),
                "strength": {"progression_model": "linear", "linear_increment": 10},
                "volume_landmarks": {"chest": {"mev": 10, "mrv": 24}},
            }
        )
        self.assertEqual(cfg.training_start_date(), datetime.date(2021, 5, 1))
        self.assertIs(cfg.preferences().progression_model, ProgressionModel.LINEAR)
        self.assertEqual(cfg.preferences().linear_increment, 10)
        overrides = cfg.landmark_overrides()
        self.assertIsInstance(overrides["chest"], LandmarkOverride)
        self.assertEqual(overrides["chest"].mrv, 24)
        self.assertIsNone(overrides["chest"].mav_low)

    def test_save_rejects_invalid(self) -> None:
        cfg = YamlConfig(self.path)
        with self.assertRaises(ValueError):
            cfg.save({"strength": {"plateau_weeks_threshold": 0}})
        self.assertFalse(os.path.exists(self.path))

    def test_non_mapping_rejected(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(["a", "b"], f)
        with self.assertRaises(ValueError):
            YamlConfig(self.path).load()

    def test_environment_path(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("strength:\n  weight_unit: kg\n")
        with mock.patch.dict(os.environ, {"STRENGTH_SETTINGS": self.path}):
            cfg = YamlConfig()
        self.assertEqual(cfg.path, self.path)
        self.assertEqual(cfg.preferences().weight_unit, "kg")


if __name__ == "__main__":
    unittest.main()
