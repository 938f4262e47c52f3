import datetime
import os
from typing import Dict

import yaml

from models import LandmarkOverride
from settings_schema import SettingsSchema, StrengthPreferences, validate_settings

APP_VERSION = "1.0.0"


class YamlConfig:
    """Load and save analytics settings to a YAML file."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path or os.environ.get("STRENGTH_SETTINGS", "settings.yaml")

    def load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must contain a mapping")
        return data

    def save(self, data: dict) -> None:
        validate_settings(data)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(dict(data), f, sort_keys=True)

    def settings(self) -> SettingsSchema:
        return validate_settings(self.load())

    def preferences(self) -> StrengthPreferences:
        return self.settings().strength

    def landmark_overrides(self) -> Dict[str, LandmarkOverride]:
        return dict(self.settings().volume_landmarks)

    def training_start_date(self) -> datetime.date | None:
        return self.settings().training_start_date
