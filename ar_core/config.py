# ar_core/config.py
# -*- coding: utf-8 -*-
import json
import logging
from pathlib import Path
from typing import Any, Optional

from .annotations.attribute_map import REQUIRED_FIELDS
from .annotations.parsers.legacy_xml import DEFAULT_TRUSTED_PREFIX
from .models.settings import AppSettings

logger = logging.getLogger(__name__)


class AppConfig:
    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = Path(settings_path) if settings_path else None
        self.defaults = {
            # --- Ingest ---
            'trusted_url_prefix': DEFAULT_TRUSTED_PREFIX,  # Click targets outside this prefix are dropped

            # --- AR Format ---
            'required_fields': list(REQUIRED_FIELDS),  # Fields serialization refuses to omit

            # --- Playback ---
            'update_interval_ms': 1000,  # Tick period while media plays

            # --- Logging ---
            'log_level': 'INFO',
        }
        self.settings = self.defaults.copy()
        self.load()

    def load(self):
        if self.settings_path is None:
            self.settings = self.defaults.copy()
            return

        changed = False
        if self.settings_path.exists():
            try:
                with open(self.settings_path, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if not isinstance(loaded_settings, dict):
                    raise ValueError("settings root must be an object")

                for key, default_value in self.defaults.items():
                    if key not in loaded_settings:
                        loaded_settings[key] = default_value
                        changed = True
                self.settings = loaded_settings
            except (json.JSONDecodeError, ValueError, IOError) as e:
                logger.warning("Could not read settings from %s (%s); using defaults", self.settings_path, e)
                self.settings = self.defaults.copy()
                changed = True
        else:
            self.settings = self.defaults.copy()
            changed = True

        if changed:
            self.save()

    def save(self):
        if self.settings_path is None:
            return
        try:
            keys_to_save = self.defaults.keys()
            settings_to_save = {k: self.settings.get(k) for k in keys_to_save if k in self.settings}
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(settings_to_save, f, indent=4)
        except IOError as e:
            logger.error("Error saving settings: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any):
        self.settings[key] = value

    def to_settings(self) -> AppSettings:
        return AppSettings.from_config(self.settings)
