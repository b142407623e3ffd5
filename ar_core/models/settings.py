"""Application settings dataclass.

Typed view over the AppConfig dictionary. Code that needs a setting takes an
AppSettings rather than reaching into raw dict keys.

Settings are organized by category:
- Ingest: which click targets are trusted
- AR format: serialization profile
- Playback: update tick interval
- Logging: default level
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_FIELDS = ("x", "y", "width", "height", "timeStart", "timeEnd")
DEFAULT_UPDATE_INTERVAL_MS = 1000


@dataclass
class AppSettings:
    """Complete application settings with typed fields."""

    # =========================================================================
    # Ingest Settings
    # =========================================================================
    trusted_url_prefix: str

    # =========================================================================
    # AR Format Settings
    # =========================================================================
    required_fields: tuple[str, ...]

    # =========================================================================
    # Playback Settings
    # =========================================================================
    update_interval_ms: int

    # =========================================================================
    # Logging Settings
    # =========================================================================
    log_level: str

    @classmethod
    def from_config(cls, cfg: dict) -> AppSettings:
        """Create AppSettings from a config dictionary, defaulting missing keys."""
        required = cfg.get("required_fields")
        if required is None:
            required = DEFAULT_REQUIRED_FIELDS
        elif not isinstance(required, (list, tuple)):
            logger.warning("Ignoring invalid required_fields %r; using defaults", required)
            required = DEFAULT_REQUIRED_FIELDS

        interval = cfg.get("update_interval_ms", DEFAULT_UPDATE_INTERVAL_MS)
        try:
            interval = int(interval)
        except (TypeError, ValueError):
            interval = 0
        if interval <= 0:
            logger.warning(
                "Ignoring invalid update_interval_ms %r; using %d",
                cfg.get("update_interval_ms"), DEFAULT_UPDATE_INTERVAL_MS,
            )
            interval = DEFAULT_UPDATE_INTERVAL_MS

        return cls(
            trusted_url_prefix=str(cfg.get("trusted_url_prefix", "https://www.youtube.com/")),
            required_fields=tuple(str(name) for name in required),
            update_interval_ms=interval,
            log_level=str(cfg.get("log_level", "INFO")).upper(),
        )

    def to_dict(self) -> dict:
        return {
            "trusted_url_prefix": self.trusted_url_prefix,
            "required_fields": list(self.required_fields),
            "update_interval_ms": self.update_interval_ms,
            "log_level": self.log_level,
        }
