"""
Application configuration manager.
Stores settings in a JSON file under the user config directory.
"""

import json
import logging
from pathlib import Path

from quotefinder.core.constants import (
    CONFIG_PATH, DEFAULT_DATA_ROOT, ALL_EPISODES, Variant, VARIANTS,
    REQUEST_TIMEOUT_SEC,
)

# Validation bounds
_TIMEOUT_MIN = 1
_TIMEOUT_MAX = 120

logger = logging.getLogger(__name__)

_DEFAULTS = {
    'data_root': DEFAULT_DATA_ROOT,
    'default_episode': ALL_EPISODES,
    'default_variant': Variant.ORIGINAL,
    'request_timeout_sec': REQUEST_TIMEOUT_SEC,
}


class AppConfig:
    """Manages application configuration stored as JSON."""

    def __init__(self, config_path: Path | None = None):
        self.path = config_path or CONFIG_PATH
        self._data: dict = {}
        self.load()

    def load(self):
        """Load config from disk, merging with defaults."""
        self._data = dict(_DEFAULTS)
        if self.path.exists():
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    saved = json.load(f)
                for key, value in saved.items():
                    self._data[key] = self._validate(key, value)
            except (OSError, ValueError, AttributeError) as e:
                logger.warning("Failed to load config: %s", e)

    def save(self):
        """Persist config to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self._data, f, indent=2)

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def set(self, key: str, value):
        value = self._validate(key, value)
        self._data[key] = value
        self.save()

    def _validate(self, key: str, value):
        """Validate and coerce config values to safe ranges."""
        if key == 'request_timeout_sec':
            try:
                value = float(value)
            except (TypeError, ValueError):
                logger.warning("Invalid request_timeout_sec %r, using default", value)
                return REQUEST_TIMEOUT_SEC
            return max(_TIMEOUT_MIN, min(_TIMEOUT_MAX, value))

        if key == 'default_variant':
            if value not in VARIANTS:
                logger.warning("Invalid default_variant %r, using %s",
                               value, Variant.ORIGINAL)
                return Variant.ORIGINAL

        if key in ('data_root', 'default_episode'):
            value = str(value).strip()
            if not value:
                return _DEFAULTS[key]

        return value

    def as_dict(self) -> dict:
        return dict(self._data)

    @property
    def data_root(self) -> str:
        return self._data.get('data_root', DEFAULT_DATA_ROOT)

    @data_root.setter
    def data_root(self, value: str):
        self.set('data_root', value)

    @property
    def default_episode(self) -> str:
        return self._data.get('default_episode', ALL_EPISODES)

    @property
    def default_variant(self) -> str:
        return self._data.get('default_variant', Variant.ORIGINAL)

    @property
    def request_timeout_sec(self) -> float:
        return self._data.get('request_timeout_sec', REQUEST_TIMEOUT_SEC)
