"""
Episode registry: index.json → EpisodeConfig per episode key.
Loaded once per process; read-only afterwards.
"""

import json
import logging
import threading
from typing import Optional

from quotefinder.core.constants import (
    ErrorCode, REGISTRY_FILENAME, Variant, VARIANT_FIELDS,
)
from quotefinder.core.data_source import DataSource, DataSourceError
from quotefinder.core.error_codes import SearchError
from quotefinder.core.models import EpisodeConfig

logger = logging.getLogger(__name__)


def _parse_entry(key: str, entry) -> EpisodeConfig | None:
    if not isinstance(entry, dict):
        logger.warning("Skipping episode %r: expected an object", key)
        return None
    youtube_url = entry.get('youtube_url')
    srt = entry.get('srt')
    if not isinstance(youtube_url, str) or not isinstance(srt, str):
        logger.warning("Skipping episode %r: youtube_url and srt must be strings", key)
        return None

    variant_paths = {}
    for variant, field_name in VARIANT_FIELDS.items():
        if variant == Variant.ORIGINAL:
            continue
        path = entry.get(field_name)
        if isinstance(path, str) and path.strip():
            variant_paths[variant] = path

    return EpisodeConfig(youtube_url=youtube_url, subtitle_path=srt,
                         variant_paths=variant_paths)


def parse_registry(raw: str) -> dict[str, EpisodeConfig]:
    """
    Parse the registry document.
    Raises ValueError unless it is a JSON object; bad entries are left out.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("registry root must be an object")
    episodes = {}
    for key, entry in data.items():
        cfg = _parse_entry(key, entry)
        if cfg is not None:
            episodes[key] = cfg
    return episodes


class EpisodeRegistry:
    """
    Lazily loaded, immutable episode index.

    The first caller loads the document under a lock; later callers reuse
    the result. A failed load is remembered and re-raised to every caller,
    since nothing can be searched without episode metadata.
    """

    def __init__(self, source: DataSource, filename: str = REGISTRY_FILENAME):
        self.source = source
        self.filename = filename
        self._lock = threading.Lock()
        self._episodes: Optional[dict[str, EpisodeConfig]] = None
        self._error: Optional[SearchError] = None

    def _load(self) -> dict[str, EpisodeConfig]:
        episodes = self._episodes
        if episodes is not None:
            return episodes

        with self._lock:
            if self._episodes is not None:
                return self._episodes
            if self._error is not None:
                raise self._error

            try:
                raw = self.source.read_text(self.filename)
                episodes = parse_registry(raw)
            except (DataSourceError, ValueError) as e:
                # json.JSONDecodeError is a ValueError
                self._error = SearchError(
                    ErrorCode.REGISTRY_UNAVAILABLE,
                    f"Episode registry unavailable: {e}",
                )
                logger.error("Failed to load episode registry from %s: %s",
                             self.source.locate(self.filename), e)
                raise self._error from e

            self._episodes = episodes
            logger.info("Loaded episode registry: %d episode(s)", len(episodes))
            return episodes

    @property
    def load_error(self) -> Optional[SearchError]:
        return self._error

    def get_config(self, key: str) -> Optional[EpisodeConfig]:
        return self._load().get(key)

    def list_keys(self) -> list[str]:
        return sorted(self._load())

    def keys_in_order(self) -> list[str]:
        """Keys in registry-document order."""
        return list(self._load())

    def get_all(self) -> dict[str, EpisodeConfig]:
        return dict(self._load())

    def subtitle_path(self, key: str, variant: str = Variant.ORIGINAL) -> Optional[str]:
        cfg = self.get_config(key)
        if cfg is None:
            return None
        if variant == Variant.ORIGINAL:
            return cfg.subtitle_path
        return cfg.variant_paths.get(variant)
