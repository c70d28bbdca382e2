"""
Per-episode cue cache.
Parsed sequences are published once and never evicted or mutated.
"""

import logging
import threading

from quotefinder.core.constants import Variant
from quotefinder.core.data_source import DataSource, DataSourceError
from quotefinder.core.models import Cue
from quotefinder.core.registry import EpisodeRegistry
from quotefinder.core.srt_parse import parse_srt

logger = logging.getLogger(__name__)


def cache_key(episode_key: str, variant: str = Variant.ORIGINAL) -> str:
    if variant == Variant.ORIGINAL:
        return episode_key
    return f"{episode_key}:{variant}"


class TranscriptCache:
    """
    Memoized episode transcripts, keyed by episode (and variant).

    Two threads missing the same key may both parse the file; whichever
    publishes first wins and both get that sequence back.
    """

    def __init__(self, registry: EpisodeRegistry, source: DataSource):
        self.registry = registry
        self.source = source
        self._lock = threading.Lock()
        self._cues: dict[str, tuple[Cue, ...]] = {}

    def load_cues(self, episode_key: str,
                  variant: str = Variant.ORIGINAL) -> tuple[Cue, ...]:
        key = cache_key(episode_key, variant)
        with self._lock:
            cached = self._cues.get(key)
        if cached is not None:
            return cached

        cues = self._read(episode_key, variant)

        with self._lock:
            return self._cues.setdefault(key, cues)

    def _read(self, episode_key: str, variant: str) -> tuple[Cue, ...]:
        srt_path = self.registry.subtitle_path(episode_key, variant)
        if srt_path is None:
            logger.debug("No %s subtitles configured for %s", variant, episode_key)
            return ()

        try:
            content = self.source.read_text(srt_path)
        except DataSourceError as e:
            logger.warning("Subtitles for %s (%s) unavailable: %s",
                           episode_key, variant, e)
            return ()

        cues = parse_srt(content)
        logger.info("Parsed %d cue(s) for %s (%s)", len(cues), episode_key, variant)
        return cues

    def cached_keys(self) -> list[str]:
        with self._lock:
            return list(self._cues)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cues)

    def clear(self):
        with self._lock:
            self._cues.clear()
