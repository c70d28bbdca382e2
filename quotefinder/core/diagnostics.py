"""
Diagnostics: data root and transcript index health.
"""

import logging

from quotefinder.core.cue_cache import TranscriptCache
from quotefinder.core.error_codes import SearchError
from quotefinder.core.registry import EpisodeRegistry
from quotefinder.core.url_parse import extract_video_id

logger = logging.getLogger(__name__)


def check_registry(registry: EpisodeRegistry) -> dict:
    """Episode counts, or the load error if the registry is unusable."""
    info = {"loaded": False, "episodes": 0, "unresolved_videos": [], "error": None}
    try:
        episodes = registry.get_all()
    except SearchError as e:
        info["error"] = e.message
        return info

    info["loaded"] = True
    info["episodes"] = len(episodes)
    info["unresolved_videos"] = [
        key for key, cfg in episodes.items()
        if not extract_video_id(cfg.youtube_url)
    ]
    info["with_variants"] = sorted(
        key for key, cfg in episodes.items() if cfg.variant_paths
    )
    return info


def get_diagnostics(registry: EpisodeRegistry, cache: TranscriptCache) -> dict:
    """Gather all diagnostic information."""
    return {
        "data_root": registry.source.describe(),
        "remote": registry.source.is_remote,
        "registry": check_registry(registry),
        "cached_transcripts": len(cache),
    }
