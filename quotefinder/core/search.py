"""
Phrase search across episode transcripts.

Matches are plain substring hits on normalized text, returned in document
order (episodes in scope order, cues in file order) up to a global cap.
"""

import logging
from typing import Iterable

from quotefinder.core.constants import (
    ALL_EPISODES, ErrorCode, MIN_QUERY_LEN, RESULT_CAP, VARIANTS, Variant,
)
from quotefinder.core.cue_cache import TranscriptCache
from quotefinder.core.error_codes import SearchError, is_caller_error
from quotefinder.core.models import Cue, SearchResult
from quotefinder.core.registry import EpisodeRegistry
from quotefinder.core.text_normalize import normalize_for_search
from quotefinder.core.timecode import format_clock, ms_to_seconds
from quotefinder.core.url_parse import (
    extract_video_id, build_watch_url, build_embed_url,
)

logger = logging.getLogger(__name__)


def validate_query(query: str) -> str:
    """Return the normalized query or raise SearchError for unusable input."""
    if not query or not query.strip():
        raise SearchError(ErrorCode.EMPTY_QUERY, "Empty query")
    normalized = normalize_for_search(query)
    if len(normalized) < MIN_QUERY_LEN:
        raise SearchError(ErrorCode.QUERY_TOO_SHORT, "Query is too short")
    return normalized


def build_result(episode_key: str, cue: Cue, video_id: str) -> SearchResult:
    start_sec = ms_to_seconds(cue.start_ms)
    end_sec = max(start_sec, ms_to_seconds(cue.end_ms))
    return SearchResult(
        episode_key=episode_key,
        cue_index=cue.index,
        start_sec=start_sec,
        end_sec=end_sec,
        clock=format_clock(start_sec),
        text=cue.text,
        direct_url=build_watch_url(video_id, start_sec),
        embed_url=build_embed_url(video_id, start_sec),
    )


class SearchEngine:
    """Runs queries against the registry's episodes through the cue cache."""

    def __init__(self, registry: EpisodeRegistry, cache: TranscriptCache,
                 cap: int = RESULT_CAP):
        self.registry = registry
        self.cache = cache
        self.cap = cap

    def resolve_scope(self, episode_scope: str | Iterable[str]) -> list[str]:
        if episode_scope == ALL_EPISODES:
            return self.registry.keys_in_order()
        if isinstance(episode_scope, str):
            return [episode_scope]
        return list(episode_scope)

    def search(self, query: str, episode_scope: str | Iterable[str] = ALL_EPISODES,
               variant: str = Variant.ORIGINAL) -> list[SearchResult]:
        """
        Return up to `cap` results for `query` within `episode_scope`.
        Raises SearchError for bad input or an unavailable registry.
        """
        needle = validate_query(query)
        if variant not in VARIANTS:
            raise SearchError(ErrorCode.UNKNOWN_VARIANT, f"Unknown variant: {variant}")

        results: list[SearchResult] = []
        for episode_key in self.resolve_scope(episode_scope):
            if len(results) >= self.cap:
                break
            self._scan_episode(episode_key, needle, variant, results)

        logger.debug("Query %r matched %d cue(s)", needle, len(results))
        return results

    def _scan_episode(self, episode_key: str, needle: str, variant: str,
                      results: list[SearchResult]):
        cfg = self.registry.get_config(episode_key)
        if cfg is None:
            logger.debug("Skipping unknown episode %s", episode_key)
            return

        video_id = extract_video_id(cfg.youtube_url)
        if not video_id:
            logger.debug("Skipping %s: no video id in %r", episode_key, cfg.youtube_url)
            return

        for cue in self.cache.load_cues(episode_key, variant):
            if not cue.text:
                continue
            if needle not in normalize_for_search(cue.text):
                continue
            results.append(build_result(episode_key, cue, video_id))
            if len(results) >= self.cap:
                return


def _error_body(err: SearchError) -> dict:
    return {"error": err.message, "code": err.code, "results": []}


def handle_search_request(engine: SearchEngine, query: str | None,
                          episode: str | None = ALL_EPISODES,
                          variant: str | None = Variant.ORIGINAL) -> tuple[int, dict]:
    """
    Query interface for a web layer: returns (http_status, json_body).
    """
    raw_query = (query or "").strip()
    episode = (episode or "").strip() or ALL_EPISODES
    variant = (variant or "").strip() or Variant.ORIGINAL

    try:
        results = engine.search(raw_query, episode, variant)
        if episode != ALL_EPISODES and not results:
            if engine.registry.get_config(episode) is None:
                raise SearchError(ErrorCode.EPISODE_NOT_FOUND,
                                  f"Episode not found: {episode}")
        searched = engine.resolve_scope(episode)
    except SearchError as e:
        if not is_caller_error(e.code):
            logger.error("Search failed: %s", e)
        return e.status, _error_body(e)

    return 200, {
        "episodeKey": episode,
        "query": raw_query,
        "variant": variant,
        "episodesSearched": searched,
        "resultsCount": len(results),
        "results": [r.to_dict() for r in results],
        "nothingFound": not results,
    }
