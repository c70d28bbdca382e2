"""
YouTube URL parsing and playback link construction.
"""

import logging
from urllib.parse import urlparse, parse_qs

from quotefinder.core.constants import (
    YOUTUBE_LONG_HOST, YOUTUBE_SHORT_HOST, YOUTUBE_WATCH_URL, YOUTUBE_EMBED_URL,
)

logger = logging.getLogger(__name__)


def extract_video_id(url: str) -> str | None:
    """
    Extract the video id from a YouTube URL.

    youtube.com (any subdomain): the "v" query parameter.
    youtu.be: the whole path, leading slashes stripped.
    Anything else, or a URL that does not parse, gives None.
    """
    if not isinstance(url, str):
        return None

    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname or ''
    except ValueError:
        logger.debug("Unparseable video URL: %r", url)
        return None

    if YOUTUBE_LONG_HOST in host:
        v = parse_qs(parsed.query).get('v', [None])[0]
        return v or None

    if host == YOUTUBE_SHORT_HOST:
        return parsed.path.lstrip('/') or None

    return None


def build_watch_url(video_id: str, start_sec: int) -> str:
    return YOUTUBE_WATCH_URL.format(video_id=video_id, start=start_sec)


def build_embed_url(video_id: str, start_sec: int) -> str:
    # autoplay flag is appended by the embedding page
    return YOUTUBE_EMBED_URL.format(video_id=video_id, start=start_sec)
