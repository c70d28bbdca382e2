"""
Shared constants for QuoteFinder.
Single source of truth, imported by every other module.
"""

import os
import pathlib

# ── Application identity ──────────────────────────────────────────────
APP_NAME = "QuoteFinder"
APP_VERSION = "1.0.0"

# ── Filesystem paths ─────────────────────────────────────────────────
HOME = pathlib.Path.home()

APP_SUPPORT_DIR = HOME / ".config" / "quotefinder"
CONFIG_PATH = APP_SUPPORT_DIR / "config.json"
LOG_DIR = HOME / ".local" / "state" / "quotefinder" / "logs"

# Episode data (index.json + subtitle files); overridable per process
DEFAULT_DATA_ROOT = os.environ.get(
    "QUOTEFINDER_DATA_ROOT", str(pathlib.Path.cwd() / "data"),
)
REGISTRY_FILENAME = "index.json"

# ── Search ────────────────────────────────────────────────────────────
ALL_EPISODES = "all"
RESULT_CAP = 50
MIN_QUERY_LEN = 2


# ── Transcript variants ───────────────────────────────────────────────
class Variant:
    ORIGINAL = "original"
    AI = "ai"


VARIANTS = (Variant.ORIGINAL, Variant.AI)

# Registry field holding the subtitle path for each variant
VARIANT_FIELDS = {
    Variant.ORIGINAL: "srt",
    Variant.AI: "srt_ai",
}


# ── Error codes ───────────────────────────────────────────────────────
class ErrorCode:
    # Caller input
    EMPTY_QUERY = "ERR_EMPTY_QUERY"
    QUERY_TOO_SHORT = "ERR_QUERY_TOO_SHORT"
    EPISODE_NOT_FOUND = "ERR_EPISODE_NOT_FOUND"
    UNKNOWN_VARIANT = "ERR_UNKNOWN_VARIANT"

    # Fatal
    REGISTRY_UNAVAILABLE = "ERR_REGISTRY_UNAVAILABLE"


CALLER_ERRORS = {
    ErrorCode.EMPTY_QUERY,
    ErrorCode.QUERY_TOO_SHORT,
    ErrorCode.EPISODE_NOT_FOUND,
    ErrorCode.UNKNOWN_VARIANT,
}

HTTP_STATUS = {
    ErrorCode.EMPTY_QUERY: 400,
    ErrorCode.QUERY_TOO_SHORT: 400,
    ErrorCode.UNKNOWN_VARIANT: 400,
    ErrorCode.EPISODE_NOT_FOUND: 404,
    ErrorCode.REGISTRY_UNAVAILABLE: 503,
}

# ── Video links ───────────────────────────────────────────────────────
YOUTUBE_LONG_HOST = "youtube.com"
YOUTUBE_SHORT_HOST = "youtu.be"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}&t={start}s"
# no-cookie domain: embeds hang less often under 3rd-party cookie blocking
YOUTUBE_EMBED_URL = "https://www.youtube-nocookie.com/embed/{video_id}?start={start}"

# ── Remote data ───────────────────────────────────────────────────────
REQUEST_TIMEOUT_SEC = 15
