"""
SubRip timecode conversion and clock formatting.
"""

import re

_TIMECODE_RE = re.compile(r'^(\d{2}):(\d{2}):(\d{2}),(\d{3})$', re.ASCII)


def parse_timecode(text: str) -> int | None:
    """
    Convert "HH:MM:SS,mmm" to milliseconds.
    Returns None for anything else (period separator, wrong digit counts...).
    """
    m = _TIMECODE_RE.match(text.strip())
    if not m:
        return None
    hh, mm, ss, ms = (int(g) for g in m.groups())
    return ((hh * 60 + mm) * 60 + ss) * 1000 + ms


def ms_to_seconds(ms: int) -> int:
    """Whole seconds, floored, never negative."""
    return max(0, ms // 1000)


def format_clock(seconds: float) -> str:
    """Render seconds as MM:SS, or HH:MM:SS once past the first hour."""
    s = max(0, int(seconds))
    hh, rem = divmod(s, 3600)
    mm, ss = divmod(rem, 60)
    if hh > 0:
        return f"{hh:02d}:{mm:02d}:{ss:02d}"
    return f"{mm:02d}:{ss:02d}"
