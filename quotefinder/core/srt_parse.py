"""
SubRip (.srt) parsing → ordered cue sequence.
Malformed blocks are dropped; the rest of the file still parses.
"""

import re
import logging

from quotefinder.core.models import Cue
from quotefinder.core.timecode import parse_timecode

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r'\r?\n')
# Anything after the end timecode (position/styling directives) is ignored
_TIMING_RE = re.compile(
    r'^(\d{2}:\d{2}:\d{2},\d{3})\s*-->\s*(\d{2}:\d{2}:\d{2},\d{3})',
    re.ASCII,
)
_WS_RE = re.compile(r'\s+')


def _parse_index(line: str) -> int | None:
    try:
        return int(line)
    except ValueError:
        return None


def parse_srt(content: str) -> tuple[Cue, ...]:
    """
    Parse SubRip text into cues, in file order.

    Per block: blank lines are skipped, then an integer index line, a
    "start --> end" timing line and any number of non-blank text lines.
    A block with a bad index or timing line is discarded and scanning
    resumes on the line after the one that failed.
    """
    lines = _LINE_SPLIT_RE.split(content)
    n = len(lines)
    cues = []
    dropped = 0
    i = 0

    while i < n:
        while i < n and not lines[i].strip():
            i += 1
        if i >= n:
            break

        index = _parse_index(lines[i].strip())
        i += 1
        if index is None or i >= n:
            dropped += 1
            continue

        timing_line = lines[i].strip()
        i += 1
        m = _TIMING_RE.match(timing_line)
        if not m:
            dropped += 1
            continue
        start_ms = parse_timecode(m.group(1))
        end_ms = parse_timecode(m.group(2))
        if start_ms is None or end_ms is None:
            dropped += 1
            continue

        text_lines = []
        while i < n and lines[i].strip():
            text_lines.append(lines[i])
            i += 1

        text = _WS_RE.sub(' ', ' '.join(text_lines)).strip()
        cues.append(Cue(index=index, start_ms=start_ms, end_ms=end_ms, text=text))

    if dropped:
        logger.debug("Dropped %d malformed subtitle block(s)", dropped)

    return tuple(cues)

