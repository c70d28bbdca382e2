"""
Pick the search result closest to a target playback second.
"""

import math
from typing import Optional, Sequence

from quotefinder.core.models import SearchResult


def select_nearest(results: Sequence[SearchResult], target_seconds: float) -> Optional[int]:
    """
    Index of the result whose start second is nearest the target.
    Ties go to the earliest result; an exact hit ends the scan.
    Returns None for an empty result list or a non-finite target.
    """
    if not results or not math.isfinite(target_seconds):
        return None

    target = max(0, int(target_seconds))
    best_idx = 0
    best_dist = None
    for i, result in enumerate(results):
        dist = abs(result.start_sec - target)
        if best_dist is None or dist < best_dist:
            best_idx = i
            best_dist = dist
            if dist == 0:
                break
    return best_idx


def nearest_result(results: Sequence[SearchResult],
                   target_seconds: float) -> Optional[SearchResult]:
    idx = select_nearest(results, target_seconds)
    return None if idx is None else results[idx]
