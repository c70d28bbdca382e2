"""
Text canonicalisation for substring search.
"""

import re

# Letters and digits of any script survive; everything else becomes a separator
_NON_WORD_RE = re.compile(r'[\W_]+')
_WS_RE = re.compile(r'\s+')


def normalize_for_search(text: str) -> str:
    """
    Lowercase, fold "ё" into "е", turn punctuation/whitespace runs into
    single spaces and trim. Both the query and every cue go through here.
    """
    s = text.lower().replace('ё', 'е')
    s = _NON_WORD_RE.sub(' ', s)
    s = _WS_RE.sub(' ', s)
    return s.strip()
