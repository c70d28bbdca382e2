#!/usr/bin/env python3
"""
QuoteFinder v1.0.0: run from a source checkout.
The installed `quotefinder` command calls quotefinder.cli directly.
"""

import sys
from pathlib import Path

# ── Determine project root ────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from quotefinder.cli import main

if __name__ == "__main__":
    main()
