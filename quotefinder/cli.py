"""
QuoteFinder command line.
Finds the moment a phrase was spoken and prints a link that starts the
video there.
"""

import sys
import json
import logging
import argparse
import traceback
from datetime import datetime

from quotefinder.core.constants import (
    APP_NAME, APP_VERSION, LOG_DIR, ALL_EPISODES, VARIANTS,
)
from quotefinder.core.config import AppConfig
from quotefinder.core.cue_cache import TranscriptCache
from quotefinder.core.data_source import DataSource
from quotefinder.core.diagnostics import get_diagnostics
from quotefinder.core.error_codes import SearchError, is_caller_error
from quotefinder.core.nearest import select_nearest
from quotefinder.core.registry import EpisodeRegistry
from quotefinder.core.search import SearchEngine

logger = logging.getLogger("quotefinder")

EXIT_OK = 0
EXIT_NOTHING_FOUND = 1
EXIT_BAD_QUERY = 2
EXIT_FATAL = 3


def setup_logging(verbose: bool = False):
    """Log to ~/.local/state/quotefinder/logs/app.log (and stderr if verbose)."""
    handlers: list[logging.Handler] = []
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(LOG_DIR / "app.log", encoding="utf-8"))
    except OSError:
        pass  # read-only home: stderr only
    if verbose or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quotefinder",
        description="Search episode transcripts for a spoken phrase.",
    )
    parser.add_argument("query", nargs="?", help="phrase to look for")
    parser.add_argument("-e", "--episode", default=config.default_episode,
                        help=f"episode key, or '{ALL_EPISODES}' (default: %(default)s)")
    parser.add_argument("--variant", choices=VARIANTS, default=config.default_variant,
                        help="transcript source (default: %(default)s)")
    parser.add_argument("-s", "--seconds", type=int,
                        help="mark the result nearest this playback second")
    parser.add_argument("--data-root", default=config.data_root,
                        help="directory or http(s) URL holding index.json")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument("--diagnostics", action="store_true",
                        help="print data root and registry health, then exit")
    parser.add_argument("--set-data-root", metavar="PATH_OR_URL",
                        help="save the default data root to the config file, then exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def print_results(results, nearest_idx, as_json: bool):
    if as_json:
        payload = [r.to_dict() for r in results]
        print(json.dumps({"results": payload, "selected": nearest_idx},
                         ensure_ascii=False, indent=2))
        return

    for i, r in enumerate(results):
        marker = "*" if i == nearest_idx else " "
        print(f"{marker} [{r.episode_key}] {r.clock:>8}  {r.text}")
        print(f"      {r.direct_url}")


def run(argv: list[str] | None = None) -> int:
    config = AppConfig()
    args = build_parser(config).parse_args(argv)
    setup_logging(args.verbose)

    if args.set_data_root is not None:
        config.data_root = args.set_data_root
        logger.info("Default data root set to %s", config.data_root)
        print(f"Data root: {config.data_root} (saved to {config.path})")
        return EXIT_OK

    logger.info("%s v%s starting at %s", APP_NAME, APP_VERSION, datetime.now().isoformat())

    source = DataSource(args.data_root, timeout=config.request_timeout_sec)
    registry = EpisodeRegistry(source)
    cache = TranscriptCache(registry, source)
    engine = SearchEngine(registry, cache)

    if args.diagnostics:
        print(json.dumps(get_diagnostics(registry, cache), ensure_ascii=False, indent=2))
        return EXIT_OK

    try:
        results = engine.search(args.query or "", args.episode, args.variant)
        if not results and args.episode != ALL_EPISODES \
                and registry.get_config(args.episode) is None:
            print(f"Episode not found: {args.episode}", file=sys.stderr)
            return EXIT_BAD_QUERY
    except SearchError as e:
        print(e.message, file=sys.stderr)
        return EXIT_BAD_QUERY if is_caller_error(e.code) else EXIT_FATAL

    if not results:
        print("Nothing found", file=sys.stderr)
        return EXIT_NOTHING_FOUND

    nearest_idx = select_nearest(results, args.seconds) if args.seconds is not None else None
    print_results(results, nearest_idx, args.json)
    return EXIT_OK


def main():
    try:
        sys.exit(run())
    except Exception as e:
        logger.critical("Fatal error: %s: %s\n%s", type(e).__name__, e, traceback.format_exc())
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL)

