#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    parser = argparse.ArgumentParser(description="Resolve an album name or Spotify album URL/URI/ID to its Spotify equivalent")
    parser.add_argument("query", help="Album name, e.g. 'Abbey Road', or a Spotify album reference")
    parser.add_argument("--text", action="store_true", help="Print a readable summary instead of JSON")
    parser.add_argument("--settings", help="Path to a settings YAML file")
    args = parser.parse_args()

    from albumlink.core.formatting import render_album
    from albumlink.core.orchestrator import get_album
    from albumlink.core.settings import load_settings
    from albumlink.tools._common import configure_logging, get_cache, print_json, run_lookup

    settings = load_settings(args.settings)
    configure_logging(settings)
    cache = get_cache(settings)
    album = run_lookup(get_album(args.query, cache, settings), settings)
    if album is None:
        print_json({"error": "No album found"})
        return
    if args.text:
        print(render_album(album))
        return
    print_json(album)


if __name__ == "__main__":
    main()
