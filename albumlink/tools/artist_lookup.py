#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    parser = argparse.ArgumentParser(description="Show an artist's top albums from Last.fm with a Spotify link")
    parser.add_argument("query", help="Artist name or Spotify artist URL")
    parser.add_argument("--name", help="Artist name to use with a Spotify artist URL")
    parser.add_argument("--text", action="store_true", help="Print a readable summary instead of JSON")
    parser.add_argument("--settings", help="Path to a settings YAML file")
    args = parser.parse_args()

    from albumlink.core.artists import lookup_artist
    from albumlink.core.formatting import render_artist
    from albumlink.core.settings import load_settings
    from albumlink.tools._common import configure_logging, print_json, run_lookup

    settings = load_settings(args.settings)
    configure_logging(settings)
    artist = run_lookup(lookup_artist(args.query, settings, name=args.name), settings)
    if artist is None:
        print_json({"error": "Artist not found"})
        return
    if args.text:
        print(render_artist(artist))
        return
    print_json(artist)


if __name__ == "__main__":
    main()
