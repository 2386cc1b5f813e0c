#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a Spotify playlist link from a playlist URL or search text")
    parser.add_argument("query", help="Playlist name or Spotify playlist URL")
    args = parser.parse_args()

    from albumlink.core.artists import find_spotify_playlist_url
    from albumlink.tools._common import print_json

    print_json({"query": args.query, "url": find_spotify_playlist_url(args.query)})


if __name__ == "__main__":
    main()
