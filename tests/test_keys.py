from __future__ import annotations

import pytest

from albumlink.core.keys import normalize_key, parse_spotify_album_id, spotify_album_url

SAMPLES = [
    "https://open.spotify.com/album/4aawyAB9vmqN3uQ7FjRGTy?si=abc",
    "spotify:album:4aawyAB9vmqN3uQ7FjRGTy",
    "4aawyAB9vmqN3uQ7FjRGTy",
    "Abbey Road",
    "HTTPS://X/ALBUM/ABC123",
    "The Dark Side of the Moon (50th Anniversary)",
    "foo:album:",
    "",
    "  spaced  Query ",
]


@pytest.mark.parametrize("value", SAMPLES)
def test_normalize_key_is_idempotent(value: str) -> None:
    once = normalize_key(value)
    assert normalize_key(once) == once


def test_normalize_key_equates_url_uri_and_raw_id() -> None:
    assert normalize_key("https://x/album/ABC123") == "abc123"
    assert normalize_key("scheme:album:ABC123") == "abc123"
    assert normalize_key("abc123") == "abc123"


def test_normalize_key_lowercases_free_text() -> None:
    assert normalize_key("Abbey Road") == "abbey road"


def test_parse_spotify_album_id_accepts_url_uri_and_bare_id() -> None:
    album_id = "4aawyAB9vmqN3uQ7FjRGTy"
    assert parse_spotify_album_id(f"https://open.spotify.com/album/{album_id}?si=x") == album_id
    assert parse_spotify_album_id(f"https://open.spotify.com/intl-de/album/{album_id}") == album_id
    assert parse_spotify_album_id(f"spotify:album:{album_id}") == album_id
    assert parse_spotify_album_id(f"  {album_id} ") == album_id


def test_parse_spotify_album_id_rejects_text_and_other_catalogs() -> None:
    assert parse_spotify_album_id("Abbey Road") is None
    assert parse_spotify_album_id("https://music.apple.com/us/album/abbey-road/1441164426") is None
    assert parse_spotify_album_id("https://open.spotify.com/artist/3WrFJ7ztbogyGnTHbHJFl2") is None


def test_spotify_album_url() -> None:
    assert spotify_album_url("abc") == "https://open.spotify.com/album/abc"


@pytest.mark.parametrize("word", ["supercalifragilisticex", "Supercalifragilisticex", "abcdefghijklmnopqrstuv"])
def test_parse_spotify_album_id_reads_long_words_as_text(word: str) -> None:
    assert len(word) == 22
    assert parse_spotify_album_id(word) is None


def test_parse_spotify_album_id_accepts_bare_id_without_digits() -> None:
    assert parse_spotify_album_id("abcdefghijKlmnopqrstuv") == "abcdefghijKlmnopqrstuv"
