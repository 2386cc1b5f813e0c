from __future__ import annotations

import pytest
import requests

from albumlink.core import deezer_client, itunes_client, musicbrainz_client
from albumlink.core.errors import CatalogError, LinkResolutionError


class _Resp:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload if payload is not None else {}

    def json(self):
        return self._payload


def test_itunes_search_albums_passes_entity_and_limit(monkeypatch: pytest.MonkeyPatch, settings) -> None:
    seen = {}

    def fake_get(url, params, timeout):
        seen.update(url=url, params=params)
        return _Resp(200, {"resultCount": 1, "results": [{"collectionId": 1}, "junk"]})

    monkeypatch.setattr("albumlink.core.itunes_client.requests.get", fake_get)
    out = itunes_client.search_albums("Abbey Road", settings)
    assert out == [{"collectionId": 1}]
    assert seen["url"] == itunes_client.ITUNES_SEARCH_URL
    assert seen["params"] == {"term": "Abbey Road", "entity": "album", "limit": 1, "country": "US"}


def test_itunes_search_failure_raises_catalog_error(monkeypatch: pytest.MonkeyPatch, settings) -> None:
    monkeypatch.setattr("albumlink.core.itunes_client.requests.get", lambda *args, **kwargs: _Resp(503))
    with pytest.raises(CatalogError) as exc:
        itunes_client.search_albums("Abbey Road", settings)
    assert exc.value.code == "ITUNES_SEARCH_FAILED"


def test_itunes_lookup_timeout(monkeypatch: pytest.MonkeyPatch, settings) -> None:
    def fake_get(*args, **kwargs):
        raise requests.Timeout("slow")

    monkeypatch.setattr("albumlink.core.itunes_client.requests.get", fake_get)
    with pytest.raises(CatalogError) as exc:
        itunes_client.lookup_collection(1, settings)
    assert exc.value.code == "ITUNES_LOOKUP_TIMEOUT"


def test_itunes_split_collection() -> None:
    results = [
        {"wrapperType": "collection", "collectionId": 1},
        {"wrapperType": "track", "trackName": "Come Together"},
        {"wrapperType": "artist"},
    ]
    collection, tracks = itunes_client.split_collection(results)
    assert collection == {"wrapperType": "collection", "collectionId": 1}
    assert [t["trackName"] for t in tracks] == ["Come Together"]


def test_deezer_error_object_raises(monkeypatch: pytest.MonkeyPatch, settings) -> None:
    monkeypatch.setattr(
        "albumlink.core.deezer_client.requests.get",
        lambda *args, **kwargs: _Resp(200, {"error": {"type": "Exception", "message": "Quota limit exceeded"}}),
    )
    with pytest.raises(LinkResolutionError) as exc:
        deezer_client.search_albums("Abbey Road The Beatles", settings)
    assert "Quota" in exc.value.message


def test_deezer_search_parses_items(monkeypatch: pytest.MonkeyPatch, settings) -> None:
    monkeypatch.setattr(
        "albumlink.core.deezer_client.requests.get",
        lambda *args, **kwargs: _Resp(200, {"data": [{"id": 12047952, "link": "https://www.deezer.com/album/12047952"}]}),
    )
    out = deezer_client.search_albums("Abbey Road The Beatles", settings)
    assert out[0]["link"] == "https://www.deezer.com/album/12047952"


def test_musicbrainz_sends_user_agent_and_query(monkeypatch: pytest.MonkeyPatch, settings) -> None:
    seen = {}

    def fake_get(url, params, headers, timeout):
        seen.update(url=url, params=params, headers=headers)
        return _Resp(200, {"release-groups": [{"id": "rg1"}, {"title": "no id"}]})

    monkeypatch.setattr("albumlink.core.musicbrainz_client.requests.get", fake_get)
    out = musicbrainz_client.search_release_groups("Abbey Road", "The Beatles", settings)
    assert out == [{"id": "rg1"}]
    assert seen["url"].endswith("/release-group")
    assert seen["params"]["query"] == 'release:"Abbey Road" AND artist:"The Beatles"'
    assert seen["params"]["fmt"] == "json"
    assert "User-Agent" in seen["headers"]


def test_musicbrainz_find_relation_url() -> None:
    relations = [
        {"type": "discogs", "url": {"resource": "https://www.discogs.com/master/24047"}},
        {"type": "free streaming", "url": {"resource": "https://open.spotify.com/album/0ETF"}},
    ]
    assert musicbrainz_client.find_relation_url(relations, "open.spotify.com/album") == "https://open.spotify.com/album/0ETF"
    assert musicbrainz_client.find_relation_url([], "open.spotify.com/album") is None
