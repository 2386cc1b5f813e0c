from __future__ import annotations

from typing import Any, Callable

import pytest

SETTINGS: dict[str, Any] = {
    "odesli": {"country": "US", "platform": "spotify", "timeout_sec": 15},
    "itunes": {"country": "US", "timeout_sec": 15},
    "lastfm": {"api_key_env": "LASTFM_API_KEY"},
}


@pytest.fixture
def settings() -> dict[str, Any]:
    return {key: dict(value) for key, value in SETTINGS.items()}


@pytest.fixture
def route_requests(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, Callable[..., Any]]], list[tuple[str, dict]]]:
    """Send ``requests.get`` calls to handlers keyed by URL prefix; returns the call log."""

    def install(handlers: dict[str, Callable[..., Any]]) -> list[tuple[str, dict]]:
        calls: list[tuple[str, dict]] = []

        def fake_get(url, params=None, headers=None, timeout=None, **kwargs):
            calls.append((url, dict(params or {})))
            for prefix, handler in handlers.items():
                if url.startswith(prefix):
                    return handler(url, params or {})
            raise AssertionError(f"Unexpected request to {url}")

        monkeypatch.setattr("requests.get", fake_get)
        return calls

    return install
