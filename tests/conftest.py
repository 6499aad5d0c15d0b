"""Shared fixtures: canned pathfinder payloads and fake collaborators."""

from __future__ import annotations

import copy
import json
from typing import Any

import httpx
import pytest

from core.config import PathfinderSettings
from core.errors import TransportError

QUERY_URL = "https://api-partner.spotify.com/pathfinder/v1/query"

ALBUM_ITEM: dict[str, Any] = {
    "addedAt": {"isoString": "2020-11-07T03:27:58Z"},
    "album": {
        "_uri": "spotify:album:4aawyAB9vmqN3uQ7FjRGTy",
        "data": {
            "name": "Global Warming",
            "artists": {
                "items": [
                    {
                        "uri": "spotify:artist:0TnOYISbd1XYRBk9myaseg",
                        "profile": {"name": "Pitbull"},
                    }
                ]
            },
            "coverArt": {
                "sources": [
                    {"url": "https://i.scdn.co/image/ab67616d00001e02", "width": 300, "height": 300},
                    {"url": "https://i.scdn.co/image/ab67616d0000b273", "width": 640, "height": 640},
                ]
            },
            "date": {"isoString": "2012-11-16T00:00:00Z"},
        },
    },
}


def library_albums_envelope(
    items: list[dict[str, Any]] | None = None,
    *,
    offset: int = 0,
    limit: int = 25,
    total_count: int | None = None,
) -> dict[str, Any]:
    items = copy.deepcopy(items or [])
    return {
        "data": {
            "me": {
                "library": {
                    "albums": {
                        "items": items,
                        "pagingInfo": {"offset": offset, "limit": limit},
                        "totalCount": len(items) if total_count is None else total_count,
                    }
                }
            }
        },
        "extensions": {},
    }


class FakeTransport:
    """Returns canned bytes (or raises) and records every request."""

    def __init__(self, body: bytes | dict[str, Any] | None = None, error: Exception | None = None) -> None:
        if isinstance(body, dict):
            body = json.dumps(body).encode("utf-8")
        self.body = body or b""
        self.error = error
        self.requests: list[httpx.Request] = []

    async def send(self, request: httpx.Request) -> bytes:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.body


class StaticHeaders:
    def __init__(self, token: str = "test-token") -> None:
        self.token = token
        self.calls = 0

    async def enrich(self, headers: httpx.Headers) -> None:
        self.calls += 1
        headers["Authorization"] = f"Bearer {self.token}"


@pytest.fixture
def settings() -> PathfinderSettings:
    return PathfinderSettings(_env_file=None, query_url=QUERY_URL, access_token="test-token")


@pytest.fixture
def album_item() -> dict[str, Any]:
    return copy.deepcopy(ALBUM_ITEM)


@pytest.fixture
def connection_refused() -> TransportError:
    return TransportError("request to api-partner.spotify.com failed: [Errno 111] Connection refused")
