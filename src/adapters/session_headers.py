"""Header enrichment with a pre-obtained access token.

Token acquisition and refresh live outside this project; this adapter only
copies what it is given into the request headers.
"""

from __future__ import annotations

import httpx

from core.config import PathfinderSettings
from core.errors import AuthError


class TokenHeaderEnricher:
    """Adds `Authorization`, `App-Platform` and (optionally) `client-token`."""

    def __init__(
        self,
        access_token: str | None = None,
        *,
        client_token: str | None = None,
        app_platform: str = "WebPlayer",
    ) -> None:
        self._access_token = (access_token or "").strip() or None
        self._client_token = (client_token or "").strip() or None
        self._app_platform = app_platform

    @classmethod
    def from_settings(cls, settings: PathfinderSettings) -> "TokenHeaderEnricher":
        return cls(
            settings.access_token,
            client_token=settings.client_token,
            app_platform=settings.app_platform,
        )

    async def enrich(self, headers: httpx.Headers) -> None:
        if not self._access_token:
            raise AuthError(
                "No access token configured (set PATHFINDER_ACCESS_TOKEN or run `pathfinder doctor setup-token`).",
            )
        headers["Authorization"] = f"Bearer {self._access_token}"
        headers["App-Platform"] = self._app_platform
        if self._client_token:
            headers["client-token"] = self._client_token
