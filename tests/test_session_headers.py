from __future__ import annotations

import httpx
import pytest

from adapters.session_headers import TokenHeaderEnricher
from core.config import PathfinderSettings
from core.errors import AuthError, RequestBuildError
from core.interfaces.transport import HeaderEnricher


@pytest.mark.asyncio
async def test_adds_auth_headers():
    headers = httpx.Headers()

    await TokenHeaderEnricher("tok", client_token="ct", app_platform="WebPlayer").enrich(headers)

    assert headers["Authorization"] == "Bearer tok"
    assert headers["client-token"] == "ct"
    assert headers["App-Platform"] == "WebPlayer"


@pytest.mark.asyncio
async def test_client_token_is_optional():
    headers = httpx.Headers()

    await TokenHeaderEnricher("tok").enrich(headers)

    assert "client-token" not in headers


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "   "])
async def test_missing_token_raises_auth_error(token):
    with pytest.raises(AuthError) as exc_info:
        await TokenHeaderEnricher(token).enrich(httpx.Headers())

    assert isinstance(exc_info.value, RequestBuildError)


@pytest.mark.asyncio
async def test_from_settings():
    settings = PathfinderSettings(_env_file=None, access_token="abc", app_platform="Desktop")
    enricher = TokenHeaderEnricher.from_settings(settings)
    headers = httpx.Headers()

    await enricher.enrich(headers)

    assert isinstance(enricher, HeaderEnricher)
    assert headers["Authorization"] == "Bearer abc"
    assert headers["App-Platform"] == "Desktop"
