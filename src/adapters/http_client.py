"""httpx wrapper: client builder and the transport used by the executor.

Why a wrapper:
- Standardizes timeouts and User-Agent for every request.
- Maps httpx failures onto `core.errors.TransportError` so the core never
  depends on httpx exception types.
- Easy to test: pass an `httpx.AsyncClient` built on `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import PathfinderSettings
from core.errors import TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: PathfinderSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    The caller owns the client and closes it (`async with`).
    """

    settings = settings or PathfinderSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`core.interfaces.transport.Transport` on top of an `httpx.AsyncClient`.

    No retries: the first failure is raised as `TransportError`.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, request: httpx.Request) -> bytes:
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"timeout calling {request.url.host}: {exc}",
                context={"kind": "timeout"},
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"request to {request.url.host} failed: {exc}",
                context={"kind": type(exc).__name__},
            ) from exc

        logger.debug("pathfinder answered HTTP %s (%d bytes)", response.status_code, len(response.content))
        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {request.url.host}",
                status_code=response.status_code,
                context={"body": response.text[:500]},
            )
        return response.content
