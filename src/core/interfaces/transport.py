"""Collaborators consumed by the executor: transport and header enrichment.

Both own their resources (connection pool, session/token state); the core
only calls them once per request.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """Sends a fully built request and returns the raw response body.

    Implementations raise `core.errors.TransportError` on connection failure,
    timeout or non-2xx status. Cancellation propagates unchanged.
    """

    async def send(self, request: httpx.Request) -> bytes: ...


@runtime_checkable
class HeaderEnricher(Protocol):
    """Adds auth/session headers in place; raises `core.errors.AuthError` on failure."""

    async def enrich(self, headers: httpx.Headers) -> None: ...
