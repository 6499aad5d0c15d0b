"""Error hierarchy for the pathfinder client.

Every failure is terminal for the call that raised it: there is no partial
result and no local retry. Callers that want backoff wrap the client.
"""

from __future__ import annotations

from typing import Any


class PathfinderError(Exception):
    """Base error for every failure raised by the client.

    Attributes:
        context: Extra details for debugging (operation name, status code, ...).
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}


class SerializationError(PathfinderError):
    """Variables or extensions could not be encoded as JSON."""


class RequestBuildError(PathfinderError):
    """The HTTP request could not be built (bad URL, header enrichment)."""


class AuthError(RequestBuildError):
    """Header enrichment failed, typically because no token is available."""


class TransportError(PathfinderError):
    """Network failure, timeout or non-2xx answer from the transport."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.status_code = status_code


class DeserializationError(PathfinderError):
    """The response body did not match the expected schema.

    `field_path` points at the first failing field (e.g.
    `data.me.library.albums.items.0.addedAt`) and `graphql_errors` holds any
    messages the server put in the envelope's `errors` list.
    """

    def __init__(
        self,
        message: str,
        *,
        operation_name: str | None = None,
        field_path: str | None = None,
        graphql_errors: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.operation_name = operation_name
        self.field_path = field_path
        self.graphql_errors = graphql_errors or []
