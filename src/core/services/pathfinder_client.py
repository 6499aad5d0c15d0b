"""Request executor for the pathfinder persisted-query endpoint.

Call shape:
- POST `<query_url>?operationName=<name>&variables=<json>&extensions=<json>`
  with an empty body; everything travels in the query string.
- Response body `{"data": ..., "extensions": ...}`; only `data` is returned.

The client holds no mutable state, so concurrent calls (e.g. several pages
at once) are safe. Retries, timeouts and connection pooling belong to the
transport or to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, to_json

from core.config import DEFAULT_QUERY_URL, PathfinderSettings
from core.domain.graphql import GraphQLEnvelope, OffsetLimit
from core.errors import DeserializationError, RequestBuildError, SerializationError
from core.interfaces.graphql_operation import GraphQLOperation
from core.interfaces.transport import HeaderEnricher, Transport
from core.services.operations import LibraryAlbumsOperation, LibraryAlbumsPage

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


def _encode_json(value: Any, *, operation_name: str, what: str) -> str:
    try:
        return to_json(value, by_alias=True).decode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(
            f"could not encode {what} for {operation_name} as JSON: {exc}",
            context={"operation_name": operation_name, "payload": what},
        ) from exc


def _format_loc(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _graphql_error_messages(payload: Any) -> list[str]:
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return []
    out: list[str] = []
    for err in errors:
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            out.append(err["message"])
    return out


class PathfinderClient:
    """Executes `GraphQLOperation`s against the persisted-query endpoint.

    Args:
        transport: sends the request and returns the body bytes.
        header_enricher: adds auth/session headers before every send.
        settings: only `query_url` is read here. Without settings the client
            targets `DEFAULT_QUERY_URL` and never reads the environment.
    """

    def __init__(
        self,
        transport: Transport,
        header_enricher: HeaderEnricher,
        *,
        settings: PathfinderSettings | None = None,
    ) -> None:
        self._transport = transport
        self._header_enricher = header_enricher
        self._query_url = settings.query_url if settings is not None else DEFAULT_QUERY_URL

    @property
    def query_url(self) -> str:
        return self._query_url

    def build_url(self, operation: GraphQLOperation[Any, Any, Any]) -> httpx.URL:
        """Endpoint URL with `operationName`, `variables` and `extensions` appended.

        Raises:
            SerializationError: variables or extensions are not JSON encodable.
            RequestBuildError: the configured endpoint is not a valid URL.
        """

        name = operation.operation_name
        variables = _encode_json(operation.variables(), operation_name=name, what="variables")
        extensions = _encode_json(operation.extensions(), operation_name=name, what="extensions")

        try:
            base = httpx.URL(self.query_url)
        except httpx.InvalidURL as exc:
            raise RequestBuildError(
                f"invalid query URL {self.query_url!r}: {exc}",
                context={"operation_name": name},
            ) from exc
        if base.scheme not in ("http", "https") or not base.host:
            raise RequestBuildError(
                f"invalid query URL {self.query_url!r}: absolute http(s) URL required",
                context={"operation_name": name},
            )

        params = list(base.params.multi_items())
        params += [("operationName", name), ("variables", variables), ("extensions", extensions)]
        return base.copy_with(params=params)

    async def build_request(self, operation: GraphQLOperation[Any, Any, Any]) -> httpx.Request:
        """Full POST request, headers enriched, empty body."""

        url = self.build_url(operation)
        headers = httpx.Headers({"Accept": "application/json"})
        await self._header_enricher.enrich(headers)
        logger.debug("Built %s request: POST %s", operation.operation_name, self.query_url)
        return httpx.Request("POST", url, headers=headers)

    async def graphql_request(self, operation: GraphQLOperation[Any, Any, ResponseT]) -> ResponseT:
        """Send `operation` and return the decoded `data` of the envelope.

        Raises:
            SerializationError, RequestBuildError: before anything is sent.
            TransportError: whatever the transport raised; nothing is decoded.
            DeserializationError: body is not JSON or does not match the model.
        """

        request = await self.build_request(operation)
        raw = await self._transport.send(request)
        return self.decode_response(operation, raw)

    def decode_response(self, operation: GraphQLOperation[Any, Any, ResponseT], raw: bytes) -> ResponseT:
        name = operation.operation_name
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise DeserializationError(
                f"{name}: response body is not valid JSON: {exc}",
                operation_name=name,
            ) from exc

        graphql_errors = _graphql_error_messages(payload)
        if graphql_errors:
            logger.warning("%s returned GraphQL errors: %s", name, "; ".join(graphql_errors))

        envelope_model = GraphQLEnvelope[operation.response_model]  # type: ignore[name-defined]
        try:
            envelope = envelope_model.model_validate(payload)
        except ValidationError as exc:
            first = exc.errors()[0]
            field_path = _format_loc(first["loc"])
            message = f"{name}: unexpected response at '{field_path}': {first['msg']}"
            if graphql_errors:
                message += f" (server errors: {'; '.join(graphql_errors)})"
            raise DeserializationError(
                message,
                operation_name=name,
                field_path=field_path,
                graphql_errors=graphql_errors,
                context={"error_count": exc.error_count()},
            ) from exc

        return envelope.data

    async def get_library_albums(self, offset_limit: OffsetLimit) -> LibraryAlbumsPage:
        """One page of the user's saved albums (`me.library.albums`)."""

        data = await self.graphql_request(LibraryAlbumsOperation(offset_limit))
        return data.me.library.albums
