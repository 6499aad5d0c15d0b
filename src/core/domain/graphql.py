"""Wire types shared by every pathfinder GraphQL operation (Pydantic v2).

Request side:
- `PersistedQuery` identifies a server-registered query by hash.
- `OffsetLimit` is the pagination window (also echoed back in responses).

Response side:
- `GraphQLEnvelope` is the outer `{data, extensions}` object.
- `MeResponse`/`LibraryResponse`/`AlbumsResponse`/`ItemsResponse`/`PageResponse`
  mirror the server's nesting ("me -> library -> X") so that different
  operations reuse the same wrappers.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1


class PersistedQueryInner(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: int = Field(default=1, ge=0, le=UINT32_MAX)
    sha256_hash: str = Field(
        ...,
        alias="sha256Hash",
        pattern=r"^[0-9a-f]{64}$",
        description="Hash the server registered for the operation name.",
    )


class PersistedQuery(BaseModel):
    """Request `extensions` payload: `{"persistedQuery": {"version", "sha256Hash"}}`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    persisted_query: PersistedQueryInner = Field(..., alias="persistedQuery")

    @classmethod
    def for_hash(cls, sha256_hash: str, version: int = 1) -> "PersistedQuery":
        return cls(persisted_query=PersistedQueryInner(version=version, sha256_hash=sha256_hash))


class OffsetLimit(BaseModel):
    """Pagination window. `limit > 0` is left to the caller."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0, le=UINT32_MAX)
    limit: int = Field(default=25, ge=0, le=UINT32_MAX)

    def next(self) -> "OffsetLimit":
        """Window right after this one, same size."""

        return OffsetLimit(offset=self.offset + self.limit, limit=self.limit)


class GraphQLEnvelope(BaseModel, Generic[T]):
    """Outer contract of every GraphQL HTTP response.

    `extensions` (server tracing/debug info) must be present, but its content
    is dropped; it never has the shape of the request-side extensions.
    `errors` is kept raw: messages are only read for error reporting.
    """

    model_config = ConfigDict(frozen=True)

    data: T
    extensions: Any = Field(...)
    errors: Any = None


class MeResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    me: T


class LibraryResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    library: T


class AlbumsResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    albums: T


class ItemsResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    items: list[T]


class PageResponse(BaseModel, Generic[T]):
    """One page of a paginated collection.

    `total_count` is the number of items available server-side; callers page
    with `paging_info.next()` while `has_more` is true.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: list[T]
    paging_info: OffsetLimit = Field(..., alias="pagingInfo")
    total_count: int = Field(..., alias="totalCount", ge=0, le=UINT64_MAX)

    @property
    def has_more(self) -> bool:
        return self.paging_info.offset + len(self.items) < self.total_count
