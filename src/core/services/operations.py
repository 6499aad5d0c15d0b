"""Concrete persisted-query operations.

Each class implements `core.interfaces.graphql_operation.GraphQLOperation`
once: operation name, variables, extensions and the response model graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from core.domain.graphql import (
    AlbumsResponse,
    LibraryResponse,
    MeResponse,
    OffsetLimit,
    PageResponse,
    PersistedQuery,
)
from core.domain.library import LibraryAlbum

LIBRARY_ALBUMS_SHA256 = "e18c65b7c99cd9c92545c6aa7d463170760bed0123ac01d85caca1fc3ff2ab67"

LibraryAlbumsPage = PageResponse[LibraryAlbum]
LibraryAlbumsData = MeResponse[LibraryResponse[AlbumsResponse[LibraryAlbumsPage]]]


@dataclass(frozen=True)
class LibraryAlbumsOperation:
    """`fetchLibraryAlbums`: one page of albums saved in the user's library."""

    offset_limit: OffsetLimit

    operation_name: ClassVar[str] = "fetchLibraryAlbums"
    response_model: ClassVar[type[LibraryAlbumsData]] = LibraryAlbumsData

    def variables(self) -> OffsetLimit:
        return self.offset_limit

    def extensions(self) -> PersistedQuery:
        return PersistedQuery.for_hash(LIBRARY_ALBUMS_SHA256, version=1)
