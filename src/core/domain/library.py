"""Library album entities returned by `fetchLibraryAlbums`.

Built only by deserializing one response; frozen and never cached.
"""

from __future__ import annotations

import re
from typing import Annotated, NamedTuple

from pydantic import AfterValidator, BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.dates import IsoStringDateTime
from core.domain.graphql import ItemsResponse

_CATALOG_URI_RE = re.compile(r"^spotify:(?P<item_type>[a-z_]+):(?P<item_id>[0-9A-Za-z]+)$")


class CatalogId(NamedTuple):
    item_type: str
    item_id: str


def parse_catalog_uri(uri: str) -> CatalogId:
    """Split `spotify:album:<base62>` into its type and id.

    Raises:
        ValueError: if `uri` is not a catalog URI.
    """

    match = _CATALOG_URI_RE.match(uri)
    if match is None:
        raise ValueError(f"not a catalog URI: {uri!r}")
    return CatalogId(match.group("item_type"), match.group("item_id"))


def _validate_catalog_uri(value: str) -> str:
    parse_catalog_uri(value)
    return value


CatalogUri = Annotated[str, AfterValidator(_validate_catalog_uri)]


class ArtistProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class AlbumArtist(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: CatalogUri
    profile: ArtistProfile


class CoverArtSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    width: int = Field(..., ge=0, le=65_535)
    height: int = Field(..., ge=0, le=65_535)


class CoverArt(BaseModel):
    model_config = ConfigDict(frozen=True)

    sources: list[CoverArtSource]


class LibraryAlbumData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    artists: ItemsResponse[AlbumArtist]
    cover_art: CoverArt = Field(..., alias="coverArt")
    date: IsoStringDateTime = Field(..., description="Release date.")


class LibraryAlbumRef(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uri: CatalogUri = Field(..., alias="_uri")
    data: LibraryAlbumData


class LibraryAlbum(BaseModel):
    """An album saved in the user's library, with the time it was added."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    added_at: IsoStringDateTime = Field(..., alias="addedAt")
    album: LibraryAlbumRef

    @property
    def catalog_id(self) -> CatalogId:
        return parse_catalog_uri(self.album.uri)

    @property
    def artist_names(self) -> list[str]:
        return [artist.profile.name for artist in self.album.data.artists.items]
