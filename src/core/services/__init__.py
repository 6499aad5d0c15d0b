"""Services: the request executor and the concrete operations it runs."""

from core.services.operations import LIBRARY_ALBUMS_SHA256, LibraryAlbumsOperation
from core.services.pathfinder_client import PathfinderClient

__all__ = [
    "LIBRARY_ALBUMS_SHA256",
    "LibraryAlbumsOperation",
    "PathfinderClient",
]
