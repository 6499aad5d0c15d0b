"""CLI UI components (Rich).

Kept apart from the commands so tables/panels can be reused and tested.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.library import LibraryAlbum


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in --json mode)."""

    title = Text("pathfinder", style="bold cyan")
    subtitle = Text("Library albums • persisted GraphQL queries", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_albums_table(albums: Iterable[LibraryAlbum], *, total_count: int | None = None) -> Table:
    """Rich table with one row per saved album."""

    caption = f"{total_count} albums in library" if total_count is not None else None
    table = Table(title="Library Albums", caption=caption)
    table.add_column("Added", style="dim", no_wrap=True)
    table.add_column("Album", style="cyan")
    table.add_column("Artists", style="white")
    table.add_column("Released", style="green", no_wrap=True)
    table.add_column("URI", style="magenta")

    for entry in albums:
        data = entry.album.data
        table.add_row(
            entry.added_at.strftime("%Y-%m-%d"),
            data.name,
            ", ".join(entry.artist_names),
            data.date.strftime("%Y-%m-%d"),
            entry.album.uri,
        )
    return table
