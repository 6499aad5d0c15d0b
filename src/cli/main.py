"""pathfinder command line.

The CLI is an edge on top of the core client: it builds the httpx transport
and the token header enricher from `PathfinderSettings`, and implements the
paging loop the core leaves to callers.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.http_client import HttpxTransport, build_async_client
from adapters.json_exporter import export_page_json
from adapters.session_headers import TokenHeaderEnricher
from cli import doctor
from cli.ui_components import build_albums_table, print_banner
from core.config import PathfinderSettings
from core.domain.graphql import OffsetLimit, PageResponse
from core.domain.library import LibraryAlbum
from core.errors import PathfinderError
from core.logging_config import configure_logging
from core.services.pathfinder_client import PathfinderClient

app = typer.Typer(no_args_is_help=True, help="Client for the pathfinder persisted-query GraphQL API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


async def fetch_albums(
    *,
    settings: PathfinderSettings,
    offset_limit: OffsetLimit,
    fetch_all: bool = False,
) -> PageResponse[LibraryAlbum]:
    """Fetch one page, or every page from `offset_limit` on when `fetch_all`.

    With `fetch_all` the result is a single page holding all items, whose
    paging info is the first window requested.
    """

    async with build_async_client(settings) as http:
        client = PathfinderClient(
            HttpxTransport(http),
            TokenHeaderEnricher.from_settings(settings),
            settings=settings,
        )
        page = await client.get_library_albums(offset_limit)
        if not fetch_all:
            return page

        items = list(page.items)
        window = page.paging_info
        while page.has_more and page.items:
            window = window.next()
            page = await client.get_library_albums(window)
            items.extend(page.items)

    return PageResponse[LibraryAlbum](
        items=items,
        paging_info=offset_limit,
        total_count=page.total_count,
    )


@app.callback()
def _main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, "--log-level", help="Override PATHFINDER_LOG_LEVEL."),
) -> None:
    try:
        settings = PathfinderSettings()
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        _err_console.print(f"[red]Error:[/red] invalid configuration for {field}: {first['msg']}")
        raise typer.Exit(code=1) from exc
    ctx.obj = settings
    configure_logging(log_level or settings.log_level)


@app.command()
def albums(
    ctx: typer.Context,
    offset: int = typer.Option(0, min=0, help="Index of the first album."),
    limit: int = typer.Option(None, min=1, max=50, help="Page size (defaults to PATHFINDER_DEFAULT_PAGE_LIMIT)."),
    fetch_all: bool = typer.Option(False, "--all", help="Keep requesting pages until the library is exhausted."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the page as JSON to this path."),
) -> None:
    """List albums saved in the user's library."""

    settings: PathfinderSettings = ctx.obj
    window = OffsetLimit(offset=offset, limit=limit or settings.default_page_limit)

    try:
        page = asyncio.run(fetch_albums(settings=settings, offset_limit=window, fetch_all=fetch_all))
    except PathfinderError as exc:
        _err_console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        path = export_page_json(page=page, output_path=output)
        _err_console.print(f"[green]Saved page to:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(page.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
        return

    print_banner(_console)
    _console.print(build_albums_table(page.items, total_count=page.total_count))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
