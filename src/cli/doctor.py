"""Doctor commands for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import PathfinderSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: PathfinderSettings) -> tuple[bool, str]:
    # Any HTTP answer (even 401/405) proves the endpoint is reachable.
    try:
        async with build_async_client(settings) as client:
            response = await client.head(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings: PathfinderSettings = ctx.obj or PathfinderSettings()

    table = Table(title="pathfinder doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Query URL", "OK", settings.query_url)
    if settings.access_token:
        table.add_row("Access token", "OK", "Authorization header will be sent")
    else:
        table.add_row("Access token", "MISSING", "Run `pathfinder doctor setup-token`")
    table.add_row("Client token", "OK" if settings.client_token else "OPTIONAL", "client-token header")
    table.add_row("App platform", "OK", settings.app_platform)

    ok_http, detail_http = asyncio.run(_check_http(settings.query_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.access_token:
        _console.print(
            "\n[yellow]Note:[/yellow] tokens are not refreshed by this tool; paste a fresh one when it expires."
        )


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive token setup (stores config in the user config .env)."""

    access_token = typer.prompt("Access token", hide_input=True).strip()
    client_token = typer.prompt("Client token (optional)", default="", show_default=False).strip()

    if not access_token:
        raise typer.BadParameter("access token is required")

    env_path = write_user_env_vars(
        {
            "PATHFINDER_ACCESS_TOKEN": access_token,
            "PATHFINDER_CLIENT_TOKEN": client_token or None,
        }
    )

    _console.print(f"[green]Saved token config to:[/green] {env_path}")
