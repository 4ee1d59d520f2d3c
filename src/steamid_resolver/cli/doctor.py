"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from steamid_resolver.adapters.http_client import HttpxFetcher
from steamid_resolver.core.config import (
    ResolverSettings,
    get_user_env_file,
    read_user_env_vars,
    write_user_env_vars,
)
from steamid_resolver.core.errors import SteamAPIError
from steamid_resolver.core.log import debug_enabled

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: ResolverSettings) -> tuple[bool, str]:
    try:
        result = await HttpxFetcher(settings).fetch(url)
    except SteamAPIError as exc:
        return False, str(exc)
    return result.ok, f"HTTP {result.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = ResolverSettings()

    table = Table(title="steamid-resolver Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row(
        "Retries",
        "OK",
        f"{settings.max_retries} attempts, backoff {settings.retry_base_delay_seconds:g}s x attempt",
    )
    table.add_row("Debug log", "ON" if debug_enabled(settings) else "OFF", "DEBUG=steamid-resolver")

    env_file = get_user_env_file()
    user_vars = read_user_env_vars(env_file)
    table.add_row(
        "User config",
        "OK" if env_file.exists() else "NONE",
        f"{env_file} ({len(user_vars)} keys)",
    )

    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = ResolverSettings()

    timeout = typer.prompt("HTTP timeout (seconds)", default=current.http_timeout_seconds, type=float)
    retries = typer.prompt("Max attempts per lookup", default=current.max_retries, type=int)
    base_delay = typer.prompt(
        "Retry base delay (seconds)",
        default=current.retry_base_delay_seconds,
        type=float,
    )
    user_agent = typer.prompt("User-Agent", default=current.user_agent).strip()

    if timeout <= 0:
        raise typer.BadParameter("timeout must be > 0")
    if not 1 <= retries <= 10:
        raise typer.BadParameter("max attempts must be between 1 and 10")
    if base_delay < 0:
        raise typer.BadParameter("retry base delay must be >= 0")

    env_path = write_user_env_vars(
        {
            "STEAMID_RESOLVER_HTTP_TIMEOUT_SECONDS": str(timeout),
            "STEAMID_RESOLVER_MAX_RETRIES": str(retries),
            "STEAMID_RESOLVER_RETRY_BASE_DELAY_SECONDS": str(base_delay),
            "STEAMID_RESOLVER_USER_AGENT": user_agent,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
