"""steamid-resolver CLI (Typer).

Commands are thin: build settings, run one lookup coroutine, render with Rich.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Coroutine, Optional, TypeVar

import typer
from rich.console import Console

from steamid_resolver.adapters.json_exporter import export_record_json
from steamid_resolver.api.group import fetch_group
from steamid_resolver.api.profile import fetch_profile
from steamid_resolver.api.utility import is_valid_sharedfile_id
from steamid_resolver.cli import doctor
from steamid_resolver.cli.ui_components import build_group_table, build_profile_table, print_banner
from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.errors import SteamAPIError
from steamid_resolver.core.log import configure_logging

T = TypeVar("T")

app = typer.Typer(
    no_args_is_help=True,
    help="Resolve Steam Community profiles, groups and sharedfiles.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _run_lookup(coro: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(coro)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except SteamAPIError as exc:
        _console.print(f"[red]{exc.code.value}[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _settings(ctx: typer.Context) -> ResolverSettings:
    if isinstance(ctx.obj, ResolverSettings):
        return ctx.obj
    return ResolverSettings()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Print debug traces (same as DEBUG=steamid-resolver)."),
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    settings = ResolverSettings()
    if debug:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(settings)
    ctx.obj = settings
    if banner:
        print_banner(_console)


@app.command()
def profile(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="steamID64, customURL or full profile URL."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also write the profile as JSON."),
) -> None:
    """Show a Steam profile."""

    record = _run_lookup(fetch_profile(identifier, settings=_settings(ctx)))
    _console.print(build_profile_table(record))
    if json_path is not None:
        out = export_record_json(record=record, output_path=json_path)
        _console.print(f"[green]JSON saved to:[/green] {out}")


@app.command()
def group(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Group URL name or full group URL."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also write the group as JSON."),
) -> None:
    """Show a Steam group (first member page)."""

    record = _run_lookup(fetch_group(identifier, settings=_settings(ctx)))
    _console.print(build_group_table(record))
    if json_path is not None:
        out = export_record_json(record=record, output_path=json_path)
        _console.print(f"[green]JSON saved to:[/green] {out}")


@app.command()
def sharedfile(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Sharedfile ID or full sharedfile URL."),
) -> None:
    """Check whether a sharedfile exists."""

    exists = _run_lookup(is_valid_sharedfile_id(identifier, settings=_settings(ctx)))
    if exists:
        _console.print(f"[green]Sharedfile exists:[/green] {identifier}")
    else:
        _console.print(f"[yellow]Sharedfile not found:[/yellow] {identifier}")
        raise typer.Exit(code=1)


def run() -> None:
    app()
