"""Doctor and config commands for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.endpoints.base import normalize_host
from adapters.http_client import build_async_client
from adapters.token_store import FileTokenBackend, SecureTokenStore
from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars
from core.domain.errors import MalformedRequestError

config_app = typer.Typer(no_args_is_help=True, help="Persisted client configuration.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.api_host)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"


def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Up Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        host = normalize_host(settings.api_host)
        table.add_row("API host", "OK", host)
        host_ok = True
    except MalformedRequestError as exc:
        table.add_row("API host", "FAIL", exc.message)
        host_ok = False

    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Page size", "OK", str(settings.page_size))

    token_path = settings.resolved_token_store_path()
    store = SecureTokenStore(FileTokenBackend(token_path))
    if store.has_tokens:
        table.add_row("Tokens", "OK", str(token_path))
    else:
        table.add_row("Tokens", "MISSING", "Not signed in")

    if offline or not host_ok:
        table.add_row("HTTP connectivity", "SKIPPED", "")
    else:
        ok_http, detail_http = asyncio.run(_check_http(settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    env_file = get_user_env_file()
    stored = read_user_env_vars(env_file)
    if stored:
        table.add_row("User config", "OK", f"{env_file} ({', '.join(sorted(stored))})")
    else:
        table.add_row("User config", "NONE", str(env_file))

    _console.print(table)


@config_app.command(name="set-host")
def set_host(url: str = typer.Argument(..., help="API base URL, e.g. https://api.example.com")) -> None:
    """Store the API host in the user config .env."""

    try:
        host = normalize_host(url)
    except MalformedRequestError as exc:
        raise typer.BadParameter(exc.message) from exc

    env_path = write_user_env_vars({"UP_API_HOST": host})
    _console.print(f"[green]Saved API host to:[/green] {env_path}")
