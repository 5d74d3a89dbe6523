"""`up` developer CLI (typer + rich).

Commands stay thin: they build the service graph, call one facade and render
the result. `UpError`s are caught here, at the edge, and turned into a
message plus a non-zero exit code.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from adapters.token_store import FileTokenBackend, SecureTokenStore
from cli import doctor
from cli.ui_components import (
    build_company_panel,
    build_reviews_table,
    build_search_table,
    build_tokens_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.enums import SearchTheme
from core.domain.errors import ReauthenticationRequired, UpError
from core.domain.models import SEOUL_CITY_HALL
from core.logger import configure_logging
from core.services.app_services import AppServices, build_services

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Up company-review API client.")
tokens_app = typer.Typer(no_args_is_help=True, help="Inspect or clear the stored token pair.")
company_app = typer.Typer(no_args_is_help=True, help="Company details and reviews.")

app.add_typer(tokens_app, name="tokens")
app.add_typer(company_app, name="company")
app.add_typer(doctor.config_app, name="config")
app.command(name="doctor")(doctor.run)

_console = Console()


@app.callback()
def main(
    banner: bool = typer.Option(False, "--banner", help="Print the banner first."),
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level, settings.log_file)
    if banner:
        print_banner(_console)


def _run(mock: bool, action: Callable[[AppServices], Awaitable[T]]) -> T:
    async def runner() -> T:
        async with build_services(mock=mock) as services:
            return await action(services)

    try:
        return asyncio.run(runner())
    except ReauthenticationRequired as exc:
        _console.print(f"[red]Sign-in required:[/red] {exc.message or type(exc).__name__}")
        raise typer.Exit(code=2) from exc
    except UpError as exc:
        _console.print(f"[red]Request failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _token_store() -> SecureTokenStore:
    return SecureTokenStore(FileTokenBackend(AppSettings().resolved_token_store_path()))


@tokens_app.command("show")
def tokens_show() -> None:
    """Show the stored tokens (masked)."""

    _console.print(build_tokens_table(_token_store().get_tokens()))


@tokens_app.command("clear")
def tokens_clear() -> None:
    """Forget the stored tokens."""

    _token_store().clear()
    _console.print("[green]Tokens cleared.[/green]")


@company_app.command("show")
def company_show(
    company_id: int = typer.Argument(..., help="Company id."),
    page: int = typer.Option(1, "--page", min=1, help="Review page (1-based)."),
    mock: bool = typer.Option(False, "--mock", help="Use fixed sample data (no network)."),
) -> None:
    """Show a company and one page of its reviews."""

    async def action(services: AppServices):
        company = await services.company.fetch_company(company_id)
        reviews = await services.company.fetch_reviews(company_id, page)
        return company, reviews

    company, reviews = _run(mock, action)
    _console.print(build_company_panel(company))
    _console.print(build_reviews_table(reviews))
    if reviews.has_next:
        _console.print(f"[dim]More reviews: --page {reviews.next_page}[/dim]")


@app.command()
def search(
    keyword: str = typer.Argument(..., help="Company name keyword."),
    theme: SearchTheme = typer.Option(SearchTheme.KEYWORD, "--theme", help="Search scope."),
    latitude: float = typer.Option(SEOUL_CITY_HALL.latitude, "--lat"),
    longitude: float = typer.Option(SEOUL_CITY_HALL.longitude, "--lng"),
    page: int = typer.Option(1, "--page", min=1),
    mock: bool = typer.Option(False, "--mock", help="Use fixed sample data (no network)."),
) -> None:
    """Search companies and remember the term."""

    async def action(services: AppServices):
        result = await services.search.fetch_searched_companies(theme, keyword, latitude, longitude, page)
        services.recent_searches.add(keyword)
        return result

    result = _run(mock, action)
    _console.print(build_search_table(result, keyword))


def run() -> None:
    app()
