"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Company, Page, Review, SearchedCompany, TokenPair


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Why here:
    - Avoids circular imports (main <-> doctor).
    - Lets non-interactive modes skip it.
    """

    title = Text("Up", style="bold cyan")
    subtitle = Text("Company reviews • Search • Account", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def mask_token(token: str | None) -> str:
    if not token:
        return "-"
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}…{token[-4:]}"


def build_tokens_table(pair: TokenPair | None) -> Table:
    table = Table(title="Stored tokens")
    table.add_column("Token", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("access", mask_token(pair.access_token if pair else None))
    table.add_row("refresh", mask_token(pair.refresh_token if pair else None))
    return table


def build_company_panel(company: Company) -> Panel:
    body = Text()
    body.append(f"{company.address.display_text}\n")
    body.append(f"Rating: {company.total_rating:.1f}")
    if company.is_followed:
        body.append("  (following)", style="green")
    if company.permission_date:
        body.append(f"\nPermitted: {company.permission_date:%Y-%m-%d}", style="dim")
    body.append(
        f"\nLocation: {company.coordinate.latitude:.4f}, {company.coordinate.longitude:.4f}",
        style="dim",
    )
    title = Text(f"#{company.id} {company.name}", style="bold yellow")
    return Panel(body, title=title, border_style="yellow")


def build_reviews_table(page: Page[Review]) -> Table:
    table = Table(title=f"Reviews (page {page.current_page})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Rating", style="green", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Job", style="cyan")
    table.add_column("Likes", justify="right")
    table.add_column("Comments", justify="right")
    for review in page.items:
        table.add_row(
            str(review.id),
            review.rating.display_text,
            review.title,
            review.job,
            str(review.like_count),
            str(review.comment_count),
        )
    return table


def build_search_table(page: Page[SearchedCompany], keyword: str) -> Table:
    total = f", {page.total_count} total" if page.total_count else ""
    table = Table(title=f"Search: {keyword!r} (page {page.current_page}{total})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="white")
    table.add_column("Rating", style="green", no_wrap=True)
    table.add_column("Distance", justify="right")
    for company in page.items:
        table.add_row(
            str(company.id),
            company.name,
            company.address,
            f"{company.total_rating:.1f}",
            company.distance,
        )
    return table
