"""Show the public holidays the validator would see for a year."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from bookday.cli.deps import get_container
from bookday.domain import Holiday
from bookday.holidays import HolidayLookupError

app = typer.Typer(help="Inspect public holidays from the configured source")
console = Console()


_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


async def _fetch(year: int, country: str) -> list[Holiday]:
    container = get_container()
    return await container.holiday_client.fetch_holidays(year, country)


@app.command()
def main(
    year: int,
    country: str | None = typer.Option(None, help="Override the configured country code"),
) -> None:
    """Print a table of holidays for YEAR."""

    settings = get_container().settings
    country_code = (country or settings.holiday_country_code).upper()

    try:
        holidays = asyncio.run(_fetch(year, country_code))
    except HolidayLookupError as exc:
        console.print(f"[red]Holiday lookup failed: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    if not holidays:
        console.print(f"[yellow]No public holidays published for {country_code} {year}[/yellow]")
        return

    table = Table(title=f"Public holidays {country_code} {year}")
    table.add_column("Date", style="cyan")
    table.add_column("Weekday")
    table.add_column("Name")
    table.add_column("Local name", style="dim")
    table.add_column("Nationwide")
    for holiday in sorted(holidays, key=lambda item: item.date):
        table.add_row(
            holiday.date.isoformat(),
            holiday.date.strftime("%A"),
            holiday.name,
            holiday.local_name,
            "yes" if holiday.global_ else "[dim]regional[/dim]",
        )
    console.print(table)


if __name__ == "__main__":
    app()
