"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.pokeapi import PokeAPIClient
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.errors import PokedexError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings, api: PokeAPIClient | None = None) -> tuple[bool, str]:
    """Fetch the first location page the way `map` would."""

    try:
        if api is not None:
            page = api.fetch_location_page()
        else:
            with PokeAPIClient(settings) as owned:
                page = owned.fetch_location_page()
    except PokedexError as exc:
        return False, str(exc)
    return True, f"{len(page.results)} location areas on the first page"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured API."""

    settings = AppSettings()

    table = build_doctor_table()
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Page size", "OK", str(settings.page_size))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] Set POKEDEX_API_BASE_URL if you are using a mirror of the PokeAPI."
        )
        raise typer.Exit(code=1)
