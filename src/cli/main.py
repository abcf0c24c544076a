"""CLI entry point (Typer).

`pokedex` without a subcommand opens the interactive REPL; `pokedex doctor run`
checks configuration and connectivity.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.http_client import build_client
from adapters.pokeapi import PokeAPIClient
from cli import doctor
from cli.commands import CommandContext, build_registry
from cli.repl import run_repl
from cli.ui_components import print_banner
from core.catching import RandomSource
from core.config import AppSettings
from core.logging_setup import configure_logging
from core.session import Session

app = typer.Typer(
    help="Interactive Pokedex: browse locations, explore encounters and catch Pokemon.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")


def start_repl(
    settings: AppSettings,
    console: Console,
    *,
    read_line: Callable[[str], str] | None = None,
    rng: RandomSource | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Session:
    """Open one HTTP client, run the REPL with a fresh session and return it."""

    session = Session()
    registry = build_registry()
    with build_client(settings, transport=transport) as client:
        ctx = CommandContext(
            session=session,
            api=PokeAPIClient(settings, client=client),
            console=console,
            rng=rng or random.Random(),
            commands=registry,
        )
        run_repl(ctx, registry, prompt=settings.prompt, read_line=read_line)
    return session


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides POKEDEX_LOG_LEVEL.",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    """Start the Pokedex REPL."""

    overrides: dict[str, str] = {}
    if log_level:
        overrides["log_level"] = log_level.upper()
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        if log_level and fields == {"log_level"}:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        raise typer.BadParameter(f"invalid POKEDEX_* settings: {exc}") from exc

    configure_logging(settings.log_level)

    if ctx.invoked_subcommand is not None:
        return

    console = Console()
    if not no_banner:
        print_banner(console, settings)
    start_repl(settings, console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
