"""Command table and handlers for the REPL.

Every handler has the signature `handler(ctx, args)`, where `args` are the
tokens after the command name. Handlers print through `ctx.console` and let
`PokedexError` propagate; the REPL reports it. Session mutations happen only
after a request fully succeeds.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

import typer
from rich.console import Console

from adapters.pokeapi import PokeAPIClient
from core.catching import RandomSource, attempt_catch, catch_probability
from core.session import Session

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """What a handler can touch: the session, the API, the console, the dice."""

    session: Session
    api: PokeAPIClient
    console: Console = field(default_factory=Console)
    rng: RandomSource = field(default_factory=random.Random)
    commands: Mapping[str, Command] = field(default_factory=dict)

    def say(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


Handler = Callable[[CommandContext, Sequence[str]], None]


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    handler: Handler


def _joined(args: Sequence[str]) -> str:
    # Multi-word names map to PokeAPI's hyphenated identifiers.
    return "-".join(args)


def command_help(ctx: CommandContext, args: Sequence[str]) -> None:
    ctx.say("Welcome to the Pokedex!")
    ctx.say("Usage:")
    ctx.say()
    for command in ctx.commands.values():
        ctx.say(f"{command.name}: {command.description}")


def command_exit(ctx: CommandContext, args: Sequence[str]) -> None:
    ctx.say("Closing the Pokedex... Goodbye!")
    raise typer.Exit(code=0)


def _show_page(ctx: CommandContext, url: str | None) -> None:
    page = ctx.api.fetch_location_page(url)
    for location in page.results:
        ctx.say(location.name)
    ctx.session.apply_page(page)


def command_map(ctx: CommandContext, args: Sequence[str]) -> None:
    _show_page(ctx, ctx.session.next_url)


def command_map_back(ctx: CommandContext, args: Sequence[str]) -> None:
    if not ctx.session.previous_url:
        ctx.say("No previous page available.")
        return
    _show_page(ctx, ctx.session.previous_url)


def command_explore(ctx: CommandContext, args: Sequence[str]) -> None:
    if not args:
        ctx.say("Usage: explore <location-name>")
        return

    location = _joined(args)
    area = ctx.api.fetch_location_area(location)
    names = area.pokemon_names()
    if not names:
        ctx.say("No Pokemon found in this location.")
        return

    ctx.say(f"Pokemon in {location}:")
    for name in names:
        ctx.say(f"- {name}")


def command_catch(ctx: CommandContext, args: Sequence[str]) -> None:
    if not args:
        ctx.say("Usage: catch <pokemon-name>")
        return

    pokemon = ctx.api.fetch_pokemon(_joined(args))
    ctx.say(f"Throwing a Pokeball at {pokemon.name}...")

    logger.debug(
        "Catch chance for %s (base_experience=%s): %.1f%%",
        pokemon.name,
        pokemon.base_experience,
        catch_probability(pokemon.base_experience),
    )
    if not attempt_catch(pokemon.base_experience, ctx.rng):
        ctx.say(f"{pokemon.name} escaped!")
        return

    ctx.session.record_catch(pokemon.to_record())
    ctx.say(f"{pokemon.name} was caught!")
    ctx.say("You may now inspect it with the inspect command.")


def command_inspect(ctx: CommandContext, args: Sequence[str]) -> None:
    if not args:
        ctx.say("Usage: inspect <pokemon-name>")
        return

    record = ctx.session.lookup(_joined(args))
    if record is None:
        ctx.say("you have not caught that pokemon")
        return

    ctx.say(f"Name: {record.name}")
    ctx.say(f"Height: {record.height}")
    ctx.say(f"Weight: {record.weight}")
    ctx.say("Stats:")
    for stat_name, value in record.stats.items():
        ctx.say(f"  -{stat_name}: {value}")
    ctx.say("Types:")
    for type_name in record.types:
        ctx.say(f"  - {type_name}")


def command_pokedex(ctx: CommandContext, args: Sequence[str]) -> None:
    names = ctx.session.caught_names()
    if not names:
        ctx.say("Your Pokedex is empty.")
        return

    ctx.say("Your Pokedex:")
    for name in names:
        ctx.say(f"  - {name}")


def build_registry() -> Mapping[str, Command]:
    """Build the read-only command table.

    Help lists commands in the order below; that order is incidental.
    """

    commands = (
        Command("help", "List all available commands", command_help),
        Command("exit", "Exit the Pokedex", command_exit),
        Command("map", "Displays the next page of 20 maps", command_map),
        Command("mapb", "Displays the previous page of 20 maps", command_map_back),
        Command("explore", "Displays all available pokemon in the location given", command_explore),
        Command("catch", "Try to catch a Pokemon by name", command_catch),
        Command("inspect", "Shows detailed information about a caught Pokemon", command_inspect),
        Command("pokedex", "Lists every Pokemon you have caught", command_pokedex),
    )
    return MappingProxyType({command.name: command for command in commands})
