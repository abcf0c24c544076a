"""Read-eval-print loop.

One line at a time: read, tokenize, look up the command, run it. A command
failure is printed and the loop continues; only `exit` (which raises
`typer.Exit`) or end of input stops it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from rich.text import Text

from cli.commands import Command, CommandContext
from core.errors import PokedexError
from core.tokenizer import clean_input

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Pokedex > "


def _console_reader(ctx: CommandContext) -> Callable[[str], str]:
    # The prompt is user-configurable: render it literally, never as markup.
    def read_line(prompt: str) -> str:
        return ctx.console.input(Text(prompt))

    return read_line


def run_repl(
    ctx: CommandContext,
    registry: Mapping[str, Command],
    *,
    prompt: str = DEFAULT_PROMPT,
    read_line: Callable[[str], str] | None = None,
) -> None:
    """Run the loop until end of input.

    `read_line(prompt)` must raise `EOFError` when input is exhausted; it
    defaults to `ctx.console.input` with the prompt rendered literally.
    """

    if read_line is None:
        read_line = _console_reader(ctx)

    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            ctx.say()
            logger.debug("Input closed, leaving the REPL")
            return

        words = clean_input(line)
        if not words:
            continue

        name, args = words[0], words[1:]
        command = registry.get(name)
        if command is None:
            ctx.say("unknown command")
            continue

        logger.debug("Dispatching %s %s", name, args)
        try:
            command.handler(ctx, args)
        except PokedexError as exc:
            logger.debug("Command %s failed", name, exc_info=True)
            ctx.say(f"Error: {exc}")
