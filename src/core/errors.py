"""Error kinds surfaced by network commands.

Adapters translate httpx and pydantic failures into these; the REPL catches
`PokedexError` and prints `Error: <message>` without stopping the loop.
"""

from __future__ import annotations


class PokedexError(Exception):
    """Base class for failures a command reports back to the REPL."""


class TransportError(PokedexError):
    """The request could not be sent or the response could not be received."""


class HTTPStatusError(PokedexError):
    """The API answered with a non-success status."""

    def __init__(self, *, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        message = f"bad response: {status_code} {reason}"
        if body:
            message = f"{message} - {body}"
        super().__init__(message)


class DecodeError(PokedexError):
    """The response body does not match the expected shape."""
