"""Logging setup.

Everything logs through stdlib loggers (`logging.getLogger(__name__)`); this
module only decides where records go. Records are rendered by Rich on stderr
so they never interleave with command output on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "pokedex-rich"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Install the Rich handler on the root logger once and set `level`."""

    root = logging.getLogger()
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    return root
