"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar banner/tablas entre el REPL y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def print_banner(console: Console, settings: AppSettings) -> None:
    """Banner de arranque del REPL.

    Muestra contra qué API se juega la sesión y cómo empezar. Solo se imprime
    en modo interactivo; `--no-banner` lo omite para pipes y scripts.
    """

    lines = Text.assemble(
        ("POKEDEX", "bold red"),
        "\n",
        ("Explore locations, catch Pokemon, inspect your catches", "dim"),
        "\n\n",
        ("API: ", "dim"),
        (settings.api_base_url, "cyan"),
        (f"  ·  {settings.page_size} areas per page", "dim"),
        "\n",
        ("Type ", "dim"),
        ("help", "bold"),
        (" to list commands, ", "dim"),
        ("exit", "bold"),
        (" to leave.", "dim"),
    )
    console.print(Panel(Align.center(lines), border_style="red", padding=(1, 4)))


def build_doctor_table() -> Table:
    """Tabla de diagnóstico (check / estado / detalle)."""

    table = Table(title="Pokedex Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
