"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/PokeAPI) y el REPL lean config de forma consistente.

Los defaults apuntan a la PokeAPI pública: ninguna variable es obligatoria.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        min_length=8,
        description="Base URL de la PokeAPI (sin barra final).",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Número de location-areas por página en `map`/`mapb`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="pokedex-cli/0.1",
        min_length=1,
        description="User-Agent enviado a la PokeAPI.",
    )
    prompt: str = Field(
        default="Pokedex > ",
        min_length=1,
        description="Prompt mostrado por el REPL.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging (stderr).",
    )

    def first_page_url(self) -> str:
        """URL inicial del listado paginado de location-areas."""

        return f"{self.api_base_url.rstrip('/')}/location-area?offset=0&limit={self.page_size}"
