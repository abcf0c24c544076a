"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde: una respuesta de la PokeAPI que no
  encaja con la forma esperada falla al decodificar, antes de tocar la sesión.
- Solo se modelan los campos que usamos; el resto se ignora.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class NamedResource(BaseModel):
    """Referencia `{name, url}` usada en todos los listados de la PokeAPI."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Identificador legible del recurso.")
    url: str = Field(default="", description="URL canónica del recurso.")


class LocationAreaPage(BaseModel):
    """Página del listado `location-area` (respuesta paginada)."""

    model_config = ConfigDict(extra="ignore")

    next: str | None = Field(
        default=None,
        description="Cursor a la página siguiente (None si es la última).",
    )
    previous: str | None = Field(
        default=None,
        description="Cursor a la página anterior (None si es la primera).",
    )
    results: list[NamedResource] = Field(
        default_factory=list,
        description="Location-areas de esta página, en orden del listado.",
    )


class PokemonEncounter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pokemon: NamedResource


class LocationAreaDetail(BaseModel):
    """Detalle de una location-area: solo nos interesan los encuentros."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="", description="Nombre de la location-area.")
    pokemon_encounters: list[PokemonEncounter] = Field(
        default_factory=list,
        description="Encuentros posibles, en el orden devuelto por la fuente.",
    )

    def pokemon_names(self) -> list[str]:
        return [encounter.pokemon.name for encounter in self.pokemon_encounters]


class PokemonStat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    stat: NamedResource
    base_stat: int


class PokemonType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slot: int = 0
    type: NamedResource


class PokemonDetail(BaseModel):
    """Detalle de un Pokémon tal como lo sirve `/pokemon/{name}`."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    base_experience: int = Field(
        default=0,
        description="Experiencia base; algunas formas la devuelven como null.",
    )
    height: int = Field(default=0, description="Altura en decímetros.")
    weight: int = Field(default=0, description="Peso en hectogramos.")
    stats: list[PokemonStat] = Field(default_factory=list)
    types: list[PokemonType] = Field(default_factory=list)

    @field_validator("base_experience", mode="before")
    @classmethod
    def _null_experience_is_zero(cls, value: object) -> object:
        return 0 if value is None else value

    def to_record(self) -> CreatureRecord:
        """Aplana el detalle en el registro que guarda la sesión."""

        return CreatureRecord(
            name=self.name,
            base_experience=self.base_experience,
            height=self.height,
            weight=self.weight,
            stats={entry.stat.name: entry.base_stat for entry in self.stats},
            types=tuple(entry.type.name for entry in self.types),
        )


class CreatureRecord(BaseModel):
    """Pokémon capturado.

    Se crea una vez al capturar y no se modifica después; volver a capturar el
    mismo nombre reemplaza el registro entero.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: dict[str, int] = Field(
        default_factory=dict,
        description="Stat -> valor base. El orden de iteración no es un contrato.",
    )
    types: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Tipos en el orden de slot de la fuente.",
    )
