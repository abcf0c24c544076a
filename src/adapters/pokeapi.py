"""Adaptador de la PokeAPI.

Cada método hace una única petición GET y decodifica una única forma de
respuesta con los modelos del dominio. Si la forma no encaja, se levanta
`DecodeError`: la sesión solo se toca con respuestas completas.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_client, get_json
from core.config import AppSettings
from core.domain.models import LocationAreaDetail, LocationAreaPage, PokemonDetail
from core.errors import DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode(model: type[ModelT], payload: Any) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.debug("Unexpected %s payload: %s", model.__name__, exc)
        raise DecodeError(f"failed to parse JSON: {exc.error_count()} invalid field(s) in {model.__name__}") from exc


class PokeAPIClient:
    """Cliente síncrono de la PokeAPI.

    Puede recibir un `httpx.Client` ya construido (tests, doctor); si no, crea
    uno propio y lo cierra en `close()`.
    """

    def __init__(self, settings: AppSettings | None = None, *, client: httpx.Client | None = None) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings)

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url.rstrip("/")

    def first_page_url(self) -> str:
        return self._settings.first_page_url()

    def fetch_location_page(self, url: str | None = None) -> LocationAreaPage:
        """Página de location-areas en `url` (o la primera si no hay cursor)."""

        payload = get_json(self._client, url or self.first_page_url(), what="locations")
        return _decode(LocationAreaPage, payload)

    def fetch_location_area(self, name: str) -> LocationAreaDetail:
        url = f"{self.base_url}/location-area/{quote(name, safe='')}/"
        payload = get_json(self._client, url, what="location")
        return _decode(LocationAreaDetail, payload)

    def fetch_pokemon(self, name: str) -> PokemonDetail:
        url = f"{self.base_url}/pokemon/{quote(name, safe='')}/"
        payload = get_json(self._client, url, what="pokemon")
        return _decode(PokemonDetail, payload)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> PokeAPIClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
