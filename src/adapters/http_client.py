"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging para todas las peticiones.
- Traduce los fallos de httpx a los errores del Core (`core.errors`), de modo
  que la CLI nunca ve excepciones de la librería HTTP.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.errors import DecodeError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los comandos se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def get_json(client: httpx.Client, url: str, *, what: str = "resource") -> Any:
    """GET `url` y devuelve el JSON decodificado.

    Errores:
    - `TransportError` si la petición no sale, la respuesta no llega, hay demasiados
      redirects o el body comprimido está roto.
    - `HTTPStatusError` si el status no es 2xx (incluye el body).
    - `DecodeError` si el body no es JSON.
    """

    logger.debug("GET %s", url)
    try:
        response = client.get(url)
    except httpx.RequestError as exc:
        logger.debug("GET %s failed: %s", url, exc)
        raise TransportError(f"failed to fetch {what}: {exc}") from exc

    if not response.is_success:
        logger.debug("GET %s -> %s", url, response.status_code)
        raise HTTPStatusError(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text.strip(),
        )

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"failed to parse JSON: {exc}") from exc
