from __future__ import annotations

import io
from typing import Any

import httpx
import pytest
from rich.console import Console

from adapters.http_client import build_client
from adapters.pokeapi import PokeAPIClient
from cli.commands import CommandContext, build_registry
from core.config import AppSettings
from core.session import Session

BASE = "https://pokeapi.co/api/v2"
FIRST_PAGE = f"{BASE}/location-area?offset=0&limit=20"
SECOND_PAGE = f"{BASE}/location-area?offset=20&limit=20"


def location_page(names: list[str], *, next: str | None, previous: str | None) -> dict[str, Any]:
    return {
        "count": 1089,
        "next": next,
        "previous": previous,
        "results": [{"name": n, "url": f"{BASE}/location-area/{i}/"} for i, n in enumerate(names, 1)],
    }


def pokemon_detail(name: str, base_experience: int | None = 64) -> dict[str, Any]:
    return {
        "id": 1,
        "name": name,
        "base_experience": base_experience,
        "height": 7,
        "weight": 69,
        "stats": [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp", "url": f"{BASE}/stat/1/"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "attack", "url": f"{BASE}/stat/2/"}},
            {"base_stat": 65, "effort": 1, "stat": {"name": "special-attack", "url": f"{BASE}/stat/4/"}},
        ],
        "types": [
            {"slot": 1, "type": {"name": "grass", "url": f"{BASE}/type/12/"}},
            {"slot": 2, "type": {"name": "poison", "url": f"{BASE}/type/4/"}},
        ],
    }


class FakePokeAPI:
    """Route table served through `httpx.MockTransport`; unknown URLs get a 404."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, dict[str, Any]] | Exception] = {}
        self.requests: list[str] = []

    def add_json(self, url: str, payload: Any, status_code: int = 200) -> None:
        self.routes[url] = (status_code, {"json": payload})

    def add_text(self, url: str, text: str, status_code: int = 200) -> None:
        self.routes[url] = (status_code, {"text": text})

    def add_redirect(self, url: str, location: str, status_code: int = 302) -> None:
        self.routes[url] = (status_code, {"headers": {"Location": location}})

    def add_raw(self, url: str, content: bytes, headers: dict[str, str], status_code: int = 200) -> None:
        self.routes[url] = (status_code, {"content": content, "headers": headers})

    def add_error(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        status_code, content = route
        return httpx.Response(status_code, **content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FixedRandom:
    """Random source that always draws `value` in [0, 1)."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_api() -> FakePokeAPI:
    return FakePokeAPI()


@pytest.fixture
def api(settings: AppSettings, fake_api: FakePokeAPI):
    client = build_client(settings, transport=fake_api.transport)
    yield PokeAPIClient(settings, client=client)
    client.close()


@pytest.fixture
def make_ctx(api: PokeAPIClient):
    def _make(rng: FixedRandom | None = None, session: Session | None = None) -> CommandContext:
        return CommandContext(
            session=session or Session(),
            api=api,
            console=Console(file=io.StringIO(), width=200),
            rng=rng or FixedRandom(0.0),
            commands=build_registry(),
        )

    return _make


def output_of(ctx: CommandContext) -> str:
    return ctx.console.file.getvalue()
