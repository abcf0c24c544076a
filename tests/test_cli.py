from __future__ import annotations

import io

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from adapters.http_client import build_client
from adapters.pokeapi import PokeAPIClient
from cli import doctor
from cli.main import app, start_repl
from conftest import FIRST_PAGE, SECOND_PAGE, FakePokeAPI, FixedRandom, location_page
from core.config import AppSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env or POKEDEX_* variables out of these runs.
    monkeypatch.chdir(tmp_path)
    for var in ("POKEDEX_LOG_LEVEL", "POKEDEX_API_BASE_URL", "POKEDEX_PROMPT"):
        monkeypatch.delenv(var, raising=False)


def test_cli_help_then_exit():
    result = runner.invoke(app, ["--no-banner"], input="help\nexit\n")

    assert result.exit_code == 0
    assert "Welcome to the Pokedex!" in result.output
    assert "catch: Try to catch a Pokemon by name" in result.output
    assert "Closing the Pokedex... Goodbye!" in result.output


def test_cli_end_of_input_exits_zero():
    result = runner.invoke(app, ["--no-banner"], input="bogus\n")

    assert result.exit_code == 0
    assert "unknown command" in result.output


def test_cli_shows_banner_by_default():
    result = runner.invoke(app, [], input="")
    assert result.exit_code == 0
    assert "POKEDEX" in result.output


def test_cli_rejects_unknown_log_level():
    result = runner.invoke(app, ["--log-level", "chatty", "--no-banner"], input="")
    assert result.exit_code == 2
    assert "--log-level" in result.output


def test_cli_bad_environment_is_not_blamed_on_log_level(monkeypatch):
    monkeypatch.setenv("POKEDEX_PAGE_SIZE", "0")

    result = runner.invoke(app, ["--log-level", "debug", "--no-banner"], input="")

    assert result.exit_code == 2
    assert "--log-level" not in result.output
    assert "POKEDEX_" in result.output


def test_start_repl_returns_session(settings):
    fake = FakePokeAPI()
    fake.add_json(FIRST_PAGE, location_page(["a", "b"], next=SECOND_PAGE, previous=None))
    lines = iter(["map"])

    def read_line(prompt: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    console = Console(file=io.StringIO(), width=120)
    session = start_repl(settings, console, read_line=read_line, rng=FixedRandom(0.0), transport=fake.transport)

    assert session.next_url == SECOND_PAGE
    assert console.file.getvalue().startswith("a\nb\n")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("POKEDEX_PAGE_SIZE", "5")
    monkeypatch.setenv("POKEDEX_API_BASE_URL", "http://localhost:8000/api/v2/")

    settings = AppSettings(_env_file=None)

    assert settings.first_page_url() == "http://localhost:8000/api/v2/location-area?offset=0&limit=5"


def test_doctor_reports_connectivity(monkeypatch):
    monkeypatch.setattr(doctor, "_check_api", lambda settings: (True, "20 location areas on the first page"))

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "API connectivity" in result.output


def test_doctor_fails_when_api_unreachable(monkeypatch):
    monkeypatch.setattr(doctor, "_check_api", lambda settings: (False, "failed to fetch locations: offline"))

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_check_api_uses_first_page(settings):
    fake = FakePokeAPI()
    fake.add_json(FIRST_PAGE, location_page(["a", "b", "c"], next=None, previous=None))

    with build_client(settings, transport=fake.transport) as client:
        ok, detail = doctor._check_api(settings, PokeAPIClient(settings, client=client))

    assert ok is True
    assert detail == "3 location areas on the first page"


def test_check_api_reports_errors(settings):
    fake = FakePokeAPI()
    fake.add_error(FIRST_PAGE, httpx.ConnectError("offline"))

    with build_client(settings, transport=fake.transport) as client:
        ok, detail = doctor._check_api(settings, PokeAPIClient(settings, client=client))

    assert ok is False
    assert detail == "failed to fetch locations: offline"
