"""Tests for the harness HTTP client configuration."""

import httpx
import pytest

from api_client import APIClient
from config import AppConfig, HttpSettings, resolve_config


def make_client(env: str) -> APIClient:
    settings = HttpSettings()
    return APIClient(resolve_config(env, settings=settings), settings)


def test_client_uses_resolved_url_and_timeouts():
    client = make_client("karate")

    assert client.base_url == "http://localhost:8082/api"
    assert client.url("/employees") == "http://localhost:8082/api/employees"
    assert client.timeout.connect == 5.0
    assert client.timeout.read == 5.0
    assert client.timeout.write is None
    assert client.timeout.pool is None


def test_unset_settings_leave_timeouts_unbounded():
    client = APIClient(AppConfig("http://localhost:8080/api/"), HttpSettings())

    assert client.base_url == "http://localhost:8080/api"
    assert client.timeout.connect is None
    assert client.timeout.read is None


def test_from_env(monkeypatch: pytest.MonkeyPatch, shared_settings: HttpSettings):
    monkeypatch.setenv("karate.env", "karate-admin")

    client = APIClient.from_env()

    assert client.url("/admins") == "http://localhost:8081/api/admins"
    assert shared_settings.connect_timeout == 5000
    assert client.timeout.read == 5.0


@pytest.mark.asyncio
async def test_session_is_configured():
    client = make_client("karate-admin")

    async with client.session() as session:
        assert isinstance(session, httpx.AsyncClient)
        assert str(session.base_url) == "http://localhost:8081/api/"
        assert session.timeout.connect == 5.0
        assert session.timeout.read == 5.0
        assert session.headers["Content-Type"] == "application/json"
