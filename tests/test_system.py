# tests/test_system.py
from fastapi.testclient import TestClient

from main import create_app

from conftest import FakeProvider, make_settings


def test_index(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "service": "addrway-api"}


def test_index_uses_configured_name(provider):
    client = TestClient(create_app(make_settings(SERVICE_NAME="addr-test"), provider=provider))
    assert client.get("/").json() == {"ok": True, "service": "addr-test"}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_cors_preflight_any_origin(client):
    r = client.options(
        "/validate",
        headers={
            "Origin": "https://example.org",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_cors_restricted_origin():
    settings = make_settings(CORS_ORIGIN="https://app.example.org")
    client = TestClient(create_app(settings, provider=FakeProvider()))
    r = client.get("/", headers={"Origin": "https://app.example.org"})
    assert r.headers["access-control-allow-origin"] == "https://app.example.org"
    r = client.get("/", headers={"Origin": "https://evil.example.org"})
    assert "access-control-allow-origin" not in r.headers
