# tests/test_auth.py
import pytest
from fastapi.testclient import TestClient

from main import create_app

from conftest import FakeProvider, make_settings, springfield_match

ADDRESS = {"address": "123 Main St, Springfield, IL 62704"}


@pytest.fixture()
def provider():
    return FakeProvider(results=[springfield_match()])


@pytest.fixture()
def client(provider):
    return TestClient(create_app(make_settings(API_KEY="s3cret"), provider=provider))


def test_missing_key_is_rejected(client, provider):
    r = client.post("/validate", json=ADDRESS)
    assert r.status_code == 401
    assert r.json()["ok"] is False
    assert provider.calls == []


@pytest.mark.parametrize("key", ["wrong", "S3CRET", "x" * 300])
def test_wrong_key_is_rejected(client, provider, key):
    r = client.post("/validate", json=ADDRESS, headers={"x-api-key": key})
    assert r.status_code == 401
    assert provider.calls == []


def test_matching_key_is_accepted(client):
    r = client.post("/validate", json=ADDRESS, headers={"x-api-key": "s3cret"})
    assert r.status_code == 200
    assert r.json()["valid"] is True


def test_system_routes_stay_open(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").status_code == 200


def test_no_key_configured_means_open(provider):
    client = TestClient(create_app(make_settings(API_KEY=""), provider=provider))
    assert client.post("/validate", json=ADDRESS).status_code == 200
