# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from models import AddressComponents, GeocodeResult


class FakeProvider:
    """Deterministic stand-in for the geocoder that records its calls."""

    name = "fake"

    def __init__(self, results=None, error=None):
        self.results = results or []
        self.error = error
        self.calls = []

    async def query(self, address):
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        return list(self.results)


def springfield_match(**overrides):
    components = {
        "house_number": "123",
        "road": "Main St",
        "city": "Springfield",
        "state": "IL",
        "postcode": "62704",
    }
    components.update(overrides)
    return GeocodeResult(
        components=AddressComponents(**components),
        display_name="123, Main St, Springfield, Sangamon County, Illinois, 62704, United States",
        lat="39.7817",
        lon="-89.6501",
        importance=0.42,
    )


def make_settings(**overrides):
    values = {"API_KEY": "", "RATE_LIMIT_MAX": 0, "CORS_ORIGIN": "*"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def provider():
    return FakeProvider(results=[springfield_match()])


@pytest.fixture()
def settings():
    return make_settings()


@pytest.fixture()
def client(settings, provider):
    return TestClient(create_app(settings, provider=provider))
