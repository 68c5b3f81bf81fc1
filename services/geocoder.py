"""Geocoding provider interface and the Nominatim implementation."""

import logging
from typing import Optional, Protocol

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from errors import ProviderError, ServerError
from models import AddressComponents, GeocodeResult

logger = logging.getLogger(__name__)


class GeocodeProvider(Protocol):
    """Anything that turns a free-text address into ranked matches."""

    name: str

    async def query(self, address: str) -> list[GeocodeResult]:
        """Return the provider's matches, best first (possibly empty).

        Raises :class:`errors.ProviderError` on a non-success status.
        """
        ...


class _NominatimPlace(BaseModel):
    address: AddressComponents = Field(default_factory=AddressComponents)
    display_name: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None
    importance: Optional[float] = None

    def to_result(self) -> GeocodeResult:
        return GeocodeResult(
            components=self.address,
            display_name=self.display_name,
            lat=self.lat,
            lon=self.lon,
            importance=self.importance,
        )


_PLACES = TypeAdapter(list[_NominatimPlace])


class NominatimProvider:
    """Nominatim ``/search`` client.

    Asks for a single, address-detailed match.  A fresh
    ``httpx.AsyncClient`` is opened per query; *transport* lets tests
    swap the network for an ``httpx.MockTransport``.
    """

    name = "nominatim"

    def __init__(
        self,
        url: str,
        user_agent: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport

    def _params(self, address: str) -> dict[str, str | int]:
        return {
            "q": address,
            "format": "jsonv2",
            "addressdetails": 1,
            "limit": 1,
        }

    async def query(self, address: str) -> list[GeocodeResult]:
        logger.debug(f"Geocoding address with Nominatim: '{address}'")
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
        ) as client:
            r = await client.get(self.url, params=self._params(address))

        if not r.is_success:
            logger.warning(f"Nominatim returned HTTP {r.status_code} for '{address}'")
            raise ProviderError(
                f"geocoding provider returned HTTP {r.status_code}",
                upstream_status=r.status_code,
            )

        try:
            places = _PLACES.validate_json(r.content)
        except ValidationError as e:
            logger.error(f"Malformed Nominatim payload for '{address}': {e}")
            raise ServerError() from e

        return [place.to_result() for place in places]
