"""Shared Pydantic models for request and response payloads."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# ---------------------------------------------------------------------------
# Validate
# ---------------------------------------------------------------------------

class ValidateRequest(BaseModel):
    address: Optional[StrictStr] = Field(None, max_length=1000)


class AddressComponents(BaseModel):
    """Address parts as returned by the geocoding provider.

    Only the keys used for scoring are kept; anything else the provider
    sends (country, county, suburb ...) is dropped.
    """

    model_config = ConfigDict(extra="ignore")

    house_number: Optional[str] = None
    road: Optional[str] = None
    city: Optional[str] = None
    town: Optional[str] = None
    village: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None


class GeocodeResult(BaseModel):
    components: AddressComponents = Field(default_factory=AddressComponents)
    display_name: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None
    importance: Optional[float] = None


class ValidationResponse(BaseModel):
    valid: bool
    confidence: int = Field(..., ge=0, le=100)
    normalized: str
    components: AddressComponents
    lat: Optional[float] = None
    lon: Optional[float] = None
    source: str


# ---------------------------------------------------------------------------
# System
# ---------------------------------------------------------------------------

class ServiceInfo(BaseModel):
    ok: bool = True
    service: str


class HealthResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
