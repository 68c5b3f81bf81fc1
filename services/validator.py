"""Validate an address: geocode it, score the best match, shape the reply."""

import logging

from config import Settings
from errors import APIError, BadRequest, ServerError
from models import AddressComponents, GeocodeResult, ValidationResponse
from services.geocoder import GeocodeProvider
from services.scorer import score

logger = logging.getLogger(__name__)


def clean_address(address: object) -> str:
    """Return the trimmed address or raise :class:`BadRequest`."""
    if address is None:
        raise BadRequest("address is required")
    if not isinstance(address, str):
        raise BadRequest("address must be a string")
    raw = address.strip()
    if not raw:
        raise BadRequest("address is required")
    return raw


def no_match(source: str) -> ValidationResponse:
    return ValidationResponse(
        valid=False,
        confidence=0,
        normalized="",
        components=AddressComponents(),
        lat=None,
        lon=None,
        source=source,
    )


def build_response(
    query: str,
    match: GeocodeResult,
    source: str,
    postal_penalty: int,
) -> ValidationResponse:
    confidence, valid = score(match.components, query, postal_penalty=postal_penalty)
    return ValidationResponse(
        valid=valid,
        confidence=confidence,
        normalized=match.display_name,
        components=match.components,
        lat=match.lat,
        lon=match.lon,
        source=source,
    )


async def validate_address(
    address: object,
    provider: GeocodeProvider,
    settings: Settings,
) -> ValidationResponse:
    """Run one validation.

    Raises only :class:`errors.APIError` subclasses: ``BadRequest``
    before any outbound call, ``ProviderError`` for an upstream
    non-success status and ``ServerError`` for anything else.
    """
    raw = clean_address(address)

    try:
        matches = await provider.query(raw)
    except APIError:
        raise
    except Exception as e:
        logger.error(f"Geocoding failed for '{raw}': {e}", exc_info=True)
        raise ServerError() from e

    if not matches:
        logger.info(f"No geocoder match for '{raw}'")
        return no_match(provider.name)

    response = build_response(
        raw, matches[0], provider.name, settings.POSTAL_MISMATCH_PENALTY
    )
    logger.debug(
        f"Scored '{raw}': confidence={response.confidence} valid={response.valid}"
    )
    return response
