"""API-key authentication dependency."""

import secrets

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from config import Settings
from errors import Unauthorized

_header = APIKeyHeader(name="x-api-key", auto_error=False)

_MAX_KEY_LENGTH = 256


async def require_api_key(
    request: Request,
    api_key: str | None = Security(_header),
) -> str | None:
    """Validate the x-api-key header against the configured key.

    A no-op when no key is configured.  Raises 401 when the header is
    missing, too long or does not match.
    """
    settings: Settings = request.app.state.settings
    expected = settings.api_key
    if not expected:
        return None
    if api_key is None:
        raise Unauthorized("missing API key; provide an x-api-key header")
    if len(api_key) > _MAX_KEY_LENGTH:
        raise Unauthorized("invalid API key")
    if not secrets.compare_digest(api_key.encode(), expected.encode()):
        raise Unauthorized("invalid API key")
    return api_key
