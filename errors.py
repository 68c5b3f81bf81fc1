"""Error taxonomy and the JSON handlers that render it."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "internal server error"

    def __init__(self, message: str = "", *, headers: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message or self.error
        self.headers = headers

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content={"ok": False, "error": self.message},
            headers=self.headers,
        )


class BadRequest(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "address is required"


class Unauthorized(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "invalid or missing API key"


class RateLimited(APIError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    error = "too many requests"


class ProviderError(APIError):
    """The geocoding provider answered with a non-success status."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error = "geocoding provider error"

    def __init__(self, message: str = "", *, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class ServerError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "internal server error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(APIError)
    async def _api_error(request: Request, exc: APIError) -> JSONResponse:
        return exc.to_response()

    # Body missing, not JSON, or address of the wrong type.
    @app.exception_handler(RequestValidationError)
    async def _validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return BadRequest("address must be a non-empty string").to_response()

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return ServerError().to_response()
