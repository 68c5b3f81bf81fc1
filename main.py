"""Addrway API – FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, configure_logging, log_settings
from errors import register_error_handlers
from middleware import RateLimitMiddleware
from routers import system, validate
from services.geocoder import GeocodeProvider, NominatimProvider

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    provider: GeocodeProvider | None = None,
) -> FastAPI:
    settings = settings or Settings()
    if provider is None:
        provider = NominatimProvider(
            url=settings.GEOCODER_URL,
            user_agent=settings.GEOCODER_USER_AGENT,
            timeout=settings.GEOCODER_TIMEOUT,
        )

    app = FastAPI(
        title="Addrway API",
        description="Geocode a free-form address and score how complete the match is.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.provider = provider

    register_error_handlers(app)

    app.add_middleware(
        RateLimitMiddleware,
        max_requests=settings.RATE_LIMIT_MAX,
        window=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
    # Added last so CORS headers are also set on rate-limited responses.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(system.router)
    app.include_router(validate.router)
    return app


def run() -> None:
    import uvicorn

    settings = Settings()
    configure_logging(settings)
    log_settings(settings)
    logger.info(f"Addrway API running on {settings.PORT}")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
