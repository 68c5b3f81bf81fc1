"""Service configuration, read once at process start."""

import logging

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Immutable application settings.

    Built once by the entry point and handed to ``create_app``; request
    handlers read it from ``app.state.settings``.
    """

    APP_ENV: str = "development"
    SERVICE_NAME: str = "addrway-api"
    PORT: int = 8080
    LOG_LEVEL: str = ""

    # --- CORS ---
    # Comma-separated list; "*" allows any origin.
    CORS_ORIGIN: str = "*"

    # --- Auth ---
    # Empty disables the x-api-key check.
    API_KEY: str = ""

    # --- Rate limiting ---
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    RATE_LIMIT_MAX: int = 60  # 0 disables

    # --- Geocoder ---
    GEOCODER_URL: str = "https://nominatim.openstreetmap.org/search"
    GEOCODER_USER_AGENT: str = "addrway-api/1.0"
    GEOCODER_TIMEOUT: float = 10.0

    # --- Scoring ---
    POSTAL_MISMATCH_PENALTY: int = 25

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGIN.split(",") if o.strip()]

    @property
    def api_key(self) -> str:
        return self.API_KEY.strip()

    @property
    def log_level(self) -> int:
        if self.LOG_LEVEL:
            return logging.getLevelName(self.LOG_LEVEL.upper())
        return logging.DEBUG if self.APP_ENV == "development" else logging.INFO


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def log_settings(settings: Settings) -> None:
    """Log the effective configuration without leaking secrets."""
    logger.info(f"Application environment: {settings.APP_ENV}")
    logger.info(f"CORS origins: {settings.cors_origins}")
    if settings.api_key:
        logger.info("API key configured: x-api-key header required on /validate.")
    else:
        logger.warning("API_KEY is not set. /validate is open to any caller.")
    if settings.RATE_LIMIT_MAX > 0:
        logger.info(
            f"Rate limit: {settings.RATE_LIMIT_MAX} requests per "
            f"{settings.RATE_LIMIT_WINDOW_SECONDS}s"
        )
    else:
        logger.info("Rate limiting disabled.")
    logger.info(f"Geocoder: {settings.GEOCODER_URL} (timeout {settings.GEOCODER_TIMEOUT}s)")
