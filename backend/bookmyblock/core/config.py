"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "BookMyBlock API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Owner-side service consumed by the user theater catalogue
    OWNER_API_BASE_URL: str = "http://localhost:8000/api"
    OWNER_API_TIMEOUT: float = 10.0
    OWNER_EVENTS_TIMEOUT: float = 5.0

    # Pinning gateway (Pinata / IPFS)
    PINATA_API_URL: str = "https://api.pinata.cloud"
    PINATA_GATEWAY_URL: str = "https://gateway.pinata.cloud/ipfs"
    IPFS_FALLBACK_GATEWAYS: list[str] = [
        "https://ipfs.io/ipfs",
        "https://cloudflare-ipfs.com/ipfs",
    ]
    IPFS_GATEWAY_TIMEOUT: float = 15.0
    PINATA_UPLOAD_TIMEOUT: float = 30.0
    PINATA_JWT: str = ""
    PINATA_API_KEY: str = ""
    PINATA_SECRET_API_KEY: str = ""

    # Theater documents are plain-text PDFs; extraction is off until the
    # binary parsing path is in place
    PDF_EXTRACTION_ENABLED: bool = False

    # Redis (key-value store for seat layouts and auth sessions)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_ENABLED: bool = False

    # Auth
    AUTH_STRATEGY: str = "mock"  # mock | jwt
    SECRET_KEY: str = "super-secret-key-change-in-production"
    ALGORITHM: str = "HS256"

    # Domain defaults
    DEFAULT_EVENT_CAPACITY: int = 100
    DEFAULT_MAX_DISTANCE_KM: int = 50

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
