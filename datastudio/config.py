"""Configuration for datastudio, read from the environment (and .env)."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_list(name: str, default: str) -> list[str]:
    """Parse a comma-separated environment variable, falling back to default when unset or empty."""
    items = [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]
    return items or default.split(",")


class Settings(BaseModel):
    """Application settings."""

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_list("CORS_ALLOW_ORIGINS", "*")

    # Defaults shown before anything is generated or imported
    default_headers: list[str] = _parse_list("DEFAULT_HEADERS", "Name,Email")
    default_row_count: int = int(os.getenv("DEFAULT_ROW_COUNT", "5"))

    # Uploads above this size are rejected before decoding
    max_upload_bytes: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))


settings = Settings()
