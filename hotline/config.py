"""Application configuration management."""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from project-level .env if available
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = os.getenv("APP_NAME", "Rajshahi Emergency Hotline")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False") == "True"

    # Server
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    reload: bool = os.getenv("RELOAD", "True") == "True"

    # Database (durable key-value store for the user state)
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./hotline.db")

    # Directory behaviour
    storage_key: str = os.getenv("HOTLINE_STORAGE_KEY", "emergencyHotlineState")
    location_timeout_seconds: float = float(os.getenv("HOTLINE_LOCATION_TIMEOUT_SECONDS", "5"))
    history_limit: int = int(os.getenv("HOTLINE_HISTORY_LIMIT", "5"))

    # CORS
    cors_origins: List[str] = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ALLOW_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000",
        ).split(",")
        if origin.strip()
    ]
    cors_allow_credentials: bool = True

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "json")


# Global settings instance
settings = Settings()
