"""Simple configuration loader for the contact tracing backend."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import List

_DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


class Settings:
    """Runtime configuration derived from environment variables."""

    def __init__(self) -> None:
        self.env: str = os.getenv("DBCO_ENV", "local")

        # Logging
        self.log_level: str = os.getenv("DBCO_LOG_LEVEL", "INFO").upper()
        self.log_format: str = os.getenv("DBCO_LOG_FORMAT", "plain").lower()

        # HTTP surface
        origins = os.getenv("DBCO_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
        self.cors_origins: List[str] = [origin.strip() for origin in origins.split(",") if origin.strip()]

        # Classification runs on every answer change; anything slower is worth a warning.
        self.classification_latency_budget: float = float(
            os.getenv("DBCO_CLASSIFICATION_LATENCY_BUDGET", "0.05")
        )

    def dict(self) -> dict[str, object]:
        return self.__dict__.copy()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
