"""
eurofxref Configuration Management

All settings can be overridden from the environment or a .env file,
e.g. ECB_DAILY_URL=... or FALLBACK_ENABLED=false.
"""

import logging
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

# Last-known-good copy shipped inside the package.
BUNDLED_DOCUMENT_PATH = Path(__file__).resolve().parent / "data" / "eurofxref-daily.xml"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # === Network Source ===
    ecb_daily_url: str = Field(
        default="https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml",
        description="ECB daily reference rates document"
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        description="Transport timeout; None keeps the httpx default"
    )
    user_agent: str = Field(default="eurofxref-client/1.0")

    # === Fallback Source ===
    fallback_enabled: bool = Field(
        default=True,
        description="Read the local document when the network source fails"
    )
    fallback_path: Path | None = Field(
        default=None,
        description="Fallback document; None uses the bundled copy"
    )

    @property
    def resolved_fallback_path(self) -> Path:
        return self.fallback_path or BUNDLED_DOCUMENT_PATH

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply log_level to the root logger. Never called on import."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
