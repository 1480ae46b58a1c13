"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Checkout and catalog settings are validated at load time.
"""

import re
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_NAMESPACE_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_checkout_and_catalog rejects
    values that would make the checkout handshake or catalog unusable.
    """

    # App
    app_name: str = "intake"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Catalog: empty = bundled services.json
    catalog_path: str = ""

    # Checkout handshake
    checkout_namespace: str = "safepay"
    checkout_popup_width: int = 500
    checkout_popup_height: int = 700
    checkout_poll_interval_seconds: float = 0.5
    # Delay before the callback page closes itself after posting to its opener.
    checkout_callback_close_delay_seconds: float = 1.5

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_checkout_and_catalog(self) -> "Settings":
        """Validate checkout namespace, popup geometry, intervals and catalog path.

        - CHECKOUT_NAMESPACE must be lowercase alphanumeric with optional hyphens
          (it is embedded in message types such as 'safepay-service-success').
        - Popup size and poll interval must be positive.
        - CATALOG_PATH, when set, must point to an existing file.
        """
        if not _NAMESPACE_RE.match(self.checkout_namespace):
            raise ValueError(
                "CHECKOUT_NAMESPACE must be lowercase alphanumeric with optional hyphens, "
                f"got: {self.checkout_namespace!r}"
            )
        if self.checkout_popup_width <= 0 or self.checkout_popup_height <= 0:
            raise ValueError("Checkout popup width and height must be positive")
        if self.checkout_poll_interval_seconds <= 0:
            raise ValueError("CHECKOUT_POLL_INTERVAL_SECONDS must be positive")
        if self.checkout_callback_close_delay_seconds < 0:
            raise ValueError("CHECKOUT_CALLBACK_CLOSE_DELAY_SECONDS must not be negative")
        if self.catalog_path and not Path(self.catalog_path).is_file():
            raise ValueError(
                f"CATALOG_PATH does not point to a file: {self.catalog_path!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
