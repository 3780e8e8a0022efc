"""
Client Configuration - Pydantic Settings for type-safe config.

FAIL FAST - Missing merchant number or certificate paths are reported
together when the settings are loaded, not at the first TLS handshake.
"""

import sys
from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_API_URL = "https://mss.cpc.getswish.net/swish-cpcapi/api/v1/"
PRODUCTION_API_URL = "https://cpc.getswish.net/swish-cpcapi/api/v1/"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when critical configuration is missing or invalid."""

    pass


class SwishSettings(BaseSettings):
    """Swish client settings loaded from SWISH_* environment variables."""

    # Merchant identity
    merchant_number: str = ""  # Swish number receiving the payments

    # Mutual TLS
    cert_path: str = ""  # PKCS#12 client certificate
    root_cert_path: str = ""  # DER root certificate
    passphrase: SecretStr = SecretStr("")

    # API
    api_url: str = TEST_API_URL
    request_timeout: float | None = None  # None = no timeout
    max_connections: int = 10

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or console

    # Metrics
    metrics_enabled: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SWISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_critical_config(self) -> "SwishSettings":
        """
        FAIL FAST: Validate critical configuration on load.

        Every problem is collected so the operator sees them all at once.
        """
        errors: list[str] = []

        if not self.merchant_number:
            errors.append("SWISH_MERCHANT_NUMBER is required but empty or missing")
        if not self.cert_path:
            errors.append("SWISH_CERT_PATH is required but empty or missing")
        if not self.root_cert_path:
            errors.append("SWISH_ROOT_CERT_PATH is required but empty or missing")
        if not self.api_url.startswith("https://"):
            errors.append(f"SWISH_API_URL must use https, got: {self.api_url}")
        if self.log_format not in ("json", "console"):
            errors.append(f"SWISH_LOG_FORMAT must be 'json' or 'console', got: {self.log_format}")
        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"SWISH_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got: {self.log_level}")

        if errors:
            error_msg = "\n".join(
                [
                    "",
                    "=" * 60,
                    "SWISH CLIENT CONFIGURATION ERROR",
                    "=" * 60,
                    *[f"  ✗ {e}" for e in errors],
                    "=" * 60,
                    "",
                ]
            )
            print(error_msg, file=sys.stderr)
            raise ConfigurationError(error_msg)

        return self


@lru_cache
def get_settings() -> SwishSettings:
    """Get the settings instance, loaded from the environment on first use."""
    return SwishSettings()
