"""Hintline configuration via pydantic-settings."""

import warnings
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_DEFAULTS = {
    "jwt_secret": "insecure-jwt-secret-change-me",
}


class HintlineSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HINTLINE_")

    environment: str = "development"

    # Credentials
    jwt_secret: str = "insecure-jwt-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Database
    db_url: str = "sqlite+aiosqlite:///./hintline.db"

    # API
    api_title: str = "Hintline"
    api_version: str = "0.1.0"
    api_prefix: str = "/api/support"
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Notifications
    notification_send_timeout: float = 5.0

    log_level: str = "INFO"

    def validate_for_production(self) -> None:
        """Raise if insecure defaults are used in non-development environments."""
        insecure_fields = [
            field
            for field, default in _INSECURE_DEFAULTS.items()
            if getattr(self, field) == default
        ]

        if self.environment != "development" and insecure_fields:
            env_vars = ", ".join(f"HINTLINE_{f.upper()}" for f in insecure_fields)
            raise RuntimeError(
                f"Insecure default values detected in '{self.environment}' environment. "
                f"Set these environment variables to secure values: {env_vars}. "
                "Generate secrets with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
            )

        if insecure_fields:
            warnings.warn(
                "Using insecure default JWT secret, set HINTLINE_JWT_SECRET for production",
                UserWarning,
                stacklevel=2,
            )


@lru_cache
def get_settings() -> HintlineSettings:
    settings = HintlineSettings()
    settings.validate_for_production()
    return settings
