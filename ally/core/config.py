from __future__ import annotations

import os
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_PROVIDERS = ("facebook", "google", "github")


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Ally"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"

    BACKEND_URL: str = "https://api.example.com"  # Host that receives provider callbacks

    # Token exchange transport
    OAUTH_HTTP_TIMEOUT: float = 10.0
    OAUTH_STATE_COOKIE: str = "ally.oauth_state"

    # Facebook
    FACEBOOK_CLIENT_ID: str | None = None
    FACEBOOK_CLIENT_SECRET: str | None = None
    FACEBOOK_SCOPES: list[str] | None = None

    # Google
    GOOGLE_CLIENT_ID: str | None = None
    GOOGLE_CLIENT_SECRET: str | None = None
    GOOGLE_SCOPES: list[str] | None = None

    # GitHub
    GITHUB_CLIENT_ID: str | None = None
    GITHUB_CLIENT_SECRET: str | None = None
    GITHUB_SCOPES: list[str] | None = None

    def provider_credentials(self, provider: str) -> tuple[str | None, str | None]:
        prefix = provider.upper()
        return getattr(self, f"{prefix}_CLIENT_ID", None), getattr(self, f"{prefix}_CLIENT_SECRET", None)

    def provider_scopes(self, provider: str) -> list[str] | None:
        return getattr(self, f"{provider.upper()}_SCOPES", None)

    def configured_providers(self) -> list[str]:
        """Providers with both a client id and a client secret."""
        return [name for name in SUPPORTED_PROVIDERS if all(self.provider_credentials(name))]

    def callback_url(self, provider: str) -> str:
        return f"{self.BACKEND_URL.rstrip('/')}/auth/oauth/{provider}/callback"

    @model_validator(mode="after")
    def _validate_required_fields(self) -> BaseAppSettings:
        if self.ENV.lower() == "prod":
            violations: list[str] = []
            if not self.BACKEND_URL.startswith("https://"):
                violations.append("BACKEND_URL must use https")
            # A provider with only one half of its credentials would fail on first login
            half_configured = [
                name for name in SUPPORTED_PROVIDERS
                if any(self.provider_credentials(name)) and not all(self.provider_credentials(name))
            ]
            if half_configured:
                violations.append(f"Incomplete OAuth credentials for: {', '.join(half_configured)}")
            if violations:
                raise ValueError("Invalid production settings: " + "; ".join(violations))
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"
    BACKEND_URL: str = "http://localhost:8000"


class TestSettings(BaseAppSettings):
    ENV: str = "test"
    BACKEND_URL: str = "http://testserver"


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()
