"""OAuth / SSO API schemas."""
from __future__ import annotations

from pydantic import BaseModel


class OAuthProviderInfo(BaseModel):
    """Information about an OAuth provider."""
    name: str
    display_name: str
    enabled: bool


class OAuthProvidersOut(BaseModel):
    """List of available OAuth providers."""
    providers: list[OAuthProviderInfo]


class OAuthTokenOut(BaseModel):
    """Provider token payload returned by the callback."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None


class ErrorBody(BaseModel):
    name: str
    code: str
    message: str
    details: dict = {}


class ErrorOut(BaseModel):
    error: ErrorBody
