"""OAuth service exceptions."""
from __future__ import annotations

from ally.core.exceptions import AllyException


class CannotInstantiateAbstractBaseError(AllyException):
    """Raised when the abstract OAuth2 scheme is constructed directly."""

    def __init__(self, class_name: str = "OAuth2"):
        super().__init__(
            reason=f"{class_name} class cannot be instantiated directly and must be extended",
            code="E_CANNOT_INSTANTIATE",
            status_code=500,
        )


class MissingParameterError(AllyException):
    """Raised when a required credential or argument is absent."""

    def __init__(self, reason: str, parameter: str | None = None):
        super().__init__(
            reason=reason,
            code="E_MISSING_PARAMETER",
            status_code=400,
            details={"parameter": parameter} if parameter else {},
        )


class OAuthException(AllyException):
    """Canonical shape of every failed token exchange, whatever the provider."""

    def __init__(self, description: str):
        super().__init__(
            reason=description,
            code="E_OAUTH_TOKEN_EXCHANGE",
            status_code=400,
        )
        self.description = description


class UnknownProviderError(AllyException):
    """Raised when a provider name is not registered."""

    def __init__(self, provider: str):
        super().__init__(
            reason=f"OAuth provider '{provider}' is not registered",
            code="E_UNKNOWN_PROVIDER",
            status_code=404,
            details={"provider": provider},
        )


class ProviderUnavailableError(AllyException):
    """Raised when the provider cannot be reached at all."""

    def __init__(self, provider: str, reason: str | None = None):
        message = f"Failed to connect to OAuth provider '{provider}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            reason=message,
            code="E_PROVIDER_UNAVAILABLE",
            status_code=503,
            details={"provider": provider},
        )


class InvalidStateError(AllyException):
    """Callback state does not match the one issued at login."""

    def __init__(self):
        super().__init__(
            reason="Invalid state token. Possible CSRF attack or expired session",
            code="E_INVALID_STATE",
            status_code=400,
        )


class AuthorizationDeniedError(AllyException):
    """The user or the provider refused the authorization request."""

    def __init__(self, provider: str, error: str, description: str | None = None):
        super().__init__(
            reason=description or error,
            code="E_OAUTH_ACCESS_DENIED",
            status_code=401,
            details={"provider": provider, "error": error},
        )
