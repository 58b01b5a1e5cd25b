"""OAuth 2.0 authorization code module.

Provider schemes build authorization URLs and normalize token exchange
errors; the service wires them to configuration and the HTTP exchange.

Providers:
- Facebook
- Google (OAuth 2.0 + OpenID Connect)
- GitHub
"""
from .exceptions import (
    AuthorizationDeniedError,
    CannotInstantiateAbstractBaseError,
    InvalidStateError,
    MissingParameterError,
    OAuthException,
    ProviderUnavailableError,
    UnknownProviderError,
)
from .factory import create_ally_service
from .providers import (
    PROVIDERS,
    FacebookScheme,
    GitHubScheme,
    GoogleScheme,
    OAuth2Scheme,
)
from .service import AllyService
from .token_exchange import TokenExchangeClient

__all__ = [
    # Exceptions
    "AuthorizationDeniedError",
    "CannotInstantiateAbstractBaseError",
    "InvalidStateError",
    "MissingParameterError",
    "OAuthException",
    "ProviderUnavailableError",
    "UnknownProviderError",
    # Providers
    "OAuth2Scheme",
    "FacebookScheme",
    "GoogleScheme",
    "GitHubScheme",
    "PROVIDERS",
    # Service
    "AllyService",
    "TokenExchangeClient",
    # Factory
    "create_ally_service",
]
