"""OAuth service coordinating provider schemes.

Responsibilities:
- Keep the registry of configured providers
- Hand out a fresh scheme instance per authentication attempt
- Build redirect URLs and run the code exchange
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import UnknownProviderError
from .providers import OAuth2Scheme
from .token_exchange import TokenExchangeClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Registration:
    scheme_cls: type[OAuth2Scheme]
    client_id: str
    client_secret: str
    scopes: tuple[str, ...] | None = None


class AllyService:
    """
    OAuth service for social authentication.

    Holds credentials per provider and instantiates schemes on demand,
    so no scheme outlives a single request.
    """

    def __init__(self, token_client: TokenExchangeClient | None = None):
        """
        Initialize OAuth service.

        Args:
            token_client: Client used for the code exchange
        """
        self.token_client = token_client or TokenExchangeClient()
        self._providers: dict[str, _Registration] = {}

    def register_provider(
        self,
        name: str,
        scheme_cls: type[OAuth2Scheme],
        client_id: str,
        client_secret: str,
        scopes: list[str] | None = None,
    ) -> None:
        """
        Register an OAuth provider.

        Args:
            name: Provider identifier (e.g., "google")
            scheme_cls: Concrete OAuth2Scheme subclass
            client_id: OAuth client ID
            client_secret: OAuth client secret
            scopes: Scopes requested by default (driver defaults when None)
        """
        # Fail at registration rather than on the first login
        scheme_cls(client_id, client_secret)
        self._providers[name] = _Registration(
            scheme_cls=scheme_cls,
            client_id=client_id,
            client_secret=client_secret,
            scopes=tuple(scopes) if scopes is not None else None,
        )
        logger.info(f"Registered OAuth provider: {name}")

    def providers(self) -> list[str]:
        return list(self._providers)

    def get_provider(self, name: str) -> OAuth2Scheme:
        """
        Get a scheme instance for a registered provider.

        Raises:
            UnknownProviderError: If provider not registered
        """
        registration = self._providers.get(name)
        if registration is None:
            raise UnknownProviderError(name)
        return registration.scheme_cls(registration.client_id, registration.client_secret)

    def _scopes_for(self, name: str, scheme: OAuth2Scheme) -> list[str]:
        registration = self._providers[name]
        if registration.scopes is not None:
            return list(registration.scopes)
        return list(scheme.default_scopes)

    def get_redirect_url(
        self,
        name: str,
        redirect_uri: str,
        state: str | None = None,
        scopes: list[str] | None = None,
        extra_params: Mapping[str, Any] | None = None,
    ) -> str:
        """
        Build the provider authorization URL.

        Provider fixed parameters come first, then caller extras, then
        ``state``.
        """
        scheme = self.get_provider(name)
        params: dict[str, Any] = dict(scheme.authorization_params)
        params.update(extra_params or {})
        if state is not None:
            params["state"] = state
        requested = scopes if scopes is not None else self._scopes_for(name, scheme)
        return scheme.get_url(redirect_uri, requested, params)

    async def exchange_code(self, name: str, code: str, redirect_uri: str) -> dict[str, Any]:
        """
        Exchange an authorization code for the provider token payload.

        Raises:
            UnknownProviderError: If provider not registered
            OAuthException: If the provider rejects the code
        """
        scheme = self.get_provider(name)
        return await self.token_client.exchange(scheme, code, redirect_uri)
