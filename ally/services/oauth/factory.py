"""Factory function for creating configured OAuth service."""
import logging

from ally.core.config import BaseAppSettings, get_settings

from .providers import PROVIDERS
from .service import AllyService
from .token_exchange import TokenExchangeClient

logger = logging.getLogger(__name__)


def create_ally_service(settings: BaseAppSettings | None = None) -> AllyService:
    """
    Factory function to create configured OAuth service.

    Automatically registers every provider with both credentials set.

    Args:
        settings: Application settings (defaults to the environment's)

    Returns:
        Configured AllyService instance
    """
    settings = settings or get_settings()
    service = AllyService(TokenExchangeClient(timeout=settings.OAUTH_HTTP_TIMEOUT))

    configured = settings.configured_providers()
    for name, scheme_cls in PROVIDERS.items():
        if name in configured:
            client_id, client_secret = settings.provider_credentials(name)
            service.register_provider(
                name,
                scheme_cls,
                client_id=client_id,
                client_secret=client_secret,
                scopes=settings.provider_scopes(name),
            )
            logger.info(f"{scheme_cls.display_name} OAuth provider enabled")
        else:
            logger.warning(f"{scheme_cls.display_name} OAuth not configured (missing client ID/secret)")

    return service
