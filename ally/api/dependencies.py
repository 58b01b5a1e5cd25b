from __future__ import annotations

from functools import lru_cache

from ally.services.oauth import AllyService, create_ally_service


@lru_cache
def get_ally_service() -> AllyService:
    """Service built once from the environment settings."""
    return create_ally_service()
