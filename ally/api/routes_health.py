from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from ally.api.dependencies import get_ally_service
from ally.services.oauth import AllyService

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(service: Annotated[AllyService, Depends(get_ally_service)]) -> dict[str, object]:
    """Basic liveness probe (cheap)."""
    return {"status": "ok", "providers": service.providers()}
