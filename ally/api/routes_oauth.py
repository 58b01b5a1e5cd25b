"""
OAuth 2.0 / SSO Authentication Routes.

Endpoints:
- GET  /auth/oauth/providers - List available providers
- GET  /auth/oauth/{provider}/login - Initiate OAuth flow
- GET  /auth/oauth/{provider}/callback - Handle OAuth callback

Only handles the HTTP layer; URL building and the code exchange are
delegated to AllyService.
"""

import logging
import secrets
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import RedirectResponse

from ally.api.dependencies import get_ally_service
from ally.core.config import settings
from ally.models import schemas
from ally.services.oauth import (
    AllyService,
    AuthorizationDeniedError,
    InvalidStateError,
    MissingParameterError,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth/oauth", tags=["oauth"])

_STATE_TTL_SECONDS = 600


def _generate_state() -> str:
    """
    Generate cryptographically secure state token for CSRF protection.

    Returns:
        Random 32-character hex string
    """
    return secrets.token_hex(16)


@router.get("/providers", response_model=schemas.OAuthProvidersOut)
async def list_oauth_providers(
    service: Annotated[AllyService, Depends(get_ally_service)],
) -> dict:
    """
    List available OAuth providers.

    Returns:
        {"providers": [{"name": "google", "display_name": "Google", "enabled": true}]}
    """
    providers = []
    for name in service.providers():
        scheme = service.get_provider(name)
        providers.append({
            "name": name,
            "display_name": scheme.display_name,
            "enabled": True,
        })
    return {"providers": providers}


@router.get("/{provider}/login", responses={404: {"model": schemas.ErrorOut}})
async def oauth_login(
    provider: str,
    service: Annotated[AllyService, Depends(get_ally_service)],
) -> RedirectResponse:
    """
    Initiate OAuth login flow.

    Redirects user to OAuth provider's authorization page and remembers
    the issued state in an http-only cookie.

    Example:
        GET /auth/oauth/github/login
    """
    state = _generate_state()
    auth_url = service.get_redirect_url(provider, settings.callback_url(provider), state=state)

    logger.info(f"Initiating OAuth login with {provider}")
    response = RedirectResponse(url=auth_url)
    response.set_cookie(
        settings.OAUTH_STATE_COOKIE,
        state,
        max_age=_STATE_TTL_SECONDS,
        httponly=True,
        secure=settings.ENV.lower() == "prod",
        samesite="lax",
    )
    return response


@router.get(
    "/{provider}/callback",
    response_model=schemas.OAuthTokenOut,
    responses={400: {"model": schemas.ErrorOut}, 401: {"model": schemas.ErrorOut}},
)
async def oauth_callback(
    provider: str,
    request: Request,
    response: Response,
    service: Annotated[AllyService, Depends(get_ally_service)],
    code: str | None = Query(None, description="Authorization code from OAuth provider"),
    state: str | None = Query(None, description="CSRF protection token"),
    error: str | None = Query(None, description="Error reported by the provider"),
    error_description: str | None = Query(None),
) -> dict:
    """
    Handle OAuth provider callback.

    Completes OAuth flow:
    1. Validates CSRF state
    2. Exchanges code for tokens

    Example:
        GET /auth/oauth/github/callback?code=abc&state=123
    """
    expected_state = request.cookies.get(settings.OAUTH_STATE_COOKIE)
    if not state or not expected_state or not secrets.compare_digest(state, expected_state):
        logger.warning(f"Invalid OAuth state for {provider}")
        raise InvalidStateError()

    if error:
        logger.info(f"OAuth authorization denied by {provider}: {error}")
        raise AuthorizationDeniedError(provider, error, error_description)

    if not code:
        raise MissingParameterError("Authorization code is required to complete oauth2 request", parameter="code")

    tokens = await service.exchange_code(provider, code, settings.callback_url(provider))
    response.delete_cookie(settings.OAUTH_STATE_COOKIE)
    logger.info(f"OAuth authentication successful for {provider}")
    return tokens
