"""HTTP client performing the authorization code → access token exchange.

Kept apart from the schemes so they stay free of network I/O. Every
provider failure is funnelled through ``scheme.parse_provider_error`` so
callers only ever see ``OAuthException``.
"""
import hashlib
import logging
from typing import Any
from urllib.parse import parse_qsl

import httpx

from .exceptions import ProviderUnavailableError
from .providers import OAuth2Scheme

logger = logging.getLogger(__name__)


def _code_hash(code: str) -> str:
    return hashlib.sha256(code.encode()).hexdigest()[:12]


def _decode_body(response: httpx.Response) -> dict[str, Any]:
    """Decode a token response, JSON first, form-encoded otherwise."""
    try:
        payload = response.json()
    except ValueError:
        return dict(parse_qsl(response.text))
    return payload if isinstance(payload, dict) else {}


class TokenExchangeClient:
    """Exchanges authorization codes against a scheme's token endpoint."""

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    async def exchange(self, scheme: OAuth2Scheme, code: str, redirect_uri: str) -> dict[str, Any]:
        """
        Exchange authorization code for access token.

        Args:
            scheme: Provider scheme holding the client credentials
            code: Authorization code from OAuth callback
            redirect_uri: Callback URL used when requesting the code

        Returns:
            Token response with access_token, refresh_token, etc.

        Raises:
            OAuthException: If the provider rejects the exchange
            ProviderUnavailableError: If the provider cannot be reached
        """
        data = {
            "client_id": scheme.client_id,
            "client_secret": scheme.client_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri,
        }
        token_url = scheme.get_access_token_url()

        # Log sanitized exchange metadata (no secrets)
        logger.info(
            f"Token exchange attempt | "
            f"provider={scheme.name} "
            f"code_hash={_code_hash(code)} "
            f"client_id={scheme.client_id} "
            f"redirect_uri={redirect_uri}"
        )

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(
                    token_url,
                    data=data,
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Token exchange failed | "
                    f"provider={scheme.name} "
                    f"status={e.response.status_code}"
                )
                raise scheme.parse_provider_error(
                    {"statusCode": e.response.status_code, "data": e.response.text}
                ) from e
            except httpx.RequestError as e:
                logger.error(f"Token exchange request failed: {str(e)}")
                raise ProviderUnavailableError(scheme.name, str(e) or None) from e

        payload = _decode_body(response)
        if not payload.get("access_token"):
            # GitHub reports errors with a 200 status
            logger.error(f"Token exchange returned no access token | provider={scheme.name}")
            raise scheme.parse_provider_error(
                {"statusCode": response.status_code, "data": response.text}
            )

        logger.info(f"Token exchange SUCCESS | provider={scheme.name} code_hash={_code_hash(code)}")
        return payload
