"""Abstract base class for OAuth 2.0 authorization code schemes.

Builds the provider authorization URL and normalizes token exchange
errors. Subclasses supply the provider endpoints; the base performs no
network I/O.
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from ..exceptions import (
    CannotInstantiateAbstractBaseError,
    MissingParameterError,
    OAuthException,
)

Scalar = str | int | float | bool | None


def _join_url(base_url: str, path: str) -> str:
    """Join base and path with exactly the one ``/`` the base may lack."""
    prefix = base_url if base_url.endswith("/") else f"{base_url}/"
    return f"{prefix}{path}"


def _escape(value: str) -> str:
    return quote(value, safe="")


def _render_scalar(value: Scalar | list[Scalar] | tuple[Scalar, ...]) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(_render_scalar(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"Unsupported query parameter value: {value!r}")


def _render_description(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value)
    except (TypeError, ValueError, RecursionError):
        return str(value)


class OAuth2Scheme:
    """
    Base scheme for OAuth 2.0 providers.

    Subclasses must provide ``base_url``, ``authorize_url`` and
    ``access_token_url``. Instances are immutable and hold only the
    client credentials.
    """

    name: str = "oauth2"
    display_name: str = "OAuth2"
    scope_separator: str = ","
    default_scopes: tuple[str, ...] = ()
    # Fixed query parameters the provider expects on every authorization request
    authorization_params: Mapping[str, Scalar] = {}
    # Never taken from extra_params
    _OWNED_PARAMS = frozenset({"redirect_uri", "client_id"})

    def __init__(self, client_id: str | None = None, client_secret: str | None = None):
        """
        Initialize the scheme.

        Args:
            client_id: OAuth client ID from provider
            client_secret: OAuth client secret from provider

        Raises:
            CannotInstantiateAbstractBaseError: If OAuth2Scheme itself is constructed
            MissingParameterError: If either credential is missing
        """
        if type(self) is OAuth2Scheme:
            raise CannotInstantiateAbstractBaseError()
        if not client_id:
            raise MissingParameterError(
                "Cannot initiate oauth2 instance without client id", parameter="client_id"
            )
        if not client_secret:
            raise MissingParameterError(
                "Cannot initiate oauth2 instance without client secret", parameter="client_secret"
            )
        self._client_id = client_id
        self._client_secret = client_secret

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def client_secret(self) -> str:
        return self._client_secret

    @property
    def base_url(self) -> str:
        """Provider's API root, e.g. ``https://graph.facebook.com/v2.1``."""
        raise NotImplementedError(f"{type(self).__name__} must define base_url")

    @property
    def authorize_url(self) -> str:
        """Authorization endpoint, relative to ``base_url``."""
        raise NotImplementedError(f"{type(self).__name__} must define authorize_url")

    @property
    def access_token_url(self) -> str:
        """Token exchange endpoint, relative to ``base_url``."""
        raise NotImplementedError(f"{type(self).__name__} must define access_token_url")

    def get_access_token_url(self) -> str:
        return _join_url(self.base_url, self.access_token_url)

    def get_url(
        self,
        redirect_uri: str | None = None,
        scopes: Iterable[str] | None = None,
        extra_params: Mapping[str, Scalar | list[Scalar] | tuple[Scalar, ...]] | None = None,
    ) -> str:
        """
        Generate the authorization URL to redirect the user to.

        Query parameters are emitted in a fixed order: ``redirect_uri``,
        ``scope`` (only when scopes are given), ``extra_params`` in the
        order supplied, then ``client_id``. No key is emitted twice: an
        extra named ``scope`` replaces the scope value in place, while
        extras named ``redirect_uri`` or ``client_id`` are ignored.

        Args:
            redirect_uri: Callback URL registered with the provider
            scopes: Requested scopes
            extra_params: Additional query parameters (e.g. ``state``)

        Returns:
            Full authorization URL with query parameters

        Raises:
            MissingParameterError: If redirect_uri is missing
        """
        if not redirect_uri:
            raise MissingParameterError(
                "Redirect uri is required to initiate oauth2 request", parameter="redirect_uri"
            )

        if isinstance(scopes, str):
            scopes = [scopes]
        scopes = list(scopes or [])

        # Insertion ordered; an extra reusing a key replaces its value in place
        params: dict[str, str] = {"redirect_uri": _escape(redirect_uri)}
        if scopes:
            params["scope"] = _escape(self.scope_separator.join(scopes))
        for key, value in (extra_params or {}).items():
            if key in self._OWNED_PARAMS:
                continue
            params[key] = _escape(_render_scalar(value))
        # Client ids are URL safe
        params["client_id"] = self.client_id

        query = "&".join(f"{_escape(key)}={value}" for key, value in params.items())
        return f"{_join_url(self.base_url, self.authorize_url)}?{query}"

    def parse_provider_error(self, raw_error: Any) -> OAuthException:
        """
        Normalize a failed token exchange into an OAuthException.

        Only the JSON ``error_description`` found in ``raw_error.data`` is
        kept; status codes and headers are dropped. Never raises: anything
        unreadable yields the description ``null``.

        Args:
            raw_error: Mapping or object optionally carrying ``data``

        Returns:
            OAuthException with message ``E_OAUTH_TOKEN_EXCHANGE: <description>``
        """
        if isinstance(raw_error, Mapping):
            data = raw_error.get("data")
        else:
            data = getattr(raw_error, "data", None)

        description = None
        if data is not None:
            try:
                body = data if isinstance(data, Mapping) else json.loads(data)
            except (TypeError, ValueError, RecursionError):
                body = None
            if isinstance(body, Mapping):
                description = body.get("error_description")

        return OAuthException(_render_description(description))
