"""Google OAuth 2.0 / OpenID Connect implementation."""

from .base import OAuth2Scheme


class GoogleScheme(OAuth2Scheme):
    """Google OAuth 2.0 / OpenID Connect implementation."""

    name = "google"
    display_name = "Google"
    # Google expects space delimited scopes
    scope_separator = " "
    default_scopes = ("openid", "email", "profile")
    authorization_params = {
        "response_type": "code",
        "access_type": "offline",  # Request refresh token
    }

    @property
    def base_url(self) -> str:
        return "https://accounts.google.com/o/oauth2"

    @property
    def authorize_url(self) -> str:
        return "auth"

    @property
    def access_token_url(self) -> str:
        return "token"
