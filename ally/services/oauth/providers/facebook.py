"""Facebook Login (Graph API) implementation."""

from .base import OAuth2Scheme


class FacebookScheme(OAuth2Scheme):
    """Facebook OAuth 2.0 implementation."""

    name = "facebook"
    display_name = "Facebook"
    default_scopes = ("email",)

    @property
    def base_url(self) -> str:
        return "https://graph.facebook.com/v2.1"

    @property
    def authorize_url(self) -> str:
        return "oauth/authorize"

    @property
    def access_token_url(self) -> str:
        return "oauth/access_token"
