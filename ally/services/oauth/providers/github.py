"""GitHub OAuth provider."""

from .base import OAuth2Scheme


class GitHubScheme(OAuth2Scheme):
    """GitHub OAuth 2.0 provider."""

    name = "github"
    display_name = "GitHub"
    default_scopes = ("user:email",)

    @property
    def base_url(self) -> str:
        return "https://github.com/login/oauth"

    @property
    def authorize_url(self) -> str:
        return "authorize"

    @property
    def access_token_url(self) -> str:
        return "access_token"
