"""OAuth providers module."""
from .base import OAuth2Scheme
from .facebook import FacebookScheme
from .github import GitHubScheme
from .google import GoogleScheme

PROVIDERS: dict[str, type[OAuth2Scheme]] = {
    FacebookScheme.name: FacebookScheme,
    GoogleScheme.name: GoogleScheme,
    GitHubScheme.name: GitHubScheme,
}

__all__ = ["OAuth2Scheme", "FacebookScheme", "GoogleScheme", "GitHubScheme", "PROVIDERS"]
