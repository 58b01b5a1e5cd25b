from __future__ import annotations

import os

# Select TestSettings before any ally module reads the environment
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from ally.api.dependencies import get_ally_service  # noqa: E402
from ally.api.main import app  # noqa: E402
from ally.core import config  # noqa: E402
from ally.services.oauth import (  # noqa: E402
    AllyService,
    FacebookScheme,
    GitHubScheme,
    GoogleScheme,
)

CLIENT_ID = "10012020"
CLIENT_SECRET = "1000w0sa"


@pytest.fixture
def configured_settings():
    """Settings with every provider configured."""
    return config.TestSettings(
        FACEBOOK_CLIENT_ID=CLIENT_ID,
        FACEBOOK_CLIENT_SECRET=CLIENT_SECRET,
        GOOGLE_CLIENT_ID="google-client",
        GOOGLE_CLIENT_SECRET="google-secret",
        GITHUB_CLIENT_ID="github-client",
        GITHUB_CLIENT_SECRET="github-secret",
    )


@pytest.fixture
def ally_service():
    """Service with the three bundled providers registered."""
    service = AllyService()
    service.register_provider("facebook", FacebookScheme, CLIENT_ID, CLIENT_SECRET)
    service.register_provider("google", GoogleScheme, "google-client", "google-secret")
    service.register_provider("github", GitHubScheme, "github-client", "github-secret")
    return service


@pytest.fixture
def client(ally_service):
    """Provide a FastAPI TestClient bound to the application."""
    app.dependency_overrides[get_ally_service] = lambda: ally_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
