"""Tests for AllyService and the settings driven factory."""
import logging
from unittest.mock import AsyncMock

import pytest

from ally.core import config
from ally.services.oauth import (
    AllyService,
    FacebookScheme,
    GoogleScheme,
    MissingParameterError,
    UnknownProviderError,
    create_ally_service,
)

REDIRECT_URI = "http://testserver/auth/oauth/facebook/callback"


class TestAllyService:
    def test_get_provider_returns_fresh_instances(self, ally_service):
        first = ally_service.get_provider("facebook")
        second = ally_service.get_provider("facebook")
        assert isinstance(first, FacebookScheme)
        assert first is not second
        assert first.client_id == "10012020"

    def test_unknown_provider(self, ally_service):
        with pytest.raises(UnknownProviderError) as exc_info:
            ally_service.get_provider("myspace")
        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "E_UNKNOWN_PROVIDER"

    def test_providers_in_registration_order(self, ally_service):
        assert ally_service.providers() == ["facebook", "google", "github"]

    def test_register_rejects_missing_credentials(self):
        service = AllyService()
        with pytest.raises(MissingParameterError, match="client secret"):
            service.register_provider("facebook", FacebookScheme, "id", "")
        assert service.providers() == []

    def test_redirect_url_uses_default_scopes_and_state(self, ally_service):
        url = ally_service.get_redirect_url("facebook", REDIRECT_URI, state="xyz")
        assert url == (
            "https://graph.facebook.com/v2.1/oauth/authorize"
            "?redirect_uri=http%3A%2F%2Ftestserver%2Fauth%2Foauth%2Ffacebook%2Fcallback"
            "&scope=email&state=xyz&client_id=10012020"
        )

    def test_redirect_url_provider_params_come_first(self, ally_service):
        url = ally_service.get_redirect_url("google", REDIRECT_URI, state="s", extra_params={"prompt": "consent"})
        query = url.split("?", 1)[1]
        keys = [pair.split("=", 1)[0] for pair in query.split("&")]
        assert keys == ["redirect_uri", "scope", "response_type", "access_type", "prompt", "state", "client_id"]
        assert "scope=openid%20email%20profile" in url

    def test_redirect_url_extras_never_duplicate_keys(self, ally_service):
        url = ally_service.get_redirect_url(
            "facebook",
            REDIRECT_URI,
            state="xyz",
            extra_params={"scope": "user_friends", "client_id": "evil", "state": "ignored"},
        )
        query = url.split("?", 1)[1]
        keys = [pair.split("=", 1)[0] for pair in query.split("&")]
        assert keys == ["redirect_uri", "scope", "state", "client_id"]
        assert "&scope=user_friends&state=xyz&client_id=10012020" in url

    def test_redirect_url_explicit_empty_scopes(self, ally_service):
        url = ally_service.get_redirect_url("facebook", REDIRECT_URI, scopes=[])
        assert "scope" not in url

    def test_registered_scopes_override_defaults(self):
        service = AllyService()
        service.register_provider("facebook", FacebookScheme, "id", "secret", scopes=["public_profile"])
        url = service.get_redirect_url("facebook", REDIRECT_URI)
        assert "&scope=public_profile&" in url

    @pytest.mark.asyncio
    async def test_exchange_code_delegates_to_token_client(self):
        token_client = AsyncMock()
        token_client.exchange.return_value = {"access_token": "abc"}
        service = AllyService(token_client)
        service.register_provider("google", GoogleScheme, "google-client", "google-secret")

        result = await service.exchange_code("google", "code", REDIRECT_URI)

        assert result == {"access_token": "abc"}
        scheme, code, redirect_uri = token_client.exchange.call_args.args
        assert isinstance(scheme, GoogleScheme)
        assert (code, redirect_uri) == ("code", REDIRECT_URI)

    @pytest.mark.asyncio
    async def test_exchange_code_unknown_provider(self, ally_service):
        with pytest.raises(UnknownProviderError):
            await ally_service.exchange_code("myspace", "code", REDIRECT_URI)


class TestFactory:
    def test_registers_configured_providers(self, configured_settings):
        service = create_ally_service(configured_settings)
        assert service.providers() == ["facebook", "google", "github"]
        assert service.token_client.timeout == configured_settings.OAUTH_HTTP_TIMEOUT

    def test_skips_unconfigured_providers(self, caplog):
        settings = config.TestSettings(GITHUB_CLIENT_ID="id", GITHUB_CLIENT_SECRET="secret", GOOGLE_CLIENT_ID="half")
        with caplog.at_level(logging.WARNING):
            service = create_ally_service(settings)
        assert service.providers() == ["github"]
        assert "Google OAuth not configured" in caplog.text

    def test_scopes_from_settings(self):
        settings = config.TestSettings(
            FACEBOOK_CLIENT_ID="id", FACEBOOK_CLIENT_SECRET="secret", FACEBOOK_SCOPES=["public_profile", "email"]
        )
        url = create_ally_service(settings).get_redirect_url("facebook", REDIRECT_URI)
        assert "&scope=public_profile%2Cemail&" in url
