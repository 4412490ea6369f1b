"""Tests for settings loading."""

import pytest

from mondial_relay.config import MondialRelaySettings
from mondial_relay.models import Address

ENV = {
    "MONDIAL_RELAY_API_BASE_URL": "https://api.example.com/shipment",
    "MONDIAL_RELAY_LOGIN": "env-login",
    "MONDIAL_RELAY_PASSWORD": "env-password",
    "MONDIAL_RELAY_CUSTOMER_ID": "ENV123",
    "MONDIAL_RELAY_BUSINESS_LASTNAME": "Martin",
    "MONDIAL_RELAY_BUSINESS_COUNTRY_CODE": "be",
    "MONDIAL_RELAY_RETURN_LOCATION": "BE-000111",
}


@pytest.fixture
def env(monkeypatch):
    for key in (
        "MONDIAL_RELAY_CULTURE",
        "MONDIAL_RELAY_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)


class TestMondialRelaySettings:
    def test_reads_environment(self, env):
        settings = MondialRelaySettings.from_env()
        assert settings.login == "env-login"
        assert settings.customer_id == "ENV123"
        assert settings.culture == "fr-FR"
        assert settings.api_version == "1.0"
        assert settings.timeout == 30.0
        assert settings.business_address.lastname == "Martin"
        assert settings.business_address.country_code == "BE"
        assert settings.return_location == "BE-000111"

    def test_arguments_override_environment(self, env):
        business = Address(lastname="Durand", country_code="FR")
        settings = MondialRelaySettings.from_env(
            login="arg-login",
            business_address=business,
            return_location="",
            timeout=2,
        )
        assert settings.login == "arg-login"
        assert settings.password == "env-password"
        assert settings.business_address is business
        assert settings.return_location == ""
        assert settings.timeout == 2

    def test_missing_credentials(self, monkeypatch):
        for key in ENV:
            monkeypatch.delenv(key, raising=False)
        with pytest.raises(ValueError, match="MONDIAL_RELAY_LOGIN"):
            MondialRelaySettings.from_env()

    def test_rejects_non_positive_timeout(self, env):
        with pytest.raises(ValueError, match="timeout"):
            MondialRelaySettings.from_env(timeout=0)

    def test_settings_are_immutable(self, settings):
        with pytest.raises(AttributeError):
            settings.login = "other"
