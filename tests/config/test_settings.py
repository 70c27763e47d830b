"""Testes para wacloud.config.settings.whatsapp."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from wacloud.config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    CloudApiSettings,
    get_cloud_api_settings,
)

ENV_VARS = (
    "WHATSAPP_ACCESS_TOKEN",
    "WHATSAPP_PHONE_NUMBER_ID",
    "WHATSAPP_BUSINESS_ACCOUNT_ID",
    "WHATSAPP_API_VERSION",
    "WHATSAPP_API_BASE_URL",
    "WHATSAPP_REQUEST_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_cloud_api_settings.cache_clear()
    yield
    get_cloud_api_settings.cache_clear()


class TestCloudApiSettings:
    """Testes de CloudApiSettings."""

    def test_defaults(self) -> None:
        settings = CloudApiSettings()
        assert settings.api_version == GRAPH_API_VERSION
        assert settings.api_base_url == GRAPH_API_BASE_URL == "https://graph.facebook.com"
        assert settings.request_timeout_seconds == 30.0

    def test_validate_ok(self) -> None:
        settings = CloudApiSettings(access_token="tok", phone_number_id="1")
        assert settings.validate() == []

    def test_validate_reports_missing_fields(self) -> None:
        errors = CloudApiSettings(request_timeout_seconds=0).validate()

        assert "WHATSAPP_PHONE_NUMBER_ID não configurado" in errors
        assert "WHATSAPP_ACCESS_TOKEN não configurado" in errors
        assert any("TIMEOUT" in error for error in errors)


class TestGetCloudApiSettings:
    """Carregamento a partir do ambiente."""

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "224225226")
        monkeypatch.setenv("WHATSAPP_API_VERSION", "v16.0")
        monkeypatch.setenv("WHATSAPP_API_BASE_URL", "https://graph.example.com")
        monkeypatch.setenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "5")

        settings = get_cloud_api_settings()

        assert settings.access_token == "tok"
        assert settings.phone_number_id == "224225226"
        assert settings.api_version == "v16.0"
        assert settings.api_base_url == "https://graph.example.com"
        assert settings.request_timeout_seconds == 5.0

    def test_defaults_without_env(self) -> None:
        settings = get_cloud_api_settings()
        assert settings.access_token == ""
        assert settings.api_version == GRAPH_API_VERSION

    def test_is_cached(self) -> None:
        assert get_cloud_api_settings() is get_cloud_api_settings()
