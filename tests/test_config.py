"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from fasitadapter.config import FasitSettings, get_settings, load_settings
from fasitadapter.integrations.fasit import FasitConfig
from fasitadapter.resources.payloads import DEFAULT_WSDL_URL_TEMPLATE

FASIT_VARS = (
    "FASIT_URL",
    "FASIT_USERNAME",
    "FASIT_PASSWORD",
    "FASIT_TIMEOUT",
    "FASIT_LOG_REQUESTS",
    "FASIT_LOG_RESPONSES",
    "FASIT_WSDL_URL_TEMPLATE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in FASIT_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestLoadSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = load_settings()

        assert settings.base_url == "https://fasit.adeo.no"
        assert settings.username == ""
        assert settings.timeout == 30.0
        assert settings.log_requests is False
        assert settings.wsdl_url_template == DEFAULT_WSDL_URL_TEMPLATE

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FASIT_URL", "https://fasit.example")
        monkeypatch.setenv("FASIT_USERNAME", "deployer")
        monkeypatch.setenv("FASIT_PASSWORD", "hunter2")
        monkeypatch.setenv("FASIT_TIMEOUT", "5")
        monkeypatch.setenv("FASIT_LOG_REQUESTS", "true")
        monkeypatch.setenv("FASIT_WSDL_URL_TEMPLATE", "https://repo/{group_id}")

        settings = load_settings()

        assert settings.base_url == "https://fasit.example"
        assert settings.username == "deployer"
        assert settings.password.get_secret_value() == "hunter2"
        assert settings.timeout == 5.0
        assert settings.log_requests is True
        assert settings.log_responses is False
        assert settings.wsdl_url_template == "https://repo/{group_id}"

    def test_password_is_masked(self, monkeypatch):
        monkeypatch.setenv("FASIT_PASSWORD", "hunter2")

        settings = load_settings()

        assert "hunter2" not in repr(settings)
        assert "hunter2" not in str(settings.password)

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FASIT_URL", "https://other.example")

        assert get_settings() is first


class TestFasitSettings:
    """Tests for settings validation and conversion."""

    def test_rejects_empty_url(self):
        with pytest.raises(ValidationError):
            FasitSettings(base_url="")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            FasitSettings(base_url="https://fasit.local", timeout=0)

    def test_to_client_config(self):
        settings = FasitSettings(
            base_url="https://fasit.local",
            username="deployer",
            password="hunter2",
            timeout=3,
            log_responses=True,
        )

        config = settings.to_client_config()

        assert config == FasitConfig(
            base_url="https://fasit.local",
            timeout=3.0,
            log_requests=False,
            log_responses=True,
            username="deployer",
            password="hunter2",
        )
