import pytest
from pydantic import ValidationError

from weatherapp.core.config import DEFAULT_PROVIDER_BASE_URL, Settings


def test_missing_api_key_fails(monkeypatch):
    monkeypatch.delenv("WEATHERAPP_PROVIDER_API_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_api_key_fails():
    with pytest.raises(ValidationError):
        Settings(provider_api_key="   ", _env_file=None)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("WEATHERAPP_PROVIDER_API_KEY", "env-key")
    monkeypatch.setenv("WEATHERAPP_PROVIDER_BASE_URL", "https://weather.example.com/")
    monkeypatch.setenv("WEATHERAPP_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)
    assert settings.provider_api_key.get_secret_value() == "env-key"
    assert settings.provider_base_url == "https://weather.example.com"
    assert settings.log_level == "DEBUG"
    assert settings.provider_units is None


def test_api_key_hidden_from_repr():
    settings = Settings(provider_api_key="super-secret", _env_file=None)
    assert "super-secret" not in repr(settings)
    assert settings.provider_base_url == DEFAULT_PROVIDER_BASE_URL
