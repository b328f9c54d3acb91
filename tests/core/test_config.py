# tests/core/test_config.py
from __future__ import annotations

import pytest

from symphony.portal.core.config import RegistryConfig, Settings
from symphony.portal.core.exceptions import ConfigurationError


def test_registry_config_from_env(monkeypatch):
    monkeypatch.setenv("SYMPHONY_API", "http://localhost:8082/v1alpha2/")
    monkeypatch.setenv("SYMPHONY_REGISTRY_TIMEOUT", "12.5")

    cfg = Settings(_env_file=None).registry_config()

    assert cfg == RegistryConfig(base_url="http://localhost:8082/v1alpha2/", timeout=12.5)


def test_missing_base_url_fails(monkeypatch):
    monkeypatch.delenv("SYMPHONY_API", raising=False)

    with pytest.raises(ConfigurationError, match="SYMPHONY_API"):
        Settings(_env_file=None).registry_config()


def test_blank_base_url_fails():
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None, symphony_api="   ").registry_config()


def test_non_http_base_url_fails():
    with pytest.raises(ConfigurationError, match="http"):
        Settings(_env_file=None, symphony_api="symphony:8082/").registry_config()


def test_missing_trailing_slash_is_kept(caplog):
    cfg = Settings(_env_file=None, symphony_api="http://host/api").registry_config()

    assert cfg.base_url == "http://host/api"
    assert "trailing slash" in caplog.text


def test_service_account_fallback_defaults_off(monkeypatch):
    monkeypatch.delenv("SYMPHONY_ANONYMOUS_AS_SERVICE", raising=False)

    assert Settings(_env_file=None).symphony_anonymous_as_service is False
