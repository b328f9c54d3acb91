# tests/conftest.py
from __future__ import annotations

import httpx
import pytest

from symphony.portal.core.config import RegistryConfig, Settings

BASE_URL = "http://symphony/v1alpha2/"


@pytest.fixture
def registry_config() -> RegistryConfig:
    return RegistryConfig(base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, symphony_api=BASE_URL, log_json=False)


@pytest.fixture
def mock_httpx(monkeypatch):
    """Route every ``httpx.AsyncClient`` through a handler function."""

    def install(handler):
        transport = httpx.MockTransport(handler)
        real_client = httpx.AsyncClient

        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda **kw: real_client(transport=transport, **kw),
        )
        return transport

    return install
