# tests/core/auth/test_credentials_provider.py
from __future__ import annotations

import json

import httpx
import pytest

from symphony.portal.core.auth.credentials import SymphonyCredentialsProvider
from symphony.portal.core.exceptions import AuthenticationError, RegistryUnavailable

BASE_URL = "http://symphony/v1alpha2/"


def _provider(**kw) -> SymphonyCredentialsProvider:
    return SymphonyCredentialsProvider(base_url=BASE_URL, username="admin", **kw)


@pytest.mark.asyncio
async def test_login_returns_session(mock_httpx):
    calls = []

    async def handler(request: httpx.Request):
        assert str(request.url) == "http://symphony/v1alpha2/users/auth"
        calls.append(json.loads(request.content))
        return httpx.Response(200, json={"accessToken": "tok1", "tokenType": "Bearer"})

    mock_httpx(handler)

    session = await _provider().resolve_session()

    assert session.access_token == "tok1"
    assert session.user.username == "admin"
    assert calls == [{"username": "admin", "password": ""}]


@pytest.mark.asyncio
async def test_token_is_cached_until_ttl(mock_httpx):
    calls = []

    async def handler(request):
        calls.append("auth")
        return httpx.Response(200, json={"accessToken": f"tok{len(calls)}"})

    mock_httpx(handler)

    cached = _provider(token_ttl=300)
    assert (await cached.resolve_session()).access_token == "tok1"
    assert (await cached.resolve_session()).access_token == "tok1"
    assert calls == ["auth"]

    expiring = _provider(token_ttl=-1)
    await expiring.resolve_session()
    assert (await expiring.resolve_session()).access_token == "tok3"


@pytest.mark.asyncio
async def test_rejected_credentials(mock_httpx):
    async def handler(request):
        return httpx.Response(403, json={"error": "denied"})

    mock_httpx(handler)

    with pytest.raises(AuthenticationError, match="admin"):
        await _provider().resolve_session()


@pytest.mark.asyncio
async def test_missing_access_token(mock_httpx):
    async def handler(request):
        return httpx.Response(200, json={"tokenType": "Bearer"})

    mock_httpx(handler)

    with pytest.raises(AuthenticationError, match="no accessToken"):
        await _provider().resolve_session()


@pytest.mark.asyncio
async def test_unreachable_api(mock_httpx):
    async def handler(request):
        raise httpx.ConnectError("refused", request=request)

    mock_httpx(handler)

    with pytest.raises(RegistryUnavailable):
        await _provider().resolve_session()


@pytest.mark.asyncio
async def test_non_json_login_body(mock_httpx):
    async def handler(request):
        return httpx.Response(200, text="<html>login</html>")

    mock_httpx(handler)

    with pytest.raises(AuthenticationError, match="Unreadable"):
        await _provider().resolve_session()


@pytest.mark.asyncio
async def test_login_body_not_an_object(mock_httpx):
    async def handler(request):
        return httpx.Response(200, json=["tok"])

    mock_httpx(handler)

    with pytest.raises(AuthenticationError, match="Unreadable"):
        await _provider().resolve_session()
