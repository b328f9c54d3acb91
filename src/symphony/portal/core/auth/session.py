# symphony/portal/core/auth/session.py
"""
Session provider factory and incoming-request session handling.

- ``create_session_provider``: service-account login when a Symphony user
  is configured, anonymous otherwise.
- ``session_from_authorization``: session for an incoming HTTP request,
  with user identity read from the JWT claims when the token is one.
"""
from __future__ import annotations

import logging

import jwt

from symphony.portal.core.auth.credentials import SymphonyCredentialsProvider
from symphony.portal.core.auth.models import Session, SessionUser
from symphony.portal.core.auth.provider import SessionProvider, StaticSessionProvider
from symphony.portal.core.config import RegistryConfig, Settings

logger = logging.getLogger(__name__)

__all__ = [
    "create_session_provider",
    "session_from_authorization",
]


def create_session_provider(
    settings: Settings,
    registry: RegistryConfig,
) -> SessionProvider:
    """Build the provider used outside a request, or for tokenless requests
    when ``symphony_anonymous_as_service`` is enabled."""
    if not settings.symphony_username:
        logger.info("No Symphony user configured, requests without a token stay anonymous")
        return StaticSessionProvider()

    logger.info(
        "Symphony credentials provider created (user=%s)",
        settings.symphony_username,
    )
    return SymphonyCredentialsProvider(
        base_url=registry.base_url,
        username=settings.symphony_username,
        password=settings.symphony_password,
        token_ttl=settings.symphony_token_ttl,
        timeout=registry.timeout,
    )


def _user_from_token(token: str) -> SessionUser | None:
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        logger.debug("Bearer token is not a JWT, no user metadata")
        return None

    return SessionUser(
        subject=claims.get("sub"),
        username=claims.get("preferred_username") or claims.get("user"),
        claims=claims,
    )


def session_from_authorization(authorization: str | None) -> Session:
    """Build a ``Session`` from a raw ``Authorization`` header value.

    Accepts ``"Bearer <token>"`` or a bare single-word token. Other schemes
    yield an anonymous session. The token is forwarded as-is; signature
    checks are left to the Symphony API.
    """
    if not authorization or not authorization.strip():
        return Session()

    token = authorization.strip()
    scheme, _, rest = token.partition(" ")
    if scheme.lower() == "bearer":
        token = rest.strip()
    elif rest:
        # Basic, Digest, ...: never forwarded as a bearer token
        logger.debug("Ignoring Authorization scheme %s", scheme)
        return Session()
    if not token:
        return Session()

    return Session(access_token=token, user=_user_from_token(token))
