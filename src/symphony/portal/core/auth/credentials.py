# symphony/portal/core/auth/credentials.py
import logging
import time

import httpx

from symphony.portal.core.auth.models import Session, SessionUser
from symphony.portal.core.auth.provider import SessionProvider
from symphony.portal.core.exceptions import AuthenticationError, RegistryUnavailable

logger = logging.getLogger(__name__)

AUTH_PATH = "users/auth"


class SymphonyCredentialsProvider(SessionProvider):
    """Service-account session obtained from ``POST <base>users/auth``.

    The token is cached and renewed once ``token_ttl`` seconds have passed.
    """

    def __init__(
        self,
        *,
        base_url: str,
        username: str,
        password: str = "",
        token_ttl: float = 3000.0,
        timeout: float | None = 10.0,
    ):
        self._url = f"{base_url}{AUTH_PATH}"
        self._username = username
        self._password = password
        self._token_ttl = token_ttl
        self._timeout = timeout

        self._session: Session | None = None
        self._expires_at = 0.0

    async def resolve_session(self) -> Session:
        if self._session and time.time() < self._expires_at:
            return self._session

        self._session = await self._authenticate()
        self._expires_at = time.time() + self._token_ttl
        return self._session

    async def _authenticate(self) -> Session:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                r = await client.post(
                    self._url,
                    json={"username": self._username, "password": self._password},
                )
                r.raise_for_status()
            except httpx.HTTPStatusError as ex:
                logger.warning(
                    "Login failed user=%s status=%s",
                    self._username,
                    ex.response.status_code,
                )
                raise AuthenticationError(
                    f"Symphony rejected credentials for '{self._username}'"
                ) from ex
            except httpx.HTTPError as ex:
                logger.warning("Login request failed: %s", ex)
                raise RegistryUnavailable(f"Cannot reach {self._url}: {ex}") from ex

        try:
            token = r.json().get("accessToken")
        except (ValueError, AttributeError) as ex:
            raise AuthenticationError("Unreadable login response") from ex
        if not token:
            raise AuthenticationError("Login response carries no accessToken")

        logger.info("Authenticated against Symphony as %s", self._username)
        return Session(
            access_token=token,
            user=SessionUser(username=self._username),
        )
