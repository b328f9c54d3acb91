# symphony/portal/core/auth/provider.py
from abc import ABC, abstractmethod

from symphony.portal.core.auth.models import Session


class SessionProvider(ABC):
    @abstractmethod
    async def resolve_session(self) -> Session:
        """
        Return the current session.
        A session without an access token means anonymous, not an error.
        """
        ...


class StaticSessionProvider(SessionProvider):
    def __init__(self, access_token: str | None = None):
        self._session = Session(access_token=access_token or None)

    async def resolve_session(self) -> Session:
        return self._session
