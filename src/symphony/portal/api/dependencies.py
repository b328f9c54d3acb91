# symphony/portal/api/dependencies.py
"""
FastAPI dependencies for request-scoped services.

Provides:
- ``get_session``: Session from the ``Authorization`` header. Without a user
  token the request stays anonymous unless the app opted into the service
  account (``anonymous_as_service``).
- ``get_sites_service``: The ``SitesService`` wired in ``create_app``.
"""
from __future__ import annotations

import logging

from fastapi import Header, Request

from symphony.portal.core.auth.models import Session
from symphony.portal.core.auth.session import session_from_authorization
from symphony.portal.core.sites.service import SitesService

logger = logging.getLogger(__name__)


async def get_session(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Session:
    session = session_from_authorization(authorization)
    if session.is_authenticated:
        return session

    if not getattr(request.app.state, "anonymous_as_service", False):
        return session

    provider = getattr(request.app.state, "session_provider", None)
    if provider is None:
        return session
    return await provider.resolve_session()


def get_sites_service(request: Request) -> SitesService:
    return request.app.state.sites_service
