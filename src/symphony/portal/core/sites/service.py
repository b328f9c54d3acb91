# symphony/portal/core/sites/service.py
from __future__ import annotations

import logging

from symphony.portal.contracts.site import SiteSummary
from symphony.portal.core.auth.models import Session
from symphony.portal.core.auth.provider import SessionProvider
from symphony.portal.core.exceptions import RegistryError
from symphony.portal.core.sites.fetcher import SiteFetcher
from symphony.portal.core.sites.transform import transform_sites

logger = logging.getLogger(__name__)


class SitesService:
    """Session -> registry fetch -> summaries."""

    def __init__(self, *, fetcher: SiteFetcher, session_provider: SessionProvider) -> None:
        self._fetcher = fetcher
        self._session_provider = session_provider

    async def list_sites(self, session: Session | None = None) -> list[SiteSummary]:
        if session is None:
            session = await self._session_provider.resolve_session()

        try:
            records = await self._fetcher.fetch_sites(session.access_token)
            sites = transform_sites(records)
        except RegistryError as exc:
            logger.warning("Listing sites failed (%s): %s", exc.kind, exc)
            raise

        logger.info(
            "Listed %d site(s) (authenticated=%s)",
            len(sites),
            session.is_authenticated,
        )
        return sites
