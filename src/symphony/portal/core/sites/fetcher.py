# symphony/portal/core/sites/fetcher.py
"""
Thin async client for the Symphony federation registry.
"""
from __future__ import annotations

import logging

import httpx

from symphony.portal.contracts.site import RawSiteRecord
from symphony.portal.core.config import RegistryConfig
from symphony.portal.core.exceptions import InvalidRegistryResponse, RegistryUnavailable

logger = logging.getLogger(__name__)

REGISTRY_PATH = "federation/registry"


class SiteFetcher:
    """HTTP client for the federation registry.

    Contract::

        GET <base_url>federation/registry
        Authorization: Bearer <token>     (only when a token is given)
        -> 200 [ { id, spec: { name, properties } }, ... ]

    A fresh connection is opened per call; nothing is pooled or cached.
    """

    def __init__(self, config: RegistryConfig) -> None:
        self._config = config

    @property
    def url(self) -> str:
        return f"{self._config.base_url}{REGISTRY_PATH}"

    def _headers(self, access_token: str | None) -> dict[str, str]:
        if not access_token:
            return {}
        return {"Authorization": f"Bearer {access_token}"}

    async def fetch_sites(self, access_token: str | None = None) -> list[RawSiteRecord]:
        """Return the registry's site records, unvalidated beyond "is a list".

        Raises:
            RegistryUnavailable: Transport failure or a body that is not JSON.
            InvalidRegistryResponse: Non-2xx status or a JSON body that is
                not an array.
        """
        if not access_token:
            logger.debug("Fetching sites anonymously")

        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            try:
                resp = await client.get(self.url, headers=self._headers(access_token))
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                logger.warning(
                    "Registry request failed status=%s reason=%s",
                    ex.response.status_code,
                    ex.response.text[:200],
                )
                raise InvalidRegistryResponse(
                    f"Registry returned HTTP {ex.response.status_code}",
                    status_code=ex.response.status_code,
                ) from ex
            except httpx.HTTPError as ex:
                logger.warning("Registry request failed: %s", ex)
                raise RegistryUnavailable(f"Cannot reach {self.url}: {ex}") from ex

        try:
            payload = resp.json()
        except ValueError as ex:
            logger.warning("Registry returned a non-JSON body")
            raise RegistryUnavailable("Registry response is not valid JSON") from ex

        if not isinstance(payload, list):
            raise InvalidRegistryResponse(
                f"Expected a JSON array of sites, got {type(payload).__name__}",
                status_code=resp.status_code,
            )
        return payload
