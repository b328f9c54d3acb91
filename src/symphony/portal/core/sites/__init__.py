# symphony/portal/core/sites/__init__.py
"""Federation sites: fetching, transformation and the listing service."""

from symphony.portal.core.sites.fetcher import REGISTRY_PATH, SiteFetcher
from symphony.portal.core.sites.service import SitesService
from symphony.portal.core.sites.transform import to_site_summary, transform_sites

__all__ = [
    "REGISTRY_PATH",
    "SiteFetcher",
    "SitesService",
    "to_site_summary",
    "transform_sites",
]
