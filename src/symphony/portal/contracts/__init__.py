"""Public contracts for the Symphony portal."""
from symphony.portal.contracts.site import RawSiteRecord, RawSiteSpec, SiteSummary

__all__ = [
    "RawSiteRecord",
    "RawSiteSpec",
    "SiteSummary",
]
