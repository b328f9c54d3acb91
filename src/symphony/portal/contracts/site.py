# symphony/portal/contracts/site.py
"""
Site contracts: the registry's wire shape and the normalized summary.

``RawSiteRecord`` describes what the federation registry usually sends, but
every key is optional and nothing is validated; consumers must check for
absence themselves. ``SiteSummary`` is what the rendering layer receives.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, TypedDict


class RawSiteSpec(TypedDict, total=False):
    name: str
    properties: dict[str, str]


class RawSiteRecord(TypedDict, total=False):
    id: Any
    spec: RawSiteSpec


@dataclass(frozen=True)
class SiteSummary:
    """Flat, display-ready view of a registry site.

    Attributes:
        id: Registry identifier, copied verbatim.
        name: ``spec.name`` or ``None``.
        phone: ``spec.properties["phone"]`` or ``None``.
        description: ``spec.properties["description"]`` or ``None``.
    """

    id: Any
    name: str | None = None
    phone: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
