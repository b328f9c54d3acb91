# symphony/portal/core/sites/transform.py
"""
Projection of raw registry records onto ``SiteSummary``.

Nested fields are looked up with explicit absence checks: a record that is
missing ``spec`` or ``properties`` (or has them in the wrong shape) still
produces a summary, with the unreachable fields set to ``None``.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from symphony.portal.contracts.site import SiteSummary
from symphony.portal.core.exceptions import InvalidRegistryResponse


def _field(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key)
    return None


def to_site_summary(record: Any) -> SiteSummary:
    spec = _field(record, "spec")
    properties = _field(spec, "properties")
    return SiteSummary(
        id=_field(record, "id"),
        name=_field(spec, "name"),
        phone=_field(properties, "phone"),
        description=_field(properties, "description"),
    )


def transform_sites(records: Any) -> list[SiteSummary]:
    """Map registry records to summaries, one-to-one and in order.

    Raises:
        InvalidRegistryResponse: If ``records`` is not an array (for example
            an error object returned by the registry).
    """
    if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
        raise InvalidRegistryResponse(
            f"Expected a sequence of site records, got {type(records).__name__}"
        )
    return [to_site_summary(r) for r in records]
