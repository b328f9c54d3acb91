# symphony/portal/api/sites.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from symphony.portal.api.dependencies import get_session, get_sites_service
from symphony.portal.core.auth.models import Session
from symphony.portal.core.sites.service import SitesService

router = APIRouter()


@router.get("/sites", operation_id="list_sites")
async def list_sites(
    session: Session = Depends(get_session),
    service: SitesService = Depends(get_sites_service),
) -> list[dict[str, Any]]:
    """Federation sites as ``{id, name, phone, description}`` records."""
    sites = await service.list_sites(session)
    return [site.to_dict() for site in sites]
