# symphony/portal/api/discovery.py
"""
Root-level health endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    fetcher = getattr(request.app.state, "site_fetcher", None)
    provider = getattr(request.app.state, "session_provider", None)
    return {
        "status": "healthy",
        "registry": fetcher.url if fetcher else "not configured",
        "session_provider": type(provider).__name__ if provider else "none",
    }
