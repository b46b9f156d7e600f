"""Service level API routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health(request: Request) -> dict[str, str]:
    settings = getattr(request.app.state, "settings", None)
    payload = {"status": "ok"}
    if settings is not None:
        payload["repositoryRoot"] = str(settings.repository_root)
    return payload
