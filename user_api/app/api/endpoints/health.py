"""
Service-level endpoints: the health check and the welcome root.

These routes live outside ``/api`` and do not use the ``Envelope``
shape.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from user_api.app.core.timestamps import isoformat_utc

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "UP", "timestamp": isoformat_utc()}


@router.get("/")
async def root(request: Request) -> Dict[str, Any]:
    """Welcome payload listing the public endpoints."""
    config = request.app.state.settings
    return {
        "message": f"Welcome to {config.project_name}",
        "version": config.api_version,
        "endpoints": {
            "health": "/health",
            "users": "/api/users",
        },
    }
