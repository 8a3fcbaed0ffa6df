"""Health check endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from siteshell.api.deps import get_content_manager
from siteshell.filesystem.content_manager import ContentManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    metadata: str


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    metadata_status = "ok"
    try:
        if content_manager.metadata is None:
            metadata_status = "missing"
    except (OSError, ValueError):
        logger.warning("Health check could not read site metadata", exc_info=True)
        metadata_status = "error"

    return HealthResponse(
        status="ok" if metadata_status == "ok" else "degraded",
        version="0.1.0",
        metadata=metadata_status,
    )
