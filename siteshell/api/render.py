"""Render API endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from siteshell.api.deps import get_content_manager, get_settings
from siteshell.config import Settings
from siteshell.filesystem.content_manager import ContentManager
from siteshell.schemas.site import PageRenderResponse, RenderResponse
from siteshell.services.page_service import render_bio_html, render_footer_html, render_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/render", tags=["render"])


@router.get("/page", response_model=PageRenderResponse)
async def render_page_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
    settings: Annotated[Settings, Depends(get_settings)],
    path: Annotated[str, Query(min_length=1, max_length=2048, pattern=r"^/")] = "/",
    title: Annotated[str | None, Query(max_length=500)] = None,
    bio: bool = True,
) -> PageRenderResponse:
    """Render the page shell for ``path``, with the author bio as its content."""
    page = render_page(content_manager, settings, path, title=title, include_bio=bio)
    logger.debug("Rendered page shell for %s (%s)", path, page.variant.value)
    return PageRenderResponse(html=page.html, variant=page.variant.value)


@router.get("/bio", response_model=RenderResponse)
async def render_bio_endpoint(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RenderResponse:
    """Render the author bio block."""
    return RenderResponse(html=render_bio_html(content_manager, settings))


@router.get("/footer", response_model=RenderResponse)
async def render_footer_endpoint(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RenderResponse:
    """Render the site footer."""
    return RenderResponse(html=render_footer_html(settings))
