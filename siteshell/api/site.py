"""Site metadata API endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from siteshell.api.deps import get_content_manager, get_settings
from siteshell.config import Settings
from siteshell.filesystem.content_manager import ContentManager
from siteshell.schemas.site import AuthorResponse, SiteMetadataResponse, SocialResponse

router = APIRouter(prefix="/api/site", tags=["site"])


@router.get("", response_model=SiteMetadataResponse)
async def site_metadata(
    content_manager: Annotated[ContentManager, Depends(get_content_manager)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SiteMetadataResponse:
    """Get the site metadata the shell and bio render from."""
    metadata = content_manager.metadata
    if metadata is None:
        raise HTTPException(status_code=404, detail="Site metadata not configured")

    author = None
    if metadata.author is not None:
        author = AuthorResponse(name=metadata.author.name, summary=metadata.author.summary)
    return SiteMetadataResponse(
        title=metadata.title,
        path_prefix=settings.path_prefix,
        author=author,
        social=SocialResponse(twitter=metadata.social.twitter, github=metadata.social.github),
    )
