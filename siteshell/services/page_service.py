"""Page service: assemble the frame and bio for a route."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from siteshell.rendering.nodes import render_html
from siteshell.services.bio_service import render_bio
from siteshell.services.layout_service import (
    HeaderVariant,
    RouteContext,
    build_page_frame,
    render_footer,
    render_frame,
)

if TYPE_CHECKING:
    from siteshell.config import Settings
    from siteshell.filesystem.content_manager import ContentManager
    from siteshell.rendering.nodes import Children


@dataclass(frozen=True)
class RenderedPage:
    """HTML of one page and the header variant it was rendered with."""

    html: str
    variant: HeaderVariant


def route_for(settings: Settings, pathname: str) -> RouteContext:
    """Build the route context for ``pathname`` under the configured prefix."""
    return RouteContext(pathname=pathname, path_prefix=settings.path_prefix)


def render_bio_html(content_manager: ContentManager, settings: Settings) -> str:
    """Render the author bio from the site metadata and avatar."""
    avatar = content_manager.avatar(settings.avatar_path, settings.path_prefix)
    bio = render_bio(content_manager.metadata, avatar, settings.social_link_policy)
    return render_html(bio)


def render_footer_html(settings: Settings) -> str:
    return render_html(render_footer(settings.feed_path or None))


def render_page(
    content_manager: ContentManager,
    settings: Settings,
    pathname: str,
    title: str | None = None,
    content: Children = None,
    include_bio: bool = True,
) -> RenderedPage:
    """Render the page shell for ``pathname``.

    The bio, when included, leads the page content.  ``title`` defaults to the
    site title; a missing bio author propagates as ``MissingMetadataError``.
    """
    metadata = content_manager.metadata
    if title is None and metadata is not None:
        title = metadata.title

    route = route_for(settings, pathname)
    children: list[Children] = []
    if include_bio:
        avatar = content_manager.avatar(settings.avatar_path, settings.path_prefix)
        children.append(render_bio(metadata, avatar, settings.social_link_policy))
    children.append(content)

    frame = build_page_frame(route, title, children, settings.feed_path or None)
    return RenderedPage(html=render_html(render_frame(frame)), variant=frame.variant)
