"""Site metadata and render schemas."""

from __future__ import annotations

from pydantic import BaseModel


class AuthorResponse(BaseModel):
    """Author block of the site metadata."""

    name: str | None = None
    summary: str | None = None


class SocialResponse(BaseModel):
    """Configured social handles."""

    twitter: str | None = None
    github: str | None = None


class SiteMetadataResponse(BaseModel):
    """Site metadata response."""

    title: str
    path_prefix: str
    author: AuthorResponse | None = None
    social: SocialResponse


class RenderResponse(BaseModel):
    """Rendered HTML fragment."""

    html: str


class PageRenderResponse(RenderResponse):
    """Rendered page shell with the header variant it used."""

    variant: str
