"""Author bio service: merge author and social metadata into a display block."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from siteshell.config import SocialLinkPolicy
from siteshell.exceptions import MissingMetadataError
from siteshell.rendering.nodes import Element, h

if TYPE_CHECKING:
    from siteshell.filesystem.content_manager import AvatarAsset
    from siteshell.filesystem.toml_manager import Author, SiteMetadata

logger = logging.getLogger(__name__)

ATTRIBUTION_NAME = "SafetyCulture"
ATTRIBUTION_URL = "https://safetyculture.com"


@dataclass(frozen=True)
class SocialPlatform:
    """A social network the bio can link to."""

    key: str
    label: str
    base_url: str


SOCIAL_PLATFORMS: tuple[SocialPlatform, ...] = (
    SocialPlatform(key="twitter", label="Twitter", base_url="https://twitter.com/"),
    SocialPlatform(key="github", label="GitHub", base_url="https://github.com/"),
)


@dataclass(frozen=True)
class SocialLink:
    """One rendered entry of the bio's social list."""

    platform: str
    href: str
    text: str


def resolve_social_link(
    platform: SocialPlatform,
    handle: str | None,
    policy: SocialLinkPolicy = SocialLinkPolicy.OMIT,
) -> SocialLink | None:
    """Build the link for ``handle`` on ``platform``.

    A missing or blank handle yields ``None`` under ``OMIT`` and a link with
    an empty handle under ``EMPTY_HANDLE``.
    """
    value = handle.strip() if handle else ""
    if not value and policy is SocialLinkPolicy.OMIT:
        logger.debug("No %s handle configured; omitting link", platform.key)
        return None
    return SocialLink(
        platform=platform.key,
        href=f"{platform.base_url}{value}",
        text=f"@{value} on {platform.label}",
    )


def resolve_social_links(
    metadata: SiteMetadata,
    policy: SocialLinkPolicy = SocialLinkPolicy.OMIT,
) -> list[SocialLink]:
    """Resolve links for every known platform, in display order."""
    links: list[SocialLink] = []
    for platform in SOCIAL_PLATFORMS:
        link = resolve_social_link(platform, getattr(metadata.social, platform.key), policy)
        if link is not None:
            links.append(link)
    return links


def _require_author(metadata: SiteMetadata | None) -> Author:
    if metadata is None:
        raise MissingMetadataError("site")
    author = metadata.author
    if author is None:
        raise MissingMetadataError("site.author")
    if not author.name:
        raise MissingMetadataError("site.author.name")
    return author


def _render_avatar(avatar: AvatarAsset, alt: str) -> Element:
    return h(
        "img",
        {
            "class": "bio-avatar",
            "src": avatar.src,
            "alt": alt,
            "width": str(avatar.width),
            "height": str(avatar.height),
            "style": "border-radius:50%",
        },
    )


def _render_credit(name: str, summary: str | None) -> Element:
    lead = f", {summary} at " if summary else " at "
    return h(
        "span",
        None,
        "Written by ",
        h("strong", None, name),
        lead,
        h(
            "a",
            {"href": ATTRIBUTION_URL, "target": "_blank", "rel": "noreferrer"},
            ATTRIBUTION_NAME,
        ),
        ".",
    )


def render_bio(
    metadata: SiteMetadata | None,
    avatar: AvatarAsset | None = None,
    policy: SocialLinkPolicy = SocialLinkPolicy.OMIT,
) -> Element:
    """Render the author bio block.

    Raises ``MissingMetadataError`` when the site metadata, the author or the
    author's name is missing.  Social handles and the avatar are optional.
    """
    author = _require_author(metadata)
    assert metadata is not None
    name = author.name or ""

    social_list = None
    links = resolve_social_links(metadata, policy)
    if links:
        items = [
            h("li", None, h("a", {"class": f"bio-{link.platform}", "href": link.href}, link.text))
            for link in links
        ]
        social_list = h("ul", None, items)

    return h(
        "div",
        {"class": "bio"},
        _render_avatar(avatar, name) if avatar is not None else None,
        h("div", {"class": "bio-social"}, _render_credit(name, author.summary), social_list),
    )
