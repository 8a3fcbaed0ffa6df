"""Layout service: header variant selection and the persistent page frame."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

from siteshell.rendering.nodes import Element, h

if TYPE_CHECKING:
    from siteshell.rendering.nodes import Children

logger = logging.getLogger(__name__)

LICENSE_URL = "http://creativecommons.org/licenses/by-nc-sa/4.0/"
LICENSE_ICON_URL = "https://i.creativecommons.org/l/by-nc-sa/4.0/80x15.png"
LICENSE_NAME = "Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License"
DEFAULT_FEED_PATH = "/rss.xml"


class HeaderVariant(Enum):
    """Header presentation, chosen once per render."""

    ROOT = "root"
    NON_ROOT = "non_root"


@dataclass(frozen=True)
class RouteContext:
    """The route being rendered.

    ``path_prefix`` is the site's configured prefix ("" when served from the
    domain root); the root route is exactly ``path_prefix + "/"``.
    """

    pathname: str
    path_prefix: str = ""

    @property
    def root_path(self) -> str:
        return f"{self.path_prefix}/"

    @property
    def is_root_path(self) -> bool:
        # Exact match only: "/blog" and "/Blog/" are not the root of "/blog".
        return self.pathname == self.root_path


@dataclass(frozen=True)
class PageFrame:
    """Header, content and footer of one rendered page."""

    variant: HeaderVariant
    header: Element
    content: Element
    footer: Element


def select_header_variant(route: RouteContext) -> HeaderVariant:
    """Pick the header variant for ``route``."""
    variant = HeaderVariant.ROOT if route.is_root_path else HeaderVariant.NON_ROOT
    logger.debug(
        "Header variant for %r (prefix %r): %s", route.pathname, route.path_prefix, variant.value
    )
    return variant


def render_header(variant: HeaderVariant, title: str | None, home_href: str) -> Element:
    """Render the home link, wrapped in a level-1 heading on the root route."""
    if variant is HeaderVariant.ROOT:
        inner = h("h1", {"class": "main-heading"}, h("a", {"href": home_href}, title))
    else:
        inner = h("a", {"class": "header-link-home", "href": home_href}, title)
    return h("header", {"class": "global-header"}, inner)


@lru_cache(maxsize=8)
def render_footer(feed_path: str | None = DEFAULT_FEED_PATH) -> Element:
    """Render the license footer, with a feed link when ``feed_path`` is set.

    The footer does not depend on the route or the title, so one instance is
    shared by every page.
    """
    feed: list[Children] = []
    if feed_path:
        feed = [" ", h("a", {"class": "footer-feed-link", "href": feed_path}, "RSS")]

    return h(
        "footer",
        None,
        h(
            "a",
            {"rel": "license", "href": LICENSE_URL},
            h(
                "img",
                {
                    "alt": "Creative Commons License",
                    "style": "border-width:0",
                    "src": LICENSE_ICON_URL,
                },
            ),
        ),
        h("br"),
        "This work is licensed under a ",
        h("a", {"rel": "license", "href": LICENSE_URL}, LICENSE_NAME),
        ".",
        feed,
    )


def build_page_frame(
    route: RouteContext,
    title: str | None,
    children: Children,
    feed_path: str | None = DEFAULT_FEED_PATH,
) -> PageFrame:
    """Compute the frame for one page render."""
    variant = select_header_variant(route)
    return PageFrame(
        variant=variant,
        header=render_header(variant, title, route.root_path),
        content=h("main", None, children),
        footer=render_footer(feed_path),
    )


def render_frame(frame: PageFrame) -> Element:
    """Lay out a computed frame inside the global wrapper."""
    is_root = "true" if frame.variant is HeaderVariant.ROOT else "false"
    return h(
        "div",
        {"class": "global-wrapper", "data-is-root-path": is_root},
        frame.header,
        frame.content,
        frame.footer,
    )


def render_page_shell(
    route: RouteContext,
    title: str | None,
    children: Children,
    feed_path: str | None = DEFAULT_FEED_PATH,
) -> Element:
    """Wrap ``children`` in the site header and footer."""
    return render_frame(build_page_frame(route, title, children, feed_path))
