"""Content directory reader: site metadata and media asset references."""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from siteshell.filesystem.toml_manager import SiteConfig, SiteMetadata, parse_site_config

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

AVATAR_WIDTH = 50
AVATAR_HEIGHT = 50
AVATAR_QUALITY = 95


@dataclass(frozen=True)
class AvatarAsset:
    """Reference to the processed avatar image.

    Resizing and re-encoding happen in the external asset pipeline; this is
    only the handle the bio renders from.
    """

    src: str
    source_path: str
    width: int = AVATAR_WIDTH
    height: int = AVATAR_HEIGHT
    quality: int = AVATAR_QUALITY


def is_safe_asset_path(rel_path: str) -> bool:
    """Reject absolute paths and paths escaping the content directory."""
    if not rel_path or rel_path.startswith("/") or "\\" in rel_path:
        return False
    normalized = posixpath.normpath(rel_path)
    return normalized != ".." and not normalized.startswith("../")


@dataclass
class ContentManager:
    """Reads site metadata and assets from the content directory."""

    content_dir: Path
    _site_config: SiteConfig | None = field(default=None, repr=False)

    @property
    def site_config(self) -> SiteConfig:
        """Get site configuration, loading if needed."""
        if self._site_config is None:
            self._site_config = parse_site_config(self.content_dir)
        return self._site_config

    @property
    def metadata(self) -> SiteMetadata | None:
        """Site metadata, or ``None`` when index.toml has no ``[site]`` table."""
        return self.site_config.metadata

    def reload(self) -> None:
        """Drop cached configuration so the next access re-reads index.toml."""
        self._site_config = None

    def avatar(self, avatar_path: str, path_prefix: str = "") -> AvatarAsset | None:
        """Resolve the avatar reference for ``avatar_path``.

        Returns ``None`` when avatars are disabled (empty path) or the source
        file is not present, in which case the bio renders text only.
        """
        if not avatar_path:
            return None
        if not is_safe_asset_path(avatar_path):
            msg = f"Avatar path must be relative to the content directory: {avatar_path}"
            raise ValueError(msg)

        source = self.content_dir / avatar_path
        if not source.is_file():
            logger.warning("Avatar image not found at %s; rendering bio without it", source)
            return None

        return AvatarAsset(
            src=f"{path_prefix}/{posixpath.normpath(avatar_path)}",
            source_path=avatar_path,
        )
