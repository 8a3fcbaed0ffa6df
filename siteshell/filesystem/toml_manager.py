"""TOML reader/writer for the site metadata in index.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import tomli_w

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Author:
    """Author block from ``[site.author]``."""

    name: str | None = None
    summary: str | None = None


@dataclass(frozen=True)
class Social:
    """Social handles from ``[site.social]``. Every handle is optional."""

    twitter: str | None = None
    github: str | None = None


@dataclass(frozen=True)
class SiteMetadata:
    """Site metadata shared by every page render."""

    title: str = "My Blog"
    author: Author | None = None
    social: Social = field(default_factory=Social)


@dataclass(frozen=True)
class SiteConfig:
    """Parsed index.toml.

    ``metadata`` is ``None`` when the file has no ``[site]`` table at all.
    """

    metadata: SiteMetadata | None = None


def _optional_str(table: dict[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"Site metadata field '{key}' must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _table(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        msg = f"'{key}' must be a table in index.toml"
        raise ValueError(msg)
    return value


def parse_site_config(content_dir: Path) -> SiteConfig:
    """Parse index.toml from the content directory.

    A missing file or a file without ``[site]`` yields a config without
    metadata.  Malformed TOML raises ``tomllib.TOMLDecodeError``.
    """
    index_path = content_dir / "index.toml"
    if not index_path.exists():
        return SiteConfig()

    data = tomllib.loads(index_path.read_text(encoding="utf-8"))
    site_data = _table(data, "site")
    if site_data is None:
        return SiteConfig()

    author_data = _table(site_data, "author")
    author = None
    if author_data is not None:
        author = Author(
            name=_optional_str(author_data, "name"),
            summary=_optional_str(author_data, "summary"),
        )

    social_data = _table(site_data, "social") or {}
    social = Social(
        twitter=_optional_str(social_data, "twitter"),
        github=_optional_str(social_data, "github"),
    )

    return SiteConfig(
        metadata=SiteMetadata(
            title=_optional_str(site_data, "title") or "My Blog",
            author=author,
            social=social,
        )
    )


def write_site_config(content_dir: Path, config: SiteConfig) -> None:
    """Write site configuration back to index.toml.

    Absent optional fields are left out of the file rather than written empty.
    """
    data: dict[str, Any] = {}
    metadata = config.metadata
    if metadata is not None:
        site_data: dict[str, Any] = {"title": metadata.title}
        if metadata.author is not None:
            site_data["author"] = {
                k: v
                for k, v in (("name", metadata.author.name), ("summary", metadata.author.summary))
                if v is not None
            }
        social_data = {
            k: v
            for k, v in (("twitter", metadata.social.twitter), ("github", metadata.social.github))
            if v is not None
        }
        if social_data:
            site_data["social"] = social_data
        data["site"] = site_data

    index_path = content_dir / "index.toml"
    index_path.write_bytes(tomli_w.dumps(data).encode("utf-8"))
