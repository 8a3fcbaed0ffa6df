"""Shared test fixtures for SiteShell."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from siteshell.config import Settings
from siteshell.filesystem.content_manager import ContentManager
from siteshell.filesystem.toml_manager import Author, SiteMetadata, Social
from siteshell.main import create_app

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

SAMPLE_INDEX_TOML = (
    '[site]\ntitle = "Test Blog"\n\n'
    '[site.author]\nname = "A. Person"\nsummary = "writes things"\n\n'
    '[site.social]\ntwitter = "aperson"\ngithub = "aperson-gh"\n'
)

# Smallest valid JPEG header is enough: the avatar is only checked for presence.
AVATAR_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


@asynccontextmanager
async def create_test_client(settings: Settings) -> AsyncGenerator[AsyncClient]:
    """Create an HTTP test client with a fully initialized app.

    Manually performs the work of the application lifespan because
    ASGITransport does not trigger it.
    """
    from siteshell.main import ensure_content_dir

    app = create_app(settings)
    settings.validate_runtime_security()
    ensure_content_dir(settings.content_dir)
    app.state.content_manager = ContentManager(content_dir=settings.content_dir)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def tmp_content_dir(tmp_path: Path) -> Path:
    """Create a temporary content directory with metadata and an avatar."""
    content = tmp_path / "content"
    content.mkdir()
    (content / "assets").mkdir()
    (content / "assets" / "profile-pic.jpg").write_bytes(AVATAR_BYTES)
    (content / "index.toml").write_text(SAMPLE_INDEX_TOML)
    return content


@pytest.fixture
def test_settings(tmp_content_dir: Path) -> Settings:
    """Create test settings with temporary paths."""
    return Settings(
        _env_file=None,
        debug=True,
        content_dir=tmp_content_dir,
    )


@pytest.fixture
def content_manager(tmp_content_dir: Path) -> ContentManager:
    return ContentManager(content_dir=tmp_content_dir)


@pytest.fixture
def sample_metadata() -> SiteMetadata:
    return SiteMetadata(
        title="Test Blog",
        author=Author(name="A. Person", summary="writes things"),
        social=Social(twitter="aperson", github="aperson-gh"),
    )
