"""Application configuration loaded from environment variables."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SocialLinkPolicy(StrEnum):
    """What the bio does with a social handle that is not configured."""

    OMIT = "omit"
    EMPTY_HANDLE = "empty_handle"


class Settings(BaseSettings):
    """SiteShell application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False
    expose_docs: bool = False

    # Paths
    content_dir: Path = Path("./content")
    path_prefix: str = ""
    avatar_path: str = "assets/profile-pic.jpg"
    feed_path: str = "/rss.xml"

    # Rendering
    social_link_policy: SocialLinkPolicy = SocialLinkPolicy.OMIT

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # CORS
    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=list)

    # Response hardening
    security_headers_enabled: bool = True

    @field_validator("path_prefix")
    @classmethod
    def check_path_prefix(cls, v: str) -> str:
        if v and (not v.startswith("/") or v.endswith("/")):
            msg = "PATH_PREFIX must be empty or start with '/' and not end with '/'"
            raise ValueError(msg)
        return v

    def validate_runtime_security(self) -> None:
        """Validate security-critical production settings."""
        if self.debug:
            return

        if not self.trusted_hosts:
            raise ValueError(
                "Insecure production configuration: TRUSTED_HOSTS must be configured in production"
            )
