"""Shared API dependencies: settings and content manager."""

from __future__ import annotations

from fastapi import Request

from siteshell.config import Settings
from siteshell.filesystem.content_manager import ContentManager


def get_settings(request: Request) -> Settings:
    """Get application settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_content_manager(request: Request) -> ContentManager:
    """Get content manager from app state."""
    cm: ContentManager = request.app.state.content_manager
    return cm
