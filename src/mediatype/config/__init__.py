"""Configuration for the media type package."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
