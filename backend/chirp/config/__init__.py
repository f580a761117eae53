"""Chirp configuration (environment variables and .env)."""

from chirp.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
