"""Configuration: settings, logging and first-time setup."""

from velocity_mcp.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
