"""Configuration."""

from apps.basalam_gateway.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
