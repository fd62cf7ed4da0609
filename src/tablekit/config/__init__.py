"""
Configuration module for tablekit.

Uses pydantic-settings for environment variable loading.
"""

from tablekit.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
