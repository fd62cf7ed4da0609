"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with TABLEKIT_ prefix
3. .env file named by TABLEKIT_ENV_FILE (if set and present)

Nested config uses double underscore delimiter:
  TABLEKIT_READONLY__DISABLE_NIL=false
  TABLEKIT_ORDERED_SET__CHECK_INVARIANTS=true
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import tablekit.config.types as types

_logger = _logging.getLogger(__name__)


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit TABLEKIT_ENV_FILE is honored; a library must not pick
    up whatever .env happens to sit in the caller's working directory.
    """
    if env_file := _os.environ.get("TABLEKIT_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
        # If explicitly set but doesn't exist, don't fall back silently
        _logger.warning("TABLEKIT_ENV_FILE=%s does not exist, ignoring", env_file)
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    Tablekit configuration settings.

    All settings can be overridden via environment variables with TABLEKIT_ prefix.
    For nested config, use double underscore: TABLEKIT_READONLY__DISABLE_NIL=false
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="TABLEKIT_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file."""
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    readonly: types.ReadOnlyConfig = _pydantic.Field(default_factory=types.ReadOnlyConfig)
    """Read-only view defaults."""

    ordered_set: types.OrderedSetConfig = _pydantic.Field(
        default_factory=types.OrderedSetConfig
    )
    """Ordered set behavior."""


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
        _logger.debug(
            "Loaded settings: readonly.disable_nil=%s ordered_set.check_invariants=%s",
            _settings.readonly.disable_nil,
            _settings.ordered_set.check_invariants,
        )
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
