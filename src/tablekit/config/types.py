"""Configuration type definitions for tablekit settings.

These are "config section" types nested within the main Settings class:

- ReadOnlyConfig: defaults for read-only views
- OrderedSetConfig: ordered set consistency checking

All types use `extra="allow"` so unknown fields are preserved rather
than silently dropped. Use `get_extra_fields()` to audit for typos.
"""

import typing as _typing

import pydantic as _pydantic


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are kept in `model_extra` so they can be reported.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def has_extra_fields(self) -> bool:
        """Check if this config has any unrecognized fields."""
        return bool(self.model_extra)


class ReadOnlyConfig(ConfigBase):
    """Defaults for read-only views."""

    disable_nil: bool = True
    """Reading an absent key raises NotFoundError instead of returning None."""


class OrderedSetConfig(ConfigBase):
    """Ordered set behavior."""

    check_invariants: bool = False
    """Verify position/membership consistency after every mutation."""
