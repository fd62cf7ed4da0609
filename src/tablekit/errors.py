"""
Error taxonomy for tablekit.

Every error derives from TablekitError and from the closest builtin
exception, so callers can catch either the library-specific type or the
usual Python one (ValueError, KeyError, TypeError).
"""

from __future__ import annotations

import typing as _typing


class TablekitError(Exception):
    """Base class for all tablekit errors."""

    pass


class InvalidArgumentError(TablekitError, ValueError):
    """Wrong type or shape passed to a constructor, mutator or helper."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)


class InvalidStructureError(TablekitError, ValueError):
    """A container has a shape the operation cannot handle (e.g. a cycle)."""

    pass


class NotFoundError(TablekitError, KeyError):
    """Read of an absent key where absence is not allowed."""

    def __init__(self, key: _typing.Any, message: str | None = None) -> None:
        self.key = key
        self.message = message or f"attempted to read inexistent value at key {key!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


class MissingAttributeError(NotFoundError, AttributeError):
    """
    Attribute-style read of an absent key.

    Also an AttributeError, so hasattr() and getattr() with a default work.
    """

    pass


class ReadOnlyViolationError(TablekitError, TypeError):
    """Attempt to change a read-only view."""

    def __init__(self, key: _typing.Any = None) -> None:
        self.key = key
        super().__init__(f"attempted to change read-only table at key {key!r}")
