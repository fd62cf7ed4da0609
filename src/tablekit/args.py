"""
Precondition checks for public entry points.

Arguments are declared as alternating (type name, value) pairs:

    arguments(
        "table", value,
        "table", methods,
    )

Type names follow the vocabulary used throughout tablekit:

- nil: None
- boolean: bool
- number: any numbers.Number except bool
- string: str
- table: any container (Mapping, non-string Sequence, Set)
- function: any callable
- any: anything, including None

A mismatch raises InvalidArgumentError before the caller touches any state.
"""

from __future__ import annotations

import collections.abc as _abc
import numbers as _numbers
import typing as _typing

import tablekit.errors as errors

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def is_container(value: _typing.Any) -> bool:
    """Check if a value is a composite container (not a string)."""
    if isinstance(value, _SCALAR_SEQUENCES):
        return False
    return isinstance(value, (_abc.Mapping, _abc.Sequence, _abc.Set))


def is_number(value: _typing.Any) -> bool:
    """Check if a value is a number. Booleans are not numbers here."""
    return isinstance(value, _numbers.Number) and not isinstance(value, bool)


def type_name(value: _typing.Any) -> str:
    """Return the tablekit type name of a value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_container(value):
        return "table"
    if callable(value):
        return "function"
    return "userdata"


_CHECKERS: dict[str, _typing.Callable[[_typing.Any], bool]] = {
    "nil": lambda v: v is None,
    "boolean": lambda v: isinstance(v, bool),
    "number": is_number,
    "string": lambda v: isinstance(v, str),
    "table": is_container,
    "function": callable,
    "any": lambda v: True,
}


def _check(pairs: tuple[_typing.Any, ...], *, optional: bool, offset: int = 0) -> None:
    if len(pairs) % 2 != 0:
        raise errors.InvalidArgumentError(
            "argument declarations must be (type name, value) pairs"
        )

    for i in range(0, len(pairs), 2):
        expected, value = pairs[i], pairs[i + 1]
        position = offset + i // 2 + 1
        checker = _CHECKERS.get(expected)
        if checker is None:
            raise errors.InvalidArgumentError(
                f"argument #{position}: unknown type name {expected!r}",
                position=position,
            )
        if optional and value is None:
            continue
        if not checker(value):
            raise errors.InvalidArgumentError(
                f"argument #{position}: expected `{expected}', got `{type_name(value)}'",
                position=position,
            )


def arguments(*pairs: _typing.Any, first: int = 1) -> None:
    """
    Check that every value matches its declared type.

    `first` is the position reported for the first pair, for entry points
    that split their checks over several calls.

    Raises:
        InvalidArgumentError: On the first mismatch, naming its position.
    """
    _check(pairs, optional=False, offset=first - 1)


def optional_arguments(*pairs: _typing.Any, first: int = 1) -> None:
    """
    Like arguments(), but None is accepted for every declared value.

    Raises:
        InvalidArgumentError: On the first non-None mismatch.
    """
    _check(pairs, optional=True, offset=first - 1)

