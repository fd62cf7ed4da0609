"""
Cycle-safe deep clone and the default-merge built on top of it.

clone() copies a nested structure, keys included. Containers currently
being copied are tracked by identity; meeting one of them again means
the structure contains itself and the clone fails. A container shared
between sibling branches (a "diamond") is not a cycle: it is copied once
per occurrence, so the result holds independent copies.

Read-only views are cloned like the containers they show: the result is
a plain, mutable structure sharing nothing with the view.

Example:
    >>> shared = {"x": 1}
    >>> copy = clone({"a": shared, "b": shared})
    >>> copy["a"] == copy["b"] and copy["a"] is not copy["b"]
    True
    >>> loop = []
    >>> loop.append(loop)
    >>> clone(loop)  # InvalidStructureError: recursion detected
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import typing as _typing

import tablekit.args as args
import tablekit.errors as errors
import tablekit.tables._readonly as _readonly

_logger = _logging.getLogger(__name__)


def _clone_mapping(t: _abc.Mapping, visited: set[int]) -> _typing.Any:
    items = [(_impl(k, visited), _impl(v, visited)) for k, v in t.items()]
    if isinstance(t, dict):
        # Keeps dict subclasses (OrderedDict, defaultdict, ...) and their extras
        r = _copy.copy(t)
        r.clear()
        r.update(items)
        return r
    return dict(items)


def _clone_set(t: _abc.Set, visited: set[int]) -> _typing.Any:
    members = [_impl(v, visited) for v in t]
    if isinstance(t, set):
        r = _copy.copy(t)
        r.clear()
        r.update(members)
        return r
    if isinstance(t, frozenset):
        return frozenset(members)
    return set(members)


def _clone_sequence(t: _abc.Sequence, visited: set[int]) -> _typing.Any:
    items = [_impl(v, visited) for v in t]
    if isinstance(t, list):
        r = _copy.copy(t)
        r.clear()
        r.extend(items)
        return r
    if isinstance(t, tuple):
        if hasattr(type(t), "_fields"):
            return type(t)(*items)
        return tuple(items)
    return items


def _impl(t: _typing.Any, visited: set[int]) -> _typing.Any:
    if not args.is_container(t):
        return t

    # Views are rebuilt on every read; track the container behind them
    key = _readonly.container_id(t)
    if key in visited:
        _logger.debug("Recursion detected while cloning %s at %#x", type(t).__name__, key)
        raise errors.InvalidStructureError("recursion detected")

    visited.add(key)
    try:
        if isinstance(t, _abc.Mapping):
            return _clone_mapping(t, visited)
        if isinstance(t, _abc.Set):
            return _clone_set(t, visited)
        return _clone_sequence(t, visited)
    finally:
        visited.discard(key)


def clone(t: _typing.Any) -> _typing.Any:
    """
    Deep-copy a value.

    Non-containers are returned unchanged. Containers are rebuilt with
    every key and value cloned recursively.

    Args:
        t: Any value.

    Returns:
        The copy. Shared sub-containers become independent copies.

    Raises:
        InvalidStructureError: If a container contains itself, directly
            or through its descendants.
    """
    return _impl(t, set())


def with_defaults(
    t: _abc.MutableMapping[_typing.Any, _typing.Any],
    defaults: _abc.Mapping[_typing.Any, _typing.Any],
) -> _abc.MutableMapping[_typing.Any, _typing.Any]:
    """
    Fill missing fields of `t` from `defaults`, recursively.

    A field is missing when its key is absent or holds None. Missing
    fields receive a clone of the default, so `t` never aliases a
    container from `defaults`. Where both sides hold mappings the merge
    descends into them.

    Args:
        t: Mapping to fill in place.
        defaults: Default values. Must not contain itself.

    Returns:
        `t`, for chaining.

    Raises:
        InvalidArgumentError: If `t` or `defaults` is not a mapping.
        InvalidStructureError: If a default sub-container contains itself.
    """
    if not isinstance(t, _abc.MutableMapping):
        raise errors.InvalidArgumentError(
            f"argument #1: expected a mutable mapping, got `{args.type_name(t)}'",
            position=1,
        )
    if not isinstance(defaults, _abc.Mapping):
        raise errors.InvalidArgumentError(
            f"argument #2: expected a mapping, got `{args.type_name(defaults)}'",
            position=2,
        )

    for k, d in defaults.items():
        v = t.get(k)
        if v is None:
            t[k] = clone(d)
        elif isinstance(v, _abc.MutableMapping) and isinstance(d, _abc.Mapping):
            with_defaults(v, d)

    return t
