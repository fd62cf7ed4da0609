"""
Container basics: extraction, flipping, membership sets and array helpers.

A container is any Mapping, non-string Sequence or Set. Iteration over a
container yields (key, value) pairs:

- Mapping: its items
- Sequence: (index, item) with 0-based indexes, as taken by seq[i] and
  by a read-only view of the sequence
- Set: (member, member)

Functions that take an `i`-prefixed name only look at a sequence's items,
in order. Nothing here guarantees an order for results built from
Mappings or Sets beyond what the source iteration gives.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import tablekit.args as args
import tablekit.errors as errors


def pairs(t: _typing.Any) -> _typing.Iterator[tuple[_typing.Any, _typing.Any]]:
    """Iterate (key, value) pairs of any container."""
    if isinstance(t, _abc.Mapping):
        return iter(t.items())
    if isinstance(t, _abc.Set):
        return ((v, v) for v in t)
    return enumerate(t)


def keys(t: _typing.Any) -> list[_typing.Any]:
    """Keys of a container, in undetermined order."""
    return [k for k, _ in pairs(t)]


def values(t: _typing.Any) -> list[_typing.Any]:
    """Values of a container, in undetermined order."""
    return [v for _, v in pairs(t)]


def keys_values(t: _typing.Any) -> tuple[list[_typing.Any], list[_typing.Any]]:
    """Keys and values of a container as two lists in matching order."""
    ks: list[_typing.Any] = []
    vs: list[_typing.Any] = []
    for k, v in pairs(t):
        ks.append(k)
        vs.append(v)
    return ks, vs


def flip(t: _typing.Any) -> dict[_typing.Any, _typing.Any]:
    """
    Map each value to its key.

    If several keys share a value, the one seen last wins.
    """
    return {v: k for k, v in pairs(t)}


def iflip(t: _typing.Sequence[_typing.Any]) -> dict[_typing.Any, int]:
    """Map each item to its index; the highest index wins."""
    return {v: i for i, v in enumerate(t)}


def to_set(t: _typing.Any) -> dict[_typing.Any, bool]:
    """Membership set (value -> True) of a container's values."""
    return {v: True for _, v in pairs(t)}


def ito_set(t: _typing.Sequence[_typing.Any]) -> dict[_typing.Any, bool]:
    """Membership set (item -> True) of a sequence."""
    return {v: True for v in t}


def identity_set(t: _typing.Any) -> dict[_typing.Any, _typing.Any]:
    """Map each value to itself."""
    return {v: v for _, v in pairs(t)}


def set_of(value: _typing.Any, t: _typing.Any) -> dict[_typing.Any, _typing.Any]:
    """Map each value of a container to the given value."""
    return {v: value for _, v in pairs(t)}


def set_many(*containers: _typing.Any) -> dict[_typing.Any, bool]:
    """Membership set of the values of all given containers."""
    r: dict[_typing.Any, bool] = {}
    for t in containers:
        for _, v in pairs(t):
            r[v] = True
    return r


def ivalues(t: _typing.Sequence[_typing.Any]) -> list[_typing.Any]:
    """Shallow copy of a sequence's items as a list."""
    return list(t)


def iunique(t: _typing.Sequence[_typing.Any]) -> list[_typing.Any]:
    """Distinct items of a sequence, in undetermined order."""
    return keys(iflip(t))


# =============================================================================
# In-place merges
# =============================================================================


def override_many(
    t: _abc.MutableMapping[_typing.Any, _typing.Any],
    *sources: _typing.Any,
) -> _abc.MutableMapping[_typing.Any, _typing.Any]:
    """Copy every pair of every source into `t`, later sources winning."""
    for s in sources:
        for k, v in pairs(s):
            t[k] = v
    return t


def append_many(
    t: _abc.MutableMapping[_typing.Any, _typing.Any],
    *sources: _typing.Any,
) -> _abc.MutableMapping[_typing.Any, _typing.Any]:
    """
    Copy every pair of every source into `t`.

    Raises:
        InvalidArgumentError: If a key is already present in `t`. Pairs
            copied before the conflicting one stay in `t`.
    """
    for s in sources:
        for k, v in pairs(s):
            if k in t:
                raise errors.InvalidArgumentError(f"attempted to override table key {k!r}")
            t[k] = v
    return t


def ijoin_many(
    t: _abc.MutableSequence[_typing.Any],
    *sources: _typing.Sequence[_typing.Any],
) -> _abc.MutableSequence[_typing.Any]:
    """Append the items of every source to `t`. `t` may be one of the sources."""
    for s in sources:
        # Snapshot the length so joining a list with itself terminates
        for i in range(len(s)):
            t.append(s[i])
    return t


# =============================================================================
# Array helpers
# =============================================================================


def iinsert_args(
    t: _abc.MutableSequence[_typing.Any],
    *items: _typing.Any,
) -> _abc.MutableSequence[_typing.Any]:
    """Append items to `t`, stopping at the first None."""
    for item in items:
        if item is None:
            break
        t.append(item)
    return t


def imap(
    fn: _typing.Callable[..., _typing.Any],
    t: _typing.Sequence[_typing.Any],
    *extra: _typing.Any,
) -> list[_typing.Any]:
    """Apply `fn(item, *extra)` to each item into a new list."""
    return [fn(v, *extra) for v in t]


def imap_inplace(
    fn: _typing.Callable[..., _typing.Any],
    t: _abc.MutableSequence[_typing.Any],
    *extra: _typing.Any,
) -> _abc.MutableSequence[_typing.Any]:
    """Replace each item of `t` with `fn(item, *extra)`."""
    for i in range(len(t)):
        t[i] = fn(t[i], *extra)
    return t


def imap_sliding(
    fn: _typing.Callable[..., _typing.Any],
    t: _typing.Sequence[_typing.Any],
    *extra: _typing.Any,
) -> list[_typing.Any]:
    """
    Apply `fn(item, *extra)` and flatten the results.

    `fn` may return a single value or a tuple of values; values are
    appended up to the first None of each result.
    """
    r: list[_typing.Any] = []
    for v in t:
        result = fn(v, *extra)
        if isinstance(result, tuple):
            iinsert_args(r, *result)
        else:
            iinsert_args(r, result)
    return r


def ifilter(
    pred: _typing.Callable[..., _typing.Any],
    t: _typing.Sequence[_typing.Any],
    *extra: _typing.Any,
) -> list[_typing.Any]:
    """Items of `t` for which `pred(item, *extra)` is truthy, in order."""
    return [v for v in t if pred(v, *extra)]


def iwalk(
    fn: _typing.Callable[..., _typing.Any],
    t: _typing.Sequence[_typing.Any],
    *extra: _typing.Any,
) -> None:
    """Call `fn(item, *extra)` for each item."""
    for v in t:
        fn(v, *extra)


def iwalker(
    fn: _typing.Callable[[_typing.Any], _typing.Any],
) -> _typing.Callable[[_typing.Sequence[_typing.Any]], None]:
    """Return a function that calls `fn` on each item of its argument."""

    def walker(t: _typing.Sequence[_typing.Any]) -> None:
        for v in t:
            fn(v)

    return walker


def walk_pairs(fn: _typing.Callable[[_typing.Any, _typing.Any], _typing.Any], t: _typing.Any) -> None:
    """Call `fn(key, value)` for each pair of a container."""
    for k, v in pairs(t):
        fn(k, v)


def generate_n(
    n: int,
    generator: _typing.Callable[..., _typing.Any],
    *extra: _typing.Any,
) -> list[_typing.Any]:
    """List of `n` results of `generator(*extra)`."""
    return [generator(*extra) for _ in range(n)]


def imap_of_records(
    t: _typing.Sequence[_abc.Mapping[_typing.Any, _typing.Any]],
    key: _typing.Any,
) -> dict[_typing.Any, _abc.Mapping[_typing.Any, _typing.Any]]:
    """
    Index a sequence of records by one of their fields.

    Raises:
        NotFoundError: If a record lacks the field (or holds None in it).
    """
    r: dict[_typing.Any, _abc.Mapping[_typing.Any, _typing.Any]] = {}
    for record in t:
        value = record.get(key)
        if value is None:
            raise errors.NotFoundError(key, f"missing record key field {key!r}")
        r[value] = record
    return r


# =============================================================================
# Mapping helpers
# =============================================================================


def equals(lhs: _typing.Any, rhs: _typing.Any) -> bool:
    """Shallow equality: same keys, values compared with ==."""
    left = dict(pairs(lhs))
    right = dict(pairs(rhs))
    if left.keys() != right.keys():
        return False
    return all(left[k] == right[k] for k in left)


def count_elements(t: _typing.Any) -> int:
    """Number of pairs in a container."""
    return sum(1 for _ in pairs(t))


def remap_to_array(fn: _typing.Callable[[_typing.Any, _typing.Any], _typing.Any], t: _typing.Any) -> list[_typing.Any]:
    """List of `fn(key, value)` for each pair."""
    return [fn(k, v) for k, v in pairs(t)]


def _same_shape(
    t: _typing.Any,
    items: _typing.Iterable[tuple[_typing.Any, _typing.Any]],
) -> _typing.Any:
    if isinstance(t, _abc.Mapping):
        return dict(items)
    return [v for _, v in items]


def map_values(
    fn: _typing.Callable[..., _typing.Any],
    t: _typing.Any,
    *extra: _typing.Any,
) -> _typing.Any:
    """Container of the same shape with each value replaced by `fn(value, *extra)`."""
    return _same_shape(t, ((k, fn(v, *extra)) for k, v in pairs(t)))


def accumulate(t: _typing.Any, init: _typing.Any = 0) -> _typing.Any:
    """Sum of a container's values, starting from `init`."""
    total = init
    for _, v in pairs(t):
        total = total + v
    return total


def normalize(t: _typing.Any, total: _typing.Any = None) -> _typing.Any:
    """Container of the same shape with every value divided by `total` (default: the sum)."""
    if total is None:
        total = accumulate(t)
    return _same_shape(t, ((k, v / total) for k, v in pairs(t)))


def normalize_inplace(t: _typing.Any, total: _typing.Any = None) -> _typing.Any:
    """Divide every value of a mutable Mapping or Sequence by `total` (default: the sum)."""
    if not isinstance(t, (_abc.MutableMapping, _abc.MutableSequence)):
        raise errors.InvalidArgumentError(
            f"expected a mutable table, got `{args.type_name(t)}'", position=1
        )
    if total is None:
        total = accumulate(t)
    if isinstance(t, _abc.MutableMapping):
        for k in list(t):
            t[k] = t[k] / total
    else:
        for i in range(len(t)):
            t[i] = t[i] / total
    return t
