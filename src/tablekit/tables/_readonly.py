"""
Read-only views of mutable containers.

A view is a lens over a container, not a copy: changes made through the
original reference are visible through the view. Nested containers are
wrapped on access, so the entire structure is read-only through the view.

ReadOnlyMapping wraps Mappings, ReadOnlySequence wraps Sequences and
ReadOnlySet wraps Sets. Each is a real collection, so dict(view),
list(view) and friends work as on the underlying data.

A view can carry a method table. When a key is absent from the data and
names a method, reading it returns a callable that invokes the method
with the raw container as first argument:

    >>> data = {"name": "world"}
    >>> view = wrap(data, {"greet": lambda t, greeting: f"{greeting}, {t['name']}"})
    >>> view.greet("hello")
    'hello, world'
    >>> view["name"] = "x"  # ReadOnlyViolationError
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import types as _types
import typing as _typing

import tablekit.args as args
import tablekit.config as config
import tablekit.errors as errors

_logger = _logging.getLogger(__name__)

Methods: _typing.TypeAlias = _abc.Mapping[str, _typing.Callable[..., _typing.Any]]
Stringifier: _typing.TypeAlias = _typing.Callable[[_typing.Any], str]

EMPTY_TABLE: _abc.Mapping[_typing.Any, _typing.Any] = _types.MappingProxyType({})
"""Shared immutable empty mapping."""

_ABSENT = object()


def _raw_get(container: _typing.Any, key: _typing.Any) -> _typing.Any:
    """Look a key up in the underlying container, returning _ABSENT on a miss."""
    if isinstance(container, _abc.Mapping):
        try:
            return container[key] if key in container else _ABSENT
        except TypeError:
            # Unhashable key
            return _ABSENT
    if isinstance(container, _abc.Set):
        try:
            return True if key in container else _ABSENT
        except TypeError:
            return _ABSENT
    if isinstance(key, int) and not isinstance(key, bool):
        if -len(container) <= key < len(container):
            return container[key]
    return _ABSENT


class ReadOnlyView:
    """
    Common base of the read-only views.

    Reads go to the underlying container. Nested containers come back as
    fresh views sharing this view's methods, stringifier and nil policy.
    Every write or delete raises ReadOnlyViolationError.

    Keys are readable with item syntax (view[key]) and, for string keys
    that don't start with an underscore, attribute syntax (view.key).
    Attribute syntax can't reach keys named like the view's own
    attributes (keys, items, get, index, ...); use item syntax for those.

    Build views with wrap() or wrap_ex(), which validate their arguments
    and pick the subclass matching the container.
    """

    __slots__ = ("_data", "_methods", "_stringifier", "_disable_nil")

    def __init__(
        self,
        data: _typing.Any,
        methods: Methods,
        stringifier: Stringifier | None,
        disable_nil: bool,
    ) -> None:
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_methods", methods)
        object.__setattr__(self, "_stringifier", stringifier)
        object.__setattr__(self, "_disable_nil", disable_nil)

    def _derive(self, data: _typing.Any) -> ReadOnlyView:
        return _view_class(data)(data, self._methods, self._stringifier, self._disable_nil)

    def _wrap_value(self, value: _typing.Any) -> _typing.Any:
        if args.is_container(value):
            return self._derive(value)
        return value

    def _lookup(self, key: _typing.Any) -> _typing.Any:
        value = _raw_get(self._data, key)

        if value is _ABSENT:
            fn = self._methods.get(key) if isinstance(key, _abc.Hashable) else None
            if fn is not None:
                data = self._data

                def bound(*call_args: _typing.Any, **call_kwargs: _typing.Any) -> _typing.Any:
                    return fn(data, *call_args, **call_kwargs)

                return bound
            if self._disable_nil:
                raise errors.NotFoundError(key)
            return None

        return self._wrap_value(value)

    # =========================================================================
    # Reads
    # =========================================================================

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        """
        Get a value, wrapping nested containers.

        Raises:
            NotFoundError: If the key is absent, names no method, and nil
                reads are disabled.
        """
        return self._lookup(key)

    def __getattr__(self, name: str) -> _typing.Any:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._lookup(name)
        except errors.NotFoundError:
            raise errors.MissingAttributeError(name) from None

    def __len__(self) -> int:
        return len(self._data)

    # =========================================================================
    # Writes (always rejected)
    # =========================================================================

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        raise errors.ReadOnlyViolationError(key)

    def __delitem__(self, key: _typing.Any) -> None:
        raise errors.ReadOnlyViolationError(key)

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        raise errors.ReadOnlyViolationError(name)

    def __delattr__(self, name: str) -> None:
        raise errors.ReadOnlyViolationError(name)

    # =========================================================================
    # Copying
    # =========================================================================

    def __copy__(self) -> ReadOnlyView:
        """Another view over the same container."""
        return self._derive(self._data)

    def __deepcopy__(self, memo: dict[int, _typing.Any]) -> ReadOnlyView:
        """A view over a deep copy of the container."""
        return self._derive(_copy.deepcopy(self._data, memo))

    # =========================================================================
    # Presentation and comparison
    # =========================================================================

    def __str__(self) -> str:
        if self._stringifier is not None:
            return self._stringifier(self._data)
        return repr(self)

    def __repr__(self) -> str:
        return f"ReadOnlyView({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare the underlying data with another view's data or a plain container."""
        if isinstance(other, ReadOnlyView):
            return bool(self._data == other._data)
        if args.is_container(other):
            return bool(self._data == other)
        return NotImplemented

    def __hash__(self) -> int:
        """ReadOnlyView is not hashable (the data behind it may change)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class ReadOnlyMapping(ReadOnlyView, _abc.Mapping[_typing.Any, _typing.Any]):
    """
    Read-only view of a Mapping.

    Example:
        >>> view = wrap({"a": {"b": [1, 2, 3]}})
        >>> view["a"]["b"][0]
        1
        >>> dict(view["a"])
        {'b': ReadOnlyView([1, 2, 3])}
    """

    __slots__ = ()

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        """Iterate over keys."""
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        """Check if the underlying mapping holds the key. Methods don't count."""
        return _raw_get(self._data, key) is not _ABSENT

    def get(self, key: _typing.Any, default: _typing.Any = None) -> _typing.Any:
        """Value for a present key, else default. Methods and the nil policy don't apply."""
        if key in self:
            return self[key]
        return default


class ReadOnlySequence(ReadOnlyView, _abc.Sequence[_typing.Any]):
    """
    Read-only view of a Sequence.

    Indexes are Python indexes: 0-based, negative from the end. Slicing
    returns a view over the sliced data.
    """

    __slots__ = ()

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        """Get an item or slice, wrapping nested containers."""
        if isinstance(key, slice):
            return self._derive(self._data[key])
        return self._lookup(key)

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        """Iterate over wrapped items."""
        for value in self._data:
            yield self._wrap_value(value)

    def __contains__(self, value: object) -> bool:
        """Check if the underlying sequence holds the item."""
        return value in self._data


class ReadOnlySet(ReadOnlyView, _abc.Set[_typing.Any]):
    """
    Read-only view of a Set.

    Reading a member yields True. Set operators (&, |, -, ^) return plain
    sets.
    """

    __slots__ = ()

    @classmethod
    def _from_iterable(cls, it: _typing.Iterable[_typing.Any]) -> set[_typing.Any]:
        return set(it)

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        """Iterate over wrapped members."""
        for value in self._data:
            yield self._wrap_value(value)

    def __contains__(self, value: object) -> bool:
        """Check if the underlying set holds the member."""
        return _raw_get(self._data, value) is not _ABSENT


def _view_class(container: _typing.Any) -> type[ReadOnlyView]:
    if isinstance(container, _abc.Mapping):
        return ReadOnlyMapping
    if isinstance(container, _abc.Set):
        return ReadOnlySet
    return ReadOnlySequence


def container_id(value: _typing.Any) -> int:
    """
    Identity of the container behind a view, or of the value itself.

    Views are rebuilt on every read, so two reads of the same nested
    container give different view objects; this gives them the same id.
    """
    while isinstance(value, ReadOnlyView):
        value = value._data
    return id(value)


def wrap(
    container: _typing.Any,
    methods: Methods | None = None,
    stringifier: Stringifier | None = None,
    disable_nil: bool | None = None,
) -> ReadOnlyView:
    """
    Build a read-only view of a container.

    Args:
        container: Mapping, Sequence or Set to expose (a view is fine
            too). Not copied.
        methods: Name → function table. A function receives the raw
            container followed by the caller's arguments.
        stringifier: Function used by str(view); it receives the raw container.
        disable_nil: Raise NotFoundError on absent keys (True) or return
            None (False). None uses the configured default.

    Returns:
        A ReadOnlyMapping, ReadOnlySequence or ReadOnlySet.

    Raises:
        InvalidArgumentError: If an argument has the wrong type. Checked
            before the view is built.
    """
    args.arguments(
        "table", container,
    )
    args.optional_arguments(
        "table", methods,
        "function", stringifier,
        "boolean", disable_nil,
        first=2,
    )

    if methods is None:
        methods = EMPTY_TABLE
    elif not isinstance(methods, _abc.Mapping):
        raise errors.InvalidArgumentError(
            f"argument #2: expected a mapping of methods, got `{type(methods).__name__}'",
            position=2,
        )
    else:
        for name, fn in methods.items():
            if not callable(fn):
                raise errors.InvalidArgumentError(
                    f"argument #2: method {name!r} is `{args.type_name(fn)}', not a function",
                    position=2,
                )

    if disable_nil is None:
        disable_nil = config.get_settings().readonly.disable_nil

    _logger.debug(
        "Wrapping %s read-only (%d methods, disable_nil=%s)",
        type(container).__name__,
        len(methods),
        disable_nil,
    )
    return _view_class(container)(container, methods, stringifier, disable_nil)


def wrap_ex(
    container: _typing.Any,
    methods: Methods | None = None,
    stringifier: Stringifier | None = None,
    disable_nil: bool | None = None,
) -> tuple[ReadOnlyView, _typing.Any]:
    """
    Like wrap(), but also return the container itself.

    Changes made through the returned container are visible through the view.
    """
    return wrap(container, methods, stringifier, disable_nil), container
