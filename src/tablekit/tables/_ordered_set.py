"""
Ordered set: positional and membership views of the same items.

Both views are kept consistent under insert and remove:

    membership[item] == position  <=>  array[position] == item

Positions are 1-based and dense. Numbers cannot be members: a number
member would be ambiguous with a position. Callers needing an ordered
set of numbers should keep a separate list and dict.

Example:
    >>> s = OrderedSet(["a", "b", "c", "d"])
    >>> s.remove("b")
    <RemoveResult.REMOVED: 'removed'>
    >>> s.array
    ('a', 'c', 'd')
    >>> dict(s.membership)
    {'a': 1, 'c': 2, 'd': 3}
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import logging as _logging
import types as _types
import typing as _typing

import tablekit.args as args
import tablekit.config as config
import tablekit.errors as errors

_logger = _logging.getLogger(__name__)


class InsertResult(_enum.Enum):
    """Outcome of OrderedSet.insert()."""

    INSERTED = "inserted"
    ALREADY_EXISTED = "already_existed"

    def __bool__(self) -> bool:
        return self is InsertResult.INSERTED


class RemoveResult(_enum.Enum):
    """Outcome of OrderedSet.remove()."""

    REMOVED = "removed"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is RemoveResult.REMOVED


def _check_member(item: _typing.Any, action: str) -> None:
    if args.is_number(item):
        raise errors.InvalidArgumentError(f"can't {action} ordered set")
    try:
        hash(item)
    except TypeError:
        raise errors.InvalidArgumentError(
            f"ordered set members must be hashable, got `{type(item).__name__}'"
        ) from None


class OrderedSet(_abc.Collection[_typing.Any]):
    """
    Set of hashable, non-numeric items that remembers insertion order.

    insert() appends in O(1). remove() is O(n - p) for an item at
    position p: every later item is renumbered so positions stay dense
    and order is preserved.

    Not thread-safe; callers synchronize externally.
    """

    __slots__ = ("_items", "_positions")

    def __init__(self, items: _typing.Iterable[_typing.Any] = ()) -> None:
        """
        Build an ordered set from an ordered sequence of items.

        Args:
            items: Initial members, in order.

        Raises:
            InvalidArgumentError: If an item is a number, unhashable, or appears twice.
        """
        ordered = list(items)
        positions: dict[_typing.Any, int] = {}
        for i, item in enumerate(ordered, start=1):
            _check_member(item, "insert number into")
            if item in positions:
                raise errors.InvalidArgumentError(
                    f"duplicate item {item!r} at positions {positions[item]} and {i}"
                )
            positions[item] = i

        self._items: list[_typing.Any] = ordered
        self._positions: dict[_typing.Any, int] = positions
        self._after_mutation()

    # =========================================================================
    # Mutation
    # =========================================================================

    def insert(self, item: _typing.Any) -> InsertResult:
        """
        Append an item unless it is already a member.

        Returns:
            INSERTED, or ALREADY_EXISTED (nothing changed).

        Raises:
            InvalidArgumentError: If item is a number or unhashable.
        """
        _check_member(item, "insert number into")

        if item in self._positions:
            return InsertResult.ALREADY_EXISTED

        self._items.append(item)
        self._positions[item] = len(self._items)
        self._after_mutation()
        return InsertResult.INSERTED

    def remove(self, item: _typing.Any) -> RemoveResult:
        """
        Remove an item and renumber the ones after it.

        Returns:
            REMOVED, or NOT_FOUND (nothing changed).

        Raises:
            InvalidArgumentError: If item is a number or unhashable.
        """
        _check_member(item, "remove number from")

        pos = self._positions.pop(item, None)
        if pos is None:
            return RemoveResult.NOT_FOUND

        del self._items[pos - 1]
        for i in range(pos - 1, len(self._items)):
            self._positions[self._items[i]] = i + 1

        _logger.debug(
            "Removed %r from position %d, renumbered %d items",
            item,
            pos,
            len(self._items) - pos + 1,
        )
        self._after_mutation()
        return RemoveResult.REMOVED

    # =========================================================================
    # Queries
    # =========================================================================

    def position(self, item: _typing.Any) -> int | None:
        """1-based position of an item, or None if absent."""
        return self._positions.get(item)

    def at(self, position: int) -> _typing.Any:
        """
        Item at a 1-based position.

        Raises:
            InvalidArgumentError: If position is not an integer.
            NotFoundError: If the position is outside 1..len(self).
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise errors.InvalidArgumentError(
                f"position must be an integer, got `{args.type_name(position)}'"
            )
        if not 1 <= position <= len(self._items):
            raise errors.NotFoundError(position, f"no item at position {position}")
        return self._items[position - 1]

    @property
    def array(self) -> tuple[_typing.Any, ...]:
        """Members in position order."""
        return tuple(self._items)

    @property
    def membership(self) -> _abc.Mapping[_typing.Any, int]:
        """Read-only live view of item -> position."""
        return _types.MappingProxyType(self._positions)

    def check(self) -> None:
        """
        Verify that both views agree.

        Raises:
            InvalidStructureError: On any inconsistency.
        """
        if len(self._items) != len(self._positions):
            raise errors.InvalidStructureError(
                f"ordered set has {len(self._items)} positions "
                f"but {len(self._positions)} members"
            )
        for item, pos in self._positions.items():
            if not 1 <= pos <= len(self._items) or self._items[pos - 1] != item:
                raise errors.InvalidStructureError(
                    f"ordered set member {item!r} points at position {pos}"
                )

    def _after_mutation(self) -> None:
        if config.get_settings().ordered_set.check_invariants:
            self.check()

    # =========================================================================
    # Collection protocol
    # =========================================================================

    def __contains__(self, item: object) -> bool:
        try:
            return item in self._positions
        except TypeError:
            # Unhashable values can't be members
            return False

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._items)

    def __reversed__(self) -> _typing.Iterator[_typing.Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"

    def __eq__(self, other: object) -> bool:
        """Equal to another OrderedSet with the same items in the same order."""
        if isinstance(other, OrderedSet):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        """OrderedSet is mutable and not hashable."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")
