"""
Generic container toolkit.

- Container basics: keys/values extraction, flips, membership sets
- clone(): cycle-safe deep copy; with_defaults() built on it
- OrderedSet: positional and membership views kept consistent
- wrap()/wrap_ex(): recursive read-only views with injected methods

Example:
    >>> import tablekit.tables as tables
    >>> view = tables.wrap({"x": {"y": 1}})
    >>> view.x.y
    1
"""

from tablekit.tables._basics import (
    accumulate,
    append_many,
    count_elements,
    equals,
    flip,
    generate_n,
    identity_set,
    ifilter,
    iflip,
    iinsert_args,
    ijoin_many,
    imap,
    imap_inplace,
    imap_of_records,
    imap_sliding,
    ito_set,
    iunique,
    ivalues,
    iwalk,
    iwalker,
    keys,
    keys_values,
    map_values,
    normalize,
    normalize_inplace,
    override_many,
    pairs,
    remap_to_array,
    set_many,
    set_of,
    to_set,
    values,
    walk_pairs,
)
from tablekit.tables._clone import clone, with_defaults
from tablekit.tables._ordered_set import InsertResult, OrderedSet, RemoveResult
from tablekit.tables._readonly import (
    EMPTY_TABLE,
    ReadOnlyMapping,
    ReadOnlySequence,
    ReadOnlySet,
    ReadOnlyView,
    wrap,
    wrap_ex,
)

__all__ = [
    "EMPTY_TABLE",
    "InsertResult",
    "OrderedSet",
    "ReadOnlyMapping",
    "ReadOnlySequence",
    "ReadOnlySet",
    "ReadOnlyView",
    "RemoveResult",
    "accumulate",
    "append_many",
    "clone",
    "count_elements",
    "equals",
    "flip",
    "generate_n",
    "identity_set",
    "ifilter",
    "iflip",
    "iinsert_args",
    "ijoin_many",
    "imap",
    "imap_inplace",
    "imap_of_records",
    "imap_sliding",
    "ito_set",
    "iunique",
    "ivalues",
    "iwalk",
    "iwalker",
    "keys",
    "keys_values",
    "map_values",
    "normalize",
    "normalize_inplace",
    "override_many",
    "pairs",
    "remap_to_array",
    "set_many",
    "set_of",
    "to_set",
    "values",
    "walk_pairs",
    "with_defaults",
]
