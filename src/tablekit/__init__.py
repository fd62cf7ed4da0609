"""
Tablekit - container toolkit.

Ordered sets, cycle-safe deep clones, read-only views with injected
methods, and a handful of table and string helpers.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("tablekit")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Tablekit Contributors"

from tablekit.config import Settings, get_settings  # noqa: E402
from tablekit.errors import (  # noqa: E402
    InvalidArgumentError,
    InvalidStructureError,
    MissingAttributeError,
    NotFoundError,
    ReadOnlyViolationError,
    TablekitError,
)
from tablekit.tables import OrderedSet, ReadOnlyView, clone, wrap, wrap_ex  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "InvalidArgumentError",
    "InvalidStructureError",
    "MissingAttributeError",
    "NotFoundError",
    "OrderedSet",
    "ReadOnlyView",
    "ReadOnlyViolationError",
    "Settings",
    "TablekitError",
    "clone",
    "get_settings",
    "wrap",
    "wrap_ex",
]
