"""
String helpers: escaping, placeholder filling, splitting and a buffer.
"""

from __future__ import annotations

import collections.abc as _abc
import re as _re
import typing as _typing

import tablekit.errors as errors

_CONTROL_CHARS = _re.compile(r"[\x00-\x1f\x7f]")
_HTML_SPECIAL = _re.compile(r"[&\"'<>]")
_HTML_SUBST = {
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}
_PLACEHOLDER = _re.compile(r"\$\((.*?)\)")
_CURLY_PLACEHOLDER = _re.compile(r"\$\{(.*?)\}")

Cat: _typing.TypeAlias = _typing.Callable[[_typing.Any], "Cat"]


def make_concatter() -> tuple[Cat, _typing.Callable[..., str]]:
    """
    Create a string buffer.

    Returns:
        (cat, concat): cat(value) appends str(value) and returns cat, so
        calls chain: cat("a")("b"). concat(glue="") joins the buffer.

    Example:
        >>> cat, concat = make_concatter()
        >>> cat("a")("b")("c")  # doctest: +ELLIPSIS
        <function ...>
        >>> concat(",")
        'a,b,c'
    """
    buf: list[str] = []

    def cat(value: _typing.Any) -> Cat:
        buf.append(str(value))
        return cat

    def concat(glue: str = "") -> str:
        return glue.join(buf)

    return cat, concat


def trim(s: str) -> str:
    """Remove leading and trailing whitespace."""
    return s.strip()


def escape_string(s: str) -> str:
    """Replace control characters with %XX escapes."""
    return _CONTROL_CHARS.sub(lambda m: f"%{ord(m.group()):02X}", s)


def htmlspecialchars(value: str) -> str:
    """Escape &, ", ', < and > as HTML entities."""
    return _HTML_SPECIAL.sub(lambda m: _HTML_SUBST[m.group()], value)


def _fill(pattern: _re.Pattern[str], s: str, values: _abc.Mapping[str, _typing.Any]) -> str:
    def replace(m: _re.Match[str]) -> str:
        name = m.group(1)
        if name in values and values[name] is not None:
            return str(values[name])
        return m.group()

    return pattern.sub(replace, s)


def fill_placeholders(s: str, values: _abc.Mapping[str, _typing.Any]) -> str:
    """Replace $(name) with values[name]. Unknown names are left as-is."""
    return _fill(_PLACEHOLDER, s, values)


def fill_curly_placeholders(s: str, values: _abc.Mapping[str, _typing.Any]) -> str:
    """Replace ${name} with values[name]. Unknown names are left as-is."""
    return _fill(_CURLY_PLACEHOLDER, s, values)


def _cdata_escape(value: str) -> str:
    # "]]>" is escaped as ("]]" + "]]><![CDATA[" + ">")
    return value.replace("]]>", "]]]]><![CDATA[>")


def cdata_wrap(value: str) -> str:
    """Wrap a string in a CDATA section, splitting any embedded "]]>"."""
    return "<![CDATA[" + _cdata_escape(value) + "]]>"


def cdata_cat(cat: Cat, value: str) -> None:
    """Append a CDATA-wrapped string to a make_concatter() buffer."""
    cat("<![CDATA[")(_cdata_escape(value))("]]>")


def split_by_char(s: str, div: str) -> list[str] | None:
    """
    Split on a plain-text divider.

    Returns:
        None if the divider is empty, [] if the string is empty,
        otherwise the pieces (including empty ones).
    """
    if div == "":
        return None
    if s == "":
        return []
    return s.split(div)


def split_by_offset(s: str, offset: int, skip_right: int = 0) -> tuple[str, str]:
    """
    Split a string at an offset.

    Args:
        s: String to split.
        offset: Length of the left part.
        skip_right: Characters to drop from the start of the right part.

    Raises:
        InvalidArgumentError: If offset is past the end of the string.
    """
    if offset > len(s):
        raise errors.InvalidArgumentError(
            f"offset {offset} is past the end of a string of length {len(s)}",
            position=2,
        )
    return s[:offset], s[offset + skip_right :]


def count_substrings(s: str, substr: str) -> int:
    """
    Count non-overlapping occurrences of a plain substring.

    Raises:
        InvalidArgumentError: If substr is empty.
    """
    if substr == "":
        raise errors.InvalidArgumentError("substring must not be empty", position=2)
    return s.count(substr)
