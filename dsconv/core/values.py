"""Generic value model for dsconv.

Every reader produces, and every writer consumes, a tree of plain Python
values:

    null        None
    boolean     bool
    integer     int (arbitrary width)
    float       float
    string      str
    byte string bytes
    sequence    list
    map         dict (insertion ordered; keys are hashable scalars)
    date/time   datetime.datetime, datetime.date, datetime.time

Readers run their library output through normalize() so that library
specific containers (OrderedDict, tuples, frozen dicts) never reach a
writer. Writers use the inspection helpers below to reject shapes their
format cannot hold instead of coercing them silently.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from dsconv.core.exceptions import EncodeError

if TYPE_CHECKING:
    from dsconv.core.models import Format

SCALAR_TYPES = (type(None), bool, int, float, str, bytes, dt.datetime, dt.date, dt.time)
TEMPORAL_TYPES = (dt.datetime, dt.date, dt.time)

_TYPE_NAMES = [
    (type(None), "null"),
    (bool, "boolean"),
    (int, "integer"),
    (float, "float"),
    (str, "string"),
    (bytes, "byte string"),
    (list, "sequence"),
    (dict, "map"),
    # datetime is a subclass of date, so it must be checked first
    (dt.datetime, "datetime"),
    (dt.date, "date"),
    (dt.time, "time"),
]


def type_name(value: Any) -> str:
    """Return the model name of a value's type, e.g. 'map' or 'byte string'."""
    for python_type, name in _TYPE_NAMES:
        if isinstance(value, python_type):
            return name
    return type(value).__name__


def normalize(value: Any) -> Any:
    """Convert a decoded library value into the generic value model.

    Args:
        value: Output of a parser library.

    Returns:
        Equivalent value built only from dict, list and scalar types.

    Raises:
        TypeError: If the value contains an object outside the model,
            e.g. a CBOR semantic tag or a MessagePack extension type.
    """
    if isinstance(value, Mapping):
        return {_normalize_key(key): normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, SCALAR_TYPES):
        return value
    raise TypeError(f"unsupported value of type {type(value).__name__}: {value!r}")


def _normalize_key(key: Any) -> Any:
    if isinstance(key, SCALAR_TYPES):
        return key
    if isinstance(key, tuple):
        return tuple(_normalize_key(part) for part in key)
    raise TypeError(f"unsupported map key of type {type(key).__name__}: {key!r}")


def _child_location(location: str, key: Any) -> str:
    if isinstance(key, str) and key.isidentifier():
        return f"{location}.{key}"
    return f"{location}[{key!r}]"


def iter_nodes(value: Any, location: str = "$") -> Iterator[tuple[str, Any]]:
    """Walk a value depth-first, yielding (location, node) pairs.

    Locations use a JSONPath-like notation: ``$.servers[0]['ip addr']``.
    """
    yield location, value
    if isinstance(value, dict):
        for key, item in value.items():
            yield from iter_nodes(item, _child_location(location, key))
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from iter_nodes(item, f"{location}[{index}]")


def find_node(value: Any, types: tuple[type, ...]) -> tuple[str, Any] | None:
    """Return the first (location, node) whose node is an instance of types."""
    for location, node in iter_nodes(value):
        if isinstance(node, types):
            return location, node
    return None


def ensure_string_keys(value: Any, format: Format) -> None:
    """Raise EncodeError if any map in value has a non-string key."""
    for location, node in iter_nodes(value):
        if not isinstance(node, dict):
            continue
        for key in node:
            if not isinstance(key, str):
                raise EncodeError(
                    format,
                    f"map key {key!r} at {location} is a {type_name(key)}, "
                    "only string keys are supported",
                )


def temporals_to_iso(value: Any) -> Any:
    """Replace date and time values (keys included) with ISO-8601 strings."""
    if isinstance(value, TEMPORAL_TYPES):
        return value.isoformat()
    if isinstance(value, dict):
        return {temporals_to_iso(key): temporals_to_iso(item) for key, item in value.items()}
    if isinstance(value, list):
        return [temporals_to_iso(item) for item in value]
    return value
