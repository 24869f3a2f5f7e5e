"""TOML format writer for dsconv."""

from __future__ import annotations

from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import AoT, Array, Table

from dsconv.core.exceptions import EncodeError
from dsconv.core.models import Format
from dsconv.core.values import ensure_string_keys, iter_nodes, type_name
from dsconv.formats.registry import FormatRegistry

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def check_toml_value(value: Any) -> None:
    """Raise EncodeError unless value fits TOML's data model.

    TOML requires a table at the root and string keys, has no null or
    byte string type, and limits integers to 64-bit signed.
    """
    if not isinstance(value, dict):
        raise EncodeError(
            Format.TOML, f"the document root must be a map, got a {type_name(value)}"
        )

    ensure_string_keys(value, Format.TOML)

    for location, node in iter_nodes(value):
        if node is None or isinstance(node, bytes):
            raise EncodeError(
                Format.TOML, f"{type_name(node)} at {location} has no TOML representation"
            )
        if isinstance(node, int) and not isinstance(node, bool):
            if not INT64_MIN <= node <= INT64_MAX:
                raise EncodeError(
                    Format.TOML, f"integer {node} at {location} is out of the 64-bit range"
                )


def _expand_arrays(container: Any) -> None:
    """Render every non-empty array below container one element per line."""
    for item in container.values():
        if isinstance(item, Array):
            if len(item) > 0:
                item.multiline(True)
        elif isinstance(item, Table):
            _expand_arrays(item)
        elif isinstance(item, AoT):
            for table in item:
                _expand_arrays(table)


@FormatRegistry.register_writer(Format.TOML)
class TOMLWriter:
    """Writer for TOML documents.

    Scalars of a table are written before its sub-tables, as TOML
    requires; otherwise key order is kept. Pretty output puts each array
    element on its own line.
    """

    errors = (TOMLKitError, TypeError, ValueError)

    @property
    def format(self) -> Format:
        return Format.TOML

    def encode(self, value: Any, pretty: bool = False) -> bytes:
        check_toml_value(value)

        document = tomlkit.document()
        for key, item in value.items():
            document.add(key, item)

        if pretty:
            _expand_arrays(document)

        return tomlkit.dumps(document).encode("utf-8")
