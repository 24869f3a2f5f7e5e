"""MessagePack format reader for dsconv."""

from __future__ import annotations

from typing import Any

import msgpack

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry


def _reject_ext(code: int, data: bytes) -> Any:
    raise ValueError(f"unsupported extension type {code}")


@FormatRegistry.register_reader(Format.MESSAGEPACK)
class MessagePackReader:
    """Reader for MessagePack objects.

    Strings are decoded as UTF-8, bin types as bytes, and the timestamp
    extension as timezone-aware datetimes. Maps may have keys of any
    hashable type. Other extension types are rejected.
    """

    # unpackb reports malformed, truncated and trailing data as ValueError
    # subclasses; unhashable map keys surface as TypeError
    errors = (ValueError, TypeError)

    @property
    def format(self) -> Format:
        return Format.MESSAGEPACK

    def decode(self, data: bytes) -> Any:
        return msgpack.unpackb(
            data,
            raw=False,
            strict_map_key=False,
            timestamp=3,
            ext_hook=_reject_ext,
        )
