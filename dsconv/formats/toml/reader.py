"""TOML format reader for dsconv."""

from __future__ import annotations

import tomllib
from typing import Any

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry
from dsconv.formats.text import decode_text


@FormatRegistry.register_reader(Format.TOML)
class TOMLReader:
    """Reader for TOML documents.

    Offset date-times, local date-times, local dates and local times
    decode to datetime, date and time objects.
    """

    errors = (tomllib.TOMLDecodeError,)

    @property
    def format(self) -> Format:
        return Format.TOML

    def decode(self, data: bytes) -> Any:
        return tomllib.loads(decode_text(data))
