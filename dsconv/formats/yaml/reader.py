"""YAML format reader for dsconv."""

from __future__ import annotations

from typing import Any

import yaml

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry
from dsconv.formats.text import decode_text


@FormatRegistry.register_reader(Format.YAML)
class YAMLReader:
    """Reader for single-document YAML streams.

    An empty stream decodes to null. Streams with more than one document
    are rejected by the loader.
    """

    errors = (yaml.YAMLError,)

    @property
    def format(self) -> Format:
        return Format.YAML

    def decode(self, data: bytes) -> Any:
        return yaml.safe_load(decode_text(data))
