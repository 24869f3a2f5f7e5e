"""YAML format writer for dsconv."""

from __future__ import annotations

import datetime as dt
from typing import Any

import yaml

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry


class _Dumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors for repeated objects."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _represent_time(dumper: yaml.SafeDumper, value: dt.time) -> yaml.Node:
    # YAML has no time-of-day type
    return dumper.represent_str(value.isoformat())


_Dumper.add_representer(dt.time, _represent_time)


@FormatRegistry.register_writer(Format.YAML)
class YAMLWriter:
    """Writer for YAML documents in block style.

    Key order is kept as decoded. Times of day have no YAML type and are
    written as ISO-8601 strings. YAML has a single rendering, so the
    pretty flag is accepted and ignored.
    """

    errors = (yaml.YAMLError,)

    @property
    def format(self) -> Format:
        return Format.YAML

    def encode(self, value: Any, pretty: bool = False) -> bytes:
        text = yaml.dump(
            value,
            Dumper=_Dumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        return text.encode("utf-8")
