"""Core domain models for dsconv.

Defines the closed set of serialization formats and the per-invocation
conversion request that flows through the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Format(Enum):
    """Serialization formats known to dsconv."""

    CBOR = "cbor"
    HJSON = "hjson"
    JSON = "json"
    JSON5 = "json5"
    MESSAGEPACK = "messagepack"
    RON = "ron"
    TOML = "toml"
    YAML = "yaml"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'MessagePack'."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Format.CBOR: "CBOR",
    Format.HJSON: "Hjson",
    Format.JSON: "JSON",
    Format.JSON5: "JSON5",
    Format.MESSAGEPACK: "MessagePack",
    Format.RON: "RON",
    Format.TOML: "TOML",
    Format.YAML: "YAML",
}


class Color(str, Enum):
    """When to colorize diagnostics."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class ConversionRequest:
    """A fully resolved conversion job.

    Attributes:
        input_path: File to read, None for standard input.
        output_path: File to write, None for standard output.
        input_format: Format the input is decoded as.
        output_format: Format the output is encoded as.
        pretty: Whether to pretty-print formats that support it.
    """

    input_path: Path | None
    output_path: Path | None
    input_format: Format
    output_format: Format
    pretty: bool = False

    def describe(self) -> str:
        """One-line summary used in log records."""
        source = str(self.input_path) if self.input_path else "<stdin>"
        target = str(self.output_path) if self.output_path else "<stdout>"
        return (
            f"{source} ({self.input_format}) -> {target} ({self.output_format})"
            + (" [pretty]" if self.pretty else "")
        )
