"""Core domain models, value helpers and protocols for dsconv."""

from dsconv.core.exceptions import (
    AmbiguousFormatError,
    ConfigError,
    ConversionIOError,
    DecodeError,
    DsconvError,
    EncodeError,
    UnknownFormatError,
)
from dsconv.core.models import Color, ConversionRequest, Format
from dsconv.core.protocols import FormatReader, FormatWriter

__all__ = [
    # Models
    "Color",
    "ConversionRequest",
    "Format",
    # Protocols
    "FormatReader",
    "FormatWriter",
    # Exceptions
    "AmbiguousFormatError",
    "ConfigError",
    "ConversionIOError",
    "DecodeError",
    "DsconvError",
    "EncodeError",
    "UnknownFormatError",
]
