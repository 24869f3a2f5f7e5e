"""Custom exceptions for dsconv.

All dsconv-specific exceptions inherit from DsconvError, allowing callers
to catch every conversion failure with a single except clause.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dsconv.core.models import Format


class DsconvError(Exception):
    """Base exception for all dsconv errors."""

    pass


class UnknownFormatError(DsconvError):
    """Raised when a format name is not registered for a direction.

    Attributes:
        format_name: The requested format identifier.
        direction: "input" or "output".
        available_formats: Format identifiers usable in that direction.
    """

    def __init__(
        self,
        format_name: str,
        direction: str = "input",
        available_formats: list[str] | None = None,
        message: str | None = None,
    ):
        self.format_name = format_name
        self.direction = direction
        self.available_formats = available_formats or []

        if message:
            super().__init__(message)
        elif available_formats:
            super().__init__(
                f"Unknown {direction} format: '{format_name}'. "
                f"Available formats: {', '.join(available_formats)}"
            )
        else:
            super().__init__(f"Unknown {direction} format: '{format_name}'")


class AmbiguousFormatError(DsconvError):
    """Raised when no format was given and none can be inferred.

    Attributes:
        direction: "input" or "output".
        path: Path that was inspected, None for a standard stream.
    """

    def __init__(self, direction: str, path: Path | str | None = None):
        self.direction = direction
        self.path = Path(path) if path is not None else None

        if self.path is None:
            source = "standard input" if direction == "input" else "standard output"
        else:
            source = str(self.path)
        super().__init__(
            f"Cannot determine {direction} format for {source}: specify it explicitly"
        )


class DecodeError(DsconvError):
    """Raised when input bytes are not valid for a format.

    Attributes:
        format: Format the input was decoded as.
        reason: Message from the underlying parser.
    """

    def __init__(self, format: Format, reason: str):
        self.format = format
        self.reason = reason
        super().__init__(f"Failed to decode {format.display_name}: {reason}")


class EncodeError(DsconvError):
    """Raised when a value cannot be represented in the target format.

    Attributes:
        format: Target format.
        reason: Why the value could not be encoded.
    """

    def __init__(self, format: Format, reason: str):
        self.format = format
        self.reason = reason
        super().__init__(f"Failed to encode {format.display_name}: {reason}")


class ConversionIOError(DsconvError):
    """Raised when reading the input or writing the output fails.

    Attributes:
        path: File involved, None for a standard stream.
        reason: Specific reason for failure.
    """

    def __init__(self, path: Path | str | None, reason: str):
        self.path = Path(path) if path is not None else None
        self.reason = reason

        target = str(self.path) if self.path is not None else "standard stream"
        super().__init__(f"I/O failure on {target}: {reason}")


class ConfigError(DsconvError):
    """Raised when the configuration file cannot be used.

    Attributes:
        path: Path to the configuration file.
        reason: Specific reason for failure.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid config '{self.path}': {reason}")
