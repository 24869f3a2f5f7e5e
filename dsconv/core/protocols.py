"""Protocol interfaces for dsconv.

Format implementations satisfy these protocols structurally; they are
registered with the FormatRegistry rather than subclassing a base.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dsconv.core.models import Format


@runtime_checkable
class FormatReader(Protocol):
    """Strategy interface for decoding a specific format.

    Readers turn raw bytes into a generic value by delegating to the
    format's parser library. They raise the library's own exceptions;
    the dispatcher translates them into DecodeError.
    """

    #: Library exceptions that signal malformed input
    errors: tuple[type[Exception], ...]

    @property
    def format(self) -> Format:
        """Return the format this reader decodes."""
        ...

    def decode(self, data: bytes) -> Any:
        """Parse a complete document.

        Args:
            data: Entire input document.

        Returns:
            Decoded value built from plain Python types.
        """
        ...


@runtime_checkable
class FormatWriter(Protocol):
    """Strategy interface for encoding a specific format.

    Writers check the value against the format's data model and raise
    EncodeError for shapes it cannot hold; remaining library failures
    are translated by the dispatcher.
    """

    #: Library exceptions that signal an unrepresentable value
    errors: tuple[type[Exception], ...]

    @property
    def format(self) -> Format:
        """Return the format this writer encodes."""
        ...

    def encode(self, value: Any, pretty: bool = False) -> bytes:
        """Serialize a generic value.

        Args:
            value: Value to encode.
            pretty: Use the non-compact rendering where one exists.

        Returns:
            Encoded document.

        Raises:
            EncodeError: If the value has a shape the format cannot hold.
        """
        ...
