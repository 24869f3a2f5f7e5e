"""Format registry for dsconv.

The registry provides a plugin pattern for format readers and writers.
Formats register themselves using decorators; the registry maps format
names and file extensions to formats and hands out reader/writer
instances.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dsconv.core.exceptions import UnknownFormatError
from dsconv.core.models import Format

if TYPE_CHECKING:
    from dsconv.core.protocols import FormatReader, FormatWriter


# Recognized file extensions, canonical first
_EXTENSIONS: dict[Format, tuple[str, ...]] = {
    Format.CBOR: ("cbor",),
    Format.HJSON: ("hjson",),
    Format.JSON: ("json",),
    Format.JSON5: ("json5",),
    Format.MESSAGEPACK: ("msgpack", "messagepack"),
    Format.RON: ("ron",),
    Format.TOML: ("toml",),
    Format.YAML: ("yaml", "yml"),
}

# Extra names accepted by --from/--to besides the identifier
_ALIASES: dict[str, Format] = {
    "msgpack": Format.MESSAGEPACK,
    "yml": Format.YAML,
}


class FormatRegistry:
    """Central registry for format readers and writers.

    Formats register themselves using class decorators:

        @FormatRegistry.register_reader(Format.JSON)
        class JSONReader:
            ...

    Usage:
        reader = FormatRegistry.get_reader(Format.JSON)
        writer = FormatRegistry.get_writer(Format.TOML)
        fmt = FormatRegistry.format_for_extension(".yml")
    """

    _readers: dict[Format, type[FormatReader]] = {}
    _writers: dict[Format, type[FormatWriter]] = {}

    @classmethod
    def register_reader(cls, format: Format):
        """Decorator to register a reader class.

        Args:
            format: Format the reader decodes.

        Returns:
            Decorator function.
        """

        def decorator(reader_cls: type[FormatReader]) -> type[FormatReader]:
            cls._readers[format] = reader_cls
            return reader_cls

        return decorator

    @classmethod
    def register_writer(cls, format: Format):
        """Decorator to register a writer class.

        Args:
            format: Format the writer encodes.

        Returns:
            Decorator function.
        """

        def decorator(writer_cls: type[FormatWriter]) -> type[FormatWriter]:
            cls._writers[format] = writer_cls
            return writer_cls

        return decorator

    @classmethod
    def get_reader(cls, format: Format) -> FormatReader:
        """Get an instantiated reader for the specified format.

        Raises:
            UnknownFormatError: If no reader is registered for the format.
        """
        if format not in cls._readers:
            raise UnknownFormatError(
                format.value,
                direction="input",
                available_formats=cls.names(cls.formats_supporting_input()),
            )
        return cls._readers[format]()

    @classmethod
    def get_writer(cls, format: Format) -> FormatWriter:
        """Get an instantiated writer for the specified format.

        Raises:
            UnknownFormatError: If no writer is registered for the format.
        """
        if format not in cls._writers:
            raise UnknownFormatError(
                format.value,
                direction="output",
                available_formats=cls.names(cls.formats_supporting_output()),
            )
        return cls._writers[format]()

    @classmethod
    def formats_supporting_input(cls) -> set[Format]:
        """Formats that have a registered reader."""
        return set(cls._readers)

    @classmethod
    def formats_supporting_output(cls) -> set[Format]:
        """Formats that have a registered writer."""
        return set(cls._writers)

    @classmethod
    def format_for_name(cls, name: str) -> Format | None:
        """Look up a format by identifier, display name or alias.

        Matching is case-insensitive. Returns None when nothing matches.
        """
        key = name.strip().lower()
        for format in Format:
            if key in (format.value, format.display_name.lower()):
                return format
        return _ALIASES.get(key)

    @classmethod
    def format_for_extension(cls, ext: str) -> Format | None:
        """Look up a format by file extension ('.json' or 'json').

        Matching is case-insensitive. Returns None when nothing matches.
        """
        key = ext.lower().lstrip(".")
        for format, extensions in _EXTENSIONS.items():
            if key in extensions:
                return format
        return None

    @classmethod
    def extensions(cls, format: Format) -> tuple[str, ...]:
        """Extensions recognized for a format, canonical first."""
        return _EXTENSIONS[format]

    @staticmethod
    def names(formats: set[Format]) -> list[str]:
        """Identifiers of formats in declaration order."""
        return [format.value for format in Format if format in formats]

    @classmethod
    def list_formats(cls) -> dict[str, dict[str, bool]]:
        """List known formats and their capabilities.

        Example:
            {
                "hjson": {"can_read": True, "can_write": False},
                "json": {"can_read": True, "can_write": True},
            }
        """
        return {
            format.value: {
                "can_read": format in cls._readers,
                "can_write": format in cls._writers,
            }
            for format in Format
        }

    @classmethod
    def has_reader(cls, format: Format) -> bool:
        """Check if a reader is registered for the format."""
        return format in cls._readers

    @classmethod
    def has_writer(cls, format: Format) -> bool:
        """Check if a writer is registered for the format."""
        return format in cls._writers
