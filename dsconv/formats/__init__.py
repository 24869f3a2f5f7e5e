"""Format readers and writers for dsconv.

Importing this package registers every built-in format with the
FormatRegistry.
"""

from dsconv.formats.registry import FormatRegistry

__all__ = ["FormatRegistry"]


def _register_formats() -> None:
    """Import format modules to trigger registration decorators."""
    from dsconv.formats import cbor  # noqa: F401
    from dsconv.formats import hjson  # noqa: F401
    from dsconv.formats import json  # noqa: F401
    from dsconv.formats import json5  # noqa: F401
    from dsconv.formats import msgpack  # noqa: F401
    from dsconv.formats import ron  # noqa: F401
    from dsconv.formats import toml  # noqa: F401
    from dsconv.formats import yaml  # noqa: F401


# Register formats on module import
_register_formats()
