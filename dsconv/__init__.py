"""dsconv - a data-serialization format converter.

dsconv converts a document between CBOR, Hjson, JSON, JSON5, MessagePack,
RON, TOML and YAML (Hjson, JSON5 and RON are input only). Parsing and
encoding are delegated to each format's library; dsconv infers formats,
carries the decoded value between them and reports what cannot be
represented.

Example:
    >>> import dsconv
    >>> dsconv.convert(b'{"a": 1, "b": [2, 3]}', "json", "toml")
    b'a = 1\\nb = [2, 3]\\n'

    >>> value = dsconv.decode(b"- 1\\n- 2\\n", dsconv.Format.YAML)
    >>> dsconv.encode(value, dsconv.Format.TOML)
    Traceback (most recent call last):
    ...
    dsconv.core.exceptions.EncodeError: Failed to encode TOML: ...
"""

from dsconv.config.models import Config
from dsconv.convert.converter import (
    ConversionResult,
    Converter,
    convert,
    decode,
    encode,
)
from dsconv.convert.inference import (
    infer_input_format,
    infer_output_format,
    resolve_request,
)
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
from dsconv.formats.registry import FormatRegistry

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Core models
    "Color",
    "ConversionRequest",
    "Format",
    # Exceptions
    "AmbiguousFormatError",
    "ConfigError",
    "ConversionIOError",
    "DecodeError",
    "DsconvError",
    "EncodeError",
    "UnknownFormatError",
    # Registry
    "FormatRegistry",
    # Config
    "Config",
    # Converter
    "ConversionResult",
    "Converter",
    "infer_input_format",
    "infer_output_format",
    "resolve_request",
    # Module-level functions
    "convert",
    "decode",
    "encode",
]
