"""Conversion module for dsconv.

Provides format inference, decode/encode dispatch and the conversion
pipeline.
"""

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

__all__ = [
    "ConversionResult",
    "Converter",
    "convert",
    "decode",
    "encode",
    "infer_input_format",
    "infer_output_format",
    "resolve_request",
]
