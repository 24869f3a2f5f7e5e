"""Main converter facade for dsconv.

Provides decode/encode dispatch over the format registry and the
single-pass pipeline: read, decode, encode, write.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

from dsconv.convert.inference import infer_input_format, infer_output_format
from dsconv.core.exceptions import ConversionIOError, DecodeError, EncodeError
from dsconv.core.models import ConversionRequest, Format
from dsconv.core.values import normalize
from dsconv.formats import FormatRegistry

logger = logging.getLogger(__name__)

TOO_DEEP = "document is nested too deeply"


@dataclass
class ConversionResult:
    """Result of a conversion operation.

    Attributes:
        input_format: Format the input was decoded as.
        output_format: Format the output was encoded as.
        bytes_read: Size of the input document.
        bytes_written: Size of the output document.
        output_path: File written, None for standard output.
    """

    input_format: Format
    output_format: Format
    bytes_read: int = 0
    bytes_written: int = 0
    output_path: Path | None = None


def decode(data: bytes, format: Format) -> Any:
    """Decode a complete document into a generic value.

    Args:
        data: Raw input bytes.
        format: Format to parse the input as.

    Returns:
        Generic value (see dsconv.core.values).

    Raises:
        DecodeError: If the bytes are not a valid document of the format.
    """
    reader = FormatRegistry.get_reader(format)
    logger.debug("Decoding %d bytes with %s", len(data), type(reader).__name__)

    try:
        value = reader.decode(data)
    except RecursionError as e:
        raise DecodeError(format, TOO_DEEP) from e
    except UnicodeDecodeError as e:
        raise DecodeError(format, f"input is not valid UTF-8: {e}") from e
    except reader.errors as e:
        raise DecodeError(format, str(e) or type(e).__name__) from e

    try:
        return normalize(value)
    except RecursionError as e:
        raise DecodeError(format, TOO_DEEP) from e
    except TypeError as e:
        raise DecodeError(format, str(e)) from e


def encode(value: Any, format: Format, pretty: bool = False) -> bytes:
    """Encode a generic value.

    Args:
        value: Value to encode.
        format: Target format.
        pretty: Use the non-compact rendering; ignored by formats that
            have only one.

    Returns:
        Encoded document.

    Raises:
        EncodeError: If the value cannot be represented in the format.
    """
    writer = FormatRegistry.get_writer(format)
    logger.debug("Encoding with %s (pretty=%s)", type(writer).__name__, pretty)

    try:
        return writer.encode(value, pretty=pretty)
    except RecursionError as e:
        raise EncodeError(format, TOO_DEEP) from e
    except (*writer.errors, UnicodeEncodeError) as e:
        raise EncodeError(format, str(e) or type(e).__name__) from e


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write data to path through a temporary file and a rename.

    The destination is either left untouched or fully replaced.
    """
    mode = path.stat().st_mode & 0o777 if path.exists() else _default_file_mode()
    handle = tempfile.NamedTemporaryFile(
        delete=False,
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(handle.name, mode)
        os.replace(handle.name, path)
    except BaseException:
        Path(handle.name).unlink(missing_ok=True)
        raise


class Converter:
    """Main conversion facade.

    Runs one resolved ConversionRequest through the pipeline.

    Example:
        >>> request = resolve_request("config.json", "config.toml")
        >>> result = Converter().run(request)
        >>> print(result.bytes_written)
    """

    def __init__(self, stdin: BinaryIO | None = None, stdout: BinaryIO | None = None):
        """Initialize the converter.

        Args:
            stdin: Stream used when the request has no input path.
                Defaults to sys.stdin's binary buffer at read time.
            stdout: Stream used when the request has no output path.
                Defaults to sys.stdout's binary buffer at write time.
        """
        self._stdin = stdin
        self._stdout = stdout

    def read_input(self, request: ConversionRequest) -> bytes:
        """Read the whole input document.

        Raises:
            ConversionIOError: If the input cannot be read.
        """
        if request.input_path is not None:
            try:
                return request.input_path.read_bytes()
            except OSError as e:
                raise ConversionIOError(request.input_path, e.strerror or str(e)) from e

        stream = self._stdin if self._stdin is not None else sys.stdin.buffer
        try:
            return stream.read()
        except OSError as e:
            raise ConversionIOError(None, f"failed to read standard input: {e}") from e

    def write_output(self, request: ConversionRequest, data: bytes) -> None:
        """Write the whole output document.

        Raises:
            ConversionIOError: If the output cannot be written.
        """
        if request.output_path is not None:
            try:
                atomic_write_bytes(request.output_path, data)
            except OSError as e:
                raise ConversionIOError(request.output_path, e.strerror or str(e)) from e
            return

        stream = self._stdout if self._stdout is not None else sys.stdout.buffer
        try:
            stream.write(data)
            stream.flush()
        except OSError as e:
            raise ConversionIOError(None, f"failed to write standard output: {e}") from e

    def run(self, request: ConversionRequest, input_data: bytes | None = None) -> ConversionResult:
        """Convert according to a resolved request.

        Args:
            request: Validated conversion request.
            input_data: Already-read input; when None the input is read
                from the request's path or standard input.

        Returns:
            ConversionResult describing what was written.

        Raises:
            DecodeError, EncodeError, ConversionIOError: On failure. Nothing
                is written when decoding or encoding fails.
        """
        logger.debug("Converting %s", request.describe())

        data = self.read_input(request) if input_data is None else input_data
        value = decode(data, request.input_format)
        output = encode(value, request.output_format, pretty=request.pretty)
        self.write_output(request, output)

        logger.debug("Wrote %d bytes", len(output))
        return ConversionResult(
            input_format=request.input_format,
            output_format=request.output_format,
            bytes_read=len(data),
            bytes_written=len(output),
            output_path=request.output_path,
        )


def convert(
    data: bytes,
    from_format: str | Format,
    to_format: str | Format,
    pretty: bool = False,
) -> bytes:
    """Convert a document held in memory.

    Args:
        data: Input document.
        from_format: Input format name (case-insensitive) or Format.
        to_format: Output format name (case-insensitive) or Format.
        pretty: Pretty-print formats that support it.

    Returns:
        The converted document.

    Example:
        >>> dsconv.convert(b'{"a": 1}', "json", "yaml")
        b'a: 1\\n'
    """
    value = decode(data, infer_input_format(from_format, None))
    return encode(value, infer_output_format(to_format, None), pretty=pretty)
