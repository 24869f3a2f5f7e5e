"""Format inference for dsconv.

Decides which format to use for each side of a conversion from an
explicit format name or, failing that, the file extension. The two
sources are never merged: an explicit name always wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dsconv.core.exceptions import AmbiguousFormatError, UnknownFormatError
from dsconv.core.models import ConversionRequest, Format
from dsconv.formats import FormatRegistry

logger = logging.getLogger(__name__)

INPUT = "input"
OUTPUT = "output"


def _supported(direction: str) -> set[Format]:
    if direction == INPUT:
        return FormatRegistry.formats_supporting_input()
    return FormatRegistry.formats_supporting_output()


def _infer(direction: str, explicit: str | Format | None, path: Path | str | None) -> Format:
    supported = _supported(direction)
    available = FormatRegistry.names(supported)

    if explicit is not None:
        if isinstance(explicit, Format):
            format = explicit
        else:
            format = FormatRegistry.format_for_name(explicit)
            if format is None:
                raise UnknownFormatError(explicit, direction, available)
        if format not in supported:
            raise UnknownFormatError(
                format.value,
                direction,
                available,
                message=f"{format} cannot be used as an {direction} format. "
                f"Available formats: {', '.join(available)}",
            )
        logger.debug("Using explicit %s format %s", direction, format.value)
        return format

    if path is not None:
        path = Path(path)
        format = FormatRegistry.format_for_extension(path.suffix) if path.suffix else None
        if format is not None:
            if format not in supported:
                raise UnknownFormatError(
                    format.value,
                    direction,
                    available,
                    message=f"{format} (inferred from {path.name}) cannot be used as an "
                    f"{direction} format. Available formats: {', '.join(available)}",
                )
            logger.debug("Inferred %s format %s from %s", direction, format.value, path)
            return format

    raise AmbiguousFormatError(direction, path)


def infer_input_format(explicit: str | Format | None, path: Path | str | None) -> Format:
    """Determine the input format.

    Args:
        explicit: Format name from --from (case-insensitive), or None.
        path: Input file, or None for standard input.

    Returns:
        The format to decode the input as.

    Raises:
        UnknownFormatError: If the explicit name is not a known input
            format, or the extension maps to an output-only format.
        AmbiguousFormatError: If neither source determines a format.
    """
    return _infer(INPUT, explicit, path)


def infer_output_format(explicit: str | Format | None, path: Path | str | None) -> Format:
    """Determine the output format; mirrors infer_input_format()."""
    return _infer(OUTPUT, explicit, path)


def resolve_request(
    input_path: Path | str | None = None,
    output_path: Path | str | None = None,
    from_format: str | Format | None = None,
    to_format: str | Format | None = None,
    pretty: bool = False,
) -> ConversionRequest:
    """Validate invocation options into an immutable ConversionRequest.

    Both formats are resolved before any input is read, so an ambiguous
    output fails without consuming standard input.
    """
    input_path = Path(input_path) if input_path is not None else None
    output_path = Path(output_path) if output_path is not None else None

    request = ConversionRequest(
        input_path=input_path,
        output_path=output_path,
        input_format=infer_input_format(from_format, input_path),
        output_format=infer_output_format(to_format, output_path),
        pretty=pretty,
    )
    logger.debug("Resolved request: %s", request.describe())
    return request
