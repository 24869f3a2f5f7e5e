"""Command-line interface for dsconv.

Provides a thin wrapper around the dsconv API for command-line usage.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path

import typer
from click.shell_completion import get_completion_class
from rich.console import Console
from rich.markup import escape

from dsconv import __version__
from dsconv.config import Config
from dsconv.convert import Converter, resolve_request
from dsconv.convert.converter import atomic_write_bytes
from dsconv.core.exceptions import ConversionIOError, DsconvError
from dsconv.core.logging import configure_logging
from dsconv.core.models import Color, Format
from dsconv.formats import FormatRegistry

app = typer.Typer(
    name="dsconv",
    help="dsconv - Data-serialization format converter",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
logger = logging.getLogger(__name__)

PROG_NAME = "dsconv"
COMPLETE_VAR = "_DSCONV_COMPLETE"

PRETTY_VALUES = {"true": True, "false": False}


class Shell(str, Enum):
    """Shells a completion script can be generated for."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


def expand_pretty_flag(args: list[str]) -> list[str]:
    """Give a bare -p/--pretty its implicit 'true' value.

    The pretty option takes an optional value: ``-p``, ``-p true`` and
    ``-p false`` are all accepted. A value is inserted after the flag
    unless the next argument already is one.
    """
    expanded: list[str] = []
    for index, arg in enumerate(args):
        expanded.append(arg)
        if arg == "--":
            expanded.extend(args[index + 1 :])
            break
        if arg in ("-p", "--pretty"):
            following = args[index + 1] if index + 1 < len(args) else None
            if following is None or following.lower() not in PRETTY_VALUES:
                expanded.append("true")
    return expanded


def completion_script(shell: Shell) -> str:
    """Render the completion script for a shell."""
    command = typer.main.get_command(app)
    completion_cls = get_completion_class(shell.value)
    if completion_cls is None:
        raise typer.BadParameter(f"unsupported shell: {shell.value}")
    return completion_cls(command, {}, PROG_NAME, COMPLETE_VAR).source()


def _make_console(color: Color) -> Console:
    """Create the diagnostics console honoring --color."""
    if color == Color.ALWAYS:
        return Console(stderr=True, force_terminal=True)
    if color == Color.NEVER:
        return Console(stderr=True, color_system=None)
    return Console(stderr=True)


def _parse_pretty(value: str | None) -> bool | None:
    if value is None:
        return None
    try:
        return PRETTY_VALUES[value.lower()]
    except KeyError:
        raise typer.BadParameter(f"expected 'true' or 'false', got {value!r}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def _print_formats(formats: set[Format]) -> None:
    for format in Format:
        if format in formats:
            typer.echo(format.display_name)


def _read_interactive() -> bytes | None:
    """Prompt for the document when standard input is a terminal."""
    stdin = sys.stdin
    if stdin is None or not stdin.isatty():
        return None
    return typer.prompt("Input").encode("utf-8")


def _write_completion(shell: Shell, output: Path | None) -> None:
    script = completion_script(shell)
    if output is None:
        typer.echo(script, nl=False)
        return
    try:
        atomic_write_bytes(output, script.encode("utf-8"))
    except OSError as e:
        raise ConversionIOError(output, e.strerror or str(e)) from e


@app.command()
def convert(
    file: Path | None = typer.Argument(
        None,
        metavar="FILE",
        help="Input file (reads standard input when omitted)",
        show_default=False,
    ),
    from_format: str | None = typer.Option(
        None,
        "--from",
        "-f",
        metavar="FORMAT",
        help="Input format: cbor, hjson, json, json5, messagepack, ron, toml, yaml",
    ),
    to_format: str | None = typer.Option(
        None,
        "--to",
        "-t",
        metavar="FORMAT",
        help="Output format: cbor, json, messagepack, toml, yaml",
    ),
    list_input_formats: bool = typer.Option(
        False, "--list-input-formats", help="List supported input formats and exit"
    ),
    list_output_formats: bool = typer.Option(
        False, "--list-output-formats", help="List supported output formats and exit"
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        metavar="FILE",
        help="Output file (writes standard output when omitted)",
    ),
    pretty: str | None = typer.Option(
        None,
        "--pretty",
        "-p",
        metavar="[true|false]",
        callback=_parse_pretty,
        help="Pretty-print the output (JSON, TOML)",
    ),
    color: Color = typer.Option(
        Color.AUTO, "--color", case_sensitive=False, help="Color diagnostics: auto, always, never"
    ),
    generate_completion: Shell | None = typer.Option(
        None,
        "--generate-completion",
        metavar="SHELL",
        case_sensitive=False,
        help="Print a completion script for bash, zsh or fish and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log each conversion step"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Convert a document between data-serialization formats.

    Formats are taken from --from/--to, or else from the file extensions.

    Examples:

        dsconv config.json -o config.toml

        cat data.yaml | dsconv -f yaml -t json -p
    """
    err_console = _make_console(color)
    configure_logging(err_console, verbose)

    if list_input_formats and list_output_formats:
        raise typer.BadParameter(
            "cannot be combined with --list-output-formats",
            param_hint="'--list-input-formats'",
        )

    try:
        if generate_completion is not None:
            _write_completion(generate_completion, output)
            return

        if list_input_formats:
            _print_formats(FormatRegistry.formats_supporting_input())
            return
        if list_output_formats:
            _print_formats(FormatRegistry.formats_supporting_output())
            return

        config = Config.load()
        request = resolve_request(
            input_path=file,
            output_path=output,
            from_format=from_format,
            to_format=to_format,
            pretty=config.resolve_pretty(pretty),
        )

        input_data = _read_interactive() if request.input_path is None else None
        converter = Converter(
            stdin=typer.get_binary_stream("stdin"),
            stdout=typer.get_binary_stream("stdout"),
        )
        result = converter.run(request, input_data)
        logger.debug(
            "Converted %s -> %s (%d -> %d bytes)",
            result.input_format.value,
            result.output_format.value,
            result.bytes_read,
            result.bytes_written,
        )
    except DsconvError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


def main() -> None:
    """Console-script entry point."""
    app(args=expand_pretty_flag(sys.argv[1:]), prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
