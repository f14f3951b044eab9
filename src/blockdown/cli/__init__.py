"""Command-line interface for the blockdown renderer.

Reads a markdown document from a file or standard input, renders it with the
XHTML renderer, and writes the result to a file or standard output.

Environment Variable Support
----------------------------
``BLOCKDOWN_CONFIG`` names a configuration file used when ``--config`` is not
given. Without either, ``.blockdown.toml`` / ``.yaml`` / ``.yml`` / ``.json``
or a ``[tool.blockdown]`` table in ``pyproject.toml`` is searched from the
current directory upwards, then in the home directory. CLI arguments always
override configuration values.

Examples
--------
Render a file to stdout::

    $ blockdown notes.md

Render stdin to a file::

    $ cat notes.md | blockdown - --out notes.html

List the reference-link definitions found in a document::

    $ blockdown notes.md --show-references --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from typing import Any, Dict

from blockdown import __version__
from blockdown.cli.config import load_config_with_priority
from blockdown.cli.output import print_references, should_use_rich_output
from blockdown.constants import (
    ENV_CONFIG_VAR,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from blockdown.exceptions import (
    BlockdownError,
    DependencyError,
    FileError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from blockdown.logging_utils import configure_logging, resolve_log_level
from blockdown.options import MarkdownParserOptions, XhtmlRendererOptions
from blockdown.parsers.markdown import MarkdownParser
from blockdown.renderers.xhtml import XhtmlRenderer
from blockdown.utils.io_utils import STDIO_MARKER, read_input, write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "build_options", "get_exit_code_for_exception"]

# CLI destinations that map onto option fields
_PARSER_ARGS = ("flags", "dump_references", "max_nesting_depth")
_RENDERER_ARGS = ("paragraph_tag", "blockquote_tag")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``blockdown`` command."""
    parser = argparse.ArgumentParser(
        prog="blockdown",
        description="Render markdown paragraphs and blockquotes to XHTML.",
    )
    parser.add_argument(
        "input", nargs="?", default=STDIO_MARKER, help="Markdown file to render ('-' for stdin, the default)"
    )
    parser.add_argument("--out", "-o", dest="output", help="Output file (default: stdout)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parsing = parser.add_argument_group("parser options")
    parsing.add_argument(
        "--dump-references",
        action="store_true",
        default=None,
        help="Append the reference table dump after the rendered output",
    )
    parsing.add_argument("--max-nesting-depth", type=int, help="Maximum blockquote nesting depth")
    parsing.add_argument("--flags", type=int, help="Reserved extension flags (currently unused)")

    rendering = parser.add_argument_group("renderer options")
    rendering.add_argument("--paragraph-tag", help="Element name wrapping paragraphs")
    rendering.add_argument("--blockquote-tag", help="Element name wrapping blockquotes")

    report = parser.add_argument_group("reporting")
    report.add_argument(
        "--show-references", action="store_true", help="Print the extracted link references to stderr"
    )
    report.add_argument("--rich", action="store_true", help="Use Rich formatting for --show-references")
    report.add_argument("--force-rich", action="store_true", help="Use Rich formatting even when not on a TTY")

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", help=f"Configuration file (default: ${ENV_CONFIG_VAR} or discovery)")
    config.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    logs = parser.add_argument_group("logging")
    logs.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logs.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logs.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    logs.add_argument("--log-file", help="Also write log output to this file")

    return parser


def build_options(
    parsed_args: argparse.Namespace, config: Dict[str, Any]
) -> tuple[MarkdownParserOptions, XhtmlRendererOptions]:
    """Merge configuration values and CLI arguments into option objects.

    CLI arguments that were given take precedence over configuration values.

    Raises
    ------
    ValueError
        If a resulting option value is invalid

    """
    merged = dict(config)
    for name in _PARSER_ARGS + _RENDERER_ARGS:
        value = getattr(parsed_args, name, None)
        if value is not None:
            merged[name] = value

    unknown = sorted(set(merged) - set(_PARSER_ARGS) - set(_RENDERER_ARGS))
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    return MarkdownParserOptions.from_mapping(merged), XhtmlRendererOptions.from_mapping(merged)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    # Option values and configuration files
    if isinstance(exception, (ValidationError, ValueError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    # OutputWriteError is a RenderingError but reports a file problem
    if isinstance(exception, (FileError, OutputWriteError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Execute the ``blockdown`` command."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(
        resolve_log_level(parsed_args.log_level, parsed_args.verbose, parsed_args.trace),
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
    )

    try:
        config = {} if parsed_args.no_config else load_config_with_priority(
            parsed_args.config, os.environ.get(ENV_CONFIG_VAR)
        )
        parser_options, renderer_options = build_options(parsed_args, config)
        use_rich = parsed_args.show_references and should_use_rich_output(parsed_args, raise_on_missing=True)

        data = read_input(parsed_args.input)
        output = bytearray()
        result = MarkdownParser(XhtmlRenderer(renderer_options), parser_options).parse(output, data)
        write_content(bytes(output), parsed_args.output)
    except (BlockdownError, argparse.ArgumentTypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("Rendered %d block(s), %d reference(s)", result.block_count, len(result.references))
    if parsed_args.show_references:
        print_references(result.references, use_rich=use_rich)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
