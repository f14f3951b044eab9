#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/utils/io_utils.py
"""I/O helpers for the command line.

The parser itself never touches files or streams; these helpers read the
source document and write the rendered bytes for the CLI.

"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import IO, Union, cast

from blockdown.exceptions import FileError, OutputWriteError

STDIO_MARKER = "-"


def read_input(source: Union[str, Path]) -> bytes:
    """Read the raw source document.

    Parameters
    ----------
    source : str or Path
        File path, or ``"-"`` for standard input

    Returns
    -------
    bytes
        Document bytes

    Raises
    ------
    FileError
        If the file does not exist or cannot be read

    """
    if str(source) == STDIO_MARKER:
        return sys.stdin.buffer.read()

    path = Path(source)
    if not path.is_file():
        raise FileError(f"Input file not found: {path}", file_path=str(path))
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileError(f"Cannot read input file: {path}", file_path=str(path), original_error=e) from e


def write_content(content: bytes, output: Union[str, Path, IO[bytes], IO[str], None]) -> None:
    """Write rendered bytes to a path or stream.

    Parameters
    ----------
    content : bytes
        Rendered output
    output : str, Path, IO[bytes], IO[str], or None
        Destination. ``None`` and ``"-"`` write to standard output. Text
        streams receive the content decoded as UTF-8.

    Raises
    ------
    OutputWriteError
        If a file cannot be written
    TypeError
        If the output type is not supported

    """
    if output is None or (isinstance(output, str) and output == STDIO_MARKER):
        output = sys.stdout

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_bytes(content)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)) or "b" in str(getattr(output, "mode", "")):
        cast(IO[bytes], output).write(content)
        return

    binary = getattr(output, "buffer", None)
    if binary is not None:
        # Text wrapper around a binary stream (sys.stdout): bypass decoding
        output.flush()
        binary.write(content)
        binary.flush()
        return

    cast(IO[str], output).write(content.decode("utf-8", errors="replace"))


__all__ = ["read_input", "write_content", "STDIO_MARKER"]
