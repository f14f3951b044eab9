#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/api.py
"""Public entry points for rendering markdown.

Examples
--------
Render into a caller-owned buffer:

    >>> from blockdown import render
    >>> out = bytearray()
    >>> refs = render(out, b"> quoted\\n")
    >>> bytes(out)
    b'<blockquote>\\n<p>quoted</p>\\n</blockquote>\\n'

Render to a string with the XHTML renderer:

    >>> from blockdown import to_xhtml
    >>> to_xhtml("Hello world\\n")
    '<p>Hello world</p>\\n'

"""

from __future__ import annotations

from typing import Optional

from blockdown.constants import DEFAULT_FLAGS, DEFAULT_INPUT_ENCODING
from blockdown.exceptions import ValidationError
from blockdown.options.markdown import MarkdownParserOptions
from blockdown.options.xhtml import XhtmlRendererOptions
from blockdown.parsers.base import InputData
from blockdown.parsers.markdown import MarkdownParser
from blockdown.parsers.references import ReferenceTable
from blockdown.progress import ProgressCallback
from blockdown.renderers.base import BaseRenderer
from blockdown.renderers.xhtml import XhtmlRenderer


def _resolve_options(options: MarkdownParserOptions | None, flags: int) -> MarkdownParserOptions | None:
    if flags == DEFAULT_FLAGS:
        return options
    try:
        return (options or MarkdownParserOptions()).create_updated(flags=flags)
    except ValueError as e:
        raise ValidationError(str(e), parameter_name="flags", parameter_value=flags, original_error=e) from e


def render(
    output: bytearray,
    input_data: InputData,
    renderer: BaseRenderer | None = None,
    flags: int = DEFAULT_FLAGS,
    *,
    options: MarkdownParserOptions | None = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ReferenceTable:
    """Render markdown blocks from ``input_data`` into ``output``.

    Parameters
    ----------
    output : bytearray
        Output accumulator; rendered bytes are appended
    input_data : bytes, bytearray, memoryview, str, Path, or file-like
        Markdown source
    renderer : BaseRenderer, optional
        Renderer to use. Defaults to :class:`XhtmlRenderer`.
    flags : int, default 0
        Reserved extension flags, accepted but not interpreted. Overrides
        ``options.flags`` when non-zero.
    options : MarkdownParserOptions, optional
        Parser configuration
    progress_callback : ProgressCallback, optional
        Optional callback for progress updates

    Returns
    -------
    ReferenceTable
        Reference-link definitions found in the input

    Raises
    ------
    ValidationError
        If ``flags`` is not a non-negative integer, or ``output`` or
        ``input_data`` has an unsupported type
    RenderingError
        If a renderer callback raises

    """
    parser = MarkdownParser(renderer, _resolve_options(options, flags), progress_callback)
    return parser.parse(output, input_data).references


def markdown_to_bytes(
    input_data: InputData,
    renderer: BaseRenderer | None = None,
    flags: int = DEFAULT_FLAGS,
    *,
    options: MarkdownParserOptions | None = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> bytes:
    """Render ``input_data`` and return the output bytes.

    See :func:`render` for the parameters.

    """
    output = bytearray()
    render(output, input_data, renderer, flags, options=options, progress_callback=progress_callback)
    return bytes(output)


def to_xhtml(
    input_data: InputData,
    *,
    options: MarkdownParserOptions | None = None,
    renderer_options: XhtmlRendererOptions | None = None,
    progress_callback: Optional[ProgressCallback] = None,
    encoding: str = DEFAULT_INPUT_ENCODING,
) -> str:
    """Render ``input_data`` to an XHTML string.

    Content bytes are passed through unescaped, so the output is decoded with
    ``encoding`` (undecodable bytes are replaced).

    """
    output = markdown_to_bytes(
        input_data,
        XhtmlRenderer(renderer_options),
        options=options,
        progress_callback=progress_callback,
    )
    return output.decode(encoding, errors="replace")


__all__ = ["render", "markdown_to_bytes", "to_xhtml"]
