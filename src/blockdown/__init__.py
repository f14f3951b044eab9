"""blockdown - markdown block recognition with pluggable renderers.

blockdown reads a markdown document, extracts its reference-link definitions,
and splits the remaining text into paragraphs and (nested) blockquotes. Each
recognized block is handed to a renderer, which alone decides the output
syntax. An XHTML renderer ships with the package.

Rendering happens in two passes:

1. Reference-link definitions (``[id]: /url "title"``) are collected into a
   :class:`ReferenceTable` and removed from the text, and every line-break
   variant (``\\n``, ``\\r``, ``\\r\\n``, ``\\n\\r``) becomes ``\\n``.
2. The normalized text is classified into blockquotes and paragraphs,
   recursing into quoted regions.

Inline markdown (emphasis, links, code spans), headers, lists and code
blocks are not recognized.

Examples
--------
    >>> from blockdown import to_xhtml
    >>> print(to_xhtml("> quoted\\n\\nplain\\n"), end="")
    <blockquote>
    <p>quoted</p>
    </blockquote>
    <BLANKLINE>
    <p>plain</p>

Using a custom renderer:

    >>> from blockdown import BaseRenderer, render
    >>> class TextRenderer(BaseRenderer):
    ...     def paragraph(self, output, content):
    ...         self._separate(output)
    ...         output += (content or b"") + b"\\n"
    ...     def blockquote(self, output, content):
    ...         self._separate(output)
    ...         output += b"| " + (content or b"")
    >>> out = bytearray()
    >>> refs = render(out, b"one\\n\\ntwo\\n", TextRenderer())

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "blockdown requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from blockdown.api import markdown_to_bytes, render, to_xhtml
from blockdown.exceptions import BlockdownError, RenderingError, ValidationError
from blockdown.options import MarkdownParserOptions, XhtmlRendererOptions
from blockdown.parsers.markdown import MarkdownParser, ParseResult
from blockdown.parsers.references import LinkReference, ReferenceTable
from blockdown.progress import ProgressCallback, ProgressEvent
from blockdown.renderers.base import BaseRenderer
from blockdown.renderers.xhtml import XhtmlRenderer

__all__ = [
    "__version__",
    "render",
    "markdown_to_bytes",
    "to_xhtml",
    "MarkdownParser",
    "ParseResult",
    "LinkReference",
    "ReferenceTable",
    "BaseRenderer",
    "XhtmlRenderer",
    "MarkdownParserOptions",
    "XhtmlRendererOptions",
    "ProgressCallback",
    "ProgressEvent",
    "BlockdownError",
    "RenderingError",
    "ValidationError",
]
