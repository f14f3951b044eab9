#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/renderers/xhtml.py
"""XHTML 1.0 block renderer.

Produces ``<p>...</p>`` and ``<blockquote>...</blockquote>`` wrappers, each
closed by a newline, with a blank line between consecutive blocks.

Examples
--------
    >>> from blockdown.renderers.xhtml import XhtmlRenderer
    >>> out = bytearray()
    >>> renderer = XhtmlRenderer()
    >>> renderer.paragraph(out, b"Hello")
    >>> renderer.paragraph(out, b"World")
    >>> bytes(out)
    b'<p>Hello</p>\\n\\n<p>World</p>\\n'

"""

from __future__ import annotations

from typing import Optional

from blockdown.options.xhtml import XhtmlRendererOptions
from blockdown.renderers.base import BaseRenderer


class XhtmlRenderer(BaseRenderer):
    """Render blocks as XHTML elements.

    Parameters
    ----------
    options : XhtmlRendererOptions or None, default = None
        Tag names to use. If None, ``p`` and ``blockquote`` are used.

    """

    def __init__(self, options: XhtmlRendererOptions | None = None):
        """Initialize the XHTML renderer with options."""
        BaseRenderer._validate_options_type(options, XhtmlRendererOptions, "xhtml")
        options = options or XhtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: XhtmlRendererOptions = options

        self._paragraph_open = f"<{options.paragraph_tag}>".encode("ascii")
        self._paragraph_close = f"</{options.paragraph_tag}>\n".encode("ascii")
        self._blockquote_open = f"<{options.blockquote_tag}>\n".encode("ascii")
        self._blockquote_close = f"</{options.blockquote_tag}>\n".encode("ascii")

    def paragraph(self, output: bytearray, content: Optional[bytes]) -> None:
        """Append ``<p>content</p>``."""
        self._separate(output)
        output += self._paragraph_open
        if content:
            output += content
        output += self._paragraph_close

    def blockquote(self, output: bytearray, content: Optional[bytes]) -> None:
        """Append ``<blockquote>`` around the rendered inner blocks."""
        self._separate(output)
        output += self._blockquote_open
        if content:
            output += content
        output += self._blockquote_close


__all__ = ["XhtmlRenderer"]
