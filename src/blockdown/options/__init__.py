#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the blockdown parser and renderers.

Options are frozen dataclasses: build a modified copy with
``create_updated()`` rather than mutating an instance.
"""

from __future__ import annotations

from blockdown.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from blockdown.options.markdown import MarkdownParserOptions
from blockdown.options.xhtml import XhtmlRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "XhtmlRendererOptions",
]
