#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/renderers/__init__.py
"""Block renderers.

A renderer implements :class:`~blockdown.renderers.base.BaseRenderer`;
:class:`~blockdown.renderers.xhtml.XhtmlRenderer` is the bundled one.
"""

from blockdown.renderers.base import BaseRenderer
from blockdown.renderers.xhtml import XhtmlRenderer

__all__ = ["BaseRenderer", "XhtmlRenderer"]
