#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/renderers/base.py
"""Base classes for block renderers.

This module defines the abstract base class every renderer inherits from.
The block parsers only know about the two operations declared here; the
concrete output syntax lives entirely in the renderer implementation, so
renderers for other markup languages plug in without touching recognition.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from blockdown.constants import LF
from blockdown.exceptions import InvalidOptionsError
from blockdown.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all block renderers.

    Each operation receives the output accumulator and the block content.
    Content bytes must be written verbatim: no escaping is performed by the
    parser, and none is expected from the renderer. Every block after the
    first one must be preceded by a ``\\n`` separator, see :meth:`_separate`.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from blockdown.renderers.base import BaseRenderer
        >>>
        >>> class BracketRenderer(BaseRenderer):
        ...     def paragraph(self, output, content):
        ...         self._separate(output)
        ...         output += b"[" + (content or b"") + b"]\\n"
        ...
        ...     def blockquote(self, output, content):
        ...         self._separate(output)
        ...         output += b"{\\n" + (content or b"") + b"}\\n"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def paragraph(self, output: bytearray, content: Optional[bytes]) -> None:
        """Append a paragraph block to ``output``.

        Parameters
        ----------
        output : bytearray
            Output accumulator
        content : bytes or None
            Paragraph text with trailing line breaks removed

        """

    @abstractmethod
    def blockquote(self, output: bytearray, content: Optional[bytes]) -> None:
        """Append a blockquote block to ``output``.

        Parameters
        ----------
        output : bytearray
            Output accumulator
        content : bytes or None
            Already rendered inner blocks, or None for an empty quote

        """

    @staticmethod
    def _separate(output: bytearray) -> None:
        """Append the block separator when ``output`` already holds a block."""
        if output:
            output.append(LF)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
