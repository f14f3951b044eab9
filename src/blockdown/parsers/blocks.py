#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/parsers/blocks.py
"""Second pass: block classification over normalized text.

The input of this pass is the output of
:func:`blockdown.parsers.normalizer.normalize_lines`: it only contains ``\\n``
line breaks and, when non-empty, ends with one.

Each call of a block parser consumes at least one whole line and returns the
number of bytes it consumed, which is what keeps :meth:`BlockParser.parse_block`
moving forward on any input.

"""

from __future__ import annotations

import logging
from typing import Optional

from blockdown.constants import DEFAULT_MAX_NESTING_DEPTH, GREATER_THAN, MAX_LEADING_SPACES, SPACE, WHITESPACE
from blockdown.renderers.base import BaseRenderer
from blockdown.utils.lines import is_blank_line, next_line_start

logger = logging.getLogger(__name__)


def quote_prefix_length(data: bytes, pos: int = 0, end: int | None = None) -> int:
    """Return the length of the blockquote marker at ``pos``, or 0.

    A marker is up to two spaces, ``>``, and one optional space or tab.

    Examples
    --------
        >>> quote_prefix_length(b"> quoted")
        2
        >>> quote_prefix_length(b"  >quoted")
        3
        >>> quote_prefix_length(b"   > indented too far")
        0

    """
    if end is None:
        end = len(data)
    i = pos
    while i < end and i - pos < MAX_LEADING_SPACES - 1 and data[i] == SPACE:
        i += 1
    if i >= end or data[i] != GREATER_THAN:
        return 0
    if i + 1 < end and data[i + 1] in WHITESPACE:
        return i + 2 - pos
    return i + 1 - pos


class BlockParser:
    """Recursive block classifier driving a renderer.

    One instance handles one document; it keeps no state shared between
    documents, but it does remember whether the nesting warning was logged.

    Parameters
    ----------
    renderer : BaseRenderer
        Receives one call per recognized block
    max_nesting_depth : int, default 32
        Blockquote markers found at this depth or deeper are treated as text

    """

    def __init__(self, renderer: BaseRenderer, max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH):
        self.renderer = renderer
        self.max_nesting_depth = max_nesting_depth
        self.block_count = 0
        self._depth_warned = False

    def parse_block(self, output: bytearray, data: bytes, depth: int = 0) -> None:
        """Render every block of ``data`` into ``output``.

        Parameters
        ----------
        output : bytearray
            Output accumulator
        data : bytes
            Normalized text to classify
        depth : int, default 0
            Current blockquote nesting depth

        """
        beg = 0
        size = len(data)
        while beg < size:
            if quote_prefix_length(data, beg, size) and self._can_nest(depth):
                beg += self.parse_blockquote(output, data, beg, size, depth)
            else:
                beg += self.parse_paragraph(output, data, beg, size)

    def parse_blockquote(
        self, output: bytearray, data: bytes, begin: int = 0, end: int | None = None, depth: int = 0
    ) -> int:
        """Render the quoted region starting at ``begin`` as one blockquote.

        Quote markers are stripped from every line that carries one. Unmarked
        non-blank lines are lazy continuations and are kept as they are. A
        blank line ends the quote unless the next line is quoted again; that
        blank line is left for the caller.

        Returns
        -------
        int
            Number of bytes consumed from ``begin``

        """
        if end is None:
            end = len(data)

        work = bytearray()
        beg = begin
        while beg < end:
            line_end = next_line_start(data, beg, end)
            prefix = quote_prefix_length(data, beg, line_end)
            if prefix:
                beg += prefix
            elif is_blank_line(data, beg, line_end) and (
                line_end >= end or not quote_prefix_length(data, line_end, end)
            ):
                break
            work += data[beg:line_end]
            beg = line_end

        inner = bytearray()
        self.parse_block(inner, bytes(work), depth + 1)
        self.block_count += 1
        self.renderer.blockquote(output, bytes(inner) if inner else None)
        return beg - begin

    def parse_paragraph(self, output: bytearray, data: bytes, begin: int = 0, end: int | None = None) -> int:
        """Render the lines up to the next blank line as one paragraph.

        The blank line that ends the paragraph is consumed with it. A region
        made of a single blank line is consumed without producing a block.

        Returns
        -------
        int
            Number of bytes consumed from ``begin``, at least one line

        """
        if end is None:
            end = len(data)

        i = begin
        line_end = begin
        while i < end:
            line_end = next_line_start(data, i, end)
            if is_blank_line(data, i, end):
                break
            i = line_end

        content = data[begin:i].rstrip(b"\n")
        if content:
            self.block_count += 1
            self.renderer.paragraph(output, content)
        return line_end - begin

    def _can_nest(self, depth: int) -> bool:
        if depth < self.max_nesting_depth:
            return True
        if not self._depth_warned:
            logger.warning(
                "Blockquote nesting deeper than %d levels; rendering remaining markers as text",
                self.max_nesting_depth,
            )
            self._depth_warned = True
        return False


def render_blocks(
    output: bytearray, data: bytes, renderer: BaseRenderer, max_nesting_depth: Optional[int] = None
) -> int:
    """Classify and render normalized text with a fresh :class:`BlockParser`.

    Returns
    -------
    int
        Number of blocks handed to the renderer

    """
    parser = BlockParser(renderer, DEFAULT_MAX_NESTING_DEPTH if max_nesting_depth is None else max_nesting_depth)
    parser.parse_block(output, data)
    logger.debug("Dispatched %d block(s) to %s", parser.block_count, type(renderer).__name__)
    return parser.block_count


__all__ = ["BlockParser", "quote_prefix_length", "render_blocks"]
