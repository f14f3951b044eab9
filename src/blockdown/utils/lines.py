#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/utils/lines.py
"""Line scanning helpers shared by the block parsers.

Line breaks come in four shapes in raw input: ``\\n``, ``\\r``, ``\\r\\n`` and
``\\n\\r``. The classifier below is the single place that decides how many
bytes one logical break occupies, so the reference recognizer and the line
normalizer always agree on line boundaries.

Functions
---------
classify_line_break : Identify the line break starting at an offset
find_line_end : Locate the first line-break byte at or after an offset
next_line_start : Offset just past the next ``\\n`` in normalized text
is_blank_line : Whether a line holds only spaces and tabs

Examples
--------
    >>> classify_line_break(b"a\\r\\nb", 1)
    (<LineBreak.CRLF: 3>, 2)
    >>> find_line_end(b"abc\\rdef", 0)
    3
    >>> is_blank_line(b" \\t\\nxyz", 0)
    True

"""

from __future__ import annotations

from enum import Enum

from blockdown.constants import CR, LF, LINE_BREAK_BYTES, WHITESPACE


class LineBreak(Enum):
    """Kinds of line break recognized in raw input."""

    NONE = 0
    LF = 1
    CR = 2
    CRLF = 3
    LFCR = 4


def classify_line_break(data: bytes, pos: int, end: int | None = None) -> tuple[LineBreak, int]:
    """Classify the line break starting at ``pos``.

    Two-byte forms (``\\r\\n`` and ``\\n\\r``) are matched before the
    single-byte ones, so each of them counts as one logical break.

    Parameters
    ----------
    data : bytes
        Buffer to inspect
    pos : int
        Offset of the candidate line break
    end : int, optional
        Exclusive upper bound of the scan, defaults to ``len(data)``

    Returns
    -------
    tuple[LineBreak, int]
        The break kind and the number of bytes it occupies. ``(LineBreak.NONE, 0)``
        when ``pos`` is at the end bound or on a non-break byte.

    """
    if end is None:
        end = len(data)
    if pos >= end:
        return LineBreak.NONE, 0

    current = data[pos]
    following = data[pos + 1] if pos + 1 < end else None

    if current == LF:
        if following == CR:
            return LineBreak.LFCR, 2
        return LineBreak.LF, 1
    if current == CR:
        if following == LF:
            return LineBreak.CRLF, 2
        return LineBreak.CR, 1
    return LineBreak.NONE, 0


def find_line_end(data: bytes, pos: int, end: int | None = None) -> int:
    """Return the offset of the first ``\\n`` or ``\\r`` at or after ``pos``, or ``end``."""
    if end is None:
        end = len(data)
    while pos < end and data[pos] not in LINE_BREAK_BYTES:
        pos += 1
    return pos


def skip_whitespace(data: bytes, pos: int, end: int | None = None) -> int:
    """Return the offset of the first byte at or after ``pos`` that is not a space or tab."""
    if end is None:
        end = len(data)
    while pos < end and data[pos] in WHITESPACE:
        pos += 1
    return pos


def next_line_start(data: bytes, pos: int, end: int | None = None) -> int:
    """Return the offset just past the next ``\\n`` in normalized text.

    The line starting at ``pos`` always counts as at least one byte long, so the
    result is strictly greater than ``pos`` whenever ``pos < end``.

    """
    if end is None:
        end = len(data)
    newline = data.find(b"\n", pos, end)
    return end if newline < 0 else newline + 1


def is_blank_line(data: bytes, pos: int, end: int | None = None) -> bool:
    """Return True when the line starting at ``pos`` contains only spaces and tabs.

    An empty remainder counts as blank.

    """
    if end is None:
        end = len(data)
    while pos < end and data[pos] != LF:
        if data[pos] not in WHITESPACE:
            return False
        pos += 1
    return True


__all__ = [
    "LineBreak",
    "classify_line_break",
    "find_line_end",
    "skip_whitespace",
    "next_line_start",
    "is_blank_line",
]
