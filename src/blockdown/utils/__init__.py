#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/utils/__init__.py
"""Utility modules for the blockdown package.

This package contains the line scanning helpers shared by the parsers and
the output helpers used by the command line.
"""

from blockdown.utils.lines import (
    LineBreak,
    classify_line_break,
    find_line_end,
    is_blank_line,
    next_line_start,
    skip_whitespace,
)

__all__ = [
    "LineBreak",
    "classify_line_break",
    "find_line_end",
    "is_blank_line",
    "next_line_start",
    "skip_whitespace",
]
