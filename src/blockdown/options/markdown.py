#  Copyright (c) 2025 Tom Villani, Ph.D.
# blockdown/options/markdown.py
"""Configuration options for markdown block parsing.

This module defines the options controlling the two-pass markdown parser.
"""

from dataclasses import dataclass, field

from blockdown.constants import (
    DEFAULT_DUMP_REFERENCES,
    DEFAULT_FLAGS,
    DEFAULT_MAX_NESTING_DEPTH,
    MAX_NESTING_DEPTH_LIMIT,
)
from blockdown.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for markdown block parsing.

    Parameters
    ----------
    flags : int, default 0
        Reserved extension flags. Accepted and carried through but no flag is
        interpreted yet.
    dump_references : bool, default False
        Append the diagnostic reference-table dump to the output after the
        rendered blocks.
    max_nesting_depth : int, default 32
        Deepest blockquote nesting that is still recognized. Quote markers
        beyond this depth are rendered as paragraph text. At most 200.

    Examples
    --------
        >>> options = MarkdownParserOptions(dump_references=True)
        >>> options.create_updated(max_nesting_depth=4).max_nesting_depth
        4

    """

    flags: int = field(
        default=DEFAULT_FLAGS,
        metadata={"help": "Reserved extension flags (currently unused)", "type": int, "importance": "advanced"},
    )
    dump_references: bool = field(
        default=DEFAULT_DUMP_REFERENCES,
        metadata={"help": "Append the reference table dump after the rendered output", "importance": "core"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum blockquote nesting depth", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if isinstance(self.flags, bool) or not isinstance(self.flags, int) or self.flags < 0:
            raise ValueError(f"flags must be a non-negative integer, got {self.flags!r}")
        depth = self.max_nesting_depth
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ValueError(f"max_nesting_depth must be an integer, got {depth!r}")
        if not 0 <= depth <= MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(f"max_nesting_depth must be between 0 and {MAX_NESTING_DEPTH_LIMIT}, got {depth}")
