#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/parsers/__init__.py
"""Markdown block parsing.

- :mod:`~blockdown.parsers.references`: reference-link definition recognizer
- :mod:`~blockdown.parsers.normalizer`: pass 1, references and line endings
- :mod:`~blockdown.parsers.blocks`: pass 2, blockquotes and paragraphs
- :mod:`~blockdown.parsers.markdown`: the two-pass driver
"""

from blockdown.parsers.blocks import BlockParser, quote_prefix_length
from blockdown.parsers.markdown import MarkdownParser, ParseResult
from blockdown.parsers.normalizer import normalize_lines
from blockdown.parsers.references import LinkReference, ReferenceTable, recognize_reference

__all__ = [
    "BlockParser",
    "quote_prefix_length",
    "MarkdownParser",
    "ParseResult",
    "normalize_lines",
    "LinkReference",
    "ReferenceTable",
    "recognize_reference",
]
