#  Copyright (c) 2025 Tom Villani, Ph.D.
# blockdown/options/xhtml.py
"""Configuration options for XHTML rendering."""

import re
from dataclasses import dataclass, field

from blockdown.constants import DEFAULT_BLOCKQUOTE_TAG, DEFAULT_PARAGRAPH_TAG
from blockdown.options.base import BaseRendererOptions

_TAG_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.:-]*")


@dataclass(frozen=True)
class XhtmlRendererOptions(BaseRendererOptions):
    """Configuration options for XHTML rendering.

    Parameters
    ----------
    paragraph_tag : str, default "p"
        Element name wrapping paragraphs
    blockquote_tag : str, default "blockquote"
        Element name wrapping blockquotes

    """

    paragraph_tag: str = field(
        default=DEFAULT_PARAGRAPH_TAG,
        metadata={"help": "Element name wrapping paragraphs", "type": str, "importance": "advanced"},
    )
    blockquote_tag: str = field(
        default=DEFAULT_BLOCKQUOTE_TAG,
        metadata={"help": "Element name wrapping blockquotes", "type": str, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate tag names.

        Raises
        ------
        ValueError
            If a tag name is not a valid XML element name.

        """
        super().__post_init__()
        for name in ("paragraph_tag", "blockquote_tag"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _TAG_NAME_RE.fullmatch(value):
                raise ValueError(f"{name} must be a valid element name, got {value!r}")
