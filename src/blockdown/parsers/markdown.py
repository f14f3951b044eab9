#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/parsers/markdown.py
"""Two-pass markdown block parser.

Pass 1 (:func:`~blockdown.parsers.normalizer.normalize_lines`) removes
reference-link definitions from the input and canonicalizes line breaks.
Pass 2 (:class:`~blockdown.parsers.blocks.BlockParser`) splits the remaining
text into blockquotes and paragraphs and hands each one to the renderer.

Examples
--------
    >>> from blockdown.parsers.markdown import MarkdownParser
    >>> out = bytearray()
    >>> result = MarkdownParser().parse(out, b"[home]: /index.html\\n\\nWelcome.\\n")
    >>> bytes(out)
    b'<p>Welcome.</p>\\n'
    >>> result.references[0].link
    b'/index.html'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from blockdown.exceptions import BlockdownError, RenderingError, ValidationError
from blockdown.options.markdown import MarkdownParserOptions
from blockdown.parsers.base import BaseParser, InputData
from blockdown.parsers.blocks import render_blocks
from blockdown.parsers.normalizer import normalize_lines
from blockdown.parsers.references import LinkReference, ReferenceTable
from blockdown.progress import ProgressCallback
from blockdown.renderers.base import BaseRenderer
from blockdown.renderers.xhtml import XhtmlRenderer

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of one parse.

    Parameters
    ----------
    references : ReferenceTable
        Reference-link definitions in order of appearance
    normalized : bytes
        Body text after pass 1
    block_count : int
        Number of blocks handed to the renderer, nested ones included

    """

    references: ReferenceTable
    normalized: bytes
    block_count: int = 0


class MarkdownParser(BaseParser):
    """Parse markdown block structure and drive a renderer.

    Parameters
    ----------
    renderer : BaseRenderer or None, default = None
        Renderer receiving the blocks. Defaults to :class:`XhtmlRenderer`.
    options : MarkdownParserOptions or None, default = None
        Parser configuration
    progress_callback : ProgressCallback or None, default = None
        Optional callback for progress updates

    """

    def __init__(
        self,
        renderer: BaseRenderer | None = None,
        options: MarkdownParserOptions | None = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """Initialize the parser with a renderer and options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        BaseParser.__init__(self, options, progress_callback)
        self.options: MarkdownParserOptions = options

        if renderer is None:
            renderer = XhtmlRenderer()
        elif not isinstance(renderer, BaseRenderer):
            raise ValidationError(
                f"renderer must be a BaseRenderer instance, got {type(renderer).__name__}",
                parameter_name="renderer",
                parameter_value=renderer,
            )
        self.renderer = renderer

    def parse(self, output: bytearray, input_data: InputData) -> ParseResult:
        """Render ``input_data`` into ``output``.

        Parameters
        ----------
        output : bytearray
            Output accumulator; rendered bytes are appended to it
        input_data : bytes, bytearray, memoryview, str, Path, or file-like
            Markdown source. ``str`` is document content encoded as UTF-8.

        Returns
        -------
        ParseResult
            Extracted references and the normalized body text

        Raises
        ------
        ValidationError
            If ``output`` is not a bytearray or the input type is unsupported
        RenderingError
            If a renderer callback raises

        """
        if not isinstance(output, bytearray):
            raise ValidationError(
                f"output must be a bytearray, got {type(output).__name__}",
                parameter_name="output",
                parameter_value=output,
            )
        data = self._load_bytes_content(input_data)
        if self.options.flags:
            logger.debug("Ignoring reserved flags %#x", self.options.flags)

        self._emit_progress("started", "Rendering document", current=0, total=len(data))

        refs = ReferenceTable()
        text = normalize_lines(data, refs, on_reference=self._report_reference)
        self._emit_progress(
            "item_done",
            f"Extracted {len(refs)} reference(s)",
            current=len(data),
            total=len(data),
            item_type="normalization",
            reference_count=len(refs),
        )

        result = ParseResult(references=refs, normalized=text)
        if text:
            result.block_count = self._render(output, text)
            self._emit_progress(
                "item_done",
                f"Rendered {result.block_count} block(s)",
                current=len(data),
                total=len(data),
                item_type="rendering",
                block_count=result.block_count,
            )

        if self.options.dump_references:
            output += refs.dump()

        self._emit_progress("finished", "Rendering complete", current=len(data), total=len(data))
        return result

    def _render(self, output: bytearray, text: bytes) -> int:
        try:
            return render_blocks(output, text, self.renderer, self.options.max_nesting_depth)
        except (BlockdownError, RecursionError):
            # Stack exhaustion is not the renderer's fault
            raise
        except Exception as e:
            self._emit_progress("error", "Renderer failed", error=str(e), stage="rendering")
            raise RenderingError(
                f"{type(self.renderer).__name__} failed: {e}",
                rendering_stage="blocks",
                original_error=e,
            ) from e

    def _report_reference(self, reference: LinkReference) -> None:
        self._emit_progress(
            "detected",
            "Reference definition found",
            detected_type="reference",
            reference_id=reference.id.decode("utf-8", errors="replace"),
        )


__all__ = ["MarkdownParser", "ParseResult"]
