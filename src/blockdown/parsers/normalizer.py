#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/parsers/normalizer.py
"""First pass: reference extraction and line-ending normalization."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from blockdown.constants import LF
from blockdown.parsers.references import LinkReference, ReferenceTable, recognize_reference
from blockdown.utils.lines import classify_line_break, find_line_end

logger = logging.getLogger(__name__)

ReferenceCallback = Callable[[LinkReference], None]


def normalize_lines(
    data: bytes,
    refs: ReferenceTable | None = None,
    on_reference: Optional[ReferenceCallback] = None,
) -> bytes:
    """Split reference definitions out of ``data`` and canonicalize line breaks.

    Every line start is offered to :func:`recognize_reference`. Recognized
    definitions are stored in ``refs`` and dropped from the text; all other
    lines are copied with each logical line break (``\\n``, ``\\r``, ``\\r\\n``
    or ``\\n\\r``) rewritten as a single ``\\n``.

    Parameters
    ----------
    data : bytes
        Raw input document
    refs : ReferenceTable, optional
        Table receiving the extracted references. A throwaway table is used
        when omitted.
    on_reference : callable, optional
        Called with each reference right after it is extracted

    Returns
    -------
    bytes
        Normalized text, either empty or terminated by ``\\n``

    """
    if refs is None:
        refs = ReferenceTable()

    size = len(data)
    text = bytearray()
    beg = 0
    while beg < size:
        found = len(refs)
        end = recognize_reference(data, beg, size, refs)
        if end is not None:
            if on_reference is not None:
                for reference in refs.references[found:]:
                    on_reference(reference)
            beg = end
            continue

        end = find_line_end(data, beg, size)
        text += data[beg:end]
        _, width = classify_line_break(data, end, size)
        while width:
            text.append(LF)
            end += width
            _, width = classify_line_break(data, end, size)
        beg = end

    if text and text[-1] != LF:
        text.append(LF)

    logger.debug("Normalized %d input bytes into %d bytes, %d references", size, len(text), len(refs))
    return bytes(text)


__all__ = ["normalize_lines", "ReferenceCallback"]
