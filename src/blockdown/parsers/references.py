#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/parsers/references.py
"""Reference-link definition recognition.

A reference-link definition registers a reusable link target without
producing body text::

    [id]: http://example.com/  "Optional Title"
    [id]: <http://example.com/>
      'Title on the following line'

The recognizer works directly on the raw (not yet normalized) input, so it
copes with every line-break variant through
:func:`blockdown.utils.lines.classify_line_break`.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from blockdown.constants import (
    CLOSE_BRACKET,
    COLON,
    GREATER_THAN,
    LESS_THAN,
    LINE_BREAK_BYTES,
    MAX_LEADING_SPACES,
    OPEN_BRACKET,
    SPACE,
    TITLE_DELIMITERS,
    WHITESPACE,
)
from blockdown.utils.lines import classify_line_break, find_line_end, skip_whitespace

logger = logging.getLogger(__name__)

_ID_TERMINATORS = b"\n\r]"
_LINK_TERMINATORS = b" \t\n\r"


@dataclass(frozen=True)
class LinkReference:
    """A link target registered by a reference-link definition.

    All fields hold the bytes exactly as they appeared in the input: ids are
    neither trimmed nor case-folded, links are not percent-decoded.

    Parameters
    ----------
    id : bytes
        Text between the square brackets (may be empty)
    link : bytes
        Link target without enclosing angle brackets
    title : bytes or None
        Title without its delimiters, or None when the definition has no title

    """

    id: bytes
    link: bytes
    title: Optional[bytes] = None


@dataclass
class ReferenceTable:
    """Ordered collection of link references extracted from one document.

    Records keep the order in which their definitions appear in the input.
    Duplicated ids are all kept.
    """

    references: list[LinkReference] = field(default_factory=list)

    def append(self, reference: LinkReference) -> None:
        """Add a reference at the end of the table."""
        self.references.append(reference)

    def get(self, ref_id: bytes) -> Optional[LinkReference]:
        """Return the first reference whose id equals ``ref_id`` byte for byte."""
        for reference in self.references:
            if reference.id == ref_id:
                return reference
        return None

    def dump(self) -> bytes:
        """Render the table in its diagnostic s-expression form.

        Returns
        -------
        bytes
            ``(refs`` followed by one ``\\n\\t("id" "link"[ "title"])`` entry per
            record, closed by ``)\\n``.

        Examples
        --------
            >>> table = ReferenceTable([LinkReference(b"foo", b"/url", b"title")])
            >>> table.dump()
            b'(refs\\n\\t("foo" "/url" "title"))\\n'

        """
        out = bytearray(b"(refs")
        for reference in self.references:
            out += b'\n\t("'
            out += reference.id
            out += b'" "'
            out += reference.link
            if reference.title is not None:
                out += b'" "'
                out += reference.title
            out += b'")'
        out += b")\n"
        return bytes(out)

    def __iter__(self) -> Iterator[LinkReference]:
        return iter(self.references)

    def __len__(self) -> int:
        return len(self.references)

    def __getitem__(self, index: int) -> LinkReference:
        return self.references[index]


def recognize_reference(
    data: bytes,
    begin: int,
    end: int | None = None,
    refs: ReferenceTable | None = None,
) -> int | None:
    """Recognize a reference-link definition starting at ``begin``.

    Parameters
    ----------
    data : bytes
        Raw input buffer
    begin : int
        Offset of the candidate line
    end : int, optional
        Exclusive end of the scan, defaults to ``len(data)``
    refs : ReferenceTable, optional
        Table receiving the extracted reference on success

    Returns
    -------
    int or None
        Offset just past the line break of the last consumed line (or ``end``
        when the definition runs to the end of input), or None when the line
        is not a definition. Nothing is appended to ``refs`` on failure.

    Notes
    -----
    Up to two leading spaces are accepted; three leading spaces disqualify the
    line. A title, when present, may sit on the definition line or alone on
    the following line and must be closed by the delimiter matching its
    opener (``'``, ``"`` or ``)``). A title that is started but not closed
    properly rejects the whole definition.

    """
    if end is None:
        end = len(data)

    i = begin
    while i < begin + MAX_LEADING_SPACES and i < end and data[i] == SPACE:
        i += 1
    if i >= end or i >= begin + MAX_LEADING_SPACES:
        return None

    # [id]
    if data[i] != OPEN_BRACKET:
        return None
    i += 1
    id_start = i
    while i < end and data[i] not in _ID_TERMINATORS:
        i += 1
    if i >= end or data[i] != CLOSE_BRACKET:
        return None
    id_end = i

    # ':' (space | tab)* line-break? (space | tab)*
    i += 1
    if i >= end or data[i] != COLON:
        return None
    i = skip_whitespace(data, i + 1, end)
    _, width = classify_line_break(data, i, end)
    i = skip_whitespace(data, i + width, end)
    if i >= end or data[i] in LINE_BREAK_BYTES:
        return None

    # link, optionally between angle brackets
    if data[i] == LESS_THAN:
        i += 1
    link_start = i
    while i < end and data[i] not in _LINK_TERMINATORS:
        i += 1
    link_end = i - 1 if i > link_start and data[i - 1] == GREATER_THAN else i

    # (space | tab)* then end of line or a title opener
    i = skip_whitespace(data, i, end)
    if i < end and data[i] not in LINE_BREAK_BYTES and data[i] not in TITLE_DELIMITERS:
        return None

    line_end: int | None = None
    if i >= end:
        line_end = end
    else:
        _, width = classify_line_break(data, i, end)
        if width:
            line_end = i + width
            i = skip_whitespace(data, line_end, end)

    title: bytes | None = None
    if i + 1 < end and data[i] in TITLE_DELIMITERS:
        closer = TITLE_DELIMITERS[data[i]]
        title_start = i + 1
        eol = find_line_end(data, title_start, end)
        _, width = classify_line_break(data, eol, end)

        last = eol - 1
        while last > title_start and data[last] in WHITESPACE:
            last -= 1
        if last <= title_start or data[last] != closer:
            return None
        title = bytes(data[title_start:last])
        line_end = eol + width

    if line_end is None:
        # garbage after the link
        return None

    if refs is not None:
        reference = LinkReference(
            id=bytes(data[id_start:id_end]),
            link=bytes(data[link_start:link_end]),
            title=title,
        )
        refs.append(reference)
        logger.debug("Extracted link reference %r -> %r", reference.id, reference.link)

    return line_end


__all__ = ["LinkReference", "ReferenceTable", "recognize_reference"]
