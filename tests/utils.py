"""Test utilities for the blockdown test suite."""

from typing import Optional

from blockdown.renderers.base import BaseRenderer


class RecordingRenderer(BaseRenderer):
    """Renderer that logs each call and writes a compact bracketed form.

    Paragraphs are written as ``P(content)`` and blockquotes as ``Q{content}``,
    each followed by a newline, with the usual separator between blocks.
    """

    def __init__(self):
        super().__init__()
        self.calls: list[tuple[str, Optional[bytes]]] = []

    def paragraph(self, output: bytearray, content: Optional[bytes]) -> None:
        self.calls.append(("paragraph", content))
        self._separate(output)
        output += b"P(" + (content or b"") + b")\n"

    def blockquote(self, output: bytearray, content: Optional[bytes]) -> None:
        self.calls.append(("blockquote", content))
        self._separate(output)
        output += b"Q{" + (content or b"") + b"}\n"


class FailingRenderer(BaseRenderer):
    """Renderer whose paragraph callback always raises."""

    def paragraph(self, output: bytearray, content: Optional[bytes]) -> None:
        raise RuntimeError("paragraph callback exploded")

    def blockquote(self, output: bytearray, content: Optional[bytes]) -> None:
        output += b"Q"
