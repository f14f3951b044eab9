#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_scenarios.py
"""End-to-end rendering of representative documents through the public API."""

import pytest
from utils import RecordingRenderer

from blockdown import markdown_to_bytes, render, to_xhtml
from blockdown.cli import main
from blockdown.options import MarkdownParserOptions


@pytest.mark.integration
class TestDocumentScenarios:
    """Whole documents from input bytes to rendered output."""

    def test_single_paragraph(self):
        renderer = RecordingRenderer()
        render(bytearray(), b"Hello world\n", renderer)

        assert renderer.calls == [("paragraph", b"Hello world")]
        assert markdown_to_bytes(b"Hello world\n") == b"<p>Hello world</p>\n"

    def test_blockquote_with_two_lines(self):
        assert markdown_to_bytes(b"> line1\n> line2\n") == b"<blockquote>\n<p>line1\nline2</p>\n</blockquote>\n"

    def test_reference_definition_is_excised(self):
        output = bytearray()
        refs = render(output, b'[foo]: /url "title"\n\nSee [foo].\n')

        assert len(refs) == 1
        assert (refs[0].id, refs[0].link, refs[0].title) == (b"foo", b"/url", b"title")
        assert bytes(output) == b"<p>See [foo].</p>\n"

    def test_two_paragraphs(self):
        renderer = RecordingRenderer()
        render(bytearray(), b"a\n\nb\n", renderer)

        assert renderer.calls == [("paragraph", b"a"), ("paragraph", b"b")]
        assert markdown_to_bytes(b"a\n\nb\n") == b"<p>a</p>\n\n<p>b</p>\n"

    def test_incomplete_definition_is_text(self):
        output = bytearray()
        refs = render(output, b"[foo]: \n")

        assert len(refs) == 0
        assert bytes(output) == b"<p>[foo]: </p>\n"


@pytest.mark.integration
class TestMixedDocuments:
    """Documents combining every construct and line-ending convention."""

    DOCUMENT = (
        b"[home]: <https://example.com/>  'Home page'\r\n"
        b"Intro line one\r\n"
        b"intro line two\r\n"
        b"\r\n"
        b"> Quoted\r\n"
        b"lazy continuation\r\n"
        b">\r\n"
        b"> > nested\r\n"
        b"\r\n"
        b"  [docs]:\r\n"
        b"    /docs\r\n"
        b'    "Docs"\r\n'
        b"Closing paragraph."
    )

    EXPECTED = (
        "<p>Intro line one\nintro line two</p>\n"
        "\n"
        "<blockquote>\n"
        "<p>Quoted\nlazy continuation</p>\n"
        "\n"
        "<blockquote>\n<p>nested</p>\n</blockquote>\n"
        "</blockquote>\n"
        "\n"
        "<p>Closing paragraph.</p>\n"
    )

    def test_xhtml(self):
        assert to_xhtml(self.DOCUMENT) == self.EXPECTED

    def test_references(self):
        refs = render(bytearray(), self.DOCUMENT)

        assert [(ref.id, ref.link, ref.title) for ref in refs] == [
            (b"home", b"https://example.com/", b"Home page"),
            (b"docs", b"/docs", b"Docs"),
        ]

    def test_line_endings_do_not_matter(self):
        unix = self.DOCUMENT.replace(b"\r\n", b"\n")
        mac = self.DOCUMENT.replace(b"\r\n", b"\r")

        assert markdown_to_bytes(unix) == markdown_to_bytes(mac) == markdown_to_bytes(self.DOCUMENT)

    def test_dump_after_body(self):
        html = markdown_to_bytes(self.DOCUMENT, options=MarkdownParserOptions(dump_references=True))

        assert html.endswith(b'(refs\n\t("home" "https://example.com/" "Home page")\n\t("docs" "/docs" "Docs"))\n')


@pytest.mark.integration
@pytest.mark.cli
def test_cli_round_trip(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "doc.md"
    source.write_bytes(TestMixedDocuments.DOCUMENT)
    target = tmp_path / "doc.html"

    assert main([str(source), "--out", str(target), "--no-config"]) == 0
    assert target.read_text(encoding="utf-8") == TestMixedDocuments.EXPECTED
