#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Unit tests for the blockdown command.

Each test runs ``main()`` in an empty temporary directory with no home
configuration, so only the configuration files a test creates are found.
"""

import io
import json
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from blockdown.cli import build_options, create_parser, get_exit_code_for_exception, main
from blockdown.constants import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from blockdown.exceptions import DependencyError, FileError, OutputWriteError, RenderingError, ValidationError
from blockdown.renderers.xhtml import XhtmlRenderer

DOCUMENT = b'[foo]: /url "title"\n\n> quoted\n\nSee [foo].\n'
RENDERED = b"<blockquote>\n<p>quoted</p>\n</blockquote>\n\n<p>See [foo].</p>\n"


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch, restore_root_logger):
    """Run in an empty directory with an empty home and no config variable."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.delenv("BLOCKDOWN_CONFIG", raising=False)
    with patch("pathlib.Path.home", return_value=home):
        yield work


@pytest.fixture
def source(isolated_cli) -> Path:
    path = isolated_cli / "doc.md"
    path.write_bytes(DOCUMENT)
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParser:
    """Test the argument parser definition."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.input == "-"
        assert args.output is None
        assert args.dump_references is None
        assert args.log_level == "WARNING"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "blockdown" in capsys.readouterr().out

    def test_build_options_prefers_cli(self):
        args = create_parser().parse_args(["--paragraph-tag", "div", "--max-nesting-depth", "2"])
        parser_options, renderer_options = build_options(args, {"paragraph_tag": "para", "dump_references": True})

        assert renderer_options.paragraph_tag == "div"
        assert parser_options.max_nesting_depth == 2
        assert parser_options.dump_references is True


@pytest.mark.unit
@pytest.mark.cli
class TestMainSuccess:
    """Test successful runs."""

    def test_render_file_to_file(self, source):
        out = source.with_suffix(".html")

        assert main([str(source), "--out", str(out)]) == EXIT_SUCCESS
        assert out.read_bytes() == RENDERED

    def test_render_to_stdout(self, source, capsysbinary):
        assert main([str(source)]) == EXIT_SUCCESS
        assert capsysbinary.readouterr().out == RENDERED

    def test_render_stdin(self, monkeypatch, capsysbinary):
        monkeypatch.setattr("sys.stdin", SimpleNamespace(buffer=io.BytesIO(b"a\r\nb\r\n")))

        assert main(["-"]) == EXIT_SUCCESS
        assert capsysbinary.readouterr().out == b"<p>a\nb</p>\n"

    def test_dump_references(self, source):
        out = source.with_suffix(".html")
        main([str(source), "-o", str(out), "--dump-references"])

        assert out.read_bytes() == RENDERED + b'(refs\n\t("foo" "/url" "title"))\n'

    def test_renderer_tags(self, source):
        out = source.with_suffix(".html")
        main([str(source), "-o", str(out), "--paragraph-tag", "para", "--blockquote-tag", "aside"])

        assert out.read_bytes().startswith(b"<aside>\n<para>quoted</para>\n</aside>\n")

    def test_show_references_plain(self, source, capsys):
        main([str(source), "-o", str(source.with_suffix(".html")), "--show-references"])

        assert "foo\t/url\ttitle" in capsys.readouterr().err

    def test_show_references_rich(self, source, capsys):
        pytest.importorskip("rich")
        main([str(source), "-o", str(source.with_suffix(".html")), "--show-references", "--rich", "--force-rich"])

        err = capsys.readouterr().err
        assert "Link references (1)" in err
        assert "/url" in err

    def test_verbose_logs_summary(self, source, capsys):
        main([str(source), "-o", str(source.with_suffix(".html")), "--log-level", "INFO"])

        assert "Rendered 3 block(s), 1 reference(s)" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestMainConfiguration:
    """Test configuration file handling."""

    def test_discovered_config(self, source, isolated_cli):
        (isolated_cli / ".blockdown.toml").write_text('paragraph_tag = "para"\n')
        out = source.with_suffix(".html")

        main([str(source), "-o", str(out)])

        assert b"<para>See [foo].</para>" in out.read_bytes()

    def test_cli_overrides_config(self, source, isolated_cli):
        (isolated_cli / ".blockdown.yaml").write_text("paragraph_tag: para\n")
        out = source.with_suffix(".html")

        main([str(source), "-o", str(out), "--paragraph-tag", "div"])

        assert b"<div>See [foo].</div>" in out.read_bytes()

    def test_env_config(self, source, tmp_path, monkeypatch):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"dump_references": True}))
        monkeypatch.setenv("BLOCKDOWN_CONFIG", str(config))
        out = source.with_suffix(".html")

        main([str(source), "-o", str(out)])

        assert out.read_bytes().endswith(b"))\n")

    def test_no_config(self, source, isolated_cli):
        (isolated_cli / ".blockdown.toml").write_text('paragraph_tag = "para"\n')
        out = source.with_suffix(".html")

        main([str(source), "-o", str(out), "--no-config"])

        assert out.read_bytes() == RENDERED

    def test_unknown_keys_warn(self, source, isolated_cli, capsys):
        (isolated_cli / ".blockdown.toml").write_text("colour = 1\n")

        assert main([str(source), "-o", str(source.with_suffix(".html"))]) == EXIT_SUCCESS
        assert "Ignoring unknown configuration keys: colour" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestMainErrors:
    """Test exit codes for each failure class."""

    def test_missing_input(self, capsys):
        assert main(["missing.md"]) == EXIT_FILE_ERROR
        assert "missing.md" in capsys.readouterr().err

    def test_unwritable_output(self, source, isolated_cli):
        assert main([str(source), "-o", str(isolated_cli / "no" / "out.html")]) == EXIT_FILE_ERROR

    @pytest.mark.parametrize(
        "extra",
        [
            ["--max-nesting-depth", "-1"],
            ["--max-nesting-depth", "100000"],
            ["--flags", "-2"],
            ["--paragraph-tag", "1x"],
        ],
    )
    def test_invalid_options(self, source, extra):
        assert main([str(source), *extra]) == EXIT_VALIDATION_ERROR

    @pytest.mark.parametrize(
        "name,content",
        [
            (".blockdown.yaml", "max_nesting_depth: \"8\"\n"),
            (".blockdown.json", '{"max_nesting_depth": "8"}'),
            (".blockdown.toml", "max_nesting_depth = 8.5\n"),
            (".blockdown.yaml", "flags: yes\n"),
        ],
    )
    def test_mistyped_config_value(self, source, isolated_cli, capsys, name, content):
        config = isolated_cli / name
        config.write_text(content)

        assert main([str(source), "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "Unexpected error" not in capsys.readouterr().err

    def test_broken_config_file(self, source, isolated_cli, capsys):
        config = isolated_cli / "broken.toml"
        config.write_text("this is = = not toml")

        assert main([str(source), "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "Invalid config file" in capsys.readouterr().err

    def test_missing_config_file(self, source):
        assert main([str(source), "--config", "nowhere.toml"]) == EXIT_VALIDATION_ERROR

    def test_rich_missing(self, source):
        with patch("blockdown.cli.output.check_rich_available", return_value=False):
            code = main([str(source), "--show-references", "--rich"])

        assert code == EXIT_DEPENDENCY_ERROR

    def test_renderer_failure(self, source, monkeypatch, capsys):
        def explode(self, output, content):
            raise RuntimeError("boom")

        monkeypatch.setattr(XhtmlRenderer, "paragraph", explode)

        assert main([str(source)]) == EXIT_RENDERING_ERROR
        assert "boom" in capsys.readouterr().err

    def test_unexpected_error(self, source, capsys):
        with patch("blockdown.cli.read_input", side_effect=RuntimeError("disk on fire")):
            assert main([str(source)]) == EXIT_ERROR

        assert "Unexpected error: disk on fire" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test the exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("Rich output", [("rich", "")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("rich"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (ValueError("bad"), EXIT_VALIDATION_ERROR),
            (FileError("missing"), EXIT_FILE_ERROR),
            (OutputWriteError("out.html"), EXIT_FILE_ERROR),
            (RenderingError("boom"), EXIT_RENDERING_ERROR),
            (RuntimeError("other"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, code):
        assert get_exit_code_for_exception(exception) == code
