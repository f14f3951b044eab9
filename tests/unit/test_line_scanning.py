#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_line_scanning.py
"""Unit tests for the line-break classifier and line scanning helpers."""

import pytest

from blockdown.utils.lines import (
    LineBreak,
    classify_line_break,
    find_line_end,
    is_blank_line,
    next_line_start,
    skip_whitespace,
)


@pytest.mark.unit
class TestClassifyLineBreak:
    """Tests for classify_line_break."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"\n", (LineBreak.LF, 1)),
            (b"\r", (LineBreak.CR, 1)),
            (b"\r\n", (LineBreak.CRLF, 2)),
            (b"\n\r", (LineBreak.LFCR, 2)),
            (b"\n\n", (LineBreak.LF, 1)),
            (b"\r\r", (LineBreak.CR, 1)),
            (b"x\n", (LineBreak.NONE, 0)),
        ],
    )
    def test_break_kinds(self, data, expected):
        assert classify_line_break(data, 0) == expected

    def test_end_of_data_is_no_break(self):
        assert classify_line_break(b"abc", 3) == (LineBreak.NONE, 0)

    def test_end_bound_splits_two_byte_break(self):
        assert classify_line_break(b"\r\n", 0, end=1) == (LineBreak.CR, 1)

    def test_offset_inside_buffer(self):
        assert classify_line_break(b"a\r\nb", 1) == (LineBreak.CRLF, 2)


@pytest.mark.unit
class TestLineScanning:
    """Tests for the scanning helpers."""

    def test_find_line_end_stops_at_either_break_byte(self):
        assert find_line_end(b"abc\rdef", 0) == 3
        assert find_line_end(b"abc\ndef", 1) == 3

    def test_find_line_end_without_break(self):
        assert find_line_end(b"abc", 0) == 3
        assert find_line_end(b"abc\n", 0, end=2) == 2

    def test_skip_whitespace(self):
        assert skip_whitespace(b" \t x", 0) == 3
        assert skip_whitespace(b"x", 0) == 0
        assert skip_whitespace(b"   ", 1) == 3

    def test_next_line_start(self):
        data = b"ab\ncd\n"
        assert next_line_start(data, 0) == 3
        assert next_line_start(data, 3) == 6
        assert next_line_start(b"ab", 0) == 2

    def test_next_line_start_on_empty_line(self):
        assert next_line_start(b"\n\nx", 0) == 1
        assert next_line_start(b"\n\nx", 1) == 2

    @pytest.mark.parametrize(
        "data,pos,expected",
        [
            (b" \t\nx", 0, True),
            (b"\n", 0, True),
            (b"", 0, True),
            (b" a\n", 0, False),
            (b"x\n  ", 2, True),
            (b"  \n  x\n", 3, False),
        ],
    )
    def test_is_blank_line(self, data, pos, expected):
        assert is_blank_line(data, pos) is expected
