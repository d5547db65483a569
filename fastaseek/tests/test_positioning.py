#!/usr/bin/env python3
"""
Tests for boundary detection, width checking and the position locators
"""

import io
import pytest

from fastaseek.exceptions import InvalidRangeError, MalformedInputError, OutOfBoundsError
from fastaseek.models import ReaderOptions, SequenceLayout
from fastaseek.positioning import (
    FixedWidthLocator, ScanningLocator, check_uniform_width, detect_layout
)


def layout_of(content: bytes, **kwargs) -> SequenceLayout:
    return detect_layout(io.BytesIO(content), ReaderOptions(**kwargs))


class TestDetectLayout:

    def test_header_and_width(self):
        layout = layout_of(b">seq1\nACGTACGT\nACGT\n")
        assert layout.data_start == 6
        assert layout.line_width == 8
        assert layout.terminator_length == 1
        assert layout.header_lines == [">seq1"]

    def test_sequence_at_byte_zero(self):
        layout = layout_of(b"ACGT\n")
        assert layout.data_start == 0
        assert layout.header_lines == []

    def test_single_unterminated_line(self):
        layout = layout_of(b">s\nACGTA")
        assert layout.line_width == 5
        assert layout.terminator_length == 1

    def test_crlf(self):
        layout = layout_of(b">s\r\n;c\r\nACG\r\n")
        assert layout.data_start == 8
        assert layout.line_width == 3
        assert layout.terminator_length == 2
        assert layout.header_lines == [">s", ";c"]

    def test_custom_markers(self):
        layout = layout_of(b"#note\n@read\nACGT\n", header_marker="@", comment_marker="#")
        assert layout.data_start == 12
        assert layout.header_lines == ["#note", "@read"]

    def test_stream_position_ignored(self):
        stream = io.BytesIO(b">s\nACGT\n")
        stream.seek(5)
        assert detect_layout(stream, ReaderOptions()).data_start == 3

    def test_blank_first_data_line(self):
        layout = layout_of(b">s\n\nACGT\n")
        assert layout.data_start == 3
        assert layout.line_width == 0
        assert layout.header_lines == [">s"]

    @pytest.mark.parametrize("content", [b"", b">only\n", b";a\n;b\n"])
    def test_no_sequence_line(self, content):
        with pytest.raises(MalformedInputError):
            layout_of(content)


class TestCheckUniformWidth:

    def check(self, content: bytes, **kwargs):
        options = ReaderOptions(**kwargs)
        stream = io.BytesIO(content)
        return check_uniform_width(stream, detect_layout(stream, options), options)

    def test_uniform(self):
        assert self.check(b">s\nACGT\nACGT\nAC\n") is None

    def test_final_line_full_width(self):
        assert self.check(b">s\nACGT\nACGT\n") is None

    def test_trailing_blank_lines(self):
        assert self.check(b">s\nACGT\nAC\n\n\n") is None

    def test_wide_interior_line(self):
        assert "line 2" in self.check(b">s\nACGT\nACGTA\nAC\n")

    def test_short_interior_line(self):
        assert "follows short line 2" in self.check(b">s\nACGT\nAC\nACGT\n")

    def test_blank_interior_line(self):
        assert self.check(b">s\nACGT\n\nACGT\n") is not None

    def test_non_sequence_bytes(self):
        assert "non-sequence" in self.check(b">s\nAC T\nACGT\n")

    def test_structural_line(self):
        assert "structural" in self.check(b">s\nACGT\n>t\nACGT\n")

    def test_mixed_terminators(self):
        assert "terminator" in self.check(b">s\nACGT\r\nACGT\nAC\n")

    def test_sample_limit(self):
        content = b">s\nACGT\nACGT\nACGTACGT\n"
        assert self.check(content, width_check_lines=2) is None
        assert self.check(content, width_check_lines=3) is not None


class TestFixedWidthLocator:

    def test_offsets(self):
        locator = FixedWidthLocator(SequenceLayout(data_start=6, line_width=8))
        assert locator.compute_offset(1) == 6
        assert locator.compute_offset(8) == 13
        assert locator.compute_offset(9) == 15
        assert locator.compute_offset(12) == 18

    def test_crlf_offsets(self):
        locator = FixedWidthLocator(SequenceLayout(data_start=4, line_width=4, terminator_length=2))
        assert locator.compute_offset(5) == 10
        assert locator.compute_offset(9) == 16

    def test_line_start_flag(self):
        locator = FixedWidthLocator(SequenceLayout(data_start=0, line_width=4))
        stream = io.BytesIO(b"ACGT\nACGT\n")
        assert locator.locate(stream, 5).at_line_start
        assert not locator.locate(stream, 6).at_line_start

    @pytest.mark.parametrize("position", [11, 2 ** 64])
    def test_offset_past_end(self, position):
        locator = FixedWidthLocator(SequenceLayout(data_start=0, line_width=4))
        with pytest.raises(OutOfBoundsError) as exc_info:
            locator.locate(io.BytesIO(b"ACGT\nACGT\n"), position)
        assert exc_info.value.details['file_size'] == 10

    def test_zero_width(self):
        with pytest.raises(MalformedInputError):
            FixedWidthLocator(SequenceLayout(data_start=0, line_width=0))

    @pytest.mark.parametrize("position", [0, -1])
    def test_position_below_one(self, position):
        locator = FixedWidthLocator(SequenceLayout(data_start=0, line_width=4))
        with pytest.raises(InvalidRangeError):
            locator.compute_offset(position)


class TestScanningLocator:

    CONTENT = b">s\nAC\nDEFG\nHI\n"

    def locate(self, content: bytes, position: int, **kwargs):
        options = ReaderOptions(**kwargs)
        stream = io.BytesIO(content)
        locator = ScanningLocator(detect_layout(stream, options), options)
        return locator.locate(stream, position)

    def test_line_start(self):
        location = self.locate(self.CONTENT, 3)
        assert location.offset == 6
        assert location.at_line_start

    def test_mid_line(self):
        location = self.locate(self.CONTENT, 5)
        assert location.offset == 8
        assert not location.at_line_start

    def test_skips_invalid_bytes(self):
        assert self.locate(b"A C\nG\n", 2).offset == 2

    def test_skips_comment_lines(self):
        assert self.locate(b">s\nAC\n;xyz\nGT\n", 3).offset == 11

    def test_small_chunks(self):
        location = self.locate(b">s\nACGTACGTAC\n", 9, chunk_size=3)
        assert location.offset == 11
        assert not location.at_line_start

    def test_past_end(self):
        with pytest.raises(OutOfBoundsError) as exc_info:
            self.locate(self.CONTENT, 9)
        assert exc_info.value.details['available'] == 8

    def test_stops_at_next_header(self):
        with pytest.raises(OutOfBoundsError):
            self.locate(b">a\nAC\n>b\nGT\n", 3)
        assert self.locate(b">a\nAC\n>b\nGT\n", 3, stop_at_next_record=False).offset == 9

    def test_position_below_one(self):
        with pytest.raises(InvalidRangeError):
            self.locate(self.CONTENT, 0)
