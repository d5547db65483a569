#!/usr/bin/env python3
"""
Logical-to-byte positioning for single-record sequence files.

Locates the header/sequence boundary, checks whether the data region is
wrapped at a uniform width, and translates 1-based logical positions into
byte offsets with either fixed-width arithmetic or a forward scan.
"""
import logging
import os
from abc import ABC, abstractmethod
from typing import BinaryIO, List, NamedTuple, Optional

from fastaseek.alphabet import count_valid, is_valid_code
from fastaseek.exceptions import InvalidRangeError, MalformedInputError, OutOfBoundsError
from fastaseek.models import ReaderOptions, SeekLocation, SequenceLayout

logger = logging.getLogger("fastaseek.positioning")

NEWLINE = 0x0A


class _LineInfo(NamedTuple):
    length: int           # bytes including terminator
    terminator: bytes     # b'\n', b'\r\n' or b'' at end of file
    valid: int            # sequence characters on the line
    content: Optional[bytes]

    @property
    def content_length(self) -> int:
        return self.length - len(self.terminator)


def _terminator(tail: bytes) -> bytes:
    if tail.endswith(b'\r\n'):
        return b'\r\n'
    if tail.endswith(b'\n'):
        return b'\n'
    return b''


def _consume_line(stream: BinaryIO, first: bytes, chunk_size: int, keep: bool = False) -> _LineInfo:
    """Read the remainder of a physical line whose first piece is already read

    Long lines are read piecewise so an unwrapped sequence is never held in
    memory unless keep is set.
    """
    piece = first
    length = 0
    valid = 0
    tail = b''
    kept: List[bytes] = []

    while piece:
        length += len(piece)
        valid += count_valid(piece)
        if keep:
            kept.append(piece)
        tail = (tail + piece)[-2:]
        if piece.endswith(b'\n'):
            break
        piece = stream.readline(chunk_size)

    return _LineInfo(
        length=length,
        terminator=_terminator(tail),
        valid=valid,
        content=b''.join(kept) if keep else None
    )


def detect_layout(stream: BinaryIO, options: ReaderOptions) -> SequenceLayout:
    """Find the first sequence line and measure it

    Header and comment lines before the first sequence line are consumed;
    their total byte length is the data start. Any other line, blank or
    not, is the first sequence line and sets the line width.

    Args:
        stream: Binary stream positioned anywhere
        options: Reader options (markers, chunk size)

    Returns:
        SequenceLayout for the stream

    Raises:
        MalformedInputError: If no sequence line exists
    """
    markers = (options.header_byte, options.comment_byte)
    stream.seek(0)
    offset = 0
    header_lines: List[str] = []

    while True:
        first = stream.readline(options.chunk_size)
        if not first:
            raise MalformedInputError(
                "No sequence line found",
                {'data_start': offset, 'header_lines': len(header_lines)}
            )

        structural = first[0] in markers
        line = _consume_line(stream, first, options.chunk_size, keep=structural)

        if structural:
            header_lines.append(line.content.rstrip(b'\r\n').decode('utf-8', errors='replace'))
            offset += line.length
            continue

        layout = SequenceLayout(
            data_start=offset,
            line_width=line.content_length,
            terminator_length=len(line.terminator) or 1,
            header_lines=header_lines
        )
        logger.debug(f"Sequence data starts at byte {layout.data_start}, "
                     f"line width {layout.line_width}, terminator {layout.terminator_length} byte(s)")
        return layout


def check_uniform_width(stream: BinaryIO, layout: SequenceLayout,
                        options: ReaderOptions) -> Optional[str]:
    """Check that the data region can be addressed with fixed-width arithmetic

    Every line except the last must hold exactly line_width sequence
    characters and nothing else, with the same terminator. Only the first
    width_check_lines lines are examined (0 examines all of them).

    Returns:
        None if the sample is uniform, otherwise a description of the first mismatch
    """
    markers = (options.header_byte, options.comment_byte)
    expected_terminator_length = layout.terminator_length
    limit = options.width_check_lines

    stream.seek(layout.data_start)
    line_no = 0
    ended_at = None

    while limit == 0 or line_no < limit:
        first = stream.readline(options.chunk_size)
        if not first:
            return None
        line_no += 1

        if first[0] in markers:
            return f"structural line {line_no} inside sequence data"

        line = _consume_line(stream, first, options.chunk_size)
        width = line.content_length

        if ended_at is not None:
            if width == 0:
                continue
            return f"line {line_no} follows short line {ended_at}"

        if line.valid != width:
            return f"line {line_no} contains non-sequence bytes"

        if line.terminator and len(line.terminator) != expected_terminator_length:
            return f"line {line_no} has a different line terminator"

        if width > layout.line_width:
            return f"line {line_no} is {width} wide, expected {layout.line_width}"

        if width < layout.line_width:
            ended_at = line_no

    return None


class PositionLocator(ABC):
    """Translates a 1-based logical position into a byte location"""

    name = "base"

    def __init__(self, layout: SequenceLayout):
        self.layout = layout

    @abstractmethod
    def locate(self, stream: BinaryIO, position: int) -> SeekLocation:
        """Return the byte location of the sequence character at position"""
        pass

    @staticmethod
    def _check_position(position: int) -> None:
        if position < 1:
            raise InvalidRangeError(f"Position {position} is below 1", {'position': position})


class FixedWidthLocator(PositionLocator):
    """Direct seek assuming every line holds line_width characters"""

    name = "fixed"

    def __init__(self, layout: SequenceLayout):
        if layout.line_width <= 0:
            raise MalformedInputError(
                "Fixed-width positioning needs a non-empty first sequence line",
                {'line_width': layout.line_width}
            )
        super().__init__(layout)

    def compute_offset(self, position: int) -> int:
        self._check_position(position)
        width = self.layout.line_width
        line, column = divmod(position - 1, width)
        return self.layout.data_start + line * (width + self.layout.terminator_length) + column

    def locate(self, stream: BinaryIO, position: int) -> SeekLocation:
        """Compute the byte location of position

        Raises:
            OutOfBoundsError: If the offset lies at or past the end of the stream
        """
        offset = self.compute_offset(position)
        size = stream.seek(0, os.SEEK_END)
        if offset >= size:
            raise OutOfBoundsError(
                f"Start position {position} lies beyond the end of the file",
                {'position': position, 'offset': offset, 'file_size': size}
            )
        return SeekLocation(offset=offset, at_line_start=(position - 1) % self.layout.line_width == 0)


class ScanningLocator(PositionLocator):
    """Counts sequence characters forward from the data start"""

    name = "scan"

    def __init__(self, layout: SequenceLayout, options: ReaderOptions):
        super().__init__(layout)
        self.options = options

    def locate(self, stream: BinaryIO, position: int) -> SeekLocation:
        """Find the byte holding the sequence character at position

        Raises:
            InvalidRangeError: If position is below 1
            OutOfBoundsError: If the record holds fewer than position characters
        """
        self._check_position(position)
        header_byte = self.options.header_byte
        comment_byte = self.options.comment_byte
        chunk_size = self.options.chunk_size

        stream.seek(self.layout.data_start)
        offset = self.layout.data_start
        curpos = 0
        at_line_start = True
        skipping = False

        while True:
            piece = stream.readline(chunk_size)
            if not piece:
                break
            piece_offset = offset
            piece_starts_line = at_line_start
            offset += len(piece)
            at_line_start = piece.endswith(b'\n')

            if piece_starts_line:
                skipping = False
                if piece[0] == header_byte and self.options.stop_at_next_record:
                    break
                if piece[0] in (header_byte, comment_byte):
                    skipping = True
            if skipping:
                continue

            valid = count_valid(piece)
            if curpos + valid < position:
                curpos += valid
                continue

            for index, byte in enumerate(piece):
                if is_valid_code(byte):
                    curpos += 1
                    if curpos == position:
                        return SeekLocation(
                            offset=piece_offset + index,
                            at_line_start=piece_starts_line and index == 0
                        )

        raise OutOfBoundsError(
            f"Start position {position} exceeds sequence length {curpos}",
            {'position': position, 'available': curpos}
        )
