#!/usr/bin/env python3
"""
Random-access reader for single-record FASTA files.

SequenceReader opens a file, locates where the sequence data begins and
answers 1-based inclusive range queries by seeking and scanning, without
loading the sequence into memory.

    with SequenceReader("chr1.fa") as reader:
        reader.get_sequence(1, 4)          # 'ACGT'
        reader.get_sequence(9, 12, True)   # uppercased

A reader owns one file handle and moves its cursor on every query, so one
instance must not be queried from several threads at once. Open a reader
per thread instead.
"""
import logging
import os
from typing import BinaryIO, List, Optional, Union

from fastaseek.alphabet import fold_upper, is_valid_code
from fastaseek.config import ConfigManager
from fastaseek.core.file_utils import open_binary
from fastaseek.exceptions import (
    FastaSeekError, InvalidRangeError, OpenError, OutOfBoundsError,
    QueryError, ReaderClosedError
)
from fastaseek.models import (
    PositioningStrategy, ReaderOptions, SeekLocation,
    SequenceLayout, SequenceQueryResult
)
from fastaseek.positioning import (
    NEWLINE, FixedWidthLocator, PositionLocator, ScanningLocator,
    check_uniform_width, detect_layout
)


class SequenceReader:
    """Positional retrieval from a single-record sequence file"""

    def __init__(self, path: Optional[Union[str, os.PathLike]] = None,
                 options: Optional[ReaderOptions] = None):
        """Create a reader, opening path if one is given

        Args:
            path: Sequence file to open (optional)
            options: Reader options, defaults to ReaderOptions()

        Raises:
            OpenError: If the file cannot be opened
            MalformedInputError: If the file holds no sequence line
        """
        self.logger = logging.getLogger("fastaseek.reader")
        self.options = options or ReaderOptions()
        self.path: Optional[str] = None
        self._stream: Optional[BinaryIO] = None
        self._layout: Optional[SequenceLayout] = None
        self._locator: Optional[PositionLocator] = None

        if path is not None:
            self.open(path)

    @classmethod
    def from_config(cls, path: Union[str, os.PathLike],
                    config_path: Optional[str] = None) -> 'SequenceReader':
        """Open path with options taken from a configuration file"""
        options = ConfigManager(config_path).get_reader_options()
        return cls(path, options)

    # Lifecycle

    def open(self, path: Union[str, os.PathLike]) -> 'SequenceReader':
        """Open a sequence file and establish the data boundary

        Any previously open file is closed first. On failure the new
        handle is released before the error propagates.

        Returns:
            self
        """
        self.close()

        stream = open_binary(path)
        try:
            layout = detect_layout(stream, self.options)
            locator = self._select_locator(stream, layout)
        except OSError as e:
            stream.close()
            error_msg = f"Error reading file {path}: {str(e)}"
            self.logger.error(error_msg)
            raise OpenError(error_msg, {'path': str(path)}) from e
        except FastaSeekError as e:
            stream.close()
            e.details.setdefault('path', str(path))
            self.logger.error(f"Failed to open {path}: {e.message}")
            raise

        self.path = os.fspath(path)
        self._stream = stream
        self._layout = layout
        self._locator = locator
        self.logger.debug(f"Opened {self.path} using {locator.name} positioning")
        return self

    def _select_locator(self, stream: BinaryIO, layout: SequenceLayout) -> PositionLocator:
        strategy = self.options.strategy

        if strategy == PositioningStrategy.FIXED:
            return FixedWidthLocator(layout)
        if strategy == PositioningStrategy.SCAN:
            return ScanningLocator(layout, self.options)

        mismatch = check_uniform_width(stream, layout, self.options)
        if mismatch:
            self.logger.info(f"Line widths are not uniform ({mismatch}), using scan positioning")
            return ScanningLocator(layout, self.options)
        return FixedWidthLocator(layout)

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if self._stream is not None:
            self._stream.close()
            self.logger.debug(f"Closed {self.path}")
        self._stream = None
        self._layout = None
        self._locator = None

    def __enter__(self) -> 'SequenceReader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = f"{self.strategy.value}" if self.is_open else "closed"
        return f"<SequenceReader path={self.path!r} {state}>"

    # Layout

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    @property
    def layout(self) -> SequenceLayout:
        self._require_open()
        return self._layout

    @property
    def data_start(self) -> int:
        return self.layout.data_start

    @property
    def line_width(self) -> int:
        return self.layout.line_width

    @property
    def terminator_length(self) -> int:
        return self.layout.terminator_length

    @property
    def header_lines(self) -> List[str]:
        return list(self.layout.header_lines)

    @property
    def header(self) -> str:
        """Header and comment lines joined with newlines"""
        return "\n".join(self.layout.header_lines)

    @property
    def strategy(self) -> PositioningStrategy:
        """Positioning strategy in effect after auto-detection"""
        self._require_open()
        return PositioningStrategy(self._locator.name)

    def _require_open(self) -> BinaryIO:
        if self._stream is None:
            raise ReaderClosedError("Reader has no open file")
        return self._stream

    # Queries

    def get_sequence(self, start: int, end: int, uppercase: bool = False) -> str:
        """Get the sequence from start to end, inclusive

        Positions are 1-based and count sequence characters only, so
        get_sequence(1, 2) returns two residues.

        Args:
            start: First position (>= 1)
            end: Last position (>= start)
            uppercase: Uppercase the returned residues

        Returns:
            String of exactly end - start + 1 characters

        Raises:
            InvalidRangeError: If start < 1 or start > end
            OutOfBoundsError: If end lies beyond the sequence
            ReaderClosedError: If the reader is not open
            QueryError: If the file cannot be read
        """
        self._validate_range(start, end)
        stream = self._require_open()

        try:
            location = self._locator.locate(stream, start)
            data = self._extract(stream, location, end - start + 1)
        except OSError as e:
            error_msg = f"Error reading {self.path}: {str(e)}"
            self.logger.error(error_msg)
            raise QueryError(error_msg, {'path': self.path, 'start': start, 'end': end}) from e
        except OutOfBoundsError as e:
            e.details.update({'start': start, 'end': end})
            self.logger.debug(f"Range {start}-{end} out of bounds in {self.path}: {e.message}")
            raise

        if uppercase:
            data = fold_upper(data)
        return data.decode('ascii')

    def try_get_sequence(self, start: int, end: int, uppercase: bool = False) -> SequenceQueryResult:
        """Get a sequence range as a result value instead of raising

        Returns:
            SequenceQueryResult with success, sequence and error set
        """
        try:
            return SequenceQueryResult.ok(start, end, self.get_sequence(start, end, uppercase))
        except FastaSeekError as e:
            return SequenceQueryResult.failed(start, end, e)

    @staticmethod
    def _validate_range(start: int, end: int) -> None:
        for name, value in (('start', start), ('end', end)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRangeError(f"{name} must be an integer, got {value!r}",
                                        {'start': start, 'end': end})
        if start < 1:
            raise InvalidRangeError(f"Start position {start} is below 1",
                                    {'start': start, 'end': end})
        if start > end:
            raise InvalidRangeError(f"Start position {start} is after end position {end}",
                                    {'start': start, 'end': end})

    def _extract(self, stream: BinaryIO, location: SeekLocation, count: int) -> bytes:
        """Read count sequence characters forward from location

        Non-sequence bytes are skipped. A comment line is skipped whole; a
        header line ends the record when stop_at_next_record is set.
        """
        header_byte = self.options.header_byte
        comment_byte = self.options.comment_byte
        stop_at_header = self.options.stop_at_next_record

        stream.seek(location.offset)
        result = bytearray()
        at_line_start = location.at_line_start
        skipping = False

        while len(result) < count:
            chunk = stream.read(self.options.chunk_size)
            if not chunk:
                raise OutOfBoundsError(
                    "End coordinate out of bounds",
                    {'requested': count, 'collected': len(result)}
                )

            for byte in chunk:
                if byte == NEWLINE:
                    at_line_start = True
                    skipping = False
                    continue

                if at_line_start:
                    at_line_start = False
                    if byte == header_byte and stop_at_header:
                        raise OutOfBoundsError(
                            "End coordinate out of bounds (next record reached)",
                            {'requested': count, 'collected': len(result)}
                        )
                    if byte == header_byte or byte == comment_byte:
                        skipping = True
                        continue

                if skipping or not is_valid_code(byte):
                    continue

                result.append(byte)
                if len(result) == count:
                    break

        return bytes(result)
