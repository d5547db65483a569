#!/usr/bin/env python3
"""
Data models for the sequence reader.

Options controlling how a file is opened and positioned, the layout
established at open time, and the result value returned by non-raising
queries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional

from fastaseek.alphabet import is_valid_code
from fastaseek.exceptions import ConfigurationError, FastaSeekError


class PositioningStrategy(Enum):
    """How a logical position is translated into a byte offset"""
    FIXED = "fixed"    # Arithmetic seek, assumes uniform line width
    SCAN = "scan"      # Count valid characters from the data start
    AUTO = "auto"      # Check line widths at open, fall back to SCAN


@dataclass
class ReaderOptions:
    """Options for opening and querying a sequence file"""

    strategy: PositioningStrategy = PositioningStrategy.AUTO
    header_marker: str = ">"
    comment_marker: str = ";"
    width_check_lines: int = 1000  # 0 checks every line
    chunk_size: int = 65536
    stop_at_next_record: bool = True

    def __post_init__(self):
        if isinstance(self.strategy, str):
            try:
                self.strategy = PositioningStrategy(self.strategy.lower())
            except ValueError:
                raise ConfigurationError(
                    f"Unknown positioning strategy: {self.strategy}",
                    {'valid': [s.value for s in PositioningStrategy]}
                )
        self.validate()

    def validate(self) -> None:
        """Validate option values

        Raises:
            ConfigurationError: If any option is invalid
        """
        errors = []

        if not isinstance(self.strategy, PositioningStrategy):
            errors.append(f"strategy must be a PositioningStrategy, got {self.strategy!r}")

        for name in ('header_marker', 'comment_marker'):
            marker = getattr(self, name)
            if not isinstance(marker, str) or len(marker) != 1 or not marker.isascii():
                errors.append(f"{name} must be a single ASCII character")
            elif is_valid_code(ord(marker)) or marker.isspace():
                errors.append(f"{name} {marker!r} cannot be a sequence code or whitespace")

        if self.header_marker == self.comment_marker:
            errors.append("header_marker and comment_marker must differ")

        if isinstance(self.width_check_lines, bool) or not isinstance(self.width_check_lines, int) \
                or self.width_check_lines < 0:
            errors.append("width_check_lines must be a non-negative integer")

        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int) or self.chunk_size < 1:
            errors.append("chunk_size must be a positive integer")

        if errors:
            raise ConfigurationError(f"Invalid reader options: {'; '.join(errors)}",
                                     {'errors': errors})

    @property
    def header_byte(self) -> int:
        return ord(self.header_marker)

    @property
    def comment_byte(self) -> int:
        return ord(self.comment_marker)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'strategy': self.strategy.value,
            'header_marker': self.header_marker,
            'comment_marker': self.comment_marker,
            'width_check_lines': self.width_check_lines,
            'chunk_size': self.chunk_size,
            'stop_at_next_record': self.stop_at_next_record,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReaderOptions':
        """Create from dictionary, ignoring unknown keys"""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class SequenceLayout:
    """Where the sequence data begins and how it is wrapped"""
    data_start: int
    line_width: int
    terminator_length: int = 1
    header_lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SeekLocation:
    """Byte offset of a logical position

    at_line_start is True when the offset is the first byte of a physical line.
    """
    offset: int
    at_line_start: bool


@dataclass
class SequenceQueryResult:
    """Outcome of a range query that does not raise"""
    start: int
    end: int
    success: bool
    sequence: Optional[str] = None
    error: Optional[FastaSeekError] = None

    @property
    def error_type(self) -> Optional[str]:
        return self.error.__class__.__name__ if self.error else None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @classmethod
    def ok(cls, start: int, end: int, sequence: str) -> 'SequenceQueryResult':
        return cls(start=start, end=end, success=True, sequence=sequence)

    @classmethod
    def failed(cls, start: int, end: int, error: FastaSeekError) -> 'SequenceQueryResult':
        return cls(start=start, end=end, success=False, error=error)
