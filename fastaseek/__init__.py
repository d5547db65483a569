#!/usr/bin/env python3
"""
fastaseek - random-access reads from single-record FASTA files

Translates 1-based sequence coordinates into file offsets so that short
windows can be read from large sequence files without loading them.
"""

__version__ = '0.1.0'
__license__ = 'MIT'

from .exceptions import (
    FastaSeekError, ConfigurationError, OpenError, MalformedInputError,
    QueryError, InvalidRangeError, OutOfBoundsError, ReaderClosedError
)
from .models import PositioningStrategy, ReaderOptions, SequenceQueryResult
from .reader import SequenceReader

__all__ = [
    'SequenceReader', 'ReaderOptions', 'PositioningStrategy', 'SequenceQueryResult',
    'FastaSeekError', 'ConfigurationError', 'OpenError', 'MalformedInputError',
    'QueryError', 'InvalidRangeError', 'OutOfBoundsError', 'ReaderClosedError',
]
