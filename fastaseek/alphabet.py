#!/usr/bin/env python3
"""
Sequence alphabet for the reader
Byte-level validity predicate and case folding for residue/nucleotide codes
"""
from typing import FrozenSet

from Bio.Data import IUPACData

# Extended IUPAC protein letters cover A-Z, which includes every nucleotide code
_LETTERS = IUPACData.extended_protein_letters.upper()

VALID_CODES: FrozenSet[int] = frozenset(
    (_LETTERS + _LETTERS.lower() + '*-').encode('ascii')
)

_VALID_TABLE = bytes(1 if b in VALID_CODES else 0 for b in range(256))
_INVALID_BYTES = bytes(b for b in range(256) if b not in VALID_CODES)

_UPPER_TABLE = bytes.maketrans(
    _LETTERS.lower().encode('ascii'),
    _LETTERS.encode('ascii')
)


def is_valid_code(byte: int) -> bool:
    """Check whether a byte value is a sequence character

    Args:
        byte: Byte value (0-255)

    Returns:
        True for residue/nucleotide letters (either case), '*' and '-'
    """
    return bool(_VALID_TABLE[byte])


def count_valid(data: bytes) -> int:
    """Count sequence characters in a block of bytes"""
    return len(data.translate(None, _INVALID_BYTES))


def fold_upper(data: bytes) -> bytes:
    """Uppercase residue letters, leaving every other byte unchanged"""
    return data.translate(_UPPER_TABLE)
