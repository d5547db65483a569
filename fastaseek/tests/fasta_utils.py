#!/usr/bin/env python3
"""
Helpers for building FASTA test content
"""


def wrap(sequence: str, width: int, header: str = ">chr1 test record", newline: str = "\n") -> bytes:
    """Lay a sequence out as a FASTA record wrapped at width"""
    lines = [header] if header else []
    lines.extend(sequence[i:i + width] for i in range(0, len(sequence), width))
    return (newline.join(lines) + newline).encode('ascii')
