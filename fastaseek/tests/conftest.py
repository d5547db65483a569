#!/usr/bin/env python3
"""
Test configuration and fixtures for fastaseek tests

Provides temporary sequence files and reader factories shared by
the reader, positioning and configuration tests.
"""

import random
import pytest
from pathlib import Path

from fastaseek.models import PositioningStrategy, ReaderOptions

ALL_STRATEGIES = [PositioningStrategy.FIXED, PositioningStrategy.SCAN, PositioningStrategy.AUTO]

# Scenario file used throughout the reader tests (8 + 4 residues)
SIMPLE_FASTA = b">seq1\nACGTACGT\nACGT\n"


@pytest.fixture
def write_fasta(tmp_path):
    """Factory writing bytes to a uniquely named file under tmp_path"""
    counter = {'n': 0}

    def _write(content: bytes, name: str = None) -> Path:
        counter['n'] += 1
        path = tmp_path / (name or f"seq_{counter['n']}.fa")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def simple_fasta(write_fasta):
    return write_fasta(SIMPLE_FASTA, "simple.fa")


@pytest.fixture(params=ALL_STRATEGIES, ids=lambda s: s.value)
def strategy(request):
    """Every positioning strategy"""
    return request.param


@pytest.fixture
def options_for(strategy):
    """Factory for ReaderOptions using the parametrized strategy"""
    def _options(**kwargs) -> ReaderOptions:
        return ReaderOptions(strategy=strategy, **kwargs)
    return _options


@pytest.fixture(scope="session")
def random_sequence():
    """Deterministic mixed-case sequence with stop and gap symbols"""
    rng = random.Random(7)
    return "".join(rng.choice("ACGTNacgtnRYKM*-") for _ in range(250))
