"""Shared test fixtures for polyseq tests."""

import pytest

from polyseq import Dna


@pytest.fixture
def dna_alphabet():
    """Canonical DNA letters."""
    return "ACGT"


@pytest.fixture
def rna_alphabet():
    """Canonical RNA letters."""
    return "ACGU"


@pytest.fixture
def protein_alphabet():
    """Standard protein alphabet."""
    return "ACDEFGHIKLMNPQRSTVWY"


@pytest.fixture
def aligned_dnas():
    """Seven equal-length DNA sequences for profile and consensus."""
    return [
        Dna.from_string(symbols)
        for symbols in [
            "ATCCAGCT",
            "GGGCAACT",
            "ATGGATCT",
            "AAGCAACC",
            "TTGGAACT",
            "ATGCCATT",
            "ATGGCACT",
        ]
    ]
