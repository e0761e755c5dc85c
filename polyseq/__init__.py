"""
polyseq: Biological Sequence Analysis

This package provides tools for:
- Decoding DNA, RNA and protein strings into typed, immutable sequences
- Symbol counting, Hamming distance and exact motif search
- Column-wise profiles, consensus and longest shared motifs
- Complementation, GC content and transition/transversion ratios
- Transcription, reading frames and translation via the standard genetic code
- Protein monoisotopic mass

Column-wise counting is backed by NumPy.
"""

__version__ = "0.1.0"
__author__ = "polyseq Contributors"

from polyseq.alphabets import (
    DnaNucleotide,
    RnaNucleotide,
    AminoAcid,
    Codon,
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
)

from polyseq.sequence import (
    Polymer,
    NucleicAcid,
    Dna,
    Rna,
    Protein,
)

from polyseq.exceptions import (
    SequenceError,
    InvalidSymbolError,
    EmptyInputError,
    LengthMismatchError,
    DivisionByZeroError,
)

__all__ = [
    # Alphabets
    "DnaNucleotide",
    "RnaNucleotide",
    "AminoAcid",
    "Codon",
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
    # Sequences
    "Polymer",
    "NucleicAcid",
    "Dna",
    "Rna",
    "Protein",
    # Errors
    "SequenceError",
    "InvalidSymbolError",
    "EmptyInputError",
    "LengthMismatchError",
    "DivisionByZeroError",
]
