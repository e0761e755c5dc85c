"""
Symbol alphabets for biological sequences.

This module provides:
- DNA and RNA nucleotides with complement and base-class predicates
- The 20 standard amino acids with monoisotopic masses
- Codons and the standard genetic code
"""

from polyseq.alphabets.base import Monomer, Nucleotide
from polyseq.alphabets.nucleotides import DnaNucleotide, RnaNucleotide
from polyseq.alphabets.amino_acids import AminoAcid, MONOISOTOPIC_MASS
from polyseq.alphabets.codons import (
    Codon,
    GENETIC_CODE,
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
)

__all__ = [
    "Monomer",
    "Nucleotide",
    "DnaNucleotide",
    "RnaNucleotide",
    "AminoAcid",
    "MONOISOTOPIC_MASS",
    "Codon",
    "GENETIC_CODE",
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
]
