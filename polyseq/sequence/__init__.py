"""
Sequence containers for biological polymers.

This module provides:
- Polymer: the generic container with counting, distance, motif,
  profile, consensus and shared-motif algorithms
- Dna and Rna: nucleotide sequences with complement, GC content,
  transcription and translation
- Protein: amino acid sequences with residue mass
"""

from polyseq.sequence.polymer import Polymer
from polyseq.sequence.protein import Protein
from polyseq.sequence.nucleic import (
    NucleicAcid,
    Dna,
    Rna,
    ZERO_DIVISION_POLICIES,
)

__all__ = [
    "Polymer",
    "NucleicAcid",
    "Dna",
    "Rna",
    "Protein",
    "ZERO_DIVISION_POLICIES",
]
