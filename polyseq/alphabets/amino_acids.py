"""
Amino acid alphabet and residue masses.
"""

from enum import Enum
from typing import Dict

from polyseq.alphabets.base import Monomer


class AminoAcid(Monomer, Enum):
    """One of the 20 standard amino acid residues, keyed by one-letter code."""

    ALANINE = "A"
    CYSTEINE = "C"
    ASPARTIC_ACID = "D"
    GLUTAMIC_ACID = "E"
    PHENYLALANINE = "F"
    GLYCINE = "G"
    HISTIDINE = "H"
    ISOLEUCINE = "I"
    LYSINE = "K"
    LEUCINE = "L"
    METHIONINE = "M"
    ASPARAGINE = "N"
    PROLINE = "P"
    GLUTAMINE = "Q"
    ARGININE = "R"
    SERINE = "S"
    THREONINE = "T"
    VALINE = "V"
    TRYPTOPHAN = "W"
    TYROSINE = "Y"

    @property
    def mass(self) -> float:
        """Monoisotopic residue mass in daltons."""
        return MONOISOTOPIC_MASS[self]

    @property
    def is_start(self) -> bool:
        """Whether translation can begin with this residue."""
        return self is AminoAcid.METHIONINE


# Monoisotopic residue masses (Da)
MONOISOTOPIC_MASS: Dict[AminoAcid, float] = {
    AminoAcid.ALANINE: 71.03711,
    AminoAcid.CYSTEINE: 103.00919,
    AminoAcid.ASPARTIC_ACID: 115.02694,
    AminoAcid.GLUTAMIC_ACID: 129.04259,
    AminoAcid.PHENYLALANINE: 147.06841,
    AminoAcid.GLYCINE: 57.02146,
    AminoAcid.HISTIDINE: 137.05891,
    AminoAcid.ISOLEUCINE: 113.08406,
    AminoAcid.LYSINE: 128.09496,
    AminoAcid.LEUCINE: 113.08406,
    AminoAcid.METHIONINE: 131.04049,
    AminoAcid.ASPARAGINE: 114.04293,
    AminoAcid.PROLINE: 97.05276,
    AminoAcid.GLUTAMINE: 128.05858,
    AminoAcid.ARGININE: 156.10111,
    AminoAcid.SERINE: 87.03203,
    AminoAcid.THREONINE: 101.04768,
    AminoAcid.VALINE: 99.06841,
    AminoAcid.TRYPTOPHAN: 186.07931,
    AminoAcid.TYROSINE: 163.06333,
}
