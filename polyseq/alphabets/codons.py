"""
Codons and the standard genetic code.

A codon is indexed as a three-digit base-4 number over RNA ordinals
(A=0, C=1, G=2, U=3), so AAA is 0 and UUU is 63. GENETIC_CODE is a
64-entry tuple in that order; ``None`` marks a stop codon.
"""

from itertools import product
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from polyseq.alphabets.amino_acids import AminoAcid
from polyseq.alphabets.nucleotides import RnaNucleotide
from polyseq.exceptions import InvalidSymbolError

STOP_SYMBOL = "*"

# Standard code, one residue per codon in AAA, AAC, AAG, AAU, ACA, ... order
_STANDARD_CODE = (
    "KNKNTTTTRSRSIIMI"
    "QHQHPPPPRRRRLLLL"
    "EDEDAAAAGGGGVVVV"
    "*Y*YSSSS*CWCLFLF"
)

GENETIC_CODE = tuple(
    None if residue == STOP_SYMBOL else AminoAcid(residue)
    for residue in _STANDARD_CODE
)


class Codon(NamedTuple):
    """An ordered triple of RNA nucleotides."""

    first: RnaNucleotide
    second: RnaNucleotide
    third: RnaNucleotide

    @classmethod
    def from_string(cls, symbols: str) -> "Codon":
        """
        Decode a three-letter RNA string.

        Example:
            >>> Codon.from_string("AUG").amino_acid()
            <AminoAcid.METHIONINE: 'M'>
        """
        if len(symbols) != 3:
            raise InvalidSymbolError(symbols, "Codon")
        return cls(*(RnaNucleotide.decode(symbol) for symbol in symbols))

    @property
    def table_index(self) -> int:
        return 16 * self.first.ordinal + 4 * self.second.ordinal + self.third.ordinal

    def amino_acid(self) -> Optional[AminoAcid]:
        """Residue this codon encodes, or None for a stop codon."""
        return GENETIC_CODE[self.table_index]

    @property
    def is_stop(self) -> bool:
        return self.amino_acid() is None

    def __str__(self) -> str:
        return "".join(nucleotide.symbol for nucleotide in self)


def _codon_strings():
    alphabet = "".join(nucleotide.symbol for nucleotide in RnaNucleotide)
    return ["".join(triple) for triple in product(alphabet, repeat=3)]


CODON_TABLE: Mapping[str, Optional[AminoAcid]] = MappingProxyType(
    dict(zip(_codon_strings(), GENETIC_CODE))
)

START_CODONS = frozenset(
    codon for codon, residue in CODON_TABLE.items()
    if residue is not None and residue.is_start
)
STOP_CODONS = frozenset(
    codon for codon, residue in CODON_TABLE.items() if residue is None
)
