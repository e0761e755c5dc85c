"""Protein sequences."""

from polyseq.alphabets.amino_acids import AminoAcid
from polyseq.sequence.polymer import Polymer


class Protein(Polymer[AminoAcid]):
    """A sequence of amino acid residues."""

    alphabet = AminoAcid

    __slots__ = ()

    def mass(self) -> float:
        """
        Total monoisotopic mass of the residues, in daltons.

        Example:
            >>> round(Protein.from_string("SKADYEK").mass(), 3)
            821.392
        """
        return sum(residue.mass for residue in self)
