"""
DNA and RNA sequences.

Adds the operations that only make sense over nucleotides:
complementation, GC content, transition/transversion ratio,
transcription, and translation of RNA into candidate proteins.
"""

import math
from typing import Iterator, List, TypeVar

from polyseq.alphabets.codons import Codon
from polyseq.alphabets.nucleotides import DnaNucleotide, RnaNucleotide
from polyseq.exceptions import DivisionByZeroError
from polyseq.sequence.polymer import Polymer
from polyseq.sequence.protein import Protein
from polyseq.utils.logging import get_logger

logger = get_logger("translation")

N = TypeVar("N", DnaNucleotide, RnaNucleotide)

ZERO_DIVISION_POLICIES = ("raise", "nan", "inf")


class NucleicAcid(Polymer[N]):
    """A sequence of DNA or RNA nucleotides."""

    __slots__ = ()

    def gc_content(self) -> float:
        """
        Percentage of G and C nucleotides.

        Returns:
            GC content between 0 and 100, unrounded

        Example:
            >>> Dna.from_string("ACGT").gc_content()
            50.0
        """
        gc_count = sum(1 for nucleotide in self if nucleotide.is_gc)
        return gc_count * 100.0 / len(self)

    def complement(self):
        """Complement each nucleotide, keeping the order."""
        return type(self)(nucleotide.complement() for nucleotide in self)

    def reverse_complement(self):
        """
        Reverse complement of this sequence.

        Example:
            >>> Dna.from_string("AAAACCCGGT").reverse_complement()
            Dna('ACCGGGTTTT')
        """
        return type(self)(nucleotide.complement() for nucleotide in reversed(self._monomers))

    def transition_transversion_ratio(self, other: "NucleicAcid", on_zero: str = "raise") -> float:
        """
        Ratio of transitions to transversions between two sequences.

        Positions are paired as in ``hamming_distance``. A substitution
        within purines or within pyrimidines is a transition; one that
        crosses classes is a transversion.

        Args:
            other: Sequence over the same alphabet
            on_zero: What to do when there are no transversions:
                - "raise": Raise DivisionByZeroError (default)
                - "nan": Return NaN
                - "inf": Return infinity, or NaN if there are no
                  transitions either

        Returns:
            transitions / transversions
        """
        if on_zero not in ZERO_DIVISION_POLICIES:
            raise ValueError(f"Invalid on_zero mode: {on_zero}")
        self._check_compatible(other)

        transitions = 0
        transversions = 0
        for a, b in zip(self, other):
            if a == b:
                continue
            if a.is_purine == b.is_purine:
                transitions += 1
            else:
                transversions += 1

        if transversions == 0:
            if on_zero == "raise":
                raise DivisionByZeroError(
                    f"No transversions between sequences ({transitions} transitions)"
                )
            if on_zero == "inf" and transitions:
                return math.inf
            return math.nan

        return transitions / transversions


class Dna(NucleicAcid[DnaNucleotide]):
    """A DNA sequence."""

    alphabet = DnaNucleotide

    __slots__ = ()

    def transcribe(self) -> "Rna":
        """
        Transcribe into RNA, replacing thymine with uracil.

        Example:
            >>> Dna.from_string("GATTACA").transcribe()
            Rna('GAUUACA')
        """
        return Rna(nucleotide.transcribe() for nucleotide in self)


class Rna(NucleicAcid[RnaNucleotide]):
    """An RNA sequence."""

    alphabet = RnaNucleotide

    __slots__ = ()

    def untranscribe(self) -> Dna:
        """Inverse of ``Dna.transcribe``."""
        return Dna(nucleotide.untranscribe() for nucleotide in self)

    def codons(self) -> Iterator[Codon]:
        """Non-overlapping codons from the start; a trailing partial codon is dropped."""
        monomers = self._monomers
        for i in range(0, len(monomers) - 2, 3):
            yield Codon(*monomers[i:i + 3])

    def translate(self) -> List[Protein]:
        """
        Translate into every protein that runs from a start to a stop codon.

        Codons are read in a single frame from the start of the sequence.
        Each start codon opens a new candidate while earlier candidates
        stay open, and every open candidate receives each residue read.
        A stop codon closes all open candidates at once. Candidates still
        open when the sequence ends are discarded.

        Returns:
            Proteins in the order they were closed, then opened;
            duplicates are kept

        Example:
            >>> rna = Rna.from_string("AUGGCCAUGGCGUAA")
            >>> [str(p) for p in rna.translate()]
            ['MAMA', 'MA']
        """
        candidates: List[list] = []
        proteins: List[Protein] = []

        for codon in self.codons():
            residue = codon.amino_acid()
            if residue is None:
                if candidates:
                    logger.debug("Stop codon %s closes %d candidates", codon, len(candidates))
                proteins.extend(Protein(candidate) for candidate in candidates)
                candidates = []
                continue

            if residue.is_start:
                candidates.append([])
            for candidate in candidates:
                candidate.append(residue)

        if candidates:
            logger.debug("Discarding %d unterminated candidates", len(candidates))
        return proteins

    def reading_frames(self) -> List["Rna"]:
        """
        Codon-aligned frames at offsets 0, 1 and 2.

        Each frame skips ``offset`` nucleotides and keeps the longest
        prefix whose length is a multiple of three. Offsets that leave
        no complete codon produce no frame.

        Example:
            >>> [len(f) for f in Rna.from_string("AGGUGACACCGCAAGCCUUAUAUUAGCA").reading_frames()]
            [27, 27, 24]
        """
        frames = []
        for offset in range(3):
            usable = (len(self) - offset) // 3 * 3
            if usable > 0:
                frames.append(Rna(self._monomers[offset:offset + usable]))
        return frames
