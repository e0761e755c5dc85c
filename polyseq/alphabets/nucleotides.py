"""
DNA and RNA nucleotide alphabets.

Both alphabets declare their members in the order A, C, G, then T or U.
That order is the tie-break order used by consensus and the digit order
used to index the genetic code.
"""

from enum import Enum

from polyseq.alphabets.base import Nucleotide


class DnaNucleotide(Nucleotide, Enum):
    """A deoxyribonucleotide."""

    ADENINE = "A"
    CYTOSINE = "C"
    GUANINE = "G"
    THYMINE = "T"

    def complement(self) -> "DnaNucleotide":
        """
        Watson-Crick partner of this nucleotide.

        Example:
            >>> DnaNucleotide.ADENINE.complement()
            <DnaNucleotide.THYMINE: 'T'>
        """
        return _DNA_COMPLEMENT[self]

    def transcribe(self) -> "RnaNucleotide":
        """Map to the RNA nucleotide with the same base (T becomes U)."""
        return _TRANSCRIPTION[self]


class RnaNucleotide(Nucleotide, Enum):
    """A ribonucleotide."""

    ADENINE = "A"
    CYTOSINE = "C"
    GUANINE = "G"
    URACIL = "U"

    def complement(self) -> "RnaNucleotide":
        return _RNA_COMPLEMENT[self]

    def untranscribe(self) -> DnaNucleotide:
        """Inverse of DnaNucleotide.transcribe (U becomes T)."""
        return _REVERSE_TRANSCRIPTION[self]


_DNA_COMPLEMENT = {
    DnaNucleotide.ADENINE: DnaNucleotide.THYMINE,
    DnaNucleotide.CYTOSINE: DnaNucleotide.GUANINE,
    DnaNucleotide.GUANINE: DnaNucleotide.CYTOSINE,
    DnaNucleotide.THYMINE: DnaNucleotide.ADENINE,
}

_RNA_COMPLEMENT = {
    RnaNucleotide.ADENINE: RnaNucleotide.URACIL,
    RnaNucleotide.CYTOSINE: RnaNucleotide.GUANINE,
    RnaNucleotide.GUANINE: RnaNucleotide.CYTOSINE,
    RnaNucleotide.URACIL: RnaNucleotide.ADENINE,
}

# Members are declared in matching order, so transcription is positional
_TRANSCRIPTION = dict(zip(DnaNucleotide, RnaNucleotide))
_REVERSE_TRANSCRIPTION = {rna: dna for dna, rna in _TRANSCRIPTION.items()}
