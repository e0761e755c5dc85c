"""
Generic sequence container and alphabet-agnostic algorithms.

A Polymer is an immutable, non-empty run of monomers drawn from a single
alphabet. Subclasses bind the alphabet (Dna, Rna, Protein); the base class
accepts any one alphabet, inferred from its first monomer.
"""

from collections import Counter
from functools import total_ordering
from typing import (
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Type,
    TypeVar,
)

import numpy as np

from polyseq.exceptions import (
    EmptyInputError,
    InvalidSymbolError,
    LengthMismatchError,
)
from polyseq.utils.logging import get_logger

logger = get_logger("sequence")

M = TypeVar("M")
P = TypeVar("P", bound="Polymer")


@total_ordering
class Polymer(Generic[M]):
    """
    An ordered, immutable, non-empty sequence of monomers.

    Args:
        monomers: Members of a single alphabet

    Raises:
        EmptyInputError: If no monomers are given
        TypeError: If the monomers are not all from the same alphabet
    """

    alphabet: Optional[Type[M]] = None

    __slots__ = ("_monomers",)

    def __init__(self, monomers: Iterable[M]):
        monomers = tuple(monomers)
        if not monomers:
            raise EmptyInputError(f"{type(self).__name__} cannot be empty")

        alphabet = self.alphabet or type(monomers[0])
        for monomer in monomers:
            if not isinstance(monomer, alphabet):
                raise TypeError(
                    f"{type(self).__name__} expects {alphabet.__name__} "
                    f"monomers, got {monomer!r}"
                )
        self._monomers = monomers

    @classmethod
    def from_string(
        cls: Type[P],
        symbols: str,
        decoder: Optional[Callable[[str], M]] = None
    ) -> P:
        """
        Decode a string of one-letter symbols into a sequence.

        Args:
            symbols: Symbol string, e.g. "ACGT"
            decoder: Single-character decoder. Defaults to the
                alphabet's own ``decode``.

        Returns:
            A new sequence

        Raises:
            EmptyInputError: If ``symbols`` is empty
            InvalidSymbolError: On the first character outside the alphabet

        Example:
            >>> Dna.from_string("GATTACA")
            Dna('GATTACA')
        """
        if not symbols:
            raise EmptyInputError(f"{cls.__name__} cannot be empty")
        if decoder is None:
            if cls.alphabet is None:
                raise TypeError(f"{cls.__name__} needs an explicit decoder")
            decoder = cls.alphabet.decode

        monomers = []
        for position, symbol in enumerate(symbols):
            try:
                monomer = decoder(symbol)
            except InvalidSymbolError as exc:
                raise InvalidSymbolError(symbol, exc.alphabet, position) from None
            # Decoders may also signal an unknown symbol by returning None
            if monomer is None:
                raise InvalidSymbolError(symbol, cls.__name__, position)
            monomers.append(monomer)
        return cls(monomers)

    # -- container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._monomers)

    def __iter__(self) -> Iterator[M]:
        return iter(self._monomers)

    def __getitem__(self, index):
        """A monomer for an integer index; a sequence of the same type for a slice."""
        if isinstance(index, slice):
            # Raises EmptyInputError for an empty slice
            return type(self)(self._monomers[index])
        return self._monomers[index]

    def __str__(self) -> str:
        return "".join(monomer.symbol for monomer in self._monomers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._monomers == other._monomers

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._monomers))

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._monomers < other._monomers

    def _check_compatible(self, other: "Polymer") -> None:
        if type(other) is not type(self) or type(other[0]) is not type(self[0]):
            raise TypeError(f"Cannot compare {self!r} with {other!r}")

    # -- single-sequence algorithms ------------------------------------------

    def symbol_counts(self) -> Dict[M, int]:
        """
        Count each distinct monomer.

        Monomers that do not occur are absent from the result.

        Example:
            >>> Dna.from_string("AAGC").symbol_counts()[DnaNucleotide.ADENINE]
            2
        """
        return dict(Counter(self._monomers))

    def hamming_distance(self, other: "Polymer") -> int:
        """
        Count positions at which two sequences differ.

        Only the overlapping prefix is compared; when the lengths differ,
        the tail of the longer sequence is ignored.

        Args:
            other: Sequence over the same alphabet

        Returns:
            Number of mismatched positions

        Example:
            >>> Dna.from_string("ACGT").hamming_distance(Dna.from_string("ACGA"))
            1
        """
        self._check_compatible(other)
        return sum(a != b for a, b in zip(self._monomers, other._monomers))

    def motif_locations(self, motif: "Polymer") -> List[int]:
        """
        Find every occurrence of a motif, overlapping ones included.

        Args:
            motif: Sequence to search for

        Returns:
            1-based start positions in ascending order; empty if the
            motif is longer than this sequence or does not occur

        Example:
            >>> Dna.from_string("GATATATGCATATACTT").motif_locations(
            ...     Dna.from_string("ATAT"))
            [2, 4, 10]
        """
        self._check_compatible(motif)
        # One character per monomer, so string positions are monomer positions
        sequence = str(self)
        pattern = str(motif)

        positions = []
        start = sequence.find(pattern)
        while start != -1:
            positions.append(start + 1)
            start = sequence.find(pattern, start + 1)
        return positions

    # -- batch algorithms ----------------------------------------------------

    @classmethod
    def _check_batch(cls, sequences: Sequence["Polymer"]) -> None:
        if not sequences:
            raise EmptyInputError("At least one sequence is required")
        first = sequences[0]
        for sequence in sequences:
            first._check_compatible(sequence)
            if cls.alphabet is not None and not isinstance(sequence, cls):
                raise TypeError(
                    f"{cls.__name__} batch got a {type(sequence).__name__}"
                )

    @classmethod
    def profile_matrix(cls, sequences: Sequence["Polymer"]) -> np.ndarray:
        """
        Column-wise symbol counts as an integer matrix.

        Args:
            sequences: Equal-length sequences over one alphabet

        Returns:
            Array of shape (alphabet size, length); row ``i`` counts the
            alphabet member with ordinal ``i``

        Raises:
            EmptyInputError: If no sequences are given
            LengthMismatchError: If any length differs from the first
        """
        cls._check_batch(sequences)

        length = len(sequences[0])
        for i, sequence in enumerate(sequences):
            if len(sequence) != length:
                raise LengthMismatchError(length, len(sequence), i)

        alphabet = type(sequences[0][0])
        ordinals = np.array(
            [[monomer.ordinal for monomer in sequence] for sequence in sequences],
            dtype=np.int64,
        )
        counts = np.zeros((len(alphabet), length), dtype=np.int64)
        for row in range(len(alphabet)):
            counts[row] = (ordinals == row).sum(axis=0)

        logger.debug("Profiled %d sequences of length %d", len(sequences), length)
        return counts

    @classmethod
    def profile(cls, sequences: Sequence["Polymer"]) -> Dict[M, List[int]]:
        """
        Per-column symbol counts for a set of equal-length sequences.

        Args:
            sequences: Equal-length sequences over one alphabet

        Returns:
            Mapping from monomer to its count in each column. Keys follow
            alphabet order; monomers that never occur are absent.

        Example:
            >>> profile = Dna.profile([Dna.from_string("AC"), Dna.from_string("AG")])
            >>> profile[DnaNucleotide.ADENINE]
            [2, 0]
        """
        counts = cls.profile_matrix(sequences)
        alphabet = type(sequences[0][0])
        return {
            monomer: counts[monomer.ordinal].tolist()
            for monomer in alphabet
            if counts[monomer.ordinal].any()
        }

    @classmethod
    def consensus(cls: Type[P], sequences: Sequence["Polymer"]) -> P:
        """
        Most frequent monomer in each column.

        Ties go to the monomer declared first in the alphabet, so the
        result does not depend on input order.

        Args:
            sequences: Equal-length sequences over one alphabet

        Returns:
            Consensus sequence of the same type as the inputs
        """
        counts = cls.profile_matrix(sequences)
        alphabet = list(type(sequences[0][0]))
        # argmax returns the first maximum, i.e. the lowest ordinal
        winners = counts.argmax(axis=0)
        return type(sequences[0])(alphabet[i] for i in winners.tolist())

    @classmethod
    def shared_motif(cls: Type[P], sequences: Sequence["Polymer"]) -> Optional[P]:
        """
        Longest contiguous run shared by every sequence.

        Candidates are windows of the shortest sequence (the first one if
        several tie), tried from the longest length down and left to
        right within each length. The first window found in all other
        sequences wins.

        Args:
            sequences: Sequences over one alphabet

        Returns:
            The shared motif, or None if no monomer occurs in all of them

        Example:
            >>> Dna.shared_motif([Dna.from_string("ACGTACGT"),
            ...                   Dna.from_string("AACCGTATA")])
            Dna('CGTA')
        """
        cls._check_batch(sequences)

        shortest_index, shortest = min(enumerate(sequences), key=lambda e: len(e[1]))
        others = [str(s) for i, s in enumerate(sequences) if i != shortest_index]
        source = str(shortest)
        logger.debug(
            "Searching %d sequences for a shared motif of at most %d symbols",
            len(sequences), len(source),
        )

        for size in range(len(source), 0, -1):
            for start in range(len(source) - size + 1):
                window = source[start:start + size]
                if all(window in other for other in others):
                    return type(shortest)(shortest._monomers[start:start + size])
        return None
