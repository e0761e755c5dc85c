"""
Capability mixins shared by the symbol alphabets.

The alphabets themselves are flat ``Enum`` types whose values are their
one-letter codes. These mixins carry behaviour only, never member state.
"""

from functools import lru_cache, total_ordering
from typing import Dict, Type

from polyseq.exceptions import InvalidSymbolError

PURINES = frozenset("AG")
GC_SYMBOLS = frozenset("GC")


@lru_cache(maxsize=None)
def _ordinals(alphabet: Type) -> Dict:
    return {member: i for i, member in enumerate(alphabet)}


@total_ordering
class Monomer:
    """Decoding, rendering and ordering for every alphabet."""

    @classmethod
    def decode(cls, symbol: str):
        """
        Decode a single character into a member of this alphabet.

        Decoding is case-sensitive: only the canonical uppercase letter
        is accepted.

        Args:
            symbol: One character

        Returns:
            The alphabet member

        Raises:
            InvalidSymbolError: If the character is not in the alphabet

        Example:
            >>> DnaNucleotide.decode("G")
            <DnaNucleotide.GUANINE: 'G'>
        """
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidSymbolError(symbol, cls.__name__) from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        """Position of this member in declaration order."""
        return _ordinals(type(self))[self]

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal < other.ordinal


class Nucleotide(Monomer):
    """Complement and base-class predicates shared by DNA and RNA."""

    def complement(self):
        raise NotImplementedError

    @property
    def is_gc(self) -> bool:
        return self.value in GC_SYMBOLS

    @property
    def is_purine(self) -> bool:
        return self.value in PURINES

    @property
    def is_pyrimidine(self) -> bool:
        return not self.is_purine
