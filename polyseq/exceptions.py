"""
Exceptions raised by polyseq.

All errors derive from SequenceError, which is a ValueError, so callers
that already guard sequence parsing with ``except ValueError`` keep working.
"""

from typing import Optional


class SequenceError(ValueError):
    """Base class for all polyseq errors."""


class InvalidSymbolError(SequenceError):
    """
    A character that is not part of the target alphabet.

    Attributes:
        symbol: The offending character
        alphabet: Name of the alphabet it was decoded against
        position: 0-based position in the input string, if known
    """

    def __init__(self, symbol: str, alphabet: str, position: Optional[int] = None):
        self.symbol = symbol
        self.alphabet = alphabet
        self.position = position
        msg = f"Invalid {alphabet} symbol {symbol!r}"
        if position is not None:
            msg += f" at position {position}"
        super().__init__(msg)


class EmptyInputError(SequenceError):
    """An empty symbol string or an empty batch of sequences."""


class LengthMismatchError(SequenceError):
    """
    Sequences in a column-wise batch operation differ in length.

    Attributes:
        expected: Length of the first sequence
        actual: Length of the offending sequence
        index: Index of the offending sequence in the batch
    """

    def __init__(self, expected: int, actual: int, index: int):
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            f"Sequence {index} has length {actual}, expected {expected}"
        )


class DivisionByZeroError(SequenceError, ZeroDivisionError):
    """A ratio was requested whose denominator is zero."""
