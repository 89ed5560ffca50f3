"""
Exception types raised by orthoseq.

Symbol, codon and length errors are local conditions the caller may skip
over; file and format errors abort a gestimator run.
"""


class OrthoseqError(Exception):
    """Base class for all orthoseq errors."""


class InvalidSymbolError(OrthoseqError, ValueError):
    """A character outside the recognized nucleotide alphabet."""

    def __init__(self, symbol: str, position: int = None):
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Invalid nucleotide symbol {symbol!r}"
        else:
            message = f"Invalid nucleotide symbol {symbol!r} at position {position}"
        super().__init__(message)


class MalformedCodonError(OrthoseqError, ValueError):
    """A codon that is not three recognized nucleotide symbols."""

    def __init__(self, codon: str):
        self.codon = codon
        super().__init__(f"Malformed codon {codon!r}")


class LengthMismatchError(OrthoseqError, ValueError):
    """Two sequences of unequal length passed to a comparison."""

    def __init__(self, length1: int, length2: int):
        self.length1 = length1
        self.length2 = length2
        super().__init__(
            f"Sequences must be of equal length ({length1} != {length2})"
        )


class FileError(OrthoseqError, OSError):
    """An input could not be read or an output could not be created."""


class FormatError(OrthoseqError, ValueError):
    """An alignment file that is structurally invalid."""
