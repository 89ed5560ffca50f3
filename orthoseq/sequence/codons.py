"""
Structural checks on codons.

A codon must pass :func:`codon_precondition` before it is translated.
"""

from typing import Iterator

from orthoseq.sequence.encoding import (
    GAP,
    NUCLEOTIDE_CODES,
    is_ambiguous,
)

CODON_LENGTH = 3


def codon_precondition(codon: str) -> bool:
    """
    Check that ``codon`` is three recognized nucleotide symbols.

    Gaps and ambiguity codes are recognized symbols, so ``"A-G"`` and
    ``"NNN"`` pass; ``"AT"`` and ``"AXG"`` do not.
    """
    if len(codon) != CODON_LENGTH:
        return False
    return all(nuc.upper() in NUCLEOTIDE_CODES for nuc in codon)


def ambiguous_nucleotides(codon: str) -> bool:
    """True if the codon holds at least one ambiguity symbol (not a gap)."""
    return any(is_ambiguous(nuc) for nuc in codon)


def has_gap(codon: str) -> bool:
    return GAP in codon


def iter_codons(sequence: str) -> Iterator[str]:
    """
    Yield the in-frame codons of a sequence.

    A trailing partial codon is dropped.

    Example:
        >>> list(iter_codons("ATGAAAT"))
        ['ATG', 'AAA']
    """
    for i in range(0, len(sequence) - CODON_LENGTH + 1, CODON_LENGTH):
        yield sequence[i:i + CODON_LENGTH]
