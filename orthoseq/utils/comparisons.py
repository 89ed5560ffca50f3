"""
Pairwise comparison of aligned sequences.

Sequences are compared column by column; they must be of equal length.
"""

from enum import Enum

import numpy as np

from orthoseq.errors import LengthMismatchError
from orthoseq.sequence.encoding import (
    NUM_BASES,
    encode_sequence,
    int_to_nuc,
    nuc_to_int,
)

# Residues treated as missing data when comparing protein sequences
MISSING_RESIDUES = np.array(["X", "?", "-"])

PURINES = frozenset({nuc_to_int("A"), nuc_to_int("G")})
PYRIMIDINES = frozenset({nuc_to_int("C"), nuc_to_int("T")})


class Mutation(str, Enum):
    """Classification of a single nucleotide substitution."""
    TRANSITION = "Ts"
    TRANSVERSION = "Tv"
    NOT_APPLICABLE = "NA"

    def __str__(self) -> str:
        return self.value


def _residues(sequence: str) -> np.ndarray:
    # One residue per character; "ß".upper() is "SS"
    return np.array([c.upper()[:1] for c in sequence], dtype="U1")


def _difference_mask(
    seq1: str,
    seq2: str,
    skip_missing: bool,
    nucleic_acid: bool
) -> np.ndarray:
    """Boolean array marking the columns where two sequences differ."""
    if len(seq1) != len(seq2):
        raise LengthMismatchError(len(seq1), len(seq2))

    if nucleic_acid:
        codes1 = encode_sequence(seq1)
        codes2 = encode_sequence(seq2)
        mask = codes1 != codes2
        if skip_missing:
            # Gaps and ambiguity codes sort after the four bases
            mask &= (codes1 < NUM_BASES) & (codes2 < NUM_BASES)
        return mask

    residues1 = _residues(seq1)
    residues2 = _residues(seq2)
    mask = residues1 != residues2
    if skip_missing:
        mask &= ~np.isin(residues1, MISSING_RESIDUES)
        mask &= ~np.isin(residues2, MISSING_RESIDUES)
    return mask


def different(
    seq1: str,
    seq2: str,
    skip_missing: bool = False,
    nucleic_acid: bool = False
) -> bool:
    """
    Check whether two aligned sequences differ at any position.

    Comparison is case-insensitive.

    Args:
        seq1: First sequence
        seq2: Second sequence, same length as ``seq1``
        skip_missing: If True, positions with missing data on either side
            never count as a difference. Missing data is a gap or an
            ambiguity code for nucleotides, and ``X``, ``?`` or ``-`` for
            amino acids.
        nucleic_acid: If True, compare as nucleotides (every character
            must be a recognized nucleotide symbol); otherwise compare as
            amino acid residues

    Raises:
        LengthMismatchError: if the sequences differ in length
        InvalidSymbolError: for an unknown nucleotide when ``nucleic_acid``

    Example:
        >>> different("ACGT", "ACNT", skip_missing=True, nucleic_acid=True)
        False
    """
    return bool(_difference_mask(seq1, seq2, skip_missing, nucleic_acid).any())


def num_diffs(
    seq1: str,
    seq2: str,
    skip_missing: bool = False,
    nucleic_acid: bool = False
) -> int:
    """
    Count the positions where two aligned sequences differ.

    Takes the same flags as :func:`different`. Empty sequences, or
    sequences with no comparable positions, have 0 differences.

    Example:
        >>> num_diffs("ACGT", "ACGA")
        1
    """
    mask = _difference_mask(seq1, seq2, skip_missing, nucleic_acid)
    return int(np.count_nonzero(mask))


def ts_tv(i: int, j: int) -> Mutation:
    """
    Classify the substitution between two nucleotide codes.

    Args:
        i: Code of the first nucleotide (from :func:`nuc_to_int`)
        j: Code of the second nucleotide

    Returns:
        ``Mutation.TRANSITION`` within purines or within pyrimidines,
        ``Mutation.TRANSVERSION`` between them, and
        ``Mutation.NOT_APPLICABLE`` when the codes are equal or either one
        is a gap or an ambiguity code

    Raises:
        ValueError: if either value is not a nucleotide code
    """
    int_to_nuc(i)
    int_to_nuc(j)

    if i == j or i >= NUM_BASES or j >= NUM_BASES:
        return Mutation.NOT_APPLICABLE

    if (i in PURINES and j in PURINES) or (i in PYRIMIDINES and j in PYRIMIDINES):
        return Mutation.TRANSITION
    return Mutation.TRANSVERSION


def ts_tv_bases(a: str, b: str) -> Mutation:
    """Character form of :func:`ts_tv`."""
    return ts_tv(nuc_to_int(a), nuc_to_int(b))

