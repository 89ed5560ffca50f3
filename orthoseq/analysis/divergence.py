"""
Codon-level divergence counts between aligned coding sequences.

Each codon column of a pair of sequences is classified as identical,
synonymous, nonsynonymous or undetermined, or excluded when either
codon holds a gap. Counts are accumulated into a PairwiseResult.
"""

import logging
from dataclasses import astuple, dataclass, fields
from enum import Enum
from typing import List, Tuple

import numpy as np

from orthoseq.errors import LengthMismatchError
from orthoseq.sequence.codons import (
    CODON_LENGTH,
    codon_precondition,
    has_gap,
    iter_codons,
)
from orthoseq.sequence.encoding import GAP_CODE, encode_sequence
from orthoseq.utils.comparisons import Mutation, num_diffs, ts_tv
from orthoseq.utils.sequences import UNDETERMINED, universal

logger = logging.getLogger(__name__)


class CodonClass(str, Enum):
    """Outcome of comparing two codons at the same column."""
    IDENTICAL = "identical"
    SYNONYMOUS = "synonymous"
    NONSYNONYMOUS = "nonsynonymous"
    UNDETERMINED = "undetermined"
    EXCLUDED = "excluded"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CodonComparison:
    classification: CodonClass
    differences: int = 0
    transitions: int = 0
    transversions: int = 0

    @property
    def compared(self) -> bool:
        return self.classification is not CodonClass.EXCLUDED


@dataclass(frozen=True)
class PairwiseResult:
    """
    Divergence counts for one pair of aligned sequences.

    Attributes:
        query: Identifier of the query sequence
        subject: Identifier of the partner sequence
        compared_codons: Codon columns without gaps on either side
        compared_sites: Nucleotide sites in the compared codons
        nucleotide_differences: Differing nucleotides, ambiguous positions
            not counted
        synonymous: Differing codons encoding the same amino acid
        nonsynonymous: Differing codons encoding different amino acids
        undetermined: Differing codons where either side is ambiguous
        transitions: Nucleotide differences that are transitions
        transversions: Nucleotide differences that are transversions
    """
    query: str
    subject: str
    compared_codons: int = 0
    compared_sites: int = 0
    nucleotide_differences: int = 0
    synonymous: int = 0
    nonsynonymous: int = 0
    undetermined: int = 0
    transitions: int = 0
    transversions: int = 0

    def to_row(self) -> Tuple:
        return astuple(self)


RESULT_COLUMNS = tuple(field.name for field in fields(PairwiseResult))

_EXCLUDED = CodonComparison(CodonClass.EXCLUDED)


def compare_codons(codon1: str, codon2: str) -> CodonComparison:
    """
    Classify the difference between two aligned codons.

    Codons that fail :func:`codon_precondition` or contain a gap are
    excluded. Otherwise identical codons are ``IDENTICAL``; differing
    codons are ``UNDETERMINED`` if either translates to ``X``, else
    ``SYNONYMOUS`` or ``NONSYNONYMOUS`` by amino acid. A stop codon
    counts as an amino acid.

    Example:
        >>> compare_codons("TTA", "TTG").classification
        <CodonClass.SYNONYMOUS: 'synonymous'>
    """
    if not (codon_precondition(codon1) and codon_precondition(codon2)):
        return _EXCLUDED
    if has_gap(codon1) or has_gap(codon2):
        return _EXCLUDED

    codes1 = encode_sequence(codon1)
    codes2 = encode_sequence(codon2)
    if np.array_equal(codes1, codes2):
        return CodonComparison(CodonClass.IDENTICAL)

    differences = num_diffs(codon1, codon2, skip_missing=True, nucleic_acid=True)
    mutations = [ts_tv(int(i), int(j)) for i, j in zip(codes1, codes2)]

    aa1 = universal(codon1)
    aa2 = universal(codon2)
    if aa1 == UNDETERMINED or aa2 == UNDETERMINED:
        classification = CodonClass.UNDETERMINED
    elif aa1 == aa2:
        classification = CodonClass.SYNONYMOUS
    else:
        classification = CodonClass.NONSYNONYMOUS

    return CodonComparison(
        classification,
        differences=differences,
        transitions=mutations.count(Mutation.TRANSITION),
        transversions=mutations.count(Mutation.TRANSVERSION),
    )


def _check_codon_alignment(seq1: str, seq2: str) -> None:
    if len(seq1) != len(seq2):
        raise LengthMismatchError(len(seq1), len(seq2))
    if len(seq1) % CODON_LENGTH:
        raise ValueError(
            f"Sequence length {len(seq1)} is not a multiple of {CODON_LENGTH}"
        )


def estimate_pair(
    query: str,
    seq1: str,
    subject: str,
    seq2: str
) -> PairwiseResult:
    """
    Count codon-level differences between two codon-aligned sequences.

    Args:
        query: Identifier of the first sequence
        seq1: First sequence
        subject: Identifier of the second sequence
        seq2: Second sequence, same length as ``seq1``

    Returns:
        PairwiseResult with counts over all non-excluded codon columns

    Raises:
        LengthMismatchError: if the sequences differ in length
        ValueError: if the length is not a multiple of 3
    """
    _check_codon_alignment(seq1, seq2)

    counts = {
        CodonClass.SYNONYMOUS: 0,
        CodonClass.NONSYNONYMOUS: 0,
        CodonClass.UNDETERMINED: 0,
    }
    compared = differences = transitions = transversions = 0

    for codon1, codon2 in zip(iter_codons(seq1), iter_codons(seq2)):
        comparison = compare_codons(codon1, codon2)
        if not comparison.compared:
            continue

        compared += 1
        differences += comparison.differences
        transitions += comparison.transitions
        transversions += comparison.transversions
        if comparison.classification in counts:
            counts[comparison.classification] += 1

    return PairwiseResult(
        query=query,
        subject=subject,
        compared_codons=compared,
        compared_sites=compared * CODON_LENGTH,
        nucleotide_differences=differences,
        synonymous=counts[CodonClass.SYNONYMOUS],
        nonsynonymous=counts[CodonClass.NONSYNONYMOUS],
        undetermined=counts[CodonClass.UNDETERMINED],
        transitions=transitions,
        transversions=transversions,
    )


def remove_gap_columns(sequences: List[str]) -> List[str]:
    """
    Drop every codon column that holds a gap in any sequence.

    Args:
        sequences: Codon-aligned sequences of equal length

    Returns:
        The sequences with gapped codon columns removed

    Example:
        >>> remove_gap_columns(["ATGAAA", "AT-AAG"])
        ['AAA', 'AAG']
    """
    if not sequences:
        return []

    for seq in sequences:
        _check_codon_alignment(sequences[0], seq)

    num_codons = len(sequences[0]) // CODON_LENGTH
    codes = np.stack([encode_sequence(seq) for seq in sequences])
    codes = codes.reshape(len(sequences), num_codons, CODON_LENGTH)
    keep = np.flatnonzero(~(codes == GAP_CODE).any(axis=(0, 2)))

    removed = num_codons - keep.size
    if removed:
        logger.debug(f"Removed {removed} of {num_codons} gapped codon columns")

    return [
        "".join(seq[k * CODON_LENGTH:(k + 1) * CODON_LENGTH] for k in keep)
        for seq in sequences
    ]
