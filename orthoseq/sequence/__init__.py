"""
Nucleotide and codon handling for aligned coding sequences.

This module provides functions for:
- Encoding nucleotides as integer codes (and back)
- Gap and ambiguity detection
- Codon validation
"""

from orthoseq.sequence.encoding import (
    nuc_to_int,
    int_to_nuc,
    not_a_gap,
    is_ambiguous,
    encode_sequence,
    decode_sequence,
    NUCLEOTIDES,
    NUCLEOTIDE_CODES,
    IUPAC_DNA,
    GAP,
)

from orthoseq.sequence.codons import (
    codon_precondition,
    ambiguous_nucleotides,
    has_gap,
    iter_codons,
)

__all__ = [
    "nuc_to_int",
    "int_to_nuc",
    "not_a_gap",
    "is_ambiguous",
    "encode_sequence",
    "decode_sequence",
    "NUCLEOTIDES",
    "NUCLEOTIDE_CODES",
    "IUPAC_DNA",
    "GAP",
    "codon_precondition",
    "ambiguous_nucleotides",
    "has_gap",
    "iter_codons",
]
