"""
Translation and comparison utilities for coding sequences.

This module provides:
- Codon translation under the universal genetic code
- Pairwise difference counting with gap/ambiguity handling
- Transition/transversion classification
"""

from orthoseq.utils.sequences import (
    universal,
    translate_codon,
    translate,
    CODON_TABLE,
    AMINO_ACID_NAMES,
    STOP_CODONS,
    STOP,
    UNDETERMINED,
)

from orthoseq.utils.comparisons import (
    different,
    num_diffs,
    ts_tv,
    ts_tv_bases,
    Mutation,
)

__all__ = [
    "universal",
    "translate_codon",
    "translate",
    "CODON_TABLE",
    "AMINO_ACID_NAMES",
    "STOP_CODONS",
    "STOP",
    "UNDETERMINED",
    "different",
    "num_diffs",
    "ts_tv",
    "ts_tv_bases",
    "Mutation",
]
