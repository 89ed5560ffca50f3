"""
orthoseq: Divergence counts for aligned coding sequences

This package provides tools for:
- Nucleotide encoding with gap and IUPAC ambiguity handling
- Codon validation and universal genetic code translation
- Pairwise difference counting and transition/transversion classification
- Synonymous/nonsynonymous classification of codon differences
- The gestimator pipeline: alignment file in, pairwise table out

Built on top of NumPy for column-wise sequence comparison.
"""

__version__ = "0.1.0"
__author__ = "orthoseq Contributors"

from orthoseq.sequence import (
    nuc_to_int,
    int_to_nuc,
    not_a_gap,
    codon_precondition,
    ambiguous_nucleotides,
)

from orthoseq.utils import (
    universal,
    translate_codon,
    translate,
    different,
    num_diffs,
    ts_tv,
    Mutation,
)

from orthoseq.analysis import (
    compare_codons,
    estimate_pair,
    gestimator,
    GEstimator,
    PairwiseResult,
)

from orthoseq.io import (
    read_fasta,
    load_alignment,
    FastaRecord,
)

from orthoseq.errors import (
    OrthoseqError,
    InvalidSymbolError,
    MalformedCodonError,
    LengthMismatchError,
    FileError,
    FormatError,
)

__all__ = [
    # Nucleotides and codons
    "nuc_to_int",
    "int_to_nuc",
    "not_a_gap",
    "codon_precondition",
    "ambiguous_nucleotides",
    # Translation and comparison
    "universal",
    "translate_codon",
    "translate",
    "different",
    "num_diffs",
    "ts_tv",
    "Mutation",
    # Divergence
    "compare_codons",
    "estimate_pair",
    "gestimator",
    "GEstimator",
    "PairwiseResult",
    # I/O
    "read_fasta",
    "load_alignment",
    "FastaRecord",
    # Errors
    "OrthoseqError",
    "InvalidSymbolError",
    "MalformedCodonError",
    "LengthMismatchError",
    "FileError",
    "FormatError",
]
