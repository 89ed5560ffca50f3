"""
Pairwise divergence estimation for codon alignments.

This module provides:
- Codon-level classification of differences (synonymous/nonsynonymous)
- Per-pair divergence counts
- The gestimator pipeline over an alignment file
"""

from orthoseq.analysis.divergence import (
    compare_codons,
    estimate_pair,
    remove_gap_columns,
    CodonClass,
    CodonComparison,
    PairwiseResult,
    RESULT_COLUMNS,
)

from orthoseq.analysis.gestimator import (
    gestimator,
    GEstimator,
    PipelineState,
    default_output_path,
)

__all__ = [
    "compare_codons",
    "estimate_pair",
    "remove_gap_columns",
    "CodonClass",
    "CodonComparison",
    "PairwiseResult",
    "RESULT_COLUMNS",
    "gestimator",
    "GEstimator",
    "PipelineState",
    "default_output_path",
]
