"""
Alignment and results file I/O.

This module provides:
- FASTA reading and codon-alignment loading
- Tab-separated results tables
"""

from orthoseq.io.fasta import (
    read_fasta,
    load_alignment,
    FastaRecord,
    parse_fasta_string,
)

from orthoseq.io.table import write_table

__all__ = [
    "read_fasta",
    "load_alignment",
    "FastaRecord",
    "parse_fasta_string",
    "write_table",
]
