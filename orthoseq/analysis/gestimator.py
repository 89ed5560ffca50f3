"""
The gestimator pipeline: alignment file in, pairwise divergence table out.

A run moves through IDLE -> LOADING -> COMPARING -> WRITING -> DONE, or
to FAILED from any of the working states. The output table is written
all at once at the end of the run.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Union

from orthoseq.analysis.divergence import (
    RESULT_COLUMNS,
    PairwiseResult,
    estimate_pair,
    remove_gap_columns,
)
from orthoseq.io.fasta import FastaRecord, load_alignment
from orthoseq.io.table import write_table
from orthoseq.utils.comparisons import num_diffs

logger = logging.getLogger(__name__)

HIT_ORDERS = ("file", "distance")
OUTPUT_SUFFIX = ".gestimator.tsv"


class PipelineState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    COMPARING = "comparing"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


def default_output_path(file: Union[str, Path]) -> Path:
    """Output table path derived from the input: ``aln.fasta`` -> ``aln.gestimator.tsv``."""
    file = Path(file)
    return file.with_name(file.stem + OUTPUT_SUFFIX)


class GEstimator:
    """
    Pairwise divergence estimation over a codon alignment.

    Each sequence in the alignment is taken in turn as the query and
    compared against up to ``max_hits`` partner sequences.

    Args:
        file: Path to a FASTA codon alignment (plain or gzip-compressed)
        file_out: Output table path; derived from ``file`` if empty
        max_hits: Maximum number of partners per query, at least 1
        verbose: Log every compared pair at INFO level
        remove_all_gaps: Drop every codon column with a gap in any
            sequence before comparing. Gapped columns are always
            skipped pair by pair, so this only matters for columns
            that are gapped outside the pair being compared.
        hit_order: ``"file"`` to take partners in alignment order,
            ``"distance"`` to take the partners with the fewest
            nucleotide differences first

    Example:
        >>> GEstimator("orthologs.fasta", max_hits=2).run()
    """

    def __init__(
        self,
        file: Union[str, Path],
        file_out: Union[str, Path] = "",
        max_hits: int = 3,
        verbose: bool = False,
        remove_all_gaps: bool = False,
        hit_order: str = "file"
    ):
        if isinstance(max_hits, bool) or not isinstance(max_hits, int) or max_hits < 1:
            raise ValueError(f"max_hits must be a positive integer, got {max_hits!r}")
        if hit_order not in HIT_ORDERS:
            raise ValueError(f"Invalid hit_order: {hit_order!r}, expected one of {HIT_ORDERS}")

        self.file = Path(file)
        self.file_out = Path(file_out) if file_out else default_output_path(file)
        self.max_hits = max_hits
        self.verbose = verbose
        self.remove_all_gaps = remove_all_gaps
        self.hit_order = hit_order

        self.state = PipelineState.IDLE
        self.records: List[FastaRecord] = []
        self.results: List[PairwiseResult] = []

    def _enter(self, state: PipelineState) -> None:
        logger.debug(f"gestimator: {self.state.value} -> {state.value}")
        self.state = state

    def run(self) -> List[PairwiseResult]:
        """
        Load, compare and write.

        Returns:
            The PairwiseResult rows written to ``file_out``

        Raises:
            FileError: if the alignment cannot be read or the table written
            FormatError: if the alignment is structurally invalid
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError(f"Cannot run a gestimator that is {self.state.value}")

        try:
            self.load()
            self.compare()
            self.write()
        except Exception as e:
            logger.error(f"gestimator failed while {self.state.value}: {e}")
            self._enter(PipelineState.FAILED)
            raise
        finally:
            self.records = []

        self._enter(PipelineState.DONE)
        return self.results

    def load(self) -> None:
        self._enter(PipelineState.LOADING)
        records = load_alignment(self.file)

        if self.remove_all_gaps:
            sequences = remove_gap_columns([record.sequence for record in records])
            records = [
                FastaRecord(record.id, record.description, sequence)
                for record, sequence in zip(records, sequences)
            ]
            logger.info(f"Alignment length after removing gapped codons: {len(records[0])}")

        if len(records) < 2:
            logger.warning(f"{self.file} holds a single sequence, nothing to compare")
        self.records = records

    def select_partners(self, index: int) -> List[FastaRecord]:
        """Up to ``max_hits`` partner records for the query at ``index``."""
        query = self.records[index]
        candidates = [record for k, record in enumerate(self.records) if k != index]

        if self.hit_order == "distance":
            # sort is stable, ties keep file order
            candidates.sort(key=lambda record: num_diffs(
                query.sequence, record.sequence, skip_missing=True, nucleic_acid=True
            ))

        return candidates[:self.max_hits]

    def compare(self) -> None:
        self._enter(PipelineState.COMPARING)
        report = logger.info if self.verbose else logger.debug

        results = []
        for index, query in enumerate(self.records):
            for partner in self.select_partners(index):
                result = estimate_pair(query.id, query.sequence, partner.id, partner.sequence)
                report(
                    f"{query.id} vs {partner.id}: {result.compared_codons} codons, "
                    f"{result.nucleotide_differences} differences, "
                    f"S={result.synonymous} N={result.nonsynonymous}"
                )
                results.append(result)

        logger.info(f"Compared {len(results)} sequence pairs")
        self.results = results

    def write(self) -> None:
        self._enter(PipelineState.WRITING)
        write_table(
            (result.to_row() for result in self.results),
            RESULT_COLUMNS,
            self.file_out,
        )


def gestimator(
    file: Union[str, Path],
    file_out: Union[str, Path] = "",
    max_hits: int = 3,
    verbose: bool = False,
    remove_all_gaps: bool = False,
    hit_order: str = "file"
) -> None:
    """
    Compute pairwise divergence counts for a codon alignment and write them
    as a tab-separated table.

    See :class:`GEstimator` for the arguments.
    """
    GEstimator(
        file,
        file_out=file_out,
        max_hits=max_hits,
        verbose=verbose,
        remove_all_gaps=remove_all_gaps,
        hit_order=hit_order,
    ).run()
