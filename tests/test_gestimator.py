import csv
import gzip
import logging
import os
import stat
from collections import Counter

import pytest

from orthoseq.analysis.divergence import RESULT_COLUMNS
from orthoseq.analysis.gestimator import (
    GEstimator,
    PipelineState,
    default_output_path,
    gestimator,
)
from orthoseq.errors import FileError, FormatError


def read_table(path):
    with open(path, newline="") as f:
        reader = csv.DictReader(f, delimiter="\t")
        return reader.fieldnames, list(reader)


def partners(rows, query):
    return [row["subject"] for row in rows if row["query"] == query]


class TestGestimator:
    def test_writes_default_output(self, five_orthologs):
        gestimator(five_orthologs)
        output = five_orthologs.with_name("aln.gestimator.tsv")
        assert output.exists()

        columns, rows = read_table(output)
        assert tuple(columns) == RESULT_COLUMNS
        assert len(rows) == 15

    def test_max_hits_bounds_partners_per_query(self, five_orthologs, tmp_path):
        out = tmp_path / "out.tsv"
        gestimator(five_orthologs, out, max_hits=3)
        _, rows = read_table(out)

        counts = Counter(row["query"] for row in rows)
        assert counts == {name: 3 for name in ["human", "chimp", "mouse", "rat", "fish"]}
        assert partners(rows, "human") == ["chimp", "mouse", "rat"]
        assert partners(rows, "fish") == ["human", "chimp", "mouse"]
        assert all(row["query"] != row["subject"] for row in rows)

    def test_max_hits_caps_at_available_partners(self, five_orthologs, tmp_path):
        out = tmp_path / "out.tsv"
        gestimator(five_orthologs, out, max_hits=10)
        _, rows = read_table(out)
        assert len(rows) == 20
        assert len(partners(rows, "mouse")) == 4

    def test_distance_order_takes_closest_partners(self, five_orthologs, tmp_path):
        out = tmp_path / "out.tsv"
        gestimator(five_orthologs, out, max_hits=3, hit_order="distance")
        _, rows = read_table(out)
        assert partners(rows, "rat") == ["mouse", "human", "chimp"]
        # ties keep file order
        assert partners(rows, "fish") == ["chimp", "human", "mouse"]

    def test_counts_in_table(self, five_orthologs, tmp_path):
        out = tmp_path / "out.tsv"
        gestimator(five_orthologs, out, max_hits=1)
        _, rows = read_table(out)

        human = rows[0]
        assert (human["query"], human["subject"]) == ("human", "chimp")
        assert int(human["compared_codons"]) == 4
        assert int(human["compared_sites"]) == 12
        assert int(human["nucleotide_differences"]) == 1
        assert int(human["synonymous"]) == 1
        assert int(human["nonsynonymous"]) == 0
        assert int(human["transitions"]) == 1

    @pytest.mark.parametrize("max_hits", [0, -2, True, 1.5])
    def test_invalid_max_hits(self, five_orthologs, max_hits):
        with pytest.raises(ValueError):
            gestimator(five_orthologs, max_hits=max_hits)

    def test_invalid_hit_order(self, five_orthologs):
        with pytest.raises(ValueError):
            gestimator(five_orthologs, hit_order="random")

    def test_verbose_reports_pairs(self, five_orthologs, caplog):
        with caplog.at_level(logging.INFO, logger="orthoseq"):
            gestimator(five_orthologs, max_hits=1, verbose=True)
        assert "human vs chimp" in caplog.text

    def test_quiet_does_not_report_pairs(self, five_orthologs, caplog):
        with caplog.at_level(logging.INFO, logger="orthoseq"):
            gestimator(five_orthologs, max_hits=1)
        assert "human vs chimp" not in caplog.text

    def test_verbose_does_not_change_results(self, five_orthologs, tmp_path):
        gestimator(five_orthologs, tmp_path / "quiet.tsv")
        gestimator(five_orthologs, tmp_path / "loud.tsv", verbose=True)
        assert (tmp_path / "quiet.tsv").read_text() == (tmp_path / "loud.tsv").read_text()

    def test_gzip_input(self, five_orthologs, tmp_path):
        path = tmp_path / "aln.fasta.gz"
        with gzip.open(path, "wt") as f:
            f.write(five_orthologs.read_text())
        gestimator(path)
        _, rows = read_table(tmp_path / "aln.fasta.gestimator.tsv")
        assert len(rows) == 15

    def test_single_sequence_writes_header_only(self, write_fasta, tmp_path):
        path = write_fasta(">only\nATGAAA\n")
        gestimator(path, tmp_path / "out.tsv")
        columns, rows = read_table(tmp_path / "out.tsv")
        assert tuple(columns) == RESULT_COLUMNS
        assert rows == []


class TestGapPolicy:
    ALIGNMENT = ">a\nATGAAACCC\n>b\nATGAAGCCA\n>c\nATG---CCC\n"

    def test_pair_gaps_always_excluded(self, write_fasta, tmp_path):
        path = write_fasta(">a\nATGA-GTTA\n>b\nATGAAGTTG\n")
        for remove_all_gaps in (False, True):
            out = tmp_path / f"out_{remove_all_gaps}.tsv"
            gestimator(path, out, remove_all_gaps=remove_all_gaps)
            _, rows = read_table(out)
            assert int(rows[0]["compared_codons"]) == 2
            assert int(rows[0]["synonymous"]) == 1

    def test_remove_all_gaps_drops_columns_for_every_pair(self, write_fasta, tmp_path):
        path = write_fasta(self.ALIGNMENT)

        gestimator(path, tmp_path / "lenient.tsv", max_hits=1)
        _, rows = read_table(tmp_path / "lenient.tsv")
        assert (rows[0]["query"], rows[0]["subject"]) == ("a", "b")
        assert int(rows[0]["compared_codons"]) == 3
        assert int(rows[0]["synonymous"]) == 2

        gestimator(path, tmp_path / "strict.tsv", max_hits=1, remove_all_gaps=True)
        _, rows = read_table(tmp_path / "strict.tsv")
        assert int(rows[0]["compared_codons"]) == 2
        assert int(rows[0]["synonymous"]) == 1


class TestPipelineStates:
    def test_successful_run(self, five_orthologs):
        estimator = GEstimator(five_orthologs)
        assert estimator.state is PipelineState.IDLE
        results = estimator.run()
        assert estimator.state is PipelineState.DONE
        assert len(results) == 15
        assert estimator.records == []

    def test_cannot_run_twice(self, five_orthologs):
        estimator = GEstimator(five_orthologs)
        estimator.run()
        with pytest.raises(RuntimeError):
            estimator.run()

    def test_missing_file_fails(self, tmp_path):
        estimator = GEstimator(tmp_path / "missing.fasta")
        with pytest.raises(FileError):
            estimator.run()
        assert estimator.state is PipelineState.FAILED

    def test_unwritable_output_fails_without_partial_file(self, five_orthologs, tmp_path):
        out = tmp_path / "no_such_dir" / "out.tsv"
        estimator = GEstimator(five_orthologs, out)
        with pytest.raises(FileError):
            estimator.run()
        assert estimator.state is PipelineState.FAILED
        assert not out.exists()

    def test_output_directory_holds_only_the_table(self, five_orthologs, tmp_path):
        gestimator(five_orthologs, tmp_path / "out.tsv")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["aln.fasta", "out.tsv"]

    @pytest.mark.parametrize("umask,mode", [(0o022, 0o644), (0o027, 0o640), (0o002, 0o664)])
    def test_output_permissions_follow_umask(self, five_orthologs, tmp_path, umask, mode):
        out = tmp_path / "out.tsv"
        previous = os.umask(umask)
        try:
            gestimator(five_orthologs, out)
        finally:
            os.umask(previous)
        assert stat.S_IMODE(out.stat().st_mode) == mode


class TestLoadingErrors:
    @pytest.mark.parametrize("content,error", [
        ("", FileError),
        ("\n  \n", FileError),
        ("ATGAAA\n", FormatError),
        (">a\nATGAAA\n>b\nATGAA\n", FormatError),
        (">a\nATGAAX\n>b\nATGAAA\n", FormatError),
        (">a\nATGA\n>b\nATGA\n", FormatError),
        (">a\nATGAAA\n>a\nATGAAA\n", FormatError),
        (">\nATGAAA\n", FormatError),
    ])
    def test_invalid_alignment(self, write_fasta, content, error):
        estimator = GEstimator(write_fasta(content))
        with pytest.raises(error):
            estimator.run()
        assert estimator.state is PipelineState.FAILED


def test_default_output_path(tmp_path):
    assert default_output_path(tmp_path / "genes.fasta") == tmp_path / "genes.gestimator.tsv"
    assert default_output_path("aln.fa").name == "aln.gestimator.tsv"
