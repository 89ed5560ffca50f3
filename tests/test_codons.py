from itertools import product

import pytest

from orthoseq.errors import MalformedCodonError
from orthoseq.sequence.codons import (
    ambiguous_nucleotides,
    codon_precondition,
    has_gap,
    iter_codons,
)
from orthoseq.utils.sequences import (
    CODON_TABLE,
    STOP,
    STOP_CODONS,
    UNDETERMINED,
    translate,
    translate_codon,
    universal,
)

ALL_CODONS = ["".join(c) for c in product("ACGT", repeat=3)]
AMINO_ACIDS = set("ACDEFGHIKLMNPQRSTVWY")


class TestCodonPrecondition:
    @pytest.mark.parametrize("codon", ["ATG", "atg", "A-G", "NNN", "RYK", "---", "AUG"])
    def test_accepts_recognized_symbols(self, codon):
        assert codon_precondition(codon)

    @pytest.mark.parametrize("codon", ["", "AT", "ATGA", "AXG", "A.G", "AT*"])
    def test_rejects_malformed(self, codon):
        assert not codon_precondition(codon)

    def test_every_unambiguous_codon_passes(self):
        assert all(codon_precondition(c) for c in ALL_CODONS)


def test_ambiguous_nucleotides():
    assert ambiguous_nucleotides("ATN")
    assert ambiguous_nucleotides("rTG")
    assert not ambiguous_nucleotides("ATG")
    assert not ambiguous_nucleotides("A-G")


def test_has_gap():
    assert has_gap("A-G")
    assert not has_gap("ANG")


def test_iter_codons_drops_partial_codon():
    assert list(iter_codons("ATGAAAT")) == ["ATG", "AAA"]
    assert list(iter_codons("AT")) == []


class TestUniversal:
    def test_table_covers_all_codons(self):
        assert set(CODON_TABLE) == set(ALL_CODONS)

    @pytest.mark.parametrize("codon", ALL_CODONS)
    def test_unambiguous_codon_is_never_undetermined(self, codon):
        assert universal(codon) in AMINO_ACIDS | {STOP}

    def test_stop_codons(self):
        assert STOP_CODONS == {"TAA", "TAG", "TGA"}
        assert all(universal(c) == STOP for c in STOP_CODONS)

    @pytest.mark.parametrize("codon", ["ATN", "NNN", "RTG", "TTY", "GCN"])
    def test_ambiguous_codon_is_undetermined(self, codon):
        assert ambiguous_nucleotides(codon)
        assert universal(codon) == UNDETERMINED

    def test_gapped_codon_is_undetermined(self):
        assert universal("A-G") == UNDETERMINED

    def test_case_and_rna(self):
        assert universal("atg") == "M"
        assert universal("UUA") == "L"

    @pytest.mark.parametrize("codon", ["AT", "ATGC", "AXG"])
    def test_malformed_codon_raises(self, codon):
        with pytest.raises(MalformedCodonError):
            universal(codon)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CODON_TABLE["ATG"] = "W"


class TestTranslateCodon:
    def test_names(self):
        assert translate_codon("ATG") == "Methionine"
        assert translate_codon("TTA") == "Leucine"
        assert translate_codon("TTG") == "Leucine"
        assert translate_codon("ATA") == "Isoleucine"

    def test_stop_and_undetermined(self):
        assert translate_codon("TGA") == "Stop"
        assert translate_codon("NNN") == "Undetermined"

    def test_agrees_with_universal(self):
        leucines = [c for c in ALL_CODONS if universal(c) == "L"]
        assert len(leucines) == 6
        assert {translate_codon(c) for c in leucines} == {"Leucine"}


class TestTranslate:
    def test_translate(self):
        assert translate("ATGGCC") == "MA"

    def test_to_stop(self):
        assert translate("ATGTGAGCC", to_stop=True) == "M"
        assert translate("ATGTGAGCC", stop_symbol="$") == "M$A"

    def test_undetermined_codons(self):
        assert translate("ATGNNN---") == "MXX"
