#!/usr/bin/env python3
"""
Example: Codon divergence with orthoseq

This example demonstrates:
- Nucleotide codes and transition/transversion classification
- Codon translation and synonymous/nonsynonymous calls
- Running the gestimator pipeline on a small alignment
"""

import csv
import tempfile
from pathlib import Path

from orthoseq import (
    compare_codons,
    estimate_pair,
    gestimator,
    nuc_to_int,
    num_diffs,
    translate_codon,
    ts_tv,
)

ORTHOLOGS = """\
>human
ATGTTAAAACCCGGA
>chimp
ATGTTGAAACCCGGA
>mouse
ATGATAAAGCC-GGN
>rat
ATGATAAAGCCTGGA
"""


def demo_substitutions():
    print("\n" + "=" * 60)
    print("NUCLEOTIDE SUBSTITUTIONS")
    print("=" * 60)

    for a, b in [("A", "G"), ("C", "T"), ("A", "C"), ("G", "G")]:
        print(f"   {a} -> {b}: {ts_tv(nuc_to_int(a), nuc_to_int(b))}")

    print(f"\n   Differences ACGT/ACNA (skipping missing): "
          f"{num_diffs('ACGT', 'ACNA', skip_missing=True, nucleic_acid=True)}")


def demo_codons():
    print("\n" + "=" * 60)
    print("CODON DIFFERENCES")
    print("=" * 60)

    for c1, c2 in [("ATG", "ATG"), ("TTA", "TTG"), ("TTA", "ATA"), ("A-G", "AAG"), ("ATN", "ACG")]:
        comparison = compare_codons(c1, c2)
        names = "excluded"
        if comparison.compared:
            names = f"{translate_codon(c1)} / {translate_codon(c2)}"
        print(f"   {c1} vs {c2}: {comparison.classification} ({names})")

    result = estimate_pair("human", "ATGTTAAAACCC", "mouse", "ATGATAAAGCCC")
    print(f"\n   human vs mouse: S={result.synonymous} N={result.nonsynonymous} "
          f"over {result.compared_codons} codons")


def demo_pipeline():
    print("\n" + "=" * 60)
    print("GESTIMATOR PIPELINE")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        alignment = Path(tmp) / "orthologs.fasta"
        alignment.write_text(ORTHOLOGS)

        gestimator(alignment, max_hits=2, hit_order="distance")

        with open(Path(tmp) / "orthologs.gestimator.tsv", newline="") as f:
            for row in csv.DictReader(f, delimiter="\t"):
                print(f"   {row['query']:>6} vs {row['subject']:<6} "
                      f"codons={row['compared_codons']} "
                      f"S={row['synonymous']} N={row['nonsynonymous']} "
                      f"Ts={row['transitions']} Tv={row['transversions']}")


if __name__ == "__main__":
    demo_substitutions()
    demo_codons()
    demo_pipeline()
