"""
Codon translation under the universal genetic code.

Ambiguous and gapped codons are not errors: they translate to the
undetermined marker ``X`` so that alignments with missing data can be
processed codon by codon.
"""

from types import MappingProxyType

from orthoseq.errors import MalformedCodonError
from orthoseq.sequence.codons import (
    ambiguous_nucleotides,
    codon_precondition,
    has_gap,
    iter_codons,
)

STOP = "*"
UNDETERMINED = "X"

# Standard genetic code (DNA codons)
CODON_TABLE = MappingProxyType({
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

AMINO_ACID_NAMES = MappingProxyType({
    "A": "Alanine", "R": "Arginine", "N": "Asparagine",
    "D": "Aspartic acid", "C": "Cysteine", "Q": "Glutamine",
    "E": "Glutamic acid", "G": "Glycine", "H": "Histidine",
    "I": "Isoleucine", "L": "Leucine", "K": "Lysine",
    "M": "Methionine", "F": "Phenylalanine", "P": "Proline",
    "S": "Serine", "T": "Threonine", "W": "Tryptophan",
    "Y": "Tyrosine", "V": "Valine",
    STOP: "Stop",
    UNDETERMINED: "Undetermined",
})

STOP_CODONS = frozenset(codon for codon, aa in CODON_TABLE.items() if aa == STOP)


def universal(codon: str) -> str:
    """
    Translate a codon under the universal genetic code.

    Args:
        codon: Three-letter codon; case-insensitive, ``U`` reads as ``T``

    Returns:
        One-letter amino acid, ``*`` for stop codons, or ``X`` if the
        codon contains an ambiguity symbol or a gap

    Raises:
        MalformedCodonError: if the codon fails :func:`codon_precondition`

    Example:
        >>> universal("atg")
        'M'
        >>> universal("ATN")
        'X'
    """
    if not codon_precondition(codon):
        raise MalformedCodonError(codon)

    if has_gap(codon) or ambiguous_nucleotides(codon):
        return UNDETERMINED

    return CODON_TABLE[codon.upper().replace("U", "T")]


def translate_codon(codon: str) -> str:
    """
    Translate a codon to a readable amino acid name.

    Example:
        >>> translate_codon("TTA")
        'Leucine'
        >>> translate_codon("TGA")
        'Stop'
    """
    return AMINO_ACID_NAMES[universal(codon)]


def translate(
    sequence: str,
    stop_symbol: str = STOP,
    to_stop: bool = False
) -> str:
    """
    Translate a coding sequence to protein.

    Args:
        sequence: Coding sequence (a trailing partial codon is ignored)
        stop_symbol: Symbol to use for stop codons
        to_stop: If True, stop translation at first stop codon

    Returns:
        Amino acid sequence, with ``X`` for undetermined codons

    Example:
        >>> translate("ATGGCC")
        'MA'
        >>> translate("ATGTGA", to_stop=True)
        'M'
    """
    protein = []
    for codon in iter_codons(sequence):
        aa = universal(codon)

        if aa == STOP:
            if to_stop:
                break
            aa = stop_symbol

        protein.append(aa)

    return "".join(protein)
