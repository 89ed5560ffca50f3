"""
Nucleotide encoding for aligned coding sequences.

Every recognized symbol (the four bases, the IUPAC ambiguity codes and
the gap) maps to a small integer code, so whole sequences can be turned
into numpy arrays and compared column by column.
"""

import numpy as np
from typing import Dict

from orthoseq.errors import InvalidSymbolError

GAP = "-"

# Dense code order: bases first, then ambiguity codes, gap last
NUCLEOTIDES = "ACGTNRYSWKMBDHV-"

DNA_VOCAB = {"A": 0, "C": 1, "G": 2, "T": 3}
NUCLEOTIDE_CODES: Dict[str, int] = {nuc: i for i, nuc in enumerate(NUCLEOTIDES)}
NUCLEOTIDE_CODES["U"] = DNA_VOCAB["T"]

NUM_BASES = len(DNA_VOCAB)
GAP_CODE = NUCLEOTIDE_CODES[GAP]

# Extended IUPAC codes for ambiguous bases
IUPAC_DNA = {
    "A": "A", "C": "C", "G": "G", "T": "T",
    "R": "AG", "Y": "CT", "S": "GC", "W": "AT",
    "K": "GT", "M": "AC", "B": "CGT", "D": "AGT",
    "H": "ACT", "V": "ACG", "N": "ACGT",
}

AMBIGUITY_SYMBOLS = frozenset(nuc for nuc in IUPAC_DNA if nuc not in DNA_VOCAB)

# Byte -> code lookup, -1 marks bytes outside the alphabet
_ENCODE_TABLE = np.full(256, -1, dtype=np.int8)
for _nuc, _code in NUCLEOTIDE_CODES.items():
    _ENCODE_TABLE[ord(_nuc)] = _code
    _ENCODE_TABLE[ord(_nuc.lower())] = _code
_DECODE_TABLE = np.frombuffer(NUCLEOTIDES.encode("ascii"), dtype=np.uint8)


def nuc_to_int(c: str) -> int:
    """
    Map a nucleotide character to its integer code.

    Lookup is case-insensitive and ``U`` encodes as ``T``.

    Raises:
        InvalidSymbolError: if ``c`` is not a recognized symbol

    Example:
        >>> nuc_to_int("g")
        2
    """
    try:
        return NUCLEOTIDE_CODES[c.upper()]
    except (KeyError, AttributeError):
        raise InvalidSymbolError(c) from None


def int_to_nuc(i: int) -> str:
    """
    Map an integer code back to its nucleotide character.

    Only codes returned by :func:`nuc_to_int` are valid input.
    """
    if not 0 <= i < len(NUCLEOTIDES):
        raise ValueError(f"{i} is not a nucleotide code")
    return NUCLEOTIDES[i]


def not_a_gap(c: str) -> bool:
    """True unless ``c`` is the gap symbol."""
    return c != GAP


def is_ambiguous(c: str) -> bool:
    """True for IUPAC ambiguity symbols (N, R, Y, ...)."""
    return c.upper() in AMBIGUITY_SYMBOLS


def encode_sequence(sequence: str) -> np.ndarray:
    """
    Encode a nucleotide sequence as an array of integer codes.

    Args:
        sequence: DNA/RNA sequence, possibly gapped or ambiguous

    Returns:
        numpy int8 array of shape (len(sequence),)

    Raises:
        InvalidSymbolError: for the first character outside the alphabet

    Example:
        >>> encode_sequence("AC-n")
        array([ 0,  1, 15,  4], dtype=int8)
    """
    try:
        raw = np.frombuffer(sequence.encode("ascii"), dtype=np.uint8)
    except UnicodeEncodeError as e:
        raise InvalidSymbolError(sequence[e.start], e.start) from None

    codes = _ENCODE_TABLE[raw]
    invalid = np.flatnonzero(codes < 0)
    if invalid.size:
        position = int(invalid[0])
        raise InvalidSymbolError(sequence[position], position)

    return codes


def decode_sequence(codes: np.ndarray) -> str:
    """Decode an array produced by :func:`encode_sequence`."""
    codes = np.asarray(codes, dtype=np.intp)
    if codes.size and (codes.min() < 0 or codes.max() >= len(NUCLEOTIDES)):
        raise ValueError("Array contains values that are not nucleotide codes")
    return _DECODE_TABLE[codes].tobytes().decode("ascii")
