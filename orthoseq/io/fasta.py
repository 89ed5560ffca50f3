import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union

from orthoseq.errors import FileError, FormatError, InvalidSymbolError
from orthoseq.sequence.codons import CODON_LENGTH
from orthoseq.sequence.encoding import encode_sequence

logger = logging.getLogger(__name__)


@dataclass
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full description line (everything after '>')
        sequence: The aligned nucleotide sequence
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f">{self.description}\n{self.sequence}"


def _open_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode)
    return open(filepath, mode)


def read_fasta(
    filepath: Union[str, Path],
    uppercase: bool = True
) -> Iterator[FastaRecord]:
    """
    Read sequences from a FASTA file.

    Supports both plain text and gzip-compressed files.

    Args:
        filepath: Path to FASTA file (.fasta, .fa, .fna, or .gz)
        uppercase: Convert sequences to uppercase

    Yields:
        FastaRecord objects
    """
    with _open_file(filepath, "rt") as f:
        yield from parse_fasta_string(f.read(), uppercase=uppercase)


def parse_fasta_string(
    content: str,
    uppercase: bool = True
) -> Iterator[FastaRecord]:
    """
    Parse FASTA format from a string.

    Args:
        content: FASTA formatted string
        uppercase: Convert sequences to uppercase

    Yields:
        FastaRecord objects

    Raises:
        FormatError: if sequence data appears before the first header
    """
    current_header = None
    current_sequence: List[str] = []

    for line_number, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        if line.startswith(">"):
            if current_header is not None:
                yield _make_record(current_header, current_sequence, uppercase)

            current_header = line[1:].strip()
            current_sequence = []
        elif current_header is None:
            raise FormatError(f"Sequence data before first header on line {line_number}")
        else:
            current_sequence.append(line)

    if current_header is not None:
        yield _make_record(current_header, current_sequence, uppercase)


def _make_record(header: str, lines: List[str], uppercase: bool) -> FastaRecord:
    seq = "".join(lines)
    if uppercase:
        seq = seq.upper()
    seq_id = header.split()[0] if header else ""
    return FastaRecord(id=seq_id, description=header, sequence=seq)


def load_alignment(filepath: Union[str, Path]) -> List[FastaRecord]:
    """
    Load a codon alignment from a FASTA file.

    Every record must carry a unique identifier and a sequence of the
    same length, a multiple of 3, made only of recognized nucleotide
    symbols.

    Args:
        filepath: Path to FASTA file (plain or gzip-compressed)

    Returns:
        List of FastaRecord objects in file order

    Raises:
        FileError: if the file cannot be read or is empty
        FormatError: if the alignment is structurally invalid
    """
    filepath = Path(filepath)
    try:
        with _open_file(filepath, "rt") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"Alignment {filepath} is not a text file: {e}") from e
    except OSError as e:
        raise FileError(f"Cannot read alignment {filepath}: {e}") from e

    if not content.strip():
        raise FileError(f"Alignment file {filepath} is empty")

    records = list(parse_fasta_string(content))
    if not records:
        raise FormatError(f"No FASTA records found in {filepath}")

    seen = set()
    length = len(records[0])
    for record in records:
        if not record.id:
            raise FormatError(f"Record without identifier in {filepath}")
        if record.id in seen:
            raise FormatError(f"Duplicate sequence identifier {record.id!r}")
        seen.add(record.id)

        if len(record) != length:
            raise FormatError(
                f"Sequence {record.id!r} has length {len(record)}, expected {length}"
            )
        try:
            encode_sequence(record.sequence)
        except InvalidSymbolError as e:
            raise FormatError(f"Sequence {record.id!r}: {e}") from e

    if length % CODON_LENGTH:
        raise FormatError(
            f"Alignment length {length} is not a multiple of {CODON_LENGTH}"
        )

    logger.info(f"Loaded {len(records)} sequences of length {length} from {filepath}")
    return records

