import pytest

FIVE_ORTHOLOGS = """\
>human gene=abc1
ATGTTAAAACCC
>chimp
ATGTTGAAACCC
>mouse
ATGATAAAGCCC
>rat
ATGATAAAGCCT
>fish
ATGGGGCCCAAA
"""


@pytest.fixture
def write_fasta(tmp_path):
    def _write(content: str, name: str = "aln.fasta"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def five_orthologs(write_fasta):
    return write_fasta(FIVE_ORTHOLOGS)
