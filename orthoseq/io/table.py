"""
Tab-separated table output.

Tables are written to a temporary file beside the destination and
renamed into place, so a failed run never leaves a partial table. The
finished table gets the usual permissions for a new file under the
current umask.
"""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Sequence, Union

from orthoseq.errors import FileError

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_table(
    rows: Iterable[Sequence],
    columns: Sequence[str],
    filepath: Union[str, Path]
) -> Path:
    """
    Write rows as a tab-separated table with a header row.

    Args:
        rows: Row values, written in the given order
        columns: Header names
        filepath: Destination path; replaced if it exists

    Returns:
        The destination path

    Raises:
        FileError: if the destination cannot be created or written
    """
    filepath = Path(filepath)

    try:
        handle = tempfile.NamedTemporaryFile(
            "w",
            dir=filepath.parent,
            prefix=f".{filepath.name}.",
            suffix=".tmp",
            delete=False,
            newline="",
        )
    except OSError as e:
        raise FileError(f"Cannot create output table {filepath}: {e}") from e

    count = 0
    try:
        with handle:
            writer = csv.writer(handle, delimiter="\t", lineterminator="\n")
            writer.writerow(columns)
            for row in rows:
                writer.writerow(row)
                count += 1
        os.chmod(handle.name, 0o666 & ~_current_umask())
        os.replace(handle.name, filepath)
    except OSError as e:
        os.unlink(handle.name)
        raise FileError(f"Cannot write output table {filepath}: {e}") from e
    except BaseException:
        os.unlink(handle.name)
        raise

    logger.info(f"Wrote {count} rows to {filepath}")
    return filepath
