import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from ..utils.errors import FileOperationError

logger = logging.getLogger(__name__)

Row = List[str]


def _ensure_parent(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileOperationError(f"failed to create output directory {path.parent}: {e}") from e


def read_text(path: Path) -> str:
    """Read the whole input file as UTF-8 text."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"failed to read the input file {path}: {e}") from e


def write_lines(path: Path, items: Iterable[str]) -> None:
    """Write each string as-is; no newlines are added between them."""
    path = Path(path)
    _ensure_parent(path)
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            for item in items:
                f.write(item)
    except OSError as e:
        raise FileOperationError(f"failed to write to the output file {path}: {e}") from e


def _strip_comment_lines(content: str, comment: Optional[str]) -> str:
    """Drop lines starting with the comment character.

    Comments only count at the start of a line; a comment character inside a
    field is kept as data.
    """
    if not comment:
        return content
    # Only \n ends a line; other Unicode line breaks can sit inside a field
    lines = StringIO(content, newline="\n")
    return "".join(line for line in lines if not line.startswith(comment))


def read_csv(path: Path, delimiter: str = ",", comment: Optional[str] = None,
             has_header: bool = False) -> Tuple[Optional[Row], List[Row]]:
    """Load a delimited file into memory.

    Args:
        path: File to read
        delimiter: Field separator
        comment: Lines starting with this character are skipped
        has_header: Return the first row separately instead of as data

    Returns:
        Tuple of (header row or None, data rows). Every row is padded to the
        width of the first row.
    """
    content = _strip_comment_lines(read_text(path), comment)
    if not content.strip():
        raise FileOperationError(f"input CSV is empty: {path}")

    try:
        df = pd.read_csv(
            StringIO(content),
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="c",
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
        raise FileOperationError(f"error reading CSV {path}: {e}") from e

    df = df.fillna("")
    rows = [list(row) for row in df.itertuples(index=False, name=None)]
    if not rows:
        raise FileOperationError(f"input CSV is empty: {path}")
    logger.debug(f"Read {len(rows)} rows x {df.shape[1]} columns from {path}")

    header = None
    if has_header:
        header, rows = rows[0], rows[1:]
    return header, rows


def write_csv(path: Path, rows: List[Row], header: Optional[Row] = None,
              delimiter: str = ",") -> None:
    """Write rows (and an optional header row first) to a delimited file."""
    path = Path(path)
    data = ([header] if header is not None else []) + [list(row) for row in rows]
    _ensure_parent(path)
    try:
        pd.DataFrame(data).to_csv(
            path,
            sep=delimiter,
            header=False,
            index=False,
            lineterminator="\n",
            quoting=csv.QUOTE_MINIMAL,
            encoding="utf-8",
        )
    except OSError as e:
        raise FileOperationError(f"error writing CSV {path}: {e}") from e
    logger.debug(f"Wrote {len(data)} rows to {path}")
