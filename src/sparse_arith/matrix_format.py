from typing import Iterable, Union

from .constants import MatrixFormat
from .matrix_errors import IndexOutOfBoundsError, MalformedEntryError, MalformedHeaderError
from .sparse_matrix import SparseMatrix


def _non_blank_lines(lines: Iterable[str]) -> list[tuple[int, str]]:
    """Strip every line and drop blank ones, keeping the 1-based source line number."""
    res = []
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if line:
            res.append((line_number, line))
    return res


def parse_matrix(text: Union[str, Iterable[str]]) -> SparseMatrix:
    """
    Parse the coordinate-list text format into a SparseMatrix.

    Args:
        text: The full file content, or an iterable of lines (e.g. an open file).

    Returns:
        The parsed matrix. Nothing is returned on error, partial matrices are never produced.

    Raises:
        MalformedHeaderError: If the first two non-blank lines are not rows=<n> / cols=<n>.
        MalformedEntryError: If a data line does not match (row, col, value).
        IndexOutOfBoundsError: If an entry lies outside the declared dimensions.
    """
    if isinstance(text, str):
        text = text.splitlines()
    lines = _non_blank_lines(text)

    if len(lines) < 2:
        raise MalformedHeaderError()

    rows_match = MatrixFormat.ROWS_PATTERN.match(lines[0][1])
    if rows_match is None:
        raise MalformedHeaderError(*lines[0])
    cols_match = MatrixFormat.COLS_PATTERN.match(lines[1][1])
    if cols_match is None:
        raise MalformedHeaderError(*lines[1])

    matrix = SparseMatrix(int(rows_match.group(1)), int(cols_match.group(1)))

    for line_number, line in lines[2:]:
        entry_match = MatrixFormat.ENTRY_PATTERN.match(line)
        if entry_match is None:
            raise MalformedEntryError(line_number, line)

        row, col, value = (int(g) for g in entry_match.groups())
        try:
            matrix.set(row, col, value)
        except IndexOutOfBoundsError as e:
            raise IndexOutOfBoundsError(row, col, matrix.rows, matrix.cols, line_number=line_number) from e

    return matrix


def serialize_matrix(matrix: SparseMatrix) -> str:
    """
    Serialize a SparseMatrix into the coordinate-list text format.

    Entries are written ascending by row, then column, so the output is deterministic
    regardless of insertion order.
    """
    out = [
        f"{MatrixFormat.ROWS_KEY}={matrix.rows}\n",
        f"{MatrixFormat.COLS_KEY}={matrix.cols}\n",
    ]
    for row, col, value in matrix.sorted_entries():
        out.append(MatrixFormat.ENTRY_TEMPLATE.format(row=row, col=col, value=value) + "\n")
    return "".join(out)


def load_matrix(path: str) -> SparseMatrix:
    """Read and parse a matrix file. FileNotFoundError/OSError from open() propagate unchanged."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_matrix(f)


def save_matrix(matrix: SparseMatrix, path: str) -> None:
    """Serialize a matrix and write it to path, overwriting any existing file."""
    with open(path, 'w', encoding='utf-8') as f:
        f.write(serialize_matrix(matrix))
