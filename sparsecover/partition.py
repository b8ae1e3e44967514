"""Splitting a covering matrix into independent blocks."""

from __future__ import annotations

from .sparse import SparseMatrix


def _component_rows(matrix: SparseMatrix) -> set[int] | None:
    """Rows connected to the first row, or None if they reach every row or column."""
    total_rows = matrix.nrows()
    total_cols = matrix.ncols()
    first = matrix.row_numbers()[0]
    rows_seen: set[int] = {first}
    cols_seen: set[int] = set()
    if len(rows_seen) == total_rows:
        return None
    stack = [first]
    while stack:
        row = stack.pop()
        for col in matrix.get_row(row):
            if col in cols_seen:
                continue
            cols_seen.add(col)
            if len(cols_seen) == total_cols:
                return None
            for other in matrix.get_col(col):
                if other in rows_seen:
                    continue
                rows_seen.add(other)
                if len(rows_seen) == total_rows:
                    return None
                stack.append(other)
    return rows_seen


def block_partition(matrix: SparseMatrix) -> tuple[SparseMatrix, SparseMatrix] | None:
    """Split ``matrix`` into two blocks sharing no rows or columns.

    The first block is the connected component of the first row, the
    second holds every other row. Returns None if the matrix is empty or
    cannot be split.
    """
    if matrix.nrows() == 0:
        return None
    component = _component_rows(matrix)
    if component is None:
        return None
    left = SparseMatrix()
    right = SparseMatrix()
    for row in matrix.row_numbers():
        target = left if row in component else right
        target.copy_row(row, matrix.get_row(row))
    return left, right