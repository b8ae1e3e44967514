"""Partial solutions of a covering problem."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .sparse import SparseMatrix, SparseRow


def column_weight(weight: Sequence[int] | None, col: int) -> int:
    """Cost of choosing ``col``: 1 when there are no weights."""
    return 1 if weight is None else weight[col]


@dataclass
class Solution:
    """A set of chosen columns and their total cost."""

    cost: int = 0
    row: SparseRow = field(default_factory=SparseRow)

    def add(self, weight: Sequence[int] | None, col: int) -> None:
        """Add ``col`` to the chosen columns and its weight to the cost."""
        self.row.insert(col)
        self.cost += column_weight(weight, col)

    def accept(self, matrix: SparseMatrix, weight: Sequence[int] | None, col: int) -> None:
        """Choose ``col`` and delete every row of ``matrix`` it covers."""
        pcol = matrix.get_col(col)
        if pcol is None:
            raise KeyError(f"column {col} is not in the matrix")
        self.add(weight, col)
        for row in list(pcol):
            matrix.delete_row(row)

    def reject(self, matrix: SparseMatrix, weight: Sequence[int] | None, col: int) -> None:
        """Rule out ``col`` by deleting it from ``matrix``."""
        matrix.delete_col(col)

    def copy(self) -> Solution:
        """Return an independent copy."""
        return Solution(self.cost, self.row.copy())


def choose_best(best1: Solution | None, best2: Solution | None) -> Solution | None:
    """The cheaper of two solutions, preferring the first on a tie."""
    if best1 is None:
        return best2
    if best2 is None:
        return best1
    return best1 if best1.cost <= best2.cost else best2