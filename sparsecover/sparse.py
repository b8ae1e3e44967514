"""Sparse 0/1 matrices kept as sorted rows and sorted columns."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import IO

from sortedcontainers import SortedDict, SortedSet


class SparseRow:
    """A sorted set of indices.

    The matrix uses it both for rows (holding column numbers) and for
    columns (holding row numbers); ``number`` is the row or column it
    belongs to.
    """

    __slots__ = ("number", "_items")

    def __init__(self, cols: Iterable[int] = (), number: int = 0) -> None:
        self.number = number
        self._items = SortedSet(cols)

    def insert(self, col: int) -> bool:
        """Add ``col``; return True if it was not present before."""
        if col in self._items:
            return False
        self._items.add(col)
        return True

    def remove(self, col: int) -> None:
        """Remove ``col`` if present."""
        self._items.discard(col)

    def __contains__(self, col: object) -> bool:
        return col in self._items

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseRow):
            return NotImplemented
        return list(self._items) == list(other._items)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SparseRow({list(self._items)!r}, number={self.number})"

    def copy(self) -> SparseRow:
        """Return an independent copy."""
        return SparseRow(self._items, self.number)

    def is_contained_in(self, other: SparseRow) -> bool:
        """True if every index of this row is also in ``other``."""
        return self._items.issubset(other._items)

    def intersects(self, other: SparseRow) -> bool:
        """True if the two rows share at least one index."""
        return not self._items.isdisjoint(other._items)

    def compare(self, other: SparseRow) -> int:
        """Lexical comparison: negative, zero or positive."""
        for a, b in zip(self._items, other._items):
            if a != b:
                return a - b
        if len(self) > len(other):
            return 1
        if len(self) < len(other):
            return -1
        return 0

    def intersection(self, other: SparseRow) -> SparseRow:
        """Return a new row with the indices common to both."""
        return SparseRow(self._items.intersection(other._items))

    def hash_value(self, modulus: int) -> int:
        """Hash of the indices reduced into ``range(modulus)``."""
        total = 0
        for col in self._items:
            total = (total * 17 + col) % modulus
        return total

    def format(self) -> str:
        """Indices as text, each preceded by a space."""
        return "".join(f" {col}" for col in self._items)


class SparseMatrix:
    """A sparse 0/1 matrix with non-negative row and column numbers.

    Only non-empty rows and columns exist; removing the last element of a
    row or column discards it.
    """

    def __init__(self) -> None:
        self._rows: SortedDict = SortedDict()
        self._cols: SortedDict = SortedDict()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return list(self.elements()) == list(other.elements())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SparseMatrix({list(self.elements())!r})"

    def insert(self, row: int, col: int) -> bool:
        """Set the element at (row, col); return True if it was new."""
        if row < 0 or col < 0:
            raise ValueError(f"negative index ({row}, {col})")
        prow = self._rows.get(row)
        if prow is None:
            prow = self._rows[row] = SparseRow(number=row)
        pcol = self._cols.get(col)
        if pcol is None:
            pcol = self._cols[col] = SparseRow(number=col)
        if not prow.insert(col):
            return False
        pcol.insert(row)
        return True

    def find(self, row: int, col: int) -> bool:
        """True if the element at (row, col) is set."""
        prow = self._rows.get(row)
        if prow is None:
            return False
        pcol = self._cols.get(col)
        if pcol is None:
            return False
        if len(prow) < len(pcol):
            return col in prow
        return row in pcol

    def remove(self, row: int, col: int) -> None:
        """Clear the element at (row, col), dropping emptied rows and columns."""
        prow = self._rows.get(row)
        pcol = self._cols.get(col)
        if prow is None or pcol is None or col not in prow:
            return
        prow.remove(col)
        if not prow:
            del self._rows[row]
        pcol.remove(row)
        if not pcol:
            del self._cols[col]

    def delete_row(self, row: int) -> None:
        """Remove a whole row, dropping columns it leaves empty."""
        prow = self._rows.pop(row, None)
        if prow is None:
            return
        for col in prow:
            pcol = self._cols[col]
            pcol.remove(row)
            if not pcol:
                del self._cols[col]

    def delete_col(self, col: int) -> None:
        """Remove a whole column, dropping rows it leaves empty."""
        pcol = self._cols.pop(col, None)
        if pcol is None:
            return
        for row in pcol:
            prow = self._rows[row]
            prow.remove(col)
            if not prow:
                del self._rows[row]

    def get_row(self, row: int) -> SparseRow | None:
        """The live row object, or None; do not modify it directly."""
        return self._rows.get(row)

    def get_col(self, col: int) -> SparseRow | None:
        """The live column object, or None; do not modify it directly."""
        return self._cols.get(col)

    def row_numbers(self) -> list[int]:
        """Numbers of the non-empty rows, ascending."""
        return list(self._rows.keys())

    def col_numbers(self) -> list[int]:
        """Numbers of the non-empty columns, ascending."""
        return list(self._cols.keys())

    def nrows(self) -> int:
        """Number of non-empty rows."""
        return len(self._rows)

    def ncols(self) -> int:
        """Number of non-empty columns."""
        return len(self._cols)

    def copy(self) -> SparseMatrix:
        """Return an independent copy."""
        result = SparseMatrix()
        for row, col in self.elements():
            result.insert(row, col)
        return result

    def copy_row(self, dest_row: int, cols: Iterable[int]) -> None:
        """Set every column of ``cols`` in row ``dest_row``."""
        for col in cols:
            self.insert(dest_row, col)

    def copy_col(self, dest_col: int, rows: Iterable[int]) -> None:
        """Set every row of ``rows`` in column ``dest_col``."""
        for row in rows:
            self.insert(row, dest_col)

    def longest_row(self) -> SparseRow | None:
        """The first row of greatest length, or None if the matrix is empty."""
        return _first_longest(self._rows.values())

    def longest_col(self) -> SparseRow | None:
        """The first column of greatest length, or None if the matrix is empty."""
        return _first_longest(self._cols.values())

    def num_elements(self) -> int:
        """Number of set elements."""
        return sum(len(prow) for prow in self._rows.values())

    def elements(self) -> Iterator[tuple[int, int]]:
        """Yield (row, col) pairs in row-major order."""
        for row, prow in self._rows.items():
            for col in prow:
                yield row, col

    @classmethod
    def read(cls, fp: IO[str]) -> SparseMatrix:
        """Read whitespace-separated ``row col`` pairs."""
        tokens = fp.read().split()
        if len(tokens) % 2:
            raise ValueError("incomplete row/column pair")
        matrix = cls()
        pairs = iter(tokens)
        for row_text, col_text in zip(pairs, pairs):
            try:
                row, col = int(row_text), int(col_text)
            except ValueError as exc:
                raise ValueError(f"bad pair {row_text!r} {col_text!r}") from exc
            matrix.insert(row, col)
        return matrix

    @classmethod
    def read_compressed(cls, fp: IO[str]) -> SparseMatrix:
        """Read ``nrows ncols`` then, per row, one word and hex bit words of 32 columns."""
        tokens = iter(fp.read().split())

        def next_token() -> str:
            try:
                return next(tokens)
            except StopIteration:
                raise ValueError("unexpected end of compressed matrix") from None

        def next_int(base: int) -> int:
            text = next_token()
            try:
                return int(text, base)
            except ValueError as exc:
                raise ValueError(f"bad number {text!r}") from exc

        nrows = next_int(10)
        ncols = next_int(10)
        matrix = cls()
        for row in range(nrows):
            next_int(16)
            for base_col in range(0, ncols, 32):
                word = next_int(16)
                if word < 0:
                    raise ValueError(f"negative bit word {word:x}")
                col = base_col
                while word:
                    if word & 1:
                        matrix.insert(row, col)
                    word >>= 1
                    col += 1
        return matrix

    def write(self, fp: IO[str]) -> None:
        """Write one ``row col`` line per element."""
        for row, col in self.elements():
            fp.write(f"{row} {col}\n")

    def format(self) -> str:
        """A character picture of the matrix with column headings."""
        cols = list(self._cols.keys())
        last = cols[-1] if cols else 0
        lines = []
        if last >= 100:
            lines.append("    " + "".join(str(c // 100 % 10) for c in cols))
        if last >= 10:
            lines.append("    " + "".join(str(c // 10 % 10) for c in cols))
        lines.append("    " + "".join(str(c % 10) for c in cols))
        lines.append("    " + "-" * len(cols))
        for row, prow in self._rows.items():
            cells = "".join("1" if c in prow else "." for c in cols)
            lines.append(f"{row:3d}:{cells}")
        return "\n".join(lines) + "\n"

    def dump(self, title: str, max_rows: int) -> None:
        """Print a size summary, and the picture if there are fewer than ``max_rows`` rows."""
        print(f"{title} {self.nrows()} rows by {self.ncols()} cols", file=sys.stdout)
        if self.nrows() < max_rows:
            sys.stdout.write(self.format())


def _first_longest(vectors: Iterable[SparseRow]) -> SparseRow | None:
    best = None
    best_len = 0
    for vec in vectors:
        if len(vec) > best_len:
            best_len = len(vec)
            best = vec
    return best