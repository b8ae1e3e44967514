# sparsecover

Data structures and small search routines for covering problems and
two-level logic minimization.

## Modules

- `sparsecover.sparse`
  - `SparseRow`: a sorted set of indices with `insert`, `remove`,
    membership, `is_contained_in`, `intersects`, `intersection`, a lexical
    `compare`, `hash_value(modulus)` and `format()`.
  - `SparseMatrix`: a sparse 0/1 matrix whose rows and columns exist only
    while they hold elements. It has `insert`, `find`, `remove`,
    `delete_row`, `delete_col`, `get_row`, `get_col`, `row_numbers`,
    `col_numbers`, `nrows`, `ncols`, `num_elements`, `elements`,
    `longest_row`, `longest_col`, `copy`, `copy_row` and `copy_col`. Text I/O
    goes through `SparseMatrix.read` (whitespace-separated `row col` pairs),
    `SparseMatrix.read_compressed` (a `nrows ncols` header, then per row one
    word followed by hexadecimal words of 32 columns each) and `write`.
    `format()` draws the matrix as `1`/`.` under column headings, and
    `dump(title, max_rows)` prints a size line and, for small matrices, that
    drawing.
- `sparsecover.partition`: `block_partition(matrix)` returns two matrices
  that share no rows or columns (the component of the first row, and the
  rest), or `None` if the matrix is empty or connected.
- `sparsecover.solution`: `Solution` holds a `cost` and the chosen columns
  in `row`. `add` records a column, `accept` also deletes the rows it covers
  from a matrix (raising `KeyError` if the column is absent), `reject`
  deletes the column from the matrix. `column_weight(weight, col)` is 1 when
  `weight` is `None`; `choose_best` returns the cheaper of two solutions,
  the first on a tie, and handles `None`.
- `sparsecover.pairing`: `Pairing` is a list of variable pairs numbered from
  1, with `add`, `copy` and `format()` (`"pair is (a b) ..."`).
  `all_pairings(n)` yields every maximal pairing of `n` variables;
  `pair_best_cost(cost, n)` returns the first pairing of greatest total
  gain; `greedy_best_cost(cost, n)` returns `(total, pairing)` built by
  repeatedly taking the free pair of greatest gain. `cost[i][j]` (`i < j`,
  numbered from 0) is the gain of pairing variables `i` and `j`.
- `sparsecover.setfamily`: bit sets held as Python integers, with
  `bit_index`, `set_ord`, `set_dist`, `full_set`, `format_set`,
  `bit_vector` and `adjust_counts`. `SetFamily(size, sets)` is an ordered
  list of such sets, each with an active flag, supporting `add`, `delete`,
  `copy`, `join`, `append`, `union_all`, `intersection_all`,
  `activate_all`, `set_active`, `drop_inactive`, `column_counts`,
  `column_counts_restricted`, column edits (`delete_columns`,
  `add_columns`, `shift_columns`, `copy_column`, `compress`, `permute`),
  `transpose`, the text forms `format()` and `format_bits()`, and I/O
  through `write`/`read` (hexadecimal words) and `read_bits` (lines of
  `0`/`1`).
- `sparsecover.timefmt`: `format_time(milliseconds)` gives `"S.hh sec"`.

## Installation

```
pip install sparsecover
```

## Example

```python
import io
from sparsecover.sparse import SparseMatrix
from sparsecover.partition import block_partition

m = SparseMatrix.read(io.StringIO("0 0\n0 1\n1 1\n2 5\n"))
print(m.nrows(), m.ncols())      # 3 3
print(m.format())

left, right = block_partition(m)
print(left.row_numbers(), right.row_numbers())   # [0, 1] [2]
```

```python
from sparsecover.pairing import pair_best_cost

cost = [[0, 3, 1, 0],
        [0, 0, 0, 2],
        [0, 0, 0, 4],
        [0, 0, 0, 0]]
print(pair_best_cost(cost, 4).format())   # pair is (1 2) (3 4)
```

## What it does not do

The package supplies the pieces a covering solver or logic minimizer is
built from, not the solver itself: there is no minimum-cover search, no
cube or cover minimization, no reading of logic descriptions, and no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```