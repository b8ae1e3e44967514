import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sparsecover.sparse import SparseMatrix, SparseRow

pairs_strategy = st.lists(
    st.tuples(st.integers(0, 30), st.integers(0, 30)), max_size=60
)


def build(pairs):
    matrix = SparseMatrix()
    for row, col in pairs:
        matrix.insert(row, col)
    return matrix


def test_row_insert_keeps_sorted_and_unique():
    row = SparseRow()
    assert row.insert(5) is True
    assert row.insert(1) is True
    assert row.insert(5) is False
    assert list(row) == [1, 5]
    assert len(row) == 2


def test_row_remove_and_contains():
    row = SparseRow([3, 4, 7])
    row.remove(4)
    row.remove(100)
    assert 4 not in row
    assert list(row) == [3, 7]


def test_row_copy_is_independent():
    row = SparseRow([1, 2], number=9)
    dup = row.copy()
    dup.insert(3)
    assert list(row) == [1, 2]
    assert dup.number == 9


def test_row_containment_and_intersection():
    small = SparseRow([2, 4])
    big = SparseRow([1, 2, 3, 4])
    assert small.is_contained_in(big)
    assert not big.is_contained_in(small)
    assert small.intersects(big)
    assert not SparseRow([1]).intersects(SparseRow([2]))
    assert not SparseRow().intersects(big)
    assert list(small.intersection(big)) == [2, 4]
    assert len(SparseRow([1]).intersection(SparseRow([2]))) == 0


def test_row_compare():
    assert SparseRow([1, 2]).compare(SparseRow([1, 3])) < 0
    assert SparseRow([1, 3]).compare(SparseRow([1, 2])) > 0
    assert SparseRow([1, 2]).compare(SparseRow([1, 2])) == 0
    assert SparseRow([1, 2, 3]).compare(SparseRow([1, 2])) == 1
    assert SparseRow([1, 2]).compare(SparseRow([1, 2, 3])) == -1


@given(st.lists(st.integers(0, 1000)), st.integers(1, 97))
def test_row_hash_range_and_consistency(cols, modulus):
    a = SparseRow(cols)
    b = SparseRow(reversed(cols))
    h = a.hash_value(modulus)
    assert 0 <= h < modulus
    assert h == b.hash_value(modulus)


def test_row_format():
    assert SparseRow([3, 1]).format() == " 1 3"
    assert SparseRow().format() == ""


def test_matrix_insert_find():
    matrix = SparseMatrix()
    assert matrix.insert(2, 3) is True
    assert matrix.insert(2, 3) is False
    assert matrix.find(2, 3)
    assert not matrix.find(3, 2)
    assert matrix.nrows() == 1
    assert matrix.ncols() == 1


def test_matrix_rejects_negative_index():
    with pytest.raises(ValueError):
        SparseMatrix().insert(-1, 0)


def test_remove_drops_empty_headers():
    matrix = build([(0, 0), (0, 1), (1, 1)])
    matrix.remove(0, 0)
    assert matrix.col_numbers() == [1]
    assert matrix.row_numbers() == [0, 1]
    matrix.remove(1, 1)
    assert matrix.row_numbers() == [0]
    matrix.remove(5, 5)
    assert list(matrix.elements()) == [(0, 1)]


def test_delete_row_and_col():
    matrix = build([(0, 0), (0, 1), (1, 1), (2, 2)])
    matrix.delete_row(0)
    assert matrix.get_col(0) is None
    assert list(matrix.get_col(1)) == [1]
    matrix.delete_col(2)
    assert matrix.get_row(2) is None
    assert list(matrix.elements()) == [(1, 1)]


def test_copy_row_and_col():
    matrix = SparseMatrix()
    matrix.copy_row(4, SparseRow([1, 2]))
    matrix.copy_col(7, [0, 4])
    assert list(matrix.elements()) == [(0, 7), (4, 1), (4, 2), (4, 7)]


def test_longest_row_and_col():
    assert SparseMatrix().longest_row() is None
    assert SparseMatrix().longest_col() is None
    matrix = build([(0, 0), (1, 0), (1, 1), (2, 2), (2, 3)])
    assert matrix.longest_row().number == 1
    assert matrix.longest_col().number == 0


def test_read_write_round_trip():
    matrix = build([(3, 1), (0, 2), (3, 0)])
    out = io.StringIO()
    matrix.write(out)
    assert out.getvalue().splitlines()[0] == "0 2"
    assert SparseMatrix.read(io.StringIO(out.getvalue())) == matrix


def test_read_errors():
    with pytest.raises(ValueError):
        SparseMatrix.read(io.StringIO("1 2 3"))
    with pytest.raises(ValueError):
        SparseMatrix.read(io.StringIO("a b"))


def test_read_compressed():
    matrix = SparseMatrix.read_compressed(io.StringIO("2 3\n0 5\n0 2\n"))
    assert list(matrix.elements()) == [(0, 0), (0, 2), (1, 1)]
    wide = SparseMatrix.read_compressed(io.StringIO("1 40\n0 0 1\n"))
    assert list(wide.elements()) == [(0, 32)]


def test_read_compressed_truncated():
    with pytest.raises(ValueError):
        SparseMatrix.read_compressed(io.StringIO("2 3\n0 5\n"))
    with pytest.raises(ValueError):
        SparseMatrix.read_compressed(io.StringIO("1"))


def test_format_picture():
    matrix = build([(0, 0), (0, 2), (1, 2), (12, 5)])
    assert matrix.format() == "    025\n    ---\n  0:11.\n  1:.1.\n 12:..1\n"


def test_format_heading_lines():
    matrix = build([(0, 5), (1, 123)])
    lines = matrix.format().splitlines()
    assert len(lines) == 4 + matrix.nrows()
    assert lines[3] == "    --"


def test_dump(capsys):
    matrix = build([(0, 0), (1, 1)])
    matrix.dump("t", 10)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "t 2 rows by 2 cols"
    assert len(out) == 1 + len(matrix.format().splitlines())
    matrix.dump("t", 2)
    assert capsys.readouterr().out == "t 2 rows by 2 cols\n"


@given(pairs_strategy)
def test_matrix_invariants(pairs):
    matrix = build(pairs)
    expected = sorted(set(pairs))
    assert list(matrix.elements()) == expected
    assert matrix.num_elements() == len(expected)
    for row in matrix.row_numbers():
        for col in matrix.get_row(row):
            assert row in matrix.get_col(col)
    assert sum(len(matrix.get_col(c)) for c in matrix.col_numbers()) == len(expected)
    dup = matrix.copy()
    assert dup == matrix
    out = io.StringIO()
    matrix.write(out)
    assert SparseMatrix.read(io.StringIO(out.getvalue())) == matrix


@given(pairs_strategy)
def test_deleting_all_rows_empties(pairs):
    matrix = build(pairs)
    for row in matrix.row_numbers():
        matrix.delete_row(row)
    assert matrix.nrows() == 0
    assert matrix.ncols() == 0
    assert matrix.num_elements() == 0


@given(pairs_strategy)
def test_removing_all_elements_empties(pairs):
    matrix = build(pairs)
    for row, col in set(pairs):
        matrix.remove(row, col)
    assert list(matrix.elements()) == []
    assert matrix.col_numbers() == []