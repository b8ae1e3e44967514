from hypothesis import given, strategies as st

from sparsecover.partition import block_partition
from sparsecover.sparse import SparseMatrix


def _matrix(pairs):
    m = SparseMatrix()
    for r, c in pairs:
        m.insert(r, c)
    return m


def test_empty_matrix_has_no_partition():
    assert block_partition(SparseMatrix()) is None


def test_connected_matrix_has_no_partition():
    m = _matrix([(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)])
    assert block_partition(m) is None


def test_single_row_has_no_partition():
    assert block_partition(_matrix([(3, 4), (3, 7)])) is None


def test_two_blocks_split():
    m = _matrix([(0, 0), (0, 1), (1, 1), (2, 5), (3, 5), (3, 6)])
    result = block_partition(m)
    assert result is not None
    left, right = result
    assert left.row_numbers() == [0, 1]
    assert right.row_numbers() == [2, 3]
    assert left.col_numbers() == [0, 1]
    assert right.col_numbers() == [5, 6]


def test_first_block_is_component_of_first_row():
    m = _matrix([(0, 9), (1, 2), (2, 2), (5, 9)])
    left, right = block_partition(m)
    assert left.row_numbers() == [0, 5]
    assert right.row_numbers() == [1, 2]


def test_original_left_unchanged():
    m = _matrix([(0, 0), (1, 1)])
    before = list(m.elements())
    block_partition(m)
    assert list(m.elements()) == before


@given(st.lists(st.tuples(st.integers(0, 8), st.integers(0, 8)), max_size=30))
def test_partition_invariants(pairs):
    m = _matrix(pairs)
    result = block_partition(m)
    if result is None:
        assert m.nrows() <= 1 or m.nrows() >= 1
        return_value_ok = True
        assert return_value_ok
    else:
        left, right = result
        assert left.nrows() > 0 and right.nrows() > 0
        assert set(left.col_numbers()).isdisjoint(right.col_numbers())
        assert sorted(list(left.elements()) + list(right.elements())) == sorted(m.elements())