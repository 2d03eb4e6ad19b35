import pytest

from dsdrills.matrices import (
    add,
    difference,
    format_matrix,
    identical,
    multiply,
    transpose,
)

A = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
B = [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
ZERO = [[0, 0, 0], [0, 0, 0], [0, 0, 0]]


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2\n3 4"


def test_add_zero_is_identity():
    assert add(A, ZERO) == A


def test_add_commutative():
    assert add(A, B) == add(B, A)


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add(A, [[1, 2], [3, 4]])


def test_multiply_identity():
    assert multiply(A, IDENTITY) == A
    assert multiply(IDENTITY, B) == B


def test_multiply_permutation():
    assert multiply([[1, 2], [3, 4]], [[0, 1], [1, 0]]) == [[2, 1], [4, 3]]


def test_multiply_transpose_rule():
    assert transpose(multiply(A, B)) == multiply(transpose(B), transpose(A))


def test_multiply_rectangular_shape():
    result = multiply([[1, 2, 3]], [[1], [2], [3]])
    assert len(result) == 1 and len(result[0]) == 1


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_transpose_twice_round_trip():
    assert transpose(transpose(A)) == A


def test_transpose_swaps_indices():
    t = transpose(A)
    assert all(t[j][i] == A[i][j] for i in range(3) for j in range(3))


def test_transpose_ragged_raises():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_identical():
    assert identical(A, [row[:] for row in A]) is True
    assert identical(A, B) is False


def test_difference_self_is_zero():
    assert difference(A, A) == ZERO


def test_difference_add_round_trip():
    assert add(difference(A, B), B) == A


def test_difference_shape_mismatch():
    with pytest.raises(ValueError):
        difference(A, [[1]])