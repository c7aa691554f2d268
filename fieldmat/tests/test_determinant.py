import pytest

import fieldmat.determinant
from fieldmat.determinant import (
    PerformanceWarning,
    cofactor,
    cofactor_matrix,
    determinant,
    determinant_with_cofactor_matrix,
    minor,
)
from fieldmat.matrix import MatrixShapeError


M = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


@pytest.mark.parametrize(
    "i, j, expected",
    [
        [0, 0, [[5, 6], [8, 9]]],
        [0, 1, [[4, 6], [7, 9]]],
        [0, 2, [[4, 5], [7, 8]]],
        [1, 0, [[2, 3], [8, 9]]],
        [1, 1, [[1, 3], [7, 9]]],
        [1, 2, [[1, 2], [7, 8]]],
        [2, 0, [[2, 3], [5, 6]]],
        [2, 1, [[1, 3], [4, 6]]],
        [2, 2, [[1, 2], [4, 5]]],
    ],
)
def test_minor(i, j, expected):
    assert minor(M, i, j) == expected


@pytest.mark.parametrize(
    "matrix, error",
    [
        [[], MatrixShapeError],
        [[[1, 2, 3], [4, 5, 6]], MatrixShapeError],
    ],
)
def test_minor_shape(matrix, error):
    with pytest.raises(error):
        minor(matrix, 0, 0)


@pytest.mark.parametrize(
    "matrix, expected",
    [
        # 1 * (40 - 48) - 2 * (32 - 42) + 3 * (32 - 35) = -8 + 20 - 9
        [[[1, 2, 3], [4, 5, 6], [7, 8, 8]], 3],
        [[[1, 2], [3, 8]], 2],
        [[[1, 2, 3], [4, 5, 6], [7, 8, 9]], 0],
        [[[5]], 5],
        [[[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], 1],
        [[], 0],
    ],
)
def test_determinant(bls, matrix, expected):
    assert determinant(bls, matrix) == expected


def test_determinant_negative(bls):
    assert determinant(bls, [[0, 1], [1, 0]]) == bls.element(-1)


def test_determinant_not_square(bls):
    with pytest.raises(MatrixShapeError):
        determinant(bls, [[1, 2, 3], [4, 5, 6]])


def test_cofactor(bls):
    assert cofactor(bls, [[7]], 0, 0) == 1
    assert cofactor(bls, [[1, 2], [3, 8]], 0, 1) == bls.element(-3)
    assert cofactor(bls, [[1, 2], [3, 8]], 1, 1) == 1


def test_cofactor_matrix(bls):
    expected = bls.matrix([[8, -3], [-2, 1]])
    assert cofactor_matrix(bls, [[1, 2], [3, 8]]) == expected


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 2, 3], [4, 5, 6], [7, 8, 8]],
        [[2, 3, 4], [4, 5, 6], [7, 8, 8]],
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    ],
)
def test_determinant_with_cofactor_matrix(bls, matrix):
    cofactors = cofactor_matrix(bls, matrix)
    assert determinant_with_cofactor_matrix(bls, matrix, cofactors) == determinant(
        bls, matrix
    )


def test_large_expansion_warns(bls, monkeypatch):
    monkeypatch.setattr(fieldmat.determinant, "COFACTOR_WARN_SIZE", 2)
    with pytest.warns(PerformanceWarning):
        determinant(bls, [[1, 2, 3], [4, 5, 6], [7, 8, 8]])
    with pytest.warns(PerformanceWarning):
        cofactor_matrix(bls, [[1, 2, 3], [4, 5, 6], [7, 8, 8]])
