"""Determinants and cofactors by Laplace expansion.

The expansion is recursive and its cost grows factorially with the size of
the matrix, which is fine for the small matrices used when generating
permutation constants.
"""

import warnings

from fieldmat.field import Field
from fieldmat.matrix import MatrixShapeError, require_square, rows, columns

# Matrices larger than this trigger a PerformanceWarning under cofactor expansion.
COFACTOR_WARN_SIZE = 8


class PerformanceWarning(UserWarning):
    pass


def _warn_if_large(matrix: list[list]):
    if rows(matrix) > COFACTOR_WARN_SIZE:
        warnings.warn(
            f"Cofactor expansion of a {rows(matrix)}x{rows(matrix)} matrix is very slow; "
            "consider inverse.invert instead.",
            PerformanceWarning,
            stacklevel=3,
        )


def minor(matrix: list[list], i: int, j: int) -> list[list]:
    """Delete row i and column j from a square matrix."""
    require_square(matrix, "minor")
    size = rows(matrix)
    if size == 0:
        raise MatrixShapeError("minor of an empty matrix")
    if not (0 <= i < size and 0 <= j < size):
        raise IndexError(f"({i}, {j}) is out of range for a {size}x{size} matrix")

    return [
        [val for jj, val in enumerate(row) if jj != j]
        for ii, row in enumerate(matrix)
        if ii != i
    ]


def cofactor(field: Field, matrix: list[list], i: int, j: int):
    """Signed minor determinant of entry (i, j)."""
    if rows(matrix) == 1:
        minor_det = field.one
    else:
        minor_det = _laplace(field, minor(matrix, i, j))

    if (i + j) % 2 == 0:
        return minor_det
    return field.neg(minor_det)


def _laplace(field: Field, matrix: list[list]):
    acc = field.zero
    for j in range(columns(matrix)):
        acc = field.add(acc, field.mul(matrix[0][j], cofactor(field, matrix, 0, j)))
    return acc


def determinant(field: Field, matrix: list[list]):
    """
    Compute the determinant of a square matrix by expansion along the first row.

    Parameters
    ----------
    field : Field
        The field the entries live in.
    matrix : list[list]
        Square matrix of field elements.

    Returns
    -------
    int
        The determinant. The empty matrix has determinant zero.
    """
    require_square(matrix, "determinant")
    _warn_if_large(matrix)
    return _laplace(field, matrix)


def cofactor_matrix(field: Field, matrix: list[list]) -> list[list]:
    """Matrix of the cofactors of every entry of a square matrix."""
    require_square(matrix, "cofactor_matrix")
    _warn_if_large(matrix)
    size = rows(matrix)
    return [[cofactor(field, matrix, i, j) for j in range(size)] for i in range(size)]


def determinant_with_cofactor_matrix(
    field: Field, matrix: list[list], cofactors: list[list]
):
    """Determinant of matrix, reusing its already computed cofactor matrix."""
    acc = field.zero
    if not matrix:
        return acc
    for val, cof in zip(matrix[0], cofactors[0]):
        acc = field.add(acc, field.mul(val, cof))
    return acc
