"""Matrix inversion over a finite field.

Two independent methods are provided. invert reduces the matrix by Gaussian
elimination while replaying every row operation on a shadow matrix that
starts as the identity and ends as the inverse. invert_with_cofactors scales
the adjugate by the inverse determinant, and serves as a cross-check.

invert always pivots on the first remaining row and never swaps rows, so it
expects every leading principal minor to be non-zero, as holds for the
Cauchy/MDS matrices it is used on. A zero pivot raises ZeroPivotError.
"""

from fieldmat.field import Field
from fieldmat.matrix import (
    MatrixShapeError,
    ZeroPivotError,
    require_square,
    columns,
    is_square,
    make_identity,
    rows,
    scalar_mul,
    scalar_vec_mul,
    transpose,
    vec_sub,
)
from fieldmat.determinant import (
    cofactor_matrix,
    determinant,
    determinant_with_cofactor_matrix,
)


def invert_with_cofactors(field: Field, matrix: list[list]) -> list[list] | None:
    """Invert a square matrix via its adjugate, returning None if it is singular."""
    cofactors = cofactor_matrix(field, matrix)
    det = determinant_with_cofactor_matrix(field, matrix, cofactors)
    adjugate = transpose(cofactors)

    det_inv = field.inverse(det)
    if det_inv is None:
        return None
    return scalar_mul(field, det_inv, adjugate)


def is_invertible(field: Field, matrix: list[list]) -> bool:
    return is_square(matrix) and determinant(field, matrix) != field.zero


def eliminate(
    field: Field,
    matrix: list[list],
    column: int,
    pivot_index: int,
    shadow: list[list],
) -> list[list]:
    """
    Clear column from every row but the pivot row, mirroring each step on shadow.

    Parameters
    ----------
    field : Field
        The field the entries live in.
    matrix : list[list]
        Matrix being reduced.
    column : int
        Column to eliminate.
    pivot_index : int
        Row whose entry in column is used as the pivot.
    shadow : list[list]
        Matrix with the same rows as matrix, modified in place.

    Returns
    -------
    list[list]
        The reduced matrix with the pivot row moved first. shadow is
        reordered the same way.
    """
    pivot = matrix[pivot_index]
    inv_pivot = field.inverse(pivot[column])
    if inv_pivot is None:
        raise ZeroPivotError(f"zero pivot in row {pivot_index}, column {column}")

    result = [list(pivot)]
    shadow_result = [shadow[pivot_index]]

    for i, row in enumerate(matrix):
        if i == pivot_index:
            continue
        val = row[column]
        if val == field.zero:
            # Already eliminated.
            result.append(list(row))
            shadow_result.append(shadow[i])
            continue

        factor = field.mul(val, inv_pivot)
        result.append(vec_sub(field, row, scalar_vec_mul(field, factor, pivot)))
        shadow_result.append(
            vec_sub(field, shadow[i], scalar_vec_mul(field, factor, shadow[pivot_index]))
        )

    shadow[:] = shadow_result
    return result


def upper_triangular(field: Field, matrix: list[list], shadow: list[list]) -> list[list]:
    """Reduce a square matrix to upper triangular form, applying the same row operations to shadow in place."""
    require_square(matrix, "upper_triangular")
    if rows(matrix) == 0:
        raise MatrixShapeError("upper_triangular of an empty matrix")

    result = []
    shadow_result = []

    curr = [list(row) for row in matrix]
    column = 0
    while len(curr) > 1:
        curr = eliminate(field, curr, column, 0, shadow)
        result.append(curr[0])
        shadow_result.append(shadow[0])
        column += 1

        curr = curr[1:]
        del shadow[0]

    result.append(curr[0])
    shadow_result.append(shadow[0])

    shadow[:] = shadow_result
    return result


def solve(field: Field, matrix: list[list], shadow: list[list]) -> list[list]:
    """
    Back-substitute an upper triangular matrix to the identity.

    Rows are normalised from the bottom up, and each is cleared of the
    columns to its right using the rows already processed. Every operation
    is applied to shadow as well, which is replaced in place.

    Parameters
    ----------
    field : Field
        The field the entries live in.
    matrix : list[list]
        Upper triangular square matrix.
    shadow : list[list]
        Matrix carrying the row operations, modified in place.

    Returns
    -------
    list[list]
        The reduced matrix, the identity unless matrix was singular.
    """
    size = rows(matrix)
    result = []
    shadow_result = []

    for i in range(size):
        idx = size - i - 1
        inv = field.inverse(matrix[idx][idx])
        if inv is None:
            raise ZeroPivotError(f"zero on the diagonal in row {idx}: matrix is singular")

        normalized = scalar_vec_mul(field, inv, matrix[idx])
        shadow_normalized = scalar_vec_mul(field, inv, shadow[idx])

        for j in range(i):
            val = normalized[size - j - 1]
            normalized = vec_sub(field, normalized, scalar_vec_mul(field, val, result[j]))
            shadow_normalized = vec_sub(
                field, shadow_normalized, scalar_vec_mul(field, val, shadow_result[j])
            )

        result.append(normalized)
        shadow_result.append(shadow_normalized)

    result.reverse()
    shadow_result.reverse()

    shadow[:] = shadow_result
    return result


def invert(field: Field, matrix: list[list]) -> list[list]:
    """
    Invert a square matrix by Gaussian elimination.

    Parameters
    ----------
    field : Field
        The field the entries live in.
    matrix : list[list]
        Square, non-empty matrix whose leading principal minors are non-zero.

    Returns
    -------
    list[list]
        The inverse of matrix.

    Raises
    ------
    MatrixShapeError
        If matrix is empty or not square.
    ZeroPivotError
        If matrix is singular, or a pivot is zero.
    """
    shadow = make_identity(field, columns(matrix))
    upper = upper_triangular(field, matrix, shadow)
    solve(field, upper, shadow)
    return shadow
