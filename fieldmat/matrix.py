"""Matrix and vector primitives over a finite field.

A matrix is a list of rows, each a list of field elements, so that
``matrix[i][j]`` is the entry in row i and column j. Vectors are plain lists.
Every function takes the field as its first argument.
"""

from fieldmat.field import Field


class MatrixShapeError(ValueError):
    """A matrix or vector does not have the shape an operation requires."""


class MalformedMatrixError(MatrixShapeError):
    """The rows of a matrix do not all have the same length."""


class ZeroPivotError(ZeroDivisionError):
    """Row reduction met a zero pivot."""


def rows(matrix: list[list]) -> int:
    return len(matrix)


def columns(matrix: list[list]) -> int:
    """Number of columns in matrix, raising MalformedMatrixError if rows differ in length."""
    if not matrix:
        return 0
    length = len(matrix[0])
    for i in range(1, rows(matrix)):
        if len(matrix[i]) != length:
            raise MalformedMatrixError(
                f"row {i} has {len(matrix[i])} entries, expected {length}"
            )
    return length


def is_square(matrix: list[list]) -> bool:
    return rows(matrix) == columns(matrix)


def require_square(matrix: list[list], operation: str):
    if not is_square(matrix):
        raise MatrixShapeError(
            f"{operation} requires a square matrix, got {rows(matrix)}x{columns(matrix)}"
        )


def _check_lengths(a: list, b: list):
    if len(a) != len(b):
        raise MatrixShapeError(f"vectors must have equal length, got {len(a)} and {len(b)}")


def transpose(matrix: list[list]) -> list[list]:
    """Swap rows and columns of a well-formed matrix."""
    n_cols = columns(matrix)
    return [[row[j] for row in matrix] for j in range(n_cols)]


def make_identity(field: Field, size: int) -> list[list]:
    """Construct the size x size identity matrix."""
    result = [[field.zero] * size for _ in range(size)]
    for i in range(size):
        result[i][i] = field.one
    return result


def is_identity(field: Field, matrix: list[list]) -> bool:
    """Check whether matrix has ones on the diagonal and zeros elsewhere."""
    for i in range(rows(matrix)):
        for j in range(columns(matrix)):
            kronecker = field.one if i == j else field.zero
            if matrix[i][j] != kronecker:
                return False
    return True


def scalar_mul(field: Field, scalar, matrix: list[list]) -> list[list]:
    """Multiply every entry of matrix by scalar."""
    return [scalar_vec_mul(field, scalar, row) for row in matrix]


def scalar_vec_mul(field: Field, scalar, vec: list) -> list:
    """Multiply every entry of vec by scalar."""
    return [field.mul(scalar, val) for val in vec]


def hadamard_vec_mul(field: Field, a: list, b: list) -> list:
    """Multiply two vectors element-wise."""
    _check_lengths(a, b)
    return [field.mul(x, y) for x, y in zip(a, b)]


def vec_add(field: Field, a: list, b: list) -> list:
    _check_lengths(a, b)
    return [field.add(x, y) for x, y in zip(a, b)]


def vec_sub(field: Field, a: list, b: list) -> list:
    _check_lengths(a, b)
    return [field.sub(x, y) for x, y in zip(a, b)]


def vec_mul(field: Field, a: list, b: list):
    """Dot product of two vectors."""
    _check_lengths(a, b)
    acc = field.zero
    for x, y in zip(a, b):
        acc = field.add(acc, field.mul(x, y))
    return acc


def mat_mul(field: Field, a: list[list], b: list[list]) -> list[list] | None:
    """
    Multiply two matrices.

    Parameters
    ----------
    field : Field
        The field the entries live in.
    a : list[list]
        Left operand, of shape m x k.
    b : list[list]
        Right operand, of shape k x n.

    Returns
    -------
    list[list] | None
        The m x n product, or None if the inner dimensions of a and b differ.
    """
    if columns(a) != rows(b):
        return None

    b_t = transpose(b)
    return [[vec_mul(field, row, col) for col in b_t] for row in a]


def _check_applicable(matrix: list[list], vec: list):
    if not is_square(matrix):
        raise MatrixShapeError("Only a square matrix can be applied to a vector.")
    if rows(matrix) != len(vec):
        raise MatrixShapeError(
            f"Matrix can only be applied to a vector of the same size, got {rows(matrix)} and {len(vec)}."
        )


def left_apply_matrix(field: Field, matrix: list[list], vec: list) -> list:
    """Compute MV, treating vec as a column vector."""
    _check_applicable(matrix, vec)
    return [vec_mul(field, row, vec) for row in matrix]


def apply_matrix(field: Field, matrix: list[list], vec: list) -> list:
    """Compute VM, treating vec as a row vector."""
    _check_applicable(matrix, vec)

    result = [field.zero] * len(vec)
    for i, row in enumerate(matrix):
        for j, val in enumerate(row):
            result[j] = field.add(result[j], field.mul(val, vec[i]))
    return result
