"""
Matrix helper utilities for 2D/3D transformations
Provides flattening, translation and matrix-vector multiplication on top of Matrix
"""

import logging
from typing import List

from .data_structures import Vector, Vector2, Vector3
from .exceptions import DimensionError
from .matrix import Matrix

logger = logging.getLogger(__name__)

# Fill for column entries beyond the vector's own components.
# TODO: decide whether 0 is the better default for non-homogeneous callers
DEFAULT_FILL_VALUE = 1.0


def _fail(message: str, vector, height: int, width: int) -> DimensionError:
    logger.debug("%s (matrix %dx%d, vector %r)", message, height, width, vector)
    return DimensionError(message)


def flatten(matrix: Matrix) -> List[float]:
    """
    Create a flat, row-major representation of a matrix

    Args:
        matrix: Matrix to flatten

    Returns:
        List of entries, all columns of row 0 first, then row 1 and so on.
        Empty if the matrix has no rows or no columns.
    """
    size = matrix.get_size()

    if size.height == 0 or size.width == 0:
        return []

    result = []
    for j in range(size.height):
        for i in range(size.width):
            result.append(matrix.get_value_at(i, j))
    return result


def create_translation_matrix(vector: Vector, size: int) -> Matrix:
    """
    Create a homogeneous translation matrix

    A Vector2 needs a 3x3 matrix, a Vector3 a 4x4 matrix.

    Args:
        vector: Translation offset
        size: Row and column count of the transformation matrix

    Returns:
        Identity matrix with the offset in its last column

    Raises:
        DimensionError: If the vector does not fit the size
    """
    transformation = Matrix.create_identity_matrix(size)

    if isinstance(vector, Vector2) and size == 3:
        transformation.set_value_at(2, 0, vector.x)
        transformation.set_value_at(2, 1, vector.y)
    elif isinstance(vector, Vector3) and size == 4:
        transformation.set_value_at(3, 0, vector.x)
        transformation.set_value_at(3, 1, vector.y)
        transformation.set_value_at(3, 2, vector.z)
    else:
        raise _fail("translation failed", vector, size, size)

    return transformation


def translate(matrix: Matrix, vector: Vector) -> Matrix:
    """
    Translate a 3x3 or 4x4 matrix by a vector

    In the 3x3 case the vector has to be a Vector2, in the 4x4 case a
    Vector3. The input matrix is multiplied by the translation matrix
    (matrix x T) and left untouched.

    Args:
        matrix: Square transformation matrix
        vector: Translation offset

    Returns:
        New translated matrix

    Raises:
        DimensionError: If the matrix is not square or does not fit the vector
    """
    if not matrix.is_square():
        size = matrix.get_size()
        raise _fail("non-square matrix", vector, size.height, size.width)

    transformation = create_translation_matrix(vector, matrix.get_size().height)

    return matrix.multiply(transformation)


def multiply_by_vector(matrix: Matrix, vector: Vector, fill_value: float = DEFAULT_FILL_VALUE) -> Matrix:
    """
    Multiply a matrix by a vector treated as a column

    The column has one entry per matrix column. Its leading entries are the
    vector components, the rest hold fill_value.

    Args:
        matrix: Matrix at least 2 columns wide for a Vector2, 3 for a Vector3
        vector: Vector2 or Vector3
        fill_value: Entry used past the vector components
            (default: DEFAULT_FILL_VALUE)

    Returns:
        New [height x 1] matrix

    Raises:
        DimensionError: If the vector type is unknown or the matrix too narrow
    """
    size = matrix.get_size()

    if isinstance(vector, Vector2) and size.width >= 2:
        components = vector.components()
    elif isinstance(vector, Vector3) and size.width >= 3:
        components = vector.components()
    else:
        raise _fail("multiplication by vector failed", vector, size.height, size.width)

    column = [[fill_value] for _ in range(size.width)]
    for row, value in enumerate(components):
        column[row][0] = value

    return matrix.multiply(Matrix(column))
