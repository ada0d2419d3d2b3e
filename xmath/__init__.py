"""
Matrix helpers for 2D/3D rendering transforms
Contains the Matrix and vector types plus flatten, translate and multiply_by_vector
"""

from .data_structures import (
    Size,
    Vector,
    Vector2,
    Vector3
)
from .exceptions import DimensionError
from .matrix import Matrix
from .matrix_helper import (
    flatten,
    translate,
    multiply_by_vector,
    create_translation_matrix,
    DEFAULT_FILL_VALUE
)

__all__ = [
    'Size',
    'Vector',
    'Vector2',
    'Vector3',
    'DimensionError',
    'Matrix',
    'flatten',
    'translate',
    'multiply_by_vector',
    'create_translation_matrix',
    'DEFAULT_FILL_VALUE',
]
