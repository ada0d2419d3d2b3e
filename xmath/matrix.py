"""
Matrix
Rectangular matrix of scalars backed by a numpy array

Entries are addressed column first: get_value_at(column, row).
"""

from typing import List, Sequence, Union

import numpy as np

from .data_structures import Size
from .exceptions import DimensionError


class Matrix:
    """
    Rectangular grid of numeric scalars

    The matrix is immutable by convention. Operations always return a new
    Matrix; set_value_at is only meant for matrices still being built.
    """

    def __init__(self, rows: Union[Sequence[Sequence[float]], np.ndarray]):
        """
        Create a matrix from a nested sequence of rows or a 2D array

        Args:
            rows: Row-major nested sequence, or a 2D numpy array. The data
                is copied.

        Raises:
            ValueError: If the rows are ragged or the data is not 2D
        """
        try:
            data = np.array(rows, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Matrix rows must be rectangular and numeric: {e}") from e

        # An empty row list is the degenerate 0x0 matrix
        if data.ndim == 1 and data.size == 0:
            data = data.reshape(0, 0)
        if data.ndim != 2:
            raise ValueError(f"Matrix data must be 2 dimensional, got shape {data.shape}")

        self._data = data

    @staticmethod
    def create_identity_matrix(size: int) -> 'Matrix':
        """
        Create a square identity matrix

        Args:
            size: Number of rows and columns

        Returns:
            New size x size identity matrix
        """
        if size < 0:
            raise ValueError(f"Identity size must be non-negative, got {size}")
        return Matrix(np.identity(size))

    def get_size(self) -> Size:
        """Return the width (columns) and height (rows)"""
        height, width = self._data.shape
        return Size(width=width, height=height)

    def is_square(self) -> bool:
        height, width = self._data.shape
        return height == width

    def _check_index(self, column: int, row: int):
        height, width = self._data.shape
        if not (0 <= column < width and 0 <= row < height):
            raise IndexError(
                f"Entry ({column}, {row}) is outside a {width}x{height} matrix"
            )

    def get_value_at(self, column: int, row: int) -> float:
        """
        Read a single entry

        Args:
            column: 0-based column index
            row: 0-based row index

        Returns:
            The scalar stored at (column, row)
        """
        self._check_index(column, row)
        return self._data[row, column].item()

    def set_value_at(self, column: int, row: int, value: float):
        """
        Write a single entry in place

        Args:
            column: 0-based column index
            row: 0-based row index
            value: New scalar value
        """
        self._check_index(column, row)
        self._data[row, column] = value

    def multiply(self, other: 'Matrix') -> 'Matrix':
        """
        Multiply this matrix by another (self x other)

        Args:
            other: Right hand matrix, its height must equal this width

        Returns:
            New matrix of shape [self.height x other.width]

        Raises:
            DimensionError: If the inner dimensions do not match
        """
        if self._data.shape[1] != other._data.shape[0]:
            raise DimensionError(
                f"Cannot multiply {self._data.shape[0]}x{self._data.shape[1]} "
                f"by {other._data.shape[0]}x{other._data.shape[1]} matrix"
            )
        return Matrix(np.dot(self._data, other._data))

    def to_array(self) -> np.ndarray:
        """Return a copy of the entries as a (height, width) numpy array"""
        return self._data.copy()

    def to_list(self) -> List[List[float]]:
        """Return the entries as a list of rows"""
        return self._data.tolist()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"
