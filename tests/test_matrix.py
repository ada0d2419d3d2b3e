"""
Unit tests for the Matrix type

Tests cover:
- Construction from rows and arrays
- Size, squareness and indexed access
- Identity construction
- Multiplication and its shape check
"""

import numpy as np
import pytest

from xmath import DimensionError, Matrix, Size


class TestConstruction:
    """Tests for building matrices"""

    def test_from_rows(self, rect_2x3):
        """Rows become height, row length becomes width"""
        assert rect_2x3.get_size() == Size(width=3, height=2)
        assert rect_2x3.to_list() == [[1, 2, 3], [4, 5, 6]]

    def test_empty_rows_is_0x0(self):
        assert Matrix([]).get_size() == Size(width=0, height=0)

    def test_single_empty_row(self):
        assert Matrix([[]]).get_size() == Size(width=0, height=1)

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError):
            Matrix([[1, 2], [3]])

    def test_non_2d_rejected(self):
        with pytest.raises(ValueError):
            Matrix([1, 2, 3])

    def test_copies_input(self):
        """Changing the source array does not change the matrix"""
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix(data)
        data[0, 0] = 99
        assert m.get_value_at(0, 0) == 1
        m.to_array()[1, 1] = 42
        assert m.get_value_at(1, 1) == 4


class TestAccess:
    """Tests for indexed reads and writes"""

    def test_column_first_indexing(self, rect_2x3):
        assert rect_2x3.get_value_at(2, 0) == 3
        assert rect_2x3.get_value_at(0, 1) == 4

    def test_set_value(self, identity3):
        identity3.set_value_at(2, 0, 7)
        assert identity3.get_value_at(2, 0) == 7
        assert identity3.to_list()[0] == [1, 0, 7]

    @pytest.mark.parametrize("column,row", [(3, 0), (0, 2), (-1, 0)])
    def test_out_of_range(self, rect_2x3, column, row):
        with pytest.raises(IndexError):
            rect_2x3.get_value_at(column, row)

    def test_is_square(self, identity3, rect_2x3):
        assert identity3.is_square()
        assert not rect_2x3.is_square()
        assert Matrix([]).is_square()


class TestIdentityAndMultiply:
    """Tests for identity construction and multiplication"""

    def test_identity(self):
        assert Matrix.create_identity_matrix(2) == Matrix([[1, 0], [0, 1]])

    def test_negative_identity_size(self):
        with pytest.raises(ValueError):
            Matrix.create_identity_matrix(-1)

    def test_multiply_shape(self, rect_2x3):
        column = Matrix([[1], [1], [1]])
        result = rect_2x3.multiply(column)
        assert result == Matrix([[6], [15]])
        assert result.get_size() == Size(width=1, height=2)

    def test_multiply_mismatch(self, rect_2x3):
        with pytest.raises(DimensionError):
            rect_2x3.multiply(rect_2x3)

    def test_multiply_by_identity(self, rect_2x3, identity3):
        assert rect_2x3.multiply(identity3) == rect_2x3

    def test_multiply_returns_new_matrix(self, identity3):
        result = identity3.multiply(identity3)
        result.set_value_at(0, 0, 5)
        assert identity3.get_value_at(0, 0) == 1

    def test_equality(self, rect_2x3):
        assert rect_2x3 == Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert rect_2x3 != Matrix([[1, 2], [4, 5]])
        assert rect_2x3 != [[1, 2, 3], [4, 5, 6]]
