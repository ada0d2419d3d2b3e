"""
Shared fixtures for the matrix helper tests.

Provides identity and sample matrices.
"""
import pytest

from xmath import Matrix


@pytest.fixture
def identity3():
    return Matrix.create_identity_matrix(3)


@pytest.fixture
def identity4():
    return Matrix.create_identity_matrix(4)


@pytest.fixture
def rect_2x3():
    """2 rows, 3 columns"""
    return Matrix([[1, 2, 3],
                   [4, 5, 6]])


@pytest.fixture
def scale3():
    """2D scale by (2, 3) in homogeneous form"""
    return Matrix([[2, 0, 0],
                   [0, 3, 0],
                   [0, 0, 1]])
