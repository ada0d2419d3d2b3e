"""
Exceptions
Error types raised by the matrix helpers
"""


class DimensionError(ValueError):
    """Raised when matrix or vector dimensions do not fit an operation"""
