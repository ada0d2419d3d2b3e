"""
Data structures for the matrix helpers
Defines the value types passed to and returned from matrix operations
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Size:
    """Width (column count) and height (row count) of a matrix"""
    width: int
    height: int


@dataclass(frozen=True)
class Vector2:
    """2D vector"""
    x: float
    y: float

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Vector3:
    """3D vector"""
    x: float
    y: float
    z: float

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


Vector = Union[Vector2, Vector3]
