"""Core data structures and matrix primitives"""

from .bbox import BoundingBox
from .matrix import add, as_matrix, identity, multiply, subtract, transpose

__all__ = [
    "BoundingBox",
    "as_matrix",
    "multiply",
    "add",
    "subtract",
    "transpose",
    "identity",
]
