"""Minimal dense matrix operations used by the axis filters

Matrices are 2-D float arrays. Every operation returns a new array and
leaves its operands untouched. Shapes are checked at run time and a
mismatch raises DimensionError.
"""

from numbers import Real
from typing import Sequence, Union

import numpy as np

from ..exceptions import DimensionError

MatrixLike = Union[np.ndarray, Sequence[Sequence[float]], float]


def as_matrix(value: MatrixLike) -> np.ndarray:
    """
    Coerce a value into a new 2-D float matrix

    Args:
        value: Scalar, nested sequence (one inner sequence per row) or array

    Returns:
        Copy of the value as a 2-D float64 array
    """
    try:
        matrix = np.array(value, dtype=np.float64, ndmin=2)
    except (TypeError, ValueError) as e:
        raise DimensionError(f"Cannot build a matrix from {value!r}: {e}") from e

    if matrix.ndim != 2:
        raise DimensionError(f"Matrix must be 2-D, got {matrix.ndim} dimensions")
    if matrix.size == 0:
        raise DimensionError("Matrix must not be empty")

    return matrix


def _is_scalar(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def multiply(a: MatrixLike, b: Union[MatrixLike, float], *rest) -> np.ndarray:
    """
    Multiply matrices, or scale a matrix by a scalar

    Longer argument lists are chained from the right, so
    ``multiply(A, B, C)`` is ``multiply(A, multiply(B, C))``. The last
    element of a chain may be a scalar.

    Args:
        a: Left matrix
        b: Right matrix or scalar coefficient
        rest: Further chain elements

    Returns:
        Product matrix
    """
    if rest:
        return multiply(a, multiply(b, *rest))

    left = as_matrix(a)
    if _is_scalar(b):
        return left * float(b)

    right = as_matrix(b)
    if left.shape[1] != right.shape[0]:
        raise DimensionError(
            f"Number of columns of A ({left.shape[1]}) must equal "
            f"number of rows of B ({right.shape[0]})"
        )
    return left @ right


def add(a: MatrixLike, b: MatrixLike, *rest) -> np.ndarray:
    """
    Element-wise sum of equally shaped matrices

    Chained from the right like multiply().
    """
    if rest:
        return add(a, add(b, *rest))

    left = as_matrix(a)
    right = as_matrix(b)
    if left.shape != right.shape:
        raise DimensionError(
            f"Two matrices must have the same size, got {left.shape} and {right.shape}"
        )
    return left + right


def subtract(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    """A - B, computed as A + (-1)·B"""
    return add(a, multiply(b, -1.0))


def transpose(a: MatrixLike) -> np.ndarray:
    """Swap rows and columns"""
    return as_matrix(a).T.copy()


def identity(size: int) -> np.ndarray:
    """Square identity matrix of the given size"""
    if size < 1:
        raise DimensionError(f"Identity size must be at least 1, got {size}")
    return np.eye(size, dtype=np.float64)
