"""
4x4 transform matrices for a graphics pipeline.

Matrices are float64 arrays of shape (4, 4) acting on column vectors:
v' = M @ v.
"""
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

Mat4 = NDArray[np.float64]


def mat4_identity() -> Mat4:
    return np.eye(4, dtype=np.float64)


def mat4_from_basis(i: ArrayLike, j: ArrayLike, k: ArrayLike) -> Mat4:
    """
    Build a 4x4 matrix from three basis columns.

    Parameters
    ----------
    i, j, k : array-like
        Images of the world x, y and z axes, each shape (3,).

    Returns
    -------
    NDArray[np.float64]
        Matrix with columns (i, 0), (j, 0), (k, 0), (0, 0, 0, 1).
        No translation.

    Raises
    ------
    ValueError
        If any column is not a 3-vector.
    """
    cols = []
    for name, c in (("i", i), ("j", j), ("k", k)):
        arr = np.asarray(c, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Basis column {name} must have shape (3,), got {arr.shape}")
        cols.append(arr)

    M = mat4_identity()
    M[0:3, 0:3] = np.column_stack(cols)
    return M
