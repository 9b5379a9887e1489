# dsm_elements/kernel/transform.py
"""Element-level change of basis: local stiffness to global coordinates."""

import numpy as np


def to_global(k_local: np.ndarray, R: np.ndarray) -> np.ndarray:
    """
    Rotate one element's local stiffness into global coordinates.

        k_global = Rᵀ · k_local · R

    Args:
        k_local: Local stiffness (n x n)
        R: Global-to-local transformation (n x m)

    Returns:
        k_global: Element stiffness in global coordinates (m x m)

    Raises:
        ValueError: If R does not have one row per local DOF
    """
    k_local = np.asarray(k_local, dtype=float)
    R = np.asarray(R, dtype=float)
    n = k_local.shape[0]
    if k_local.shape != (n, n):
        raise ValueError(f"Local stiffness must be square, got shape {k_local.shape}")
    if R.ndim != 2 or R.shape[0] != n:
        raise ValueError(
            f"Transformation shape {R.shape} does not match local stiffness {k_local.shape}"
        )
    return R.T @ k_local @ R
