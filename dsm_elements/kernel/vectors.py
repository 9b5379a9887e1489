# dsm_elements/kernel/vectors.py
"""
VECTORS: Small Numeric-Vector Helpers
=====================================

PURPOSE:
--------
Every rotation builder needs the same three things from a pair of node
positions: the element length, the unit vector along the element, and
(for 3D frames) a cross product to detect members parallel to the vertical
reference axis.

Direction cosines (l, m, n) are the components of that unit vector:

    l = (xj - xi) / L
    m = (yj - yi) / L
    n = (zj - zi) / L

with l² + m² + n² = 1. The cosine entry points of the rotation catalog
check this property with `check_unit`; the position entry points build
the cosines here and are unit by construction.
"""

from typing import Sequence, Tuple

import numpy as np

from ..config import CONFIG


class DirectionCosineError(ValueError):
    """Raised when directional cosines passed to a rotation builder are not a unit vector."""
    pass


def norm(v: Sequence[float]) -> float:
    """Euclidean norm of a 2- or 3-vector."""
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def normalize(v: Sequence[float]) -> np.ndarray:
    """
    Return v scaled to unit length.

    Raises:
        ValueError: If v has zero length (no direction can be defined)
    """
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length <= 0.0:
        raise ValueError(f"Cannot normalize zero-length vector {v.tolist()}.")
    return v / length


def cross(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def _difference(start: Sequence[float], end: Sequence[float]) -> np.ndarray:
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    if start.shape != end.shape or start.ndim != 1 or start.size not in (2, 3):
        raise ValueError(
            f"Node positions must both be 2- or 3-vectors, got shapes "
            f"{start.shape} and {end.shape}."
        )
    return end - start


def element_length(start: Sequence[float], end: Sequence[float]) -> float:
    """Distance between the start and end node positions."""
    return norm(_difference(start, end))


def direction_cosines(start: Sequence[float], end: Sequence[float]) -> Tuple[float, ...]:
    """
    Directional cosines of the element running from `start` to `end`.

    Returns (Cx, Cy) for 2D positions, (Cx, Cy, Cz) for 3D positions.

    Raises:
        ValueError: If the two positions coincide
    """
    d = _difference(start, end)
    if np.linalg.norm(d) <= 0.0:
        raise ValueError(
            f"Element has zero length (start and end both at {np.asarray(start).tolist()})."
        )
    return tuple(float(c) for c in normalize(d))


def element_geometry(
    start: Sequence[float], end: Sequence[float]
) -> Tuple[float, Tuple[float, ...]]:
    """
    Compute length and direction cosines for an element in one call.

    Parameters:
    -----------
    start, end : Sequence[float]
        Node positions, both 2D ([x, y]) or both 3D ([x, y, z])

    Returns:
    --------
    Tuple[float, Tuple[float, ...]]
        (L, cosines) where cosines is (Cx, Cy) or (Cx, Cy, Cz)

    Example:
    --------
    >>> L, (cx, cy, cz) = element_geometry([0, 0, 0], [3, 4, 0])
    >>> L, cx, cy
    (5.0, 0.6, 0.8)
    """
    return element_length(start, end), direction_cosines(start, end)


def check_unit(cosines: Sequence[float], tol: float = None) -> None:
    """
    Assert that directional cosines form a unit vector.

    Raises:
        DirectionCosineError: If |norm(cosines) - 1| > tol
    """
    if tol is None:
        tol = CONFIG.unit_tol
    length = norm(cosines)
    if not abs(length - 1.0) <= tol:
        raise DirectionCosineError(
            f"Directional cosines {tuple(cosines)} have norm {length:.12g}, expected 1 "
            f"(tol={tol:.0e}). Normalize the element vector or use the *_from_points builder."
        )
