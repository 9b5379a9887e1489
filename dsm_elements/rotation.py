# dsm_elements/rotation.py
"""
ROTATION CATALOG: Global-to-Local Transformation Matrices
=========================================================

PURPOSE:
--------
A transformation matrix R maps an element's nodal displacement components
from GLOBAL axes to the element's LOCAL axes (x along the member):

    d_local = R · d_global
    k_global = Rᵀ · k_local · R

    2D truss    2×4     [Cx Cy 0  0 ; 0  0 Cx Cy]
    3D truss    2×6     [Cx Cy Cz 0 0 0 ; 0 0 0 Cx Cy Cz]
    2D frame    6×6     two blocks [[Cx, Cy, 0], [-Cy, Cx, 0], [0, 0, 1]]
    3D frame    12×12   four copies of the 3×3 direction cosine matrix Λ

TWO ENTRY POINTS:
-----------------
Each family has a cosine builder (`r3d_frame(cx, cy, cz)`) and a position
builder (`r3d_frame_from_points(start, end)`). The cosine builders check
that the cosines are a unit vector and raise DirectionCosineError if not.
The position builders normalize (end - start) themselves, so they skip the
check. Both feed the same private formula.

PITCH ANGLE (3D frames):
------------------------
For a line element in 3D the local x axis alone does not fix the local y
and z axes. The pitch (roll) angle Ψ rotates them about local x. At Ψ = 0
the textbook convention puts local z horizontal with global XZ as ground.
Models here treat XY as ground with gravity along -Z, so the default is
Ψ = π/2: local z lies in the XY ground plane and the strong axis (Izz)
resists vertical load.

Members parallel to global Y make the general formula 0/0 (its denominator
is √(Cx² + Cz²)); they use a separate closed form.
"""

import logging
from typing import Sequence

import numpy as np
import scipy.linalg

from .config import CONFIG, GLOBAL_Y
from .kernel.vectors import check_unit, cross, direction_cosines, norm

logger = logging.getLogger(__name__)


def _cosines_from_points(start: Sequence[float], end: Sequence[float], dim: int):
    cosines = direction_cosines(start, end)
    if len(cosines) != dim:
        raise ValueError(f"Expected {dim}D node positions, got {len(cosines)}D")
    return cosines


# ============================================================================
# TRUSS
# ============================================================================

def _r2d_truss(cx: float, cy: float) -> np.ndarray:
    return np.array([
        [cx, cy, 0.0, 0.0],
        [0.0, 0.0, cx, cy],
    ], dtype=float)


def _r3d_truss(cx: float, cy: float, cz: float) -> np.ndarray:
    return np.array([
        [cx, cy, cz, 0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, cx, cy, cz],
    ], dtype=float)


def r2d_truss(cx: float, cy: float) -> np.ndarray:
    """
    Rotation matrix for a 2D truss element.

    cx, cy are the directional cosines of the element in global coordinates,
    i.e. (end - start) / L.
    """
    check_unit((cx, cy))
    return _r2d_truss(cx, cy)


def r2d_truss_from_points(start: Sequence[float], end: Sequence[float]) -> np.ndarray:
    """Rotation matrix for a 2D truss from start = [x, y] and end = [x, y]."""
    return _r2d_truss(*_cosines_from_points(start, end, 2))


def r3d_truss(cx: float, cy: float, cz: float) -> np.ndarray:
    """
    Rotation matrix for a 3D truss element.

    cx, cy, cz are the directional cosines of the element in global coordinates.
    """
    check_unit((cx, cy, cz))
    return _r3d_truss(cx, cy, cz)


def r3d_truss_from_points(start: Sequence[float], end: Sequence[float]) -> np.ndarray:
    """Rotation matrix for a 3D truss from start = [x, y, z] and end = [x, y, z]."""
    return _r3d_truss(*_cosines_from_points(start, end, 3))


# ============================================================================
# 2D FRAME
# ============================================================================

def _r2d_frame(cx: float, cy: float) -> np.ndarray:
    # Per node: in-plane rotation of (ux, uy), rz unchanged
    node = np.array([
        [ cx, cy, 0.0],
        [-cy, cx, 0.0],
        [0.0, 0.0, 1.0],
    ], dtype=float)
    return scipy.linalg.block_diag(node, node)


def r2d_frame(cx: float, cy: float) -> np.ndarray:
    """
    6×6 transform from global DOFs [ux, uy, rz] × 2 to local DOFs [u, v, rz] × 2.

    The in-plane rotation rz is the same in both systems.
    """
    check_unit((cx, cy))
    return _r2d_frame(cx, cy)


def r2d_frame_from_points(start: Sequence[float], end: Sequence[float]) -> np.ndarray:
    """6×6 2D frame transform from start = [x, y] and end = [x, y]."""
    return _r2d_frame(*_cosines_from_points(start, end, 2))


# ============================================================================
# 3D FRAME
# ============================================================================

def _direction_cosine_matrix(cx: float, cy: float, cz: float, psi: float) -> np.ndarray:
    x_local = np.array([cx, cy, cz], dtype=float)
    c = np.cos(psi)
    s = np.sin(psi)

    if norm(cross(x_local, GLOBAL_Y)) < CONFIG.vertical_tol:
        # Member parallel to global Y: √(Cx² + Cz²) = 0
        logger.debug("Vertical member (cy=%g): using closed-form direction cosine matrix", cy)
        return np.array([
            [0.0,     cy,  0.0],
            [-cy * c, 0.0, s],
            [cy * s,  0.0, c],
        ], dtype=float)

    d = np.sqrt(cx * cx + cz * cz)

    b1 = (-cx * cy * c - cz * s) / d
    b2 = d * c
    b3 = (-cy * cz * c + cx * s) / d

    c1 = (cx * cy * s - cz * c) / d
    c2 = -d * s
    c3 = (cy * cz * s + cx * c) / d

    return np.array([
        [cx, cy, cz],
        [b1, b2, b3],
        [c1, c2, c3],
    ], dtype=float)


def _r3d_frame(cx: float, cy: float, cz: float, psi: float) -> np.ndarray:
    lam = _direction_cosine_matrix(cx, cy, cz, psi)
    # One block per (translation, rotation) triple at node i, then node j
    return scipy.linalg.block_diag(lam, lam, lam, lam)


def direction_cosine_matrix(cx: float, cy: float, cz: float, psi: float = None) -> np.ndarray:
    """
    3×3 direction cosine matrix Λ of a 3D frame element.

    Rows are the local x, y, z axes expressed in global coordinates.

    Parameters:
    -----------
    cx, cy, cz : float
        Directional cosines of the element (unit vector)
    psi : float
        Pitch angle about local x in radians. Defaults to CONFIG.default_psi (π/2).

    Raises:
    -------
    DirectionCosineError
        If (cx, cy, cz) is not a unit vector
    """
    check_unit((cx, cy, cz))
    if psi is None:
        psi = CONFIG.default_psi
    return _direction_cosine_matrix(cx, cy, cz, psi)


def r3d_frame(cx: float, cy: float, cz: float, psi: float = None) -> np.ndarray:
    """
    12×12 rotation matrix for a 3D frame element.

    cx, cy, cz are the directional cosines of the element in global coordinates.
    psi is the roll angle about local x; by default π/2, which keeps local z
    parallel to the XY ground plane so the strong axis resists gravity.
    """
    check_unit((cx, cy, cz))
    if psi is None:
        psi = CONFIG.default_psi
    return _r3d_frame(cx, cy, cz, psi)


def r3d_frame_from_points(
    start: Sequence[float], end: Sequence[float], psi: float = None
) -> np.ndarray:
    """12×12 3D frame rotation from start = [x, y, z] and end = [x, y, z]."""
    if psi is None:
        psi = CONFIG.default_psi
    return _r3d_frame(*_cosines_from_points(start, end, 3), psi)
