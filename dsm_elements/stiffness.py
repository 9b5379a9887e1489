# dsm_elements/stiffness.py
"""
STIFFNESS CATALOG: Local Element Stiffness Matrices
===================================================

PURPOSE:
--------
Closed-form local stiffness matrices for 2-node line elements, one builder
per element family and end-release condition:

    Truss (2D or 3D)        2×2     EA/L × [[1, -1], [-1, 1]]
    2D frame                6×6     [u_i, v_i, rz_i, u_j, v_j, rz_j]
    3D frame                12×12   [u_i, v_i, w_i, rx_i, ry_i, rz_i,
                                     u_j, v_j, w_j, rx_j, ry_j, rz_j]

HINGES:
-------
A hinge (moment release) at one end is the fixed-fixed element with that
end rotation statically condensed out. The bending coefficients drop from
12/6/4/2 to 3/3/3:

    fixed-fixed:  12EI/L³   6EI/L²   4EI/L   2EI/L
    one hinge:     3EI/L³   3EI/L²   3EI/L

and the row/column of the released rotation becomes zero. In 3D the
torsional stiffness is dropped for any release. A hinge at both ends leaves
pure axial (truss) action embedded in the full DOF set.

PRECONDITIONS:
--------------
E, A, L, G and the inertia terms are expected to be positive. Nothing is
checked: L = 0 gives inf/NaN entries, negative values give a matrix with
no physical meaning. Validating the model is the caller's job.
"""

import logging
from typing import Optional

import numpy as np

from .kernel.dof import FRAME_2D, FRAME_3D, DOFLayout
from .kernel.releases import Release

logger = logging.getLogger(__name__)


def _as_float(*values):
    """Scalar inputs as numpy floats: division by zero gives inf/NaN."""
    return tuple(np.float64(v) for v in values)


def truss_stiffness(E: float, A: float, L: float) -> np.ndarray:
    """
    Truss element

    E: Modulus of elasticity
    A: Cross-section area
    L: Element length
    """
    E, A, L = _as_float(E, A, L)
    return E * A / L * np.array([[1.0, -1.0], [-1.0, 1.0]])


def _axial_only(layout: DOFLayout, E: float, A: float, L: float) -> np.ndarray:
    E, A, L = _as_float(E, A, L)
    i, j = layout.axial_pair()
    k = np.zeros((layout.size, layout.size), dtype=float)
    k[i, i] = k[j, j] = 1.0
    k[i, j] = k[j, i] = -1.0
    return E * A / L * k


# ============================================================================
# 2D FRAME
# ============================================================================

def frame2d_stiffness_fixed_fixed(E: float, A: float, L: float, I: float) -> np.ndarray:
    """
    2D frame element, moment connected at both ends.

    E: Modulus of elasticity
    A: Cross-section area
    L: Element length
    I: Moment of inertia about the out-of-plane axis

    Written as EI/L³ × [...], so the axial terms carry the ratio a = AL²/I.
    """
    E, A, L, I = _as_float(E, A, L, I)
    L2 = L * L
    a = A * L2 / I

    return E * I / L**3 * np.array([
        [  a,     0,       0,   -a,     0,       0],
        [  0,    12,     6*L,    0,   -12,     6*L],
        [  0,   6*L,  4*L2,      0,  -6*L,  2*L2],
        [ -a,     0,       0,    a,     0,       0],
        [  0,   -12,    -6*L,    0,    12,    -6*L],
        [  0,   6*L,  2*L2,      0,  -6*L,  4*L2],
    ], dtype=float)


def frame2d_stiffness_hinge_start(E: float, A: float, L: float, I: float) -> np.ndarray:
    """
    2D frame element with a hinge at the start node (rz_i released).
    """
    E, A, L, I = _as_float(E, A, L, I)
    L2 = L * L
    a = A * L2 / I

    return E * I / L**3 * np.array([
        [  a,     0,   0,   -a,     0,       0],
        [  0,     3,   0,    0,    -3,     3*L],
        [  0,     0,   0,    0,     0,       0],
        [ -a,     0,   0,    a,     0,       0],
        [  0,    -3,   0,    0,     3,    -3*L],
        [  0,   3*L,   0,    0,  -3*L,  3*L2],
    ], dtype=float)


def frame2d_stiffness_hinge_end(E: float, A: float, L: float, I: float) -> np.ndarray:
    """
    2D frame element with a hinge at the end node (rz_j released).
    """
    E, A, L, I = _as_float(E, A, L, I)
    L2 = L * L
    a = A * L2 / I

    return E * I / L**3 * np.array([
        [  a,     0,       0,   -a,     0,   0],
        [  0,     3,     3*L,    0,    -3,   0],
        [  0,   3*L,  3*L2,      0,  -3*L,   0],
        [ -a,     0,       0,    a,     0,   0],
        [  0,    -3,    -3*L,    0,     3,   0],
        [  0,     0,       0,    0,     0,   0],
    ], dtype=float)


def frame2d_stiffness_hinge_hinge(E: float, A: float, L: float) -> np.ndarray:
    """
    2D frame element with hinges at both ends, i.e. a truss in 6 DOF.
    """
    return _axial_only(FRAME_2D, E, A, L)


# ============================================================================
# 3D FRAME
# ============================================================================

def _set_sym(k: np.ndarray, i: int, j: int, value: float) -> None:
    k[i, j] = k[j, i] = value


def _frame3d_axial(E: float, A: float, L: float) -> np.ndarray:
    k = np.zeros((FRAME_3D.size, FRAME_3D.size), dtype=float)
    EA_L = E * A / L
    k[0, 0] = k[6, 6] = EA_L
    _set_sym(k, 0, 6, -EA_L)
    return k


def frame3d_stiffness_fixed_fixed(
    E: float, A: float, L: float, G: float, Izz: float, Iyy: float, J: float
) -> np.ndarray:
    """
    3D frame element (Euler-Bernoulli), moment connected at both ends.

    Parameters:
    -----------
    E : float
        Modulus of elasticity
    A : float
        Cross-section area
    L : float
        Element length
    G : float
        Shear modulus
    Izz : float
        Moment of inertia about local z (strong axis), bending in the local xy plane
    Iyy : float
        Moment of inertia about local y (weak axis), bending in the local xz plane
    J : float
        Torsional constant

    Returns:
    --------
    np.ndarray
        12×12 local stiffness matrix
    """
    E, A, L, G, Izz, Iyy, J = _as_float(E, A, L, G, Izz, Iyy, J)
    k = _frame3d_axial(E, A, L)
    L2 = L * L
    L3 = L2 * L
    EIz = E * Izz
    EIy = E * Iyy
    GJ_L = G * J / L

    # Torsion (DOFs 3, 9)
    k[3, 3] = k[9, 9] = GJ_L
    _set_sym(k, 3, 9, -GJ_L)

    # Bending in local xy plane, about z (DOFs 1, 5, 7, 11)
    k[1, 1] = k[7, 7] = 12 * EIz / L3
    k[5, 5] = k[11, 11] = 4 * EIz / L
    _set_sym(k, 1, 7, -12 * EIz / L3)
    _set_sym(k, 1, 5, 6 * EIz / L2)
    _set_sym(k, 1, 11, 6 * EIz / L2)
    _set_sym(k, 5, 7, -6 * EIz / L2)
    _set_sym(k, 7, 11, -6 * EIz / L2)
    _set_sym(k, 5, 11, 2 * EIz / L)

    # Bending in local xz plane, about y (DOFs 2, 4, 8, 10)
    k[2, 2] = k[8, 8] = 12 * EIy / L3
    k[4, 4] = k[10, 10] = 4 * EIy / L
    _set_sym(k, 2, 8, -12 * EIy / L3)
    _set_sym(k, 2, 4, -6 * EIy / L2)
    _set_sym(k, 2, 10, -6 * EIy / L2)
    _set_sym(k, 4, 8, 6 * EIy / L2)
    _set_sym(k, 8, 10, 6 * EIy / L2)
    _set_sym(k, 4, 10, 2 * EIy / L)

    return k


def frame3d_stiffness_hinge_start(
    E: float, A: float, L: float, Izz: float, Iyy: float
) -> np.ndarray:
    """
    3D frame element with a hinge at the start node.

    Rotations rx_i, ry_i, rz_i are released; torsion is not carried.
    """
    E, A, L, Izz, Iyy = _as_float(E, A, L, Izz, Iyy)
    k = _frame3d_axial(E, A, L)
    L2 = L * L
    L3 = L2 * L
    EIz = E * Izz
    EIy = E * Iyy

    # About z (DOFs 1, 7, 11)
    k[1, 1] = k[7, 7] = 3 * EIz / L3
    k[11, 11] = 3 * EIz / L
    _set_sym(k, 1, 7, -3 * EIz / L3)
    _set_sym(k, 1, 11, 3 * EIz / L2)
    _set_sym(k, 7, 11, -3 * EIz / L2)

    # About y (DOFs 2, 8, 10)
    k[2, 2] = k[8, 8] = 3 * EIy / L3
    k[10, 10] = 3 * EIy / L
    _set_sym(k, 2, 8, -3 * EIy / L3)
    _set_sym(k, 2, 10, -3 * EIy / L2)
    _set_sym(k, 8, 10, 3 * EIy / L2)

    return k


def frame3d_stiffness_hinge_end(
    E: float, A: float, L: float, Izz: float, Iyy: float
) -> np.ndarray:
    """
    3D frame element with a hinge at the end node.

    Rotations rx_j, ry_j, rz_j are released; torsion is not carried.
    """
    E, A, L, Izz, Iyy = _as_float(E, A, L, Izz, Iyy)
    k = _frame3d_axial(E, A, L)
    L2 = L * L
    L3 = L2 * L
    EIz = E * Izz
    EIy = E * Iyy

    # About z (DOFs 1, 5, 7)
    k[1, 1] = k[7, 7] = 3 * EIz / L3
    k[5, 5] = 3 * EIz / L
    _set_sym(k, 1, 7, -3 * EIz / L3)
    _set_sym(k, 1, 5, 3 * EIz / L2)
    _set_sym(k, 5, 7, -3 * EIz / L2)

    # About y (DOFs 2, 4, 8)
    k[2, 2] = k[8, 8] = 3 * EIy / L3
    k[4, 4] = 3 * EIy / L
    _set_sym(k, 2, 8, -3 * EIy / L3)
    _set_sym(k, 2, 4, -3 * EIy / L2)
    _set_sym(k, 4, 8, 3 * EIy / L2)

    return k


def frame3d_stiffness_hinge_hinge(E: float, A: float, L: float) -> np.ndarray:
    """
    3D frame element with hinges at both ends (a truss in 12 DOF). Use sparingly:
    the rotational DOFs have no stiffness and must be restrained elsewhere.
    """
    return _axial_only(FRAME_3D, E, A, L)


# ============================================================================
# RELEASE DISPATCH
# ============================================================================

def _require(release: Release, **props) -> None:
    missing = [name for name, value in props.items() if value is None]
    if missing:
        raise TypeError(
            f"{release.value} 3D frame stiffness requires {', '.join(missing)}"
        )


def frame2d_stiffness(
    E: float, A: float, L: float, I: Optional[float] = None,
    release=Release.FIXED_FIXED,
) -> np.ndarray:
    """
    Local 6×6 stiffness of a 2D frame element for any end release.

    `release` is a Release member or its string value. I may be omitted
    only for Release.HINGE_HINGE.
    """
    release = Release.coerce(release)
    logger.debug("2D frame stiffness: release=%s", release.value)

    if release.start_hinged and release.end_hinged:
        return frame2d_stiffness_hinge_hinge(E, A, L)
    if I is None:
        raise TypeError(f"{release.value} 2D frame stiffness requires I")
    if release.start_hinged:
        return frame2d_stiffness_hinge_start(E, A, L, I)
    if release.end_hinged:
        return frame2d_stiffness_hinge_end(E, A, L, I)
    return frame2d_stiffness_fixed_fixed(E, A, L, I)


def frame3d_stiffness(
    E: float, A: float, L: float,
    G: Optional[float] = None,
    Izz: Optional[float] = None,
    Iyy: Optional[float] = None,
    J: Optional[float] = None,
    release=Release.FIXED_FIXED,
) -> np.ndarray:
    """
    Local 12×12 stiffness of a 3D frame element for any end release.

    Properties needed per release:
        FIXED_FIXED   G, Izz, Iyy, J
        HINGE_START   Izz, Iyy
        HINGE_END     Izz, Iyy
        HINGE_HINGE   (none beyond E, A, L)

    Raises:
        TypeError: If a property needed by the chosen release is missing
    """
    release = Release.coerce(release)
    logger.debug("3D frame stiffness: release=%s", release.value)

    if release.start_hinged and release.end_hinged:
        return frame3d_stiffness_hinge_hinge(E, A, L)
    if release.start_hinged:
        _require(release, Izz=Izz, Iyy=Iyy)
        return frame3d_stiffness_hinge_start(E, A, L, Izz, Iyy)
    if release.end_hinged:
        _require(release, Izz=Izz, Iyy=Iyy)
        return frame3d_stiffness_hinge_end(E, A, L, Izz, Iyy)
    _require(release, G=G, Izz=Izz, Iyy=Iyy, J=J)
    return frame3d_stiffness_fixed_fixed(E, A, L, G, Izz, Iyy, J)
