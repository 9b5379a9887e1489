# dsm_elements - Element stiffness and transformation catalogs
"""
DSM-ELEMENTS: Building Blocks for the Direct Stiffness Method
=============================================================

This package provides:
- Local stiffness matrices for truss and frame elements in 2D and 3D,
  with end releases (hinges)
- Global-to-local transformation matrices for the same families,
  from directional cosines or from node positions

ARCHITECTURE:
-------------
    stiffness.py    Stiffness catalog (one builder per family × release)
    rotation.py     Rotation catalog (cosine and node-position entry points)
    model.py        Material / Section / Element value types
    config.py       Tolerances, default pitch angle, vertical reference axis
    kernel/         Vector helpers, Release enum, DOF layouts, Rᵀ k R

Assembling many elements into a global matrix and solving it is left to
the caller.
"""

from .config import CONFIG, GLOBAL_Y, KernelConfig
from .kernel import DirectionCosineError, Release, to_global
from .stiffness import (
    truss_stiffness,
    frame2d_stiffness,
    frame2d_stiffness_fixed_fixed,
    frame2d_stiffness_hinge_start,
    frame2d_stiffness_hinge_end,
    frame2d_stiffness_hinge_hinge,
    frame3d_stiffness,
    frame3d_stiffness_fixed_fixed,
    frame3d_stiffness_hinge_start,
    frame3d_stiffness_hinge_end,
    frame3d_stiffness_hinge_hinge,
)
from .rotation import (
    r2d_truss,
    r2d_truss_from_points,
    r3d_truss,
    r3d_truss_from_points,
    r2d_frame,
    r2d_frame_from_points,
    r3d_frame,
    r3d_frame_from_points,
    direction_cosine_matrix,
)
from .model import Material, Section, Element

__version__ = "0.1.0"
