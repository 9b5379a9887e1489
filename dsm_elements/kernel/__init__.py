# dsm_elements/kernel - Shared helpers for the stiffness and rotation catalogs
"""
KERNEL: SHARED BUILDING BLOCKS
==============================

Neither catalog depends on the other. Both lean on:
- vector helpers (norm, normalize, cross, direction cosines)
- the Release enum for frame end conditions
- DOF layouts that fix the local matrix ordering per element family
- the per-element change of basis k_global = Rᵀ k R
"""

from .vectors import (
    DirectionCosineError,
    norm,
    normalize,
    cross,
    direction_cosines,
    element_length,
    element_geometry,
    check_unit,
)
from .releases import Release
from .dof import DOFLayout, TRUSS_2D, TRUSS_3D, FRAME_2D, FRAME_3D
from .transform import to_global

__all__ = [
    'DirectionCosineError', 'norm', 'normalize', 'cross', 'direction_cosines',
    'element_length', 'element_geometry', 'check_unit',
    'Release',
    'DOFLayout', 'TRUSS_2D', 'TRUSS_3D', 'FRAME_2D', 'FRAME_3D',
    'to_global',
]
