# dsm_elements/config.py
"""
Numerical tolerances and reference directions shared by the catalogs.
"""

from dataclasses import dataclass

import numpy as np


@dataclass
class KernelConfig:
    """Global kernel configuration."""

    # |norm(cosines) - 1| allowed on the cosine entry points
    unit_tol: float = 1e-9

    # ||cross(x_local, GLOBAL_Y)|| below this selects the vertical-member branch
    vertical_tol: float = 1e-9

    # Default pitch angle for 3D frames (radians)
    default_psi: float = np.pi / 2


# Global config instance
CONFIG = KernelConfig()

# Vertical reference axis used by the 3D frame pitch-angle convention
GLOBAL_Y = np.array([0.0, 1.0, 0.0])
