# dsm_elements/model.py
"""
MODEL: Material, Section and Element value types
================================================

Convenience layer over the scalar catalogs. An Element bundles node
positions, material, section and end release, and picks the matching
stiffness and rotation builders:

    steel = Material("Steel", E=210e9, G=81e9)
    col = Element(start=(0, 0, 0), end=(0, 0, 3), material=steel,
                  section=Section("HEA200", A=5.38e-3, Izz=3.69e-5,
                                  Iyy=1.34e-5, J=2.10e-7))
    k = col.local_stiffness()      # 12×12
    R = col.rotation()             # 12×12
    K = col.global_stiffness()     # Rᵀ k R

Nothing here validates physical plausibility; see stiffness.py.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from . import rotation, stiffness
from .kernel.dof import DOFLayout, FRAME_2D, FRAME_3D, TRUSS_2D, TRUSS_3D
from .kernel.releases import Release
from .kernel.transform import to_global
from .kernel.vectors import element_length


@dataclass(frozen=True)
class Material:
    """
    Parameters:
    -----------
    name : str
        Human-readable name (e.g. "S355 steel")
    E : float
        Young's modulus (Pa)
    G : float, optional
        Shear modulus (Pa). Only 3D fixed-fixed frames need it.
    """
    name: str
    E: float
    G: Optional[float] = None


@dataclass(frozen=True)
class Section:
    """
    Cross-section properties.

    2D frames bend about the out-of-plane axis and use Izz.
    """
    name: str
    A: float
    Izz: Optional[float] = None  # strong axis, bending in local xy
    Iyy: Optional[float] = None  # weak axis, bending in local xz
    J: Optional[float] = None    # torsional constant


@dataclass(frozen=True)
class Element:
    """
    A 2-node truss or frame element between two node positions.

    kind is "truss" or "frame"; the dimension (2D or 3D) follows from the
    positions. psi is the 3D frame pitch angle (None = CONFIG.default_psi).
    """
    start: Tuple[float, ...]
    end: Tuple[float, ...]
    material: Material
    section: Section
    kind: str = "frame"
    release: Release = Release.FIXED_FIXED
    psi: Optional[float] = None

    def __post_init__(self):
        if self.kind not in ("truss", "frame"):
            raise ValueError(f"Element kind must be 'truss' or 'frame', got '{self.kind}'")
        if len(self.start) != len(self.end) or len(self.start) not in (2, 3):
            raise ValueError(
                f"start and end must both be 2D or 3D, got {self.start} and {self.end}"
            )
        release = Release.coerce(self.release)
        if self.kind == "truss" and (release.start_hinged or release.end_hinged):
            raise ValueError(f"Truss elements carry no moments; release must be fixed_fixed, got '{release.value}'")
        if self.psi is not None and (self.kind == "truss" or len(self.start) == 2):
            raise ValueError("psi (pitch angle) only applies to 3D frame elements")
        object.__setattr__(self, "release", release)

    @property
    def dim(self) -> int:
        return len(self.start)

    @property
    def length(self) -> float:
        return element_length(self.start, self.end)

    @property
    def layout(self) -> DOFLayout:
        if self.kind == "truss":
            return TRUSS_2D if self.dim == 2 else TRUSS_3D
        return FRAME_2D if self.dim == 2 else FRAME_3D

    def local_stiffness(self) -> np.ndarray:
        E, s, L = self.material.E, self.section, self.length
        if self.kind == "truss":
            return stiffness.truss_stiffness(E, s.A, L)
        if self.dim == 2:
            return stiffness.frame2d_stiffness(E, s.A, L, s.Izz, release=self.release)
        return stiffness.frame3d_stiffness(
            E, s.A, L, G=self.material.G, Izz=s.Izz, Iyy=s.Iyy, J=s.J,
            release=self.release,
        )

    def rotation(self) -> np.ndarray:
        if self.kind == "truss":
            if self.dim == 2:
                return rotation.r2d_truss_from_points(self.start, self.end)
            return rotation.r3d_truss_from_points(self.start, self.end)
        if self.dim == 2:
            return rotation.r2d_frame_from_points(self.start, self.end)
        return rotation.r3d_frame_from_points(self.start, self.end, psi=self.psi)

    def global_stiffness(self) -> np.ndarray:
        """Element stiffness in global coordinates, Rᵀ k R."""
        return to_global(self.local_stiffness(), self.rotation())
