# dsm_elements/kernel/dof.py
"""
DOF LAYOUT: Local Degree of Freedom Ordering per Element Family
===============================================================

PURPOSE:
--------
Every matrix in the catalogs is indexed by the element's LOCAL DOFs,
node i first, then node j:

    2D Truss:  1 DOF/node in local coords (u)          -> k is 2×2
    3D Truss:  1 DOF/node in local coords (u)          -> k is 2×2
    2D Frame:  3 DOF/node (u, v, rz)                   -> k is 6×6
    3D Frame:  6 DOF/node (u, v, w, rx, ry, rz)        -> k is 12×12

Transformation matrices map GLOBAL components to these local ones, so
their column count uses the global DOF count per node (2 or 3 for
trusses, which have no rotations).

USAGE:
------
    layout = FRAME_3D
    layout.idx(node=1, local_dof=0)   # → 6 (axial DOF at node j)
    layout.axial_pair()               # → (0, 6)
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class DOFLayout:
    """
    Local DOF ordering for a 2-node line element.

    Attributes:
    -----------
    name : str
        Element family name
    labels : Tuple[str, ...]
        Per-node local DOF labels, in matrix order
    global_dof_per_node : int
        Number of global components per node the rotation matrix acts on
    """
    name: str
    labels: Tuple[str, ...]
    global_dof_per_node: int

    @property
    def dof_per_node(self) -> int:
        return len(self.labels)

    @property
    def size(self) -> int:
        """Local stiffness matrix dimension (2 nodes)."""
        return 2 * self.dof_per_node

    @property
    def rotation_shape(self) -> Tuple[int, int]:
        """Shape of the global-to-local transformation matrix."""
        return (self.size, 2 * self.global_dof_per_node)

    def idx(self, node: int, local_dof: int) -> int:
        """
        Matrix index for local DOF `local_dof` of element node `node` (0 = i, 1 = j).
        """
        if node not in (0, 1):
            raise ValueError(f"Line elements have nodes 0 and 1, got {node}")
        if not 0 <= local_dof < self.dof_per_node:
            raise ValueError(
                f"{self.name} has {self.dof_per_node} DOF per node, got local_dof={local_dof}"
            )
        return self.dof_per_node * node + local_dof

    def axial_pair(self) -> Tuple[int, int]:
        """Indices of the axial DOF at node i and node j."""
        return self.idx(0, 0), self.idx(1, 0)

    def rotational_dofs(self, node: int) -> List[int]:
        """Matrix indices of the rotational DOFs at one node (empty for trusses)."""
        return [self.idx(node, k) for k, label in enumerate(self.labels) if label.startswith("r")]


TRUSS_2D = DOFLayout("2D truss", ("u",), global_dof_per_node=2)
TRUSS_3D = DOFLayout("3D truss", ("u",), global_dof_per_node=3)
FRAME_2D = DOFLayout("2D frame", ("u", "v", "rz"), global_dof_per_node=3)
FRAME_3D = DOFLayout("3D frame", ("u", "v", "w", "rx", "ry", "rz"), global_dof_per_node=6)
