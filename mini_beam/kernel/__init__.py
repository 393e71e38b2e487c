# mini_beam/kernel - element-agnostic direct stiffness core
"""
KERNEL
======

Assembly and solving do not care what kind of element produced a matrix.
They need:
- A map (node_id, local_dof) -> global DOF index
- Element stiffness matrices and load vectors with their DOF maps
- A list of constrained DOFs

The beam-specific pieces (element stiffness, fixed-end loads, supports)
live one level up in mini_beam.
"""

from .dof import DOFManager, BEAM_DOF, DOF_PER_NODE, VERTICAL, ROTATION
from .partition import partition_dofs, reduce_system
from .solve import check_conditioning, gauss_solve, solve_linear

__all__ = [
    'DOFManager', 'BEAM_DOF', 'DOF_PER_NODE', 'VERTICAL', 'ROTATION',
    'partition_dofs', 'reduce_system', 'check_conditioning', 'gauss_solve', 'solve_linear',
]
