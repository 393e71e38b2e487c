# Boundary conditions: supports -> constrained DOFs

from typing import List, Sequence, Tuple

from .model import Support
from .mesh import node_index
from .kernel.dof import DOFManager, BEAM_DOF
from .kernel.partition import partition_dofs, reduce_system

__all__ = ["constrained_dofs", "partition_dofs", "reduce_system"]


def constrained_dofs(
    supports: Sequence[Support],
    positions: Tuple[float, ...],
    dof: DOFManager = BEAM_DOF,
) -> List[int]:
    """
    Global DOFs restrained by the supports, sorted and unique.

    fixed -> vertical + rotation, pinned/roller -> vertical, free -> none.
    Several supports at one node combine (union of their DOFs).
    """
    fixed = set()
    for support in supports:
        node_id = node_index(positions, support.position)
        for local_dof in support.type.constrained_local_dofs:
            fixed.add(dof.idx(node_id, local_dof))
    return sorted(fixed)
