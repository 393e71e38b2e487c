# mini_beam/kernel/dof.py
"""
DOF MANAGER: Degree of Freedom Indexing for a Straight Beam
===========================================================

Every analysis node carries two DOFs:

    local 0 : vertical displacement v (mm, downward positive)
    local 1 : rotation theta = dv/dx (rad)

so node n owns global DOFs [2n, 2n+1] and element e (nodes e, e+1) maps to
[2e, 2e+1, 2e+2, 2e+3].
"""

from dataclasses import dataclass
from typing import List


VERTICAL = 0
ROTATION = 1
DOF_PER_NODE = 2


@dataclass(frozen=True)
class DOFManager:
    """
    Maps (node index, local DOF) to a global DOF index.

    Examples:
    ---------
    >>> dof = DOFManager()
    >>> dof.idx(3, ROTATION)
    7
    >>> dof.element_dof_map([1, 2])
    [2, 3, 4, 5]
    """
    dof_per_node: int = DOF_PER_NODE

    def idx(self, node_id: int, local_dof: int) -> int:
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[int]) -> List[int]:
        """Flattened global DOF indices for an element's nodes, in order."""
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result

    def node_of(self, dof: int) -> int:
        return dof // self.dof_per_node


BEAM_DOF = DOFManager()
