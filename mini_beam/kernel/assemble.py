# mini_beam/kernel/assemble.py
"""
ASSEMBLY: Global Beam Matrices
==============================

Scatter-add of beam element contributions into the global stiffness matrix
and load vector.

DOF LAYOUT:
-----------
Each node n carries two DOFs, vertical deflection v at 2n and rotation
theta at 2n + 1. A beam element between nodes i and i + 1 therefore maps
its local [v1, theta1, v2, theta2] onto the contiguous global block
[2i, 2i + 1, 2i + 2, 2i + 3], and neighbouring elements overlap on the
two DOFs of their shared node:

    element 0  -> [0, 1, 2, 3]
    element 1  ->       [2, 3, 4, 5]

Units: K in N/mm (v rows and columns) and N.mm/rad (theta), F in N and N.mm.
"""

import numpy as np
from typing import List, Tuple


def assemble_global_K(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Sum the 4x4 element stiffness matrices into a banded (ndof x ndof) K.

    Parameters:
    -----------
    ndof : int
        2 x n_nodes
    contributions : list of (dof_map, ke)
        dof_map is [v1, theta1, v2, theta2] in global numbering, ke is 4x4

    Returns:
    --------
    np.ndarray
        K, symmetric, with rigid translation and rotation in its null space
        until supports remove them
    """
    K = np.zeros((ndof, ndof), dtype=float)

    for dof_map, ke in contributions:
        n_element_dofs = len(dof_map)
        assert ke.shape == (n_element_dofs, n_element_dofs), \
            f"Element ke shape {ke.shape} doesn't match dof_map length {n_element_dofs}"

        K[np.ix_(dof_map, dof_map)] += ke

    return K


def assemble_global_F(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Sum element fixed-end load vectors [F1, M1, F2, M2] into F.

    At an interior node shared by two equally loaded elements the end
    moments +wL^2/12 and -wL^2/12 cancel and the end forces add up.
    """
    F = np.zeros(ndof, dtype=float)

    for dof_map, fe in contributions:
        assert fe.shape == (len(dof_map),), \
            f"Element fe shape {fe.shape} doesn't match dof_map length {len(dof_map)}"
        np.add.at(F, dof_map, fe)

    return F


def add_nodal_load(
    F: np.ndarray,
    node_id: int,
    load_vector: np.ndarray,
    dof_per_node: int
) -> None:
    """
    Add a (force, moment) pair at one node to F, in-place.

    >>> F = np.zeros(6)
    >>> add_nodal_load(F, node_id=1, load_vector=np.array([5000.0, 0.0]), dof_per_node=2)
    >>> # F[2] == 5000 N downward at node 1, F[3] unchanged
    """
    base = dof_per_node * node_id
    F[base:base + len(load_vector)] += load_vector
