# loads.py - Equivalent nodal loads for distributed loads, point load mapping

import numpy as np
from typing import Dict, List, Sequence, Tuple

from .model import PointLoad, DistributedLoad
from .mesh import Element, node_index
from .kernel.dof import DOFManager, BEAM_DOF, VERTICAL
from .kernel.assemble import assemble_global_F, add_nodal_load

N_PER_KN = 1000.0


def udl_equiv_nodal_load(L: float, w: float) -> np.ndarray:
    """
    Fixed-end (consistent) nodal load vector of a uniform load on one element.

    A uniform load w over length L is replaced by two end forces wL/2 and two
    end moments +/- wL^2/12. These reproduce the exact nodal displacements of
    the distributed load for a prismatic Euler-Bernoulli element.

    Parameters:
    -----------
    L : float
        Element length (mm)
    w : float
        Intensity (N/mm), downward positive

    Returns:
    --------
    np.ndarray
        [F1, M1, F2, M2] = [wL/2, wL^2/12, wL/2, -wL^2/12]

    Examples:
    --------
    >>> f = udl_equiv_nodal_load(1000.0, 1.5)  # 1.5 kN/m over 1 m
    # f == [750 N, 125000 N.mm, 750 N, -125000 N.mm]
    """
    force_per_node = w * L / 2.0
    moment_magnitude = w * L * L / 12.0
    return np.array([
        force_per_node,
        moment_magnitude,
        force_per_node,
        -moment_magnitude,
    ], dtype=float)


def element_udl_intensities(
    elements: Sequence[Element],
    distributed_loads: Sequence[DistributedLoad],
) -> Dict[int, float]:
    """
    Effective intensity w (N/mm) per loaded element.

    Only loads that cover the WHOLE element contribute; a load that merely
    overlaps part of an element is ignored for that element. Since the mesh
    places a node at every load boundary, this only bites when callers pass
    their own positions.

    Returns:
    --------
    Dict[int, float]
        element index -> summed intensity; unloaded elements are absent
    """
    result = {}
    for element in elements:
        w = sum(
            load.intensity for load in distributed_loads
            if load.covers(element.x1, element.x2)
        )
        if w != 0.0:
            result[element.index] = w
    return result


def assemble_element_loads(
    n_nodes: int,
    elements: Sequence[Element],
    element_udls: Dict[int, float],
    dof: DOFManager = BEAM_DOF,
) -> np.ndarray:
    """Scatter fixed-end load vectors of all loaded elements into F."""
    contributions: List[Tuple[List[int], np.ndarray]] = []
    for element in elements:
        w = element_udls.get(element.index)
        if w is None:
            continue
        dof_map = dof.element_dof_map(list(element.node_ids))
        contributions.append((dof_map, udl_equiv_nodal_load(element.length, w)))
    return assemble_global_F(dof.ndof(n_nodes), contributions)


def add_point_loads(
    F: np.ndarray,
    positions: Tuple[float, ...],
    point_loads: Sequence[PointLoad],
    dof: DOFManager = BEAM_DOF,
) -> None:
    """Add point loads (kN, converted to N) to the vertical DOF of their node, in-place."""
    for load in point_loads:
        node_id = node_index(positions, load.position)
        vector = np.zeros(dof.dof_per_node)
        vector[VERTICAL] = load.magnitude * N_PER_KN
        add_nodal_load(F, node_id, vector, dof.dof_per_node)
