# displacements, reactions, element end forces, support reaction report

import logging
import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .model import BeamModel, SupportType
from .mesh import Element, node_index
from .elements import beam_element_stiffness
from .loads import udl_equiv_nodal_load, N_PER_KN
from .kernel.dof import DOFManager, BEAM_DOF, VERTICAL, ROTATION

logger = logging.getLogger(__name__)

NMM_PER_KNM = 1e6


@dataclass(frozen=True)
class SupportReaction:
    """Reaction read-out at one support (kN upward, kN.m counterclockwise)."""
    position: float
    type: SupportType
    force: float
    moment: float


def check_equilibrium(
    R: np.ndarray,
    F: np.ndarray,
    free: np.ndarray,
    rtol: float = 1e-6,
) -> float:
    """
    Advisory check: relative residual max|R_free| / max(|F|, |R|).

    Logs a warning when the residual exceeds rtol and returns it; never raises.
    """
    if free.size == 0:
        return 0.0
    scale = max(float(np.max(np.abs(F))), float(np.max(np.abs(R))), 1.0)
    residual = float(np.max(np.abs(R[free]))) / scale
    if residual > rtol:
        logger.warning("equilibrium residual %.3e exceeds %.0e", residual, rtol)
    return residual


def nodal_displacements(d: np.ndarray, dof: DOFManager = BEAM_DOF) -> np.ndarray:
    """Per-node (vertical mm, rotation rad) as an (n_nodes, 2) array."""
    return d.reshape(-1, dof.dof_per_node).copy()


def element_end_forces_local(
    element: Element,
    d_global: np.ndarray,
    EI: float,
    udl_w: Optional[float] = None,
    dof: DOFManager = BEAM_DOF,
) -> np.ndarray:
    """
    End forces of one element: f = k_local . d_e - f_fixed_end.

    These are the actions the end nodes apply to the element, in the load
    convention: [F1, M1, F2, M2] with forces downward positive and moments
    positive in the theta direction (clockwise for x to the right).

    For a simply supported element under w: F1 = F2 = -wL/2, M1 = M2 = 0.
    """
    dof_map = dof.element_dof_map(list(element.node_ids))
    d_e = d_global[dof_map]
    k_local = beam_element_stiffness(EI, element.length)
    f_local = k_local @ d_e
    if udl_w:
        f_local = f_local - udl_equiv_nodal_load(element.length, udl_w)
    return f_local


def element_end_forces(
    elements: Sequence[Element],
    d_global: np.ndarray,
    EI: float,
    element_udls: Dict[int, float],
) -> List[np.ndarray]:
    return [
        element_end_forces_local(e, d_global, EI, element_udls.get(e.index))
        for e in elements
    ]


def support_reactions(
    model: BeamModel,
    positions: Tuple[float, ...],
    R: np.ndarray,
    dof: DOFManager = BEAM_DOF,
) -> List[SupportReaction]:
    """
    Reaction at each support, in display units.

    force: vertical reaction in kN, upward positive (= -R_v / 1000)
    moment: kN.m counterclockwise positive, only for fixed supports; 0 elsewhere

    Both are sign-flipped from the raw R vector, which uses the load
    convention (downward positive), so that a support pushing up reads
    positive. The raw values stay available as BeamResult.reactions.

    Supports are reported in the order given. Two supports sharing a node
    share that node's reaction; each reports the full value.
    """
    result = []
    for support in model.supports:
        node_id = node_index(positions, support.position)
        constrained = support.type.constrained_local_dofs
        force = 0.0
        moment = 0.0
        if VERTICAL in constrained:
            force = -float(R[dof.idx(node_id, VERTICAL)]) / N_PER_KN
        if ROTATION in constrained:
            moment = -float(R[dof.idx(node_id, ROTATION)]) / NMM_PER_KNM
        result.append(SupportReaction(
            position=support.position,
            type=support.type,
            force=force,
            moment=moment,
        ))
    return result
