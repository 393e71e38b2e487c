# global K and F assembly for a meshed beam

import logging
import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .model import BeamModel
from .mesh import Element, mesh_elements
from .elements import beam_element_stiffness
from .loads import element_udl_intensities, assemble_element_loads, add_point_loads
from .kernel.dof import DOFManager, BEAM_DOF
from .kernel.assemble import assemble_global_K as kernel_assemble_K

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobalSystem:
    """Unconstrained system K d = F of one meshed beam."""
    positions: Tuple[float, ...]
    elements: Tuple[Element, ...]
    K: np.ndarray
    F: np.ndarray
    element_udls: Dict[int, float]

    @property
    def ndof(self) -> int:
        return self.K.shape[0]


def assemble_global_K(
    positions: Tuple[float, ...],
    EI: float,
    dof: DOFManager = BEAM_DOF,
) -> np.ndarray:
    elements = mesh_elements(positions)
    contributions = []
    for e in elements:
        ke = beam_element_stiffness(EI, e.length)
        contributions.append((dof.element_dof_map(list(e.node_ids)), ke))
    return kernel_assemble_K(dof.ndof(len(positions)), contributions)


def assemble_system(
    model: BeamModel,
    positions: Tuple[float, ...],
    dof: DOFManager = BEAM_DOF,
) -> GlobalSystem:
    """
    Build K and F for a model on a given mesh.

    F holds the fixed-end loads of fully covered elements plus point loads
    (kN -> N) on the vertical DOF of their nodes.
    """
    elements: List[Element] = mesh_elements(positions)
    K = assemble_global_K(positions, model.EI, dof)

    element_udls = element_udl_intensities(elements, model.distributed_loads)
    F = assemble_element_loads(len(positions), elements, element_udls, dof)
    add_point_loads(F, positions, model.point_loads, dof)

    logger.debug(
        "assembled %d elements, %d DOFs, %d loaded elements",
        len(elements), K.shape[0], len(element_udls),
    )
    return GlobalSystem(
        positions=tuple(positions),
        elements=tuple(elements),
        K=K,
        F=F,
        element_udls=element_udls,
    )
