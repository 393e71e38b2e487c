# Beam element stiffness (Euler-Bernoulli, 2 nodes, 4 DOF)

import numpy as np

from .errors import DegenerateMeshError


def beam_element_stiffness(EI: float, L: float) -> np.ndarray:
    """
    Local stiffness matrix of a prismatic beam segment.
    DOF order: [v1, theta1, v2, theta2]

    Symmetric and positive semi-definite (two rigid-body modes).
    """
    if not L > 0.0:
        raise DegenerateMeshError(f"element length must be positive, got {L}")

    L2 = L * L
    k = (EI / L ** 3) * np.array([
        [ 12.0,   6*L, -12.0,   6*L],
        [  6*L,  4*L2,  -6*L,  2*L2],
        [-12.0,  -6*L,  12.0,  -6*L],
        [  6*L,  2*L2,  -6*L,  4*L2],
    ], dtype=float)
    return k
