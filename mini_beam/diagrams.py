# mini_beam/diagrams.py
"""
SHEAR, MOMENT AND DEFLECTION DIAGRAMS
=====================================

Turns the solved nodal displacements into continuous curves sampled along
every element, ready for plotting or extrema search.

KEY CONCEPTS:
-------------
Within one element the load is a constant intensity w (or nothing), so:
- V varies linearly:       V(x) = V1 - w*x
- M varies parabolically:  M(x) = M1 + V1*x - w*x^2/2
- v is the Hermite cubic through (v1, theta1, v2, theta2), plus the
  fixed-end deflection w*x^2*(L-x)^2 / (24*EI) of a loaded element

The fixed-end term is zero at both nodes and has zero slope there, so it
does not change nodal values; it makes the interior deflection exact for a
uniform load instead of a cubic approximation.

SIGN CONVENTIONS:
-----------------
- x to the right, deflection v downward positive (same as the loads)
- Positive V: upward force on the left face of the cut
- Positive M: sagging (compression on top fiber)

With end forces f = k.d - f_fixed_end (actions of the nodes on the element,
downward positive), V1 = -f[0] and M1 = f[1].
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .mesh import Element, mesh_elements
from .post import element_end_forces_local, N_PER_KN, NMM_PER_KNM
from .kernel.dof import BEAM_DOF, VERTICAL, ROTATION


@dataclass(frozen=True)
class DiagramSample:
    """A single point on the response curves."""
    x: float            # Position along the beam (mm)
    deflection: float   # Vertical deflection (mm, downward positive)
    shear: float        # Shear force (N, or kN in display units)
    moment: float       # Bending moment (N.mm, or kN.m in display units)


def hermite_shape_functions(xi: float, L: float) -> Tuple[float, float, float, float]:
    """
    Hermite cubic shape functions of a beam element.

    v(xi) = N1*v1 + N2*theta1 + N3*v2 + N4*theta2, with xi = x/L in [0, 1].
    N2 and N4 already include the factor L.
    """
    xi2 = xi * xi
    xi3 = xi2 * xi
    N1 = 1 - 3*xi2 + 2*xi3
    N2 = L * (xi - 2*xi2 + xi3)
    N3 = 3*xi2 - 2*xi3
    N4 = L * (-xi2 + xi3)
    return N1, N2, N3, N4


def fixed_end_deflection(x: float, L: float, w: float, EI: float) -> float:
    """Deflection of a fixed-fixed span L under uniform w, at distance x."""
    return w * x * x * (L - x) ** 2 / (24.0 * EI)


def sample_element(
    element: Element,
    d_global: np.ndarray,
    EI: float,
    udl_w: float = 0.0,
    sample_count: int = 80,
) -> List[DiagramSample]:
    """
    Sample deflection, shear and moment at sample_count + 1 equally spaced
    points of one element, both ends included.

    Parameters:
    -----------
    element : Element
    d_global : np.ndarray
        Full displacement vector (2 x n_nodes)
    EI : float
        Flexural rigidity (N.mm^2)
    udl_w : float
        Effective distributed intensity on the element (N/mm), 0 if none
    sample_count : int
        Number of intervals per element

    Returns:
    --------
    List[DiagramSample] in internal units (mm, N, N.mm)
    """
    L = element.length
    n1, n2 = element.node_ids
    v1 = d_global[BEAM_DOF.idx(n1, VERTICAL)]
    t1 = d_global[BEAM_DOF.idx(n1, ROTATION)]
    v2 = d_global[BEAM_DOF.idx(n2, VERTICAL)]
    t2 = d_global[BEAM_DOF.idx(n2, ROTATION)]

    f_local = element_end_forces_local(element, d_global, EI, udl_w)
    V1 = -f_local[0]
    M1 = f_local[1]
    w = udl_w or 0.0

    samples = []
    for i in range(sample_count + 1):
        xi = i / sample_count
        x = xi * L

        N1, N2, N3, N4 = hermite_shape_functions(xi, L)
        deflection = N1 * v1 + N2 * t1 + N3 * v2 + N4 * t2
        if w:
            deflection += fixed_end_deflection(x, L, w, EI)

        shear = V1 - w * x
        moment = M1 + V1 * x - w * x * x / 2.0

        samples.append(DiagramSample(
            x=element.x1 + x,
            deflection=float(deflection),
            shear=float(shear),
            moment=float(moment),
        ))
    return samples


def sample_diagrams(
    positions: Tuple[float, ...],
    d_global: np.ndarray,
    EI: float,
    element_udls: Dict[int, float],
    sample_count: int = 80,
) -> List[DiagramSample]:
    """
    Concatenate element samples in node order.

    Adjacent elements both sample their shared node, so a point load shows
    as a vertical jump in shear. The last sample's x is set to the span
    exactly to remove drift from fractional stepping.
    """
    samples: List[DiagramSample] = []
    for element in mesh_elements(positions):
        samples.extend(sample_element(
            element, d_global, EI, element_udls.get(element.index, 0.0), sample_count
        ))

    if samples:
        last = samples[-1]
        samples[-1] = DiagramSample(positions[-1], last.deflection, last.shear, last.moment)
    return samples


def to_display_units(samples: Sequence[DiagramSample]) -> List[DiagramSample]:
    """Shear N -> kN, moment N.mm -> kN.m; x and deflection stay in mm."""
    return [
        DiagramSample(
            x=s.x,
            deflection=s.deflection,
            shear=s.shear / N_PER_KN,
            moment=s.moment / NMM_PER_KNM,
        )
        for s in samples
    ]
