# Analysis mesh: node positions from span, supports and load breakpoints

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import InvalidGeometryError, DegenerateMeshError
from .model import BeamModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Element:
    """Beam segment between adjacent nodes `index` and `index + 1`."""
    index: int
    x1: float
    x2: float

    @property
    def length(self) -> float:
        return self.x2 - self.x1

    @property
    def node_ids(self) -> Tuple[int, int]:
        return self.index, self.index + 1


def build_mesh(
    span: float,
    support_positions: Iterable[float] = (),
    point_load_positions: Iterable[float] = (),
    udl_bounds: Iterable[Tuple[float, float]] = (),
    tol: float = 1e-9,
) -> Tuple[float, ...]:
    """
    Build the strictly increasing node positions of the analysis mesh.

    The mesh always contains 0 and span plus every support, point load and
    distributed load boundary, so point loads land on nodes and each element
    carries at most one constant distributed intensity.

    Parameters:
    -----------
    span : float
        Beam length (mm), must be positive
    support_positions, point_load_positions : iterable of float
    udl_bounds : iterable of (start, end)
    tol : float
        Relative tolerance: adjacent nodes closer than tol * span are
        rejected as a zero-length element

    Raises:
    -------
    InvalidGeometryError if span <= 0
    DegenerateMeshError if two distinct positions nearly coincide

    Example:
    --------
    >>> build_mesh(2000.0, [1500.0], [], [(0.0, 2000.0)])
    (0.0, 1500.0, 2000.0)
    """
    span = float(span)
    if not span > 0.0:
        raise InvalidGeometryError(f"span must be positive, got {span}")

    candidates = [0.0, span]
    candidates.extend(float(x) for x in support_positions)
    candidates.extend(float(x) for x in point_load_positions)
    for start, end in udl_bounds:
        candidates.extend((float(start), float(end)))

    positions = sorted(set(candidates))

    min_length = tol * span
    for a, b in zip(positions, positions[1:]):
        if b - a <= min_length:
            raise DegenerateMeshError(
                f"nodes at {a!r} and {b!r} mm form a zero-length element; "
                f"merge the coinciding supports/loads"
            )

    logger.debug("mesh: %d nodes over span %.6g mm", len(positions), span)
    return tuple(positions)


def mesh_for_model(model: BeamModel, tol: float = 1e-9) -> Tuple[float, ...]:
    return build_mesh(
        model.span,
        [s.position for s in model.supports],
        [p.position for p in model.point_loads],
        [(u.start, u.end) for u in model.distributed_loads],
        tol=tol,
    )


def mesh_elements(positions: Tuple[float, ...]) -> List[Element]:
    return [Element(e, positions[e], positions[e + 1]) for e in range(len(positions) - 1)]


def node_index(positions: Tuple[float, ...], x: float) -> int:
    """Index of the node located exactly at x (all breakpoints are nodes)."""
    try:
        return positions.index(float(x))
    except ValueError:
        raise KeyError(f"no mesh node at x = {x} mm") from None
