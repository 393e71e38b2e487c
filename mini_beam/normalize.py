# Optional input clean-up before solving: clamp, order, fix reversed UDL bounds
"""
The solver rejects positions outside [0, span] and reversed distributed
loads. An interactive front end usually prefers to repair such input while
the user is still typing; normalize_model does that and returns a new model
that solve_beam accepts:

- support and load positions are clamped into [0, span]
- distributed load bounds are clamped and swapped so that start <= end
- supports are sorted by position, point loads by position, UDLs by start
"""

from typing import List

from .model import BeamModel, Support, PointLoad, DistributedLoad
from .errors import InvalidGeometryError


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def normalize_supports(supports, span: float) -> List[Support]:
    return sorted(
        (Support(clamp(s.position, 0.0, span), s.type) for s in supports),
        key=lambda s: s.position,
    )


def normalize_point_loads(loads, span: float) -> List[PointLoad]:
    return sorted(
        (PointLoad(clamp(p.position, 0.0, span), p.magnitude) for p in loads),
        key=lambda p: p.position,
    )


def normalize_udls(loads, span: float) -> List[DistributedLoad]:
    result = []
    for u in loads:
        start = clamp(u.start, 0.0, span)
        end = clamp(u.end, 0.0, span)
        result.append(DistributedLoad(min(start, end), max(start, end), u.intensity))
    return sorted(result, key=lambda u: u.start)


def normalize_model(model: BeamModel) -> BeamModel:
    """
    Clamp and order a model's supports and loads.

    Span, E and section are not repaired: a non-positive span has no
    meaningful range to clamp into.
    """
    span = model.span
    if not span > 0.0:
        raise InvalidGeometryError(f"span must be positive, got {span}")
    return BeamModel(
        span=span,
        E=model.E,
        section=model.section,
        supports=normalize_supports(model.supports, span),
        point_loads=normalize_point_loads(model.point_loads, span),
        distributed_loads=normalize_udls(model.distributed_loads, span),
    )
