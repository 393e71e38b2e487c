# Beam, Support, loads, Section (frozen dataclasses)

import hashlib
import json
import math
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, Tuple, Any

from .errors import InvalidGeometryError, OutOfRangeInputError
from .kernel.dof import VERTICAL, ROTATION


class SupportType(Enum):
    FIXED = "fixed"
    PINNED = "pinned"
    ROLLER = "roller"
    FREE = "free"

    @classmethod
    def parse(cls, value) -> "SupportType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown support type {value!r}; expected one of: {options}") from None

    @property
    def constrained_local_dofs(self) -> Tuple[int, ...]:
        return _CONSTRAINED_DOFS[self]


# A "free" support is a placeholder that only adds a mesh node.
_CONSTRAINED_DOFS: Dict[SupportType, Tuple[int, ...]] = {
    SupportType.FIXED: (VERTICAL, ROTATION),
    SupportType.PINNED: (VERTICAL,),
    SupportType.ROLLER: (VERTICAL,),
    SupportType.FREE: (),
}
assert set(_CONSTRAINED_DOFS) == set(SupportType), "every SupportType needs a DOF mapping"


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidGeometryError(f"{name} must be finite, got {value}")
    return value


@dataclass(frozen=True)
class Section:
    """
    Solid rectangular cross-section (mm).

    I = b*d^3/12 about the bending axis, S = b*d^2/6.
    """
    width: float
    depth: float

    def __post_init__(self):
        for name in ("width", "depth"):
            value = _require_finite(f"section {name}", getattr(self, name))
            if value <= 0.0:
                raise InvalidGeometryError(f"section {name} must be positive, got {value}")
            object.__setattr__(self, name, value)

    @property
    def I(self) -> float:
        return self.width * self.depth ** 3 / 12.0

    @property
    def A(self) -> float:
        return self.width * self.depth

    @property
    def S(self) -> float:
        return self.width * self.depth ** 2 / 6.0


@dataclass(frozen=True)
class Support:
    position: float  # mm
    type: SupportType = SupportType.PINNED

    def __post_init__(self):
        object.__setattr__(self, "position", float(self.position))
        object.__setattr__(self, "type", SupportType.parse(self.type))


@dataclass(frozen=True)
class PointLoad:
    position: float  # mm
    magnitude: float  # kN, downward positive

    def __post_init__(self):
        object.__setattr__(self, "position", float(self.position))
        object.__setattr__(self, "magnitude", float(self.magnitude))


@dataclass(frozen=True)
class DistributedLoad:
    start: float  # mm
    end: float  # mm
    intensity: float  # kN/m == N/mm, downward positive

    def __post_init__(self):
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "end", float(self.end))
        object.__setattr__(self, "intensity", float(self.intensity))

    def covers(self, x1: float, x2: float) -> bool:
        """True only when [x1, x2] lies entirely inside [start, end]."""
        return self.start <= x1 and self.end >= x2

    @property
    def total(self) -> float:
        return self.intensity * (self.end - self.start)


@dataclass(frozen=True)
class BeamModel:
    """
    Complete input of one analysis: a straight prismatic beam from x=0 to
    x=span with supports and loads.

    Units: mm, MPa (N/mm^2), kN for point loads, kN/m for distributed loads.
    """
    span: float
    E: float
    section: Section
    supports: Tuple[Support, ...] = ()
    point_loads: Tuple[PointLoad, ...] = ()
    distributed_loads: Tuple[DistributedLoad, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "span", float(self.span))
        object.__setattr__(self, "E", float(self.E))
        object.__setattr__(self, "supports", tuple(self.supports))
        object.__setattr__(self, "point_loads", tuple(self.point_loads))
        object.__setattr__(self, "distributed_loads", tuple(self.distributed_loads))

    @property
    def I(self) -> float:
        return self.section.I

    @property
    def EI(self) -> float:
        return self.E * self.section.I

    def validate(self) -> "BeamModel":
        """Raise on geometry or positions the solver cannot accept."""
        span = _require_finite("span", self.span)
        if span <= 0.0:
            raise InvalidGeometryError(f"span must be positive, got {span}")
        E = _require_finite("E", self.E)
        if E <= 0.0:
            raise InvalidGeometryError(f"E must be positive, got {E}")

        def check_position(what: str, x: float):
            x = _require_finite(what, x)
            if x < 0.0 or x > span:
                raise OutOfRangeInputError(f"{what} {x} is outside [0, {span}]")

        for s in self.supports:
            check_position(f"{s.type.value} support position", s.position)
        for p in self.point_loads:
            check_position("point load position", p.position)
            _require_finite("point load magnitude", p.magnitude)
        for u in self.distributed_loads:
            check_position("distributed load start", u.start)
            check_position("distributed load end", u.end)
            _require_finite("distributed load intensity", u.intensity)
            if u.start > u.end:
                raise OutOfRangeInputError(
                    f"distributed load start {u.start} is greater than end {u.end}"
                )
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["supports"] = [
            {"position": s.position, "type": s.type.value} for s in self.supports
        ]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BeamModel":
        return cls(
            span=data["span"],
            E=data["E"],
            section=Section(**data["section"]),
            supports=[Support(**s) for s in data.get("supports", [])],
            point_loads=[PointLoad(**p) for p in data.get("point_loads", [])],
            distributed_loads=[DistributedLoad(**u) for u in data.get("distributed_loads", [])],
        )

    def cache_key(self) -> str:
        """Structural content hash: equal models give equal keys."""
        return hashlib.md5(json.dumps(self.to_dict(), sort_keys=True).encode()).hexdigest()
