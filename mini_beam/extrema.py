# Signed min/max of a sampled diagram

from dataclasses import dataclass
from typing import Sequence

from .diagrams import DiagramSample


@dataclass(frozen=True)
class Extrema:
    min: float
    min_x: float
    max: float
    max_x: float

    def to_dict(self) -> dict:
        return {"min": self.min, "minX": self.min_x, "max": self.max, "maxX": self.max_x}

    @property
    def abs_max(self) -> float:
        return max(abs(self.min), abs(self.max))


def find_extrema(xs: Sequence[float], values: Sequence[float]) -> Extrema:
    """
    Running min/max of a series and the x of their first occurrence.

    Comparisons are strict, so on ties the earlier x is kept. An empty series
    gives Extrema(0, 0, 0, 0).
    """
    if len(xs) != len(values):
        raise ValueError(f"xs and values differ in length: {len(xs)} != {len(values)}")
    if not len(xs):
        return Extrema(0.0, 0.0, 0.0, 0.0)

    lo = hi = float(values[0])
    lo_x = hi_x = float(xs[0])
    for x, value in zip(xs, values):
        if value < lo:
            lo, lo_x = float(value), float(x)
        if value > hi:
            hi, hi_x = float(value), float(x)
    return Extrema(min=lo, min_x=lo_x, max=hi, max_x=hi_x)


def diagram_extrema(samples: Sequence[DiagramSample], key: str) -> Extrema:
    """Extrema of one quantity ('deflection', 'shear' or 'moment') of a diagram."""
    if key not in ("deflection", "shear", "moment"):
        raise ValueError(f"unknown diagram quantity {key!r}")
    return find_extrema([s.x for s in samples], [getattr(s, key) for s in samples])
