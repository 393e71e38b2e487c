"""
CATALOG: MEMBER PRESETS
=======================

Default member used when no beam is described: a 190 x 45 MGP10 timber
joist (E = 10 000 MPa) spanning 2 m, pinned at 0 and on a roller at 1.5 m,
with 1.5 kN/m over the full length (the last 0.5 m is an overhang).
"""

from .config import DEFAULTS
from .model import (
    BeamModel,
    Section,
    Support,
    SupportType,
    DistributedLoad,
)


MGP10_190x45 = Section(width=DEFAULTS.section_width, depth=DEFAULTS.section_depth)


def default_model() -> BeamModel:
    return BeamModel(
        span=DEFAULTS.span,
        E=DEFAULTS.E,
        section=MGP10_190x45,
        supports=[
            Support(0.0, SupportType.PINNED),
            Support(1500.0, SupportType.ROLLER),
        ],
        point_loads=[],
        distributed_loads=[DistributedLoad(0.0, DEFAULTS.span, 1.5)],
    )


DEFAULT_MODEL = default_model()
