# mini_beam - static analysis of a straight prismatic beam
"""
MINI-BEAM: Euler-Bernoulli Beam Analysis
========================================

Reactions, shear, moment and deflection of a straight prismatic beam on
fixed / pinned / roller supports under point loads and uniform loads, by the
direct stiffness method.

ARCHITECTURE:
-------------
    kernel/         DOF indexing, scatter-add assembly, partition, solver
    model.py        Inputs (BeamModel, Section, Support, loads)
    mesh.py         Node positions from supports and load breakpoints
    elements.py     4x4 element stiffness
    loads.py        Fixed-end loads of UDLs, point load mapping
    assembly.py     Global K and F
    supports.py     Supports -> constrained DOFs
    post.py         Displacements, reactions, element end forces
    diagrams.py     Sampled deflection / shear / moment curves
    extrema.py      Min / max of a sampled curve
    solve.py        solve_beam pipeline and SolveCache
    normalize.py    Optional clamping of user input
    catalog.py      Default member preset

UNITS: mm, N/mm^2 (MPa); point loads kN, distributed loads kN/m (= N/mm).
"""

from .errors import (
    BeamError,
    InvalidGeometryError,
    OutOfRangeInputError,
    DegenerateMeshError,
    UnderconstrainedSystemError,
)
from .config import SolverConfig, CONFIG
from .model import (
    BeamModel,
    Section,
    Support,
    SupportType,
    PointLoad,
    DistributedLoad,
)
from .solve import BeamResult, SolveCache, solve_beam
from .normalize import normalize_model

__version__ = "0.1.0"
