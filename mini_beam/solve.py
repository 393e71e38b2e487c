# solve.py - one analysis run: mesh -> assemble -> constrain -> solve -> recover -> diagrams
"""
SOLVE: THE ANALYSIS PIPELINE
============================

    solve_beam(model) -> BeamResult

is a pure function of its input. Every call builds its own mesh, matrices
and samples; nothing is shared between calls. Callers that re-run the
analysis on every input change can put a SolveCache in front of it, keyed on
the model's structural hash.

PIPELINE:
---------
    1. validate the model (geometry, positions)
    2. build_mesh          -> node positions
    3. assemble_system     -> K, F, per-element UDL intensities
    4. constrained_dofs    -> fixed DOFs from supports
    5. solve_linear        -> d, R = K.d - F
    6. sample_diagrams     -> deflection / shear / moment curves
    7. find_extrema        -> min/max of each curve
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Any

import numpy as np
import pandas as pd

from .config import SolverConfig, CONFIG
from .model import BeamModel
from .mesh import mesh_for_model
from .assembly import assemble_system
from .supports import constrained_dofs
from .kernel.solve import solve_linear
from .post import (
    SupportReaction,
    check_equilibrium,
    nodal_displacements,
    support_reactions,
)
from .diagrams import DiagramSample, sample_diagrams, to_display_units
from .extrema import Extrema, diagram_extrema

logger = logging.getLogger(__name__)


def _readonly(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


@dataclass(frozen=True, eq=False)
class BeamResult:
    """
    Output of one analysis.

    Units:
    ------
    node_positions : mm
    displacements  : (n_nodes, 2) array of (vertical mm downward, rotation rad)
    reactions      : per-DOF R = K.d - F, N at vertical DOFs, N.mm at rotations
    samples        : x mm, deflection mm, shear kN, moment kN.m
    """
    model: BeamModel
    node_positions: Tuple[float, ...]
    displacements: np.ndarray
    reactions: np.ndarray
    fixed_dofs: Tuple[int, ...]
    samples: Tuple[DiagramSample, ...]
    shear: Extrema
    moment: Extrema
    deflection: Extrema
    support_reactions: Tuple[SupportReaction, ...]
    equilibrium_residual: float

    def to_frame(self) -> pd.DataFrame:
        """Diagram samples as a DataFrame (one row per sample)."""
        return pd.DataFrame(
            {
                "x_mm": [s.x for s in self.samples],
                "deflection_mm": [s.deflection for s in self.samples],
                "shear_kN": [s.shear for s in self.samples],
                "moment_kNm": [s.moment for s in self.samples],
            }
        )

    def summary(self) -> Dict[str, Any]:
        return {
            "n_nodes": len(self.node_positions),
            "max_abs_shear_kN": self.shear.abs_max,
            "max_abs_moment_kNm": self.moment.abs_max,
            "max_abs_deflection_mm": self.deflection.abs_max,
            "shear": self.shear.to_dict(),
            "moment": self.moment.to_dict(),
            "deflection": self.deflection.to_dict(),
            "reactions": [
                {
                    "position": r.position,
                    "type": r.type.value,
                    "force_kN": r.force,
                    "moment_kNm": r.moment,
                }
                for r in self.support_reactions
            ],
        }


def solve_beam(model: BeamModel, config: SolverConfig = CONFIG) -> BeamResult:
    """
    Run the full static analysis of a beam.

    Args:
        model: Beam, supports and loads (validated here)
        config: Sampling and tolerance settings

    Returns:
        BeamResult

    Raises:
        InvalidGeometryError: span, E or section not positive / not finite
        OutOfRangeInputError: position outside [0, span], UDL start > end
        DegenerateMeshError: two breakpoints nearly coincide
        UnderconstrainedSystemError: supports allow rigid-body motion
    """
    model.validate()

    positions = mesh_for_model(model, config.mesh_tol)
    system = assemble_system(model, positions)
    fixed = constrained_dofs(model.supports, positions)

    d, R, free = solve_linear(
        system.K, system.F, fixed, config.pivot_tol, config.cond_limit
    )
    residual = check_equilibrium(R, system.F, free, config.equilibrium_rtol)

    raw = sample_diagrams(positions, d, model.EI, system.element_udls, config.sample_count)
    samples = to_display_units(raw)

    result = BeamResult(
        model=model,
        node_positions=positions,
        displacements=_readonly(nodal_displacements(d)),
        reactions=_readonly(R),
        fixed_dofs=tuple(fixed),
        samples=tuple(samples),
        shear=diagram_extrema(samples, "shear"),
        moment=diagram_extrema(samples, "moment"),
        deflection=diagram_extrema(samples, "deflection"),
        support_reactions=tuple(support_reactions(model, positions, R)),
        equilibrium_residual=residual,
    )
    logger.debug(
        "solved beam: %d nodes, max |M| = %.4g kN.m, max |v| = %.4g mm",
        len(positions), result.moment.abs_max, result.deflection.abs_max,
    )
    return result


class SolveCache:
    """
    Content-addressed memo in front of solve_beam.

    Keys are (model.cache_key(), config); equal models hit the same entry
    regardless of object identity. Least recently used entries are dropped
    beyond maxsize. Failures are not cached.
    """

    def __init__(self, maxsize: int = 128):
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.maxsize = maxsize
        self._entries: "OrderedDict[Tuple[str, SolverConfig], BeamResult]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, model: BeamModel, config: SolverConfig = CONFIG) -> Optional[BeamResult]:
        key = (model.cache_key(), config)
        result = self._entries.get(key)
        if result is not None:
            self.hits += 1
            self._entries.move_to_end(key)
        return result

    def solve(self, model: BeamModel, config: SolverConfig = CONFIG) -> BeamResult:
        key = (model.cache_key(), config)
        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            return self._entries[key]

        self.misses += 1
        result = solve_beam(model, config)
        self._entries[key] = result
        if len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)
        return result

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
