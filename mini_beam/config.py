# mini_beam/config.py
"""
Solver configuration and beam defaults.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Numerical settings for one analysis run."""

    # Diagram sampling: sample_count + 1 points per element
    sample_count: int = 80

    # Smallest accepted pivot of the diagonally scaled reduced system
    pivot_tol: float = 1e-12

    # Largest accepted condition number of the diagonally scaled reduced system
    cond_limit: float = 1e12

    # Node positions closer than mesh_tol * span form a zero-length element
    mesh_tol: float = 1e-9

    # Advisory residual check on free-DOF reactions
    equilibrium_rtol: float = 1e-6

    def __post_init__(self):
        if self.sample_count < 1:
            raise ValueError(f"sample_count must be >= 1, got {self.sample_count}")
        if self.pivot_tol <= 0:
            raise ValueError(f"pivot_tol must be positive, got {self.pivot_tol}")
        if not self.cond_limit > 1.0:
            raise ValueError(f"cond_limit must be greater than 1, got {self.cond_limit}")
        if self.mesh_tol < 0:
            raise ValueError(f"mesh_tol must be non-negative, got {self.mesh_tol}")


@dataclass(frozen=True)
class BeamDefaults:
    """Member preset: 190 x 45 MGP10 timber joist over 2 m."""

    span: float = 2000.0  # mm
    E: float = 10000.0  # MPa = N/mm^2 (MGP10)
    section_width: float = 45.0  # mm
    section_depth: float = 190.0  # mm


# Global config instances
CONFIG = SolverConfig()
DEFAULTS = BeamDefaults()
