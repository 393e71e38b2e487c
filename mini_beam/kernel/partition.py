# mini_beam/kernel/partition.py
"""Free/fixed DOF partition and reduced system extraction."""

import logging
import numpy as np
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)


def partition_dofs(ndof: int, fixed_dofs: Sequence[int]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split 0..ndof-1 into (free, fixed) index arrays, both sorted and disjoint.
    """
    fixed_set = set(int(i) for i in fixed_dofs)
    bad = [i for i in fixed_set if i < 0 or i >= ndof]
    if bad:
        raise IndexError(f"constrained DOF(s) {sorted(bad)} outside 0..{ndof - 1}")
    fixed = np.array(sorted(fixed_set), dtype=int)
    free = np.array([i for i in range(ndof) if i not in fixed_set], dtype=int)
    logger.debug("DOF partition: %d free, %d fixed", free.size, fixed.size)
    return free, fixed


def reduce_system(
    K: np.ndarray,
    F: np.ndarray,
    free: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """Extract K_ff (rows/cols in free) and F_f."""
    return K[np.ix_(free, free)], F[free]
