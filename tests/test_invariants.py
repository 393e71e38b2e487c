"""
Physical invariants that must hold for any stable beam:

- K is symmetric and singular before supports are applied
- Vertical forces balance: reactions + applied loads = 0
- Moments about x = 0 balance
- Same input -> same output
- No load -> no response
"""

import numpy as np
import pytest

from mini_beam import (
    BeamModel,
    Section,
    Support,
    PointLoad,
    DistributedLoad,
    solve_beam,
)
from mini_beam.assembly import assemble_global_K


SECTION = Section(width=45.0, depth=190.0)
E = 10000.0

STABLE_CASES = {
    "simply_supported_mixed": dict(
        span=3000.0,
        supports=[Support(0.0, "pinned"), Support(3000.0, "roller")],
        point_loads=[PointLoad(750.0, 4.0), PointLoad(2200.0, -1.5)],
        distributed_loads=[DistributedLoad(500.0, 1800.0, 2.0)],
    ),
    "two_span_continuous": dict(
        span=4000.0,
        supports=[Support(0.0, "pinned"), Support(2000.0, "roller"), Support(4000.0, "roller")],
        point_loads=[PointLoad(1000.0, 3.0)],
        distributed_loads=[DistributedLoad(0.0, 4000.0, 1.0), DistributedLoad(2500.0, 3500.0, 0.5)],
    ),
    "fixed_fixed": dict(
        span=2500.0,
        supports=[Support(0.0, "fixed"), Support(2500.0, "fixed")],
        point_loads=[PointLoad(900.0, 5.0)],
        distributed_loads=[DistributedLoad(0.0, 2500.0, 1.2)],
    ),
    "propped_cantilever_with_free_marker": dict(
        span=2000.0,
        supports=[Support(0.0, "fixed"), Support(1200.0, "free"), Support(2000.0, "roller")],
        point_loads=[PointLoad(1200.0, 2.5)],
        distributed_loads=[],
    ),
    "overhangs_both_ends": dict(
        span=3000.0,
        supports=[Support(500.0, "pinned"), Support(2500.0, "roller")],
        point_loads=[PointLoad(0.0, 1.0), PointLoad(3000.0, 1.0)],
        distributed_loads=[DistributedLoad(0.0, 3000.0, 0.8)],
    ),
}


def make_model(case):
    return BeamModel(E=E, section=SECTION, **STABLE_CASES[case])


def applied_loads(model):
    """Total applied vertical load (N) and its moment about x = 0 (N.mm), downward positive."""
    force = 0.0
    moment = 0.0
    for p in model.point_loads:
        force += p.magnitude * 1000.0
        moment += p.magnitude * 1000.0 * p.position
    for u in model.distributed_loads:
        force += u.intensity * (u.end - u.start)
        moment += u.intensity * (u.end ** 2 - u.start ** 2) / 2.0
    return force, moment


def test_stiffness_matrix_symmetry():
    """
    Maxwell's reciprocal theorem: K[i, j] == K[j, i].
    """
    K = assemble_global_K((0.0, 700.0, 1500.0, 2000.0), E * SECTION.I)
    np.testing.assert_allclose(K, K.T, rtol=1e-12, atol=0.0,
                               err_msg="Stiffness matrix is not symmetric!")


def test_unconstrained_stiffness_is_singular():
    """Rigid translation (v = 1) and rotation (v = x, theta = 1) produce no forces."""
    positions = (0.0, 700.0, 1500.0, 2000.0)
    K = assemble_global_K(positions, E * SECTION.I)

    translation = np.zeros(K.shape[0])
    translation[0::2] = 1.0
    rotation = np.zeros(K.shape[0])
    rotation[0::2] = positions
    rotation[1::2] = 1.0

    scale = np.max(np.abs(K))
    assert np.max(np.abs(K @ translation)) < 1e-9 * scale
    assert np.max(np.abs(K @ rotation)) < 1e-9 * scale * positions[-1]


@pytest.mark.parametrize("case", sorted(STABLE_CASES))
def test_equilibrium_vertical_forces(case):
    model = make_model(case)
    result = solve_beam(model)

    total_load, _ = applied_loads(model)
    sum_reactions = float(np.sum(result.reactions[0::2]))

    # R is in the load convention, so reactions cancel the loads
    assert np.isclose(sum_reactions + total_load, 0.0, atol=1e-6 * max(abs(total_load), 1.0)), \
        f"ΣR_v + ΣF = {sum_reactions + total_load:.3e}"

    # Same statement with the upward-positive support read-out (kN)
    reported = sum(r.force for r in result.support_reactions
                   if r.type.constrained_local_dofs)
    assert np.isclose(reported, total_load / 1000.0, rtol=1e-6)


@pytest.mark.parametrize("case", sorted(STABLE_CASES))
def test_equilibrium_moments(case):
    model = make_model(case)
    result = solve_beam(model)

    _, applied_moment = applied_loads(model)
    x = np.array(result.node_positions)
    reaction_moment = float(np.sum(x * result.reactions[0::2]) + np.sum(result.reactions[1::2]))

    total = applied_moment + reaction_moment
    assert abs(total) < 1e-6 * max(abs(applied_moment), 1.0), \
        f"Moment equilibrium violated: ΣM = {total:.3e}"


@pytest.mark.parametrize("case", sorted(STABLE_CASES))
def test_free_dof_residuals_vanish(case):
    result = solve_beam(make_model(case))
    assert result.equilibrium_residual < 1e-9

    free = np.setdiff1d(np.arange(result.reactions.size), result.fixed_dofs)
    scale = np.max(np.abs(result.reactions))
    assert np.all(np.abs(result.reactions[free]) < 1e-8 * scale)


def test_determinism():
    a = solve_beam(make_model("two_span_continuous"))
    b = solve_beam(make_model("two_span_continuous"))

    assert a.node_positions == b.node_positions
    assert np.array_equal(a.displacements, b.displacements)
    assert np.array_equal(a.reactions, b.reactions)
    assert a.samples == b.samples
    assert a.moment == b.moment


@pytest.mark.parametrize("supports", [
    [Support(0.0, "fixed")],
    [Support(0.0, "pinned"), Support(2000.0, "roller")],
    [Support(0.0, "fixed"), Support(1000.0, "free"), Support(2000.0, "fixed")],
])
def test_zero_load_gives_zero_response(supports):
    model = BeamModel(span=2000.0, E=E, section=SECTION, supports=supports)
    result = solve_beam(model)

    assert np.allclose(result.displacements, 0.0, atol=1e-12)
    assert np.allclose(result.reactions, 0.0, atol=1e-9)
    assert all(s.shear == 0.0 and s.moment == 0.0 and s.deflection == 0.0
               for s in result.samples)


def test_results_are_read_only():
    result = solve_beam(make_model("fixed_fixed"))
    with pytest.raises(ValueError):
        result.displacements[0, 0] = 1.0
    with pytest.raises(ValueError):
        result.reactions[0] = 1.0
