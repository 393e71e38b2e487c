import numpy as np
import pytest

from mini_beam import BeamModel, Section, Support, PointLoad, DistributedLoad, SolverConfig, solve_beam
from mini_beam.diagrams import (
    DiagramSample,
    hermite_shape_functions,
    fixed_end_deflection,
    sample_diagrams,
    to_display_units,
)


SECTION = Section(45.0, 190.0)
E = 10000.0


def test_hermite_shape_functions_at_ends():
    L = 800.0
    assert hermite_shape_functions(0.0, L) == (1.0, 0.0, 0.0, 0.0)
    N1, N2, N3, N4 = hermite_shape_functions(1.0, L)
    assert (N1, N3) == (0.0, 1.0)
    assert N2 == pytest.approx(0.0, abs=1e-12)
    assert N4 == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("xi", [0.1, 0.25, 0.5, 0.9])
def test_hermite_partition_of_unity(xi):
    """Rigid translation v1 = v2 = 1 must interpolate to 1 everywhere."""
    N1, _, N3, _ = hermite_shape_functions(xi, 1000.0)
    assert N1 + N3 == pytest.approx(1.0)


def test_fixed_end_deflection_vanishes_at_nodes():
    assert fixed_end_deflection(0.0, 1000.0, 2.0, 1e11) == 0.0
    assert fixed_end_deflection(1000.0, 1000.0, 2.0, 1e11) == 0.0
    assert fixed_end_deflection(500.0, 1000.0, 2.0, 1e11) == pytest.approx(2.0 * 1000.0 ** 4 / (384 * 1e11))


def test_sample_count_and_final_x():
    positions = (0.0, 700.0, 2000.0)
    d = np.zeros(6)

    samples = sample_diagrams(positions, d, 1e11, {}, sample_count=10)

    assert len(samples) == 2 * 11
    assert samples[0].x == 0.0
    assert samples[10].x == 700.0 and samples[11].x == 700.0
    assert samples[-1].x == 2000.0
    assert all(b.x >= a.x for a, b in zip(samples, samples[1:]))


def test_to_display_units():
    (s,) = to_display_units([DiagramSample(x=5.0, deflection=1.2, shear=1500.0, moment=2.5e6)])
    assert s == DiagramSample(x=5.0, deflection=1.2, shear=1.5, moment=2.5)


def test_shear_jump_under_point_load():
    """Midspan point load P on a simple beam: shear +P/2 then -P/2, peak moment PL/4."""
    P, L = 4.0, 2000.0
    model = BeamModel(
        span=L, E=E, section=SECTION,
        supports=[Support(0.0, "pinned"), Support(L, "roller")],
        point_loads=[PointLoad(L / 2, P)],
    )
    result = solve_beam(model, SolverConfig(sample_count=20))

    left_end = result.samples[20]   # last sample of element 0
    right_start = result.samples[21]  # first sample of element 1
    assert left_end.x == right_start.x == 1000.0
    assert np.isclose(left_end.shear, P / 2, rtol=1e-9)
    assert np.isclose(right_start.shear, -P / 2, rtol=1e-9)

    assert np.isclose(result.moment.max, P * L / 4 / 1000.0, rtol=1e-9)
    assert result.moment.max_x == 1000.0

    EI = E * SECTION.I
    assert np.isclose(result.deflection.max, P * 1000.0 * L ** 3 / (48 * EI), rtol=1e-9)


def test_deflection_continuous_across_elements():
    model = BeamModel(
        span=3000.0, E=E, section=SECTION,
        supports=[Support(0.0, "fixed"), Support(3000.0, "roller")],
        point_loads=[PointLoad(1000.0, 2.0)],
        distributed_loads=[DistributedLoad(1000.0, 3000.0, 1.0)],
    )
    result = solve_beam(model, SolverConfig(sample_count=8))

    boundary = [s for s in result.samples if s.x == 1000.0]
    assert len(boundary) == 2
    assert np.isclose(boundary[0].deflection, boundary[1].deflection, rtol=1e-12)
    assert np.isclose(boundary[0].moment, boundary[1].moment,
                      rtol=1e-9, atol=1e-9 * result.moment.abs_max)
