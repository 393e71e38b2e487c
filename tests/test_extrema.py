import pytest

from mini_beam.diagrams import DiagramSample
from mini_beam.extrema import Extrema, find_extrema, diagram_extrema


def test_first_occurrence_wins_on_ties():
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]
    values = [1.0, 3.0, 3.0, -1.0, -1.0]

    ext = find_extrema(xs, values)

    assert ext == Extrema(min=-1.0, min_x=3.0, max=3.0, max_x=1.0)
    assert ext.abs_max == 3.0
    assert ext.to_dict() == {"min": -1.0, "minX": 3.0, "max": 3.0, "maxX": 1.0}


def test_constant_series_reports_first_point():
    ext = find_extrema([10.0, 20.0, 30.0], [2.0, 2.0, 2.0])
    assert ext.min_x == 10.0
    assert ext.max_x == 10.0


def test_empty_series_is_all_zero():
    assert find_extrema([], []) == Extrema(0.0, 0.0, 0.0, 0.0)


def test_length_mismatch():
    with pytest.raises(ValueError):
        find_extrema([0.0, 1.0], [1.0])


def test_diagram_extrema_by_quantity():
    samples = [
        DiagramSample(x=0.0, deflection=0.0, shear=1.0, moment=0.0),
        DiagramSample(x=500.0, deflection=2.0, shear=0.0, moment=0.5),
        DiagramSample(x=1000.0, deflection=0.0, shear=-1.0, moment=0.0),
    ]

    shear = diagram_extrema(samples, "shear")
    assert (shear.max, shear.max_x, shear.min, shear.min_x) == (1.0, 0.0, -1.0, 1000.0)

    deflection = diagram_extrema(samples, "deflection")
    assert deflection.max == 2.0 and deflection.max_x == 500.0

    with pytest.raises(ValueError):
        diagram_extrema(samples, "rotation")
