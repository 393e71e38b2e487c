import numpy as np
import pytest

from mini_beam.elements import beam_element_stiffness
from mini_beam.errors import DegenerateMeshError


EI = 2.572125e11  # N.mm^2, 45 x 190 MGP10


def test_element_stiffness_entries():
    L = 1000.0
    k = beam_element_stiffness(EI, L)
    c = EI / L ** 3

    assert k.shape == (4, 4)
    assert np.isclose(k[0, 0], 12 * c)
    assert np.isclose(k[0, 1], 6 * L * c)
    assert np.isclose(k[1, 1], 4 * L ** 2 * c)
    assert np.isclose(k[1, 3], 2 * L ** 2 * c)
    assert np.isclose(k[2, 3], -6 * L * c)


def test_element_stiffness_symmetric_psd():
    k = beam_element_stiffness(EI, 750.0)

    np.testing.assert_allclose(k, k.T, rtol=0, atol=0)
    eigenvalues = np.linalg.eigvalsh(k)
    assert np.all(eigenvalues > -1e-6 * eigenvalues.max())
    # Two rigid-body modes
    assert np.sum(np.abs(eigenvalues) < 1e-9 * eigenvalues.max()) == 2


@pytest.mark.parametrize("L", [0.0, -10.0])
def test_zero_length_rejected(L):
    with pytest.raises(DegenerateMeshError):
        beam_element_stiffness(EI, L)


def test_shared_node_stiffness_overlaps():
    """Two elements overlap on DOFs 2 and 3 of their shared node; other blocks stay apart."""
    from mini_beam.kernel.assemble import assemble_global_K, add_nodal_load

    k1 = beam_element_stiffness(EI, 1000.0)
    k2 = beam_element_stiffness(EI, 500.0)
    K = assemble_global_K(6, [([0, 1, 2, 3], k1), ([2, 3, 4, 5], k2)])

    np.testing.assert_allclose(K[:2, :2], k1[:2, :2])
    np.testing.assert_allclose(K[2:4, 2:4], k1[2:, 2:] + k2[:2, :2])
    np.testing.assert_allclose(K[4:, 4:], k2[2:, 2:])
    assert np.all(K[:2, 4:] == 0.0)

    F = np.zeros(6)
    add_nodal_load(F, 1, np.array([5000.0, 0.0]), 2)
    np.testing.assert_array_equal(F, [0.0, 0.0, 5000.0, 0.0, 0.0, 0.0])
