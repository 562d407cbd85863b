import numpy as np
import pytest

import vectfit
from vectfit import classify_poles
from vectfit.basis import basis_matrix


def test_real_pole_columns():
    s = np.array([0.0, 1.0, 3.0])
    dk = basis_matrix(classify_poles([-1.0]), s)
    assert dk.shape == (3, 1)
    assert np.allclose(dk[:, 0], [1.0, 0.5, 0.25])


def test_conjugate_pair_columns():
    s = np.array([0.5j, 1.0j, 2.0j])
    p = -1.0 + 2.0j
    dk = basis_matrix(classify_poles([p, np.conj(p)]), s)
    direct = 1.0 / (s - p)
    mirror = 1.0 / (s - np.conj(p))
    assert np.allclose(dk[:, 0], direct + mirror)
    assert np.allclose(dk[:, 1], 1j*direct - 1j*mirror)


def test_pair_columns_span_conjugate_residues():
    """Real coefficients on a pair's columns give a conjugate residue pair."""
    s = np.linspace(0.1, 3.0, 7) * 1j
    p = -0.5 + 4.0j
    r = 2.0 - 3.0j
    dk = basis_matrix(classify_poles([p, np.conj(p)]), s)
    expected = r / (s - p) + np.conj(r) / (s - np.conj(p))
    assert np.allclose(dk @ [r.real, r.imag], expected)


def test_polynomial_columns():
    s = np.array([0.0, 1.0, 2.0])
    dk = basis_matrix(classify_poles([-1.0]), s, n_polys=3)
    assert dk.shape == (3, 4)
    assert np.allclose(dk[:, 1], 1.0)
    assert np.allclose(dk[:, 2], s)
    assert np.allclose(dk[:, 3], s**2)


def test_polynomial_only_columns():
    s = np.array([1.0j, 2.0j])
    dk = basis_matrix(classify_poles([]), s, n_polys=2)
    assert np.allclose(dk, [[1.0, 1.0j], [1.0, 2.0j]])


def test_sentinel():
    s = np.array([0.0, 1.0])
    pole_set = classify_poles([0.0])
    dk = basis_matrix(pole_set, s, sentinel=1e18)
    assert dk[0, 0] == 1e18
    assert dk[1, 0] == 1.0

    dk = basis_matrix(pole_set, s)
    assert not np.isfinite(dk[0, 0])


def test_unknown_tag():
    pole_set = vectfit.PoleSet([-1.0], [7])
    with pytest.raises(vectfit.InternalInconsistencyError):
        basis_matrix(pole_set, np.array([1.0, 2.0]))
