import numpy as np
import pytest

from vectfit import classify_poles
from vectfit.basis import basis_matrix
from vectfit.relocation import (clamp_denominator, identify_poles,
                                nonrelaxed_block, relaxed_block, update_poles)
from vectfit.residues import identify_residues, recombine_residues


@pytest.fixture
def pair_data():
    s = np.linspace(3.0, 7.0, 41)
    p = 5.0 + 0.1j
    f = np.vstack((np.real((0.5 - 11.0j) / (s - p) + (0.5 + 11.0j) / (s - np.conj(p))),
                   np.real((1.5 - 20.0j) / (s - p) + (1.5 + 20.0j) / (s - np.conj(p)))))
    return s, np.array([p, np.conj(p)]), f


@pytest.mark.parametrize("denom, expected", [
    (0.0, 1.0),
    (1e-20, 1e-18),
    (-1e-20, -1e-18),
    (1e20, 1e18),
    (-1e20, -1e18),
    (0.3, 0.3),
])
def test_clamp_denominator(denom, expected):
    assert clamp_denominator(denom, 1e-18, 1e18) == expected


def test_update_poles_without_correction():
    pole_set = classify_poles([-3.0, 1.0 + 2.0j, 1.0 - 2.0j])
    poles = update_poles(pole_set, np.zeros(3), 1.0)
    assert np.allclose(np.sort(poles), np.sort(pole_set.values))


def test_update_poles_real():
    # sigma = 1 + c/(s - p) has its zero at p - c
    pole_set = classify_poles([-3.0])
    poles = update_poles(pole_set, np.array([0.5]), 1.0)
    assert np.allclose(poles, [-3.5])
    poles = update_poles(pole_set, np.array([0.5]), 2.0)
    assert np.allclose(poles, [-3.25])


def test_relaxed_block_shapes(pair_data):
    s, poles, f = pair_data
    pole_set = classify_poles(poles)
    dk = basis_matrix(pole_set, s, 1)
    weight = np.ones_like(f)
    lhs, q_row = relaxed_block(dk, weight[0], f[0], 2, 0)
    assert lhs.shape == (3, 3)
    assert np.all(q_row == 0.0)
    # The reduced block is upper triangular
    assert np.allclose(np.tril(lhs, -1), 0.0)

    closing = np.ones(3)
    lhs, q_row = relaxed_block(dk, weight[1], f[1], 2, 0, closing)
    assert lhs.shape == (3, 3)
    assert q_row.shape == (3,)
    assert np.any(q_row != 0.0)


def test_nonrelaxed_block_shapes(pair_data):
    s, poles, f = pair_data
    pole_set = classify_poles(poles)
    dk = basis_matrix(pole_set, s, 1)
    lhs, rhs = nonrelaxed_block(dk, np.ones_like(f[0]), f[0], 1.0, 2, 0)
    assert lhs.shape == (2, 2)
    assert rhs.shape == (2,)


def test_underdetermined_block():
    """Fewer samples than unknowns still gives square blocks."""
    s = np.array([1.0, 2.0])
    pole_set = classify_poles([-1.0, -2.0, -3.0])
    dk = basis_matrix(pole_set, s, 4)
    f = np.array([1.0, 0.5])
    lhs, q_row = relaxed_block(dk, np.ones(2), f, 3, 4, np.ones(4))
    assert lhs.shape == (4, 4)
    assert q_row.shape == (4,)


def test_identify_poles(pair_data):
    s, poles, f = pair_data
    weight = 1.0 / f
    new_poles = identify_poles(classify_poles([3.5 + 0.035j, 3.5 - 0.035j]),
                               s, f, weight)
    assert np.allclose(new_poles, poles, rtol=1e-7)


def test_identify_residues(pair_data):
    s, poles, f = pair_data
    residues, polys = identify_residues(classify_poles(poles), s, f,
                                        np.ones_like(f))
    assert polys.shape == (2, 0)
    assert np.allclose(residues, [[0.5 - 11.0j, 0.5 + 11.0j],
                                  [1.5 - 20.0j, 1.5 + 20.0j]])


def test_recombine_residues():
    pole_set = classify_poles([-3.0, 1.0 + 2.0j, 1.0 - 2.0j])
    residues = recombine_residues(pole_set, [[4.0, 5.0, 6.0],
                                             [-1.0, 0.0, 2.0]])
    assert np.array_equal(residues, [[4.0, 5.0 + 6.0j, 5.0 - 6.0j],
                                     [-1.0, 2.0j, -2.0j]])
