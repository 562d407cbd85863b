import numpy as np
import pytest

import vectfit
from vectfit import vectfit as vf
from vectfit.pool import map_vectors


def test_map_vectors_serial():
    assert map_vectors(pow, [(2, 3), (3, 2)]) == [8, 9]
    assert map_vectors(pow, []) == []


@pytest.fixture
def two_vector_data():
    s = np.linspace(3.0, 7.0, 51)
    p = 5.0 + 0.1j
    f = np.vstack((np.real((0.5 - 11.0j) / (s - p) + (0.5 + 11.0j) / (s - np.conj(p))),
                   np.real((1.5 - 20.0j) / (s - p) + (1.5 + 20.0j) / (s - np.conj(p)))))
    return s, f, [3.5 + 0.035j, 3.5 - 0.035j]


def test_multiprocessing_matches_serial(two_vector_data):
    s, f, init_poles = two_vector_data
    weight = np.ones_like(f)
    serial = vf(f, s, init_poles, weight, n_polys=1)
    with vectfit.config.patch('use_multiprocessing', True), \
            vectfit.config.patch('num_processes', 2):
        parallel = vf(f, s, init_poles, weight, n_polys=1)
    for a, b in zip(serial, parallel):
        assert np.allclose(a, b)
