import numpy as np

import vectfit.checkvalue as cv
from vectfit.exceptions import ShapeMismatchError

__all__ = ['evaluate', 'RationalModel']


def evaluate(s, poles, residues, polys=None):
    r"""Evaluate a common-pole rational function at the sample points.

    The value of response vector n is

    .. math::
        f_n(s) = \text{Re}\left[ \sum_m \frac{R_{nm}}{s - p_m}
        + \sum_k P_{nk} s^k \right]

    Parameters
    ----------
    s : Iterable of complex
        Sample points, (Ns)
    poles : Iterable of complex
        Poles, (N)
    residues : Iterable of complex
        Residues, (Nv, N), or (N) for a single response vector
    polys : Iterable of float, optional
        Polynomial coefficients in order of increasing degree, (Nv, Nc), or
        (Nc) for a single response vector

    Returns
    -------
    numpy.ndarray
        Real function values, (Nv, Ns)

    """
    s = np.asarray(s)
    poles = np.asarray(poles, dtype=complex)
    residues = np.asarray(residues, dtype=complex)
    cv.check_ndim('s', s, 1)
    cv.check_ndim('poles', poles, 1)

    if residues.ndim == 1:
        residues = residues.reshape((1, -1))
    cv.check_ndim('residues', residues, 2)
    if residues.shape[1] != poles.size:
        raise ShapeMismatchError(
            f'Residues are given for {residues.shape[1]} poles but there are '
            f'{poles.size} poles')
    n_vectors = residues.shape[0]

    if polys is None:
        polys = np.zeros((n_vectors, 0))
    polys = np.asarray(polys, dtype=float)
    if polys.ndim == 1:
        polys = polys.reshape((1, -1))
    if polys.size and polys.shape[0] != n_vectors:
        raise ShapeMismatchError(
            f'Polynomial coefficients are given for {polys.shape[0]} vectors '
            f'but residues for {n_vectors}')

    values = residues @ (1.0 / (s[:, np.newaxis] - poles)).T
    if polys.size:
        values = values + polys @ (s ** np.arange(polys.shape[1])[:, np.newaxis])
    return np.real(values)


class RationalModel:
    r"""Rational approximation sharing one pole set across response vectors.

    Calling the model evaluates

    .. math::
        f_n(s) = \sum_m \frac{R_{nm}}{s - p_m} + \sum_k P_{nk} s^k

    Parameters
    ----------
    poles : Iterable of complex
        Poles, (N)
    residues : Iterable of complex
        Residues, (Nv, N)
    polynomials : Iterable of float, optional
        Polynomial coefficients in order of increasing degree, (Nv, Nc)

    Attributes
    ----------
    poles : numpy.ndarray
        Poles, (N)
    residues : numpy.ndarray
        Residues, (Nv, N)
    polynomials : numpy.ndarray
        Polynomial coefficients, (Nv, Nc)
    n_poles : int
        Number of poles
    n_vectors : int
        Number of response vectors
    n_polys : int
        Number of polynomial coefficients per vector

    """

    def __init__(self, poles, residues, polynomials=None):
        self.poles = poles
        self.residues = residues
        self.polynomials = polynomials

    def __call__(self, s):
        return evaluate(s, self.poles, self.residues, self.polynomials)

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return (np.array_equal(self.poles, other.poles)
                and np.array_equal(self.residues, other.residues)
                and np.array_equal(self.polynomials, other.polynomials))

    def __repr__(self):
        return (f'{type(self).__name__}(n_poles={self.n_poles}, '
                f'n_vectors={self.n_vectors}, n_polys={self.n_polys})')

    @property
    def poles(self):
        return self._poles

    @poles.setter
    def poles(self, poles):
        poles = np.asarray(poles, dtype=complex)
        cv.check_ndim('poles', poles, 1)
        self._poles = poles

    @property
    def residues(self):
        return self._residues

    @residues.setter
    def residues(self, residues):
        residues = np.asarray(residues, dtype=complex)
        cv.check_ndim('residues', residues, 2)
        if residues.shape[1] != self.poles.size:
            raise ShapeMismatchError(
                f'Residues are given for {residues.shape[1]} poles but the '
                f'model has {self.poles.size}')
        self._residues = residues

    @property
    def polynomials(self):
        return self._polynomials

    @polynomials.setter
    def polynomials(self, polynomials):
        if polynomials is None:
            polynomials = np.zeros((self.n_vectors, 0))
        polynomials = np.asarray(polynomials, dtype=float)
        cv.check_ndim('polynomials', polynomials, 2)
        cv.check_length('polynomials', polynomials, self.n_vectors)
        self._polynomials = polynomials

    @property
    def n_poles(self):
        return self._poles.size

    @property
    def n_vectors(self):
        return self._residues.shape[0]

    @property
    def n_polys(self):
        return self._polynomials.shape[1]
