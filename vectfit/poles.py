from enum import IntEnum

import numpy as np

from vectfit.exceptions import PoleConfigurationError

__all__ = ['PoleType', 'PoleSet', 'classify_poles']


class PoleType(IntEnum):
    """Conjugacy tag of a single pole."""
    REAL = 0
    COMPLEX_PRIMARY = 1
    COMPLEX_CONJUGATE = 2


class PoleSet:
    """Ordered poles tagged by their role in conjugate pairs.

    Instances are produced by :func:`classify_poles`, which guarantees that
    every complex pole is immediately followed by its exact conjugate. A pole
    tagged ``COMPLEX_PRIMARY`` at index m has its partner at m + 1; a pole
    tagged ``COMPLEX_CONJUGATE`` at index m has its primary at m - 1.

    Parameters
    ----------
    values : Iterable of complex
        Pole values
    types : Iterable of PoleType
        Conjugacy tag of each pole

    Attributes
    ----------
    values : numpy.ndarray
        Complex pole values, (N,)
    types : numpy.ndarray
        Integer :class:`PoleType` tags, (N,)
    partner : numpy.ndarray
        Index of the other pole of each conjugate pair; real poles point at
        themselves
    real_indices : numpy.ndarray
        Indices of real poles
    primary_indices : numpy.ndarray
        Indices of the first pole of each conjugate pair
    conjugate_indices : numpy.ndarray
        Indices of the second pole of each conjugate pair

    """

    def __init__(self, values, types):
        self._values = np.asarray(values, dtype=complex)
        self._types = np.asarray(types, dtype=int)

    def __len__(self):
        return self._values.size

    def __repr__(self):
        return (f'{type(self).__name__}({len(self)} poles, '
                f'{self.real_indices.size} real, '
                f'{self.primary_indices.size} conjugate pairs)')

    @property
    def values(self):
        return self._values

    @property
    def types(self):
        return self._types

    @property
    def real_indices(self):
        return np.flatnonzero(self._types == PoleType.REAL)

    @property
    def primary_indices(self):
        return np.flatnonzero(self._types == PoleType.COMPLEX_PRIMARY)

    @property
    def conjugate_indices(self):
        return np.flatnonzero(self._types == PoleType.COMPLEX_CONJUGATE)

    @property
    def partner(self):
        partner = np.arange(len(self))
        primary = self.primary_indices
        partner[primary] = primary + 1
        partner[primary + 1] = primary
        return partner

    def state_matrix(self):
        """Real block-diagonal matrix with the poles as its eigenvalues.

        A real pole p contributes p on the diagonal; a pair x +/- iy
        contributes the block [[x, y], [-y, x]].

        Returns
        -------
        numpy.ndarray
            Real matrix, (N, N)

        """
        n = len(self)
        lambd = np.zeros((n, n))
        real = self.real_indices
        lambd[real, real] = self._values[real].real

        primary = self.primary_indices
        x = self._values[primary].real
        y = self._values[primary].imag
        lambd[primary, primary] = x
        lambd[primary + 1, primary + 1] = x
        lambd[primary, primary + 1] = y
        lambd[primary + 1, primary] = -y
        return lambd

    def selector(self):
        """Column that distributes the scaling function over the state matrix.

        Ones for real poles; 2 on the primary row and 0 on the conjugate row
        of each pair.

        Returns
        -------
        numpy.ndarray
            Real vector, (N,)

        """
        b = np.ones(len(self))
        primary = self.primary_indices
        b[primary] = 2.0
        b[primary + 1] = 0.0
        return b


def classify_poles(poles):
    """Tag each pole as real or as one half of a conjugate pair.

    Parameters
    ----------
    poles : Iterable of complex
        Pole sequence in which every complex pole must be immediately followed
        by its exact complex conjugate

    Returns
    -------
    PoleSet
        Validated poles with their conjugacy tags

    Raises
    ------
    PoleConfigurationError
        If a complex pole is not immediately followed by its conjugate

    """
    values = np.asarray(poles, dtype=complex).ravel()
    n = values.size
    types = np.full(n, PoleType.REAL, dtype=int)

    m = 0
    while m < n:
        p = values[m]
        if p.imag == 0.0:
            m += 1
            continue
        if m + 1 >= n or values[m + 1] != np.conj(p):
            raise PoleConfigurationError(
                f'Complex pole {p} at index {m} is not immediately followed '
                'by its complex conjugate.')
        types[m] = PoleType.COMPLEX_PRIMARY
        types[m + 1] = PoleType.COMPLEX_CONJUGATE
        m += 2

    return PoleSet(values, types)
