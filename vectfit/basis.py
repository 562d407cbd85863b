import numpy as np

from vectfit.exceptions import InternalInconsistencyError
from vectfit.poles import PoleType


def basis_matrix(pole_set, s, n_polys=0, sentinel=None):
    """Build the partial-fraction basis of a pole set at the sample points.

    A real pole p gives the column 1/(s - p). The primary pole p of a
    conjugate pair gives 1/(s - p) + 1/(s - p*) and its conjugate q gives
    i/(s - q*) - i/(s - q), so that the two real coefficients solved for a
    pair recombine into a conjugate pair of residues. The pole columns are
    followed by `n_polys` polynomial columns s**0, ..., s**(n_polys - 1).

    Parameters
    ----------
    pole_set : vectfit.PoleSet
        Classified poles, (N)
    s : numpy.ndarray
        Sample points, (Ns)
    n_polys : int, optional
        Number of polynomial columns
    sentinel : float, optional
        Finite value substituted for non-finite pole columns. If None,
        non-finite entries are left as they are.

    Returns
    -------
    numpy.ndarray
        Complex basis matrix, (Ns, N + n_polys)

    Raises
    ------
    vectfit.InternalInconsistencyError
        If a pole carries an unknown conjugacy tag

    """
    s = np.asarray(s, dtype=complex)[:, np.newaxis]
    p = pole_set.values[np.newaxis, :]
    types = pole_set.types

    real = types == PoleType.REAL
    primary = types == PoleType.COMPLEX_PRIMARY
    conjugate = types == PoleType.COMPLEX_CONJUGATE
    if not np.all(real | primary | conjugate):
        raise InternalInconsistencyError(
            f'Unknown pole tag(s) {np.unique(types[~(real | primary | conjugate)])}.')

    with np.errstate(divide='ignore', invalid='ignore'):
        direct = 1.0 / (s - p)
        mirror = 1.0 / (s - np.conj(p))

        dk = np.empty_like(direct)
        dk[:, real] = direct[:, real]
        dk[:, primary] = direct[:, primary] + mirror[:, primary]
        dk[:, conjugate] = 1j*mirror[:, conjugate] - 1j*direct[:, conjugate]

    if sentinel is not None:
        dk[~np.isfinite(dk)] = sentinel

    powers = s ** np.arange(n_polys)
    return np.hstack((dk, powers))
