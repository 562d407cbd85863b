"""
Fast Relaxed Vector Fitting function

Approximate f(s) with a rational function:
        f(s)=R*(s*I-A)^(-1) + Polynomials*s
where f(s) is a vector of elements.

When f(s) is a vector, all elements become fitted with a common pole set. The
identification is done using the pole relocating method known as Vector Fitting
with relaxed non-triviality constraint for faster convergence and smaller
fitting errors, and utilization of matrix structure for fast solution of the
pole identification step. See :mod:`vectfit.relocation` for references.

"""
from numbers import Integral

import numpy as np
from scipy.linalg import norm

import vectfit.checkvalue as cv
from vectfit.model import RationalModel
from vectfit.poles import classify_poles
from vectfit.relocation import DETAILED_LOGGING, identify_poles
from vectfit.residues import identify_residues

__all__ = ['vectfit', 'rms_error', 'DETAILED_LOGGING', 'MAX_POLYS']

# Largest supported number of polynomial coefficients
MAX_POLYS = 11


def _check_inputs(f, s, poles, weight, n_polys):
    cv.check_ndim('f', f, 2)
    cv.check_ndim('s', s, 1)
    cv.check_length('s', s, f.shape[1])
    cv.check_ndim('poles', poles, 1)
    cv.check_shape('weight', weight, f.shape)
    cv.check_type('n_polys', n_polys, Integral)
    cv.check_greater_than('n_polys', n_polys, 0, equality=True)
    cv.check_less_than('n_polys', n_polys, MAX_POLYS, equality=True)


def rms_error(fit, f):
    """Root-mean-square deviation between a fit and its target samples.

    Parameters
    ----------
    fit : numpy.ndarray
        Fitted signals, (Nv, Ns)
    f : numpy.ndarray
        Target signals, (Nv, Ns)

    Returns
    -------
    float
        Frobenius norm of the deviation divided by sqrt(Nv * Ns)

    """
    return float(norm(fit - f) / np.sqrt(f.size))


def vectfit(f, s, poles, weight, n_polys=0, skip_pole=False, skip_res=False,
            log=False):
    """Fast Relaxed Vector Fitting function

    A robust numerical method for rational approximation. It updates the
    poles and calculates residues based on guessed poles.

    Parameters
    ----------
    f : numpy.ndarray
        A 2D array of the sample signals to be fitted, (Nv, Ns)
    s : numpy.ndarray
        A 1D array of the sample points, (Ns)
    poles : numpy.ndarray [complex]
        Initial poles, real or complex conjugate pairs, (N)
    weight : numpy.ndarray
        2D array for weighting f, to control the accuracy of the
        approximation, (Nv, Ns)
    n_polys : int, optional
        Number of polynomial coefficients to be fitted, [0, 11]
    skip_pole : bool, optional
        whether or not to skip the calculation of poles
    skip_res : bool, optional
        whether or not to skip the calculation of residues (including the
        polynomials)
    log : bool or int, optional
        Whether to print running logs (use int for verbosity control)

    Returns
    -------
    Tuple : (numpy.ndarray [complex], numpy.ndarray, numpy.ndarray [complex], float, numpy.ndarray)
        the updated residues, polynomial coefficients, poles, RMS error,
        fitted signals on the sample points

    Raises
    ------
    vectfit.ShapeMismatchError
        If the dimensions of `f`, `s`, `poles` and `weight` are inconsistent
    vectfit.InvalidParameterError
        If `n_polys` is not in [0, 11]
    vectfit.PoleConfigurationError
        If a complex pole is not immediately followed by its conjugate

    """
    f = np.asarray(f, dtype=float)
    s = np.asarray(s, dtype=complex)
    poles = np.asarray(poles, dtype=complex)
    weight = np.asarray(weight, dtype=float)
    _check_inputs(f, s, poles, weight, n_polys)

    n_vectors, n_samples = f.shape
    n_poles = poles.size

    residues = np.zeros((n_vectors, n_poles), dtype=complex)
    polys = np.zeros((n_vectors, n_polys))
    fit = np.zeros((n_vectors, n_samples))
    rmserr = 0.0

    # Nothing to fit with 0 poles and 0 polynomial coefficients
    if n_poles == 0 and n_polys == 0:
        return residues, polys, poles, rms_error(fit, f), fit

    pole_set = classify_poles(poles)

    if not skip_pole and n_poles > 0:
        if log:
            print(f"Identifying {n_poles} poles from {n_vectors} vector(s) "
                  f"at {n_samples} points")
        poles = identify_poles(pole_set, s, f, weight, n_polys, log=log)

    if not skip_res:
        if log:
            print(f"Identifying residues on {n_poles} poles with {n_polys} "
                  "polynomial coefficient(s)")
        pole_set = classify_poles(poles)
        residues, polys = identify_residues(pole_set, s, f, weight, n_polys)

        fit = RationalModel(poles, residues, polys)(s)
        rmserr = rms_error(fit, f)
        if log:
            print(f"  RMS error: {rmserr:.6e}")

    return residues, polys, poles, rmserr, fit
