"""
Pole identification by relaxed Vector Fitting.

The relaxed scaling function sigma is fitted jointly to all response vectors
[1, 2]. Each vector's weighted system is reduced by QR to the small block
acting on sigma's unknowns, and only those blocks are stacked and solved,
so the dense Nv*Ns-row system is never formed [3]. The zeros of sigma are
the relocated poles.

[1] B. Gustavsen and A. Semlyen, "Rational approximation of frequency
    domain responses by Vector Fitting", IEEE Trans. Power Delivery, vol. 14,
    no. 3, pp. 1052-1061, July 1999.
[2] B. Gustavsen, "Improving the pole relocating properties of vector
    fitting", IEEE Trans. Power Delivery, vol. 21, no. 3, pp. 1587-1592, July
    2006.
[3] D. Deschrijver, M. Mrozowski, T. Dhaene, and D. De Zutter,
    "Macromodeling of Multiport Systems Using a Fast Implementation of the
    Vector Fitting Method", IEEE Microwave and Wireless Components Letters, vol.
    18, no. 6, pp. 383-385, June 2008.

"""
import math

import numpy as np
from scipy.linalg import eigvals, norm, qr

from vectfit.basis import basis_matrix
from vectfit.config import config
from vectfit.linalg import column_scaled_lstsq, stack_complex, trailing_block
from vectfit.pool import map_vectors

# Verbosity at which intermediate quantities are printed
DETAILED_LOGGING = 2


def relaxed_block(dk, weight_row, f_row, n_poles, n_polys, closing_row=None):
    """Reduce the relaxed system of one response vector to its sigma block.

    Parameters
    ----------
    dk : numpy.ndarray
        Basis matrix including at least one polynomial column,
        (Ns, N + max(Nc, 1))
    weight_row : numpy.ndarray
        Weights of this response vector, (Ns)
    f_row : numpy.ndarray
        Samples of this response vector, (Ns)
    n_poles : int
        Number of poles N
    n_polys : int
        Number of polynomial coefficients Nc
    closing_row : numpy.ndarray, optional
        Integral criterion on sigma, (N + 1). Only given for the last vector.

    Returns
    -------
    lhs_block : numpy.ndarray
        Trailing block of the triangular factor, (N + 1, N + 1)
    q_row : numpy.ndarray
        Last row of the orthogonal factor restricted to sigma's columns if
        `closing_row` was given, zeros otherwise, (N + 1)

    """
    n_left = n_poles + n_polys
    n_sigma = n_poles + 1

    a1 = np.hstack((weight_row[:, np.newaxis] * dk[:, :n_left],
                    -(weight_row * f_row)[:, np.newaxis] * dk[:, :n_sigma]))
    a = stack_complex(a1)
    if closing_row is not None:
        row = np.zeros((1, a.shape[1]))
        row[0, n_left:] = closing_row
        a = np.vstack((a, row))

    q, r = qr(a, mode='economic')
    lhs_block, q_block = trailing_block(q, r, n_left, n_sigma)
    if closing_row is None:
        return lhs_block, np.zeros(n_sigma)
    return lhs_block, q_block[-1]


def nonrelaxed_block(dk, weight_row, f_row, denom, n_poles, n_polys):
    """Reduce the system of one response vector with sigma's constant fixed.

    Parameters
    ----------
    dk : numpy.ndarray
        Basis matrix, (Ns, N + max(Nc, 1))
    weight_row : numpy.ndarray
        Weights of this response vector, (Ns)
    f_row : numpy.ndarray
        Samples of this response vector, (Ns)
    denom : float
        Fixed constant term of sigma
    n_poles : int
        Number of poles N
    n_polys : int
        Number of polynomial coefficients Nc

    Returns
    -------
    lhs_block : numpy.ndarray
        Trailing block of the triangular factor, (N, N)
    rhs_block : numpy.ndarray
        Projection of the right-hand side on the matching columns of the
        orthogonal factor, (N)

    """
    n_left = n_poles + n_polys

    a1 = np.hstack((weight_row[:, np.newaxis] * dk[:, :n_left],
                    -(weight_row * f_row)[:, np.newaxis] * dk[:, :n_poles]))
    a = stack_complex(a1)
    b = stack_complex(denom * weight_row * f_row)

    q, r = qr(a, mode='economic')
    lhs_block, q_block = trailing_block(q, r, n_left, n_poles)
    return lhs_block, q_block.T @ b


def clamp_denominator(denom, tol_low, tol_high):
    """Move a degenerate scaling denominator back inside the tolerances.

    Parameters
    ----------
    denom : float
        Denominator produced by the relaxed solve
    tol_low, tol_high : float
        Accepted range of its magnitude

    Returns
    -------
    float
        1 if `denom` is exactly zero, otherwise the violated bound carrying
        the sign of `denom`

    """
    if denom == 0.0:
        return 1.0
    elif abs(denom) < tol_low:
        return math.copysign(tol_low, denom)
    elif abs(denom) > tol_high:
        return math.copysign(tol_high, denom)
    return denom


def update_poles(pole_set, coeffs, denom):
    """Compute the zeros of sigma, which become the new poles.

    Parameters
    ----------
    pole_set : vectfit.PoleSet
        Poles sigma was identified on, (N)
    coeffs : numpy.ndarray
        Real numerator coefficients of sigma, (N)
    denom : float
        Constant term of sigma

    Returns
    -------
    numpy.ndarray
        Relocated poles, (N)

    """
    zer = pole_set.state_matrix() - np.outer(pole_set.selector(), coeffs) / denom
    return eigvals(zer)


def identify_poles(pole_set, s, f, weight, n_polys=0, log=False):
    """Relocate poles by fitting the relaxed scaling function.

    Parameters
    ----------
    pole_set : vectfit.PoleSet
        Classified starting poles, (N)
    s : numpy.ndarray
        Sample points, (Ns)
    f : numpy.ndarray
        Response vectors, (Nv, Ns)
    weight : numpy.ndarray
        Weights of the least-squares rows, (Nv, Ns)
    n_polys : int, optional
        Number of polynomial coefficients Nc
    log : bool or int, optional
        Whether to print running logs (use int for verbosity control)

    Returns
    -------
    numpy.ndarray
        Relocated poles, (N)

    """
    n_vectors, n_samples = f.shape
    n_poles = len(pole_set)
    tol_low, tol_high = config['tol_low'], config['tol_high']

    # sigma always carries a constant term, even without polynomials
    dk = basis_matrix(pole_set, s, max(n_polys, 1), sentinel=tol_high)

    scale = norm(weight * f) / n_samples
    closing_row = np.real(scale * dk[:, :n_poles + 1].sum(axis=0))

    args = [(dk, weight[n], f[n], n_poles, n_polys,
             closing_row if n == n_vectors - 1 else None)
            for n in range(n_vectors)]
    blocks = map_vectors(relaxed_block, args)
    lhs = np.vstack([block for block, _ in blocks])
    rhs = np.concatenate([q_row for _, q_row in blocks])
    rhs *= n_samples * scale

    x = column_scaled_lstsq(lhs, rhs)
    coeffs, denom = x[:-1], x[-1]
    if log >= DETAILED_LOGGING:
        print(f"  sigma denominator: {denom:.6e}")

    if abs(denom) < tol_low or abs(denom) > tol_high:
        denom = clamp_denominator(denom, tol_low, tol_high)
        if log:
            print(f"  Degenerate sigma denominator, solving without "
                  f"relaxation (D={denom:.3e})")

        args = [(dk, weight[n], f[n], denom, n_poles, n_polys)
                for n in range(n_vectors)]
        blocks = map_vectors(nonrelaxed_block, args)
        lhs = np.vstack([block for block, _ in blocks])
        rhs = np.concatenate([b for _, b in blocks])
        coeffs = column_scaled_lstsq(lhs, rhs)

    poles = update_poles(pole_set, coeffs, denom)
    if log >= DETAILED_LOGGING:
        print(f"  relocated poles: {poles}")
    return poles
