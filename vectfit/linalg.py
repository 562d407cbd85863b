import numpy as np
from scipy.linalg import lstsq, norm


def stack_complex(a):
    """Stack the real part of an array on top of its imaginary part

    Parameters
    ----------
    a : numpy.ndarray
        Complex array with samples along the first axis

    Returns
    -------
    numpy.ndarray
        Real array with twice as many rows as `a`

    """
    return np.concatenate((a.real, a.imag))


def column_scaled_lstsq(a, b):
    """Solve a least-squares problem after normalizing each column of `a`

    Columns of zero norm are left unscaled.

    Parameters
    ----------
    a : numpy.ndarray
        Real coefficient matrix, (M, K)
    b : numpy.ndarray
        Real right-hand side, (M,)

    Returns
    -------
    numpy.ndarray
        Least-squares solution in the original (unscaled) variables, (K,)

    """
    scale = norm(a, axis=0)
    scale[scale == 0.0] = 1.0
    x, *_ = lstsq(a / scale, b)
    return x / scale


def trailing_block(q, r, start, size):
    """Extract a square trailing block of a QR factorization

    When the factored system has fewer rows than columns the economic
    factors are short; the missing rows of the block are left as zeros.

    Parameters
    ----------
    q : numpy.ndarray
        Orthogonal factor from economic QR
    r : numpy.ndarray
        Upper-triangular factor from economic QR
    start : int
        Index of the first column of the block
    size : int
        Number of rows and columns of the block

    Returns
    -------
    r_block : numpy.ndarray
        Block ``r[start:start+size, start:start+size]``, (size, size)
    q_block : numpy.ndarray
        Matching columns of the orthogonal factor, (M, size)

    """
    r_block = np.zeros((size, size))
    q_block = np.zeros((q.shape[0], size))
    rows = r[start:start + size, start:start + size]
    r_block[:rows.shape[0]] = rows
    cols = q[:, start:start + size]
    q_block[:, :cols.shape[1]] = cols
    return r_block, q_block
