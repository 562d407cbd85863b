import numpy as np

from vectfit.basis import basis_matrix
from vectfit.config import config
from vectfit.linalg import column_scaled_lstsq, stack_complex
from vectfit.pool import map_vectors


def residue_block(dk, weight_row, f_row):
    """Solve the weighted least-squares problem of one response vector.

    Parameters
    ----------
    dk : numpy.ndarray
        Basis matrix, (Ns, N + Nc)
    weight_row : numpy.ndarray
        Weights of this response vector, (Ns)
    f_row : numpy.ndarray
        Samples of this response vector, (Ns)

    Returns
    -------
    numpy.ndarray
        Real pole coefficients followed by polynomial coefficients, (N + Nc)

    """
    a = stack_complex(weight_row[:, np.newaxis] * dk)
    b = stack_complex(weight_row * f_row)
    return column_scaled_lstsq(a, b)


def recombine_residues(pole_set, coefficients):
    """Convert real pole coefficients to complex residues.

    The coefficient of a real pole is its residue. The coefficients (r1, r2)
    of a conjugate pair give the residues r1 + i*r2 and r1 - i*r2.

    Parameters
    ----------
    pole_set : vectfit.PoleSet
        Classified poles, (N)
    coefficients : numpy.ndarray
        Real coefficients, (Nv, N)

    Returns
    -------
    numpy.ndarray
        Complex residues, (Nv, N)

    """
    coefficients = np.asarray(coefficients, dtype=float)
    residues = coefficients.astype(complex)
    primary = pole_set.primary_indices
    r1 = coefficients[:, primary]
    r2 = coefficients[:, primary + 1]
    residues[:, primary] = r1 + 1j*r2
    residues[:, primary + 1] = r1 - 1j*r2
    return residues


def identify_residues(pole_set, s, f, weight, n_polys=0):
    """Fit residues and polynomial coefficients on a known pole set.

    Parameters
    ----------
    pole_set : vectfit.PoleSet
        Classified poles, (N)
    s : numpy.ndarray
        Sample points, (Ns)
    f : numpy.ndarray
        Response vectors, (Nv, Ns)
    weight : numpy.ndarray
        Weights of the least-squares rows, (Nv, Ns)
    n_polys : int, optional
        Number of polynomial coefficients Nc

    Returns
    -------
    residues : numpy.ndarray
        Complex residues, (Nv, N)
    polys : numpy.ndarray
        Real polynomial coefficients, (Nv, Nc)

    """
    n_vectors = f.shape[0]
    n_poles = len(pole_set)

    dk = basis_matrix(pole_set, s, n_polys, sentinel=config['tol_high'])
    solutions = map_vectors(residue_block, [(dk, weight[n], f[n])
                                            for n in range(n_vectors)])
    x = np.reshape(solutions, (n_vectors, n_poles + n_polys))

    residues = recombine_residues(pole_set, x[:, :n_poles])
    polys = x[:, n_poles:]
    return residues, polys
