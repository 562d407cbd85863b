"""Dedicated module mapping per-vector work over response vectors

Provided so that worker functions live at module level and can be pickled
"""
from itertools import starmap
from multiprocessing import Pool

from vectfit.config import config


def map_vectors(func, args):
    """Apply a function to the argument tuple of every response vector

    Parameters
    ----------
    func : callable
        Module-level function computing the block of a single response
        vector. Expected to have the signature ``func(*args[n]) -> block``
    args : Iterable of tuple
        Arguments for each response vector, in vector order

    Returns
    -------
    list
        Blocks returned by `func`, in the same order as `args`

    """
    args = list(args)
    if config['use_multiprocessing'] and len(args) > 1:
        with Pool(config['num_processes']) as pool:
            return pool.starmap(func, args)
    return list(starmap(func, args))
