"""Module for handling global configuration of the vector fitting core.

This module exports a single object, `config`, that controls the numerical
tolerances of the pole identification stage and whether per-vector work is
spread over worker processes. It acts like a dictionary but validates every
key and value it is given.

Examples
--------
>>> import vectfit
>>> vectfit.config['tol_low'] = 1e-20
>>> print(vectfit.config)
{'tol_low': 1e-20, 'tol_high': 1e+18, 'use_multiprocessing': False, 'num_processes': None}

"""
from collections.abc import MutableMapping
from contextlib import contextmanager
from numbers import Integral, Real
import os
from typing import Any, Dict, Iterator

import vectfit.checkvalue as cv
from vectfit.exceptions import InvalidParameterError

__all__ = ["config"]


class _Config(MutableMapping):
    """A configuration dictionary for vectfit with validated values.

    Attributes
    ----------
    tol_low : float
        Lower bound on the magnitude of the relaxed scaling denominator.
        Below it, poles are identified again without relaxation.
    tol_high : float
        Upper bound on the magnitude of the relaxed scaling denominator. Also
        used as the finite value substituted for infinite basis entries.
    use_multiprocessing : bool
        Whether per-vector blocks are computed in a process pool. Defaults
        to False.
    num_processes : int or None
        Number of worker processes. None uses the number of CPUs.

    """
    _DEFAULTS: Dict[str, Any] = {
        'tol_low': 1e-18,
        'tol_high': 1e18,
        'use_multiprocessing': False,
        'num_processes': None
    }
    _ENV_KEYS: Dict[str, str] = {
        'tol_low': 'VECTFIT_TOL_LOW',
        'tol_high': 'VECTFIT_TOL_HIGH',
        'use_multiprocessing': 'VECTFIT_MULTIPROCESSING',
        'num_processes': 'VECTFIT_NUM_PROCESSES'
    }

    def __init__(self, data: dict = ()):
        self._mapping: Dict[str, Any] = dict(self._DEFAULTS)
        self.update(data)

    def __getitem__(self, key: str) -> Any:
        return self._mapping[key]

    def __delitem__(self, key: str):
        raise KeyError(f"'{key}' cannot be deleted; use clear() to restore "
                       "the default configuration.")

    def __setitem__(self, key: str, value: Any):
        """Set a configuration key after validating its value.

        Tolerances must be positive reals with 'tol_low' strictly less than
        'tol_high'. 'num_processes' must be a positive integer or None.

        """
        if key in ('tol_low', 'tol_high'):
            cv.check_type(key, value, Real)
            cv.check_greater_than(key, value, 0.0)
            low = value if key == 'tol_low' else self._mapping['tol_low']
            high = value if key == 'tol_high' else self._mapping['tol_high']
            if low >= high:
                raise InvalidParameterError(
                    f"'tol_low' ({low}) must be less than 'tol_high' ({high}).")
            self._mapping[key] = float(value)
        elif key == 'use_multiprocessing':
            if not isinstance(value, bool):
                raise TypeError("'use_multiprocessing' must be a boolean.")
            self._mapping[key] = value
        elif key == 'num_processes':
            cv.check_type(key, value, Integral, none_ok=True)
            if value is not None:
                cv.check_greater_than(key, value, 0)
            self._mapping[key] = value
        else:
            raise KeyError(
                f"Unrecognized config key: {key}. Acceptable keys are: "
                f"{', '.join(repr(k) for k in self._DEFAULTS)}."
            )

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return repr(self._mapping)

    def clear(self):
        """Restore every key to its default value."""
        self._mapping = dict(self._DEFAULTS)

    @contextmanager
    def patch(self, key: str, value: Any):
        """Context manager to temporarily change a configuration value.

        After the `with` block, the configuration is restored to its original
        state.

        Parameters
        ----------
        key : str
            The key of the configuration value to change.
        value
            The new temporary value.

        Examples
        --------
        >>> with vectfit.config.patch('tol_low', 1e-10):
        ...     print(vectfit.config['tol_low'])
        1e-10
        >>> print(vectfit.config['tol_low'])
        1e-18

        """
        previous_value = self[key]
        self[key] = value
        try:
            yield
        finally:
            self[key] = previous_value


def _parse_env(key: str, text: str) -> Any:
    if key == 'use_multiprocessing':
        return text.strip().lower() in ('1', 'true', 'yes', 'on')
    if key == 'num_processes':
        return int(text)
    return float(text)


def _default_config(**kwargs) -> _Config:
    """Create a configuration initialized from environment variables.

    This function checks for VECTFIT_TOL_LOW, VECTFIT_TOL_HIGH,
    VECTFIT_MULTIPROCESSING and VECTFIT_NUM_PROCESSES.

    Returns
    -------
    _Config
        A new configuration object.

    """
    config = _Config(kwargs)
    for key, var in _Config._ENV_KEYS.items():
        if var in os.environ:
            config[key] = _parse_env(key, os.environ[var])
    return config


# Global configuration dictionary for vectfit settings.
config = _default_config()
