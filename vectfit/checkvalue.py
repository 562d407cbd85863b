from collections.abc import Iterable

import numpy as np

from vectfit.exceptions import InvalidParameterError, ShapeMismatchError


def check_type(name, value, expected_type, *, none_ok=False):
    """Ensure that an object is of an expected type.

    Parameters
    ----------
    name : str
        Description of value being checked
    value : object
        Object to check type of
    expected_type : type or Iterable of type
        type to check object against
    none_ok : bool, optional
        Whether None is allowed as a value

    """
    if none_ok and value is None:
        return

    if not isinstance(value, expected_type):
        if isinstance(expected_type, Iterable):
            msg = 'Unable to set "{}" to "{}" which is not one of the ' \
                  'following types: "{}"'.format(name, value, ', '.join(
                      [t.__name__ for t in expected_type]))
        else:
            msg = (f'Unable to set "{name}" to "{value}" which is not of type "'
                   f'{expected_type.__name__}"')
        raise TypeError(msg)


def check_ndim(name, value, ndim):
    """Ensure that an array has a given number of dimensions.

    Parameters
    ----------
    name : str
        Description of the array being checked
    value : numpy.ndarray
        Array to check
    ndim : int
        Required number of dimensions

    """
    if np.ndim(value) != ndim:
        msg = (f'Unable to set "{name}" since it is {np.ndim(value)}-'
               f'dimensional but must be {ndim}-dimensional')
        raise ShapeMismatchError(msg)


def check_shape(name, value, shape):
    """Ensure that an array has an exact shape.

    Parameters
    ----------
    name : str
        Description of the array being checked
    value : numpy.ndarray
        Array to check
    shape : tuple of int
        Required shape

    """
    if np.shape(value) != tuple(shape):
        msg = (f'Unable to set "{name}" since its shape {np.shape(value)} '
               f'does not match the required shape {tuple(shape)}')
        raise ShapeMismatchError(msg)


def check_length(name, value, length):
    """Ensure that a sized object has an exact length.

    Parameters
    ----------
    name : str
        Description of value being checked
    value : collections.Sized
        Object to check length of
    length : int
        Required length of object

    """
    if len(value) != length:
        msg = (f'Unable to set "{name}" since it has length "{len(value)}" '
               f'but must be of length "{length}"')
        raise ShapeMismatchError(msg)


def check_less_than(name, value, maximum, equality=False):
    """Ensure that an object's value is less than a given value.

    Parameters
    ----------
    name : str
        Description of the value being checked
    value : object
        Object to check
    maximum : object
        Maximum value to check against
    equality : bool, optional
        Whether equality is allowed. Defaults to False.

    """

    if equality:
        if value > maximum:
            msg = (f'Unable to set "{name}" to "{value}" since it is greater '
                   f'than "{maximum}"')
            raise InvalidParameterError(msg)
    else:
        if value >= maximum:
            msg = (f'Unable to set "{name}" to "{value}" since it is greater '
                   f'than or equal to "{maximum}"')
            raise InvalidParameterError(msg)


def check_greater_than(name, value, minimum, equality=False):
    """Ensure that an object's value is greater than a given value.

    Parameters
    ----------
    name : str
        Description of the value being checked
    value : object
        Object to check
    minimum : object
        Minimum value to check against
    equality : bool, optional
        Whether equality is allowed. Defaults to False.

    """

    if equality:
        if value < minimum:
            msg = (f'Unable to set "{name}" to "{value}" since it is less than '
                   f'"{minimum}"')
            raise InvalidParameterError(msg)
    else:
        if value <= minimum:
            msg = (f'Unable to set "{name}" to "{value}" since it is less than '
                   f'or equal to "{minimum}"')
            raise InvalidParameterError(msg)
