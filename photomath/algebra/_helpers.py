import copy

import numpy as np

from photomath._typing import ARRAY_LIKE
from photomath.algebra.errors import ShapeMismatchError


def _as_numeric_array(data: ARRAY_LIKE, return_copy: bool = True) -> np.ndarray:
    """
    Converts data into a numeric numpy array, keeping integral types integral and promoting anything else to float64.
    """

    if return_copy:
        data = copy.deepcopy(data)

    array = np.asanyarray(data)

    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number):
        array = array.astype(np.float64)

    return array


def _check_array_and_shape(data: ARRAY_LIKE,
                           return_copy: bool = True,
                           ndim: int | None = None,
                           first_axis_length: int | None = None,
                           last_axis_length: int | None = None) -> np.ndarray:

    array = _as_numeric_array(data, return_copy)

    if ndim is not None and array.ndim != ndim:
        raise ShapeMismatchError(f'The input must have {ndim} dimension(s) but has {array.ndim}')

    if first_axis_length is not None and array.shape[0] != first_axis_length:
        raise ShapeMismatchError(f'The length of the first axis must be {first_axis_length}')

    if last_axis_length is not None and array.shape[-1] != last_axis_length:
        raise ShapeMismatchError(f'The length of the last axis must be {last_axis_length}')

    return array


def _check_index(index: int, length: int, name: str) -> int:
    if not 0 <= index < length:
        raise IndexError(f'{name} index {index} is out of range for length {length}')
    return index


def _uninitialized_value(dtype: np.dtype):
    """
    The sentinel used to fill containers created without data (the most negative finite value of the dtype)
    """

    if np.issubdtype(dtype, np.integer):
        return -np.iinfo(dtype).max
    return -np.finfo(dtype).max


def _floating_dtype(dtype: np.dtype) -> np.dtype:
    """
    The dtype used for operations that divide (integral types are promoted to float64)
    """
    return np.result_type(dtype, np.float64) if not np.issubdtype(dtype, np.floating) else np.dtype(dtype)
