# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Vector` class, a fixed length numeric container used as the right hand side of linear
systems and as the axis of an :class:`.AxisAngle` rotation.

Vectors behave as values: arithmetic returns new instances and only the in-place operators (``+=``, ``-=``, ``*=``,
``/=``), item assignment and :meth:`Vector.normalize` mutate.  Vectors returned by :meth:`.Matrix.row` and
:meth:`.Matrix.col` are views onto the matrix storage, so writing into them writes into the matrix.

    >>> from photomath.algebra import Vector, dot_product
    >>> v = Vector([3, 4])
    >>> v.module()
    5.0
    >>> dot_product(v, Vector([1, 1]))
    7.0
"""

import numbers
import warnings

from typing import Any, Iterator, Self

import numpy as np

from photomath._typing import ARRAY_LIKE
from photomath.algebra._helpers import _check_array_and_shape, _check_index, _uninitialized_value
from photomath.algebra.errors import NumericalFallbackWarning, ShapeMismatchError


__all__ = ["Vector", "dot_product"]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.number)) and not isinstance(value, complex)


class Vector:
    """
    A fixed length sequence of numbers.

    The vector can be created from any 1 dimensional sequence of numbers, or with only a ``size`` in which case each
    element is set to the "uninitialized" sentinel (the most negative finite value of the dtype).  Integral data stays
    integral until an operation requires a division.
    """

    __array_ufunc__ = None
    """
    Tells numpy to defer to our reflected operators (so ``2.0 * vector`` is a :class:`Vector`)
    """

    def __init__(self, data: ARRAY_LIKE | Self | None = None, size: int | None = None, dtype: Any = None):
        """
        :param data: The elements of the vector
        :param size: The size of the vector when no data is given
        :param dtype: The numeric type of the elements
        """

        if isinstance(data, Vector):
            data = data._data

        if data is None:
            if size is None:
                raise ValueError('Either data or size must be specified')

            dtype = np.dtype(np.float64 if dtype is None else dtype)
            self._data: np.ndarray = np.full(size, _uninitialized_value(dtype), dtype=dtype)

        else:
            array = _check_array_and_shape(data, ndim=1)

            if size is not None and array.size != size:
                raise ShapeMismatchError(f'Expected {size} elements but got {array.size}')

            self._data = array if dtype is None else array.astype(dtype)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> Self:
        """
        Builds a vector around an existing 1d array without copying it.
        """
        vector = cls.__new__(cls)
        vector._data = array
        return vector

    @classmethod
    def zero(cls, size: int, dtype: Any = np.float64) -> Self:
        """
        Returns a vector of zeros.

        :param size: the number of elements
        :param dtype: the numeric type of the elements
        """
        return cls._wrap(np.zeros(size, dtype=dtype))

    @property
    def size(self) -> int:
        """
        The number of elements in the vector
        """
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        """
        The numeric type of the elements
        """
        return self._data.dtype

    def at(self, index: int):
        """
        Bounds checked element access.

        :raises IndexError: if index is negative or not less than :attr:`size`
        """
        return self._data[_check_index(index, self.size, 'Vector')]

    def __getitem__(self, index: int | slice):
        if isinstance(index, slice):
            return Vector(self._data[index])
        return self.at(index)

    def __setitem__(self, index: int, value) -> None:
        self._data[_check_index(index, self.size, 'Vector')] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        return iter(self._data.tolist())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def to_array(self) -> np.ndarray:
        """
        Returns a copy of the elements as a 1d numpy array
        """
        return self._data.copy()

    def copy(self) -> Self:
        """
        Returns a deep copy of self
        """
        return type(self)._wrap(self._data.copy())

    def module(self) -> float:
        """
        Returns the euclidean norm (length) of the vector
        """
        return float(np.sqrt(dot_product(self, self)))

    def normalize(self) -> Self:
        """
        Scales the vector (in place) to unit length.

        A zero length vector is left as the zero vector instead of being divided by zero.

        :return: self, to allow chaining
        """

        length = self.module()

        if length > 0:
            if np.issubdtype(self._data.dtype, np.floating):
                self._data /= length
            else:
                self._data = self._data / length
        else:
            self._data[:] = 0

        return self

    def dot_product(self, other: Self) -> float:
        """
        Returns the dot product of self with other.  See :func:`dot_product`.
        """
        return dot_product(self, other)

    def _check_same_size(self, other: 'Vector') -> None:
        if other.size != self.size:
            raise ShapeMismatchError(f'Vector sizes do not match ({self.size} vs {other.size})')

    def _operand(self, other: Any) -> np.ndarray | Any:
        if isinstance(other, Vector):
            self._check_same_size(other)
            return other._data
        if _is_scalar(other):
            return other
        return NotImplemented

    # unary operators
    def __pos__(self) -> Self:
        return self.copy()

    def __neg__(self) -> Self:
        return type(self)._wrap(-self._data)

    # binary operators
    def __add__(self, other: Self | float) -> Self:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return type(self)._wrap(self._data + operand)

    __radd__ = __add__

    def __sub__(self, other: Self | float) -> Self:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return type(self)._wrap(self._data - operand)

    def __rsub__(self, other: float) -> Self:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)._wrap(other - self._data)

    def __mul__(self, other: Self | float) -> Self:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return type(self)._wrap(self._data * operand)

    __rmul__ = __mul__

    def __truediv__(self, other: Self | float) -> Self:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented

        if _is_scalar(operand) and operand == 0:
            warnings.warn('Division of a vector by zero.  The result has been replaced with the zero vector.',
                          NumericalFallbackWarning)
            return type(self)._wrap(np.zeros(self.size, dtype=np.result_type(self._data.dtype, np.float64)))

        return type(self)._wrap(self._data / operand)

    # in place operators
    def __iadd__(self, other: Self | float) -> Self:
        result = self + other
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._data)
        return self

    def __isub__(self, other: Self | float) -> Self:
        result = self - other
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._data)
        return self

    def __imul__(self, other: Self | float) -> Self:
        result = self * other
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._data)
        return self

    def __itruediv__(self, other: Self | float) -> Self:
        result = self / other
        if result is NotImplemented:
            return NotImplemented
        self._assign(result._data)
        return self

    def _assign(self, values: np.ndarray) -> None:
        # keep views onto matrix storage alive when the dtype allows it
        if np.can_cast(values.dtype, self._data.dtype, casting='same_kind'):
            self._data[:] = values
        else:
            self._data = values

    # comparisons
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and bool(np.all(self._data == other._data))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Self) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.tolist() < other._data.tolist()

    def __le__(self, other: Self) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.tolist() <= other._data.tolist()

    def __gt__(self, other: Self) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.tolist() > other._data.tolist()

    def __ge__(self, other: Self) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.tolist() >= other._data.tolist()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(type(self).__name__, self._data.tolist())

    def __str__(self) -> str:
        return str(self._data)


def dot_product(vector_1: Vector, vector_2: Vector) -> float:
    """
    Returns the dot product of two vectors of the same size as a float.

    :raises ShapeMismatchError: if the vectors do not have the same size
    """

    if vector_1.size != vector_2.size:
        raise ShapeMismatchError(f'Vector sizes do not match ({vector_1.size} vs {vector_2.size})')

    return float(np.dot(vector_1._data.astype(np.float64), vector_2._data.astype(np.float64)))
