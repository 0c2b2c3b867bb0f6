# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the dense :class:`Matrix` class (and its resizable sibling :class:`DynamicMatrix`) along with the
:class:`MatrixOptions` used to configure them.

Description
-----------

A :class:`Matrix` is a rectangular grid of numbers stored in a row major numpy array.  It provides the usual algebraic
operators, the determinant, the inverse, the transpose and the cofactor/adjugate machinery, all implemented directly
from their definitions:

* sizes 2, 3 and 4 use closed form expressions for the determinant, adjugate and inverse,
* larger determinants are computed by row reduction with partial pivoting (:meth:`Matrix.row_echelon_form`),
* larger inverses use either the adjugate over the determinant or an :class:`.LuDecomposition` solve against the
  identity (selected with :attr:`MatrixOptions.inverse_method`).

A singular matrix is not an error: :meth:`Matrix.determinant` returns 0 and :meth:`Matrix.inverse` returns a zero
matrix flagged as not invertible.  Use :meth:`Matrix.try_inverse` to get the outcome as an explicit :class:`.Result`.

Use
---

    >>> from photomath.algebra import Matrix
    >>> m = Matrix([[2, 3], [1, 4]])
    >>> m.determinant()
    5.0
    >>> inverse, invertible = m.inverse(return_invertible=True)
    >>> inverse.to_array().round(6).tolist(), invertible
    ([[0.8, -0.6], [-0.2, 0.4]], True)
"""

import warnings

from dataclasses import dataclass

from typing import Any, Iterator, Self

import numpy as np

from photomath._typing import ARRAY_LIKE_2D, INVERSE_METHODS, DOUBLE_ARRAY
from photomath.algebra._helpers import _check_array_and_shape, _check_index, _uninitialized_value, _floating_dtype
from photomath.algebra.errors import NumericalFallbackWarning, ShapeMismatchError, SingularMatrixError
from photomath.algebra.results import Result, Status
from photomath.algebra.vector import Vector, _is_scalar
from photomath.utilities.options import UserOptions
from photomath.utilities.mixin_classes import UserOptionConfigured


__all__ = ["MatrixOptions", "Matrix", "DynamicMatrix"]


@dataclass
class MatrixOptions(UserOptions):
    """
    This dataclass serves as one way to control the behavior of the :class:`.Matrix` class.

    For more details on the meaning of the options see the attributes of :class:`.Matrix`.
    """

    bounds_check: bool = True
    """
    Whether element access with :meth:`.Matrix.at` and ``m[r, c]`` raises an IndexError for out of range indices.

    When this is ``False`` the indices are passed directly to numpy (so negative indices count from the end).
    """

    inverse_method: INVERSE_METHODS = 'adjugate'
    """
    How to invert matrices larger than 4x4.

    ``'adjugate'`` divides the adjugate by the determinant.  ``'lu'`` solves against the identity using an
    :class:`.LuDecomposition`.
    """

    singular_tolerance: float = 0.0
    """
    The largest absolute determinant that is still considered singular.
    """


def _determinant_2x2(a: np.ndarray) -> float:
    return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]


def _adjugate_3x3(a: np.ndarray) -> DOUBLE_ARRAY:
    m00, m01, m02 = a[0]
    m10, m11, m12 = a[1]
    m20, m21, m22 = a[2]

    return np.array([[m11 * m22 - m12 * m21, m02 * m21 - m01 * m22, m01 * m12 - m02 * m11],
                     [m12 * m20 - m10 * m22, m00 * m22 - m02 * m20, m02 * m10 - m00 * m12],
                     [m10 * m21 - m11 * m20, m01 * m20 - m00 * m21, m00 * m11 - m01 * m10]], dtype=np.float64)


def _determinant_3x3(a: np.ndarray) -> float:
    adjugate = _adjugate_3x3(a)
    # expansion along the first column
    return a[0, 0] * adjugate[0, 0] + a[1, 0] * adjugate[0, 1] + a[2, 0] * adjugate[0, 2]


def _minors_4x4(a: np.ndarray) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """
    The 2x2 minors of the top two rows (a) and of the bottom two rows (b) of a 4x4 matrix
    """

    m00, m01, m02, m03 = a[0]
    m10, m11, m12, m13 = a[1]
    m20, m21, m22, m23 = a[2]
    m30, m31, m32, m33 = a[3]

    top = (m00 * m11 - m01 * m10,
           m00 * m12 - m02 * m10,
           m00 * m13 - m03 * m10,
           m01 * m12 - m02 * m11,
           m01 * m13 - m03 * m11,
           m02 * m13 - m03 * m12)

    bottom = (m20 * m31 - m21 * m30,
              m20 * m32 - m22 * m30,
              m20 * m33 - m23 * m30,
              m21 * m32 - m22 * m31,
              m21 * m33 - m23 * m31,
              m22 * m33 - m23 * m32)

    return top, bottom


def _determinant_4x4(a: np.ndarray) -> float:
    (a0, a1, a2, a3, a4, a5), (b0, b1, b2, b3, b4, b5) = _minors_4x4(a)
    return a0 * b5 - a1 * b4 + a2 * b3 + a3 * b2 - a4 * b1 + a5 * b0


def _adjugate_4x4(a: np.ndarray) -> DOUBLE_ARRAY:
    (a0, a1, a2, a3, a4, a5), (b0, b1, b2, b3, b4, b5) = _minors_4x4(a)

    m00, m01, m02, m03 = a[0]
    m10, m11, m12, m13 = a[1]
    m20, m21, m22, m23 = a[2]
    m30, m31, m32, m33 = a[3]

    return np.array([[m11 * b5 - m12 * b4 + m13 * b3, -m01 * b5 + m02 * b4 - m03 * b3,
                      m31 * a5 - m32 * a4 + m33 * a3, -m21 * a5 + m22 * a4 - m23 * a3],
                     [-m10 * b5 + m12 * b2 - m13 * b1, m00 * b5 - m02 * b2 + m03 * b1,
                      -m30 * a5 + m32 * a2 - m33 * a1, m20 * a5 - m22 * a2 + m23 * a1],
                     [m10 * b4 - m11 * b2 + m13 * b0, -m00 * b4 + m01 * b2 - m03 * b0,
                      m30 * a4 - m31 * a2 + m33 * a0, -m20 * a4 + m21 * a2 - m23 * a0],
                     [-m10 * b3 + m11 * b1 - m12 * b0, m00 * b3 - m01 * b1 + m02 * b0,
                      -m30 * a3 + m31 * a1 - m32 * a0, m20 * a3 - m21 * a1 + m22 * a0]], dtype=np.float64)


def _row_echelon(a: np.ndarray) -> tuple[DOUBLE_ARRAY, float]:
    """
    Reduces a copy of ``a`` to row echelon form with partial pivoting.

    :return: the reduced array and the signed product of the pivots (0 if a zero pivot stopped the reduction)
    """

    reduced = np.array(a, dtype=np.float64)
    n_rows, n_cols = reduced.shape

    determinant = 1.0

    for k in range(min(n_rows, n_cols)):
        pivot = k + int(np.argmax(np.abs(reduced[k:, k])))

        if reduced[pivot, k] == 0:
            determinant = 0.0
            break

        if pivot != k:
            reduced[[k, pivot]] = reduced[[pivot, k]]
            determinant = -determinant

        determinant *= reduced[k, k]

        factors = reduced[k + 1:, k] / reduced[k, k]
        reduced[k + 1:] -= np.outer(factors, reduced[k])
        reduced[k + 1:, k] = 0.0

    return reduced, float(determinant)


def _determinant(a: np.ndarray) -> float:
    """
    The determinant of a square array using the closed forms where they exist
    """

    size = a.shape[0]

    if size == 0:
        return 1.0
    elif size == 1:
        return float(a[0, 0])
    elif size == 2:
        return float(_determinant_2x2(a))
    elif size == 3:
        return float(_determinant_3x3(a))
    elif size == 4:
        return float(_determinant_4x4(a))
    else:
        return _row_echelon(a)[1]


def _first_minor(a: np.ndarray, row: int, col: int) -> float:
    return _determinant(np.delete(np.delete(a, row, axis=0), col, axis=1))


def _cofactor_matrix(a: np.ndarray) -> DOUBLE_ARRAY:
    size = a.shape[0]

    if size == 1:
        return np.ones((1, 1), dtype=np.float64)

    cofactors = np.empty((size, size), dtype=np.float64)
    for row in range(size):
        for col in range(size):
            cofactors[row, col] = (-1) ** (row + col) * _first_minor(a, row, col)

    return cofactors


def _adjugate(a: np.ndarray) -> DOUBLE_ARRAY:
    size = a.shape[0]

    if size == 2:
        return np.array([[a[1, 1], -a[0, 1]], [-a[1, 0], a[0, 0]]], dtype=np.float64)
    elif size == 3:
        return _adjugate_3x3(a)
    elif size == 4:
        return _adjugate_4x4(a)
    else:
        return _cofactor_matrix(a).T.copy()


class Matrix(UserOptionConfigured[MatrixOptions], MatrixOptions):
    """
    A dense rectangular matrix of numbers.

    The matrix can be created from any 2 dimensional sequence of numbers (including another :class:`Matrix` or a numpy
    array, which are copied), or from just a shape in which case every element is set to the "uninitialized" sentinel
    (the most negative finite value of the dtype).  Use :meth:`zero`, :meth:`ones` or :meth:`identity` for the common
    initialized matrices.

    Every operation returns a new matrix which inherits the options of the left operand.  Only the in-place operators,
    item assignment and :meth:`swap_rows` modify a matrix.

    Matrices are usable directly with numpy (``np.asarray(matrix)``) through the array protocol.
    """

    __array_ufunc__ = None
    """
    Tells numpy to defer to our reflected operators (so ``2.0 * matrix`` is a :class:`Matrix`)
    """

    _resizable: bool = False

    def __init__(self, data: ARRAY_LIKE_2D | None = None, rows: int | None = None, cols: int | None = None,
                 dtype: Any = None, options: MatrixOptions | None = None):
        """
        :param data: The elements of the matrix as a 2d array like
        :param rows: The number of rows when no data is given (checked against data otherwise)
        :param cols: The number of columns when no data is given (checked against data otherwise)
        :param dtype: The numeric type of the elements
        :param options: The options to configure the matrix with
        """

        super().__init__(MatrixOptions, options=options)

        if isinstance(data, Matrix):
            data = data._data

        if data is None:
            if rows is None or cols is None:
                raise ValueError('Either data or both rows and cols must be specified')

            dtype = np.dtype(np.float64 if dtype is None else dtype)
            self._data: np.ndarray = np.full((rows, cols), _uninitialized_value(dtype), dtype=dtype)

        else:
            array = _check_array_and_shape(data, ndim=2)

            if (rows is not None and array.shape[0] != rows) or (cols is not None and array.shape[1] != cols):
                raise ShapeMismatchError(f'Expected a {rows}x{cols} matrix but got '
                                         f'{array.shape[0]}x{array.shape[1]}')

            self._data = array if dtype is None else array.astype(dtype)

    # ------------------------------------------------------------------------------------------------------------------
    # construction helpers

    @classmethod
    def zero(cls, rows: int, cols: int, dtype: Any = np.float64, options: MatrixOptions | None = None) -> Self:
        """
        Returns a matrix of zeros.
        """
        return cls(np.zeros((rows, cols), dtype=dtype), options=options)

    @classmethod
    def ones(cls, rows: int, cols: int, dtype: Any = np.float64, options: MatrixOptions | None = None) -> Self:
        """
        Returns a matrix of ones.
        """
        return cls(np.ones((rows, cols), dtype=dtype), options=options)

    @classmethod
    def identity(cls, rows: int, cols: int | None = None, dtype: Any = np.float64,
                 options: MatrixOptions | None = None) -> Self:
        """
        Returns a matrix with ones on the main diagonal and zeros elsewhere.

        :param rows: The number of rows
        :param cols: The number of columns.  If ``None`` the matrix is square.
        """
        return cls(np.eye(rows, rows if cols is None else cols, dtype=dtype), options=options)

    def _spawn(self, array: np.ndarray) -> 'Matrix':
        """
        Builds the result of an operation on self.
        """
        return Matrix(array, options=self.current_options())

    def copy(self) -> Self:
        """
        Returns a deep copy of self (including its current options)
        """
        return type(self)(self._data, options=self.current_options())

    # ------------------------------------------------------------------------------------------------------------------
    # shape and element access

    @property
    def rows(self) -> int:
        """
        The number of rows in the matrix
        """
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """
        The number of columns in the matrix
        """
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """
        The (rows, cols) shape of the matrix
        """
        return self._data.shape[0], self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        """
        The numeric type of the elements
        """
        return self._data.dtype

    def _index(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError('Matrix elements are indexed with a (row, col) pair')

        row, col = key

        if self.bounds_check:
            _check_index(row, self.rows, 'Matrix row')
            _check_index(col, self.cols, 'Matrix column')

        return row, col

    def at(self, row: int, col: int):
        """
        Returns the element at ``row``, ``col``.

        :raises IndexError: if :attr:`bounds_check` is enabled and the indices are outside of the matrix
        """
        return self._data[self._index((row, col))]

    def __getitem__(self, key: tuple[int, int]):
        return self._data[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value) -> None:
        self._data[self._index(key)] = value

    def row(self, row: int) -> Vector:
        """
        Returns a :class:`.Vector` viewing the requested row.  Writing into the vector writes into the matrix.
        """
        return Vector._wrap(self._data[_check_index(row, self.rows, 'Matrix row')])

    def col(self, col: int) -> Vector:
        """
        Returns a :class:`.Vector` viewing the requested column.  Writing into the vector writes into the matrix.
        """
        return Vector._wrap(self._data[:, _check_index(col, self.cols, 'Matrix column')])

    def swap_rows(self, row_1: int, row_2: int) -> None:
        """
        Swaps two rows in place.
        """
        _check_index(row_1, self.rows, 'Matrix row')
        _check_index(row_2, self.rows, 'Matrix row')

        if row_1 != row_2:
            self._data[[row_1, row_2]] = self._data[[row_2, row_1]]

    def __iter__(self) -> Iterator[list]:
        return iter(self._data.tolist())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def to_array(self) -> np.ndarray:
        """
        Returns a copy of the elements as a 2d numpy array
        """
        return self._data.copy()

    # ------------------------------------------------------------------------------------------------------------------
    # algebra

    def _require_square(self, operation: str) -> None:
        if self.rows != self.cols:
            raise ShapeMismatchError(f'{operation} requires a square matrix but this one is {self.rows}x{self.cols}')

    def transpose(self) -> 'Matrix':
        """
        Returns a new matrix with the rows and columns swapped.
        """
        return self._spawn(self._data.T.copy())

    def trace(self) -> float:
        """
        Returns the sum of the main diagonal of a square matrix.
        """
        self._require_square('The trace')
        return self._data.trace().item()

    def determinant(self) -> float:
        """
        Returns the determinant of a square matrix.

        Sizes 2, 3 and 4 use closed form expressions.  Larger matrices are reduced with :meth:`row_echelon_form`.  A
        singular matrix gives 0.

        :raises ShapeMismatchError: if the matrix is not square
        """
        self._require_square('The determinant')
        return _determinant(self._data)

    def first_minor(self, row: int, col: int) -> float:
        """
        Returns the determinant of the matrix left after removing ``row`` and ``col``.
        """
        self._require_square('The first minor')
        _check_index(row, self.rows, 'Matrix row')
        _check_index(col, self.cols, 'Matrix column')

        return _first_minor(self._data, row, col)

    def cofactor(self, row: int, col: int) -> float:
        """
        Returns the cofactor ``(-1)**(row + col) * first_minor(row, col)``.
        """
        return (-1) ** (row + col) * self.first_minor(row, col)

    def cofactor_matrix(self) -> 'Matrix':
        """
        Returns the matrix of every cofactor.
        """
        self._require_square('The cofactor matrix')
        return self._spawn(_cofactor_matrix(self._data))

    def adjugate(self) -> 'Matrix':
        """
        Returns the adjugate (the transpose of the cofactor matrix).

        Sizes 2, 3 and 4 use closed form expressions, larger matrices the cofactor expansion.
        """
        self._require_square('The adjugate')
        return self._spawn(_adjugate(self._data))

    def row_echelon_form(self, return_determinant: bool = False) -> 'Matrix | tuple[Matrix, float]':
        """
        Reduces the matrix to row echelon form using partial pivoting.

        At each column the row with the largest absolute value at or below the diagonal is swapped into the pivot
        position and the entries below the pivot are cleared.  If a pivot is exactly zero the reduction stops and the
        determinant is 0.

        :param return_determinant: Whether to also return the signed product of the pivots (which is the determinant
                                   for square matrices)
        :return: the reduced matrix, and optionally the determinant
        """

        reduced, determinant = _row_echelon(self._data)

        if return_determinant:
            return self._spawn(reduced), determinant

        return self._spawn(reduced)

    def _compute_inverse(self) -> tuple[np.ndarray, bool]:
        size = self.rows
        dtype = _floating_dtype(self._data.dtype)

        if size == 0:
            return np.zeros((0, 0), dtype=dtype), True

        if size <= 4 or self.inverse_method != 'lu':
            determinant = _determinant(self._data)

            if abs(determinant) <= self.singular_tolerance:
                return np.zeros((size, size), dtype=dtype), False

            if size == 1:
                return np.array([[1.0 / determinant]], dtype=dtype), True

            return (_adjugate(self._data) / determinant).astype(dtype), True

        elif self.inverse_method == 'lu':
            from photomath.algebra.lu import LuDecomposition, LuDecompositionOptions

            try:
                decomposition = LuDecomposition(self, options=LuDecompositionOptions(zero_pivot_policy='raise'))
            except SingularMatrixError:
                return np.zeros((size, size), dtype=dtype), False

            if abs(decomposition.determinant()) <= self.singular_tolerance:
                return np.zeros((size, size), dtype=dtype), False

            return decomposition.inverse().to_array().astype(dtype), True

        else:
            raise ValueError(f'Unknown inverse method {self.inverse_method}')

    def inverse(self, return_invertible: bool = False) -> 'Matrix | tuple[Matrix, bool]':
        """
        Returns the inverse of a square matrix.

        Sizes up to 4 use closed form adjugate over determinant expressions.  Larger matrices use the method selected
        by :attr:`inverse_method`.  When the absolute determinant is no larger than :attr:`singular_tolerance` the
        result is a matrix of zeros and the matrix is reported as not invertible (no exception is raised).

        :param return_invertible: Whether to also return a flag stating whether the matrix was invertible
        :return: the inverse, and optionally the invertible flag
        :raises ShapeMismatchError: if the matrix is not square
        """

        self._require_square('The inverse')

        inverse, invertible = self._compute_inverse()

        if return_invertible:
            return self._spawn(inverse), invertible

        return self._spawn(inverse)

    def try_inverse(self) -> Result['Matrix']:
        """
        Returns the inverse wrapped in a :class:`.Result`.

        The status is :attr:`.Status.SINGULAR` (with the zero matrix as the value) for singular matrices and
        :attr:`.Status.SHAPE_MISMATCH` (with no value) for non-square matrices.
        """

        try:
            inverse, invertible = self.inverse(return_invertible=True)
        except ShapeMismatchError as error:
            return Result(None, Status.SHAPE_MISMATCH, str(error))

        if not invertible:
            return Result(inverse, Status.SINGULAR, 'The matrix is singular')

        return Result(inverse)

    def invertible(self) -> bool:
        """
        Returns ``True`` if the absolute determinant is larger than :attr:`singular_tolerance`.
        """
        return abs(self.determinant()) > self.singular_tolerance

    def singular(self) -> bool:
        """
        Returns ``True`` if the matrix is not invertible.
        """
        return not self.invertible()

    def solve(self, b: 'Vector | Matrix | ARRAY_LIKE_2D') -> 'Vector | Matrix':
        """
        Solves ``self @ x = b`` for x using an :class:`.LuDecomposition`.

        :param b: The right hand side as a vector (or 1d array) or as a matrix (or 2d array) of right hand sides
        :return: the solution in the same form as b
        """

        from photomath.algebra.lu import LuDecomposition

        return LuDecomposition(self).solve(b)

    # ------------------------------------------------------------------------------------------------------------------
    # operators

    def _same_shape_operand(self, other: 'Matrix') -> np.ndarray:
        if other.shape != self.shape:
            raise ShapeMismatchError(f'Matrix shapes do not match ({self.rows}x{self.cols} vs '
                                     f'{other.rows}x{other.cols})')
        return other._data

    def _product(self, other: Any) -> 'Matrix | Vector':
        if isinstance(other, Matrix):
            if other.rows != self.cols:
                raise ShapeMismatchError(f'Cannot multiply a {self.rows}x{self.cols} matrix by a '
                                         f'{other.rows}x{other.cols} matrix')
            return self._spawn(self._data @ other._data)

        if isinstance(other, Vector):
            if other.size != self.cols:
                raise ShapeMismatchError(f'Cannot multiply a {self.rows}x{self.cols} matrix by a vector of size '
                                         f'{other.size}')
            return Vector._wrap(self._data @ np.asarray(other))

        return NotImplemented

    def __pos__(self) -> 'Matrix':
        return self._spawn(self._data.copy())

    def __neg__(self) -> 'Matrix':
        return self._spawn(-self._data)

    def __add__(self, other: 'Matrix') -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._spawn(self._data + self._same_shape_operand(other))

    def __sub__(self, other: 'Matrix') -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._spawn(self._data - self._same_shape_operand(other))

    def __mul__(self, other: 'Matrix | Vector | float') -> 'Matrix | Vector':
        if _is_scalar(other):
            return self._spawn(self._data * other)
        return self._product(other)

    def __rmul__(self, other: float) -> 'Matrix':
        if _is_scalar(other):
            return self._spawn(other * self._data)
        return NotImplemented

    def __matmul__(self, other: 'Matrix | Vector') -> 'Matrix | Vector':
        return self._product(other)

    def __truediv__(self, other: float) -> 'Matrix':
        if not _is_scalar(other):
            return NotImplemented

        if other == 0:
            warnings.warn('Division of a matrix by zero.  The result has been replaced with the zero matrix.',
                          NumericalFallbackWarning)
            return self._spawn(np.zeros(self.shape, dtype=_floating_dtype(self._data.dtype)))

        return self._spawn(self._data / other)

    def _assign(self, result: Any) -> Self:
        if result is NotImplemented:
            return NotImplemented

        if result.shape != self.shape and not self._resizable:
            raise ShapeMismatchError(f'The result of an in place operation must stay {self.rows}x{self.cols}')

        self._data = result._data
        return self

    def __iadd__(self, other: 'Matrix') -> Self:
        return self._assign(self.__add__(other))

    def __isub__(self, other: 'Matrix') -> Self:
        return self._assign(self.__sub__(other))

    def __imul__(self, other: 'Matrix | float') -> Self:
        if isinstance(other, Vector):
            return NotImplemented
        return self._assign(self.__mul__(other))

    def __itruediv__(self, other: float) -> Self:
        return self._assign(self.__truediv__(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._data == other._data))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"

    def __str__(self) -> str:
        return str(self._data)


class DynamicMatrix(Matrix):
    """
    A :class:`.Matrix` whose shape can change after construction.

    Besides :meth:`resize`, in place products are allowed to change the shape (``m *= other`` with a non square
    ``other``).  Matrices produced by operations on a dynamic matrix are also dynamic.
    """

    _resizable = True

    def _spawn(self, array: np.ndarray) -> 'DynamicMatrix':
        return DynamicMatrix(array, options=self.current_options())

    def resize(self, rows: int, cols: int) -> None:
        """
        Changes the shape of the matrix in place.

        The entries that fit in both the old and new shapes are kept and any new entries are set to zero.
        """

        if rows < 0 or cols < 0:
            raise ValueError('The number of rows and columns must be non-negative')

        resized = np.zeros((rows, cols), dtype=self._data.dtype)

        keep_rows = min(rows, self.rows)
        keep_cols = min(cols, self.cols)
        resized[:keep_rows, :keep_cols] = self._data[:keep_rows, :keep_cols]

        self._data = resized
