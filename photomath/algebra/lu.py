"""
This module provides the :class:`LuDecomposition` class for solving square linear systems.

Description
-----------

The decomposition uses Gaussian elimination with implicitly scaled partial pivoting.  Before the elimination the
largest absolute value of each row is recorded (:meth:`LuDecomposition.find_max_elements_by_rows`) and at each step the
pivot is the candidate with the largest magnitude relative to its row maximum, which keeps rows with very different
scales from dominating the pivot choice.

The factors are stored packed in a single matrix, the unit diagonal lower factor below the diagonal and the upper
factor on and above it, so that ``P @ A = L @ U`` where ``P`` is the row permutation recorded during pivoting.

A pivot that is exactly zero after the row exchanges is replaced by the smallest positive normal double so that the
solve can complete.  This is reported with a :class:`.NumericalFallbackWarning` and recorded in
:attr:`LuDecomposition.zero_pivots`; set :attr:`LuDecompositionOptions.zero_pivot_policy` to ``'raise'`` to get a
:class:`.SingularMatrixError` instead.

Use
---

    >>> from photomath.algebra import LuDecomposition, Matrix, Vector
    >>> lu = LuDecomposition(Matrix([[4, 3], [6, 3]]))
    >>> lu.solve(Vector([10, 12])).to_array().round(6).tolist()
    [1.0, 2.0]
    >>> round(lu.determinant(), 6)
    -6.0
"""

import warnings

from dataclasses import dataclass

import numpy as np

from photomath._typing import ARRAY_LIKE_2D, DOUBLE_ARRAY, ZERO_PIVOT_POLICIES
from photomath.algebra._helpers import _check_array_and_shape
from photomath.algebra.errors import NumericalFallbackWarning, ShapeMismatchError, SingularMatrixError
from photomath.algebra.matrix import Matrix
from photomath.algebra.vector import Vector
from photomath.utilities.options import UserOptions
from photomath.utilities.mixin_classes import UserOptionConfigured


__all__ = ["LuDecompositionOptions", "LuDecomposition"]


@dataclass
class LuDecompositionOptions(UserOptions):
    """
    This dataclass serves as one way to control the behavior of the :class:`.LuDecomposition` class.
    """

    zero_pivot_policy: ZERO_PIVOT_POLICIES = 'substitute'
    """
    What to do when a pivot is exactly zero.

    ``'substitute'`` replaces the pivot with the smallest positive normal double and continues.  ``'raise'`` raises a
    :class:`.SingularMatrixError`.
    """

    warn_on_substitution: bool = True
    """
    Whether to issue a :class:`.NumericalFallbackWarning` each time a zero pivot is substituted.
    """


class LuDecomposition(UserOptionConfigured[LuDecompositionOptions], LuDecompositionOptions):
    """
    The LU decomposition of a square matrix with implicitly scaled partial pivoting.

    The decomposition is computed once on construction (in double precision, whatever the input dtype) and never
    changes afterwards.  It can then be used to solve any number of right hand sides with :meth:`solve`, and to get the
    :meth:`determinant` and the :meth:`inverse` of the matrix.
    """

    def __init__(self, matrix: Matrix | ARRAY_LIKE_2D, options: LuDecompositionOptions | None = None):
        """
        :param matrix: The square matrix to decompose
        :param options: The options to configure the decomposition with
        :raises ShapeMismatchError: if the matrix is not square
        :raises SingularMatrixError: if a row of the matrix is entirely zero, or if a zero pivot is found and the
                                     zero pivot policy is ``'raise'``
        """

        super().__init__(LuDecompositionOptions, options=options)

        if isinstance(matrix, Matrix):
            matrix = matrix.to_array()

        array = _check_array_and_shape(matrix, ndim=2)

        if array.shape[0] != array.shape[1]:
            raise ShapeMismatchError(f'The LU decomposition requires a square matrix but got '
                                     f'{array.shape[0]}x{array.shape[1]}')

        self._matrix: DOUBLE_ARRAY = array.astype(np.float64)
        """
        The decomposed matrix
        """

        self._lu: DOUBLE_ARRAY = self._matrix.copy()
        """
        The packed factors
        """

        self._permutation: list[int] = []
        """
        The row swapped into position k at step k of the elimination
        """

        self._parity: float = 1.0
        """
        +1 for an even number of row exchanges, -1 for an odd number
        """

        self._zero_pivots: list[int] = []
        """
        The columns where a zero pivot was substituted
        """

        self._decompose()

    @property
    def size(self) -> int:
        """
        The number of rows (and columns) of the decomposed matrix
        """
        return self._matrix.shape[0]

    @property
    def permutation(self) -> tuple[int, ...]:
        """
        The pivot record: the row exchanged with row ``k`` at each step ``k`` of the elimination.
        """
        return tuple(self._permutation)

    @property
    def parity(self) -> float:
        """
        The sign of the row permutation (+1.0 or -1.0)
        """
        return self._parity

    @property
    def zero_pivots(self) -> tuple[int, ...]:
        """
        The columns where an exactly zero pivot was replaced by the smallest positive normal double
        """
        return tuple(self._zero_pivots)

    @property
    def is_singular(self) -> bool:
        """
        ``True`` if any zero pivot had to be substituted during the decomposition
        """
        return bool(self._zero_pivots)

    def find_max_elements_by_rows(self) -> DOUBLE_ARRAY:
        """
        Returns the largest absolute value in each row of the decomposed matrix.

        These are the implicit scale factors used to choose the pivots.

        :raises SingularMatrixError: if any row is entirely zero
        """

        maxima = np.abs(self._matrix).max(axis=1) if self.size else np.zeros(0)

        zero_rows = np.flatnonzero(maxima == 0)
        if zero_rows.size:
            raise SingularMatrixError(f'Row {int(zero_rows[0])} of the matrix is zero so the matrix is singular')

        return maxima

    def _decompose(self) -> None:
        lu = self._lu
        size = self.size

        scale = self.find_max_elements_by_rows()

        for k in range(size):
            pivot = k + int(np.argmax(np.abs(lu[k:, k]) / scale[k:]))

            if pivot != k:
                lu[[k, pivot]] = lu[[pivot, k]]
                self._parity = -self._parity
                scale[pivot] = scale[k]

            self._permutation.append(pivot)

            if lu[k, k] == 0:
                if self.zero_pivot_policy == 'raise':
                    raise SingularMatrixError(f'Zero pivot found in column {k} so the matrix is singular')

                lu[k, k] = np.finfo(np.float64).tiny
                self._zero_pivots.append(k)

                if self.warn_on_substitution:
                    warnings.warn(f'Zero pivot in column {k} replaced by {lu[k, k]}.  The matrix is singular and the '
                                  f'solution is not reliable.', NumericalFallbackWarning)

            lu[k + 1:, k] /= lu[k, k]
            lu[k + 1:, k + 1:] -= np.outer(lu[k + 1:, k], lu[k, k + 1:])

    def _solve_array(self, rhs: np.ndarray) -> DOUBLE_ARRAY:
        lu = self._lu
        solution = rhs.astype(np.float64)

        # forward substitution, skipping the leading zeros of the permuted right hand side
        first = -1
        for i, pivot in enumerate(self._permutation):
            total = solution[pivot]
            solution[pivot] = solution[i]

            if first >= 0:
                total -= lu[i, first:i] @ solution[first:i]
            elif total != 0:
                first = i

            solution[i] = total

        for i in range(self.size - 1, -1, -1):
            solution[i] = (solution[i] - lu[i, i + 1:] @ solution[i + 1:]) / lu[i, i]

        return solution

    def solve(self, b: Vector | Matrix | ARRAY_LIKE_2D) -> Vector | Matrix | DOUBLE_ARRAY:
        """
        Solves ``A @ x = b`` for x, where A is the decomposed matrix.

        A matrix of right hand sides is solved column by column.

        :param b: The right hand side(s) as a :class:`.Vector`, a :class:`.Matrix` or a 1d/2d array like
        :return: the solution in the same form as ``b`` (a new vector, a new matrix or a numpy array)
        :raises ShapeMismatchError: if the length of ``b`` does not match the size of the matrix
        """

        if isinstance(b, Vector):
            return Vector._wrap(self._solve_array(self._check_rhs(np.asarray(b))))

        if isinstance(b, Matrix):
            return Matrix(self._solve_matrix(self._check_rhs(b.to_array())))

        array = np.asarray(b)

        if array.ndim == 1:
            return self._solve_array(self._check_rhs(array))
        elif array.ndim == 2:
            return self._solve_matrix(self._check_rhs(array))
        else:
            raise ShapeMismatchError('The right hand side must be 1 or 2 dimensional')

    def _check_rhs(self, rhs: np.ndarray) -> np.ndarray:
        if rhs.shape[0] != self.size:
            raise ShapeMismatchError(f'The right hand side has {rhs.shape[0]} rows but the matrix is '
                                     f'{self.size}x{self.size}')
        return rhs

    def _solve_matrix(self, rhs: np.ndarray) -> DOUBLE_ARRAY:
        solution = np.empty(rhs.shape, dtype=np.float64)
        for col in range(rhs.shape[1]):
            solution[:, col] = self._solve_array(rhs[:, col])
        return solution

    def determinant(self) -> float:
        """
        Returns the determinant of the decomposed matrix (the parity times the product of the upper diagonal).
        """
        return float(self._parity * np.prod(np.diag(self._lu)))

    def inverse(self) -> Matrix:
        """
        Returns the inverse of the decomposed matrix by solving against the identity.
        """
        return self.solve(Matrix.identity(self.size))

    def lu(self) -> Matrix:
        """
        Returns a copy of the packed factors (``L`` without its unit diagonal below the diagonal, ``U`` on and above)
        """
        return Matrix(self._lu)

    def lower(self) -> Matrix:
        """
        Returns the unit diagonal lower triangular factor
        """
        return Matrix(np.tril(self._lu, -1) + np.eye(self.size))

    def upper(self) -> Matrix:
        """
        Returns the upper triangular factor
        """
        return Matrix(np.triu(self._lu))

    def permutation_matrix(self) -> Matrix:
        """
        Returns the permutation matrix ``P`` such that ``P @ A = L @ U``.
        """

        order = list(range(self.size))
        for k, pivot in enumerate(self._permutation):
            order[k], order[pivot] = order[pivot], order[k]

        return Matrix(np.eye(self.size)[order])
