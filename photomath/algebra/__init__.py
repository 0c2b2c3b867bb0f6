"""
This package provides the dense linear algebra core: the :class:`.Vector` and :class:`.Matrix` value types, the
:class:`.LuDecomposition` solver, and the error and result types shared with the :mod:`photomath.rotations` package.

All of the algorithms (determinants, inverses, row reduction and the LU factorization) are implemented directly on
numpy storage.  Singular matrices are treated as a data condition rather than as an error: the determinant is 0 and
the inverse is a zero matrix flagged as not invertible.  :meth:`.Matrix.try_inverse` reports the same outcome as an
explicit :class:`.Result`.
"""

from photomath.algebra.errors import ShapeMismatchError, SingularMatrixError, GimbalLockError, NumericalFallbackWarning
from photomath.algebra.results import Status, Result
from photomath.algebra.vector import Vector, dot_product
from photomath.algebra.matrix import MatrixOptions, Matrix, DynamicMatrix
from photomath.algebra.lu import LuDecompositionOptions, LuDecomposition

__all__ = ['ShapeMismatchError', 'SingularMatrixError', 'GimbalLockError', 'NumericalFallbackWarning',
           'Status', 'Result',
           'Vector', 'dot_product',
           'MatrixOptions', 'Matrix', 'DynamicMatrix',
           'LuDecompositionOptions', 'LuDecomposition']
