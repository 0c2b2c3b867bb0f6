# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Exceptions and warnings raised by the algebra and rotations packages.

Shape problems are programming errors and are raised immediately.  Singular matrices and degenerate rotations are
expected data conditions: they are normally resolved with a documented fallback value and only become exceptions when
a caller explicitly asks for it (see :meth:`.Result.unwrap`).
"""


__all__ = ["ShapeMismatchError", "SingularMatrixError", "GimbalLockError", "NumericalFallbackWarning"]


class ShapeMismatchError(ValueError):
    """
    Raised when the shape of an operand does not meet the requirements of an operation (a non-square matrix passed
    where a square one is required, incompatible dimensions in a product, etc).
    """


class SingularMatrixError(ValueError):
    """
    Raised when a singular matrix is found by an operation that cannot produce a fallback value.
    """


class GimbalLockError(ValueError):
    """
    Raised when a caller requires a unique set of euler angles for a rotation that is at gimbal lock.
    """


class NumericalFallbackWarning(RuntimeWarning):
    """
    Issued when a documented fallback value replaces the result of an ill-defined numerical operation (for instance a
    zero pivot in an LU decomposition or a division by zero).
    """
