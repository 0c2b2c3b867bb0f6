"""
This module provides an explicit outcome type for operations whose legacy behavior is to silently return a fallback
value.

A :class:`Result` always carries a :class:`Status`.  Callers that want the strict behavior use :meth:`Result.unwrap`
which raises for anything but :attr:`Status.OK`.  Callers that want the historical "always return something" behavior
use :meth:`Result.best_effort`.

    >>> from photomath.algebra import Matrix
    >>> res = Matrix([[1, 2], [2, 4]]).try_inverse()
    >>> res.status
    <Status.SINGULAR: 'singular'>
    >>> res.best_effort()
    Matrix([[0.0, 0.0], [0.0, 0.0]])
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from photomath.algebra.errors import GimbalLockError, ShapeMismatchError, SingularMatrixError


__all__ = ["Status", "Result"]


T = TypeVar("T")


class Status(Enum):
    """
    The possible outcomes of an operation returning a :class:`Result`
    """

    OK = "ok"
    """
    The operation succeeded and the value is exact (to floating point precision).
    """

    SINGULAR = "singular"
    """
    The matrix was singular.  The value is the documented fallback (usually a zero matrix).
    """

    GIMBAL_LOCK = "gimbal_lock"
    """
    The euler angle extraction hit gimbal lock.  Only the composite of the outer angles is meaningful.
    """

    SHAPE_MISMATCH = "shape_mismatch"
    """
    The operands had incompatible shapes.  There is no value.
    """


_ERRORS = {Status.SINGULAR: SingularMatrixError,
           Status.GIMBAL_LOCK: GimbalLockError,
           Status.SHAPE_MISMATCH: ShapeMismatchError}


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    The value produced by an operation together with the status describing how it was produced.
    """

    value: T | None
    """
    The computed (or fallback) value.  ``None`` only when the status is :attr:`Status.SHAPE_MISMATCH`.
    """

    status: Status = Status.OK
    """
    How the value was produced.
    """

    message: str = ""
    """
    A human readable description of any problem.
    """

    @property
    def ok(self) -> bool:
        """
        ``True`` if the status is :attr:`Status.OK`.
        """
        return self.status is Status.OK

    def unwrap(self) -> T:
        """
        Returns the value if the operation succeeded, otherwise raises the error matching the status.

        :raises SingularMatrixError: if the status is :attr:`Status.SINGULAR`
        :raises GimbalLockError: if the status is :attr:`Status.GIMBAL_LOCK`
        :raises ShapeMismatchError: if the status is :attr:`Status.SHAPE_MISMATCH`
        """

        if self.status is not Status.OK:
            raise _ERRORS[self.status](self.message or self.status.value)

        assert self.value is not None, "an OK result must carry a value"
        return self.value

    def best_effort(self) -> T:
        """
        Returns the value whatever the status, matching the legacy fallback behavior.

        :raises ShapeMismatchError: if there is no value because the operands had incompatible shapes
        """

        if self.value is None:
            raise ShapeMismatchError(self.message or self.status.value)

        return self.value
