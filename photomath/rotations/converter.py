"""
This module provides the :class:`RotationConverter` which converts between any two rotation representations.

The conversion is selected by the (source type, destination type) pair.  The destination can be either an existing
instance, which is filled in place (for :class:`.EulerAngles` its axes select the convention), or a representation
type, in which case a new instance is returned:

    >>> from photomath.rotations import RotationConverter, EulerAngles, Quaternion
    >>> import numpy as np
    >>> q = RotationConverter.convert(EulerAngles(0.0, 0.0, np.pi / 2, 'xyz'), Quaternion)
    >>> np.round(q.to_array(), 6).tolist()
    [0.0, 0.0, 0.707107, 0.707107]

:meth:`RotationConverter.try_convert` reports degenerate euler angle extractions explicitly with a :class:`.Result`
whose status is :attr:`.Status.GIMBAL_LOCK`.
"""

import copy

from dataclasses import fields

from typing import Callable, TypeVar

import numpy as np

from photomath._typing import EULER_ORDERS
from photomath.algebra.errors import ShapeMismatchError
from photomath.algebra.matrix import Matrix
from photomath.algebra.results import Result, Status
from photomath.rotations.representations import Axes, AxisAngle, EulerAngles, Quaternion, RotationMatrix
from photomath.rotations import conversions as conv


__all__ = ["RotationConverter", "REPRESENTATION"]


REPRESENTATION = Quaternion | RotationMatrix | EulerAngles | AxisAngle
"""
Any of the four rotation representations
"""

RepresentationT = TypeVar("RepresentationT", Quaternion, RotationMatrix, EulerAngles, AxisAngle)


def _to_euler(to_rotmat: Callable) -> Callable:
    def convert(source, axes: Axes) -> tuple[EulerAngles, bool]:
        return conv.rotmat_to_euler(to_rotmat(source), axes, return_gimbal_lock=True)
    return convert


def _identity(source) -> RotationMatrix:
    return source


def _copy(source, axes: Axes | None) -> tuple:
    return copy.deepcopy(source), False


def _euler_to_euler(source: EulerAngles, axes: Axes) -> tuple[EulerAngles, bool]:
    if source.axes is axes:
        return copy.deepcopy(source), False
    return conv.rotmat_to_euler(conv.euler_to_rotmat(source), axes, return_gimbal_lock=True)


def _plain(function: Callable) -> Callable:
    def convert(source, axes: Axes | None) -> tuple:
        return function(source), False
    return convert


_CONVERSIONS: dict[tuple[type, type], Callable] = {
    (Quaternion, Quaternion): _copy,
    (Quaternion, RotationMatrix): _plain(conv.quaternion_to_rotmat),
    (Quaternion, AxisAngle): _plain(conv.quaternion_to_axis_angle),
    (Quaternion, EulerAngles): _to_euler(conv.quaternion_to_rotmat),

    (RotationMatrix, Quaternion): _plain(conv.rotmat_to_quaternion),
    (RotationMatrix, RotationMatrix): _copy,
    (RotationMatrix, AxisAngle): _plain(conv.rotmat_to_axis_angle),
    (RotationMatrix, EulerAngles): _to_euler(_identity),

    (AxisAngle, Quaternion): _plain(conv.axis_angle_to_quaternion),
    (AxisAngle, RotationMatrix): _plain(conv.axis_angle_to_rotmat),
    (AxisAngle, AxisAngle): _copy,
    (AxisAngle, EulerAngles): _to_euler(conv.axis_angle_to_rotmat),

    (EulerAngles, Quaternion): _plain(conv.euler_to_quaternion),
    (EulerAngles, RotationMatrix): _plain(conv.euler_to_rotmat),
    (EulerAngles, AxisAngle): _plain(conv.euler_to_axis_angle),
    (EulerAngles, EulerAngles): _euler_to_euler,
}
"""
The conversion for each (source, destination) pair.  Each one takes the source and the euler axes and returns the new
value and whether the euler extraction hit gimbal lock.
"""


def _as_representation(value: object) -> tuple[REPRESENTATION, type]:
    for representation in (RotationMatrix, Quaternion, EulerAngles, AxisAngle):
        if isinstance(value, representation):
            return value, representation

    # products of rotation matrices are plain matrices
    if isinstance(value, Matrix):
        if value.shape != (3, 3):
            raise ShapeMismatchError(f'A rotation matrix must be 3x3 but got {value.rows}x{value.cols}')
        return RotationMatrix(value.to_array(), options=value.current_options()), RotationMatrix

    raise TypeError('Unsupported rotation representation {}'.format(type(value).__name__))


def _fill(destination, value) -> None:
    if isinstance(destination, Matrix):
        if np.can_cast(np.float64, destination.dtype, casting='same_kind'):
            destination._data[...] = value.to_array()
        else:
            destination._data = value.to_array()
    else:
        for field in fields(destination):
            setattr(destination, field.name, getattr(value, field.name))


class RotationConverter:
    """
    Converts rotations between :class:`.Quaternion`, :class:`.RotationMatrix`, :class:`.EulerAngles` and
    :class:`.AxisAngle`.

    The converter is stateless.  The conversions themselves are the functions in
    :mod:`photomath.rotations.conversions`; this class only dispatches on the representation types.
    """

    @classmethod
    def _convert(cls, source: REPRESENTATION | Matrix, destination: REPRESENTATION | Matrix | type,
                 axes: Axes | EULER_ORDERS | None) -> tuple[REPRESENTATION, bool]:

        source, source_type = _as_representation(source)

        if isinstance(destination, type):
            for representation in (Matrix, Quaternion, EulerAngles, AxisAngle):
                if issubclass(destination, representation):
                    destination_type = RotationMatrix if representation is Matrix else representation
                    break
            else:
                raise TypeError('Unsupported rotation representation {}'.format(destination.__name__))

        else:
            _, destination_type = _as_representation(destination)

            if axes is None and isinstance(destination, EulerAngles):
                axes = destination.axes

        if destination_type is EulerAngles:
            if axes is None:
                axes = source.axes if isinstance(source, EulerAngles) else Axes.XYZ
            axes = Axes(axes)

        return _CONVERSIONS[(source_type, destination_type)](source, axes)

    @classmethod
    def convert(cls, source: REPRESENTATION | Matrix, destination: RepresentationT | type[RepresentationT],
                axes: Axes | EULER_ORDERS | None = None) -> RepresentationT:
        """
        Converts ``source`` into the representation of ``destination``.

        If ``destination`` is an instance it is overwritten with the result and returned.  If it is one of the
        representation types a new instance of that type is returned.

        A plain 3x3 :class:`.Matrix` (such as the product of two rotation matrices) is treated as a
        :class:`.RotationMatrix` on either side, and asking for the :class:`.Matrix` type returns a
        :class:`.RotationMatrix`.

        :param source: The rotation to convert
        :param destination: The instance to fill, or the type to create
        :param axes: The euler axis convention of the result when converting to :class:`.EulerAngles`.  By default the
                     axes of the destination instance are used (or those of an :class:`.EulerAngles` source, or xyz)
        :return: The converted rotation
        :raises TypeError: if either side is not a rotation representation
        :raises ShapeMismatchError: if either side is a :class:`.Matrix` that is not 3x3
        """

        value, _ = cls._convert(source, destination, axes)

        if isinstance(destination, type):
            return value

        _fill(destination, value)
        return destination

    @classmethod
    def try_convert(cls, source: REPRESENTATION | Matrix, destination: RepresentationT | type[RepresentationT],
                    axes: Axes | EULER_ORDERS | None = None) -> Result[RepresentationT]:
        """
        Converts like :meth:`convert` but returns the result in a :class:`.Result`.

        The status is :attr:`.Status.GIMBAL_LOCK` when euler angles were extracted at gimbal lock.  The value is still
        set (and still reproduces the source rotation), but only the combination of the outer angles is meaningful.
        """

        value, gimbal_lock = cls._convert(source, destination, axes)

        if not isinstance(destination, type):
            _fill(destination, value)
            value = destination

        if gimbal_lock:
            return Result(value, Status.GIMBAL_LOCK,
                          'The rotation is at gimbal lock so only the combination of omega and kappa is defined')

        return Result(value)
