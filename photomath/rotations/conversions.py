# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Core conversion routines for rotation representations

This module contains the canonical conversions between :class:`.Quaternion`, :class:`.RotationMatrix`,
:class:`.AxisAngle` and :class:`.EulerAngles`.  The direct conversions are

* quaternion to and from rotation matrix,
* quaternion to and from axis angle,
* axis angle to rotation matrix (Rodrigues' formula),
* rotation matrix to and from euler angles (all twelve conventions),

and every other pair is composed from these (euler angles always go through the rotation matrix).

None of the conversions normalize their input.  Every argument to an inverse trigonometric function is clipped to
[-1, 1] first so that round off never produces NaN.
"""

from typing import overload, Literal

import numpy as np

from photomath._typing import ARRAY_LIKE_2D, EULER_ORDERS
from photomath.algebra.matrix import Matrix
from photomath.algebra.vector import Vector
from photomath.rotations.representations import Axes, AxisAngle, EulerAngles, Quaternion, RotationMatrix


__all__ = ['quaternion_to_rotmat', 'quaternion_to_axis_angle', 'quaternion_to_euler',
           'axis_angle_to_rotmat', 'axis_angle_to_quaternion', 'axis_angle_to_euler',
           'rotmat_to_quaternion', 'rotmat_to_axis_angle', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion', 'euler_to_axis_angle']


def _rotmat_array(matrix: RotationMatrix | Matrix | ARRAY_LIKE_2D) -> np.ndarray:
    if not isinstance(matrix, RotationMatrix):
        matrix = RotationMatrix(matrix)
    return matrix.to_array()


def quaternion_to_rotmat(quaternion: Quaternion) -> RotationMatrix:
    r"""
    This function converts a rotation quaternion into the equivalent rotation matrix.

    The matrix is formed by

    .. math::
        \mathbf{R}=\left[\begin{array}{ccc} 1-2(y^2+z^2) & 2(xy-zw) & 2(xz+yw) \\
        2(xy+zw) & 1-2(x^2+z^2) & 2(yz-xw) \\
        2(xz-yw) & 2(yz+xw) & 1-2(x^2+y^2)\end{array}\right]

    :param quaternion: the rotation quaternion to convert
    :return: The rotation matrix
    """

    x, y, z, w = quaternion.x, quaternion.y, quaternion.z, quaternion.w

    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    xw, yw, zw = x * w, y * w, z * w

    return RotationMatrix([[1 - 2 * (yy + zz), 2 * (xy - zw), 2 * (xz + yw)],
                           [2 * (xy + zw), 1 - 2 * (xx + zz), 2 * (yz - xw)],
                           [2 * (xz - yw), 2 * (yz + xw), 1 - 2 * (xx + yy)]])


def rotmat_to_quaternion(matrix: RotationMatrix | ARRAY_LIKE_2D) -> Quaternion:
    """
    This function converts a rotation matrix into a rotation quaternion using Shepperd's method.

    The largest of the four quaternion components (chosen by the signs of ``r22`` and ``r11 -/+ r00``) is computed
    first from a square root and the other three are then found by dividing sums or differences of the off diagonal
    elements by it, which avoids dividing by a small number.

    The sign of the result is whatever the chosen branch produces; ``q`` and ``-q`` represent the same rotation.

    :param matrix: The rotation matrix to convert
    :return: The rotation quaternion
    """

    m = _rotmat_array(matrix)

    if m[2, 2] <= 0:
        difference = m[1, 1] - m[0, 0]

        if difference <= 0:
            x = 0.5 * np.sqrt(max(1 - m[2, 2] - difference, 0.0))
            denominator = 4 * x
            y = (m[0, 1] + m[1, 0]) / denominator
            z = (m[0, 2] + m[2, 0]) / denominator
            w = (m[2, 1] - m[1, 2]) / denominator

        else:
            y = 0.5 * np.sqrt(max(1 - m[2, 2] + difference, 0.0))
            denominator = 4 * y
            x = (m[0, 1] + m[1, 0]) / denominator
            z = (m[1, 2] + m[2, 1]) / denominator
            w = (m[0, 2] - m[2, 0]) / denominator

    else:
        total = m[1, 1] + m[0, 0]

        if total <= 0:
            z = 0.5 * np.sqrt(max(1 + m[2, 2] - total, 0.0))
            denominator = 4 * z
            x = (m[0, 2] + m[2, 0]) / denominator
            y = (m[1, 2] + m[2, 1]) / denominator
            w = (m[1, 0] - m[0, 1]) / denominator

        else:
            w = 0.5 * np.sqrt(max(1 + m[2, 2] + total, 0.0))
            denominator = 4 * w
            x = (m[2, 1] - m[1, 2]) / denominator
            y = (m[0, 2] - m[2, 0]) / denominator
            z = (m[1, 0] - m[0, 1]) / denominator

    return Quaternion(float(x), float(y), float(z), float(w))


def quaternion_to_axis_angle(quaternion: Quaternion) -> AxisAngle:
    r"""
    This function converts a rotation quaternion into an axis and angle.

    .. math::
        \theta = 2\text{cos}^{-1}(w) \\
        \hat{\mathbf{e}} = \frac{\mathbf{q}_v}{\|\mathbf{q}_v\|}

    When the vector part is zero there is no rotation and the result is an angle of 0 about the x axis.

    :param quaternion: the rotation quaternion to convert
    :return: The axis angle rotation
    """

    vector_part = Vector([quaternion.x, quaternion.y, quaternion.z], dtype=np.float64)
    length = vector_part.module()

    if length > 0:
        return AxisAngle(2 * float(np.arccos(np.clip(quaternion.w, -1, 1))), vector_part / length)

    return AxisAngle(0.0, Vector([1.0, 0.0, 0.0]))


def axis_angle_to_quaternion(axis_angle: AxisAngle) -> Quaternion:
    """
    This function converts an axis and angle into a rotation quaternion, ``[sin(angle/2) * axis, cos(angle/2)]``.

    The axis is used as given (it is not normalized).

    :param axis_angle: the axis angle rotation to convert
    :return: The rotation quaternion
    """

    half_angle = axis_angle.angle / 2
    x, y, z = (np.sin(half_angle) * axis_angle.axis).to_array().tolist()

    return Quaternion(x, y, z, float(np.cos(half_angle)))


def axis_angle_to_rotmat(axis_angle: AxisAngle) -> RotationMatrix:
    r"""
    This function converts an axis and angle into a rotation matrix using Rodrigues' formula

    .. math::
        \mathbf{R} = \text{cos}(\theta)\mathbf{I} + (1-\text{cos}(\theta))\hat{\mathbf{e}}\hat{\mathbf{e}}^T +
        \text{sin}(\theta)\left[\hat{\mathbf{e}}\times\right]

    The axis is used as given (it is not normalized).

    :param axis_angle: the axis angle rotation to convert
    :return: The rotation matrix
    """

    x, y, z = axis_angle.axis.to_array().astype(np.float64).tolist()

    c = np.cos(axis_angle.angle)
    s = np.sin(axis_angle.angle)
    t = 1 - c

    return RotationMatrix([[x * x * t + c, x * y * t - z * s, x * z * t + y * s],
                           [x * y * t + z * s, y * y * t + c, y * z * t - x * s],
                           [x * z * t - y * s, y * z * t + x * s, z * z * t + c]])


def rotmat_to_axis_angle(matrix: RotationMatrix | ARRAY_LIKE_2D) -> AxisAngle:
    """
    This function converts a rotation matrix into an axis and angle by way of the rotation quaternion.

    :param matrix: The rotation matrix to convert
    :return: The axis angle rotation
    """
    return quaternion_to_axis_angle(rotmat_to_quaternion(matrix))


def euler_to_rotmat(euler: EulerAngles) -> RotationMatrix:
    r"""
    This function converts euler angles into a rotation matrix.

    For axes :math:`abc` the matrix is the closed form expansion of
    :math:`\mathbf{R}_a(\omega)\mathbf{R}_b(\phi)\mathbf{R}_c(\kappa)`.

    :param euler: The euler angles to convert
    :return: The rotation matrix
    :raises ValueError: if the axes are not one of the twelve conventions
    """

    axes = Axes(euler.axes)

    c1, s1 = np.cos(euler.omega), np.sin(euler.omega)
    c2, s2 = np.cos(euler.phi), np.sin(euler.phi)
    c3, s3 = np.cos(euler.kappa), np.sin(euler.kappa)

    if axes is Axes.XYZ:
        matrix = [[c2 * c3, -c2 * s3, s2],
                  [c1 * s3 + c3 * s1 * s2, c1 * c3 - s1 * s2 * s3, -c2 * s1],
                  [s1 * s3 - c1 * c3 * s2, c3 * s1 + c1 * s2 * s3, c1 * c2]]

    elif axes is Axes.YXZ:
        matrix = [[c1 * c3 + s1 * s2 * s3, c3 * s1 * s2 - c1 * s3, c2 * s1],
                  [c2 * s3, c2 * c3, -s2],
                  [c1 * s2 * s3 - c3 * s1, c1 * c3 * s2 + s1 * s3, c1 * c2]]

    elif axes is Axes.ZXY:
        matrix = [[c1 * c3 - s1 * s2 * s3, -s1 * c2, c1 * s3 + s1 * s2 * c3],
                  [s1 * c3 + c1 * s2 * s3, c1 * c2, s1 * s3 - c1 * s2 * c3],
                  [-c2 * s3, s2, c2 * c3]]

    elif axes is Axes.ZYX:
        matrix = [[c1 * c2, c1 * s2 * s3 - c3 * s1, s1 * s3 + c1 * c3 * s2],
                  [c2 * s1, c1 * c3 + s1 * s2 * s3, c3 * s1 * s2 - c1 * s3],
                  [-s2, c2 * s3, c2 * c3]]

    elif axes is Axes.YZX:
        matrix = [[c1 * c2, s1 * s3 - c1 * s2 * c3, c1 * s2 * s3 + s1 * c3],
                  [s2, c2 * c3, -c2 * s3],
                  [-s1 * c2, c1 * s3 + s1 * s2 * c3, c1 * c3 - s1 * s2 * s3]]

    elif axes is Axes.XZY:
        matrix = [[c2 * c3, -s2, c2 * s3],
                  [c1 * s2 * c3 + s1 * s3, c1 * c2, c1 * s2 * s3 - s1 * c3],
                  [s1 * s2 * c3 - c1 * s3, s1 * c2, s1 * s2 * s3 + c1 * c3]]

    elif axes is Axes.XYX:
        matrix = [[c2, s2 * s3, s2 * c3],
                  [s1 * s2, c1 * c3 - s1 * c2 * s3, -c1 * s3 - s1 * c2 * c3],
                  [-c1 * s2, s1 * c3 + c1 * c2 * s3, c1 * c2 * c3 - s1 * s3]]

    elif axes is Axes.XZX:
        matrix = [[c2, -c3 * s2, s2 * s3],
                  [c1 * s2, c1 * c2 * c3 - s1 * s3, -c3 * s1 - c1 * c2 * s3],
                  [s1 * s2, c1 * s3 + c2 * c3 * s1, c1 * c3 - c2 * s1 * s3]]

    elif axes is Axes.YXY:
        matrix = [[c1 * c3 - c2 * s1 * s3, s1 * s2, c1 * s3 + c2 * c3 * s1],
                  [s2 * s3, c2, -c3 * s2],
                  [-c3 * s1 - c1 * c2 * s3, c1 * s2, c1 * c2 * c3 - s1 * s3]]

    elif axes is Axes.YZY:
        matrix = [[c1 * c2 * c3 - s1 * s3, -c1 * s2, c3 * s1 + c1 * c2 * s3],
                  [c3 * s2, c2, s2 * s3],
                  [-c1 * s3 - c2 * c3 * s1, s1 * s2, c1 * c3 - c2 * s1 * s3]]

    elif axes is Axes.ZXZ:
        matrix = [[c1 * c3 - c2 * s1 * s3, -c1 * s3 - c2 * c3 * s1, s1 * s2],
                  [c3 * s1 + c1 * c2 * s3, c1 * c2 * c3 - s1 * s3, -c1 * s2],
                  [s2 * s3, c3 * s2, c2]]

    elif axes is Axes.ZYZ:
        matrix = [[c1 * c2 * c3 - s1 * s3, -c3 * s1 - c1 * c2 * s3, c1 * s2],
                  [c1 * s3 + c2 * c3 * s1, c1 * c3 - c2 * s1 * s3, s1 * s2],
                  [-c3 * s2, s2 * s3, c2]]

    else:
        raise ValueError('Invalid axes {}'.format(axes))

    return RotationMatrix(matrix)


@overload
def rotmat_to_euler(matrix: RotationMatrix | ARRAY_LIKE_2D, axes: Axes | EULER_ORDERS = ...,
                    return_gimbal_lock: Literal[False] = ...) -> EulerAngles:
    ...


@overload
def rotmat_to_euler(matrix: RotationMatrix | ARRAY_LIKE_2D, axes: Axes | EULER_ORDERS = ...,
                    return_gimbal_lock: Literal[True] = ...) -> tuple[EulerAngles, bool]:
    ...


def rotmat_to_euler(matrix: RotationMatrix | ARRAY_LIKE_2D, axes: Axes | EULER_ORDERS = Axes.XYZ,
                    return_gimbal_lock: bool = False) -> EulerAngles | tuple[EulerAngles, bool]:
    r"""
    This function converts a rotation matrix into the euler angles of the requested convention.

    The middle angle :math:`\phi` comes from the arcsine (Tait-Bryan conventions) or the arccosine (proper Euler
    conventions) of a single matrix element and the outer angles from arctangents of pairs of elements.

    When that single element is exactly +/-1 the rotation is at gimbal lock: the first and last axes line up and only
    the sum (or difference) of :math:`\omega` and :math:`\kappa` is defined.  In this case Tait-Bryan conventions put
    the whole angle into :math:`\omega` and set :math:`\kappa=0`, and proper Euler conventions set :math:`\omega=0`
    and put the whole angle into :math:`\kappa`.  Converting the result back with :func:`euler_to_rotmat` still gives
    the input matrix.

    :param matrix: The rotation matrix to convert
    :param axes: The euler axis convention to extract
    :param return_gimbal_lock: Whether to also return a flag stating whether the gimbal lock branch was used
    :return: The euler angles, and optionally the gimbal lock flag
    :raises ValueError: if the axes are not one of the twelve conventions
    """

    axes = Axes(axes)
    m = _rotmat_array(matrix)

    if axes is Axes.XYZ:
        middle = np.clip(m[0, 2], -1, 1)
        phi = np.arcsin(middle)
        if abs(middle) < 1:
            omega = np.arctan2(-m[1, 2], m[2, 2])
            kappa = np.arctan2(-m[0, 1], m[0, 0])
        else:
            omega = np.arctan2(m[2, 1], m[1, 1])
            kappa = 0.0

    elif axes is Axes.YXZ:
        middle = np.clip(m[1, 2], -1, 1)
        phi = -np.arcsin(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[0, 2], m[2, 2])
            kappa = np.arctan2(m[1, 0], m[1, 1])
        else:
            omega = np.arctan2(-m[2, 0], m[0, 0])
            kappa = 0.0

    elif axes is Axes.ZXY:
        middle = np.clip(m[2, 1], -1, 1)
        phi = np.arcsin(middle)
        if abs(middle) < 1:
            omega = np.arctan2(-m[0, 1], m[1, 1])
            kappa = np.arctan2(-m[2, 0], m[2, 2])
        else:
            omega = np.arctan2(m[1, 0], m[0, 0])
            kappa = 0.0

    elif axes is Axes.ZYX:
        middle = np.clip(m[2, 0], -1, 1)
        phi = -np.arcsin(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[1, 0], m[0, 0])
            kappa = np.arctan2(m[2, 1], m[2, 2])
        else:
            omega = np.arctan2(-m[0, 1], m[1, 1])
            kappa = 0.0

    elif axes is Axes.YZX:
        middle = np.clip(m[1, 0], -1, 1)
        phi = np.arcsin(middle)
        if abs(middle) < 1:
            omega = np.arctan2(-m[2, 0], m[0, 0])
            kappa = np.arctan2(-m[1, 2], m[1, 1])
        else:
            omega = np.arctan2(m[0, 2], m[2, 2])
            kappa = 0.0

    elif axes is Axes.XZY:
        middle = np.clip(m[0, 1], -1, 1)
        phi = -np.arcsin(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[2, 1], m[1, 1])
            kappa = np.arctan2(m[0, 2], m[0, 0])
        else:
            omega = np.arctan2(-m[1, 2], m[2, 2])
            kappa = 0.0

    elif axes is Axes.XYX:
        middle = np.clip(m[0, 0], -1, 1)
        phi = np.arccos(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[1, 0], -m[2, 0])
            kappa = np.arctan2(m[0, 1], m[0, 2])
        else:
            omega = 0.0
            kappa = np.arctan2(-m[1, 2], m[1, 1])

    elif axes is Axes.XZX:
        middle = np.clip(m[0, 0], -1, 1)
        phi = np.arccos(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[2, 0], m[1, 0])
            kappa = np.arctan2(m[0, 2], -m[0, 1])
        else:
            omega = 0.0
            kappa = np.arctan2(m[2, 1], m[2, 2])

    elif axes is Axes.YXY:
        middle = np.clip(m[1, 1], -1, 1)
        phi = np.arccos(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[0, 1], m[2, 1])
            kappa = np.arctan2(m[1, 0], -m[1, 2])
        else:
            omega = 0.0
            kappa = np.arctan2(m[0, 2], m[0, 0])

    elif axes is Axes.YZY:
        middle = np.clip(m[1, 1], -1, 1)
        phi = np.arccos(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[2, 1], -m[0, 1])
            kappa = np.arctan2(m[1, 2], m[1, 0])
        else:
            omega = 0.0
            kappa = np.arctan2(-m[2, 0], m[2, 2])

    elif axes is Axes.ZXZ:
        middle = np.clip(m[2, 2], -1, 1)
        phi = np.arccos(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[0, 2], -m[1, 2])
            kappa = np.arctan2(m[2, 0], m[2, 1])
        else:
            omega = 0.0
            kappa = np.arctan2(-m[0, 1], m[0, 0])

    elif axes is Axes.ZYZ:
        middle = np.clip(m[2, 2], -1, 1)
        phi = np.arccos(middle)
        if abs(middle) < 1:
            omega = np.arctan2(m[1, 2], m[0, 2])
            kappa = np.arctan2(m[2, 1], -m[2, 0])
        else:
            omega = 0.0
            kappa = np.arctan2(m[1, 0], m[1, 1])

    else:
        raise ValueError('Invalid axes {}'.format(axes))

    euler = EulerAngles(float(omega), float(phi), float(kappa), axes)

    if return_gimbal_lock:
        return euler, bool(abs(middle) >= 1)

    return euler


def quaternion_to_euler(quaternion: Quaternion, axes: Axes | EULER_ORDERS = Axes.XYZ) -> EulerAngles:
    """
    This function converts a rotation quaternion into euler angles by way of the rotation matrix.
    """
    return rotmat_to_euler(quaternion_to_rotmat(quaternion), axes)


def euler_to_quaternion(euler: EulerAngles) -> Quaternion:
    """
    This function converts euler angles into a rotation quaternion by way of the rotation matrix.
    """
    return rotmat_to_quaternion(euler_to_rotmat(euler))


def axis_angle_to_euler(axis_angle: AxisAngle, axes: Axes | EULER_ORDERS = Axes.XYZ) -> EulerAngles:
    """
    This function converts an axis and angle into euler angles by way of the rotation matrix.
    """
    return rotmat_to_euler(axis_angle_to_rotmat(axis_angle), axes)


def euler_to_axis_angle(euler: EulerAngles) -> AxisAngle:
    """
    This function converts euler angles into an axis and angle by way of the rotation matrix.
    """
    return rotmat_to_axis_angle(euler_to_rotmat(euler))
