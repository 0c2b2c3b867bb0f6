import numpy as np

from photomath._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ["rot_x", "rot_y", "rot_z", "elemental_rotation", "skew"]


def elemental_rotation(axis: str, theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function forms the right handed rotation matrix(ces) about one of the coordinate axes.

    The rotations are active, so for instance

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    Theta should be in units of radians and can be a scalar or a sequence.  For a sequence of n angles the result is
    an nx3x3 array with one matrix per angle down the first axis.

    :param axis: The axis to rotate about ('x', 'y' or 'z', in either case)
    :param theta: The angle(s) to rotate by in radians
    :return: The rotation matrix(ces)
    :raises ValueError: if the axis is not one of x, y or z
    """

    index = 'xyz'.find(str(axis).lower())
    if len(str(axis)) != 1 or index < 0:
        raise ValueError('The axis must be one of x, y, or z.  You entered {}'.format(axis))

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    matrices = np.zeros((theta.size, 3, 3))
    matrices[:, index, index] = 1.0

    # the two axes spanning the plane of the rotation, in right handed order
    first, second = (index + 1) % 3, (index + 2) % 3

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    matrices[:, first, first] = ctheta
    matrices[:, first, second] = -stheta
    matrices[:, second, first] = stheta
    matrices[:, second, second] = ctheta

    return matrices.squeeze(axis=0) if theta.size == 1 else matrices


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    This function returns the right handed rotation matrix(ces) about the x axis.  See :func:`elemental_rotation`.

        >>> from photomath.rotations import rot_x
        >>> rot_x(np.pi / 2).round(12)
        array([[ 1.,  0.,  0.],
               [ 0.,  0., -1.],
               [ 0.,  1.,  0.]])
    """
    return elemental_rotation('x', theta)


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    This function returns the right handed rotation matrix(ces) about the y axis.  See :func:`elemental_rotation`.
    """
    return elemental_rotation('y', theta)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    This function returns the right handed rotation matrix(ces) about the z axis.  See :func:`elemental_rotation`.
    """
    return elemental_rotation('z', theta)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the skew symmetric cross product matrix for a 3 element vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    :param vector: The 3 element vector (any sequence, including a :class:`.Vector`)
    :return: The 3x3 skew symmetric matrix
    :raises ValueError: if the vector does not have 3 elements
    """

    vector = np.asarray(vector, dtype=np.float64).ravel()

    if vector.size != 3:
        raise ValueError('The vector must have 3 elements')

    return np.array([[0.0, -vector[2], vector[1]],
                     [vector[2], 0.0, -vector[0]],
                     [-vector[1], vector[0], 0.0]])
