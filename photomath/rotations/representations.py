# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module defines the value types for the four rotation representations handled by :mod:`photomath.rotations`.

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A rotation quaternion stored scalar last,
                   :math:`\mathbf{q}=\left[\begin{array}{cccc} x & y & z & w\end{array}\right]=
                   \left[\begin{array}{cc}\text{sin}(\frac{\theta}{2})\hat{\mathbf{e}} &
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`.  :math:`\mathbf{q}` and :math:`-\mathbf{q}` are the
                   same rotation.
axis angle         A rotation angle :math:`\theta` in radians about a 3 element axis :math:`\hat{\mathbf{e}}`.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{R}` that rotates vectors,
                   :math:`\mathbf{v}'=\mathbf{R}\mathbf{v}`.
euler angles       Three angles :math:`\omega, \phi, \kappa` about the axes of one of twelve conventions :math:`abc`
                   such that :math:`\mathbf{R}=\mathbf{R}_a(\omega)\mathbf{R}_b(\phi)\mathbf{R}_c(\kappa)`.
=================  =====================================================================================================

All of the representations are active and right handed.  None of them is normalized or checked for orthonormality on
construction.
"""

from dataclasses import dataclass, field

from enum import Enum

from typing import Self

import numpy as np

from photomath._typing import ARRAY_LIKE_2D, DOUBLE_ARRAY
from photomath.algebra.errors import ShapeMismatchError
from photomath.algebra.matrix import Matrix, MatrixOptions
from photomath.algebra.vector import Vector


__all__ = ["Axes", "Quaternion", "AxisAngle", "EulerAngles", "RotationMatrix"]


class Axes(Enum):
    """
    The twelve euler angle axis conventions.

    The value of each member is the sequence of axes the angles (omega, phi, kappa) are applied about, so that
    ``Axes.XYZ`` means :math:`\\mathbf{R}=\\mathbf{R}_x(\\omega)\\mathbf{R}_y(\\phi)\\mathbf{R}_z(\\kappa)`.

    Members can be looked up from their value in either case (``Axes('zyz')`` or ``Axes('ZYZ')``).
    """

    XYZ = 'xyz'
    """
    Tait-Bryan x, y, z
    """

    YXZ = 'yxz'
    """
    Tait-Bryan y, x, z
    """

    ZXY = 'zxy'
    """
    Tait-Bryan z, x, y
    """

    ZYX = 'zyx'
    """
    Tait-Bryan z, y, x
    """

    YZX = 'yzx'
    """
    Tait-Bryan y, z, x
    """

    XZY = 'xzy'
    """
    Tait-Bryan x, z, y
    """

    XYX = 'xyx'
    """
    Proper Euler x, y, x
    """

    XZX = 'xzx'
    """
    Proper Euler x, z, x
    """

    YXY = 'yxy'
    """
    Proper Euler y, x, y
    """

    YZY = 'yzy'
    """
    Proper Euler y, z, y
    """

    ZXZ = 'zxz'
    """
    Proper Euler z, x, z
    """

    ZYZ = 'zyz'
    """
    Proper Euler z, y, z
    """

    @classmethod
    def _missing_(cls, value: object) -> 'Axes | None':
        if isinstance(value, str) and value.lower() != value:
            return cls(value.lower())
        return None

    @property
    def is_tait_bryan(self) -> bool:
        """
        ``True`` if the three axes are all different
        """
        return self.value[0] != self.value[2]

    @property
    def is_proper_euler(self) -> bool:
        """
        ``True`` if the first and last axes are the same
        """
        return self.value[0] == self.value[2]


@dataclass
class Quaternion:
    """
    A rotation quaternion with the scalar part last.

    The quaternion is not normalized automatically.  Use :meth:`normalize` if the components may not describe a unit
    quaternion.
    """

    x: float = 0.0
    """
    The first component of the vector part
    """

    y: float = 0.0
    """
    The second component of the vector part
    """

    z: float = 0.0
    """
    The third component of the vector part
    """

    w: float = 1.0
    """
    The scalar part
    """

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the quaternion of the zero rotation
        """
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, components) -> Self:
        """
        Builds a quaternion from a length 4 sequence ordered x, y, z, w.
        """

        array = np.asarray(components, dtype=np.float64).ravel()
        if array.size != 4:
            raise ShapeMismatchError(f'A quaternion has 4 components but {array.size} were given')

        return cls(*array.tolist())

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a numpy array ordered x, y, z, w
        """
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def norm(self) -> float:
        """
        Returns the euclidean norm of the four components
        """
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2))

    def normalize(self) -> Self:
        """
        Scales the quaternion (in place) to unit norm.  A zero quaternion is left unchanged.

        :return: self, to allow chaining
        """

        norm = self.norm()
        if norm > 0:
            self.x /= norm
            self.y /= norm
            self.z /= norm
            self.w /= norm

        return self

    def conjugate(self) -> Self:
        """
        Returns the conjugate (the inverse rotation for a unit quaternion)
        """
        return type(self)(-self.x, -self.y, -self.z, self.w)

    def is_equivalent(self, other: 'Quaternion', atol: float = 1e-9) -> bool:
        """
        Returns ``True`` if other represents the same rotation, that is if it is equal to self or to -self within
        ``atol``.
        """

        mine = self.to_array()
        theirs = other.to_array()

        return bool(np.allclose(mine, theirs, rtol=0, atol=atol) or np.allclose(mine, -theirs, rtol=0, atol=atol))

    def __neg__(self) -> Self:
        return type(self)(-self.x, -self.y, -self.z, -self.w)


def _default_axis() -> Vector:
    return Vector([1.0, 0.0, 0.0])


@dataclass
class AxisAngle:
    """
    A rotation of :attr:`angle` radians about :attr:`axis`.

    The axis is stored as a 3 element :class:`.Vector`.  Any 3 element sequence given on construction is converted.
    """

    angle: float = 0.0
    """
    The rotation angle in radians
    """

    axis: Vector = field(default_factory=_default_axis)
    """
    The axis of rotation
    """

    def __post_init__(self):
        if not isinstance(self.axis, Vector):
            self.axis = Vector(self.axis, dtype=np.float64)

        if self.axis.size != 3:
            raise ShapeMismatchError(f'The rotation axis must have 3 elements but has {self.axis.size}')

    def copy(self) -> Self:
        """
        Returns a deep copy of self
        """
        return type(self)(self.angle, self.axis.copy())

    def to_rotation_vector(self) -> DOUBLE_ARRAY:
        """
        Returns the rotation vector (the axis scaled by the angle) as a numpy array
        """
        return self.angle * self.axis.to_array()


@dataclass
class EulerAngles:
    """
    Three rotation angles in radians together with the axis convention they apply to.

    The rotation is :math:`\\mathbf{R}_a(\\omega)\\mathbf{R}_b(\\phi)\\mathbf{R}_c(\\kappa)` where :math:`abc` is
    :attr:`axes`.
    """

    omega: float = 0.0
    """
    The angle about the first axis
    """

    phi: float = 0.0
    """
    The angle about the second axis
    """

    kappa: float = 0.0
    """
    The angle about the third axis
    """

    axes: Axes = Axes.XYZ
    """
    The axis convention.  A string such as ``'zyx'`` is converted on construction.
    """

    def __post_init__(self):
        self.axes = Axes(self.axes)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the angles as a numpy array ordered omega, phi, kappa
        """
        return np.array([self.omega, self.phi, self.kappa], dtype=np.float64)


class RotationMatrix(Matrix):
    """
    A 3x3 :class:`.Matrix` representing a rotation.

    With no data the identity rotation is created.  The matrix is stored in double precision.  Products and other
    operations on rotation matrices return plain :class:`.Matrix` instances.
    """

    def __init__(self, data: ARRAY_LIKE_2D | None = None, options: MatrixOptions | None = None):
        """
        :param data: The 3x3 elements of the rotation matrix.  If ``None`` the identity is used.
        :param options: The options to configure the matrix with
        :raises ShapeMismatchError: if the data is not 3x3
        """

        if data is None:
            data = np.eye(3)

        super().__init__(data, rows=3, cols=3, dtype=np.float64, options=options)

    @classmethod
    def identity(cls, *args, **kwargs) -> Self:
        """
        Returns the identity rotation
        """
        return cls(options=kwargs.get('options'))

    def is_orthonormal(self, atol: float = 1e-9) -> bool:
        """
        Returns ``True`` if ``R @ R.T`` is the identity and the determinant is +1 within ``atol``.
        """

        array = self.to_array()
        return bool(np.allclose(array @ array.T, np.eye(3), rtol=0, atol=atol) and
                    abs(self.determinant() - 1.0) <= atol)
