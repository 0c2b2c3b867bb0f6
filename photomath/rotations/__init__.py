r"""
This package defines the four rotation representations used throughout photomath (:class:`.Quaternion`,
:class:`.RotationMatrix`, :class:`.EulerAngles` and :class:`.AxisAngle`) and the routines for converting between them.

All rotations are active and right handed (:math:`\mathbf{v}'=\mathbf{R}\mathbf{v}`).  Quaternions are stored scalar
last and use the Hamilton convention.  Euler angles carry their axis convention (an :class:`.Axes` member) so that a
value always knows how to turn itself back into a matrix.

The :class:`.RotationConverter` is the primary tool for converting between representations.  The functions in
:mod:`.conversions` perform the individual conversions, and :mod:`.elementals` provides the single axis rotation
matrices and the skew symmetric cross product matrix.
"""

from photomath.rotations.representations import Axes, Quaternion, AxisAngle, EulerAngles, RotationMatrix
from photomath.rotations.elementals import rot_x, rot_y, rot_z, elemental_rotation, skew
from photomath.rotations.conversions import *
from photomath.rotations.converter import RotationConverter

__all__ = ['Axes', 'Quaternion', 'AxisAngle', 'EulerAngles', 'RotationMatrix',
           'rot_x', 'rot_y', 'rot_z', 'elemental_rotation', 'skew',
           'quaternion_to_rotmat', 'quaternion_to_axis_angle', 'quaternion_to_euler',
           'axis_angle_to_rotmat', 'axis_angle_to_quaternion', 'axis_angle_to_euler',
           'rotmat_to_quaternion', 'rotmat_to_axis_angle', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion', 'euler_to_axis_angle',
           'RotationConverter']
