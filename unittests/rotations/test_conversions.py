from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation as ScipyRotation

from photomath.algebra import Vector
from photomath.rotations import (Axes, Quaternion, AxisAngle, EulerAngles, RotationMatrix,
                                 elemental_rotation, rot_x, rot_y, rot_z)
from photomath.rotations import conversions as conv


TAIT_BRYAN = [axes for axes in Axes if axes.is_tait_bryan]

PROPER_EULER = [axes for axes in Axes if axes.is_proper_euler]


def random_angles(rng: np.random.Generator, axes: Axes) -> tuple[float, float, float]:
    """
    Angles inside the principal range of each convention
    """

    omega, kappa = rng.uniform(-np.pi + 0.1, np.pi - 0.1, size=2)

    if axes.is_tait_bryan:
        phi = rng.uniform(-np.pi / 2 + 0.1, np.pi / 2 - 0.1)
    else:
        phi = rng.uniform(0.1, np.pi - 0.1)

    return float(omega), float(phi), float(kappa)


class TestQuaternionRotmat(TestCase):

    def test_quaternion_to_rotmat(self):

        rotation = conv.quaternion_to_rotmat(Quaternion(np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2))

        self.assertIsInstance(rotation, RotationMatrix)
        np.testing.assert_array_almost_equal(rotation, [[1, 0, 0], [0, 0, -1], [0, 1, 0]])

        np.testing.assert_array_almost_equal(conv.quaternion_to_rotmat(Quaternion()), np.eye(3))

    def test_quaternion_to_rotmat_matches_scipy(self):

        rng = np.random.default_rng(11)

        for _ in range(20):
            components = rng.normal(size=4)
            components /= np.linalg.norm(components)

            rotation = conv.quaternion_to_rotmat(Quaternion.from_array(components))

            np.testing.assert_array_almost_equal(rotation, ScipyRotation.from_quat(components).as_matrix())

    def test_rotmat_to_quaternion_branches(self):

        angle = np.deg2rad(170)

        cases = [Quaternion(0.1, 0.2, 0.3, 0.9).normalize(),
                 Quaternion(np.sin(angle / 2), 0, 0, np.cos(angle / 2)),
                 Quaternion(0, np.sin(angle / 2), 0, np.cos(angle / 2)),
                 Quaternion(0, 0, np.sin(angle / 2), np.cos(angle / 2)),
                 Quaternion(0.5, -0.5, 0.5, -0.5),
                 Quaternion(0, 1, -3, 2).normalize()]

        for quaternion in cases:
            with self.subTest(quaternion=quaternion):
                res = conv.rotmat_to_quaternion(conv.quaternion_to_rotmat(quaternion))

                self.assertTrue(res.is_equivalent(quaternion))
                self.assertAlmostEqual(res.norm(), 1)

    def test_rotmat_to_quaternion_half_turns(self):

        for rotation in [np.diag([1., -1., -1.]), np.diag([-1., 1., -1.]), np.diag([-1., -1., 1.])]:
            res = conv.rotmat_to_quaternion(rotation)

            np.testing.assert_array_almost_equal(conv.quaternion_to_rotmat(res), rotation)

    def test_rotmat_to_quaternion_accepts_arrays(self):

        res = conv.rotmat_to_quaternion(rot_z(np.pi / 2))

        self.assertTrue(res.is_equivalent(Quaternion(0, 0, np.sqrt(2) / 2, np.sqrt(2) / 2)))


class TestAxisAngle(TestCase):

    def test_quaternion_to_axis_angle(self):

        axis_angle = conv.quaternion_to_axis_angle(Quaternion(0, 0, np.sin(0.35), np.cos(0.35)))

        self.assertAlmostEqual(axis_angle.angle, 0.7)
        np.testing.assert_array_almost_equal(axis_angle.axis, [0, 0, 1])

    def test_quaternion_to_axis_angle_identity(self):

        axis_angle = conv.quaternion_to_axis_angle(Quaternion())

        self.assertEqual(axis_angle.angle, 0)
        np.testing.assert_array_equal(axis_angle.axis, [1, 0, 0])

    def test_quaternion_to_axis_angle_clamps(self):

        # round off can push the scalar part slightly above 1
        axis_angle = conv.quaternion_to_axis_angle(Quaternion(1e-9, 0, 0, 1 + 1e-15))

        self.assertFalse(np.isnan(axis_angle.angle))

    def test_axis_angle_to_quaternion(self):

        quaternion = conv.axis_angle_to_quaternion(AxisAngle(np.pi / 2, [1, 0, 0]))

        np.testing.assert_array_almost_equal(quaternion.to_array(), [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

    def test_axis_angle_to_rotmat(self):

        np.testing.assert_array_almost_equal(conv.axis_angle_to_rotmat(AxisAngle(0.4, [1, 0, 0])), rot_x(0.4))
        np.testing.assert_array_almost_equal(conv.axis_angle_to_rotmat(AxisAngle(0.4, [0, 1, 0])), rot_y(0.4))
        np.testing.assert_array_almost_equal(conv.axis_angle_to_rotmat(AxisAngle(0.4, [0, 0, 1])), rot_z(0.4))

    def test_rodrigues_matches_quaternion(self):

        rng = np.random.default_rng(5)

        for _ in range(10):
            axis = Vector(rng.normal(size=3)).normalize()
            axis_angle = AxisAngle(float(rng.uniform(-np.pi, np.pi)), axis)

            vector = Vector(rng.normal(size=3))

            from_rodrigues = conv.axis_angle_to_rotmat(axis_angle) @ vector
            from_quaternion = conv.quaternion_to_rotmat(conv.axis_angle_to_quaternion(axis_angle)) @ vector

            np.testing.assert_array_almost_equal(from_rodrigues, from_quaternion)

            expected = ScipyRotation.from_rotvec(axis_angle.to_rotation_vector()).apply(np.asarray(vector))

            np.testing.assert_array_almost_equal(from_rodrigues, expected)

    def test_rotmat_to_axis_angle(self):

        axis_angle = conv.rotmat_to_axis_angle(RotationMatrix(rot_y(-1.2)))

        np.testing.assert_array_almost_equal(axis_angle.to_rotation_vector(), [0, -1.2, 0])


class TestEuler(TestCase):

    def test_euler_to_rotmat_matches_elementals(self):

        rng = np.random.default_rng(1)

        for axes in Axes:
            with self.subTest(axes=axes):
                omega, phi, kappa = rng.uniform(-np.pi, np.pi, size=3)

                expected = (elemental_rotation(axes.value[0], omega) @
                            elemental_rotation(axes.value[1], phi) @
                            elemental_rotation(axes.value[2], kappa))

                np.testing.assert_array_almost_equal(conv.euler_to_rotmat(EulerAngles(omega, phi, kappa, axes)),
                                                     expected)

    def test_euler_to_rotmat_matches_scipy(self):

        rng = np.random.default_rng(2)

        for axes in Axes:
            with self.subTest(axes=axes):
                angles = rng.uniform(-np.pi, np.pi, size=3)

                expected = ScipyRotation.from_euler(axes.value.upper(), angles).as_matrix()

                np.testing.assert_array_almost_equal(conv.euler_to_rotmat(EulerAngles(*angles, axes)), expected)

    def test_rotmat_to_euler_recovers_angles(self):

        rng = np.random.default_rng(3)

        for axes in Axes:
            for _ in range(5):
                angles = random_angles(rng, axes)

                with self.subTest(axes=axes, angles=angles):
                    rotation = conv.euler_to_rotmat(EulerAngles(*angles, axes))

                    euler, gimbal_lock = conv.rotmat_to_euler(rotation, axes, return_gimbal_lock=True)

                    self.assertFalse(gimbal_lock)
                    self.assertIs(euler.axes, axes)
                    np.testing.assert_array_almost_equal(euler.to_array(), angles)

    def test_rotmat_to_euler_matches_scipy(self):

        rng = np.random.default_rng(4)

        for axes in Axes:
            with self.subTest(axes=axes):
                angles = random_angles(rng, axes)
                rotation = ScipyRotation.from_euler(axes.value.upper(), angles)

                euler = conv.rotmat_to_euler(rotation.as_matrix(), axes)

                np.testing.assert_array_almost_equal(euler.to_array(), rotation.as_euler(axes.value.upper()))

    def test_gimbal_lock_tait_bryan(self):

        for axes in TAIT_BRYAN:
            for phi in [np.pi / 2, -np.pi / 2]:
                with self.subTest(axes=axes, phi=phi):
                    rotation = conv.euler_to_rotmat(EulerAngles(0.3, phi, 0.5, axes))

                    euler, gimbal_lock = conv.rotmat_to_euler(rotation, axes, return_gimbal_lock=True)

                    self.assertTrue(gimbal_lock)
                    self.assertEqual(euler.kappa, 0)
                    self.assertAlmostEqual(euler.phi, phi)
                    np.testing.assert_array_almost_equal(conv.euler_to_rotmat(euler), rotation)

    def test_gimbal_lock_proper_euler(self):

        for axes in PROPER_EULER:
            for phi in [0.0, np.pi]:
                with self.subTest(axes=axes, phi=phi):
                    rotation = conv.euler_to_rotmat(EulerAngles(0.3, phi, 0.5, axes))

                    euler, gimbal_lock = conv.rotmat_to_euler(rotation, axes, return_gimbal_lock=True)

                    self.assertTrue(gimbal_lock)
                    self.assertEqual(euler.omega, 0)
                    self.assertAlmostEqual(euler.phi, phi)
                    np.testing.assert_array_almost_equal(conv.euler_to_rotmat(euler), rotation)

    def test_gimbal_lock_composite_angle(self):

        euler = conv.rotmat_to_euler(conv.euler_to_rotmat(EulerAngles(0.3, np.pi / 2, 0.5, 'xyz')), 'xyz')

        self.assertAlmostEqual(euler.omega, 0.8)

        euler = conv.rotmat_to_euler(conv.euler_to_rotmat(EulerAngles(0.3, 0.0, 0.5, 'zyz')), 'zyz')

        self.assertAlmostEqual(euler.kappa, 0.8)

    def test_rotmat_to_euler_clamps(self):

        rotation = rot_y(np.pi / 2)
        rotation[0, 2] = 1 + 1e-15

        euler = conv.rotmat_to_euler(rotation, 'xyz')

        self.assertFalse(np.isnan(euler.phi))
        self.assertAlmostEqual(euler.phi, np.pi / 2)

    def test_compositions(self):

        euler = EulerAngles(0.2, -0.4, 1.1, Axes.ZYX)
        rotation = conv.euler_to_rotmat(euler)

        quaternion = conv.euler_to_quaternion(euler)

        np.testing.assert_array_almost_equal(conv.quaternion_to_rotmat(quaternion), rotation)
        np.testing.assert_array_almost_equal(conv.quaternion_to_euler(quaternion, 'zyx').to_array(), euler.to_array())

        axis_angle = conv.euler_to_axis_angle(euler)

        np.testing.assert_array_almost_equal(conv.axis_angle_to_rotmat(axis_angle), rotation)
        np.testing.assert_array_almost_equal(conv.axis_angle_to_euler(axis_angle, Axes.ZYX).to_array(),
                                             euler.to_array())

    def test_invalid_axes(self):

        with self.assertRaises(ValueError):
            conv.rotmat_to_euler(np.eye(3), 'xyy')
