from unittest import TestCase

from photomath.algebra import Result, Status, ShapeMismatchError, SingularMatrixError, GimbalLockError


class TestResult(TestCase):

    def test_ok(self):

        res = Result(3.5)

        self.assertTrue(res.ok)
        self.assertIs(res.status, Status.OK)
        self.assertEqual(res.unwrap(), 3.5)
        self.assertEqual(res.best_effort(), 3.5)

    def test_singular(self):

        res = Result('fallback', Status.SINGULAR, 'singular matrix')

        self.assertFalse(res.ok)
        self.assertEqual(res.best_effort(), 'fallback')

        with self.assertRaisesRegex(SingularMatrixError, 'singular matrix'):
            res.unwrap()

    def test_gimbal_lock(self):

        res = Result('angles', Status.GIMBAL_LOCK)

        self.assertEqual(res.best_effort(), 'angles')

        with self.assertRaises(GimbalLockError):
            res.unwrap()

    def test_shape_mismatch(self):

        res = Result(None, Status.SHAPE_MISMATCH, 'bad shape')

        with self.assertRaises(ShapeMismatchError):
            res.unwrap()

        with self.assertRaises(ShapeMismatchError):
            res.best_effort()

    def test_errors_are_value_errors(self):

        for error in [ShapeMismatchError, SingularMatrixError, GimbalLockError]:
            self.assertTrue(issubclass(error, ValueError))
