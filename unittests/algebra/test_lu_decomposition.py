from unittest import TestCase

import warnings

import numpy as np

from photomath.algebra import (LuDecomposition, LuDecompositionOptions, Matrix, Vector,
                               ShapeMismatchError, SingularMatrixError, NumericalFallbackWarning)


MATRIX_4X4 = [[4.5, 2.7, 5.5, 4.98],
              [1.36, 7.62, 78.3, 45.5],
              [14.3, 45.3, 5, 45],
              [12.374, 41.6, 1.3, 12.7]]

MATRIX_5X5 = [[6, 8, 6, 7, 3],
              [9, 6, 2, 3, 3],
              [8, 3, 2, 3, 3],
              [5, 3, 3, 7, 6],
              [5, 5, 7, 4, 7]]


class TestLuDecomposition(TestCase):

    def test_init(self):

        lu = LuDecomposition(Matrix(MATRIX_4X4))

        self.assertEqual(lu.size, 4)
        self.assertEqual(lu.zero_pivot_policy, 'substitute')
        self.assertTrue(lu.warn_on_substitution)
        self.assertFalse(lu.is_singular)
        self.assertEqual(lu.zero_pivots, ())
        self.assertEqual(len(lu.permutation), 4)
        self.assertIn(lu.parity, (1.0, -1.0))

        # plain arrays are accepted too
        lu = LuDecomposition(MATRIX_5X5)

        self.assertEqual(lu.size, 5)

        with self.assertRaises(ShapeMismatchError):
            LuDecomposition(Matrix([[1, 2, 3], [4, 5, 6]]))

    def test_find_max_elements_by_rows(self):

        lu = LuDecomposition(Matrix([[1, -7, 2], [3, 0, -4], [0.5, 0.25, 0]]))

        np.testing.assert_array_almost_equal(lu.find_max_elements_by_rows(), [7, 4, 0.5])

    def test_zero_row(self):

        with self.assertRaises(SingularMatrixError):
            LuDecomposition(Matrix([[1, 2, 3], [0, 0, 0], [4, 5, 6]]))

    def test_factors(self):

        mat = Matrix(MATRIX_4X4)
        lu = LuDecomposition(mat)

        lower = lu.lower().to_array()
        upper = lu.upper().to_array()

        np.testing.assert_array_almost_equal(np.diag(lower), np.ones(4))
        np.testing.assert_array_equal(np.triu(lower, 1), np.zeros((4, 4)))
        np.testing.assert_array_equal(np.tril(upper, -1), np.zeros((4, 4)))

        np.testing.assert_array_almost_equal(lower @ upper, lu.permutation_matrix().to_array() @ mat.to_array())

        packed = lu.lu().to_array()

        np.testing.assert_array_almost_equal(np.tril(packed, -1), np.tril(lower, -1))
        np.testing.assert_array_almost_equal(np.triu(packed), upper)

    def test_pivoting(self):

        # the second row has the largest scaled magnitude in the first column
        lu = LuDecomposition(Matrix([[1., 100.], [2., 1.]]))

        self.assertEqual(lu.permutation[0], 1)
        self.assertEqual(lu.parity, -1.0)

    def test_solve_vector(self):

        mat = Matrix(MATRIX_4X4)
        lu = LuDecomposition(mat)

        b = Vector([1., -2., 3.5, 0.])

        x = lu.solve(b)

        self.assertIsInstance(x, Vector)
        np.testing.assert_array_almost_equal(mat @ x, b)

        # the right hand side is not modified
        np.testing.assert_array_equal(b, [1., -2., 3.5, 0.])

        x = lu.solve([1., -2., 3.5, 0.])

        self.assertIsInstance(x, np.ndarray)
        np.testing.assert_array_almost_equal(np.asarray(mat) @ x, [1., -2., 3.5, 0.])

        with self.assertRaises(ShapeMismatchError):
            lu.solve(Vector([1., 2.]))

    def test_solve_leading_zeros(self):

        mat = Matrix(MATRIX_5X5)
        lu = LuDecomposition(mat)

        b = Vector([0., 0., 0., 1., 0.])

        np.testing.assert_array_almost_equal(mat @ lu.solve(b), b)

    def test_solve_random(self):

        rng = np.random.default_rng(3)

        for size in [1, 2, 3, 5, 8]:
            mat = Matrix(rng.normal(size=(size, size)))
            b = Vector(rng.normal(size=size))

            np.testing.assert_array_almost_equal(mat @ LuDecomposition(mat).solve(b), b)

    def test_solve_matrix(self):

        mat = Matrix(MATRIX_5X5)
        lu = LuDecomposition(mat)

        rhs = Matrix(np.arange(10.).reshape(5, 2))

        x = lu.solve(rhs)

        self.assertIsInstance(x, Matrix)
        np.testing.assert_array_almost_equal(mat @ x, rhs)

        x = lu.solve(np.arange(10.).reshape(5, 2))

        self.assertIsInstance(x, np.ndarray)
        np.testing.assert_array_almost_equal(np.asarray(mat) @ x, np.arange(10.).reshape(5, 2))

        with self.assertRaises(ShapeMismatchError):
            lu.solve(Matrix.ones(3, 2))

    def test_determinant(self):

        self.assertAlmostEqual(LuDecomposition(MATRIX_5X5).determinant(), -2878)
        np.testing.assert_allclose(LuDecomposition(MATRIX_4X4).determinant(), Matrix(MATRIX_4X4).determinant())
        self.assertAlmostEqual(LuDecomposition([[2, 3], [1, 4]]).determinant(), 5)

    def test_inverse(self):

        mat = Matrix(MATRIX_5X5)
        inverse = LuDecomposition(mat).inverse()

        self.assertIsInstance(inverse, Matrix)
        np.testing.assert_array_almost_equal(mat @ inverse, np.eye(5))
        np.testing.assert_array_almost_equal(inverse, mat.inverse())

    def test_zero_pivot_substitution(self):

        mat = Matrix([[1., 2.], [2., 4.]])

        with self.assertWarns(NumericalFallbackWarning):
            lu = LuDecomposition(mat)

        self.assertTrue(lu.is_singular)
        self.assertEqual(lu.zero_pivots, (1,))
        self.assertEqual(lu.upper()[1, 1], np.finfo(np.float64).tiny)

    def test_zero_pivot_no_warning(self):

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            lu = LuDecomposition(Matrix([[1., 2.], [2., 4.]]),
                                 options=LuDecompositionOptions(warn_on_substitution=False))

        self.assertTrue(lu.is_singular)

    def test_zero_pivot_raise(self):

        with self.assertRaises(SingularMatrixError):
            LuDecomposition(Matrix([[1., 2.], [2., 4.]]), options=LuDecompositionOptions(zero_pivot_policy='raise'))
