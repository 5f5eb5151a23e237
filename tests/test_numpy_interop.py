import math
import unittest

import numpy as np

from ratio import ContractViolationError, Ratio, as_ratio_array, zeros, zeros_like


class NumpyInteropTests(unittest.TestCase):
    def test_list_broadcasting(self):
        vector = [Ratio(1, 2), Ratio(2, 3)]
        shifted = Ratio(1, 6) + vector
        self.assertTrue(all(isinstance(item, Ratio) for item in shifted))
        np.testing.assert_allclose([float(item) for item in shifted], [2 / 3, 5 / 6])

        diff = vector - Ratio(1, 3)
        self.assertTrue(all(isinstance(item, Ratio) for item in diff))
        np.testing.assert_allclose([float(item) for item in diff], [1 / 6, 1 / 3])

    def test_expression_with_exp(self):
        vector = [Ratio(1, 2), Ratio(2, 3)]
        omega = Ratio(3, 2)
        x0 = Ratio(1, 5)
        profile = np.exp(-omega * (vector - x0) ** 2)
        self.assertIsInstance(profile, np.ndarray)
        self.assertTrue(all(isinstance(item, Ratio) for item in profile))
        # exp round-trips through a bounded approximation.
        np.testing.assert_allclose(
            [float(item) for item in profile],
            np.exp(-1.5 * (np.array([0.5, 2 / 3]) - 0.2) ** 2),
            atol=0.05,
        )

    def test_array_operations_with_scalar(self):
        vector = np.array([0.25, 0.5, 0.125])
        result = Ratio(1, 4) + vector
        self.assertEqual(result.dtype, object)
        self.assertTrue(all(isinstance(item, Ratio) for item in result))
        self.assertEqual(list(result), [Ratio(1, 2), Ratio(3, 4), Ratio(3, 8)])

        reflected = 1 - np.array([Ratio(1, 4)], dtype=object)
        self.assertEqual(reflected[0], Ratio(3, 4))

    def test_ufunc_support(self):
        vector = np.array([Ratio(1, 2), Ratio(3, 4)], dtype=object)
        result = np.add(vector, Ratio(1, 4))
        self.assertEqual(list(result), [Ratio(3, 4), Ratio(1)])

        self.assertEqual(np.negative(Ratio(1, 2)), Ratio(-1, 2))
        self.assertEqual(np.sin(Ratio(0)), Ratio(0))
        self.assertEqual(np.sqrt(Ratio(9, 4)), Ratio(3, 2))
        self.assertEqual(np.log10(Ratio(1000)), Ratio(3))

    def test_object_array_methods(self):
        vector = np.array([Ratio(4, 9), Ratio(1, 4)], dtype=object)
        self.assertEqual(list(np.sqrt(vector)), [Ratio(2, 3), Ratio(1, 2)])
        self.assertEqual(list(np.power(vector, 2)), [Ratio(16, 81), Ratio(1, 16)])

    def test_numpy_scalars(self):
        self.assertEqual(Ratio(1, 2) + np.int64(1), Ratio(3, 2))
        self.assertEqual(Ratio(1, 2) * np.float64(0.5), Ratio(1, 4))
        self.assertEqual(Ratio.from_float(np.float32(0.5)), Ratio(1, 2))


class RatioArrayTests(unittest.TestCase):
    def test_zeros(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(item == Ratio(0) for item in arr))
        with self.assertRaises(ValueError):
            zeros(-1)

    def test_as_ratio_array(self):
        arr = as_ratio_array([Ratio(1, 2), 0.25, 3])
        self.assertEqual(arr.shape, (3,))
        self.assertEqual(list(arr), [Ratio(1, 2), Ratio(1, 4), Ratio(3)])

        from_numpy = as_ratio_array(np.array([[0.5, 2.0], [0.125, 1.0]]))
        self.assertEqual(from_numpy.shape, (2, 2))
        self.assertEqual(from_numpy[1, 0], Ratio(1, 8))

        from_generator = as_ratio_array(x for x in (1, 2))
        self.assertEqual(list(from_generator), [Ratio(1), Ratio(2)])

    def test_as_ratio_array_without_copy(self):
        original = np.array([Ratio(1, 2), Ratio(1, 3)], dtype=object)
        self.assertIs(as_ratio_array(original, copy=False), original)
        self.assertIsNot(as_ratio_array(original), original)

    def test_without_copy_converts_in_place(self):
        original = np.array([0.5, 2, Ratio(1, 3)], dtype=object)
        converted = as_ratio_array(original, copy=False)
        self.assertIs(converted, original)
        self.assertTrue(all(isinstance(item, Ratio) for item in original))
        self.assertEqual(list(original), [Ratio(1, 2), Ratio(2), Ratio(1, 3)])

    def test_iteration_budget(self):
        arr = as_ratio_array([3.7], max_iterations=0)
        self.assertEqual(arr[0], Ratio(0))
        self.assertEqual(as_ratio_array([math.pi], max_iterations=1)[0], Ratio(3))
        self.assertEqual(as_ratio_array(np.array([math.pi]))[0], Ratio(355, 113))

    def test_broken_ratios_are_rejected(self):
        broken = Ratio(1, 2)
        broken.set_denominator(0, normalize=False)
        with self.assertRaises(ContractViolationError):
            as_ratio_array([Ratio(1, 3), broken])
        with self.assertRaises(ContractViolationError):
            as_ratio_array(np.array([broken], dtype=object), copy=False)
        with self.assertRaises(ContractViolationError):
            np.add(np.array([broken], dtype=object), Ratio(1, 2))

    def test_zeros_are_distinct(self):
        arr = zeros((2, 2))
        arr[0, 0].set_numerator(5)
        self.assertEqual(arr[0, 0], Ratio(5))
        self.assertEqual(arr[1, 1], Ratio(0))

    def test_zeros_like(self):
        base = as_ratio_array([Ratio(1, 2), 0.25, 0.5])
        arr_like = zeros_like(base)
        self.assertEqual(arr_like.shape, base.shape)
        self.assertTrue(all(float(item) == 0.0 for item in arr_like))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
