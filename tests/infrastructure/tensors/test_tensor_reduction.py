import unittest
from unittest import TestCase

import numpy as np

from keyonnx.domain._errors import AxisOutOfRangeError, EmptyTensorError
from keyonnx.domain.dtype._dtype import DType
from keyonnx.infrastructure.tensor import Tensor


class TestTensorReduceSum(TestCase):
    def setUp(self) -> None:
        self.x_np = np.arange(24, dtype=np.int64).reshape(2, 3, 4) - 10
        self.x = Tensor.from_numpy(self.x_np, dtype="i32")

    def test_reduce_sum_matches_numpy(self):
        for axis in (0, 1, 2, -1):
            for keepdims in (False, True):
                with self.subTest(axis=axis, keepdims=keepdims):
                    y = self.x.reduce_sum(axis=axis, keepdims=keepdims)
                    ref = self.x_np.sum(axis=axis, keepdims=keepdims)
                    self.assertEqual(y.shape, ref.shape)
                    np.testing.assert_array_equal(y.to_numpy(), ref)

    def test_default_axis_is_zero(self):
        t = Tensor.from_values((2, 3), [1, 2, 3, 4, 5, 6], "u32")
        self.assertEqual(t.reduce_sum().to_list(), [5, 7, 9])

    def test_reduce_mean(self):
        t = Tensor.from_values((2, 2), [1, 2, 3, 4], "fp16x16")
        self.assertEqual(t.reduce_mean(axis=1).to_list(), [1.5, 3.5])
        self.assertEqual(t.reduce_mean(axis=0, keepdims=True).shape, (1, 2))
        with self.assertRaises(EmptyTensorError):
            Tensor.zeros((2, 0), "fp16x16").reduce_mean(axis=1)

    def test_axis_out_of_range(self):
        with self.assertRaises(AxisOutOfRangeError):
            self.x.reduce_sum(axis=3)


class TestTensorExtremes(TestCase):
    def test_argmax_keeps_first_maximum(self):
        t = Tensor.from_values((4,), [3, 5, 5, 2], "u32")
        y = t.argmax()
        self.assertIs(y.dtype, DType.U32)
        self.assertEqual(y.item(), 1)
        self.assertEqual(t.argmax(select_last_index=True).item(), 2)
        self.assertEqual(t.argmin().item(), 3)

    def test_arg_reductions_match_numpy(self):
        x_np = np.array([[0.5, -2.0, 3.0], [1.0, 4.0, -0.25]])
        x = Tensor.from_numpy(x_np, dtype="fp32x32")
        for axis in (0, 1):
            with self.subTest(axis=axis):
                np.testing.assert_array_equal(x.argmax(axis=axis).to_numpy(), x_np.argmax(axis=axis))
                np.testing.assert_array_equal(x.argmin(axis=axis).to_numpy(), x_np.argmin(axis=axis))

    def test_global_max_and_min(self):
        t = Tensor.from_values((2, 2), [-7, 3, 9, -1], "i32")
        self.assertEqual(t.max().shape, ())
        self.assertEqual(t.max().item(), 9)
        self.assertEqual(t.min().item(), -7)
        self.assertEqual(t.min(keepdims=True).shape, (1, 1))

    def test_global_extreme_at_kind_bound(self):
        t = Tensor.from_values((2,), [-128, -128], "i8")
        self.assertEqual(t.max().item(), -128)

    def test_axis_max_and_min_match_numpy(self):
        x_np = np.array([[0.5, -2.0, 3.0], [1.0, 4.0, -0.25]])
        x = Tensor.from_numpy(x_np, dtype="fp16x16")
        np.testing.assert_array_equal(x.max(axis=0).to_numpy(), x_np.max(axis=0))
        np.testing.assert_array_equal(
            x.min(axis=1, keepdims=True).to_numpy(), x_np.min(axis=1, keepdims=True)
        )

    def test_empty_extremes(self):
        with self.assertRaises(EmptyTensorError):
            Tensor.zeros((0,), "u32").max()
        with self.assertRaises(EmptyTensorError):
            Tensor.zeros((2, 0), "u32").argmax(axis=1)


class TestTensorCumsum(TestCase):
    def test_cumsum_modes(self):
        t = Tensor.from_values((3,), [1, 2, 3], "i32")
        self.assertEqual(t.cumsum().to_list(), [1, 3, 6])
        self.assertEqual(t.cumsum(exclusive=True).to_list(), [0, 1, 3])
        self.assertEqual(t.cumsum(reverse=True).to_list(), [6, 5, 3])
        self.assertEqual(t.cumsum(exclusive=True, reverse=True).to_list(), [5, 3, 0])

    def test_cumsum_matches_numpy(self):
        x_np = np.array([[1.5, -2.0], [0.25, 4.0], [-1.0, 0.5]])
        x = Tensor.from_numpy(x_np, dtype="fp16x16")
        for axis in (0, 1):
            with self.subTest(axis=axis):
                y = x.cumsum(axis=axis)
                self.assertEqual(y.shape, x.shape)
                np.testing.assert_array_equal(y.to_numpy(), np.cumsum(x_np, axis=axis))


if __name__ == "__main__":
    unittest.main()
