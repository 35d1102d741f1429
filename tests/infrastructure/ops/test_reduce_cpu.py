import unittest
from unittest import TestCase

import numpy as np

from keyonnx.domain._errors import AxisOutOfRangeError, EmptyTensorError
from keyonnx.domain.dtype._dtype import DType
from keyonnx.infrastructure.numeric import kind_for
from keyonnx.infrastructure.ops.reduce_cpu import (
    arg_reduce_cpu,
    cumsum_cpu,
    global_extreme_cpu,
    reduce_extreme_cpu,
    reduce_mean_cpu,
    reduce_sum_cpu,
)


def _flat(arr):
    return tuple(int(v) for v in np.asarray(arr).reshape(-1))


class TestReduceSumCpu(TestCase):
    def setUp(self) -> None:
        self.kind = kind_for(DType.U32)
        self.x = np.arange(24).reshape(2, 3, 4)

    def test_every_axis_matches_numpy(self):
        for axis in range(3):
            for keepdims in (False, True):
                with self.subTest(axis=axis, keepdims=keepdims):
                    shape, data = reduce_sum_cpu(
                        self.x.shape, _flat(self.x), self.kind, axis, keepdims
                    )
                    ref = self.x.sum(axis=axis, keepdims=keepdims)
                    self.assertEqual(shape, ref.shape)
                    self.assertEqual(data, _flat(ref))

    def test_negative_axis(self):
        shape, data = reduce_sum_cpu((2, 3), (1, 2, 3, 4, 5, 6), self.kind, -1)
        self.assertEqual((shape, data), ((2,), (6, 15)))

    def test_rank_one_reduces_to_scalar(self):
        shape, data = reduce_sum_cpu((4,), (1, 2, 3, 4), self.kind, 0)
        self.assertEqual((shape, data), ((), (10,)))

    def test_zero_length_axis_sums_to_zero(self):
        shape, data = reduce_sum_cpu((2, 0), (), self.kind, 1)
        self.assertEqual((shape, data), ((2,), (0, 0)))

    def test_axis_out_of_range(self):
        with self.assertRaises(AxisOutOfRangeError):
            reduce_sum_cpu((2, 3), (0,) * 6, self.kind, 2)


class TestReduceMeanCpu(TestCase):
    def test_integer_mean_truncates(self):
        kind = kind_for(DType.U32)
        shape, data = reduce_mean_cpu((2, 2), (1, 2, 3, 5), kind, 1)
        self.assertEqual((shape, data), ((2,), (1, 4)))

    def test_fixed_mean(self):
        kind = kind_for(DType.FP16X16)
        data = tuple(kind.encode(v) for v in (1, 2, 3, 4))
        shape, out = reduce_mean_cpu((2, 2), data, kind, 1)
        self.assertEqual([kind.decode(v) for v in out], [1.5, 3.5])

    def test_empty_axis(self):
        with self.assertRaises(EmptyTensorError):
            reduce_mean_cpu((2, 0), (), kind_for(DType.U32), 1)


class TestExtremesCpu(TestCase):
    def test_reduce_extreme_matches_numpy(self):
        kind = kind_for(DType.I32)
        x = np.array([[3, -1, 7], [-5, 2, 2]])
        data = tuple(kind.encode(int(v)) for v in x.reshape(-1))
        for axis in (0, 1):
            for largest, ref in ((True, x.max(axis=axis)), (False, x.min(axis=axis))):
                with self.subTest(axis=axis, largest=largest):
                    shape, out = reduce_extreme_cpu(
                        x.shape, data, kind, axis, largest=largest
                    )
                    self.assertEqual(shape, ref.shape)
                    self.assertEqual([kind.decode(v) for v in out], ref.tolist())

    def test_reduce_extreme_of_empty_lane(self):
        with self.assertRaises(EmptyTensorError):
            reduce_extreme_cpu((2, 0), (), kind_for(DType.U32), 1)

    def test_global_extreme(self):
        kind = kind_for(DType.I8)
        data = tuple(kind.encode(v) for v in (-128, 5, 127, -3))
        self.assertEqual(kind.decode(global_extreme_cpu(data, kind, largest=True)), 127)
        self.assertEqual(kind.decode(global_extreme_cpu(data, kind, largest=False)), -128)
        with self.assertRaises(EmptyTensorError):
            global_extreme_cpu((), kind)

    def test_argmax_keeps_first_occurrence(self):
        kind = kind_for(DType.U32)
        self.assertEqual(arg_reduce_cpu((4,), (3, 5, 5, 2), kind, 0), ((), (1,)))
        self.assertEqual(
            arg_reduce_cpu((4,), (3, 5, 5, 2), kind, 0, select_last_index=True),
            ((), (2,)),
        )
        self.assertEqual(
            arg_reduce_cpu((4,), (3, 5, 5, 2), kind, 0, largest=False), ((), (3,))
        )

    def test_arg_reduce_matches_numpy(self):
        kind = kind_for(DType.U32)
        x = np.array([[4, 9, 1], [8, 0, 6]])
        for axis in (0, 1):
            with self.subTest(axis=axis):
                shape, out = arg_reduce_cpu(x.shape, _flat(x), kind, axis, keepdims=True)
                ref = np.argmax(x, axis=axis, keepdims=True)
                self.assertEqual(shape, ref.shape)
                self.assertEqual(out, _flat(ref))


class TestCumsumCpu(TestCase):
    def setUp(self) -> None:
        self.kind = kind_for(DType.U32)

    def test_modes(self):
        data = (1, 2, 3)
        self.assertEqual(cumsum_cpu((3,), data, self.kind, 0), (1, 3, 6))
        self.assertEqual(cumsum_cpu((3,), data, self.kind, 0, exclusive=True), (0, 1, 3))
        self.assertEqual(cumsum_cpu((3,), data, self.kind, 0, reverse=True), (6, 5, 3))
        self.assertEqual(
            cumsum_cpu((3,), data, self.kind, 0, exclusive=True, reverse=True), (5, 3, 0)
        )

    def test_matches_numpy_along_each_axis(self):
        x = np.arange(12).reshape(3, 4)
        for axis in (0, 1, -1):
            with self.subTest(axis=axis):
                out = cumsum_cpu(x.shape, _flat(x), self.kind, axis)
                self.assertEqual(out, _flat(np.cumsum(x, axis=axis)))


if __name__ == "__main__":
    unittest.main()
