import unittest
from unittest import TestCase

import numpy as np

from keyonnx.domain._errors import (
    AxisOutOfRangeError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from keyonnx.infrastructure.ops.concat_cpu import concat_cpu


def _part(arr):
    return arr.shape, tuple(int(v) for v in arr.reshape(-1))


class TestConcatCpu(TestCase):
    def test_matches_numpy_on_each_axis(self):
        a = np.arange(12).reshape(2, 3, 2)
        for axis in (0, 1, 2, -1):
            b_shape = list(a.shape)
            b_shape[axis] = 4
            b = np.arange(100, 100 + int(np.prod(b_shape))).reshape(b_shape)
            with self.subTest(axis=axis):
                shape, data = concat_cpu([_part(a), _part(b)], axis)
                ref = np.concatenate([a, b], axis=axis)
                self.assertEqual(shape, ref.shape)
                self.assertEqual(data, tuple(int(v) for v in ref.reshape(-1)))

    def test_three_parts(self):
        parts = [_part(np.array([[1, 2]])), _part(np.array([[3, 4]])), _part(np.array([[5, 6]]))]
        self.assertEqual(concat_cpu(parts, 0), ((3, 2), (1, 2, 3, 4, 5, 6)))

    def test_errors(self):
        with self.assertRaises(InvalidArgumentError):
            concat_cpu([], 0)
        with self.assertRaises(InvalidArgumentError):
            concat_cpu([((), (1,)), ((), (2,))], 0)
        with self.assertRaises(AxisOutOfRangeError):
            concat_cpu([((2,), (1, 2))], 1)
        with self.assertRaises(ShapeMismatchError):
            concat_cpu([((2, 2), (0,) * 4), ((3, 3), (0,) * 9)], 0)
        with self.assertRaises(ShapeMismatchError):
            concat_cpu([((2, 2), (0,) * 4), ((4,), (0,) * 4)], 0)


if __name__ == "__main__":
    unittest.main()
